"""Core building blocks shared by the REST layer and the managers."""
