"""Tests for endpoint template resolution."""

import pytest

from neo_management.core.exceptions import ArgumentError
from neo_management.rest.endpoint_template import EndpointTemplate


class TestEndpointTemplate:
    """Placeholder parsing and path resolution."""

    @pytest.fixture
    def organizations(self):
        return EndpointTemplate("/organizations/:id")

    @pytest.fixture
    def connections(self):
        return EndpointTemplate("/organizations/:id/enabled_connections/:connection_id")

    def test_placeholders_are_listed_in_order(self, connections):
        assert connections.placeholders == ("id", "connection_id")

    def test_duplicate_placeholder_rejected(self):
        with pytest.raises(ArgumentError):
            EndpointTemplate("/organizations/:id/children/:id")

    def test_relative_pattern_rejected(self):
        with pytest.raises(ArgumentError):
            EndpointTemplate("organizations/:id")

    def test_collection_and_item_forms(self, organizations):
        assert organizations.resolve({}) == ("/organizations", {})
        assert organizations.resolve({"id": "org_1"}) == ("/organizations/org_1", {})

    def test_empty_identifier_counts_as_missing(self, organizations):
        path, _ = organizations.resolve({"id": ""})
        assert path == "/organizations"

    def test_none_params(self, organizations):
        path, remaining = organizations.resolve(None)
        assert path == "/organizations"
        assert remaining == {}

    def test_nested_template(self, connections):
        path, _ = connections.resolve({"id": "org_1"})
        assert path == "/organizations/org_1/enabled_connections"

        path, _ = connections.resolve({"id": "org_1", "connection_id": "con_1"})
        assert path == "/organizations/org_1/enabled_connections/con_1"

    def test_missing_non_trailing_placeholder_raises(self, connections):
        with pytest.raises(ArgumentError, match="non-trailing 'id'"):
            connections.resolve({"connection_id": "con_1"})

        with pytest.raises(ArgumentError):
            EndpointTemplate("/organizations/:id/members").resolve({})

    def test_require_all_for_item_form(self, organizations, connections):
        with pytest.raises(ArgumentError):
            organizations.resolve({}, require_all=True)

        with pytest.raises(ArgumentError):
            connections.resolve({"id": "org_1"}, require_all=True)

    def test_value_after_dropped_placeholder_raises(self):
        template = EndpointTemplate("/things/:a/:b")
        assert template.resolve({})[0] == "/things"
        with pytest.raises(ArgumentError):
            template.resolve({"b": "2"})

    def test_unconsumed_params_are_returned(self, organizations):
        path, remaining = organizations.resolve({"id": "org_1", "fields": "name", "page": 2})
        assert path == "/organizations/org_1"
        assert remaining == {"fields": "name", "page": 2}

    def test_placeholder_keys_never_leak_into_query(self, connections):
        _, remaining = connections.resolve({"id": "org_1", "connection_id": None})
        assert remaining == {}

    def test_non_string_values_are_stringified(self, organizations):
        assert organizations.resolve({"id": 42})[0] == "/organizations/42"

    def test_resolution_is_pure(self, connections):
        params = {"id": "org_1", "connection_id": "con_1", "per_page": 10}
        first = connections.resolve(params)
        second = connections.resolve(params)
        assert first == second
        assert params == {"id": "org_1", "connection_id": "con_1", "per_page": 10}

    def test_templates_are_immutable(self, organizations):
        with pytest.raises(AttributeError):
            organizations.pattern = "/other"
        assert organizations == EndpointTemplate("/organizations/:id")
        assert str(organizations) == "/organizations/:id"
