"""Endpoint templates with named path placeholders.

A template such as ``/organizations/:id/enabled_connections/:connection_id``
serves both the collection endpoint and the item endpoint: a trailing
placeholder without a value is dropped together with its separator.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from ..core.exceptions import ArgumentError

PLACEHOLDER_PATTERN = re.compile(r"^:([A-Za-z_][A-Za-z0-9_]*)$")


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


@dataclass(frozen=True)
class EndpointTemplate:
    """Immutable URL path pattern with ``:name`` placeholders."""

    pattern: str
    placeholders: Tuple[str, ...] = field(init=False)
    _segments: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.pattern, str) or not self.pattern.startswith("/"):
            raise ArgumentError(f"Endpoint template must be an absolute path: {self.pattern!r}")

        segments = tuple(self.pattern.split("/"))
        names = []
        for segment in segments:
            match = PLACEHOLDER_PATTERN.match(segment)
            if match is None:
                continue
            name = match.group(1)
            if name in names:
                raise ArgumentError(f"Duplicate placeholder '{name}' in template {self.pattern!r}")
            names.append(name)

        object.__setattr__(self, "_segments", segments)
        object.__setattr__(self, "placeholders", tuple(names))

    def _placeholder_name(self, segment: str) -> Optional[str]:
        match = PLACEHOLDER_PATTERN.match(segment)
        return match.group(1) if match else None

    def _is_trailing(self, index: int) -> bool:
        """True when only placeholders follow the segment at ``index``."""
        return all(
            self._placeholder_name(segment) is not None
            for segment in self._segments[index + 1:]
        )

    def resolve(
        self,
        params: Optional[Mapping[str, Any]] = None,
        require_all: bool = False,
    ) -> Tuple[str, Dict[str, Any]]:
        """Substitute placeholders from ``params``.

        Args:
            params: Path values plus any extra query parameters
            require_all: Fail on any unresolved placeholder (item form)

        Returns:
            Tuple of (concrete path, parameters not consumed by the path)

        Raises:
            ArgumentError: If a required placeholder has no value
        """
        params = dict(params or {})
        resolved = []
        dropped: Optional[str] = None

        for index, segment in enumerate(self._segments):
            name = self._placeholder_name(segment)
            if name is None:
                resolved.append(segment)
                continue

            value = params.get(name)
            if _is_missing(value):
                if require_all:
                    raise ArgumentError(
                        f"Missing value for '{name}' in {self.pattern!r}"
                    )
                if not self._is_trailing(index):
                    raise ArgumentError(
                        f"Missing value for non-trailing '{name}' in {self.pattern!r}"
                    )
                dropped = dropped or name
                continue

            if dropped is not None:
                raise ArgumentError(
                    f"Value for '{name}' given without '{dropped}' in {self.pattern!r}"
                )
            resolved.append(str(value))

        path = "/".join(resolved) or "/"
        remaining = {
            key: value for key, value in params.items()
            if key not in self.placeholders
        }
        return path, remaining

    def __str__(self) -> str:
        return self.pattern
