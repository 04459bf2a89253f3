"""Module specifier alias rewriting (tsconfig ``paths``)."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


class AliasResolver:
    """Rewrites a specifier's prefix using the first matching alias.

    Aliases are tried in mapping order and the first prefix match wins, even
    when a later alias would match a longer prefix.
    """

    def __init__(self, mapping: Mapping[str, str] | None = None):
        self.mapping = MappingProxyType(dict(mapping or {}))

    def resolve(self, specifier: str) -> str | None:
        """Return the rewritten specifier, or None if no alias applies."""
        for prefix, replacement in self.mapping.items():
            if specifier.startswith(prefix):
                return replacement + specifier[len(prefix):]
        return None
