"""Collision-free component identifiers for layout and page files."""

from __future__ import annotations

from typing import Dict, Optional, Set

from ..models import Layout, Route


def capitalize(value: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    if not value:
        return ""
    return value[0].upper() + value[1:]


class ImportNames:
    """Assigns one identifier per file path, suffixing ``2``, ``3``, ... on clashes."""

    def __init__(self) -> None:
        self._path_to_name: Dict[str, str] = {}
        self._used: Set[str] = set()

    def add_layout(self, layout: Layout) -> str:
        return self._assign(layout.path, f"{capitalize(layout.name)}Layout")

    def add_route(self, route: Route) -> str:
        return self._assign(route.path, capitalize(route.name))

    def get(self, path: str) -> Optional[str]:
        return self._path_to_name.get(path)

    def __getitem__(self, path: str) -> str:
        return self._path_to_name[path]

    def __contains__(self, path: object) -> bool:
        return path in self._path_to_name

    def _assign(self, path: str, base: str) -> str:
        existing = self._path_to_name.get(path)
        if existing is not None:
            return existing
        name = self._unique(base)
        self._path_to_name[path] = name
        self._used.add(name)
        return name

    def _unique(self, base: str) -> str:
        if base not in self._used:
            return base
        counter = 2
        while f"{base}{counter}" in self._used:
            counter += 1
        return f"{base}{counter}"


__all__ = ["ImportNames", "capitalize"]
