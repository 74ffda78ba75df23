"""Router assembly: route tables to a nested route configuration."""

from __future__ import annotations

from .assembler import (
    OrphanHook,
    OrphanedRouteError,
    RouterAssembler,
    assign_names,
    find_orphaned_routes,
    render_router,
)
from .naming import ImportNames, capitalize

__all__ = [
    "ImportNames",
    "OrphanHook",
    "OrphanedRouteError",
    "RouterAssembler",
    "assign_names",
    "capitalize",
    "find_orphaned_routes",
    "render_router",
]
