"""Assembles a route table into a React Router source file."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Set

from ..constants import DEFAULT_IMPORT_PREFIX, ROUTE_HOOK, ROUTE_HOOK_IMPORT, ROUTER_FUNCTION
from ..logging import get_logger
from ..models import Layout, Route, RouteTable
from .naming import ImportNames

OrphanHook = Callable[[Route], None]


class OrphanedRouteError(RuntimeError):
    """Raised by strict builds when a route names a layout that does not exist."""

    def __init__(self, route: Route) -> None:
        super().__init__(f"Route '{route.name}' references unknown layout '{route.layout}'")
        self.route = route


def find_orphaned_routes(layouts: Sequence[Layout], routes: Sequence[Route]) -> List[Route]:
    """Return routes whose ``layout`` matches no declared layout name."""
    known = {layout.name for layout in layouts}
    return [route for route in routes if route.layout is not None and route.layout not in known]


def assign_names(layouts: Sequence[Layout], routes: Sequence[Route]) -> ImportNames:
    """Register every layout, then every route, in source order."""
    names = ImportNames()
    for layout in layouts:
        names.add_layout(layout)
    for route in routes:
        names.add_route(route)
    return names


class RouterAssembler:
    """Renders layouts and routes as a nested ``useRoutes`` configuration.

    Routes are grouped under their layout in layout order; routes without a
    layout follow as top-level entries. A route naming an unknown layout is
    left out of the output, logged, and reported to ``on_orphan`` when given.
    """

    def __init__(
        self,
        import_prefix: str = DEFAULT_IMPORT_PREFIX,
        on_orphan: OrphanHook | None = None,
    ) -> None:
        self.import_prefix = import_prefix
        self.on_orphan = on_orphan
        self.logger = get_logger("routing")

    def render(self, layouts: Sequence[Layout], routes: Sequence[Route]) -> str:
        for orphan in find_orphaned_routes(layouts, routes):
            self.logger.warning(
                "Route %s references unknown layout %s; it will not be rendered",
                orphan.name,
                orphan.layout,
            )
            if self.on_orphan is not None:
                self.on_orphan(orphan)

        names = assign_names(layouts, routes)
        imports = self._render_imports(layouts, routes, names)
        entries = self._render_routes(layouts, routes, names)
        return (
            f"{imports}\n"
            f"function {ROUTER_FUNCTION}() {{\n"
            f"{entries}\n"
            f"  return {ROUTE_HOOK}(routes);\n"
            "}\n"
            "\n"
            f"export default {ROUTER_FUNCTION};\n"
        )

    def render_table(self, table: RouteTable) -> str:
        return self.render(table.layouts, table.routes)

    def _import_line(self, name: str, path: str) -> str:
        return f'import {name} from "{self.import_prefix}{path}";\n'

    def _render_imports(
        self, layouts: Sequence[Layout], routes: Sequence[Route], names: ImportNames
    ) -> str:
        output = ROUTE_HOOK_IMPORT + "\n"
        imported: Set[str] = set()
        for layout in layouts:
            if layout.path in imported:
                continue
            imported.add(layout.path)
            output += self._import_line(names[layout.path], layout.path)
        output += "\n"
        for route in routes:
            if route.path in imported:
                continue
            imported.add(route.path)
            output += self._import_line(names[route.path], route.path)
        return output

    def _render_routes(
        self, layouts: Sequence[Layout], routes: Sequence[Route], names: ImportNames
    ) -> str:
        grouped: Dict[str, List[Route]] = {}
        ungrouped: List[Route] = []
        for route in routes:
            if route.layout is not None:
                grouped.setdefault(route.layout, []).append(route)
            else:
                ungrouped.append(route)

        output = "  const routes = [\n"
        for layout in layouts:
            children = grouped.get(layout.name)
            if not children:
                continue
            output += "    {\n"
            output += '      path: "/",\n'
            output += f"      element: <{names[layout.path]} />,\n"
            output += "      children: [\n"
            for route in children:
                output += "        {\n"
                output += f'          path: "{route.url}",\n'
                output += f"          element: <{names[route.path]} />,\n"
                output += "        },\n"
            output += "      ],\n"
            output += "    },\n"

        for route in ungrouped:
            output += "    {\n"
            output += f'      path: "{route.url}",\n'
            output += f"      element: <{names[route.path]} />,\n"
            output += "    },\n"
        output += "  ];\n"
        return output


def render_router(
    table: RouteTable,
    *,
    import_prefix: str = DEFAULT_IMPORT_PREFIX,
    on_orphan: Optional[OrphanHook] = None,
) -> str:
    """Assemble the router source for *table*."""
    return RouterAssembler(import_prefix, on_orphan).render_table(table)


__all__ = [
    "OrphanHook",
    "OrphanedRouteError",
    "RouterAssembler",
    "assign_names",
    "find_orphaned_routes",
    "render_router",
]
