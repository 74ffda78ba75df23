"""Tests for jsxgen.routing."""

from __future__ import annotations

import pytest

from jsxgen.models import Layout, Route, RouteTable
from jsxgen.routing import (
    ImportNames,
    OrphanedRouteError,
    RouterAssembler,
    assign_names,
    capitalize,
    find_orphaned_routes,
    render_router,
)


def test_single_layout_scenario_renders_nested_routes() -> None:
    layouts = [Layout(name="main", path="layouts/Main")]
    routes = [Route(name="home", url="/", path="views/Home", layout="main")]

    output = RouterAssembler().render(layouts, routes)

    assert output == (
        'import { useRoutes } from "react-router-dom";\n'
        'import MainLayout from "../layouts/Main";\n'
        "\n"
        'import Home from "../views/Home";\n'
        "\n"
        "function Router() {\n"
        "  const routes = [\n"
        "    {\n"
        '      path: "/",\n'
        "      element: <MainLayout />,\n"
        "      children: [\n"
        "        {\n"
        '          path: "/",\n'
        "          element: <Home />,\n"
        "        },\n"
        "      ],\n"
        "    },\n"
        "  ];\n"
        "\n"
        "  return useRoutes(routes);\n"
        "}\n"
        "\n"
        "export default Router;\n"
    )


def test_ungrouped_routes_follow_layout_groups_in_order() -> None:
    table = RouteTable(
        layouts=(Layout(name="main", path="layouts/Main"), Layout(name="empty", path="layouts/Empty")),
        routes=(
            Route(name="login", url="/login", path="views/Login"),
            Route(name="home", url="/", path="views/Home", layout="main"),
            Route(name="about", url="/about", path="views/About", layout="main"),
            Route(name="notFound", url="*", path="views/NotFound"),
        ),
    )

    output = render_router(table)

    body = output.split("const routes = [\n", 1)[1]
    assert body.index("<MainLayout />") < body.index("<Home />") < body.index("<About />")
    assert body.index("<About />") < body.index("<Login />") < body.index("<NotFound />")
    assert "<EmptyLayout />" not in body
    assert 'import EmptyLayout from "../layouts/Empty";' in output
    assert (
        "    {\n"
        '      path: "/login",\n'
        "      element: <Login />,\n"
        "    },\n"
    ) in body
    assert body.count("children: [") == 1


def test_duplicate_display_names_get_numeric_suffixes() -> None:
    routes = [
        Route(name="page", url="/a", path="views/A"),
        Route(name="page", url="/b", path="views/B"),
        Route(name="page", url="/c", path="views/C"),
    ]

    names = assign_names([], routes)

    assert names.get("views/A") == "Page"
    assert names.get("views/B") == "Page2"
    assert names.get("views/C") == "Page3"


def test_suffix_probe_skips_names_already_taken() -> None:
    routes = [
        Route(name="page2", url="/x", path="views/X"),
        Route(name="page", url="/a", path="views/A"),
        Route(name="page", url="/b", path="views/B"),
    ]

    names = assign_names([], routes)

    assert names.get("views/X") == "Page2"
    assert names.get("views/B") == "Page3"


def test_route_sharing_a_path_reuses_identifier_and_import() -> None:
    routes = [
        Route(name="home", url="/", path="views/Home"),
        Route(name="index", url="/index", path="views/Home"),
    ]

    output = RouterAssembler().render([], routes)

    assert output.count('import Home from "../views/Home";') == 1
    assert "Index" not in output
    assert output.count("element: <Home />") == 2


def test_layout_and_route_sharing_a_path_import_once() -> None:
    layouts = [Layout(name="shell", path="views/Shell")]
    routes = [Route(name="shell", url="/shell", path="views/Shell")]

    names = assign_names(layouts, routes)
    output = RouterAssembler().render(layouts, routes)

    assert names.get("views/Shell") == "ShellLayout"
    assert output.count('from "../views/Shell";') == 1
    assert "element: <ShellLayout />" in output


def test_layouts_register_before_routes() -> None:
    layouts = [Layout(name="main", path="layouts/Main")]
    routes = [Route(name="mainLayout", url="/m", path="views/MainLayout")]

    names = assign_names(layouts, routes)

    assert names.get("layouts/Main") == "MainLayout"
    assert names.get("views/MainLayout") == "MainLayout2"


def test_orphaned_route_is_dropped_and_reported() -> None:
    layouts = [Layout(name="main", path="layouts/Main")]
    routes = [
        Route(name="home", url="/", path="views/Home", layout="main"),
        Route(name="ghost", url="/ghost", path="views/Ghost", layout="missing"),
    ]
    reported: list[Route] = []

    output = RouterAssembler(on_orphan=reported.append).render(layouts, routes)

    assert [route.name for route in reported] == ["ghost"]
    assert "<Ghost />" not in output
    assert '"/ghost"' not in output
    assert 'import Ghost from "../views/Ghost";' in output
    assert find_orphaned_routes(layouts, routes) == [routes[1]]


def test_orphan_hook_can_abort_rendering() -> None:
    routes = [Route(name="ghost", url="/ghost", path="views/Ghost", layout="missing")]

    def _strict(route: Route) -> None:
        raise OrphanedRouteError(route)

    with pytest.raises(OrphanedRouteError, match="unknown layout 'missing'"):
        RouterAssembler(on_orphan=_strict).render([], routes)


def test_every_grouped_route_appears_exactly_once() -> None:
    layouts = [Layout(name="a", path="layouts/A"), Layout(name="b", path="layouts/B")]
    routes = [
        Route(name="one", url="/1", path="views/One", layout="b"),
        Route(name="two", url="/2", path="views/Two", layout="a"),
        Route(name="three", url="/3", path="views/Three", layout="b"),
        Route(name="four", url="/4", path="views/Four"),
    ]

    output = RouterAssembler().render(layouts, routes)

    for url in ("/1", "/2", "/3", "/4"):
        assert output.count(f'path: "{url}",') == 1
    assert output.index("<ALayout />") < output.index("<Two />") < output.index("<BLayout />")
    assert output.index("<One />") < output.index("<Three />") < output.index("<Four />")


def test_custom_import_prefix() -> None:
    output = RouterAssembler(import_prefix="@/").render([], [Route(name="home", url="/", path="views/Home")])

    assert 'import Home from "@/views/Home";' in output


def test_capitalize_only_touches_first_character() -> None:
    assert capitalize("userProfile") == "UserProfile"
    assert capitalize("") == ""
    assert capitalize("x") == "X"


def test_import_names_reuse_existing_assignment() -> None:
    names = ImportNames()
    first = names.add_route(Route(name="home", url="/", path="views/Home"))
    second = names.add_layout(Layout(name="other", path="views/Home"))

    assert first == second == "Home"
    assert "views/Home" in names
