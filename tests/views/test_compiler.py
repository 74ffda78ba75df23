"""Tests for jsxgen.views.compiler."""

from __future__ import annotations

from jsxgen.models import (
    Asset,
    Bool,
    ComponentDef,
    ComponentLibrary,
    ComponentRef,
    Content,
    ContentField,
    ContentList,
    Import,
    Node,
    Num,
    Str,
    Text,
    Var,
    ViewProto,
)
from jsxgen.views import ViewCompiler, render_view


def test_render_plain_view_matches_expected_layout() -> None:
    proto = ViewProto(
        name="Home",
        tree=Node(tag="div", class_name="page", children=(Text("Hello"),)),
    )

    output = render_view(proto)

    assert output == (
        "import React from 'react';\n"
        "\n"
        "\n"
        "function Home() {\n"
        "  return (\n"
        '    <div className="page">\n'
        "      Hello\n"
        "    </div>\n"
        "  );\n"
        "}\n"
        "\n"
        "export default Home;\n"
    )


def test_render_observer_view_with_imports(components, assets, content) -> None:
    proto = ViewProto(
        name="Home",
        observer=True,
        imports=(Import(name="Helper", path="./Helper"),),
        tree=Node(
            tag="main",
            children=(
                Node(tag="img", props={"src": Asset("logo")}),
                ComponentRef(
                    component="PrimaryButton",
                    props={"size": Num(5), "text": Str("Go")},
                ),
            ),
        ),
    )

    output = ViewCompiler(components, assets, content).render(proto)

    assert output == (
        "import React from 'react';\n"
        'import { observer } from "mobx-react";\n'
        "\n"
        "import logo from '../assets/logo.png';\n"
        "import Button from '../components/Button';\n"
        "import Helper from './Helper';\n"
        "\n"
        "function Home() {\n"
        "  return (\n"
        "    <main>\n"
        "      <img src={logo} />\n"
        '      <Button className="btn btn-primary" size={5} variant="solid">\n'
        "        Go\n"
        "      </Button>\n"
        "    </main>\n"
        "  );\n"
        "}\n"
        "\n"
        "export default observer(Home);\n"
    )


def test_call_site_props_override_component_defaults(components) -> None:
    proto = ViewProto(
        name="Page",
        tree=ComponentRef(component="PrimaryButton", props={"size": Num(5)}),
    )

    output = render_view(proto, components=components)

    assert output.count("size=") == 1
    assert "size={5}" in output
    assert "size={3}" not in output


def test_unknown_component_renders_as_plain_element() -> None:
    proto = ViewProto(
        name="Page",
        tree=ComponentRef(component="FancyWidget", props={"level": Num(2)}),
    )

    output = render_view(proto)

    assert "    <FancyWidget level={2} />\n" in output
    assert "import FancyWidget" not in output


def test_asset_referenced_twice_imports_once(assets) -> None:
    proto = ViewProto(
        name="Gallery",
        tree=Node(
            tag="div",
            children=(
                Node(tag="img", props={"src": Asset("logo")}),
                Node(tag="img", props={"src": Asset("logo"), "alt": Str("Logo")}),
            ),
        ),
    )

    output = render_view(proto, assets=assets)

    assert output.count("import logo from '../assets/logo.png';") == 1


def test_youtube_asset_is_inlined_without_import(assets) -> None:
    proto = ViewProto(name="Video", tree=Node(tag="iframe", props={"src": Asset("intro")}))

    output = render_view(proto, assets=assets)

    assert '    <iframe src="https://youtu.be/x" />\n' in output
    assert "import intro" not in output


def test_external_and_unresolved_assets_never_import(assets) -> None:
    proto = ViewProto(
        name="Media",
        tree=Node(
            tag="div",
            children=(
                Node(tag="img", props={"src": Asset("banner")}),
                Node(tag="img", props={"src": Asset("placeholder")}),
                Node(tag="img", props={"src": Asset("mystery")}),
                Node(tag="audio", props={"src": Asset("theme")}),
            ),
        ),
    )

    output = render_view(proto, assets=assets)

    assert '<img src="https://cdn.example.com/banner.jpg" />' in output
    assert "<img src={placeholder} />" in output
    assert "<img src={mystery} />" in output
    assert '<audio src="" />' in output
    header = output.split("function Media", 1)[0]
    assert header == "import React from 'react';\n\n\n"


def test_content_list_renders_template_per_record(content) -> None:
    proto = ViewProto(
        name="Features",
        tree=Node(
            tag="ul",
            children=(
                ContentList(
                    source="features",
                    template=Node(
                        tag="li",
                        props={"text": ContentField("title"), "data-body": ContentField("body")},
                    ),
                ),
            ),
        ),
    )

    output = render_view(proto, content=content)

    assert (
        "    <ul>\n"
        '      <li data-body="Compiles quickly">\n'
        "        Fast\n"
        "      </li>\n"
        '      <li data-body="">\n'
        "        Simple\n"
        "      </li>\n"
        "    </ul>\n"
    ) in output
    assert "not a record" not in output


def test_content_list_with_missing_or_non_list_source_renders_nothing(content) -> None:
    proto = ViewProto(
        name="Empty",
        tree=Node(
            tag="ul",
            children=(
                ContentList(source="missing", template=Text("never")),
                ContentList(source="tagline", template=Text("never")),
            ),
        ),
    )

    output = render_view(proto, content=content)

    assert "never" not in output
    assert "    <ul>\n    </ul>\n" in output


def test_content_list_template_component_is_imported(content) -> None:
    library = ComponentLibrary(
        [ComponentDef(name="Tile", tag="Tile", import_path="./Tile")]
    )
    proto = ViewProto(
        name="Tiles",
        tree=ContentList(
            source="features",
            template=ComponentRef(component="Tile", props={"title": ContentField("title")}),
        ),
    )

    output = render_view(proto, components=library, content=content)

    assert "import Tile from './Tile';" in output
    assert '    <Tile title="Fast" />\n' in output
    assert '    <Tile title="Simple" />\n' in output


def test_call_site_class_name_wins_over_preset(components) -> None:
    proto = ViewProto(
        name="Page",
        tree=Node(
            tag="div",
            children=(
                Node(tag="div", class_name="preset", props={"className": Str("custom")}),
                ComponentRef(component="Card", props={"className": Var("styles.card")}),
            ),
        ),
    )

    output = render_view(proto, components=components)

    assert '<div className="custom" />' in output
    assert "<article className={styles.card} />" in output
    assert "preset" not in output
    assert 'className="card"' not in output


def test_attribute_formatting_by_value_kind(content) -> None:
    proto = ViewProto(
        name="Form",
        tree=Node(
            tag="input",
            props={
                "disabled": Bool(True),
                "hidden": Bool(False),
                "value": Var("count"),
                "step": Num(0.5),
                "title": Content("headline"),
                "alt": Content("missing"),
                "label": ContentField("title"),
            },
        ),
    )

    output = render_view(proto, content=content)

    assert (
        "    <input disabled hidden={false} value={count} step={0.5} "
        'title="Welcome home" alt="" label="" />\n'
    ) in output


def test_components_sharing_a_tag_import_once() -> None:
    library = ComponentLibrary(
        [
            ComponentDef(name="SmallButton", tag="Button", import_path="./Button"),
            ComponentDef(name="LargeButton", tag="Button", import_path="./Button"),
        ]
    )
    proto = ViewProto(
        name="Buttons",
        tree=Node(
            tag="div",
            children=(ComponentRef(component="SmallButton"), ComponentRef(component="LargeButton")),
        ),
    )

    output = render_view(proto, components=library)

    assert output.count("import Button from './Button';") == 1


class _RecordingLogger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def debug(self, message: str, *args: object) -> None:
        self.messages.append(message % args)


def test_shared_tag_with_different_path_logs_skipped_import() -> None:
    library = ComponentLibrary(
        [
            ComponentDef(name="SmallButton", tag="Button", import_path="./Button"),
            ComponentDef(name="FancyButton", tag="Button", import_path="./fancy/Button"),
        ]
    )
    proto = ViewProto(
        name="Buttons",
        tree=Node(
            tag="div",
            children=(ComponentRef(component="SmallButton"), ComponentRef(component="FancyButton")),
        ),
    )
    compiler = ViewCompiler(components=library)
    logger = _RecordingLogger()
    compiler.logger = logger

    output = compiler.render(proto)

    assert "import Button from './Button';" in output
    assert "./fancy/Button" not in output
    skipped = [message for message in logger.messages if message.startswith("Skipping import")]
    assert skipped == [
        "Skipping import of Button from './fancy/Button' for FancyButton; "
        "already imported from './Button'"
    ]


def test_manual_imports_are_not_deduplicated(components) -> None:
    proto = ViewProto(
        name="Page",
        imports=(Import(name="Button", path="../components/Button"),),
        tree=ComponentRef(component="PrimaryButton"),
    )

    output = render_view(proto, components=components)

    assert output.count("import Button from '../components/Button';") == 2


def test_render_is_deterministic(components, assets, content) -> None:
    proto = ViewProto(
        name="Landing",
        tree=Node(
            tag="div",
            props={"id": Str("landing"), "data-count": Num(2)},
            children=(
                Node(tag="img", props={"src": Asset("logo")}),
                ComponentRef(component="PrimaryButton"),
                ContentList(source="features", template=Node(tag="p", props={"text": ContentField("title")})),
            ),
        ),
    )
    compiler = ViewCompiler(components, assets, content)

    assert compiler.render(proto) == compiler.render(proto)
