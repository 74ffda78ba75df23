"""Compiles a view proto into a React function component source file."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from ..constants import (
    CLASS_NAME_PROP,
    OBSERVER_IMPORT,
    OBSERVER_WRAPPER,
    RENDER_LIBRARY_IMPORT,
    TEXT_PROP,
)
from ..logging import get_logger
from ..models import (
    AssetLibrary,
    ComponentLibrary,
    ComponentRef,
    ContentLibrary,
    ContentList,
    ContentRecord,
    Element,
    Node,
    PropValue,
    Props,
    Text,
    ViewProto,
)
from .props import format_attribute, format_text
from .references import References, collect_references
from .resolver import RecordContext, Resolver

_ROOT_INDENT = 4
_CHILD_INDENT = 2


class ViewCompiler:
    """Renders view protos against component, asset, and content libraries.

    The compiler holds read-only references to its libraries and keeps no
    state between calls, so one instance may render many views.
    """

    def __init__(
        self,
        components: ComponentLibrary | None = None,
        assets: AssetLibrary | None = None,
        content: ContentLibrary | None = None,
    ) -> None:
        self.components = components or ComponentLibrary()
        self.assets = assets or AssetLibrary()
        self.content = content or ContentLibrary()
        self.resolver = Resolver(self.assets, self.content)
        self.logger = get_logger("views")

    def render(self, proto: ViewProto) -> str:
        """Return the complete source file for *proto*."""
        refs = collect_references(proto.tree)
        self.logger.debug(
            "Rendering view %s (%d asset refs, %d component refs)",
            proto.name,
            len(refs.assets),
            len(refs.components),
        )

        lines: List[str] = [RENDER_LIBRARY_IMPORT]
        if proto.observer:
            lines.append(OBSERVER_IMPORT)
        lines.append("")
        lines.extend(self.import_lines(proto, refs))
        lines.append("")
        lines.append(f"function {proto.name}() {{")
        lines.append("  return (")
        output = "\n".join(lines) + "\n"
        output += self.render_element(proto.tree, _ROOT_INDENT, None)
        output += "  );\n"
        output += "}\n\n"
        if proto.observer:
            output += f"export default {OBSERVER_WRAPPER}({proto.name});\n"
        else:
            output += f"export default {proto.name};\n"
        return output

    def import_lines(self, proto: ViewProto, refs: References | None = None) -> List[str]:
        """Asset, component, and manual import lines in emission order."""
        if refs is None:
            refs = collect_references(proto.tree)
        lines: List[str] = []
        for name in refs.assets:
            path = self.resolver.importable_asset_path(name)
            if path is not None:
                lines.append(f"import {name} from '{path}';")

        imported_tags: dict[str, str] = {}
        for name in refs.components:
            definition = self.components.get(name)
            if definition is None or not definition.import_path:
                continue
            # Two presets may share a tag; the binding can only be declared once.
            if definition.tag in imported_tags:
                first_path = imported_tags[definition.tag]
                if first_path != definition.import_path:
                    self.logger.debug(
                        "Skipping import of %s from '%s' for %s; already imported from '%s'",
                        definition.tag,
                        definition.import_path,
                        name,
                        first_path,
                    )
                continue
            imported_tags[definition.tag] = definition.import_path
            lines.append(f"import {definition.tag} from '{definition.import_path}';")

        for manual in proto.imports:
            lines.append(f"import {manual.name} from '{manual.path}';")
        return lines

    def render_element(self, element: Element, indent: int, record: RecordContext) -> str:
        if isinstance(element, Text):
            return f"{' ' * indent}{element.text}\n"

        if isinstance(element, Node):
            return self._render_node(
                element.tag, element.class_name, element.props, element.children, indent, record
            )

        if isinstance(element, ComponentRef):
            definition = self.components.get(element.component)
            if definition is None:
                self.logger.debug(
                    "Component %s not in library; rendering as a plain element", element.component
                )
                return self._render_node(
                    element.component, None, element.props, element.children, indent, record
                )
            merged: Props = dict(definition.default_props)
            merged.update(element.props)
            return self._render_node(
                definition.tag, definition.class_name, merged, element.children, indent, record
            )

        if isinstance(element, ContentList):
            items = self.content.get_items(element.source)
            if items is None:
                self.logger.debug("Content list %s is missing or not a list", element.source)
                return ""
            return "".join(
                self.render_element(element.template, indent, item.fields)
                for item in items
                if isinstance(item, ContentRecord)
            )

        raise TypeError(f"Unsupported element: {element!r}")

    def _render_node(
        self,
        tag: str,
        class_name: Optional[str],
        props: Mapping[str, PropValue],
        children: Sequence[Element],
        indent: int,
        record: RecordContext,
    ) -> str:
        pad = " " * indent
        opening = f"{pad}<{tag}"
        if class_name is not None and CLASS_NAME_PROP not in props:
            opening += f' {CLASS_NAME_PROP}="{class_name}"'
        for key, value in props.items():
            if key == TEXT_PROP:
                continue
            opening += " " + format_attribute(key, value, self.resolver, record)

        text_value = props.get(TEXT_PROP)
        if text_value is None and not children:
            return f"{opening} />\n"

        output = f"{opening}>\n"
        if text_value is not None:
            text = format_text(text_value, self.resolver, record)
            output += f"{' ' * (indent + _CHILD_INDENT)}{text}\n"
        for child in children:
            output += self.render_element(child, indent + _CHILD_INDENT, record)
        output += f"{pad}</{tag}>\n"
        return output


def render_view(
    proto: ViewProto,
    components: ComponentLibrary | None = None,
    assets: AssetLibrary | None = None,
    content: ContentLibrary | None = None,
) -> str:
    """Compile *proto* against the given libraries and return the source text."""
    return ViewCompiler(components, assets, content).render(proto)


__all__ = ["ViewCompiler", "render_view"]
