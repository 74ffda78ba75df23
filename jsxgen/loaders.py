"""Decoding of YAML definition files into the definition model."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from .models import (
    Asset,
    AssetDef,
    AssetKind,
    AssetLibrary,
    Bool,
    ComponentDef,
    ComponentLibrary,
    ComponentRef,
    Content,
    ContentField,
    ContentItems,
    ContentLibrary,
    ContentList,
    ContentRecord,
    ContentText,
    ContentValue,
    Element,
    Import,
    ImportKind,
    Layout,
    Node,
    Num,
    Partial,
    Props,
    PropValue,
    Route,
    RouteTable,
    Str,
    Text,
    Var,
    ViewProto,
)


class DefinitionError(RuntimeError):
    """Raised when a definition file cannot be decoded."""


_PROP_TAGS = {
    "str": lambda raw: Str(_scalar_text(raw)),
    "num": lambda raw: Num(_require_number(raw)),
    "bool": lambda raw: Bool(_require_bool(raw)),
    "var": lambda raw: Var(_require_str(raw, "var")),
    "asset": lambda raw: Asset(_require_str(raw, "asset")),
    "content": lambda raw: Content(_require_str(raw, "content")),
    "field": lambda raw: ContentField(_require_str(raw, "field")),
    "content_field": lambda raw: ContentField(_require_str(raw, "content_field")),
}


# File loaders


def read_definition_file(path: Path) -> Any:
    """Return the parsed YAML document stored at *path*."""
    if not path.exists():
        raise FileNotFoundError(f"Definition file not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DefinitionError(f"Failed to parse {path.name}: {exc}") from exc


def load_view(path: Path) -> ViewProto:
    return _with_source(path, parse_view)


def load_components(path: Optional[Path]) -> ComponentLibrary:
    if path is None or not path.exists():
        return ComponentLibrary()
    return _with_source(path, parse_components)


def load_assets(path: Optional[Path]) -> AssetLibrary:
    if path is None or not path.exists():
        return AssetLibrary()
    return _with_source(path, parse_assets)


def load_content(path: Optional[Path]) -> ContentLibrary:
    if path is None or not path.exists():
        return ContentLibrary()
    return _with_source(path, parse_content)


def load_route_table(path: Path) -> RouteTable:
    return _with_source(path, parse_route_table)


def _with_source(path: Path, parser):
    data = read_definition_file(path)
    try:
        return parser(data)
    except DefinitionError as exc:
        raise DefinitionError(f"{path.name}: {exc}") from exc


# Document parsers


def parse_view(data: Any) -> ViewProto:
    mapping = _require_mapping(data, "view")
    if "tree" not in mapping:
        raise DefinitionError("view is missing a 'tree'")
    imports = tuple(parse_import(item) for item in _as_list(mapping.get("imports")))
    return ViewProto(
        name=_require_str(mapping.get("name"), "view.name"),
        tree=parse_element(mapping["tree"]),
        imports=imports,
        observer=_optional_bool(mapping.get("observer"), "view.observer"),
    )


def parse_import(data: Any) -> Import:
    mapping = _require_mapping(data, "import")
    kind_raw = mapping.get("kind") or ImportKind.COMPONENT.value
    try:
        kind = ImportKind(str(kind_raw).lower())
    except ValueError as exc:
        raise DefinitionError(f"Unknown import kind '{kind_raw}'") from exc
    return Import(
        name=_require_str(mapping.get("name"), "import.name"),
        path=_require_str(mapping.get("path"), "import.path"),
        kind=kind,
    )


def parse_components(data: Any) -> ComponentLibrary:
    mapping = _require_mapping(data or {}, "components file")
    return ComponentLibrary(parse_component(item) for item in _as_list(mapping.get("components")))


def parse_component(data: Any) -> ComponentDef:
    mapping = _require_mapping(data, "component")
    template = mapping.get("children_template")
    return ComponentDef(
        name=_require_str(mapping.get("name"), "component.name"),
        tag=_require_str(mapping.get("tag"), "component.tag"),
        class_name=_optional_str(mapping.get("class_name")),
        default_props=parse_props(mapping.get("default_props")),
        required_props=tuple(str(item) for item in _as_list(mapping.get("required_props"))),
        children_template=parse_element(template) if template is not None else None,
        import_path=_optional_str(mapping.get("import_path")),
    )


def parse_assets(data: Any) -> AssetLibrary:
    mapping = _require_mapping(data or {}, "assets file")
    return AssetLibrary(parse_asset(item) for item in _as_list(mapping.get("assets")))


def parse_asset(data: Any) -> AssetDef:
    mapping = _require_mapping(data, "asset")
    kind_raw = _require_str(mapping.get("kind"), "asset.kind")
    try:
        kind = AssetKind(kind_raw.lower())
    except ValueError as exc:
        raise DefinitionError(f"Unknown asset kind '{kind_raw}'") from exc
    return AssetDef(
        name=_require_str(mapping.get("name"), "asset.name"),
        kind=kind,
        path=_optional_str(mapping.get("path")),
        url=_optional_str(mapping.get("url")),
    )


def parse_content(data: Any) -> ContentLibrary:
    mapping = _require_mapping(data or {}, "content file")
    entries = _require_mapping(mapping.get("content") or {}, "content")
    return ContentLibrary({str(name): parse_content_value(value) for name, value in entries.items()})


def parse_content_value(data: Any) -> ContentValue:
    if isinstance(data, Mapping):
        return ContentRecord({str(key): _scalar_text(value) for key, value in data.items()})
    if isinstance(data, list):
        return ContentItems(tuple(parse_content_value(item) for item in data))
    if data is None:
        raise DefinitionError("content values may not be empty")
    return ContentText(_scalar_text(data))


def parse_route_table(data: Any) -> RouteTable:
    mapping = _require_mapping(data, "route index")
    layouts = tuple(
        Layout(
            name=_require_str(item.get("name"), "layout.name"),
            path=_require_str(item.get("path"), "layout.path"),
        )
        for item in _mapping_list(mapping.get("layouts"), "layout")
    )
    routes = tuple(
        Route(
            name=_require_str(item.get("name"), "route.name"),
            url=_require_str(item.get("url"), "route.url"),
            path=_require_str(item.get("path"), "route.path"),
            proto=_optional_str(item.get("proto")),
            layout=_optional_str(item.get("layout")),
        )
        for item in _mapping_list(mapping.get("routes"), "route")
    )
    partials = tuple(
        Partial(
            name=_require_str(item.get("name"), "partial.name"),
            path=_require_str(item.get("path"), "partial.path"),
        )
        for item in _mapping_list(mapping.get("partials"), "partial")
    )
    return RouteTable(layouts=layouts, routes=routes, partials=partials)


# Elements and props


def parse_element(data: Any) -> Element:
    """Decode one element.

    A bare string is a text node; otherwise the element is a mapping with a
    single key naming its variant: ``text``, ``node``, ``component`` or
    ``content_list``.
    """
    if isinstance(data, str):
        return Text(data)
    kind, body = _single_entry(data, "element")
    if kind == "text":
        return Text(_scalar_text(body))
    if kind == "node":
        mapping = _require_mapping(body, "node")
        return Node(
            tag=_require_str(mapping.get("tag"), "node.tag"),
            class_name=_optional_str(mapping.get("class_name")),
            props=parse_props(mapping.get("props")),
            children=_parse_children(mapping.get("children")),
        )
    if kind == "component":
        if isinstance(body, str):
            return ComponentRef(component=body)
        mapping = _require_mapping(body, "component")
        return ComponentRef(
            component=_require_str(mapping.get("component", mapping.get("name")), "component.component"),
            props=parse_props(mapping.get("props")),
            children=_parse_children(mapping.get("children")),
        )
    if kind == "content_list":
        mapping = _require_mapping(body, "content_list")
        if "template" not in mapping:
            raise DefinitionError("content_list is missing a 'template'")
        return ContentList(
            source=_require_str(mapping.get("source"), "content_list.source"),
            template=parse_element(mapping["template"]),
        )
    raise DefinitionError(f"Unknown element kind '{kind}'")


def _parse_children(data: Any) -> Tuple[Element, ...]:
    return tuple(parse_element(item) for item in _as_list(data))


def parse_props(data: Any) -> Props:
    if data is None:
        return {}
    mapping = _require_mapping(data, "props")
    return {str(key): parse_prop_value(value) for key, value in mapping.items()}


def parse_prop_value(data: Any) -> PropValue:
    """Decode a prop value.

    Plain scalars map to ``Str``, ``Num`` and ``Bool``; tagged values use a
    single-key mapping such as ``{asset: hero}`` or ``{var: count}``.
    """
    # bool is checked first because it is a subclass of int.
    if isinstance(data, bool):
        return Bool(data)
    if isinstance(data, (int, float)):
        return Num(float(data))
    if isinstance(data, str):
        return Str(data)
    tag, raw = _single_entry(data, "prop value")
    factory = _PROP_TAGS.get(tag.lower())
    if factory is None:
        raise DefinitionError(f"Unknown prop value tag '{tag}'")
    return factory(raw)


# Coercion helpers


def _single_entry(data: Any, label: str) -> Tuple[str, Any]:
    if not isinstance(data, Mapping) or len(data) != 1:
        raise DefinitionError(f"{label} must be a mapping with exactly one key")
    ((key, value),) = data.items()
    return str(key), value


def _require_mapping(value: Any, label: str) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        raise DefinitionError(f"{label} must be a mapping")
    return dict(value)


def _mapping_list(value: Any, label: str) -> List[Dict[str, Any]]:
    return [_require_mapping(item, label) for item in _as_list(value)]


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    raise DefinitionError("expected a list")


def _require_str(value: Any, label: str) -> str:
    if isinstance(value, str) and value:
        return value
    raise DefinitionError(f"{label} must be a non-empty string")


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return _scalar_text(value)


def _require_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DefinitionError("num must be a number")
    return float(value)


def _require_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise DefinitionError("bool must be true or false")
    return value


def _optional_bool(value: Any, label: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
        return value.strip().lower() == "true"
    raise DefinitionError(f"{label} must be true or false")


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise DefinitionError(f"expected a scalar value, got {type(value).__name__}")


__all__ = [
    "DefinitionError",
    "load_assets",
    "load_components",
    "load_content",
    "load_route_table",
    "load_view",
    "parse_assets",
    "parse_components",
    "parse_content",
    "parse_element",
    "parse_prop_value",
    "parse_props",
    "parse_route_table",
    "parse_view",
    "read_definition_file",
]
