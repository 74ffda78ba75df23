"""Core data models shared across jsxgen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

_EXTERNAL_PREFIXES = ("http://", "https://")


def is_external_url(value: str) -> bool:
    """Return True when *value* points at an absolute external URL."""
    return value.startswith(_EXTERNAL_PREFIXES)


# Prop values


@dataclass(frozen=True)
class Str:
    text: str


@dataclass(frozen=True)
class Num:
    value: float


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Var:
    """Raw variable reference emitted as an expression."""

    name: str


@dataclass(frozen=True)
class Asset:
    """Indirection into the asset library."""

    name: str


@dataclass(frozen=True)
class Content:
    """Indirection into the content library."""

    name: str


@dataclass(frozen=True)
class ContentField:
    """Indirection into the record bound by the enclosing content list."""

    name: str


PropValue = Union[Str, Num, Bool, Var, Asset, Content, ContentField]
Props = Dict[str, PropValue]


# Element tree


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Node:
    """Primitive markup node."""

    tag: str
    class_name: Optional[str] = None
    props: Props = field(default_factory=dict)
    children: Tuple["Element", ...] = ()


@dataclass(frozen=True)
class ComponentRef:
    """Reference to a named preset in the component library."""

    component: str
    props: Props = field(default_factory=dict)
    children: Tuple["Element", ...] = ()


@dataclass(frozen=True)
class ContentList:
    """Renders ``template`` once per record of a named content list."""

    source: str
    template: "Element"


Element = Union[Text, Node, ComponentRef, ContentList]


# Libraries


@dataclass(frozen=True)
class ComponentDef:
    """A reusable component preset."""

    name: str
    tag: str
    class_name: Optional[str] = None
    default_props: Props = field(default_factory=dict)
    required_props: Tuple[str, ...] = ()
    children_template: Optional[Element] = None
    import_path: Optional[str] = None


class AssetKind(str, Enum):
    IMAGE = "image"
    YOUTUBE = "youtube"
    VIDEO = "video"
    AUDIO = "audio"


@dataclass(frozen=True)
class AssetDef:
    """A media asset descriptor."""

    name: str
    kind: AssetKind
    path: Optional[str] = None
    url: Optional[str] = None

    @property
    def is_external(self) -> bool:
        return bool(self.path) and is_external_url(self.path or "")


@dataclass(frozen=True)
class ContentText:
    text: str


@dataclass(frozen=True)
class ContentRecord:
    fields: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ContentItems:
    items: Tuple["ContentValue", ...] = ()


ContentValue = Union[ContentText, ContentRecord, ContentItems]


class _Library:
    """Name-keyed lookup table; later entries with the same name replace earlier ones."""

    def __init__(self, entries: Mapping[str, object]) -> None:
        self._entries = dict(entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def names(self) -> list[str]:
        return list(self._entries)


class ComponentLibrary(_Library):
    def __init__(self, components: Iterable[ComponentDef] = ()) -> None:
        super().__init__({component.name: component for component in components})

    def get(self, name: str) -> Optional[ComponentDef]:
        return self._entries.get(name)  # type: ignore[return-value]


class AssetLibrary(_Library):
    def __init__(self, assets: Iterable[AssetDef] = ()) -> None:
        super().__init__({asset.name: asset for asset in assets})

    def get(self, name: str) -> Optional[AssetDef]:
        return self._entries.get(name)  # type: ignore[return-value]


class ContentLibrary(_Library):
    def __init__(self, content: Mapping[str, ContentValue] | None = None) -> None:
        super().__init__(content or {})

    def get(self, name: str) -> Optional[ContentValue]:
        return self._entries.get(name)  # type: ignore[return-value]

    def get_text(self, name: str) -> Optional[str]:
        """Return the string stored under *name*, or None for other shapes."""
        value = self._entries.get(name)
        if isinstance(value, ContentText):
            return value.text
        return None

    def get_items(self, name: str) -> Optional[Tuple[ContentValue, ...]]:
        """Return the list stored under *name*, or None for other shapes."""
        value = self._entries.get(name)
        if isinstance(value, ContentItems):
            return value.items
        return None


# Pages and routes


class ImportKind(str, Enum):
    COMPONENT = "component"
    ASSET = "asset"
    HOOK = "hook"


@dataclass(frozen=True)
class Import:
    """Manual import declared by a view."""

    name: str
    path: str
    kind: ImportKind = ImportKind.COMPONENT


@dataclass(frozen=True)
class ViewProto:
    """Declarative description of one page."""

    name: str
    tree: Element
    imports: Tuple[Import, ...] = ()
    observer: bool = False


@dataclass(frozen=True)
class Layout:
    name: str
    path: str


@dataclass(frozen=True)
class Route:
    name: str
    url: str
    path: str
    proto: Optional[str] = None
    layout: Optional[str] = None


@dataclass(frozen=True)
class Partial:
    name: str
    path: str


@dataclass(frozen=True)
class RouteTable:
    """Layouts, routes, and partials declared by a project index."""

    layouts: Tuple[Layout, ...] = ()
    routes: Tuple[Route, ...] = ()
    partials: Tuple[Partial, ...] = ()


__all__ = [
    "Asset",
    "AssetDef",
    "AssetKind",
    "AssetLibrary",
    "Bool",
    "ComponentDef",
    "ComponentLibrary",
    "ComponentRef",
    "Content",
    "ContentField",
    "ContentItems",
    "ContentLibrary",
    "ContentList",
    "ContentRecord",
    "ContentText",
    "ContentValue",
    "Element",
    "Import",
    "ImportKind",
    "Layout",
    "Node",
    "Num",
    "Partial",
    "PropValue",
    "Props",
    "Route",
    "RouteTable",
    "Str",
    "Text",
    "Var",
    "ViewProto",
    "is_external_url",
]
