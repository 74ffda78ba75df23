"""Reference collection over a view's element tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping

from ..models import Asset, ComponentRef, ContentList, Element, Node, PropValue, Text


@dataclass
class References:
    """Distinct asset and component names in first-discovery order."""

    assets: List[str] = field(default_factory=list)
    components: List[str] = field(default_factory=list)

    def add_asset(self, name: str) -> None:
        if name not in self.assets:
            self.assets.append(name)

    def add_component(self, name: str) -> None:
        if name not in self.components:
            self.components.append(name)


def collect_references(tree: Element) -> References:
    """Walk *tree* depth-first and gather every asset and component it names.

    Props are visited before children. Content list templates are walked, but
    the list ``source`` is a content key and is never reported.
    """
    refs = References()
    _collect(tree, refs)
    return refs


def _collect(element: Element, refs: References) -> None:
    if isinstance(element, Text):
        return
    if isinstance(element, Node):
        _collect_props(element.props, refs)
        for child in element.children:
            _collect(child, refs)
    elif isinstance(element, ComponentRef):
        refs.add_component(element.component)
        _collect_props(element.props, refs)
        for child in element.children:
            _collect(child, refs)
    elif isinstance(element, ContentList):
        _collect(element.template, refs)


def _collect_props(props: Mapping[str, PropValue], refs: References) -> None:
    for value in props.values():
        if isinstance(value, Asset):
            refs.add_asset(value.name)


__all__ = ["References", "collect_references"]
