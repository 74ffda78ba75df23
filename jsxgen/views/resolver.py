"""Symbol lookups used while rendering a view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from ..models import AssetKind, AssetLibrary, ContentLibrary

RecordContext = Optional[Mapping[str, str]]


class AssetForm(str, Enum):
    """How an asset reference is expressed at its use site."""

    IMPORTED = "imported"
    EXTERNAL = "external"
    URL = "url"
    BARE = "bare"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class AssetReference:
    """Outcome of resolving an asset name.

    ``value`` is the binding name for IMPORTED, BARE, and UNRESOLVED forms and
    the literal URL (possibly empty) for EXTERNAL and URL forms.
    """

    form: AssetForm
    value: str

    @property
    def is_literal(self) -> bool:
        return self.form in (AssetForm.EXTERNAL, AssetForm.URL)


class Resolver:
    """Resolves asset, content, and record-field references without raising."""

    def __init__(self, assets: AssetLibrary, content: ContentLibrary) -> None:
        self.assets = assets
        self.content = content

    def asset_reference(self, name: str) -> AssetReference:
        asset = self.assets.get(name)
        if asset is None:
            return AssetReference(AssetForm.UNRESOLVED, name)
        if asset.kind is AssetKind.IMAGE:
            if not asset.path:
                return AssetReference(AssetForm.BARE, name)
            if asset.is_external:
                return AssetReference(AssetForm.EXTERNAL, asset.path)
            return AssetReference(AssetForm.IMPORTED, name)
        return AssetReference(AssetForm.URL, asset.url or "")

    def importable_asset_path(self, name: str) -> Optional[str]:
        """Return the local path to import for *name*, if it needs one."""
        asset = self.assets.get(name)
        if asset is None or asset.kind is not AssetKind.IMAGE:
            return None
        if not asset.path or asset.is_external:
            return None
        return asset.path

    def content_text(self, name: str) -> Optional[str]:
        return self.content.get_text(name)

    @staticmethod
    def record_field(record: RecordContext, name: str) -> Optional[str]:
        if record is None:
            return None
        return record.get(name)


__all__ = ["AssetForm", "AssetReference", "RecordContext", "Resolver"]
