from __future__ import annotations

from pathlib import Path

import pytest

from jsxgen.models import (
    AssetDef,
    AssetKind,
    AssetLibrary,
    ComponentDef,
    ComponentLibrary,
    ContentItems,
    ContentLibrary,
    ContentRecord,
    ContentText,
    Num,
    Str,
)
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def components() -> ComponentLibrary:
    return ComponentLibrary(
        [
            ComponentDef(
                name="PrimaryButton",
                tag="Button",
                class_name="btn btn-primary",
                default_props={"size": Num(3), "variant": Str("solid")},
                import_path="../components/Button",
            ),
            ComponentDef(name="Card", tag="article", class_name="card"),
        ]
    )


@pytest.fixture
def assets() -> AssetLibrary:
    return AssetLibrary(
        [
            AssetDef(name="logo", kind=AssetKind.IMAGE, path="../assets/logo.png"),
            AssetDef(name="banner", kind=AssetKind.IMAGE, path="https://cdn.example.com/banner.jpg"),
            AssetDef(name="placeholder", kind=AssetKind.IMAGE),
            AssetDef(name="intro", kind=AssetKind.YOUTUBE, url="https://youtu.be/x"),
            AssetDef(name="theme", kind=AssetKind.AUDIO),
        ]
    )


@pytest.fixture
def content() -> ContentLibrary:
    return ContentLibrary(
        {
            "headline": ContentText("Welcome home"),
            "features": ContentItems(
                (
                    ContentRecord({"title": "Fast", "body": "Compiles quickly"}),
                    ContentText("not a record"),
                    ContentRecord({"title": "Simple"}),
                )
            ),
            "tagline": ContentRecord({"title": "Not a list"}),
        }
    )
