"""View compilation: element trees to React function components."""

from __future__ import annotations

from .compiler import ViewCompiler, render_view
from .references import References, collect_references
from .resolver import AssetForm, AssetReference, Resolver

__all__ = [
    "AssetForm",
    "AssetReference",
    "References",
    "Resolver",
    "ViewCompiler",
    "collect_references",
    "render_view",
]
