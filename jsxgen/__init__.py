"""Compile declarative page and route definitions into React sources."""

from __future__ import annotations

from .routing import RouterAssembler, render_router
from .views import ViewCompiler, render_view

__version__ = "0.1.0"

__all__ = ["RouterAssembler", "ViewCompiler", "__version__", "render_router", "render_view"]
