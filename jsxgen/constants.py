"""Fixed import lines and identifiers emitted into generated sources."""

from __future__ import annotations

RENDER_LIBRARY_IMPORT = "import React from 'react';"
OBSERVER_IMPORT = 'import { observer } from "mobx-react";'
OBSERVER_WRAPPER = "observer"

ROUTE_HOOK_IMPORT = 'import { useRoutes } from "react-router-dom";'
ROUTE_HOOK = "useRoutes"
ROUTER_FUNCTION = "Router"
DEFAULT_IMPORT_PREFIX = "../"

TEXT_PROP = "text"
CLASS_NAME_PROP = "className"


__all__ = [
    "CLASS_NAME_PROP",
    "DEFAULT_IMPORT_PREFIX",
    "OBSERVER_IMPORT",
    "OBSERVER_WRAPPER",
    "RENDER_LIBRARY_IMPORT",
    "ROUTER_FUNCTION",
    "ROUTE_HOOK",
    "ROUTE_HOOK_IMPORT",
    "TEXT_PROP",
]
