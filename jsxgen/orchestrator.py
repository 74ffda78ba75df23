"""Pipeline orchestration for building view and router sources."""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .config import ConfigError, JsxGenConfig, load_config
from .loaders import (
    load_assets,
    load_components,
    load_content,
    load_route_table,
    load_view,
)
from .logging import get_logger
from .models import Route, RouteTable
from .routing import OrphanedRouteError, RouterAssembler
from .views import ViewCompiler


@dataclass
class GeneratedFile:
    """A generated source and whether it differs from what is on disk."""

    path: Path
    changed: bool
    diff: str = ""


@dataclass
class BuildOutcome:
    """Result of a build run."""

    root: Path
    files: List[GeneratedFile] = field(default_factory=list)
    orphaned_routes: List[Route] = field(default_factory=list)
    dry_run: bool = False

    @property
    def changed(self) -> List[GeneratedFile]:
        return [item for item in self.files if item.changed]


class Orchestrator:
    """Loads a project's definitions and writes the generated sources."""

    def __init__(self) -> None:
        self.logger = get_logger("orchestrator")

    def run_build(self, path: str, *, dry_run: bool = False) -> BuildOutcome:
        """Compile every routed view and the router for the project at *path*."""
        project_path = Path(path).expanduser().resolve()
        if not project_path.exists():
            raise FileNotFoundError(f"Project path not found: {project_path}")
        self.logger.info("Starting build for %s", project_path)
        config = self._load_config(project_path)

        table = load_route_table(config.definitions.index_path)
        compiler = self._build_compiler(config)
        outcome = BuildOutcome(root=project_path, dry_run=dry_run)

        # Nothing is written until every source has rendered.
        pending: List[Tuple[Path, str]] = []
        compiled: set[str] = set()
        for route in table.routes:
            if not route.proto or route.path in compiled:
                continue
            compiled.add(route.path)
            proto_path = self._proto_path(config, route.proto)
            self.logger.debug("Compiling %s -> %s", proto_path, route.path)
            source = compiler.render(load_view(proto_path))
            pending.append((config.output.root / f"{route.path}{config.output.extension}", source))

        router_source = self._assemble_router(config, table, outcome.orphaned_routes)
        pending.append((config.output.router_path, router_source))

        for target, source in pending:
            outcome.files.append(self._emit(target, source, dry_run=dry_run))

        self.logger.info(
            "Build finished: %d files, %d changed%s",
            len(outcome.files),
            len(outcome.changed),
            " (dry-run)" if dry_run else "",
        )
        return outcome

    def render_view_file(self, proto_path: str, project_path: str = ".") -> str:
        """Render a single view proto using the project's libraries."""
        config = self._load_config(Path(project_path).expanduser().resolve())
        return self._build_compiler(config).render(load_view(Path(proto_path)))

    def render_router_file(
        self, index_path: str, project_path: str = ".", *, strict: Optional[bool] = None
    ) -> str:
        """Render the router for a route index file."""
        config = self._load_config(Path(project_path).expanduser().resolve())
        if strict is not None:
            config.router.strict = strict
        table = load_route_table(Path(index_path))
        return self._assemble_router(config, table, [])

    def _load_config(self, project_path: Path) -> JsxGenConfig:
        try:
            return load_config(project_path)
        except ConfigError:
            self.logger.error("Invalid configuration in %s", project_path)
            raise

    @staticmethod
    def _build_compiler(config: JsxGenConfig) -> ViewCompiler:
        definitions = config.definitions
        return ViewCompiler(
            components=load_components(definitions.components_path),
            assets=load_assets(definitions.assets_path),
            content=load_content(definitions.content_path),
        )

    @staticmethod
    def _proto_path(config: JsxGenConfig, proto: str) -> Path:
        candidate = config.definitions.views_path / proto
        if not candidate.suffix:
            candidate = candidate.with_suffix(".yml")
        if not candidate.exists():
            raise FileNotFoundError(f"View proto not found: {candidate}")
        return candidate

    @staticmethod
    def _assemble_router(config: JsxGenConfig, table: RouteTable, orphans: List[Route]) -> str:
        def _on_orphan(route: Route) -> None:
            if config.router.strict:
                raise OrphanedRouteError(route)
            orphans.append(route)

        assembler = RouterAssembler(config.router.import_prefix, on_orphan=_on_orphan)
        return assembler.render_table(table)

    def _emit(self, target: Path, source: str, *, dry_run: bool) -> GeneratedFile:
        original = target.read_text(encoding="utf-8") if target.exists() else ""
        if original == source:
            self.logger.debug("%s is up to date", target)
            return GeneratedFile(path=target, changed=False)
        if dry_run:
            return GeneratedFile(
                path=target, changed=True, diff=self._render_diff(target.name, original, source)
            )
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(source, encoding="utf-8")
        self.logger.info("Wrote %s", target)
        return GeneratedFile(path=target, changed=True)

    @staticmethod
    def _render_diff(name: str, original: str, updated: str) -> str:
        diff = difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{name} (original)",
            tofile=f"{name} (updated)",
        )
        return "".join(diff)


__all__ = ["BuildOutcome", "GeneratedFile", "Orchestrator"]
