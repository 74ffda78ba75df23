"""CLI entrypoints for jsxgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .loaders import DefinitionError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .routing import OrphanedRouteError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_project_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project",
        default=".",
        help="Project root holding .jsxgen.yml and the definition libraries.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsxgen",
        description="Compile declarative page and route definitions into React sources.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also append log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Generate every routed view and the router for a project.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    build_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview source changes without writing files.",
    )

    view_parser = subparsers.add_parser(
        "view",
        help="Print the source generated for a single view proto.",
    )
    _add_verbose_option(view_parser, suppress_default=True)
    _add_project_option(view_parser)
    view_parser.add_argument("proto", help="Path to the view proto file.")

    router_parser = subparsers.add_parser(
        "router",
        help="Print the router generated for a route index.",
    )
    _add_verbose_option(router_parser, suppress_default=True)
    _add_project_option(router_parser)
    router_parser.add_argument("index", help="Path to the route index file.")
    router_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a route names a layout that does not exist.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing the compilers.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for jsxgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    orchestrator = Orchestrator()

    if args.command == "build":
        dry_run = bool(getattr(args, "dry_run", False))
        try:
            outcome = orchestrator.run_build(args.path, dry_run=dry_run)
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except (ConfigError, DefinitionError, OrphanedRouteError) as exc:
            parser.exit(1, f"jsxgen build failed: {exc}\nRun with --verbose for more details.\n")
        if not outcome.changed:
            message = "Sources already up to date"
            if dry_run:
                message += " (dry-run)"
            print(message)
        elif dry_run:
            print("Source changes (dry-run):")
            for item in outcome.changed:
                print(item.diff or "(no diff)")
        else:
            for item in outcome.changed:
                print(f"Wrote {_relativize(item.path)}")
    elif args.command == "view":
        try:
            source = orchestrator.render_view_file(args.proto, args.project)
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except (ConfigError, DefinitionError) as exc:
            parser.exit(1, f"jsxgen view failed: {exc}\n")
        sys.stdout.write(source)
    elif args.command == "router":
        try:
            source = orchestrator.render_router_file(
                args.index, args.project, strict=True if args.strict else None
            )
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except (ConfigError, DefinitionError, OrphanedRouteError) as exc:
            parser.exit(1, f"jsxgen router failed: {exc}\n")
        sys.stdout.write(source)
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
