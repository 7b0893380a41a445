"""CLI entrypoints for docsync commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from . import __version__
from .components import ComponentManager
from .config import load_config
from .errors import DocSyncError
from .logging import configure_logging, get_logger
from .manager import DocumentationManager
from .reporting import REPORTER_MODES, Reporter, create_reporter

Handler = Callable[[argparse.Namespace, Reporter], int]

_logger = get_logger("cli")


def _add_global_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    def _default(value: object) -> object:
        return argparse.SUPPRESS if suppress_default else value

    parser.add_argument(
        "-p",
        "--path",
        default=_default("."),
        help="Path to the app (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=_default(False),
        help="Enable verbose output.",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        default=_default(False),
        help="Force overwrite existing documentation.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str.lower,
        choices=REPORTER_MODES,
        default=_default("chalk"),
        help="Output format (chalk or json).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=_default(None),
        help="Also write diagnostic log records to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsync",
        description="Keep component documentation pages and navigation manifests in sync.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_global_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    docs_parser = subparsers.add_parser("docs", help="Documentation related commands.")
    _add_global_options(docs_parser, suppress_default=True)
    docs_commands = docs_parser.add_subparsers(dest="docs_command", required=True)

    generate_parser = docs_commands.add_parser(
        "generate", help="Generate documentation for components."
    )
    _add_global_options(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "-c",
        "--component",
        help="Generate documentation for a specific component (display name).",
    )
    generate_parser.set_defaults(handler=_run_docs_generate)

    check_parser = docs_commands.add_parser(
        "check", help="Check if documentation needs updating for a specific component."
    )
    _add_global_options(check_parser, suppress_default=True)
    check_parser.add_argument("component_name", help="Component file name without extension.")
    check_parser.set_defaults(handler=_run_docs_check)

    list_parser = docs_commands.add_parser(
        "list", help="List all components and their documentation status."
    )
    _add_global_options(list_parser, suppress_default=True)
    list_parser.set_defaults(handler=_run_docs_list)

    components_parser = subparsers.add_parser(
        "components", help="Component file commands."
    )
    _add_global_options(components_parser, suppress_default=True)
    component_commands = components_parser.add_subparsers(dest="components_command", required=True)

    component_list = component_commands.add_parser("list", help="List component files.")
    _add_global_options(component_list, suppress_default=True)
    component_list.set_defaults(handler=_run_components_list)

    component_create = component_commands.add_parser(
        "create", help="Create a component scaffold with documentation markers."
    )
    _add_global_options(component_create, suppress_default=True)
    component_create.add_argument("name", help="Component file name without extension.")
    component_create.set_defaults(handler=_run_components_create)

    component_export = component_commands.add_parser(
        "export", help="Export a component to exports/<name>.yaml."
    )
    _add_global_options(component_export, suppress_default=True)
    component_export.add_argument("name", help="Component file name without extension.")
    component_export.set_defaults(handler=_run_components_export)

    component_import = component_commands.add_parser(
        "import", help="Import a component from a YAML export."
    )
    _add_global_options(component_import, suppress_default=True)
    component_import.add_argument("source", help="Path to the YAML export file.")
    component_import.set_defaults(handler=_run_components_import)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docsync commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    reporter = create_reporter(args.output)
    handler: Handler = args.handler

    try:
        status = handler(args, reporter)
    except DocSyncError as exc:
        reporter.error(f"Error: {exc}")
        status = 1
    except OSError as exc:
        reporter.error(f"Error: {exc}")
        status = 1
    except Exception as exc:  # pragma: no cover - defensive guard
        _logger.debug("Unhandled failure", exc_info=True)
        reporter.error(f"Error: {exc}")
        status = 1

    if reporter.emits_document:
        print(reporter.format_output())
    if status:
        parser.exit(status)


def _build_manager(args: argparse.Namespace, reporter: Reporter) -> DocumentationManager:
    root = Path(args.path).expanduser().resolve()
    manager = DocumentationManager(
        root,
        reporter,
        config=load_config(root),
        verbose=bool(args.verbose),
        force=bool(args.force),
    )
    layout = manager.initialize()
    if args.verbose:
        reporter.info(f"App path: {layout.root}")
        reporter.info(f"Docs path: {layout.docs_dir}")
    return manager


def _build_component_manager(args: argparse.Namespace) -> ComponentManager:
    root = Path(args.path).expanduser().resolve()
    config = load_config(root)
    return ComponentManager(
        root,
        components_dir=config.components_dir,
        extension=config.component_extension,
        force=bool(args.force),
    )


def _run_docs_generate(args: argparse.Namespace, reporter: Reporter) -> int:
    manager = _build_manager(args, reporter)
    result = manager.generate_documentation(args.component)
    return 0 if result.ok else 1


def _run_docs_check(args: argparse.Namespace, reporter: Reporter) -> int:
    manager = _build_manager(args, reporter)
    manager.check_if_documentation_needs_update(args.component_name)
    return 0


def _run_docs_list(args: argparse.Namespace, reporter: Reporter) -> int:
    manager = _build_manager(args, reporter)
    for info in manager.list_components():
        if info.metadata is not None:
            status = "Documented" if info.has_documentation else "Not documented"
            reporter.log(f"{info.metadata.display_name}: {status}")
        else:
            reporter.warn(f"{info.filename}: No metadata found")
    return 0


def _run_components_list(args: argparse.Namespace, reporter: Reporter) -> int:
    for name in _build_component_manager(args).list_components():
        reporter.log(name)
    return 0


def _run_components_create(args: argparse.Namespace, reporter: Reporter) -> int:
    path = _build_component_manager(args).create_component(args.name)
    reporter.success(f"Component created at {_relativize(path)}")
    return 0


def _run_components_export(args: argparse.Namespace, reporter: Reporter) -> int:
    path = _build_component_manager(args).export_component(args.name)
    reporter.success(f"Component {args.name} exported to {_relativize(path)}")
    return 0


def _run_components_import(args: argparse.Namespace, reporter: Reporter) -> int:
    path = _build_component_manager(args).import_component(Path(args.source))
    reporter.success(f"Component imported to {_relativize(path)}")
    return 0


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
