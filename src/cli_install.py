import argparse
import logging
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from src.entities.InstallResult import InstallStatus, RunSummary
from src.exceptions import CatalogError, ConfigurationError
from src.ports.catalog.catalog_port import CatalogPort

_STATUS_STYLE = {
    InstallStatus.SUCCESS: ("installed", "green"),
    InstallStatus.ALREADY_INSTALLED: ("already present", "cyan"),
    InstallStatus.FAILURE: ("failed", "red"),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bench-install",
        description=(
            "Install the GPU benchmarking toolset with winget, falling back to direct downloads."
        ),
    )
    parser.add_argument(
        "--only",
        action="append",
        metavar="NAME",
        default=None,
        help="Install only this application (repeatable, case-insensitive)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the catalog and exit without installing",
    )
    parser.add_argument(
        "--require-admin",
        action="store_true",
        help="Abort before installing anything unless running elevated",
    )
    parser.add_argument(
        "--log-path",
        default=None,
        help="Append-only log file (default: BENCH_INSTALL_LOG_PATH or temp dir)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log package manager commands"
    )
    return parser


def render_catalog(console: Console, catalog: CatalogPort) -> None:
    table = Table(title="Catalog", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Application")
    table.add_column("Package id")
    table.add_column("Version")
    table.add_column("Fallback")
    for index, app in enumerate(catalog.descriptors(), start=1):
        table.add_row(
            str(index),
            app.name,
            app.package_id or "-",
            app.version or "latest",
            "yes" if app.has_fallback else "-",
        )
    console.print(table)


def render_summary(console: Console, summary: RunSummary) -> None:
    table = Table(title="Installation summary", box=box.SIMPLE_HEAVY)
    table.add_column("Application")
    table.add_column("Status")
    table.add_column("Method")
    table.add_column("Details")
    for result in summary.results:
        label, style = _STATUS_STYLE[result.status]
        table.add_row(
            result.name,
            f"[{style}]{label}[/{style}]",
            result.method.value.replace("_", " "),
            result.message or "",
        )
    console.print(table)
    if summary.log_path:
        console.print(f"Log file: {summary.log_path}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()

    try:
        from src.config.settings import Settings
        from src.container import DependencyContainer

        container = DependencyContainer(Settings())
        catalog = container.get_catalog()
    except (ConfigurationError, CatalogError) as e:
        console.print(f"[red]Error:[/red] {e}")
        return 2

    if args.list:
        render_catalog(console, catalog)
        return 0

    from src.utils.run_log import run_logging

    log_path = args.log_path or container.settings.log_path
    level = logging.DEBUG if args.verbose else logging.INFO
    try:
        with run_logging(log_path, console=console, level=level) as logger:
            status = container.get_check_privileges_use_case().execute()
            if args.require_admin and not status.is_privileged:
                logger.error("Administrator privileges are required; nothing was installed")
                return 2
            try:
                summary = container.get_install_catalog_use_case().execute(
                    only=args.only, log_path=log_path
                )
            except CatalogError as e:
                logger.error(str(e))
                return 2
    except OSError as e:
        console.print(f"[red]Cannot open log file {log_path}:[/red] {e}")
        return 2

    render_summary(console, summary)
    return 0 if summary.all_succeeded else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
