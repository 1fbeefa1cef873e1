"""Kong workspace metadata CLI.

Lists the workspaces of a Kong admin API, fetches each workspace's metadata
counts and prints per-workspace and total counts.

Usage:
    kong-meta                                   Totals for http://localhost:8001
    kong-meta --kong-addr http://kong:8001 --meta all
    kong-meta --headers 'x-admin-token:secret' --sort-by-count
"""

import logging
from typing import Optional

import click
from rich.console import Console

from kong_meta.core.config import build_request_headers, get_settings, resolve_admin_addr
from kong_meta.models.meta_models import MetaView
from kong_meta.renderers.table_renderer import render_report
from kong_meta.services.aggregator import aggregate_workspaces
from kong_meta.services.kong_service import KongAdminError, KongAdminService
from kong_meta.utils.logging import setup_logging

logger = logging.getLogger(__name__)

console = Console()


@click.command()
@click.option(
    "--kong-addr",
    default=None,
    metavar="URL",
    help="Kong admin URL (default: $KONG_ADMIN_ADDR or http://localhost:8001)",
)
@click.option(
    "--headers",
    "header",
    default=None,
    metavar="KEY:VALUE",
    help="Header sent with every metadata request, e.g. 'x-admin-token:token_value'",
)
@click.option(
    "--meta",
    "view",
    type=click.Choice([v.value for v in MetaView]),
    default=MetaView.COUNTS.value,
    show_default=True,
    help="Which table(s) to print",
)
@click.option("--sort-by-count", is_flag=True, help="Sort the totals table by ascending count")
@click.option("--log-level", default=None, help="Log level (default: $LOG_LEVEL or INFO)")
@click.version_option(version="0.1.0", prog_name="kong-meta")
def cli(
    kong_addr: Optional[str],
    header: Optional[str],
    view: str,
    sort_by_count: bool,
    log_level: Optional[str],
):
    """Summarize Kong workspace metadata counts."""
    settings = get_settings()
    setup_logging(log_level or settings.LOG_LEVEL)

    base_url = resolve_admin_addr(kong_addr, settings)
    headers = build_request_headers(header, settings)
    logger.info(f"Querying Kong admin API at {base_url}")

    with KongAdminService(base_url, headers=headers) as service:
        try:
            workspaces = service.list_workspaces()
        except KongAdminError as e:
            raise click.ClickException(f"Error getting workspaces: {e}") from e

        report = aggregate_workspaces(service, workspaces)

    render_report(report, MetaView(view), sort_by_count=sort_by_count, console=console)


if __name__ == "__main__":
    cli()
