#!/usr/bin/env python3
"""
CLI script printing the emissions dashboard to the terminal.

Usage:
    # Whole dataset
    python scripts/emissions_report.py

    # Search and filter like the dashboard widgets
    python scripts/emissions_report.py --search "adani jsw" --scope "Scope 1"
    python scripts/emissions_report.py --company "Tata Steel" --company "L&T"

    # Single facility panel
    python scripts/emissions_report.py --facility F003

    # Using uv
    uv run python scripts/emissions_report.py --limit 3
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path so we can import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.config import get_config
from app.pydantic_models import BreakdownEntry, FilterSpec
from app.services.loaders import DataIntegrityError, load_record_store
from app.services.selectors import EmissionSelector
from app.services.views import (
    analytics,
    dashboard_overview,
    facility_detail,
    period_change,
    period_trend,
)
from app.utils.constants import ALL_SCOPES, SCOPE_FILTER_VALUES, ConfigFile
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create Rich console
console = Console()


def print_header(text: str, style: str = "bold green"):
    """Print a formatted header using Rich Panel."""
    console.print(
        Panel(
            Text(text, justify="center", style=style),
            border_style="green",
            padding=(1, 2),
        )
    )


def print_filters(spec: FilterSpec):
    """Print the active filters."""
    filter_table = Table(show_header=False, box=None, padding=(0, 2))
    filter_table.add_column("Filter", style="bold yellow")
    filter_table.add_column("Value", style="green")

    filter_table.add_row("Search", spec.search_text or "-")
    filter_table.add_row(
        "Companies", ", ".join(sorted(spec.selected_companies)) or "All Companies"
    )
    filter_table.add_row(
        "Scope", "All Scopes" if spec.selected_scope == ALL_SCOPES else spec.selected_scope
    )

    console.print(filter_table)
    console.print()


def print_breakdown(title: str, entries: list[BreakdownEntry]):
    """Print a scope or gas breakdown."""
    table = Table(title=title, title_style="bold cyan", box=None, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Tons CO2e", justify="right")
    table.add_column("Share", justify="right", style="magenta")

    for entry in entries:
        table.add_row(entry.key, f"{entry.value:,.2f}", f"{entry.percentage:.1f}%")

    console.print(table)
    console.print()


def print_dashboard(selector: EmissionSelector, spec: FilterSpec, limit: int):
    """Print header figures, map listing, leaderboard, breakdowns and trend."""
    overview = dashboard_overview(selector.store.facilities, selector.store.records)

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column("Label", style="bold yellow")
    summary.add_column("Value", style="bold magenta")
    summary.add_row("Total Emissions", f"{round(overview.total_emissions):,} t CO2e")
    summary.add_row("Facilities", str(overview.facility_count))
    summary.add_row("Companies", str(overview.company_count))
    summary.add_row("Records", str(overview.record_count))
    console.print(summary)
    console.print()

    facilities = selector.get_facilities(spec)
    console.print(f"[bold]{len(facilities)} facilities match[/bold]")
    for facility in facilities:
        console.print(f"  [dim]{facility.id}[/dim] {facility.name} - {facility.description}")
    console.print()

    records = selector.get_records(spec)
    result = analytics(records, limit=limit)

    leaderboard = Table(title="TOP EMITTERS", title_style="bold cyan", box=None, padding=(0, 2))
    leaderboard.add_column("#", justify="right")
    leaderboard.add_column("Company", style="bold")
    leaderboard.add_column("Tons CO2e", justify="right")
    leaderboard.add_column("Share", justify="right", style="magenta")
    for entry in result.top_emitters:
        leaderboard.add_row(
            str(entry.rank), entry.name, f"{entry.total:,.2f}", f"{entry.percentage:.1f}%"
        )
    console.print(leaderboard)
    console.print()

    print_breakdown("SCOPE DISTRIBUTION", result.scope_breakdown)
    print_breakdown("GHG COMPOSITION", result.ghg_breakdown)

    trend = Table(title="QUARTERLY TREND", title_style="bold cyan", box=None, padding=(0, 2))
    trend.add_column("Period")
    trend.add_column("Tons CO2e", justify="right")
    for point in period_trend(records):
        trend.add_row(point.period, f"{point.value:,.2f}")
    console.print(trend)

    change = period_change(records)
    if change:
        console.print(
            f"  {change.current_period} vs {change.previous_period}: "
            f"[bold]{change.change_percentage:+.1f}%[/bold] ({change.direction.value})"
        )
    console.print()


def print_facility(selector: EmissionSelector, facility_id: str, scope: str) -> bool:
    """Print the single-facility panel. Returns False for unknown ids."""
    facility = selector.get_facility(facility_id)
    if facility is None:
        console.print(f"[bold red]Facility {facility_id} not found[/bold red]")
        return False

    detail = facility_detail(facility, selector.get_facility_records(facility_id), scope)

    print_header(f"{facility.name} ({facility.id}) - {facility.industry}", "bold cyan")
    console.print(f"  Total emissions: [bold]{detail.total_emissions:,.2f}[/bold] t CO2e")
    console.print(f"  Data points: {detail.facility.record_count}")
    if detail.period_change:
        console.print(
            f"  {detail.period_change.change_percentage:+.1f}% vs prev quarter "
            f"({detail.period_change.direction.value})"
        )
    console.print()

    print_breakdown("EMISSIONS BY SCOPE", detail.scope_breakdown)
    print_breakdown("GHG TYPE BREAKDOWN", detail.ghg_breakdown)

    table = Table(title="EMISSION RECORDS", title_style="bold cyan", box=None, padding=(0, 2))
    table.add_column("Period")
    table.add_column("Scope")
    table.add_column("Type")
    table.add_column("Tons", justify="right")
    for record in detail.records:
        table.add_row(
            record.reporting_period, record.scope, record.ghg_type, f"{record.emissions:,.2f}"
        )
    console.print(table)
    console.print()
    return True


def main():
    """Main entry point for the report script."""
    parser = argparse.ArgumentParser(
        description="Print the emissions dashboard for the bundled dataset"
    )
    parser.add_argument("--search", default="", help="Whitespace-separated search terms")
    parser.add_argument(
        "--company",
        action="append",
        default=[],
        help="Selected company name (repeatable)",
    )
    parser.add_argument(
        "--scope",
        default=ALL_SCOPES,
        choices=SCOPE_FILTER_VALUES,
        help="Scope filter (default: all)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Leaderboard size (default: from config)",
    )
    parser.add_argument("--facility", default=None, help="Show the panel of one facility")
    parser.add_argument(
        "--config",
        default=ConfigFile.DEVELOPMENT,
        help="Configuration file name (default: development.toml)",
    )

    args = parser.parse_args()

    print_header("ESG TERMINAL - Environmental Data Intelligence")

    try:
        config = get_config(args.config)
        store = load_record_store(config)
    except DataIntegrityError as e:
        logger.error(f"Loading dataset failed: {e}")
        console.print(
            Panel(
                f"[bold red]DATASET REJECTED[/bold red]\n\n[red]{e!s}[/red]",
                border_style="bold red",
            )
        )
        sys.exit(1)
    except FileNotFoundError as e:
        logger.error(f"Loading configuration failed: {e}")
        console.print(
            Panel(
                f"[bold red]CONFIG NOT FOUND[/bold red]\n\n[red]{e!s}[/red]",
                border_style="bold red",
            )
        )
        sys.exit(1)

    limit = args.limit
    if limit is None:
        limit = config.data.get("dashboard", {}).get("top_emitters_limit")

    spec = FilterSpec(
        search_text=args.search,
        selected_companies=args.company,
        selected_scope=args.scope,
    )
    selector = EmissionSelector(store)

    print_filters(spec)
    print_dashboard(selector, spec, limit)

    if args.facility and not print_facility(selector, args.facility, spec.selected_scope):
        sys.exit(1)


if __name__ == "__main__":
    main()
