#!/usr/bin/env python3

import sys
import json
from datetime import date
from analytics import Filters, Period
from analytics.period import TYPE_FILTERS
from tools.dashboard import load_dashboard, render_dashboard, watch_dashboard
from logger import get_logger

logger = get_logger()


def _selection(args):
    """Period and filters from the common dashboard arguments."""
    try:
        period = Period.parse(args.month) if args.month else Period.of(date.today())
    except ValueError as e:
        logger.error(f"Invalid month '{args.month}': {e}")
        sys.exit(1)
    return period, Filters(text=args.search or "", type=args.type)


def cmd_show(args, services):
    """Print the dashboard for a month once."""
    period, filters = _selection(args)
    dashboard = load_dashboard(services, period, filters)

    if args.json:
        print(json.dumps(dashboard.to_dict(), ensure_ascii=False, indent=2))
        return

    print("\n".join(render_dashboard(dashboard)))


def cmd_watch(args, services):
    """Refresh the dashboard on a fixed interval until interrupted."""
    period, filters = _selection(args)
    interval = args.interval or services.config.refresh_interval
    logger.info(f"Refreshing every {interval}s (Ctrl+C to stop)")

    try:
        watch_dashboard(services, period, filters, interval=interval, cycles=args.cycles)
    except KeyboardInterrupt:
        logger.info("Stopped.")


def _add_selection_arguments(parser):
    parser.add_argument("--month", help="Month to show (YYYY/MM, default: current)")
    parser.add_argument("--search", help="Case-insensitive description filter")
    parser.add_argument("--type", choices=TYPE_FILTERS, default="ALL")


def setup_parser(subparsers):
    """Setup dashboard subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "dashboard",
        help="Show monthly aggregates",
        description="Totals, trends, rankings and insights for a month",
    )

    dashboard_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available dashboard commands",
        dest="subcommand",
        required=True,
    )

    # dashboard show
    show_parser = dashboard_subparsers.add_parser("show", help="Print the dashboard")
    _add_selection_arguments(show_parser)
    show_parser.add_argument("--json", action="store_true", help="Print as JSON")
    show_parser.set_defaults(func=cmd_show)

    # dashboard watch
    watch_parser = dashboard_subparsers.add_parser(
        "watch", help="Refresh the dashboard periodically"
    )
    _add_selection_arguments(watch_parser)
    watch_parser.add_argument(
        "--interval", type=float, help="Seconds between refreshes (default: from config)"
    )
    watch_parser.add_argument(
        "--cycles", type=int, help="Stop after this many refreshes"
    )
    watch_parser.set_defaults(func=cmd_watch)
