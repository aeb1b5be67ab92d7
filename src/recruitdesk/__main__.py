"""Entry point: ``python -m recruitdesk``."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from recruitdesk.controller import CandidateViewController
from recruitdesk.exceptions import ConfigurationError, InvalidActionError, RecruitDeskError
from recruitdesk.models import FILTER_DIMENSIONS, SORT_KEYS, ViewParams
from recruitdesk.preferences.catalog import METRICS
from recruitdesk.preferences.store import SELECTION_KINDS, PreferenceStore
from recruitdesk.reporting.console import (
    print_acknowledgment,
    print_banner,
    print_candidate_cards,
    print_candidate_profile,
    print_candidate_table,
    print_metrics_bar,
)
from recruitdesk.reporting.data_export import export_to_file
from recruitdesk.settings import AppSettings
from recruitdesk.sources.base import CandidateSource
from recruitdesk.sources.demo import DemoCandidateProvider
from recruitdesk.sources.json_file import JsonFileCandidateSource

logger = logging.getLogger("recruitdesk")


def _configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_settings(path: str | None) -> AppSettings:
    try:
        return AppSettings.from_yaml(path)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def _source(settings: AppSettings) -> CandidateSource:
    if settings.data_file:
        return JsonFileCandidateSource(settings.data_file)
    return DemoCandidateProvider(settings.demo_count, settings.demo_seed)


def _controller(settings: AppSettings, args: argparse.Namespace) -> CandidateViewController:
    """Load candidates and replay the view options given on the command line."""
    controller = CandidateViewController(params=ViewParams(sort=settings.default_sort))
    controller.load(_source(settings))

    if args.search:
        controller.on_search_change(args.search)
    for dimension in FILTER_DIMENSIONS:
        for value in getattr(args, dimension) or []:
            controller.on_filter_toggle(dimension, value)
    for key in args.sort or []:
        controller.on_sort_change(key)
    for candidate_id in args.select or []:
        controller.on_selection_toggle(candidate_id)
    if args.select_all:
        controller.on_select_all_toggle()
    return controller


# ---- commands ----


def cmd_list(args: argparse.Namespace, settings: AppSettings) -> None:
    controller = _controller(settings, args)
    print_banner(settings.program_id)
    print_candidate_table(controller.view(), controller.params, controller.selection)


def cmd_cards(args: argparse.Namespace, settings: AppSettings) -> None:
    controller = _controller(settings, args)
    print_banner(settings.program_id)
    print_candidate_cards(controller.view(), controller.params)


def cmd_export(args: argparse.Namespace, settings: AppSettings) -> None:
    controller = _controller(settings, args)
    dest = export_to_file(controller.view(), args.output or settings.export_dir, args.format)
    print(dest)


def cmd_show(args: argparse.Namespace, settings: AppSettings) -> None:
    controller = CandidateViewController()
    controller.load(_source(settings))
    print_candidate_profile(controller.candidate(args.candidate_id))


def cmd_act(args: argparse.Namespace, settings: AppSettings) -> None:
    controller = CandidateViewController()
    controller.load(_source(settings))
    if args.action == "favorite":
        ack = controller.toggle_favorite(args.candidate_id)
    elif args.action == "reveal":
        ack = controller.reveal(args.candidate_id)
    elif args.action == "contact":
        ack = controller.contact(args.candidate_id, args.value or "message")
    else:
        if not args.value:
            raise InvalidActionError("status needs a new status value")
        ack = controller.change_status(args.candidate_id, args.value)
    print_acknowledgment(ack)


def cmd_metrics(args: argparse.Namespace, settings: AppSettings) -> None:
    store = PreferenceStore(settings.preferences_db, settings.max_metrics)
    try:
        keys = store.get_selection("metrics", settings.program_id)
    finally:
        store.close()
    print_banner(settings.program_id)
    print_metrics_bar([METRICS[k] for k in keys], group=args.group)


def cmd_prefs(args: argparse.Namespace, settings: AppSettings) -> None:
    store = PreferenceStore(settings.preferences_db, settings.max_metrics)
    program_id = settings.program_id
    try:
        if args.action == "show":
            selected = store.get_selection(args.kind, program_id)
        elif args.action == "set":
            selected = store.set_selection(args.kind, program_id, args.values)
        elif args.action == "select-category":
            selected = store.select_category(args.kind, program_id, args.values[0])
        elif args.action == "deselect-category":
            selected = store.deselect_category(args.kind, program_id, args.values[0])
        else:
            selected = store.reset(args.kind, program_id)
    finally:
        store.close()
    for key in selected:
        print(key)


def _add_view_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--search", default="", help="Case-insensitive search term")
    parser.add_argument("--intent", action="append", help="Intent filter value (repeatable)")
    parser.add_argument("--program", action="append", help="Program filter value (repeatable)")
    parser.add_argument("--status", action="append", help="Status filter value (repeatable)")
    parser.add_argument(
        "--sort",
        action="append",
        choices=SORT_KEYS,
        help="Sort key; repeat the same key to flip direction",
    )
    parser.add_argument("--select", action="append", help="Candidate id to check (repeatable)")
    parser.add_argument("--select-all", action="store_true", help="Toggle select-all on the visible rows")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="recruitdesk", description="RecruitDesk applicant dashboard")
    parser.add_argument("--settings", help="Path to settings.yaml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    lst = subparsers.add_parser("list", help="Show candidates as a table")
    _add_view_options(lst)
    lst.set_defaults(func=cmd_list)

    crd = subparsers.add_parser("cards", help="Show candidates as a card grid")
    _add_view_options(crd)
    crd.set_defaults(func=cmd_cards)

    exp = subparsers.add_parser("export", help="Export the current view to JSON or CSV")
    _add_view_options(exp)
    exp.add_argument("--format", choices=["json", "csv"], default="json")
    exp.add_argument("--output", help="Output directory (default: export_dir setting)")
    exp.set_defaults(func=cmd_export)

    shw = subparsers.add_parser("show", help="Show one candidate's profile")
    shw.add_argument("candidate_id")
    shw.set_defaults(func=cmd_show)

    act = subparsers.add_parser("act", help="Request an action on one candidate")
    act.add_argument("action", choices=["favorite", "reveal", "contact", "status"])
    act.add_argument("candidate_id")
    act.add_argument("value", nargs="?", help="Contact method or new status")
    act.set_defaults(func=cmd_act)

    met = subparsers.add_parser("metrics", help="Show the selected dashboard metrics")
    met.add_argument("--group", action="store_true", help="Group metrics by category")
    met.set_defaults(func=cmd_metrics)

    prf = subparsers.add_parser("prefs", help="Manage dashboard metric/chart/heatmap selections")
    prf.add_argument("action", choices=["show", "set", "select-category", "deselect-category", "reset"])
    prf.add_argument("kind", choices=SELECTION_KINDS)
    prf.add_argument("values", nargs="*", help="Keys for 'set', or a category name")
    prf.set_defaults(func=cmd_prefs)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "prefs" and args.action in ("select-category", "deselect-category") and not args.values:
        parser.error(f"prefs {args.action} needs a category name")

    try:
        settings = _load_settings(args.settings)
        args.func(args, settings)
    except RecruitDeskError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        logging.info("Interrupted by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
