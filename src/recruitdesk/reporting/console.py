"""Rich-powered console output."""

from __future__ import annotations

from collections.abc import Sequence

from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from recruitdesk.evaluation.selection import SelectionState
from recruitdesk.models import Acknowledgment, CandidateRecord, CandidateView, ViewParams
from recruitdesk.preferences.catalog import METRIC_CATEGORIES, MetricSpec, group_by_category
from recruitdesk.reporting.presentation import (
    contact_details,
    display_identity,
    intent_style,
    status_style,
)

_console = Console()

_TREND_ARROWS = {"up": "[green]▲[/green]", "down": "[red]▼[/red]", "neutral": "[grey62]■[/grey62]"}
_ACK_STYLES = {"success": "bold green", "info": "cyan", "warning": "bold yellow"}


def print_banner(program_id: str) -> None:
    """Display the startup banner."""
    _console.print(
        Panel.fit(
            f"[bold cyan]RecruitDesk[/bold cyan]  |  Applicant dashboard for {program_id}",
            border_style="cyan",
        )
    )


def _checkbox_header(view: CandidateView) -> str:
    summary = view.selection_summary
    if summary.all_selected:
        return "☑"
    if summary.indeterminate:
        return "▣"
    return "☐"


def _sort_label(params: ViewParams, key: str, title: str) -> str:
    if params.sort.key != key:
        return title
    return f"{title} {'↓' if params.sort.descending else '↑'}"


def print_empty_state(params: ViewParams) -> None:
    _console.print("[dim]No candidates match the current search and filters.[/dim]")
    if params.search_term or params.filters.is_active:
        _console.print("[dim]Clear the search term and filters to see every candidate.[/dim]")


def print_candidate_table(
    view: CandidateView,
    params: ViewParams,
    selection: SelectionState | None = None,
) -> None:
    """Render the table presentation of *view*."""
    if view.is_empty:
        print_empty_state(params)
        return

    if selection is None:
        selection = SelectionState()
    table = Table(
        title=f"Candidates ({view.visible_count} of {view.total_count})",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column(_checkbox_header(view), justify="center")
    table.add_column("Candidate", style="bold")
    table.add_column(_sort_label(params, "match_score", "Match"), justify="right")
    table.add_column(_sort_label(params, "program", "Program"))
    table.add_column(_sort_label(params, "intent", "Intent"))
    table.add_column(_sort_label(params, "status", "Status"))
    table.add_column(_sort_label(params, "activity", "Activity"))
    table.add_column("Skills")
    table.add_column("★", justify="center")

    for record in view.visible_records:
        intent = intent_style(record.intent)
        status = status_style(record.status)
        table.add_row(
            "☑" if record.id in selection else "☐",
            escape(display_identity(record)),
            f"{record.match_score}%",
            escape(record.program),
            f"[{intent}]{escape(record.intent)}[/{intent}]",
            f"[{status}]{escape(record.status or '-')}[/{status}]",
            escape(record.activity),
            escape(", ".join(record.skills)),
            "★" if record.favorite else "",
        )

    _console.print(table)
    summary = view.selection_summary
    if summary.selected_count:
        _console.print(f"[cyan]{summary.selected_count} selected[/cyan]")


def print_candidate_cards(view: CandidateView, params: ViewParams) -> None:
    """Render the card-grid presentation of *view*."""
    if view.is_empty:
        print_empty_state(params)
        return

    cards = []
    for record in view.visible_records:
        intent = intent_style(record.intent)
        lines = [
            f"[bold]{record.match_score}% match[/bold]  [{intent}]{escape(record.intent)}[/{intent}]",
            escape(record.program),
        ]
        if record.location:
            lines.append(escape(record.location))
        if record.skills:
            lines.append("[dim]" + escape(", ".join(record.skills)) + "[/dim]")
        for method, value in contact_details(record).items():
            lines.append(f"{method}: {escape(value)}")
        lines.append(f"[dim]{escape(record.activity)}[/dim]")
        title = escape(display_identity(record)) + (" ★" if record.favorite else "")
        cards.append(Panel("\n".join(lines), title=title, width=36))

    _console.print(Columns(cards))


def print_metrics_bar(metrics: Sequence[MetricSpec], group: bool = False) -> None:
    """Display selected metrics, optionally grouped by category."""
    if not metrics:
        _console.print("[dim]No metrics selected.[/dim]")
        return

    if group:
        for category, members in group_by_category({m.key: m for m in metrics}).items():
            _console.print(f"[bold]{METRIC_CATEGORIES.get(category, category)}[/bold]")
            print_metrics_bar(members)
        return

    panels = []
    for metric in metrics:
        body = f"[bold]{metric.value}[/bold]"
        if metric.change:
            body += f"  {_TREND_ARROWS.get(metric.trend, '')} {metric.change}"
        panels.append(Panel(body, title=metric.title, width=28))
    _console.print(Columns(panels))


def print_candidate_profile(record: CandidateRecord) -> None:
    """Render the detail view for one candidate."""
    intent = intent_style(record.intent)
    status = status_style(record.status)

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Match", f"{record.match_score}%")
    table.add_row("Program", escape(record.program))
    table.add_row("Intent", f"[{intent}]{escape(record.intent)}[/{intent}]")
    table.add_row("Status", f"[{status}]{escape(record.status or '-')}[/{status}]")
    table.add_row("Activity", escape(record.activity or "-"))
    table.add_row("Location", escape(record.location or "-"))
    table.add_row("Skills", escape(", ".join(record.skills) or "-"))
    details = contact_details(record)
    if details:
        for method, value in details.items():
            table.add_row(method.capitalize(), escape(value))
    else:
        table.add_row("Contact", "[dim]Hidden until revealed[/dim]")
    if record.notes:
        table.add_row("Notes", escape(record.notes))

    title = escape(display_identity(record)) + (" ★" if record.favorite else "")
    subtitle = escape(record.blind_id) if record.is_revealed and record.name else None
    _console.print(Panel(table, title=title, subtitle=subtitle, border_style="cyan"))


def print_acknowledgment(ack: Acknowledgment) -> None:
    style = _ACK_STYLES.get(ack.level, "")
    title = escape(ack.title)
    _console.print(f"[{style}]{title}[/{style}]" if style else title)
