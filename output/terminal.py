"""Terminal output using Rich library."""
from datetime import datetime
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from display_names import category_title, shorten_part_name
from models import (
    CompatibilityResult, MonthlyCost, PartSelection, PowerResult,
    STATUS_COMPATIBLE, STATUS_WAITING,
)

_STATUS_STYLES = {
    STATUS_COMPATIBLE: ("OK", "green"),
    STATUS_WAITING: ("WAITING", "yellow"),
}
_SEVERITY_STYLES = {"critical": "bold red", "high": "red", "medium": "yellow", "low": "dim"}


def _score_style(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def render_build_report(
    selection: PartSelection,
    compatibility: CompatibilityResult,
    power: PowerResult,
    cost: MonthlyCost | None = None,
) -> str:
    """Render a build evaluation as Rich tables. Returns string representation."""
    console = Console(record=True, width=140)

    now = datetime.now().strftime("%Y-%m-%d %H:%M")
    console.print(f"\n[bold]PC Build Checker: {now}    Parts: {len(selection)}[/bold]\n")

    if not len(selection):
        console.print("[bold red]No parts selected.[/bold red]")
    else:
        parts = Table(show_header=True, header_style="bold cyan")
        parts.add_column("Category", width=14)
        parts.add_column("Part", width=44)
        parts.add_column("Price", justify="right", width=10)
        parts.add_column("Max W", justify="right", width=7)
        draw = {c.category: c.max_power for c in power.consumptions}
        for category, part in selection.items():
            parts.add_row(
                category_title(category),
                shorten_part_name(part.name),
                f"{part.price:,}",
                f"{draw[category]:.0f}" if category in draw else "—",
            )
        parts.add_row("", Text("Total", style="bold"), f"{selection.total_price():,}", "")
        console.print(parts)

    checks = Table(show_header=True, header_style="bold cyan", title="Compatibility")
    checks.add_column("Check", width=12)
    checks.add_column("Status", width=12)
    checks.add_column("Details", width=90)
    for name, check in compatibility.details.all():
        label, style = _STATUS_STYLES.get(check.status, ("FAIL", "red"))
        checks.add_row(name, Text(label, style=style), Text(check.message))
    console.print(checks)

    style = _score_style(compatibility.score)
    verdict = "compatible" if compatibility.is_compatible else "not compatible yet"
    console.print(f"[bold]Score:[/bold] [{style}]{compatibility.score}/100[/{style}] ({verdict})")

    for issue in compatibility.issues:
        sev = _SEVERITY_STYLES.get(issue.severity, "white")
        console.print(f"  [{sev}]✗ {escape(issue.message)}[/{sev}] ({escape(issue.solution)})")
    for warning in compatibility.warnings:
        sev = _SEVERITY_STYLES.get(warning.priority, "white")
        console.print(f"  [{sev}]! {escape(warning.message)}[/{sev}]")

    console.print(
        f"\n[bold]Power:[/bold] idle {power.total_idle_power:.0f}W / "
        f"typical {power.total_base_power:.0f}W / peak {power.total_max_power:.0f}W"
    )
    psu_text = f"{power.psu_capacity}W ({power.psu_load_percentage:.0f}% load)" if power.psu_capacity else "none"
    console.print(
        f"[bold]Recommended PSU:[/bold] {power.recommended_psu}W    "
        f"[bold]Selected:[/bold] {psu_text}    "
        f"[bold]Efficiency:[/bold] {power.power_efficiency}%    "
        f"[bold]Optimal:[/bold] {'yes' if power.is_optimal else 'no'}"
    )
    for warning in power.warnings:
        sev = _SEVERITY_STYLES.get(warning.severity, "white")
        console.print(f"  [{sev}]! {escape(warning.message)}[/{sev}] ({escape(warning.suggestion)})")

    if cost is not None:
        console.print(
            f"\n[bold]Monthly electricity:[/bold] {cost.total:,.0f} "
            f"(idle {cost.idle:,.0f}, normal {cost.normal:,.0f}, peak {cost.peak:,.0f})"
        )

    return console.export_text()
