"""Rendering helpers using Rich."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.table import Table

from tools.injury.batch import InjuryReport
from tools.injury.injury_models import ProjectionResult
from tools.utils.stat_mappings import get_display_name
from tools.utils.stat_thresholds import get_thresholds

# Column order for projected box scores
PROJECTION_STAT_COLUMNS: Sequence[str] = (
    "points",
    "rebounds",
    "assists",
    "threes",
    "steals",
    "blocks",
    "fg_pct",
    "turnovers",
)


def _get_stat_color(stat_name: str, value: float) -> str:  # pylint: disable=too-many-return-statements
    """Return color based on stat thresholds for fantasy basketball stats.

    Thresholds are configurable via environment variables in .env file.

    Args:
        stat_name: Name of the stat (e.g., "3PM", "PTS", "FG%")
        value: Numeric value of the stat

    Returns:
        Rich color string ("white", "yellow", "green", or "red")

    Default Color Thresholds (customizable via .env):
        3PM: <2 white, 2-3 yellow, ≥4 green
        PTS: <5 white, 5-12 yellow, ≥13 green
        REB: <5 white, 5-8 yellow, ≥9 green
        AST: <3 white, 3-5 yellow, ≥6 green
        STL/BLK: <2 white, 2 yellow, ≥3 green
        TO: <2 green, 2-3 yellow, ≥4 red (inverse: lower is better)
        FG%: <30 red, 30-49 yellow, ≥50 green
        USG%: <15 white, 15-24 yellow, ≥25 green
        Minute: <10 white, 10-17 yellow, ≥18 green
    """
    thresholds = get_thresholds()

    if stat_name == "3PM":
        if value < thresholds.threes_yellow_min:
            return "white"
        if value < thresholds.threes_green_min:
            return "yellow"
        return "green"
    if stat_name == "PTS":
        if value < thresholds.pts_yellow_min:
            return "white"
        if value < thresholds.pts_green_min:
            return "yellow"
        return "green"
    if stat_name == "REB":
        if value < thresholds.reb_yellow_min:
            return "white"
        if value < thresholds.reb_green_min:
            return "yellow"
        return "green"
    if stat_name == "AST":
        if value < thresholds.ast_yellow_min:
            return "white"
        if value < thresholds.ast_green_min:
            return "yellow"
        return "green"
    if stat_name == "STL":
        if value < thresholds.stl_yellow_min:
            return "white"
        if value < thresholds.stl_green_min:
            return "yellow"
        return "green"
    if stat_name == "BLK":
        if value < thresholds.blk_yellow_min:
            return "white"
        if value < thresholds.blk_green_min:
            return "yellow"
        return "green"
    if stat_name == "TO":
        if value < thresholds.to_green_max:
            return "green"
        if value < thresholds.to_yellow_max:
            return "yellow"
        return "red"
    if stat_name == "FG%":
        if value < thresholds.fg_pct_red_max:
            return "red"
        if value < thresholds.fg_pct_yellow_max:
            return "yellow"
        return "green"
    if stat_name == "USG%":
        if value < thresholds.usg_pct_yellow_min:
            return "white"
        if value < thresholds.usg_pct_green_min:
            return "yellow"
        return "green"
    if stat_name == "Minute":
        if value < thresholds.min_yellow_min:
            return "white"
        if value < thresholds.min_green_min:
            return "yellow"
        return "green"
    return "white"


def _get_change_color(stat_name: str, change_pct: Optional[int]) -> str:
    """Color a percentage change. Turnover increases are a cost, so TO is inverse."""
    if not change_pct:
        return "grey37"
    if stat_name == "TO":
        return "orange3" if change_pct > 0 else "green"
    return "green" if change_pct > 0 else "red"


def format_change(stat_name: str, change_pct: Optional[int]) -> str:
    """Format a percentage change as colored ``+12%``; ``-`` when undefined."""
    if change_pct is None:
        return "[grey37]-[/grey37]"
    color = _get_change_color(stat_name, change_pct)
    return f"[{color}]{change_pct:+d}%[/{color}]"


def _format_projection_cell(
    stat_name: str, current: float, projected: float, change_pct: Optional[int]
) -> str:
    color = _get_stat_color(stat_name, projected)
    return (
        f"{current:.1f} → [{color}]{projected:.1f}[/{color}] "
        f"{format_change(stat_name, change_pct)}"
    )


def _change_for(result: ProjectionResult, field_name: str) -> Optional[int]:
    if field_name == "fg_pct":
        return result.fg_pct_change_pct
    if field_name == "turnovers":
        return result.turnover_change_pct
    return result.stat_increase_pct.get(field_name)


def render_projection_table(report: InjuryReport) -> Table:
    """Render one injury's teammate projections.

    Args:
        report: Batch report for a single injury

    Returns:
        Rich Table with current → projected values and percentage changes
    """
    injury = report.injury
    details = " • ".join(part for part in (injury.team, injury.position) if part)
    title = f"{injury.label}" + (f" ({details})" if details else "")
    if injury.injury or injury.status:
        title += f" | {' - '.join(p for p in (injury.injury, injury.status) if p)}"

    table = Table(
        title=title,
        caption=(
            f"{injury.average_minutes:.1f} MPG, {injury.usage_rate:.1f}% usage to redistribute"
        ),
    )
    table.add_column("Teammate", justify="left", style="cyan")
    table.add_column("Pos", justify="center")
    table.add_column("MIN", justify="right")
    table.add_column("USG%", justify="right")
    for field_name in PROJECTION_STAT_COLUMNS:
        table.add_column(get_display_name(field_name), justify="right")

    for result in report.results:
        row = [
            result.name,
            result.position,
            _format_projection_cell(
                "Minute",
                result.current_minutes,
                result.projected_minutes,
                result.minute_increase_pct,
            ),
            _format_projection_cell(
                "USG%",
                result.current_usage,
                result.projected_usage,
                result.usage_increase_pct,
            ),
        ]
        for field_name in PROJECTION_STAT_COLUMNS:
            row.append(
                _format_projection_cell(
                    get_display_name(field_name),
                    result.stats.get(field_name),
                    result.projected_stats.get(field_name),
                    _change_for(result, field_name),
                )
            )
        table.add_row(*row)

    return table
