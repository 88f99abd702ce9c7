"""Records consumed and produced by the injury redistribution engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Box score fields in display order
STAT_FIELDS: Tuple[str, ...] = (
    "points",
    "rebounds",
    "assists",
    "steals",
    "blocks",
    "turnovers",
    "fg_pct",
    "threes",
)

# Stats whose percentage change is reported under stat_increase_pct.
# FG% and turnovers are reported separately since a rise in either is not a gain.
INCREASE_STATS: Tuple[str, ...] = (
    "points",
    "rebounds",
    "assists",
    "steals",
    "blocks",
    "threes",
)


@dataclass(frozen=True)
class BoxScoreProfile:
    """Per-game box score rates. FG% uses the 0-100 scale."""

    points: float = 0.0
    rebounds: float = 0.0
    assists: float = 0.0
    steals: float = 0.0
    blocks: float = 0.0
    turnovers: float = 0.0
    fg_pct: float = 0.0
    threes: float = 0.0

    def get(self, stat: str) -> float:
        return getattr(self, stat)

    def to_dict(self, precision: Optional[int] = None) -> Dict[str, float]:
        values = asdict(self)
        if precision is None:
            return values
        return {key: round(value, precision) for key, value in values.items()}


@dataclass(frozen=True)
class TeammateRecord:
    """A healthy teammate and their current per-game production."""

    name: str
    position: str
    current_minutes: float
    current_usage: float
    stats: BoxScoreProfile = field(default_factory=BoxScoreProfile)


@dataclass(frozen=True)
class InjuredPlayer:
    """An injured player whose minutes and usage are redistributed.

    ``player``, ``team``, ``position``, ``injury`` and ``status`` are display
    metadata carried through from the roster source and ignored by the engine.
    """

    id: Any
    average_minutes: float
    usage_rate: float
    teammates: List[TeammateRecord] = field(default_factory=list)
    player: str = ""
    team: str = ""
    position: str = ""
    injury: str = ""
    status: str = ""

    @property
    def label(self) -> str:
        return self.player or str(self.id)


@dataclass(frozen=True)
class ProjectionResult:
    """Projected post-injury production for one teammate."""

    teammate: TeammateRecord
    additional_minutes: float
    additional_usage: float
    projected_minutes: float
    projected_usage: float
    usage_multiplier: float
    minute_increase_pct: int
    usage_increase_pct: int
    projected_stats: BoxScoreProfile
    # None when the current value is zero and the change is undefined
    stat_increase_pct: Dict[str, Optional[int]]
    fg_pct_change_pct: Optional[int]
    turnover_change_pct: Optional[int]

    @property
    def name(self) -> str:
        return self.teammate.name

    @property
    def position(self) -> str:
        return self.teammate.position

    @property
    def current_minutes(self) -> float:
        return self.teammate.current_minutes

    @property
    def current_usage(self) -> float:
        return self.teammate.current_usage

    @property
    def stats(self) -> BoxScoreProfile:
        return self.teammate.stats

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with absolute values rounded to one decimal for display."""
        return {
            "name": self.name,
            "position": self.position,
            "current_minutes": self.current_minutes,
            "current_usage": self.current_usage,
            "stats": self.stats.to_dict(),
            "additional_minutes": round(self.additional_minutes, 1),
            "additional_usage": round(self.additional_usage, 1),
            "projected_minutes": round(self.projected_minutes, 1),
            "projected_usage": round(self.projected_usage, 1),
            "minute_increase_pct": self.minute_increase_pct,
            "usage_increase_pct": self.usage_increase_pct,
            "projected_stats": self.projected_stats.to_dict(precision=1),
            "stat_increase_pct": dict(self.stat_increase_pct),
            "fg_pct_change_pct": self.fg_pct_change_pct,
            "turnover_change_pct": self.turnover_change_pct,
        }
