"""Derived standings metrics: games back, pythagorean and projected wins."""

from collections import defaultdict
from collections.abc import Callable, Hashable, Sequence
from typing import Protocol

PYTHAGOREAN_EXPONENT = 1.83


class WinLossRecord(Protocol):
    wins: int
    losses: int


def calculate_projected_wins(
    wins: int,
    games_played: int,
    total_games: int = 162,
    fallback: float = 0.0,
    for_display: bool = True,
) -> float:
    """
    Linear extrapolation of the current pace over a full season.

    Returns fallback (the team's win-total line, or 0) before the first game.
    """
    if games_played <= 0:
        return fallback

    projected = (wins / games_played) * total_games
    return round(projected, 1) if for_display else projected


def calculate_pythagorean_win_pct(runs_scored: int, runs_allowed: int) -> float:
    """RS^1.83 / (RS^1.83 + RA^1.83); 0.5 when no runs have been scored or allowed."""
    scored = max(runs_scored, 0) ** PYTHAGOREAN_EXPONENT
    allowed = max(runs_allowed, 0) ** PYTHAGOREAN_EXPONENT
    if scored + allowed == 0:
        return 0.5
    return scored / (scored + allowed)


def calculate_pythagorean_wins(runs_scored: int, runs_allowed: int, games_played: int) -> float:
    """Pythagorean win estimate scaled to games played, always within [0, games_played]."""
    if games_played <= 0:
        return 0.0
    return round(calculate_pythagorean_win_pct(runs_scored, runs_allowed) * games_played, 1)


def calculate_games_back(
    leader_wins: int,
    leader_losses: int,
    wins: int,
    losses: int,
) -> str:
    """Half-game deficit to the leader: "-" when level or ahead, else "3" / "3.5"."""
    deficit = ((leader_wins - wins) + (losses - leader_losses)) / 2
    if deficit <= 0:
        return "-"
    if deficit.is_integer():
        return str(int(deficit))
    return f"{deficit:.1f}"


def assign_games_back(
    records: Sequence[WinLossRecord],
    group_key: Callable[[WinLossRecord], Hashable],
) -> list[str]:
    """
    Compute games back for every record against the leader of its group.

    Args:
        records: Anything with wins/losses
        group_key: Returns the grouping key (e.g. division id)

    Returns:
        Games-back strings aligned with records
    """
    groups: dict[Hashable, list[WinLossRecord]] = defaultdict(list)
    for record in records:
        groups[group_key(record)].append(record)

    leaders = {
        key: max(members, key=lambda r: r.wins - r.losses)
        for key, members in groups.items()
    }

    return [
        calculate_games_back(
            leaders[group_key(record)].wins,
            leaders[group_key(record)].losses,
            record.wins,
            record.losses,
        )
        for record in records
    ]
