"""Match Summary - pure ranking and formatting of live matches.

Invariants:
    - Order is total: total_score desc, then start_time desc, then sequence desc
    - Ranks are 1-based and contiguous
    - Line format: "{rank}. {home_team} {home_score} - {away_team} {away_score}"
    - Empty input yields an empty list

Design Decisions:
    - Sort key tuple instead of chained comparators: one pass, stable
    - sequence as final key so identical timestamps never fall back to registry iteration order
"""

from collections.abc import Iterable

from scoreboard.core.match import Match

SUMMARY_LINE_FORMAT = "{rank}. {home_team} {home_score} - {away_team} {away_score}"


def summary_sort_key(match: Match) -> tuple:
    return (match.total_score, match.start_time, match.sequence)


def order_matches(matches: Iterable[Match]) -> list[Match]:
    """Highest total first; on ties the most recently started match ranks first."""
    return sorted(matches, key=summary_sort_key, reverse=True)


def format_summary_line(rank: int, match: Match) -> str:
    return SUMMARY_LINE_FORMAT.format(
        rank=rank,
        home_team=match.home_team,
        home_score=match.home_score,
        away_team=match.away_team,
        away_score=match.away_score,
    )


def build_summary(matches: Iterable[Match]) -> list[str]:
    """Rank and format. Pure, no IO."""
    return [
        format_summary_line(rank, match)
        for rank, match in enumerate(order_matches(matches), start=1)
    ]
