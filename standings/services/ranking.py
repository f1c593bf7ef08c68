"""Peak aggregation and competition ranking.

Both functions are pure: they hold no state, perform no I/O and do not
validate their input. Scores are expected to be non-negative and finite,
which the pydantic schemas enforce wherever records enter the application.
"""

from collections.abc import Iterable

from standings.schemas.leaderboard import LeaderboardEntry, RankedEntry, TiebreakKey
from standings.schemas.placement import PeakResult, PlacementRecord


def compute_peaks(records: Iterable[PlacementRecord]) -> PeakResult:
    """Reduce one subject's placements to the highest power per category.

    All records are assumed to belong to the same subject.
    """
    peaks: dict[str, float] = {}
    for record in records:
        best = peaks.get(record.category)
        if best is None or record.power_value > best:
            peaks[record.category] = record.power_value
    return peaks


def _sort_key(entry: LeaderboardEntry) -> tuple[float, int] | tuple[float, int, TiebreakKey]:
    # Keyed entries sort ahead of unkeyed ones of the same power
    if entry.tiebreak_key is None:
        return (-entry.power, 1)
    return (-entry.power, 0, entry.tiebreak_key)


def rank(entries: Iterable[LeaderboardEntry]) -> list[RankedEntry]:
    """Order entries by power and assign standard competition ranks.

    Sorting is stable: power descending, then ``tiebreak_key`` ascending,
    then input order. Entries with equal power and equal ``tiebreak_key``
    share the rank of the first of them, and the next entry's rank is its
    1-based position (50, 50, 10 ranks as 1, 1, 3).

    Any ``placement_rank`` already present on the input is ignored.
    """
    ordered = sorted(entries, key=_sort_key)

    ranked: list[RankedEntry] = []
    current_rank = 0
    previous: tuple[float, TiebreakKey | None] | None = None
    for position, entry in enumerate(ordered, start=1):
        group = (entry.power, entry.tiebreak_key)
        if group != previous:
            current_rank = position
            previous = group

        fields = {name: getattr(entry, name) for name in LeaderboardEntry.model_fields}
        ranked.append(RankedEntry.model_construct(**fields, placement_rank=current_rank))

    return ranked
