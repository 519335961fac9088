"""Selection of the departures to display for a stop."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from resseltrafiken.domain.models.processed_departure import ProcessedDeparture
from resseltrafiken.domain.models.time_of_day import MINUTES_PER_DAY, TimeOfDay

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Candidate:
    time: str
    diff: int  # Minutes from now, negative when already passed
    is_past: bool
    is_today: bool


def _build_candidates(raw_times: Sequence[str], now_minutes: int) -> list[_Candidate]:
    """Expand raw times into today/tomorrow candidates.

    A published time that has already passed today is also the next
    occurrence tomorrow, so it yields one candidate for each.
    """
    candidates: list[_Candidate] = []
    for raw_time in raw_times:
        parsed = TimeOfDay.try_parse(raw_time)
        if parsed is None:
            logger.warning(f"Skipping invalid departure time {raw_time!r}")
            continue
        label = str(parsed)
        diff = parsed.minutes - now_minutes
        if diff < 0:
            candidates.append(_Candidate(label, diff, is_past=True, is_today=True))
            candidates.append(
                _Candidate(label, diff + MINUTES_PER_DAY, is_past=False, is_today=False)
            )
        else:
            candidates.append(_Candidate(label, diff, is_past=False, is_today=True))
    return candidates


def process_schedule_times(
    raw_times: Sequence[str], now: datetime, max_count: int
) -> list[ProcessedDeparture]:
    """Select a bounded, chronologically ordered window of departures around now.

    The window starts at the next departure and continues with the following
    ones. When fewer than max_count future departures exist, the most recent
    past departures fill the remaining slots in front of the next departure.

    Args:
        raw_times: Published "HH:MM" departure times for one stop.
        now: Current local time.
        max_count: Maximum number of departures to return.

    Returns:
        Departures tagged with whether they fall on today or tomorrow.
    """
    if max_count <= 0 or not raw_times:
        return []

    candidates = _build_candidates(raw_times, TimeOfDay.from_datetime(now).minutes)
    candidates.sort(key=lambda c: c.diff)

    next_index = next((i for i, c in enumerate(candidates) if not c.is_past), None)
    if next_index is None:
        selected = candidates[-max_count:]
    else:
        upcoming = candidates[next_index : next_index + max_count]
        remaining_slots = max_count - len(upcoming)
        backfill = candidates[max(0, next_index - remaining_slots) : next_index]
        selected = backfill + upcoming

    return [ProcessedDeparture(time=c.time, is_today=c.is_today) for c in selected]
