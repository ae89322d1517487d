"""Feed ranking.

Pure scoring and ordering functions over votable items (posts or comments
that already carry their vote tally). Every ``sort_*`` function returns a new
list and leaves its input untouched. Sorting is stable, so items with equal
scores keep the order they were given in.

Usage:
    from forum.domain.ranking import rank
    from forum.domain.value import SortMode, TimeWindow

    ranked = rank(posts, SortMode.TOP, TimeWindow.WEEK)
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence, TypeVar

from forum.domain.error import InvalidVotableError
from forum.domain.model.votable import Votable
from forum.domain.value import SortMode, TimeWindow

# Arbitrary "day zero" (2005-12-08 07:46:43 UTC) inherited from reddit's hot
# formula. It is a historical artifact, not a computed value; changing it
# shifts every hot score.
REFERENCE_EPOCH = 1134028003

# One order of magnitude of net score is worth this many seconds of age
HOT_DECAY_SECONDS = 45000

RISING_AGE_OFFSET_HOURS = 2.0
RISING_GRAVITY = 1.5

CONTROVERSY_EXPONENT = 1.2

_HOUR = timedelta(hours=1)

T = TypeVar("T", bound=Votable)


def _as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _now(now: Optional[datetime]) -> datetime:
    return _as_utc(now) if now is not None else datetime.now(timezone.utc)


def _check_votable(item: object) -> None:
    for field in ("upvotes", "downvotes"):
        count = getattr(item, field, None)
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidVotableError(
                item, f"{field} must be an integer, got {count!r}"
            )
        if count < 0:
            raise InvalidVotableError(item, f"{field} must be >= 0, got {count}")

    created_at = getattr(item, "created_at", None)
    if not isinstance(created_at, datetime):
        raise InvalidVotableError(
            item, f"created_at must be a datetime, got {created_at!r}"
        )


def _snapshot(items: Sequence[T]) -> list[T]:
    """Copy the input and fail fast on malformed items."""
    snapshot = list(items)
    for item in snapshot:
        _check_votable(item)
    return snapshot


def epoch_seconds(value: datetime) -> float:
    """Seconds since the Unix epoch (naive values are taken as UTC)."""
    return _as_utc(value).timestamp()


def net_score(item: Votable) -> int:
    """Upvotes minus downvotes."""
    return item.upvotes - item.downvotes


def hot_score(item: Votable) -> float:
    """Reddit's hot score.

    The net score counts logarithmically, so the first ten votes weigh as
    much as the next hundred, while age counts linearly: one order of
    magnitude of score equals 45000 seconds (12.5 hours) of recency.
    """
    score = net_score(item)
    order = math.log10(max(abs(score), 1))
    sign = 1 if score > 0 else -1 if score < 0 else 0
    seconds = epoch_seconds(item.created_at) - REFERENCE_EPOCH
    return sign * order + seconds / HOT_DECAY_SECONDS


def rising_score(item: Votable, now: Optional[datetime] = None) -> float:
    """Vote velocity: net score over ``(age_hours + 2) ** 1.5``.

    Items dated in the future are treated as brand new (age 0).
    """
    age = _now(now) - _as_utc(item.created_at)
    age_hours = max(age / _HOUR, 0.0)
    return net_score(item) / (age_hours + RISING_AGE_OFFSET_HOURS) ** RISING_GRAVITY


def controversy_score(item: Votable) -> float:
    """How evenly contested an item is.

    Zero unless the item has votes on both sides.
    """
    ups = item.upvotes
    downs = item.downvotes
    if ups <= 0 or downs <= 0:
        return 0.0
    return (ups * downs) / (ups + downs) ** CONTROVERSY_EXPONENT


def sort_new(items: Sequence[T]) -> list[T]:
    """Most recently created first."""
    return sorted(
        _snapshot(items), key=lambda item: _as_utc(item.created_at), reverse=True
    )


def sort_top(
    items: Sequence[T],
    window: TimeWindow | str = TimeWindow.ALL,
    now: Optional[datetime] = None,
) -> list[T]:
    """Highest net score first, restricted to items younger than ``window``.

    The window bound is inclusive. ``all`` applies no filter.
    """
    snapshot = _snapshot(items)
    span = TimeWindow(window).duration

    if span is not None:
        reference = _now(now)
        snapshot = [
            item for item in snapshot if reference - _as_utc(item.created_at) <= span
        ]

    return sorted(snapshot, key=net_score, reverse=True)


def sort_hot(items: Sequence[T]) -> list[T]:
    """Highest hot score first."""
    return sorted(_snapshot(items), key=hot_score, reverse=True)


def sort_rising(items: Sequence[T], now: Optional[datetime] = None) -> list[T]:
    """Highest rising score first."""
    reference = _now(now)
    return sorted(
        _snapshot(items),
        key=lambda item: rising_score(item, reference),
        reverse=True,
    )


def sort_controversial(items: Sequence[T]) -> list[T]:
    """Most controversial first; items without opposing votes sink to the end."""
    return sorted(_snapshot(items), key=controversy_score, reverse=True)


def rank(
    items: Sequence[T],
    mode: SortMode | str,
    window: TimeWindow | str = TimeWindow.ALL,
    now: Optional[datetime] = None,
) -> list[T]:
    """Order items by the given sort mode.

    Args:
        items: Vote-enriched posts or comments
        mode: Ranking to apply
        window: Age window, only consulted for ``top``
        now: Evaluation instant for ``top`` and ``rising`` (defaults to now)

    Returns:
        A new list with the ranked items

    Raises:
        ValueError: If mode or window is not a known value
        InvalidVotableError: If an item is malformed
    """
    mode = SortMode(mode)

    if mode is SortMode.NEW:
        return sort_new(items)
    if mode is SortMode.TOP:
        return sort_top(items, window, now)
    if mode is SortMode.RISING:
        return sort_rising(items, now)
    if mode is SortMode.CONTROVERSIAL:
        return sort_controversial(items)
    return sort_hot(items)
