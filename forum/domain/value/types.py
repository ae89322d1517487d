"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import timedelta
from enum import Enum, IntEnum
from typing import Optional

from pydantic import Field, computed_field

from forum.domain.value.common import ValueObject


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class VoteValue(IntEnum):
    """Value of a stored vote record.

    A cleared vote is the absence of a record, never a zero value.
    """

    UP = 1
    DOWN = -1


class VoteDirection(IntEnum):
    """Direction submitted by a voter.

    ``CLEAR`` removes the voter's record instead of storing a zero.
    """

    UP = 1
    CLEAR = 0
    DOWN = -1

    @property
    def value_to_store(self) -> Optional[VoteValue]:
        """Vote value to persist, None when the vote should be removed."""
        if self is VoteDirection.CLEAR:
            return None
        return VoteValue(int(self))


class ContentType(str, Enum):
    """Kind of content a post carries."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    LINK = "link"

    @property
    def is_url(self) -> bool:
        """Whether the content value is a URL rather than body text."""
        return self is not ContentType.TEXT


class SortMode(str, Enum):
    """Ranking applied to a listing of posts or comments."""

    HOT = "hot"
    NEW = "new"
    TOP = "top"
    RISING = "rising"
    CONTROVERSIAL = "controversial"


class TimeWindow(str, Enum):
    """Age window used by the ``top`` ranking.

    Month and year are fixed 30 and 365 day spans, not calendar periods.
    """

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"

    @property
    def duration(self) -> Optional[timedelta]:
        """Span of the window, None for ``all``."""
        return _WINDOW_DURATIONS[self]


_WINDOW_DURATIONS: dict[TimeWindow, Optional[timedelta]] = {
    TimeWindow.HOUR: timedelta(milliseconds=3_600_000),
    TimeWindow.DAY: timedelta(milliseconds=86_400_000),
    TimeWindow.WEEK: timedelta(milliseconds=604_800_000),
    TimeWindow.MONTH: timedelta(milliseconds=2_592_000_000),
    TimeWindow.YEAR: timedelta(milliseconds=31_536_000_000),
    TimeWindow.ALL: None,
}


class VoteTally(ValueObject):
    """Aggregated vote counts for one votable item."""

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)

    @computed_field
    @property
    def score(self) -> int:
        """Net score (upvotes minus downvotes)."""
        return self.upvotes - self.downvotes
