"""Ranking domain service."""

from datetime import datetime
from typing import Optional, Sequence

import logfire

from forum.domain import ranking
from forum.domain.ranking import T
from forum.domain.value import SortMode, TimeWindow

from .base import Service


class RankingService(Service):
    """Orders vote-enriched posts and comments for a listing."""

    def rank(
        self,
        items: Sequence[T],
        mode: SortMode,
        window: TimeWindow = TimeWindow.ALL,
        now: Optional[datetime] = None,
    ) -> list[T]:
        """Rank items by sort mode.

        Args:
            items: Posts or comments carrying their vote tally
            mode: Sort mode
            window: Age window for ``top``
            now: Evaluation instant (defaults to the current time)

        Returns:
            A new, ranked list
        """
        with logfire.span(
            "ranking_service.rank",
            mode=SortMode(mode).value,
            window=TimeWindow(window).value,
            count=len(items),
        ):
            ranked = ranking.rank(items, mode, window, now)
            if len(ranked) != len(items):
                logfire.info(
                    "Items outside time window dropped",
                    window=TimeWindow(window).value,
                    kept=len(ranked),
                    dropped=len(items) - len(ranked),
                )
            return ranked
