"""Votable capability shared by posts and comments."""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Votable(Protocol):
    """Anything that carries vote totals and a creation time.

    Posts and comments satisfy this structurally; the ranking functions
    accept any object that does.
    """

    upvotes: int
    downvotes: int
    created_at: datetime
