"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .reddit import RedditProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .reddit import ProdRedditProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdRedditProvider",
    "RedditProvider",
]
