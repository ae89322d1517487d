"""Base service class for domain services."""


class Service:
    """Base class for the forum's domain services.

    Services hold the rules that span entities (a vote needs its target to
    exist, a reply needs its parent on the same post) and depend only on
    repository interfaces.
    """

    pass
