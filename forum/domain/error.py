"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidVotableError(DomainError):
    """Raised when an item handed to the ranking functions is malformed.

    Ranking has no recoverable failure modes; a malformed item means the
    caller or the tally layer broke its contract.
    """

    def __init__(self, item: object, reason: str):
        self.item = item
        self.reason = reason
        super().__init__(f"Cannot rank {type(item).__name__}: {reason}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
