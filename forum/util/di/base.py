"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests swap for in-memory or canned implementations
Component = Literal["persistence", "reddit"]


class ProviderBase(Provider):
    """Base for every provider listed in ``PROVIDERS``.

    A provider that declares ``__mock_component__`` is the base of a mockable
    component; its production and mock subclasses differ only in
    ``__is_mock__``. Providers without subclasses are used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
