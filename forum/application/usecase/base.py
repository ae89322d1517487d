"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: a request DTO in, a response DTO out.

    Use cases orchestrate domain services and never touch repositories
    directly.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
