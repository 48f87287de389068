"""Base use case interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """A single application operation taking a request model and returning a response."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """Execute the use case."""
