"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: validate ids, call services, shape output."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT: ...
