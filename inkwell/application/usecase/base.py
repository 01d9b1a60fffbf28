"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One API operation.

    Takes a pydantic request with ids as strings, calls the domain services
    and returns a response model (``PostItem``, ``CategoryItem`` ...) so
    routes never see domain entities.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
