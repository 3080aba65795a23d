"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class MessageResponse(BaseModel):
    """Success envelope carrying a human-readable message."""

    success: bool = True
    message: str
