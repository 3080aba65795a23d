"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable value compared by its fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around a single primitive (accessed via ``.root``)."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
