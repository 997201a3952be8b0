"""Base class for single-value domain types."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """An immutable, hashable wrapper around one validated primitive.

    Subclasses validate shape in a ``field_validator("root")``; the raw value
    is ``.root`` and serializes as the bare primitive.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
