"""Shared pydantic base and the opaque package identifier."""

from __future__ import annotations

from functools import total_ordering

from pydantic import BaseModel, ConfigDict, RootModel


class WeslModel(BaseModel):
    """Base for all metadata models.

    Fields cannot be reassigned once parsed, but list fields are plain
    lists and can still be mutated in place; for the same reason models
    holding lists are not hashable. Unknown keys are ignored so newer
    ``wesl`` releases can add fields without breaking older readers.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


@total_ordering
class PackageId(RootModel[str]):
    """An opaque identifier for a package.

    Two ids are equal iff their strings are equal. The string's format is
    an implementation detail of ``wesl`` and should not be parsed.
    ``Metadata`` and ``Resolve`` can be indexed by ``PackageId``.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PackageId):
            return NotImplemented
        return self.root < other.root
