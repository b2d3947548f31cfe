"""Package, target and edition models."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from pathlib import Path
from typing import Annotated, Any

import semantic_version
from pydantic import (
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    SerializerFunctionWrapHandler,
    StrictBool,
    model_serializer,
)

from wesl_metadata.models.base import PackageId, WeslModel
from wesl_metadata.models.dependency import Dependency


@total_ordering
class Edition(Enum):
    """The WESL edition of a package or target.

    More editions are expected in future ``wesl`` releases; until this enum
    gains them, an unknown edition string fails to parse. Members compare
    in declaration order, so ``edition >= Edition.WESL`` works as an
    "at least" check.
    """

    WGSL = "WGSL"
    WESL = "WESL"

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Edition):
            return NotImplemented
        members = list(Edition)
        return members.index(self) < members.index(other)


def _parse_version(value: Any) -> semantic_version.Version:
    if isinstance(value, semantic_version.Version):
        return value
    if isinstance(value, str):
        return semantic_version.Version(value)
    raise ValueError(f"expected a semantic version string, got {type(value).__name__}")


SemVer = Annotated[
    semantic_version.Version,
    PlainValidator(_parse_version),
    PlainSerializer(str, return_type=str),
]


class Target(WeslModel):
    """A single target (lib, bin, example, ...) provided by a package."""

    name: str
    # Only applies to non-lib targets
    required_features: list[str] = Field(default_factory=list, alias="required-features")
    src_path: Path
    edition: Edition = Edition.WGSL
    # Older wesl releases do not emit the three flags below; they were
    # always on there.
    doctest: StrictBool = True
    test: StrictBool = True
    doc: StrictBool = True


class Package(WeslModel):
    """One package described by a single ``wesl.toml``.

    ``metadata`` holds the free-form ``package.metadata`` table untouched;
    callers can validate it against their own model, e.g.
    ``MySettings.model_validate(package.metadata)``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    version: SemVer
    authors: list[str] = Field(default_factory=list)
    id: PackageId
    description: str | None = None
    dependencies: list[Dependency]
    license: str | None = None
    # Relative to the manifest, see license_file_path()
    license_file: Path | None = None
    manifest_path: Path
    categories: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    # Relative to the manifest, see readme_path()
    readme: Path | None = None
    repository: str | None = None
    homepage: str | None = None
    documentation: str | None = None
    edition: Edition = Edition.WGSL
    targets: list[Target] = Field(default_factory=list)
    metadata: Any = None

    @model_serializer(mode="wrap")
    def _omit_unset_keys(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # Keys wesl itself leaves out: null metadata, empty targets
        data = handler(self)
        if data.get("metadata") is None:
            data.pop("metadata", None)
        if not data.get("targets"):
            data.pop("targets", None)
        return data

    def license_file_path(self) -> Path | None:
        """Full path to the license file, if the manifest names one."""
        if self.license_file is None:
            return None
        return self.manifest_path.parent / self.license_file

    def readme_path(self) -> Path | None:
        """Full path to the readme, if the manifest names one."""
        if self.readme is None:
            return None
        return self.manifest_path.parent / self.readme
