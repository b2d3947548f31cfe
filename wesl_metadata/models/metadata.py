"""Root metadata aggregate and the resolved dependency graph."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import Field, StrictInt, field_validator

from wesl_metadata.models.base import PackageId, WeslModel
from wesl_metadata.models.package import Package

MANIFEST_FILE_NAME = "wesl.toml"


class PackageManager(Enum):
    """Ecosystem ``wesl`` fetched the dependency packages from.

    New package managers will be added here as ``wesl`` supports them.
    """

    NPM = "Npm"
    CARGO = "Cargo"


class NodeDependency(WeslModel):
    """A dependency edge of a resolved node."""

    # Effective name: the new name if the dependency was renamed
    name: str
    pkg: PackageId


class Node(WeslModel):
    """A node in the resolved dependency graph.

    ``dependencies`` and ``renamed_dependencies`` describe the same edges;
    only the latter keeps the name each dependency is referred to by.
    """

    id: PackageId
    renamed_dependencies: list[NodeDependency] = Field(default_factory=list)
    dependencies: list[PackageId]

    @classmethod
    def from_renamed(
        cls, id: PackageId, renamed_dependencies: list[NodeDependency]
    ) -> Node:
        """Build a node whose ``dependencies`` are derived from the renamed edges."""
        seen: set[PackageId] = set()
        dependencies: list[PackageId] = []
        for dep in renamed_dependencies:
            if dep.pkg not in seen:
                seen.add(dep.pkg)
                dependencies.append(dep.pkg)
        return cls(
            id=id,
            renamed_dependencies=renamed_dependencies,
            dependencies=dependencies,
        )


class Resolve(WeslModel):
    """The resolved dependency graph."""

    nodes: list[Node]
    # None when wesl could not determine a root
    root: PackageId | None = None

    def __getitem__(self, pkg_id: PackageId) -> Node:
        for node in self.nodes:
            if node.id == pkg_id:
                return node
        raise KeyError(f"no node with this id: {pkg_id!r}")


class Metadata(WeslModel):
    """Output of one ``wesl metadata`` run."""

    package_manager: PackageManager
    # Every package reachable from the root, the root included
    packages: list[Package]
    # Only present when dependencies were resolved
    resolve: Resolve | None = None
    target_directory: Path
    # Format version of the metadata schema
    version: StrictInt = Field(ge=0)
    root_package_directory: Path

    @field_validator("packages")
    @classmethod
    def _unique_package_ids(cls, packages: list[Package]) -> list[Package]:
        seen: set[PackageId] = set()
        for package in packages:
            if package.id in seen:
                raise ValueError(f"duplicate package id: {package.id}")
            seen.add(package.id)
        return packages

    def __getitem__(self, pkg_id: PackageId) -> Package:
        for package in self.packages:
            if package.id == pkg_id:
                return package
        raise KeyError(f"no package with this id: {pkg_id!r}")

    def root_package(self) -> Package | None:
        """Return the package the metadata was requested for.

        With a resolve graph this is the graph's root. Without one (the
        ``--no-dependencies`` case) it is the package whose manifest sits
        directly in ``root_package_directory``.
        """
        if self.resolve is not None:
            root = self.resolve.root
            if root is None:
                return None
            return next((pkg for pkg in self.packages if pkg.id == root), None)

        root_manifest = self.root_package_directory / MANIFEST_FILE_NAME
        return next(
            (pkg for pkg in self.packages if pkg.manifest_path == root_manifest),
            None,
        )

    def to_json(self, indent: int | None = None) -> str:
        """Serialize back to the JSON shape ``wesl metadata`` emits."""
        return self.model_dump_json(by_alias=True, indent=indent)
