"""Typed model of ``wesl metadata`` output."""

from wesl_metadata.models.base import PackageId
from wesl_metadata.models.dependency import Dependency
from wesl_metadata.models.metadata import (
    MANIFEST_FILE_NAME,
    Metadata,
    Node,
    NodeDependency,
    PackageManager,
    Resolve,
)
from wesl_metadata.models.package import Edition, Package, Target

__all__ = [
    "MANIFEST_FILE_NAME",
    "Dependency",
    "Edition",
    "Metadata",
    "Node",
    "NodeDependency",
    "Package",
    "PackageId",
    "PackageManager",
    "Resolve",
    "Target",
]
