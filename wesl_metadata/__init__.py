"""wesl-metadata: structured access to the output of ``wesl metadata``."""

__version__ = "0.1.0"

from wesl_metadata.command import Invocation, MetadataCommand
from wesl_metadata.exceptions import (
    MetadataParseError,
    NoJsonError,
    StderrDecodeError,
    StdoutDecodeError,
    WeslCommandError,
    WeslMetadataError,
    WeslSpawnError,
)
from wesl_metadata.models import (
    Dependency,
    Edition,
    Metadata,
    Node,
    NodeDependency,
    Package,
    PackageId,
    PackageManager,
    Resolve,
    Target,
)

__all__ = [
    "Dependency",
    "Edition",
    "Invocation",
    "Metadata",
    "MetadataCommand",
    "MetadataParseError",
    "NoJsonError",
    "Node",
    "NodeDependency",
    "Package",
    "PackageId",
    "PackageManager",
    "Resolve",
    "StderrDecodeError",
    "StdoutDecodeError",
    "Target",
    "WeslCommandError",
    "WeslMetadataError",
    "WeslSpawnError",
]
