"""Locate and decode the JSON payload in ``wesl metadata`` stdout."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from wesl_metadata.exceptions import MetadataParseError, NoJsonError, StdoutDecodeError
from wesl_metadata.models import Metadata

logger = logging.getLogger(__name__)


def find_json_line(stdout: bytes) -> str:
    """Return the first stdout line that starts with ``{``.

    ``wesl`` may print progress or warnings on stdout around the payload;
    the payload is a single line beginning at column zero.
    """
    try:
        text = stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise StdoutDecodeError(exc) from exc

    # Only "\n" ends a line; U+2028 and similar may appear inside JSON strings
    lines = text.split("\n")
    for line in lines:
        if line.startswith("{"):
            return line.removesuffix("\r")

    logger.warning("No JSON line in %d lines of wesl output", len(lines))
    raise NoJsonError()


def parse_metadata(data: str | bytes) -> Metadata:
    """Validate one JSON document against the metadata schema."""
    try:
        return Metadata.model_validate_json(data)
    except ValidationError as exc:
        logger.warning("wesl metadata JSON failed validation (%d errors)", exc.error_count())
        raise MetadataParseError(str(exc)) from exc
