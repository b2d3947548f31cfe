"""Run a built ``wesl metadata`` invocation and capture its output."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wesl_metadata.exceptions import StderrDecodeError, WeslCommandError, WeslSpawnError

if TYPE_CHECKING:
    from wesl_metadata.command import Invocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletedInvocation:
    """Raw result of a successful run."""

    returncode: int
    stdout: bytes
    stderr: bytes | None  # None when stderr was streamed (verbose)


def run_invocation(invocation: Invocation) -> CompletedInvocation:
    """Run *invocation* to completion.

    Blocks until the process exits; there is no timeout.

    Raises:
        WeslSpawnError: the process could not be started.
        WeslCommandError: the process exited non-zero.
        StderrDecodeError: it exited non-zero and stderr was not UTF-8.
    """
    logger.debug("Running: %s (cwd=%s)", " ".join(invocation.args), invocation.cwd)
    try:
        result = subprocess.run(
            list(invocation.args),
            cwd=invocation.cwd,
            env=invocation.environ(),
            stdout=subprocess.PIPE,
            stderr=None if invocation.verbose else subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        logger.warning("Could not start %s: %s", invocation.program, exc)
        raise WeslSpawnError(invocation.program, exc) from exc

    if result.returncode != 0:
        try:
            stderr = (result.stderr or b"").decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StderrDecodeError(exc) from exc
        logger.warning("wesl metadata failed (rc=%d): %s", result.returncode, stderr[-1000:])
        raise WeslCommandError(stderr, result.returncode)

    logger.debug("wesl metadata wrote %d bytes to stdout", len(result.stdout))
    return CompletedInvocation(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )
