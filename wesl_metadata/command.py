"""MetadataCommand: configure and run ``wesl metadata``.

Typical use::

    metadata = MetadataCommand().manifest_path("./wesl.toml").exec()
    root = metadata.root_package()
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from wesl_metadata.extract import find_json_line, parse_metadata
from wesl_metadata.models import Metadata
from wesl_metadata.runner import run_invocation

WESL_ENV_VAR = "WESL"
DEFAULT_WESL = "wesl"


@dataclass(frozen=True)
class Invocation:
    """A fully built ``wesl metadata`` command line, not yet executed."""

    args: tuple[str, ...]
    cwd: Path | None = None
    env_overrides: tuple[tuple[str, str | None], ...] = ()
    verbose: bool = False

    @property
    def program(self) -> str:
        return self.args[0]

    def environ(self, base: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return *base* (default: this process's environment) with the overrides applied.

        A ``None`` override removes the variable. *base* itself is not modified.
        """
        env = dict(os.environ if base is None else base)
        for key, value in self.env_overrides:
            if value is None:
                env.pop(key, None)
            else:
                env[key] = value
        return env


class MetadataCommand:
    """Builder for a ``wesl metadata`` invocation.

    Setters return the command itself so calls can be chained. Without a
    manifest path, ``wesl`` looks for ``wesl.toml`` in the ancestors of the
    working directory.
    """

    def __init__(self) -> None:
        self._wesl_path: str | None = None
        self._manifest_path: str | None = None
        self._current_dir: Path | None = None
        self._no_dependencies = False
        self._other_options: list[str] = []
        self._env: dict[str, str | None] = {}
        self._verbose = False

    def wesl_path(self, path: str | os.PathLike[str]) -> MetadataCommand:
        """Path to the ``wesl`` executable.

        Defaults to ``$WESL``, then to plain ``wesl`` on ``PATH``.
        """
        self._wesl_path = os.fspath(path)
        return self

    def manifest_path(self, path: str | os.PathLike[str]) -> MetadataCommand:
        self._manifest_path = os.fspath(path)
        return self

    def current_dir(self, path: str | os.PathLike[str]) -> MetadataCommand:
        self._current_dir = Path(path)
        return self

    def no_dependencies(self) -> MetadataCommand:
        """Only report the root package; skip dependency resolution."""
        self._no_dependencies = True
        return self

    def other_options(self, options: Sequence[str]) -> MetadataCommand:
        """Extra arguments appended after all other flags."""
        self._other_options = list(options)
        return self

    def env(self, key: str, value: str) -> MetadataCommand:
        """Set an environment variable for the ``wesl`` process only."""
        self._env[key] = value
        return self

    def env_remove(self, key: str) -> MetadataCommand:
        """Remove an inherited environment variable for the ``wesl`` process only."""
        self._env[key] = None
        return self

    def verbose(self, verbose: bool = True) -> MetadataCommand:
        """Stream ``wesl``'s stderr live instead of capturing it.

        A failing run then reports an empty stderr in ``WeslCommandError``.
        """
        self._verbose = verbose
        return self

    def build(self) -> Invocation:
        wesl = self._wesl_path
        if wesl is None:
            wesl = os.environ.get(WESL_ENV_VAR, DEFAULT_WESL)
        args = [wesl, "metadata"]

        if self._no_dependencies:
            args.append("--no-dependencies")

        if self._manifest_path is not None:
            args.extend(["--manifest-path", self._manifest_path])

        args.extend(self._other_options)

        return Invocation(
            args=tuple(args),
            cwd=self._current_dir,
            env_overrides=tuple(self._env.items()),
            verbose=self._verbose,
        )

    @staticmethod
    def parse(data: str | bytes) -> Metadata:
        """Parse one JSON line produced by a command from :meth:`build`."""
        return parse_metadata(data)

    def exec(self) -> Metadata:
        """Run the configured command and return the parsed metadata."""
        completed = run_invocation(self.build())
        return parse_metadata(find_json_line(completed.stdout))
