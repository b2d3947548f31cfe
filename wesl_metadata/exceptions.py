"""Exceptions raised while running or parsing ``wesl metadata``."""


class WeslMetadataError(Exception):
    """Base exception for all ``wesl metadata`` failures."""


class WeslSpawnError(WeslMetadataError):
    """Raised when the ``wesl`` process could not be started at all."""

    def __init__(self, program: str, cause: OSError):
        self.program = program
        self.cause = cause
        super().__init__(f"failed to start `wesl metadata`: {cause}")


class WeslCommandError(WeslMetadataError):
    """Raised when ``wesl metadata`` exits with a non-zero status."""

    def __init__(self, stderr: str, returncode: int | None = None):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"`wesl metadata` exited with an error: {stderr}")


class StdoutDecodeError(WeslMetadataError):
    """Raised when stdout of ``wesl metadata`` is not valid UTF-8."""

    def __init__(self, cause: UnicodeDecodeError):
        self.cause = cause
        super().__init__(f"cannot convert the stdout of `wesl metadata`: {cause}")


class StderrDecodeError(WeslMetadataError):
    """Raised when stderr of a failed ``wesl metadata`` run is not valid UTF-8."""

    def __init__(self, cause: UnicodeDecodeError):
        self.cause = cause
        super().__init__(f"cannot convert the stderr of `wesl metadata`: {cause}")


class MetadataParseError(WeslMetadataError):
    """Raised when the JSON line does not match the metadata schema."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"failed to interpret `wesl metadata`'s json: {detail}")


class NoJsonError(WeslMetadataError):
    """Raised when no stdout line starts with ``{``."""

    def __init__(self) -> None:
        super().__init__("could not find any json in the output of `wesl metadata`")
