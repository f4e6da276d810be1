# src/uniqopy/models.py
from dataclasses import dataclass
from pathlib import Path

from uniqopy.config import EXIT_NOT_A_FILE, EXIT_READ, EXIT_USAGE, EXIT_WRITE


@dataclass(frozen=True)
class SourceFile:
    """Immutable snapshot of the input file, read once."""
    path: Path
    content: bytes

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class CopyResult:
    source: Path
    destination: Path
    bytes_copied: int
    digest: str
    timestamp: str


class UniqopyError(Exception):
    """Base error. Every subclass maps to a process exit code."""
    exit_code = 1


class ArgumentError(UniqopyError):
    exit_code = EXIT_USAGE


class ReadError(UniqopyError):
    exit_code = EXIT_READ

    def __init__(self, path: Path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading {path}: {cause}")


class NotAFileError(ReadError):
    exit_code = EXIT_NOT_A_FILE

    def __init__(self, path: Path):
        super().__init__(path, "uniqopy only works on files")


class WriteError(UniqopyError):
    exit_code = EXIT_WRITE

    def __init__(self, path: Path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Error writing {path}: {cause}")
