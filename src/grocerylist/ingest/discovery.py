"""Find recipe files on disk."""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from grocerylist.logging_config import get_logger

logger = get_logger(__name__)

ACCEPTED_EXTENSIONS: tuple[str, ...] = ("md", "txt")
IGNORED_FILES: tuple[str, ...] = ("README.md",)


class DiscoveryError(Exception):
    """Base exception for recipe file discovery errors."""

    exit_code = 1

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = path


class PathNotFoundError(DiscoveryError):
    """Raised when a given path does not exist."""

    exit_code = 1


class UnsupportedExtensionError(DiscoveryError):
    """Raised when a given file does not have an accepted extension."""

    exit_code = 2


def accept_file_ext(path: Path, extensions: Iterable[str] = ACCEPTED_EXTENSIONS) -> bool:
    """Check whether the file extension is one of the accepted ones."""
    return path.suffix.lstrip(".").lower() in tuple(extensions)


def check_path(path: Path, extensions: Iterable[str] = ACCEPTED_EXTENSIONS) -> None:
    """
    Validate a path given on the command line.

    Raises:
        PathNotFoundError: The path does not exist.
        UnsupportedExtensionError: The path is a file with another extension.
    """
    if not path.exists():
        raise PathNotFoundError(f"Path does not exist: {path}", path=path)
    if not path.is_dir() and not accept_file_ext(path, extensions):
        raise UnsupportedExtensionError(
            f"File does not have a supported file extension: {path}", path=path
        )


def walk_files(directory: Path) -> Iterator[Path]:
    """Yield all files below directory in a stable order."""
    for root, dirs, files in os.walk(directory):
        dirs.sort()
        for name in sorted(files):
            yield Path(root) / name


def discover_recipe_files(
    paths: Iterable[str | Path],
    extensions: Iterable[str] = ACCEPTED_EXTENSIONS,
    ignored: Iterable[str] = IGNORED_FILES,
) -> list[Path]:
    """
    Collect recipe files from files and directories.

    Files found by walking directories come first, followed by the files
    given explicitly. Ignored names only apply to walked files.

    Raises:
        DiscoveryError: A path is missing or has an unsupported extension.
    """
    extensions = tuple(extensions)
    ignored = tuple(ignored)

    dirs: list[Path] = []
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        check_path(path, extensions)
        if path.is_dir():
            dirs.append(path)
        else:
            files.append(path)

    found = [
        f
        for directory in dirs
        for f in walk_files(directory)
        if accept_file_ext(f, extensions) and f.name not in ignored
    ]

    logger.debug(f"Found {len(found)} files in {len(dirs)} directories, {len(files)} given")
    return found + files
