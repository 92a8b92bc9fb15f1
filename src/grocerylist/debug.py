"""Debug information to include when reporting issues."""

import platform
import sys
from importlib import metadata

from grocerylist import __version__

DEPENDENCIES = ("pydantic", "pydantic-settings")


def dependency_versions() -> dict[str, str]:
    """Installed versions of runtime dependencies."""
    versions = {}
    for name in DEPENDENCIES:
        try:
            versions[name] = metadata.version(name)
        except metadata.PackageNotFoundError:
            versions[name] = "not installed"
    return versions


def debug_info() -> str:
    """Multi-line summary of the program and runtime versions."""
    lines = [
        f"grocerylist: {__version__}",
        f"python: {platform.python_version()} ({platform.python_implementation()})",
        f"platform: {platform.platform()}",
        f"executable: {sys.executable}",
    ]
    lines.extend(f"{name}: {version}" for name, version in dependency_versions().items())
    return "\n".join(lines)
