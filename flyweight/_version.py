"""Version and environment report for flyweight-cache.

    python -m flyweight --version
    python -m flyweight info
"""

from __future__ import annotations

import platform
from importlib import metadata
from typing import Any, Dict, Optional

__version__ = "0.1.0"

DEPENDENCIES = ("pydantic", "pydantic-core", "typing-extensions")


def _installed_version(distribution: str) -> Optional[str]:
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return None


def get_version_info() -> Dict[str, Any]:
    """Return the package, Python, platform and dependency versions."""
    return {
        "flyweight": __version__,
        "python": f"{platform.python_implementation()} {platform.python_version()}",
        "platform": platform.platform(),
        "dependencies": {name: _installed_version(name) for name in DEPENDENCIES},
    }


def format_version_info(info: Optional[Dict[str, Any]] = None) -> str:
    """Format `info` (default: `get_version_info()`) as aligned lines for bug reports."""
    if info is None:
        info = get_version_info()

    rows = [("python", info["python"]), ("platform", info["platform"])]
    rows += [
        (name, version or "not installed")
        for name, version in info["dependencies"].items()
    ]
    width = max(len(label) for label, _ in rows)

    lines = [f"flyweight: {info['flyweight']}", ""]
    lines += [f"  {label:>{width}} : {value}" for label, value in rows]
    return "\n".join(lines)


def print_version_info() -> None:
    print(format_version_info())
