"""Utility to discover the reflink home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get reflink home directory based on REFLINK_HOME or default to ~/.reflink."""
    home_env = os.environ.get("REFLINK_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".reflink"
