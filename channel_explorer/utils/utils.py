"""General helpers shared across layers."""

from pathlib import Path


def get_project_root() -> Path:
    """Return the repository root directory.

    Returns:
        Path: Directory containing the channel_explorer package.
    """
    return Path(__file__).resolve().parents[2]


__all__ = ["get_project_root"]
