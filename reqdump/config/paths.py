"""Filesystem locations used by reqdump."""

from pathlib import Path


def get_app_dir() -> Path:
    """Return the reqdump directory under the user's home."""

    return Path.home() / '.reqdump'


__all__ = ['get_app_dir']
