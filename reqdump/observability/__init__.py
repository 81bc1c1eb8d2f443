"""Observability helpers for request dumping."""

from .dumper import RequestDumper
from .snapshot import HeaderSanitizer

__all__ = ['HeaderSanitizer', 'RequestDumper']
