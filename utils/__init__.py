"""Shared text and time helpers for the schedule converter."""

from .logging import configure_logger
from .text import normalize_input
from .time_parser import extract_times, find_invalid_time, parse_time

__all__ = [
    "configure_logger",
    "extract_times",
    "find_invalid_time",
    "normalize_input",
    "parse_time",
]
