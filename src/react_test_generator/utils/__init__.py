"""Utility functions for react test generator."""

from .file_utils import FileUtils
from .in_flight import InFlightRegistry
from .validation import Validator
from .writer import TestFileWriter

__all__ = [
    "FileUtils",
    "InFlightRegistry",
    "Validator",
    "TestFileWriter",
]
