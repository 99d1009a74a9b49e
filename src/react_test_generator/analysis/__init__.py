"""Source analysis components."""

from .path_deriver import PathDeriver
from .export_classifier import ExportClassifier
from .import_scanner import ImportScanner

__all__ = [
    "PathDeriver",
    "ExportClassifier",
    "ImportScanner",
]
