"""Data models for react test generator."""

from .data_models import (
    ComponentIdentity,
    ExportClassification,
    ExportStyle,
    FileKind,
    GenerationResult,
    ImportStatement,
    MockDeclaration,
    MockField,
    NamedBinding,
    Outcome,
    ScanResult,
    SourceLocation,
)

__all__ = [
    "ComponentIdentity",
    "ExportClassification",
    "ExportStyle",
    "FileKind",
    "GenerationResult",
    "ImportStatement",
    "MockDeclaration",
    "MockField",
    "NamedBinding",
    "Outcome",
    "ScanResult",
    "SourceLocation",
]
