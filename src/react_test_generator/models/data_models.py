"""Data models for test scaffold generation."""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


class ExportStyle(Enum):
    """How a component is exported from its module."""
    DEFAULT = "default"
    NAMED = "named"


class FileKind(Enum):
    """Whether a source file can contain markup (JSX)."""
    MARKUP = "markup"
    PLAIN = "plain"


class Outcome(Enum):
    """Whether an analysis result was detected or substituted."""
    MATCHED = "matched"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class SourceLocation:
    """A component file and the workspace it belongs to."""
    original_path: Path
    workspace_root: Path

    @property
    def relative_path(self) -> Path:
        # relpath tolerates paths outside the workspace and yields '..' segments
        return Path(os.path.relpath(str(self.original_path), str(self.workspace_root)))

    @property
    def is_inside_workspace(self) -> bool:
        parts = self.relative_path.parts
        return bool(parts) and parts[0] != '..'


@dataclass(frozen=True)
class ComponentIdentity:
    """Name the generated test refers to the component by."""
    name: str
    is_route_file: bool = False

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class ExportClassification:
    """Export style together with how it was obtained."""
    style: ExportStyle
    outcome: Outcome

    @property
    def is_fallback(self) -> bool:
        return self.outcome is Outcome.FALLBACK


@dataclass(frozen=True)
class NamedBinding:
    """One entry of an import's brace list."""
    name: str
    alias: Optional[str] = None

    @property
    def local_name(self) -> str:
        return self.alias or self.name


@dataclass(frozen=True)
class ImportStatement:
    """A single import statement found in component source."""
    raw_text: str
    module_path: str
    default_binding: Optional[str] = None
    named_bindings: Tuple[NamedBinding, ...] = ()
    namespace_binding: Optional[str] = None
    line_number: int = 0

    @property
    def is_relative(self) -> bool:
        return self.module_path.startswith('./') or self.module_path.startswith('../')

    @property
    def has_bindings(self) -> bool:
        return bool(self.default_binding or self.named_bindings or self.namespace_binding)


@dataclass(frozen=True)
class ScanResult:
    """Imports eligible for mocking, in source order."""
    imports: Tuple[ImportStatement, ...]
    outcome: Outcome
    excluded: Tuple[ImportStatement, ...] = ()

    @property
    def module_paths(self) -> List[str]:
        return [statement.module_path for statement in self.imports]


@dataclass(frozen=True)
class MockField:
    """One key of a mock module factory."""
    key: str
    body: str


@dataclass(frozen=True)
class MockDeclaration:
    """Generated stand-in for one imported module."""
    module_path: str
    fields: Tuple[MockField, ...]
    mock_function: str = "jest.mock"
    is_framework_shim: bool = False

    def render(self, indent: str = "    ") -> str:
        lines = [f'{self.mock_function}("{self.module_path}", () => ({{']
        for mock_field in self.fields:
            lines.append(f"{indent}{mock_field.key}: {mock_field.body},")
        lines.append("}))")
        return "\n".join(lines)


@dataclass
class GenerationResult:
    """Outcome of one scaffold invocation."""
    source: SourceLocation
    test_path: Path
    identity: ComponentIdentity
    file_kind: FileKind
    content: str
    export: ExportClassification
    scan: ScanResult
    mocks: List[MockDeclaration] = field(default_factory=list)
    written: bool = False
    skipped: bool = False
    source_readable: bool = True

