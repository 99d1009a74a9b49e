"""Extract the import statements of a component module."""

import re
import logging
from typing import Iterable, List, Optional, Tuple

from react_test_generator.config import Config
from react_test_generator.models.data_models import (
    ImportStatement,
    NamedBinding,
    Outcome,
    ScanResult,
)

logger = logging.getLogger(__name__)

TESTING_LIBRARY_PREFIXES = ("@testing-library/", "@jest/", "@vitest/")
TEST_RUNNER_PACKAGES = ("jest", "vitest")

# `import <bindings> from '<path>'` at the start of a line; brace lists may span lines
IMPORT_PATTERN = re.compile(
    r"^import\s+(?P<bindings>[^'\";]+?)\s+from\s+(?P<quote>['\"])(?P<path>[^'\"\n]+)(?P=quote)[ \t]*;?",
    re.MULTILINE,
)
_TYPE_ONLY = re.compile(r"type\b\s*(?=[{*A-Za-z_$])")
_NAMESPACE = re.compile(r"\*\s*as\s+([A-Za-z_$][\w$]*)")
_NAMED_BLOCK = re.compile(r"\{([^}]*)\}")
_DEFAULT = re.compile(r"^([A-Za-z_$][\w$]*)\s*(?:,|$)")
_ALIAS = re.compile(r"^([\w$]+)\s+as\s+([\w$]+)$")
_COMMENT = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)
_TYPE_ENTRY = re.compile(r"[{,]\s*type\s+[A-Za-z_$]")


def strip_comments(text: str) -> str:
    """Replace line and block comments with a space."""
    return _COMMENT.sub(" ", text)


def parse_bindings(bindings: str, skip_type_specifiers: bool = True
                   ) -> Tuple[Optional[str], Tuple[NamedBinding, ...], Optional[str]]:
    """Split the clause between ``import`` and ``from`` into its bindings.

    Returns ``(default, named, namespace)``; each part may be absent.
    """
    clause = " ".join(strip_comments(bindings).split())

    named: List[NamedBinding] = []
    block = _NAMED_BLOCK.search(clause)
    if block:
        for entry in block.group(1).split(','):
            entry = entry.strip()
            if not entry:
                continue
            if entry.startswith('type '):
                if skip_type_specifiers:
                    continue
                entry = entry[len('type '):].strip()
            alias = _ALIAS.match(entry)
            if alias:
                named.append(NamedBinding(alias.group(1), alias.group(2)))
            else:
                named.append(NamedBinding(entry))
        clause = (clause[:block.start()] + clause[block.end():]).strip()

    namespace = None
    star = _NAMESPACE.search(clause)
    if star:
        namespace = star.group(1)
        clause = (clause[:star.start()] + clause[star.end():]).strip()

    default = None
    head = _DEFAULT.match(clause)
    if head:
        default = head.group(1)

    return default, tuple(named), namespace


class ImportScanner:
    """Find mock-eligible import statements in source order.

    Imports of testing infrastructure are left out. Repeated imports of the
    same module are kept, one statement each.
    """

    def __init__(self, excluded_prefixes: Iterable[str] = TESTING_LIBRARY_PREFIXES,
                 excluded_packages: Iterable[str] = TEST_RUNNER_PACKAGES,
                 skip_type_imports: bool = True):
        self.excluded_prefixes = tuple(excluded_prefixes)
        self.excluded_packages = tuple(excluded_packages)
        self.skip_type_imports = skip_type_imports

    @classmethod
    def from_config(cls, config: Config) -> "ImportScanner":
        return cls(
            excluded_prefixes=config.get('scanning.excluded_prefixes', TESTING_LIBRARY_PREFIXES),
            excluded_packages=config.get('scanning.excluded_packages', TEST_RUNNER_PACKAGES),
            skip_type_imports=config.get('scanning.skip_type_imports', True),
        )

    def scan(self, file_text: Optional[str]) -> ScanResult:
        if file_text is None:
            return ScanResult(imports=(), outcome=Outcome.FALLBACK)

        kept: List[ImportStatement] = []
        excluded: List[ImportStatement] = []
        for statement in self.iter_statements(file_text):
            if self.is_test_infrastructure(statement.module_path):
                logger.debug(f"Skipping test infrastructure import: {statement.module_path}")
                excluded.append(statement)
            else:
                kept.append(statement)

        return ScanResult(imports=tuple(kept), outcome=Outcome.MATCHED, excluded=tuple(excluded))

    def iter_statements(self, file_text: str):
        """Yield every recognised import, test infrastructure included."""
        for match in IMPORT_PATTERN.finditer(file_text):
            bindings = strip_comments(match.group('bindings')).strip()
            type_only = _TYPE_ONLY.match(bindings)
            if type_only:
                if self.skip_type_imports:
                    continue
                bindings = bindings[type_only.end():]

            default, named, namespace = parse_bindings(bindings, self.skip_type_imports)
            if self.skip_type_imports and not (default or named or namespace) and _TYPE_ENTRY.search(bindings):
                # every brace entry was `type X`
                continue
            yield ImportStatement(
                raw_text=match.group(0).strip(),
                module_path=match.group('path'),
                default_binding=default,
                named_bindings=named,
                namespace_binding=namespace,
                line_number=file_text.count('\n', 0, match.start()) + 1,
            )

    def is_test_infrastructure(self, module_path: str) -> bool:
        if module_path.startswith(self.excluded_prefixes):
            return True
        # `jest`, `jest/...` and `jest-dom` style companions, but not `jestful`
        return any(
            module_path == package or module_path.startswith((f"{package}/", f"{package}-"))
            for package in self.excluded_packages
        )
