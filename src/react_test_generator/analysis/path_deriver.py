"""Map a component file to its test file, component name and import path."""

import os
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from react_test_generator.config import Config
from react_test_generator.models.data_models import ComponentIdentity, FileKind

logger = logging.getLogger(__name__)

TESTS_ROOT = "tests"
SOURCE_ROOT = "src"
ALIAS_PREFIX = "@/"
TEST_INFIX = ".test"
ROUTE_FILE_NAMES = ("page", "layout")
ROUTE_SUFFIX = "Page"
MARKUP_EXTENSIONS = (".tsx", ".jsx")

PathLike = Union[str, Path]


def capitalize_first(name: str) -> str:
    """Upper-case the first character only (``userCard`` -> ``UserCard``)."""
    return name[:1].upper() + name[1:]


def _relative_parts(workspace_root: PathLike, original_path: PathLike, source_root: Optional[str]) -> Path:
    relative = Path(os.path.relpath(str(original_path), str(workspace_root)))
    parts = relative.parts
    if source_root and len(parts) > 1 and parts[0] == source_root:
        relative = Path(*parts[1:])
    return relative


def derive_test_path(workspace_root: PathLike, original_path: PathLike,
                     tests_root: str = TESTS_ROOT, source_root: Optional[str] = SOURCE_ROOT) -> Path:
    """Determine where the test file for ``original_path`` goes.

    ``/proj/src/components/Card.tsx`` -> ``/proj/tests/components/Card.test.tsx``.
    Files outside the workspace yield a path with ``..`` segments rather than an error.
    """
    relative = _relative_parts(workspace_root, original_path, source_root)
    test_name = f"{relative.stem}{TEST_INFIX}{relative.suffix}"
    return Path(workspace_root) / tests_root / relative.parent / test_name


def derive_component_identity(original_path: PathLike,
                              route_file_names: Iterable[str] = ROUTE_FILE_NAMES) -> ComponentIdentity:
    """Infer the component name from the file name.

    Routing convention files (``page``, ``layout``) take their parent
    directory's name plus a ``Page`` suffix.
    """
    path = Path(original_path)
    base_name = path.stem
    if base_name in tuple(route_file_names):
        return ComponentIdentity(capitalize_first(path.parent.name) + ROUTE_SUFFIX, is_route_file=True)
    return ComponentIdentity(capitalize_first(base_name))


def derive_module_alias_path(relative_path: PathLike, alias_prefix: str = ALIAS_PREFIX) -> str:
    """Rewrite a relative module path onto the project alias.

    ``../../components/ui`` -> ``@/components/ui``; ``./utils`` -> ``@/utils``.
    """
    normalized = str(relative_path).replace("\\", "/")
    if normalized.startswith("../"):
        while normalized.startswith("../"):
            normalized = normalized[3:]
    elif normalized.startswith("./"):
        normalized = normalized[2:]
    return f"{alias_prefix}{normalized}"


def derive_component_import_path(workspace_root: PathLike, original_path: PathLike,
                                 source_root: Optional[str] = SOURCE_ROOT,
                                 alias_prefix: str = ALIAS_PREFIX) -> str:
    """Module path used by the generated ``import`` of the component itself."""
    relative = _relative_parts(workspace_root, original_path, source_root)
    module = (relative.parent / relative.stem).as_posix()
    return derive_module_alias_path(module, alias_prefix)


def derive_file_kind(original_path: PathLike, markup_extensions: Iterable[str] = MARKUP_EXTENSIONS) -> FileKind:
    """Markup for ``.tsx``/``.jsx`` files, plain otherwise."""
    if Path(original_path).suffix in tuple(markup_extensions):
        return FileKind.MARKUP
    return FileKind.PLAIN


class PathDeriver:
    """Path derivations bound to one configuration."""

    def __init__(self, tests_root: str = TESTS_ROOT, source_root: Optional[str] = SOURCE_ROOT,
                 alias_prefix: str = ALIAS_PREFIX, route_file_names: Iterable[str] = ROUTE_FILE_NAMES,
                 markup_extensions: Iterable[str] = MARKUP_EXTENSIONS):
        self.tests_root = tests_root
        self.source_root = source_root
        self.alias_prefix = alias_prefix
        self.route_file_names = tuple(route_file_names)
        self.markup_extensions = tuple(markup_extensions)

    @classmethod
    def from_config(cls, config: Config) -> "PathDeriver":
        return cls(
            tests_root=config.get('generation.tests_root', TESTS_ROOT),
            source_root=config.get('generation.source_root', SOURCE_ROOT),
            alias_prefix=config.get('generation.alias_prefix', ALIAS_PREFIX),
            route_file_names=config.get('generation.route_file_names', ROUTE_FILE_NAMES),
            markup_extensions=config.get('generation.markup_extensions', MARKUP_EXTENSIONS),
        )

    def test_path(self, workspace_root: PathLike, original_path: PathLike) -> Path:
        test_path = derive_test_path(workspace_root, original_path, self.tests_root, self.source_root)
        logger.debug(f"Determined test path for {original_path}: {test_path}")
        return test_path

    def component_identity(self, original_path: PathLike) -> ComponentIdentity:
        return derive_component_identity(original_path, self.route_file_names)

    def module_alias_path(self, relative_path: PathLike) -> str:
        return derive_module_alias_path(relative_path, self.alias_prefix)

    def component_import_path(self, workspace_root: PathLike, original_path: PathLike) -> str:
        return derive_component_import_path(workspace_root, original_path, self.source_root, self.alias_prefix)

    def file_kind(self, original_path: PathLike) -> FileKind:
        return derive_file_kind(original_path, self.markup_extensions)
