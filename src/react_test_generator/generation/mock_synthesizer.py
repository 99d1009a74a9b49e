"""Build mock declarations for the imports of a component."""

import logging
from typing import Iterable, List, Optional

from react_test_generator.analysis.path_deriver import PathDeriver
from react_test_generator.config import Config
from react_test_generator.generation.frameworks import JEST, TestFramework, framework_from_config
from react_test_generator.models.data_models import ImportStatement, MockDeclaration, MockField

logger = logging.getLogger(__name__)

FRAMEWORK_ROOT_MODULE = "react"
FRAMEWORK_DOM_MODULE = "react-dom"

INTEROP_MARKER = MockField("__esModule", "true")

# Stand-ins exposed by the framework root shim, whatever was actually imported
FRAMEWORK_ROOT_MEMBERS = (
    "useState",
    "useEffect",
    "useLayoutEffect",
    "useContext",
    "useReducer",
    "useRef",
    "useMemo",
    "useCallback",
    "createContext",
    "createElement",
    "cloneElement",
    "forwardRef",
    "memo",
)

PLACEHOLDER_COMPONENT = '(props) => <div data-testid="{tag}">{{JSON.stringify(props)}}</div>'


def is_component_name(name: str) -> bool:
    """Capitalised identifiers are treated as components."""
    return name[:1].isupper()


class MockSynthesizer:
    """Produce one ``MockDeclaration`` per scanned import."""

    def __init__(self, path_deriver: Optional[PathDeriver] = None,
                 framework: TestFramework = JEST,
                 framework_root_module: str = FRAMEWORK_ROOT_MODULE):
        self.path_deriver = path_deriver or PathDeriver()
        self.framework = framework
        self.framework_root_module = framework_root_module

    @classmethod
    def from_config(cls, config: Config) -> "MockSynthesizer":
        return cls(
            path_deriver=PathDeriver.from_config(config),
            framework=framework_from_config(config),
            framework_root_module=config.get('generation.framework_root_module', FRAMEWORK_ROOT_MODULE),
        )

    def synthesize_all(self, statements: Iterable[ImportStatement]) -> List[MockDeclaration]:
        return [self.synthesize(statement) for statement in statements]

    def synthesize(self, statement: ImportStatement) -> MockDeclaration:
        module_path = self.mock_module_path(statement)

        if self.is_framework_root(statement.module_path):
            return MockDeclaration(
                module_path=module_path,
                fields=self._framework_root_fields(),
                mock_function=self.framework.mock_function,
                is_framework_shim=True,
            )

        fields = [INTEROP_MARKER]
        if statement.default_binding:
            fields.append(MockField("default", self.binding_body(statement.default_binding)))
        for binding in statement.named_bindings:
            fields.append(MockField(binding.name, self.binding_body(binding.name)))
        if statement.namespace_binding:
            fields.append(MockField(statement.namespace_binding, "{}"))

        if not statement.has_bindings:
            logger.debug(f"Import of {statement.module_path} has no bindings; emitting marker-only mock")

        return MockDeclaration(
            module_path=module_path,
            fields=tuple(fields),
            mock_function=self.framework.mock_function,
        )

    def mock_module_path(self, statement: ImportStatement) -> str:
        if statement.is_relative:
            return self.path_deriver.module_alias_path(statement.module_path)
        return statement.module_path

    def is_framework_root(self, module_path: str) -> bool:
        return self.framework_root_module in module_path and FRAMEWORK_DOM_MODULE not in module_path

    def binding_body(self, name: str) -> str:
        if is_component_name(name):
            return PLACEHOLDER_COMPONENT.format(tag=name.lower())
        return self.framework.noop_callable

    def _framework_root_fields(self):
        noop = self.framework.noop_callable
        fields = [INTEROP_MARKER, MockField("default", noop)]
        fields.extend(MockField(member, noop) for member in FRAMEWORK_ROOT_MEMBERS)
        return tuple(fields)
