"""Assemble the text of a generated test file."""

from typing import Iterable, List, Union

from react_test_generator.config import Config
from react_test_generator.generation.frameworks import JEST, TestFramework, framework_from_config
from react_test_generator.models.data_models import (
    ComponentIdentity,
    ExportStyle,
    FileKind,
    MockDeclaration,
)

INDENT = "    "
RENDER_IMPORT = 'import { render, screen } from "@testing-library/react"'

MARKUP_SUITE = """describe("{name}", () => {{
    it("renders without crashing", () => {{
        render(<{name} />)
    }})

    it("renders expected content", () => {{
        render(<{name} />)
    }})

    it("handles user interactions", () => {{
        render(<{name} />)
    }})
}})
"""

PLAIN_SUITE = """describe("{name}", () => {{
    it("should be defined", () => {{
        expect({name}).toBeDefined()
    }})

    it("should work correctly", () => {{}})

    it("should handle edge cases", () => {{}})
}})
"""


def component_import_line(name: str, export_style: ExportStyle, import_path: str) -> str:
    if export_style is ExportStyle.NAMED:
        return f'import {{ {name} }} from "{import_path}"'
    return f'import {name} from "{import_path}"'


class TemplateAssembler:
    """Combine mocks, imports and a suite skeleton into one test file."""

    def __init__(self, framework: TestFramework = JEST):
        self.framework = framework

    @classmethod
    def from_config(cls, config: Config) -> "TemplateAssembler":
        return cls(framework=framework_from_config(config))

    def assemble(self, identity: Union[ComponentIdentity, str], export_style: ExportStyle,
                 file_kind: FileKind, import_path: str,
                 mocks: Iterable[MockDeclaration]) -> str:
        name = str(identity)
        lines: List[str] = []

        if self.framework.runner_import:
            lines.append(self.framework.runner_import)

        mocks = list(mocks)
        for mock in mocks:
            lines.append(mock.render(INDENT))
        if mocks:
            lines.append("")

        if file_kind is FileKind.MARKUP:
            lines.append(RENDER_IMPORT)
        lines.append(component_import_line(name, export_style, import_path))
        lines.append("")

        suite = MARKUP_SUITE if file_kind is FileKind.MARKUP else PLAIN_SUITE
        lines.append(suite.format(name=name))
        return "\n".join(lines)
