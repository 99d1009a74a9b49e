"""Test framework dialects the generated files are written in."""

from dataclasses import dataclass
from typing import Optional

from react_test_generator.config import Config
from react_test_generator.exceptions import ConfigurationError


@dataclass(frozen=True)
class TestFramework:
    """Spelling of mocks and globals for one test runner."""
    __test__ = False  # keep pytest from collecting this class

    name: str
    mock_function: str
    noop_callable: str
    runner_import: Optional[str] = None


JEST = TestFramework(
    name="jest",
    mock_function="jest.mock",
    noop_callable="jest.fn()",
)

VITEST = TestFramework(
    name="vitest",
    mock_function="vi.mock",
    noop_callable="vi.fn()",
    runner_import='import { describe, it, expect, vi } from "vitest"',
)

FRAMEWORKS = {framework.name: framework for framework in (JEST, VITEST)}


def get_framework(name: str) -> TestFramework:
    try:
        return FRAMEWORKS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported test framework: {name}",
            suggestion=f"Use one of: {', '.join(sorted(FRAMEWORKS))}"
        )


def framework_from_config(config: Config) -> TestFramework:
    return get_framework(config.get('generation.framework', JEST.name))
