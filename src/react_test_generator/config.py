"""Configuration management for test scaffold generation."""

import os
import copy
import yaml
import logging
from typing import Dict, Any

from react_test_generator.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".reacttestgen.yml"

SUPPORTED_FRAMEWORKS = ('jest', 'vitest')
ON_EXISTING_CHOICES = ('prompt', 'overwrite', 'skip')

# Keys that must hold a list of strings
LIST_KEYS = (
    'generation.route_file_names',
    'generation.markup_extensions',
    'scanning.excluded_prefixes',
    'scanning.excluded_packages',
    'workspace.markers',
)


class Config:
    """Configuration management for test scaffold generation."""

    DEFAULT_CONFIG = {
        'generation': {
            'tests_root': 'tests',
            'source_root': 'src',        # Leading directory dropped from test and import paths
            'alias_prefix': '@/',        # Project-wide path alias used in generated imports
            'route_file_names': ['page', 'layout'],
            'markup_extensions': ['.tsx', '.jsx'],
            'framework': 'jest',         # Options: 'jest', 'vitest'
            'framework_root_module': 'react',
            'on_existing': 'prompt',     # Options: 'prompt', 'overwrite', 'skip'
        },
        'scanning': {
            'excluded_prefixes': [
                '@testing-library/',
                '@jest/',
                '@vitest/',
            ],
            'excluded_packages': ['jest', 'vitest'],
            'skip_type_imports': True,   # `import type` carries no runtime value to mock
        },
        'workspace': {
            'markers': [
                'package.json',
                'tsconfig.json',
                'jsconfig.json',
                '.git',
                DEFAULT_CONFIG_FILE,
            ],
        },
    }

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE):
        self.config_file = config_file
        self.config = self.load_config()
        self.validate()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file or use defaults."""
        # When config_file is None or falsy, skip file I/O and return defaults
        if not self.config_file:
            return copy.deepcopy(self.DEFAULT_CONFIG)
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r') as f:
                    user_config = yaml.safe_load(f)
                    # yaml.safe_load can return None
                    if not user_config:
                        return copy.deepcopy(self.DEFAULT_CONFIG)
                    return self._deep_merge(self.DEFAULT_CONFIG, user_config)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {self.config_file}: {e}")
        return copy.deepcopy(self.DEFAULT_CONFIG)

    def validate(self) -> None:
        """Reject values the generator cannot act on."""
        framework = self.get('generation.framework')
        if framework not in SUPPORTED_FRAMEWORKS:
            raise ConfigurationError(
                f"Unsupported test framework: {framework}",
                suggestion=f"Set generation.framework to one of: {', '.join(SUPPORTED_FRAMEWORKS)}"
            )
        on_existing = self.get('generation.on_existing')
        if on_existing not in ON_EXISTING_CHOICES:
            raise ConfigurationError(
                f"Unsupported on_existing policy: {on_existing}",
                suggestion=f"Set generation.on_existing to one of: {', '.join(ON_EXISTING_CHOICES)}"
            )
        for key in LIST_KEYS:
            value = self.get(key)
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                raise ConfigurationError(
                    f"{key} must be a list of strings, got: {value!r}",
                    suggestion=f"Write {key} as a YAML list of strings."
                )

    def create_sample_config(self, filepath: str = DEFAULT_CONFIG_FILE) -> None:
        """Create a configuration file with all options and explanations."""
        config_content = """# React Test Generator Configuration
# Edit the values you want to customize; omitted keys fall back to these defaults.

generation:
  # Generated tests live under <workspace>/<tests_root>/...
  tests_root: 'tests'

  # Leading directory removed from test paths and generated import paths
  # (src/components/Card.tsx -> tests/components/Card.test.tsx, "@/components/Card")
  source_root: 'src'

  # Path alias standing in for the source root in generated imports
  alias_prefix: '@/'

  # Routing convention files named after their parent directory (app/dashboard/page.tsx -> DashboardPage)
  route_file_names: ['page', 'layout']

  # Extensions that get the markup (render-based) test template
  markup_extensions: ['.tsx', '.jsx']

  # Test framework used for mock declarations: 'jest' or 'vitest'
  framework: 'jest'

  # Imports from this module get a blanket hook/render shim instead of per-binding mocks
  framework_root_module: 'react'

  # What to do when the test file already exists: 'prompt', 'overwrite' or 'skip'
  on_existing: 'prompt'

scanning:
  # Imports from these module prefixes are never mocked
  excluded_prefixes:
    - '@testing-library/'
    - '@jest/'
    - '@vitest/'

  # Test runner packages that are never mocked
  excluded_packages: ['jest', 'vitest']

  # Ignore `import type ...` statements
  skip_type_imports: true

workspace:
  # Files that mark a workspace root when --workspace is not given
  markers:
    - 'package.json'
    - 'tsconfig.json'
    - 'jsconfig.json'
    - '.git'
    - '.reacttestgen.yml'
"""

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(config_content)

        logger.info(f"Configuration created at {filepath}")

    def get(self, key: str, default=None):
        """Get configuration value using dot notation."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def _deep_merge(self, default: Dict, user: Dict) -> Dict:
        """Deeply merge user config with defaults."""
        result = copy.deepcopy(default)

        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
