"""Main application orchestrator."""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from rich.markup import escape

from react_test_generator.config import Config
from react_test_generator.exceptions import InputError, ReactTestGeneratorError
from react_test_generator.models.data_models import GenerationResult
from react_test_generator.services.scaffold_service import ScaffoldService
from react_test_generator.utils.in_flight import InFlightRegistry, default_registry
from react_test_generator.utils.user_feedback import UserFeedback
from react_test_generator.utils.validation import Validator

COMMAND_ID = "react-test-generator.createTestFile"


class ReactTestGeneratorApp:
    """Resolve the workspace of each requested file and hand it to the scaffold service."""

    def __init__(self, config: Config, feedback: Optional[UserFeedback] = None,
                 workspace: Optional[Path] = None, registry: Optional[InFlightRegistry] = None):
        self.config = config
        self.feedback = feedback or UserFeedback()
        self.workspace = Validator.validate_workspace(workspace) if workspace else None
        self.registry = registry or default_registry
        self._services: Dict[Path, ScaffoldService] = {}
        self.failures: List[Tuple[str, ReactTestGeneratorError]] = []

    def resolve_workspace(self, source_file: Path) -> Path:
        if self.workspace:
            return self.workspace
        root = Validator.find_workspace_root(source_file, self.config.get('workspace.markers', []))
        if root is None:
            raise InputError(
                "File is not in a workspace",
                path=str(source_file),
                suggestion="Run inside a project with a package.json or pass --workspace."
            )
        return root

    def service_for(self, workspace_root: Path) -> ScaffoldService:
        if workspace_root not in self._services:
            self._services[workspace_root] = ScaffoldService(
                workspace_root, self.config, self.feedback, registry=self.registry
            )
        return self._services[workspace_root]

    def create_test_file(self, path: Union[str, Path, None], force: bool = False,
                         dry_run: bool = False) -> GenerationResult:
        """Handle one activation of the create-test-file command."""
        source_file = Validator.validate_source_file(path)
        service = self.service_for(self.resolve_workspace(source_file))
        return service.create_test_file(source_file, force=force, dry_run=dry_run)

    def preview_test_file(self, path: Union[str, Path, None]) -> GenerationResult:
        source_file = Validator.validate_source_file(path)
        service = self.service_for(self.resolve_workspace(source_file))
        return service.build(source_file)

    def run_create_mode(self, paths: Sequence[str], force: bool = False,
                        dry_run: bool = False) -> List[GenerationResult]:
        """Create test files for every path; a failing path does not stop the others."""
        return self._run_each(paths, lambda path: self.create_test_file(path, force=force, dry_run=dry_run))

    def run_preview_mode(self, paths: Sequence[str]) -> List[GenerationResult]:
        return self._run_each(paths, self.preview_test_file)

    def _run_each(self, paths, action) -> List[GenerationResult]:
        if not paths:
            raise InputError(
                "No file selected",
                suggestion="Pass the path of a component file, e.g. src/components/Card.tsx"
            )

        results = []
        for path in paths:
            try:
                results.append(action(path))
            except InputError as e:
                self.feedback.error(escape(e.message), e.suggestion)
                self.failures.append((str(path), e))
            except ReactTestGeneratorError as e:
                self.feedback.error(f"Error creating test file: {escape(e.message)}", e.suggestion)
                self.failures.append((str(path), e))
        return results
