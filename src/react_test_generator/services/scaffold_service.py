"""Service driving the analysis-and-generation pipeline for one component."""

from pathlib import Path
from typing import Optional, Union

from react_test_generator.analysis.export_classifier import ExportClassifier
from react_test_generator.analysis.import_scanner import ImportScanner
from react_test_generator.analysis.path_deriver import PathDeriver
from react_test_generator.config import Config
from react_test_generator.exceptions import InputError, SourceReadError
from react_test_generator.generation.mock_synthesizer import MockSynthesizer
from react_test_generator.generation.template_assembler import TemplateAssembler
from react_test_generator.models.data_models import GenerationResult, SourceLocation
from react_test_generator.services.base_service import BaseService
from react_test_generator.utils.file_utils import FileUtils
from react_test_generator.utils.in_flight import InFlightRegistry, default_registry
from react_test_generator.utils.user_feedback import UserFeedback
from react_test_generator.utils.writer import TestFileWriter


class ScaffoldService(BaseService):
    """Derive, analyse, assemble and persist a test skeleton for a component file."""

    def __init__(self, workspace_root: Path, config: Config, feedback: Optional[UserFeedback] = None,
                 writer: Optional[TestFileWriter] = None, registry: Optional[InFlightRegistry] = None):
        super().__init__(workspace_root, config, feedback)
        self.path_deriver = PathDeriver.from_config(config)
        self.classifier = ExportClassifier()
        self.scanner = ImportScanner.from_config(config)
        self.synthesizer = MockSynthesizer.from_config(config)
        self.assembler = TemplateAssembler.from_config(config)
        self.writer = writer or TestFileWriter(workspace_root)
        self.registry = registry or default_registry

    def locate(self, original_path: Union[str, Path]) -> SourceLocation:
        """Pair the file with the workspace, rejecting files outside it."""
        location = SourceLocation(Path(original_path), Path(self.workspace_root))
        if not location.is_inside_workspace:
            raise InputError(
                "File is not in a workspace",
                path=str(original_path),
                suggestion=f"Choose a file under {self.workspace_root} or pass --workspace."
            )
        return location

    def read_source(self, original_path: Path) -> Optional[str]:
        """Source text, or None when it cannot be read."""
        try:
            return FileUtils.read_file_safely(original_path)
        except SourceReadError as e:
            self._log_warning(f"Could not read {original_path}; generating a best-effort skeleton",
                              e.suggestion)
            self.logger.debug(f"Read failure: {e.message}")
            return None

    def build(self, original_path: Union[str, Path]) -> GenerationResult:
        """Run the pipeline without touching the destination."""
        location = self.locate(original_path)
        original = location.original_path

        test_path = self.path_deriver.test_path(location.workspace_root, original)
        identity = self.path_deriver.component_identity(original)
        file_kind = self.path_deriver.file_kind(original)
        import_path = self.path_deriver.component_import_path(location.workspace_root, original)

        source_text = self.read_source(original)
        export = self.classifier.classify(source_text, identity)
        scan = self.scanner.scan(source_text)
        mocks = self.synthesizer.synthesize_all(scan.imports)

        self._log_debug(
            f"{identity}: {export.style.value} export ({export.outcome.value}), "
            f"{len(scan.imports)} mockable imports, {file_kind.value} template"
        )

        content = self.assembler.assemble(identity, export.style, file_kind, import_path, mocks)
        return GenerationResult(
            source=location,
            test_path=test_path,
            identity=identity,
            file_kind=file_kind,
            content=content,
            export=export,
            scan=scan,
            mocks=mocks,
            source_readable=source_text is not None,
        )

    def create_test_file(self, original_path: Union[str, Path], force: bool = False,
                         dry_run: bool = False) -> GenerationResult:
        """Generate the test file for ``original_path`` and write it.

        An existing destination is only replaced when ``force`` is set, the
        configured policy is ``overwrite``, or the user confirms. A dry run
        never prompts and never writes.
        """
        location = self.locate(original_path)
        test_path = self.path_deriver.test_path(location.workspace_root, location.original_path)

        with self.registry.claim(test_path):
            if (not force and not dry_run and self.writer.exists(test_path)
                    and not self._should_overwrite(test_path)):
                self._log_info(f"Test file already exists: {test_path}")
                result = self.build(location.original_path)
                result.skipped = True
                return result

            result = self.build(location.original_path)
            if dry_run:
                self._log_info(f"[dry-run] Would write {test_path}")
                return result

            self.writer.write_test_file(result.test_path, result.content)
            result.written = True

        self._log_success(f"Test file created: {result.test_path}")
        return result

    def _should_overwrite(self, test_path: Path) -> bool:
        policy = self.config.get('generation.on_existing', 'prompt')
        if policy == 'overwrite':
            return True
        if policy == 'skip':
            return False
        return self.feedback.confirm(f"Test file {test_path} already exists. Overwrite it?", default=False)
