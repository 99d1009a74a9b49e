"""Command-line interface for react test generator."""

import argparse
import logging
import os
import sys
import traceback
from typing import List

from rich.markup import escape

from react_test_generator.config import Config, DEFAULT_CONFIG_FILE, ON_EXISTING_CHOICES
from react_test_generator.core import ReactTestGeneratorApp, COMMAND_ID
from react_test_generator.generation.frameworks import FRAMEWORKS
from react_test_generator.models.data_models import GenerationResult
from react_test_generator.utils.user_feedback import UserFeedback
from react_test_generator.utils.validation import Validator
from react_test_generator.exceptions import ReactTestGeneratorError, ConfigurationError, ValidationError


def configure_logging(verbose: bool = False, quiet: bool = False):
    """Configure logging based on verbosity level."""
    if quiet:
        logging.basicConfig(level=logging.ERROR, format='%(message)s')
    elif verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        # User feedback goes through the Rich UI; logging only surfaces problems
        logging.basicConfig(
            level=logging.WARNING,
            format='%(levelname)s: %(message)s'
        )
        logging.getLogger('react_test_generator').setLevel(logging.ERROR)


logger = logging.getLogger(__name__)

MODES = ('create', 'preview', 'init-config')


def setup_argparse() -> argparse.ArgumentParser:
    """Set up command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="react-test-generator",
        description="Generate test file skeletons for React components",
        epilog=f"Command id: {COMMAND_ID}",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "mode",
        nargs='?',
        default='create',
        help=f"Mode of operation: {', '.join(MODES)} (default: create)"
    )
    parser.add_argument(
        "paths",
        nargs='*',
        default=[],
        help="Component files to generate tests for"
    )
    parser.add_argument(
        "--workspace",
        help="Workspace root (default: nearest directory with a package.json, tsconfig.json or .git)"
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help="Configuration file"
    )
    parser.add_argument(
        "--framework",
        choices=sorted(FRAMEWORKS),
        help="Test framework the mocks are written for (default: jest)"
    )
    parser.add_argument(
        "--on-existing",
        dest="on_existing",
        choices=list(ON_EXISTING_CHOICES),
        help="What to do when the test file already exists (default: prompt)"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing test files without asking"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be written without writing"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Minimal output mode - only show results and errors"
    )

    return parser


def parse_arguments(parser: argparse.ArgumentParser, argv=None) -> argparse.Namespace:
    """Parse argv; a leading path instead of a mode means ``create``."""
    args = parser.parse_args(argv)
    if args.mode not in MODES:
        args.paths = [args.mode] + list(args.paths)
        args.mode = 'create'
    return args


def _apply_cli_overrides_to_config(args, config: Config) -> None:
    """Apply CLI override flags to the loaded configuration object."""
    if getattr(args, 'framework', None):
        config.config['generation']['framework'] = args.framework
    if getattr(args, 'on_existing', None):
        config.config['generation']['on_existing'] = args.on_existing


def load_and_validate_config(args, feedback: UserFeedback) -> Config:
    """Load configuration, apply CLI overrides and validate the result."""
    try:
        if getattr(args, 'config', None):
            Validator.validate_config_file(args.config)
        config = Config(getattr(args, 'config', None))
        _apply_cli_overrides_to_config(args, config)
        config.validate()
    except (ConfigurationError, ValidationError) as e:
        feedback.error(e.message, e.suggestion)
        sys.exit(1)

    feedback.debug(
        f"Configuration: framework={config.get('generation.framework')}, "
        f"alias={config.get('generation.alias_prefix')}, "
        f"tests_root={config.get('generation.tests_root')}"
    )
    return config


def handle_init_config_mode(args, feedback: UserFeedback):
    """Write a sample configuration file."""
    config_file = args.config

    if os.path.exists(config_file):
        feedback.warning(f"Configuration file {config_file} already exists!")
        if not feedback.confirm("Do you want to overwrite it?", default=False):
            feedback.info("Configuration generation cancelled")
            return

    try:
        Config(None).create_sample_config(config_file)
    except OSError as e:
        feedback.error(f"Failed to create configuration file: {e}",
                       "Check file permissions and try again.")
        sys.exit(1)

    feedback.success(f"Sample configuration created at {config_file}")


def report_result(result: GenerationResult, feedback: UserFeedback):
    """Summarise one generated test file."""
    if result.skipped:
        feedback.info(f"Kept existing test file: {escape(str(result.test_path))}")
        return

    details = {
        "Component": escape(result.identity.name),
        "Test File": escape(str(result.test_path)),
        "Template": result.file_kind.value,
        "Export": f"{result.export.style.value}" + (" (assumed)" if result.export.is_fallback else ""),
        "Mocks": str(len(result.mocks)),
    }
    if not result.source_readable:
        details["Source"] = "unreadable, best-effort skeleton"
    feedback.summary_panel("Test File", details, "green" if result.written else "blue")


def execute_mode(app: ReactTestGeneratorApp, args, feedback: UserFeedback) -> List[GenerationResult]:
    """Execute the requested mode and report its results."""
    if args.mode == 'preview':
        results = app.run_preview_mode(args.paths)
        for result in results:
            lexer = result.test_path.suffix.lstrip('.') or "tsx"
            feedback.code_preview(escape(str(result.test_path)), result.content, lexer=lexer)
        return results

    results = app.run_create_mode(args.paths, force=args.force, dry_run=args.dry_run)
    for result in results:
        if args.dry_run:
            feedback.code_preview(escape(f"[dry-run] {result.test_path}"), result.content,
                                  lexer=result.test_path.suffix.lstrip('.') or "tsx")
        report_result(result, feedback)
    return results


def main(argv=None):
    """Main execution function."""
    feedback = None

    try:
        parser = setup_argparse()
        args = parse_arguments(parser, argv)

        feedback = UserFeedback(verbose=args.verbose, quiet=args.quiet)
        configure_logging(verbose=args.verbose, quiet=args.quiet)
        feedback.brand_header()

        if args.mode == 'init-config':
            handle_init_config_mode(args, feedback)
            return

        config = load_and_validate_config(args, feedback)
        app = ReactTestGeneratorApp(config, feedback, workspace=args.workspace)
        execute_mode(app, args, feedback)

        if app.failures:
            sys.exit(1)

    except KeyboardInterrupt:
        if feedback:
            feedback.warning("Operation cancelled by user")
        else:
            print("\nOperation cancelled by user")
        sys.exit(130)

    except ReactTestGeneratorError as e:
        if feedback:
            feedback.error(escape(e.message), e.suggestion)
        else:
            print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        if feedback:
            feedback.error(f"Unexpected error: {escape(str(e))}",
                           "This appears to be a bug. Please report it with the details below.")
            if feedback.verbose:
                feedback.error("Full traceback:", details=traceback.format_exc())
        else:
            print(f"Unexpected error: {e}", file=sys.stderr)
            if logging.getLogger().isEnabledFor(logging.DEBUG):
                traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
