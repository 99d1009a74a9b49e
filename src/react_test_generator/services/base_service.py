"""Base service class for common functionality."""

import logging
from abc import ABC
from pathlib import Path
from typing import Optional

from rich.markup import escape

from react_test_generator.config import Config
from react_test_generator.utils.user_feedback import UserFeedback


class BaseService(ABC):
    """Base class for services working inside one workspace.

    Messages go to the rich console when the caller supplied a feedback
    channel and to standard logging otherwise. Console messages are markup
    escaped, since route directories such as ``app/[slug]`` read as rich tags.
    """

    def __init__(self, workspace_root: Path, config: Config, feedback: Optional[UserFeedback] = None):
        self.workspace_root = workspace_root
        self.config = config
        self.feedback = feedback or UserFeedback()
        self.logger = logging.getLogger(self.__class__.__name__)

        # Rich UI only when the caller supplied a feedback channel
        self.use_rich_ui = feedback is not None

    def _log_info(self, message: str):
        """Log info message."""
        if self.use_rich_ui:
            self.feedback.info(escape(message))
        else:
            self.logger.info(message)

    def _log_success(self, message: str):
        """Log success message."""
        if self.use_rich_ui:
            self.feedback.success(escape(message))
        else:
            self.logger.info(f"SUCCESS: {message}")

    def _log_warning(self, message: str, suggestion: Optional[str] = None):
        """Log warning message with an optional suggestion."""
        if self.use_rich_ui:
            self.feedback.warning(escape(message), suggestion)
        else:
            self.logger.warning(message)
            if suggestion:
                self.logger.warning(f"Suggestion: {suggestion}")

    def _log_debug(self, message: str):
        """Log debug message; the console only shows it in verbose mode."""
        if self.use_rich_ui and self.feedback.verbose:
            self.feedback.debug(escape(message))
        else:
            self.logger.debug(message)
