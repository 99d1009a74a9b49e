"""Custom exception classes for react test generator."""

from typing import Optional


class ReactTestGeneratorError(Exception):
    """Base exception for all react test generator errors."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self):
        result = self.message
        if self.suggestion:
            result += f"\n\nSuggestion: {self.suggestion}"
        return result


class ConfigurationError(ReactTestGeneratorError):
    """Raised when there are configuration-related issues."""
    pass


class ValidationError(ReactTestGeneratorError):
    """Raised when input validation fails."""
    pass


class InputError(ValidationError):
    """Raised when no usable source location was supplied."""

    def __init__(self, message: str, path: Optional[str] = None, suggestion: Optional[str] = None):
        super().__init__(message, suggestion)
        self.path = path


class FileOperationError(ReactTestGeneratorError):
    """Raised when file operations fail."""

    def __init__(self, message: str, filepath: Optional[str] = None, suggestion: Optional[str] = None):
        super().__init__(message, suggestion)
        self.filepath = filepath


class SourceReadError(FileOperationError):
    """Raised when the component source cannot be read."""
    pass


class WriteError(FileOperationError):
    """Raised when the generated test file cannot be written."""
    pass


class GenerationInProgressError(ReactTestGeneratorError):
    """Raised when another invocation is already writing the same test file."""

    def __init__(self, message: str, test_path: Optional[str] = None, suggestion: Optional[str] = None):
        super().__init__(message, suggestion)
        self.test_path = test_path
