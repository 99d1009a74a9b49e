"""Generate test file skeletons for React components."""

__version__ = "0.1.0"
