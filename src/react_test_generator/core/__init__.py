"""Core application package."""

from .application import ReactTestGeneratorApp, COMMAND_ID

__all__ = [
    'ReactTestGeneratorApp',
    'COMMAND_ID',
]
