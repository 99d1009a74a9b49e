"""Test file generation components."""

from .frameworks import TestFramework, get_framework
from .mock_synthesizer import MockSynthesizer
from .template_assembler import TemplateAssembler

__all__ = [
    "TestFramework",
    "get_framework",
    "MockSynthesizer",
    "TemplateAssembler",
]
