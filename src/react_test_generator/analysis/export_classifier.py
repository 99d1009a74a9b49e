"""Decide whether a component is a default or a named export."""

import re
import logging
from typing import List, Optional, Union

from react_test_generator.models.data_models import (
    ComponentIdentity,
    ExportClassification,
    ExportStyle,
    Outcome,
)

logger = logging.getLogger(__name__)

_EXPORT_BLOCK = re.compile(r"export\s*\{([^}]*)\}")


class ExportClassifier:
    """Classify the export style of a component by pattern matching.

    The default-export patterns are tried before the named-export ones.
    When neither matches, or the source could not be read at all, the
    result is ``ExportStyle.DEFAULT`` with ``Outcome.FALLBACK``.
    """

    def classify(self, file_text: Optional[str],
                 identity: Union[ComponentIdentity, str]) -> ExportClassification:
        name = str(identity)
        if file_text is None:
            logger.debug(f"No source text for {name}; assuming default export")
            return ExportClassification(ExportStyle.DEFAULT, Outcome.FALLBACK)

        if self.is_default_export(file_text, name):
            return ExportClassification(ExportStyle.DEFAULT, Outcome.MATCHED)
        if self.is_named_export(file_text, name):
            return ExportClassification(ExportStyle.NAMED, Outcome.MATCHED)

        logger.debug(f"No export of {name} recognised; assuming default export")
        return ExportClassification(ExportStyle.DEFAULT, Outcome.FALLBACK)

    def is_default_export(self, file_text: str, name: str) -> bool:
        escaped = re.escape(name)
        direct = re.compile(
            rf"export\s+default\s+(?:async\s+)?(?:function\s*\*?\s*|class\s+)?{escaped}(?![\w$])"
        )
        if direct.search(file_text):
            return True
        return any(
            entry == f"{name} as default"
            for entry in self._export_block_entries(file_text)
        )

    def is_named_export(self, file_text: str, name: str) -> bool:
        escaped = re.escape(name)
        declaration = re.compile(
            rf"export\s+(?:const|let|var|(?:async\s+)?function\s*\*?|class)\s+{escaped}(?![\w$])"
        )
        if declaration.search(file_text):
            return True
        return name in self._export_block_entries(file_text)

    @staticmethod
    def _export_block_entries(file_text: str) -> List[str]:
        """Entries of every ``export { ... }`` block, whitespace-collapsed."""
        entries = []
        for match in _EXPORT_BLOCK.finditer(file_text):
            for entry in match.group(1).split(','):
                entry = " ".join(entry.split())
                if entry:
                    entries.append(entry)
        return entries
