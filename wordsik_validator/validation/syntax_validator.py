"""
JSON syntax validation for word-list documents.
"""

from typing import List

from ..documents import parse_json, read_text
from ..errors import DocumentParseError, DocumentReadError, IssueCategory
from .base import BaseValidator


class JsonSyntaxValidator(BaseValidator):
    """Checks that each document is UTF-8 encoded, well-formed JSON."""

    name = "json"

    def _check_file(self, path: str) -> None:
        self.log(f"Validating JSON: {path}")

        try:
            parse_json(read_text(path), path)
        except DocumentReadError as e:
            self.add_error(str(e), file=path, category=IssueCategory.FILE_SYSTEM)
            return
        except DocumentParseError as e:
            self.add_error(
                str(e), file=path, line=e.line, column=e.column,
                category=IssueCategory.PARSE_FAILURE,
            )
            return

        self.record_file(path)
        self.log(f"✅ Valid JSON: {path}")

    def get_validation_methods(self) -> List[str]:
        return ["utf8_decoding", "json_parsing"]
