"""
Exceptions raised while ingesting bulk payloads.

Record errors carry:
- code: machine code of the failure ("missing_fields", "invalid_fields", ...)
- message: human readable text, returned to the caller as-is

They never leave the bulk processor: it records them against the record and
moves on. BulkProcessingError is the only one that reaches the HTTP layer.
"""

from typing import Any, Dict, List, Optional


class RecordError(Exception):
    """Base class for failures that reject a single record."""

    code = "invalid_record"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


class MissingFieldsError(RecordError):
    code = "missing_fields"

    def __init__(self, fields: List[str]):
        self.fields = fields
        super().__init__(f"Missing required field(s): {', '.join(fields)}")


class InvalidFieldsError(RecordError):
    code = "invalid_fields"

    def __init__(self, violations: List[str]):
        self.violations = violations
        super().__init__(f"Invalid field values: {', '.join(violations)}")


class DuplicateRecordError(RecordError):
    code = "duplicate"


class ReferenceNotFoundError(RecordError):
    code = "not_found"


class BulkProcessingError(Exception):
    """
    Terminal failure of a whole bulk call.

    Raised for an empty input and when every record failed. Carries the same
    shape as a successful response so the HTTP layer can render it verbatim.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        status_code: int = 400,
    ):
        self.message = message
        self.errors = errors or []
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> Dict[str, Any]:
        return {
            "response": {
                "code": self.status_code,
                "message": self.message,
                "status": "failed",
            },
            "errors": self.errors,
        }
