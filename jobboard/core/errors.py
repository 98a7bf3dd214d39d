"""
Error taxonomy.

Every failure the API reports is a JobBoardError subclass. The exception
handler in main.py turns them into {"error": ..., "details": ...} bodies,
so route code only raises.

A provider reply that is not valid JSON is NOT an error: the feedback
parser degrades to a fallback result instead (see feedback_parser.py).
"""

from typing import Optional, Dict, Any


class JobBoardError(Exception):
    """Base class for errors that map to a JSON error response."""

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(self, error: Optional[str] = None, details: Optional[str] = None):
        self.error = error or self.error
        self.details = details
        super().__init__(details or self.error)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(JobBoardError):
    """A required request input is missing."""
    status_code = 400
    error = "Invalid request"


class NotFoundError(JobBoardError):
    status_code = 404
    error = "Not found"


class ConflictError(JobBoardError):
    status_code = 400
    error = "Already exists"


class ConfigurationError(JobBoardError):
    """The AI provider credential is not configured."""
    status_code = 500
    error = "AI provider not configured"


class ExtractionError(JobBoardError):
    """Uploaded document could not be read or parsed."""
    status_code = 500
    error = "AI request failed"


class ProviderError(JobBoardError):
    """The call to the AI provider failed."""
    status_code = 500
    error = "AI request failed"


class EmailDeliveryError(JobBoardError):
    status_code = 500
    error = "Failed to send email"
