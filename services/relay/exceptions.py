from typing import Optional

from fastapi import HTTPException

INVALID_MESSAGE = 'Invalid request: "message" must be a non-empty string.'


def normalize_error_status(status: Optional[int]) -> int:
    """Error responses always carry a 4xx/5xx status; anything else becomes 500."""
    if isinstance(status, int) and 400 <= status < 600:
        return status
    return 500


class RelayException(HTTPException):
    def __init__(self, status_code: int, detail: str, details: Optional[str] = None):
        super().__init__(status_code=status_code, detail=detail)
        self.details = details

class InvalidMessageException(RelayException):
    def __init__(self, detail: str = INVALID_MESSAGE):
        super().__init__(status_code=400, detail=detail)

class WebhookUnreachableException(RelayException):
    def __init__(self, details: Optional[str] = None):
        super().__init__(status_code=500, detail="Failed to get reply from webhook", details=details)
