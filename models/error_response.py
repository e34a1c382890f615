"""
Error Response
Error body returned by the Form Recognizer service on a failed call
"""

from typing import Optional

from .base import ServiceModel


class ErrorInformation(ServiceModel):
    code: Optional[str] = None
    message: str = ""


class ErrorResponse(ServiceModel):
    error: ErrorInformation
