"""
Form Recognizer Sample Services
REST client and local storage used by the agents
"""

from .form_recognizer_service import FormRecognizerService, FormRecognizerServiceError
from .storage_service import StorageService

__all__ = [
    "FormRecognizerService",
    "FormRecognizerServiceError",
    "StorageService"
]
