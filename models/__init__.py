"""
Form Recognizer Models
Response models for the custom-model REST operations
"""

from .model_result import (
    EMPTY_MODEL_ID,
    ModelResult,
    ModelsResult,
    TrainResult,
    TrainingDocumentResult,
    FormOperationError,
)
from .keys_result import KeysResult
from .analyze_result import (
    AnalyzeResult,
    ExtractedPage,
    ExtractedKeyValuePair,
    ExtractedTable,
    ExtractedTableColumn,
    ExtractedToken,
)
from .error_response import ErrorResponse, ErrorInformation

__all__ = [
    "EMPTY_MODEL_ID",
    "ModelResult",
    "ModelsResult",
    "TrainResult",
    "TrainingDocumentResult",
    "FormOperationError",
    "KeysResult",
    "AnalyzeResult",
    "ExtractedPage",
    "ExtractedKeyValuePair",
    "ExtractedTable",
    "ExtractedTableColumn",
    "ExtractedToken",
    "ErrorResponse",
    "ErrorInformation",
]
