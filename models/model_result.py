"""
Model Result
Represents a custom model as reported by the Form Recognizer service
"""

from datetime import datetime
from typing import List, Optional

from .base import ServiceModel

# Stands in for "no model" after a failed training call
EMPTY_MODEL_ID = "00000000-0000-0000-0000-000000000000"


class ModelResult(ServiceModel):
    model_id: str
    status: str
    created_date_time: Optional[datetime] = None
    last_updated_date_time: Optional[datetime] = None

    def __repr__(self):
        return f"<ModelResult(model_id='{self.model_id}', status='{self.status}')>"

    def is_ready(self) -> bool:
        """Check if the model finished training and can analyze forms"""
        return self.status == "ready"

    def get_status_display(self) -> str:
        """Get human-readable model status"""
        status_map = {
            "created": "Training",
            "ready": "Ready",
            "invalid": "Invalid",
        }
        return status_map.get(self.status, "Unknown")


class ModelsResult(ServiceModel):
    models: List[ModelResult] = []


class FormOperationError(ServiceModel):
    error_message: str = ""


class TrainingDocumentResult(ServiceModel):
    document_name: str
    pages: int = 0
    errors: List[str] = []
    status: str = ""

    def succeeded(self) -> bool:
        return self.status == "success"


class TrainResult(ServiceModel):
    model_id: str
    training_documents: List[TrainingDocumentResult] = []
    errors: List[FormOperationError] = []

    def failed_documents(self) -> List[TrainingDocumentResult]:
        """Training documents the service could not use"""
        return [doc for doc in self.training_documents if not doc.succeeded()]
