"""
Form Recognizer Agents
One agent per step of the custom model walkthrough
"""

from .file_validation_agent import FileValidationAgent, CONTENT_TYPES
from .model_training_agent import ModelTrainingAgent, is_well_formed_url
from .form_analysis_agent import FormAnalysisAgent, FormValidationError
from .model_management_agent import ModelManagementAgent

__all__ = [
    "FileValidationAgent",
    "CONTENT_TYPES",
    "ModelTrainingAgent",
    "is_well_formed_url",
    "FormAnalysisAgent",
    "FormValidationError",
    "ModelManagementAgent"
]
