"""
Form Analysis Agent
Runs a trained custom model against a single local form
"""

from typing import Any, Dict, Optional
from pathlib import Path

from agents.file_validation_agent import CONTENT_TYPES, FileValidationAgent
from services.form_recognizer_service import FormRecognizerService, FormRecognizerServiceError
from services.storage_service import StorageService
from utils.console import format_analyze_result
from utils.logger import get_logger

logger = get_logger(__name__)


class FormValidationError(Exception):
    """A form could not be read or does not meet the service's input limits"""


class FormAnalysisAgent:
    """
    Agent responsible for:
    1. Reading the form from local storage
    2. Pre-flight validation of format, size and pages
    3. Analysis with the custom model
    4. Displaying extracted key/value pairs and tables
    """

    def __init__(
        self,
        form_recognizer: FormRecognizerService,
        storage_service: Optional[StorageService] = None,
        file_validator: Optional[FileValidationAgent] = None
    ):
        self.form_recognizer = form_recognizer
        self.storage_service = storage_service or StorageService()
        self.file_validator = file_validator or FileValidationAgent()

    async def analyze_form(self, model_id: str, form_file: str, kind: str = "pdf") -> Dict[str, Any]:
        """
        Analyze one form and display the extracted data

        Args:
            model_id: Trained model to analyze with
            form_file: Local path of the form
            kind: pdf, jpg or png

        Returns:
            Dict with analysis result
        """
        operation = f"Analyze {kind.upper()} form"

        if not form_file:
            print(f"\nInvalid {kind}FormFile.")
            return {
                "success": False,
                "error": f"Invalid {kind}FormFile"
            }

        try:
            content_type = CONTENT_TYPES.get(kind)
            if content_type is None:
                raise FormValidationError(f"Unsupported form kind: {kind}")

            file_result = await self.storage_service.get_local_file(form_file)
            if not file_result["success"]:
                raise FormValidationError(file_result["error"])

            file_content = file_result["file_content"]

            validation = await self.file_validator.validate_form(file_content, form_file, kind)
            if not validation["valid"]:
                raise FormValidationError("; ".join(validation["errors"]))

            result = await self.form_recognizer.analyze_with_custom_model(
                model_id,
                file_content,
                content_type=content_type,
                filename=Path(form_file).name
            )

            print(f"\nExtracted data from:{form_file}")
            output = format_analyze_result(result)
            if output:
                print(output)

            return {
                "success": True,
                "result": result,
                "pages": len(result.pages)
            }

        except FormRecognizerServiceError as e:
            logger.error(f"{operation} failed for {form_file}: {e.message}")
            print(f"{operation} : {e.message}")
            return {
                "success": False,
                "error": e.message
            }
        except FormValidationError as e:
            logger.error(f"{operation} rejected {form_file}: {str(e)}")
            print(f"{operation} : {str(e)}")
            return {
                "success": False,
                "error": str(e)
            }
        except Exception as e:
            logger.error(f"{operation} failed for {form_file}: {str(e)}")
            print(f"{operation} : {str(e)}")
            return {
                "success": False,
                "error": str(e)
            }
