"""
Model Management Agent
Lists and deletes custom models
"""

from typing import Optional

from models import ModelsResult
from services.form_recognizer_service import FormRecognizerService, FormRecognizerServiceError
from utils.console import format_model_list
from utils.logger import get_logger

logger = get_logger(__name__)


class ModelManagementAgent:
    """Agent for the model inventory: listing and deletion"""

    def __init__(self, form_recognizer: FormRecognizerService):
        self.form_recognizer = form_recognizer

    async def list_models(self) -> Optional[ModelsResult]:
        """Display every trained model, one per line"""
        try:
            models = await self.form_recognizer.get_custom_models()
            logger.info(f"Found {len(models.models)} models")
            output = format_model_list(models)
            if output:
                print(output)
            print()
            return models

        except FormRecognizerServiceError as e:
            logger.error(f"Listing models failed: {e.message}")
            print(f"Get list of models : {e.message}")
            return None

    async def delete_model(self, model_id: str) -> bool:
        """Delete a model. The call is made even for the empty model id."""
        try:
            print(f"Deleting model: {model_id}...", end="", flush=True)
            await self.form_recognizer.delete_custom_model(model_id)
            print("done.\n")
            return True

        except FormRecognizerServiceError as e:
            logger.error(f"Deleting model {model_id} failed: {e.message}")
            print(f"Delete model : {e.message}")
            return False
