"""
Model Training Agent
Trains a custom model from labeled sample forms and reports what it learned
"""

from typing import Any, Dict, Optional
from urllib.parse import urlparse

from models import EMPTY_MODEL_ID, KeysResult
from services.form_recognizer_service import FormRecognizerService, FormRecognizerServiceError
from utils.console import format_extracted_keys, format_model_status
from utils.logger import get_logger

logger = get_logger(__name__)

# Characters that may not appear unescaped in a URI
_INVALID_URL_CHARACTERS = set(' \t\r\n<>"{}|\\^`')


def is_well_formed_url(url: Optional[str]) -> bool:
    """Check that url is an absolute URI: a scheme and a host, or a file path"""
    if not url or url != url.strip():
        return False
    if any(character in _INVALID_URL_CHARACTERS for character in url):
        return False
    try:
        parts = urlparse(url)
    except ValueError:
        return False
    if not parts.scheme:
        return False
    if parts.scheme == "file":
        return bool(parts.netloc or parts.path)
    return bool(parts.netloc)


class ModelTrainingAgent:
    """
    Agent responsible for:
    1. Training a custom model from a blob container of sample forms
    2. Displaying the trained model's status
    3. Listing the keys extracted per cluster
    """

    def __init__(self, form_recognizer: FormRecognizerService):
        self.form_recognizer = form_recognizer

    async def train_model(self, training_data_url: str, source_filter: Optional[Dict[str, Any]] = None) -> str:
        """
        Train a model and display its status

        Args:
            training_data_url: SAS URL of the container with the training forms
            source_filter: Optional prefix / sub folder filter for the container

        Returns:
            The new model id, or EMPTY_MODEL_ID if training did not happen
        """
        if not is_well_formed_url(training_data_url):
            print(f"\nInvalid trainingDataUrl:\n{training_data_url} \n")
            logger.warning("Training skipped, training data URL is not a well-formed absolute URL")
            return EMPTY_MODEL_ID

        try:
            result = await self.form_recognizer.train_custom_model(training_data_url, source_filter)

            for document in result.failed_documents():
                logger.warning(f"Training document {document.document_name} not used: {', '.join(document.errors)}")

            model = await self.form_recognizer.get_custom_model(result.model_id)
            print()
            print(format_model_status(model))

            return result.model_id

        except FormRecognizerServiceError as e:
            logger.error(f"Training failed: {e.message}")
            print(f"Train Model : {e.message}")
            return EMPTY_MODEL_ID

    async def get_extracted_keys(self, model_id: str) -> Optional[KeysResult]:
        """Display the keys the model extracted, cluster by cluster"""
        if not model_id or model_id == EMPTY_MODEL_ID:
            print("\nInvalid model Id.")
            return None

        try:
            keys = await self.form_recognizer.get_extracted_keys(model_id)
            logger.info(f"Model {model_id} extracted {keys.key_count()} keys in {len(keys.clusters)} clusters")
            output = format_extracted_keys(keys)
            if output:
                print(output)
            return keys

        except FormRecognizerServiceError as e:
            logger.error(f"Getting extracted keys failed for model {model_id}: {e.message}")
            print(f"Get list of extracted keys : {e.message}")
            return None
