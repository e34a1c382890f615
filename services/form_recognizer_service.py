"""
Form Recognizer Service
Handles Azure Form Recognizer custom model operations over REST
"""

import httpx
from typing import Any, Dict, Optional, Type, TypeVar

from config.service_config import ServiceConfig
from models import (
    AnalyzeResult,
    ErrorResponse,
    KeysResult,
    ModelResult,
    ModelsResult,
    TrainResult,
)
from models.base import ServiceModel
from utils.logger import get_logger

logger = get_logger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"

ResultType = TypeVar("ResultType", bound=ServiceModel)


class FormRecognizerServiceError(Exception):
    """Error response (or transport failure) from the Form Recognizer service"""

    def __init__(self, message: str, status_code: Optional[int] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code


class FormRecognizerService:
    """Service for Form Recognizer custom model operations"""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        try:
            self.config = config or ServiceConfig()

            logger.info(f"Initializing FormRecognizerService with endpoint: {self.config.endpoint}")

            if not self.config.is_configured():
                raise ValueError(
                    f"Form Recognizer credentials not configured: {', '.join(self.config.missing_settings())}"
                )

            self.client = httpx.AsyncClient(
                base_url=self.config.custom_models_url,
                headers={SUBSCRIPTION_KEY_HEADER: self.config.subscription_key},
                timeout=self.config.timeout,
                transport=transport
            )

            logger.info("FormRecognizerService initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize FormRecognizerService: {str(e)}")
            raise

    async def __aenter__(self) -> "FormRecognizerService":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def train_custom_model(
        self,
        source: str,
        source_filter: Optional[Dict[str, Any]] = None
    ) -> TrainResult:
        """Train a custom model from the forms in a blob container"""
        payload = {
            "source": source,
            "sourceFilter": source_filter or {"prefix": "", "includeSubFolders": False}
        }
        logger.info("Starting custom model training")
        response = await self._request("POST", "/train", json=payload)
        result = self._parse(response, TrainResult)
        logger.info(
            f"Training finished for model {result.model_id}: "
            f"{len(result.training_documents)} documents, {len(result.failed_documents())} failed"
        )
        return result

    async def get_custom_model(self, model_id: str) -> ModelResult:
        """Get the status record of a model"""
        response = await self._request("GET", f"/models/{model_id}")
        return self._parse(response, ModelResult)

    async def get_extracted_keys(self, model_id: str) -> KeysResult:
        """Get the keys the model learned, grouped by cluster"""
        response = await self._request("GET", f"/models/{model_id}/keys")
        return self._parse(response, KeysResult)

    async def analyze_with_custom_model(
        self,
        model_id: str,
        form_content: bytes,
        content_type: str,
        filename: str = "form"
    ) -> AnalyzeResult:
        """Extract key/value pairs and tables from a single form"""
        logger.info(f"Analyzing {filename} ({content_type}, {len(form_content)} bytes) with model {model_id}")
        response = await self._request(
            "POST",
            f"/models/{model_id}/analyze",
            files={"form": (filename, form_content, content_type)}
        )
        result = self._parse(response, AnalyzeResult)
        logger.info(f"Analysis status: {result.status}, pages: {len(result.pages)}")
        return result

    async def get_custom_models(self) -> ModelsResult:
        """List every custom model in the subscription"""
        response = await self._request("GET", "/models")
        return self._parse(response, ModelsResult)

    async def delete_custom_model(self, model_id: str) -> None:
        """Delete a custom model"""
        await self._request("DELETE", f"/models/{model_id}")
        logger.info(f"Model deleted: {model_id}")

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {str(e)}")
            raise FormRecognizerServiceError(f"Request to Form Recognizer failed: {str(e)}") from e

        if response.is_error:
            error = self._error_from_response(response)
            logger.error(f"{method} {path} returned {response.status_code}: {error.message}")
            raise error

        return response

    def _error_from_response(self, response: httpx.Response) -> FormRecognizerServiceError:
        """Build an error from the service's error body, falling back to the status line"""
        try:
            body = ErrorResponse.model_validate(response.json())
            if body.error.message:
                return FormRecognizerServiceError(
                    body.error.message,
                    status_code=response.status_code,
                    error_code=body.error.code
                )
        except ValueError:
            pass
        return FormRecognizerServiceError(
            f"Operation returned an invalid status code '{response.reason_phrase}'",
            status_code=response.status_code
        )

    def _parse(self, response: httpx.Response, result_type: Type[ResultType]) -> ResultType:
        try:
            return result_type.model_validate(response.json())
        except ValueError as e:
            raise FormRecognizerServiceError(
                f"Unable to deserialize the response: {str(e)}",
                status_code=response.status_code
            ) from e
