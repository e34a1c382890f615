"""
Form Recognizer Sample API
HTTP endpoints over the same custom model operations the sample client runs
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, UploadFile, File, Form
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
import uvicorn

from agents.file_validation_agent import CONTENT_TYPES, FileValidationAgent
from agents.model_training_agent import is_well_formed_url
from config.yaml_config import YAMLConfigLoader
from services.form_recognizer_service import FormRecognizerService, FormRecognizerServiceError
from utils.logger import setup_logging

setup_logging("INFO")
logger = logging.getLogger(__name__)

# Populated by the lifespan manager
form_recognizer: Optional[FormRecognizerService] = None
file_validator: Optional[FileValidationAgent] = None


class TrainRequest(BaseModel):
    source: str
    prefix: str = ""
    include_sub_folders: bool = False

    model_config = {
        "json_schema_extra": {
            "example": {
                "source": "https://account.blob.core.windows.net/forms?sv=...",
                "prefix": "",
                "include_sub_folders": False
            }
        }
    }


class TrainResponse(BaseModel):
    model_id: str
    status: str
    training_documents: List[Dict[str, Any]]
    errors: List[Dict[str, Any]]

    model_config = {"protected_namespaces": ()}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    global form_recognizer, file_validator
    try:
        logger.info("Starting Form Recognizer Sample API")
        config_loader = YAMLConfigLoader()
        file_validator = FileValidationAgent(config_loader)
        form_recognizer = FormRecognizerService()
    except Exception as e:
        logger.error(f"Form Recognizer client unavailable: {str(e)}")

    yield

    if form_recognizer is not None:
        await form_recognizer.close()


app = FastAPI(
    title="Form Recognizer Sample API",
    description="Train, inspect, run and delete Form Recognizer custom models",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_service() -> FormRecognizerService:
    if form_recognizer is None:
        raise HTTPException(status_code=503, detail="Form Recognizer client not configured")
    return form_recognizer


def _service_error(operation: str, error: FormRecognizerServiceError) -> HTTPException:
    logger.error(f"{operation} : {error.message}")
    status_code = error.status_code if error.status_code and error.status_code >= 400 else 502
    return HTTPException(
        status_code=status_code,
        detail={"operation": operation, "code": error.error_code, "message": error.message}
    )


# ============================================================================
# ENDPOINTS
# ============================================================================

@app.get("/api/v1/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "Form Recognizer Sample API",
        "version": "1.0.0",
        "client_configured": form_recognizer is not None
    }


@app.post("/api/v1/models/train", response_model=TrainResponse)
async def train_model(request: TrainRequest):
    """Train a custom model from the forms in a blob container"""
    if not is_well_formed_url(request.source):
        raise HTTPException(status_code=400, detail=f"Invalid trainingDataUrl: {request.source}")

    service = _get_service()
    try:
        result = await service.train_custom_model(
            request.source,
            {"prefix": request.prefix, "includeSubFolders": request.include_sub_folders}
        )
        model = await service.get_custom_model(result.model_id)
    except FormRecognizerServiceError as e:
        raise _service_error("Train Model", e)

    return TrainResponse(
        model_id=result.model_id,
        status=model.status,
        training_documents=[document.to_dict() for document in result.training_documents],
        errors=[error.to_dict() for error in result.errors]
    )


@app.get("/api/v1/models")
async def list_models():
    """List every trained model"""
    try:
        models = await _get_service().get_custom_models()
    except FormRecognizerServiceError as e:
        raise _service_error("Get list of models", e)
    return {
        "models": [model.to_dict() for model in models.models],
        "total_models": len(models.models)
    }


@app.get("/api/v1/models/{model_id}")
async def get_model(model_id: str):
    """Get a model's status record"""
    try:
        model = await _get_service().get_custom_model(model_id)
    except FormRecognizerServiceError as e:
        raise _service_error("Get model", e)
    return model.to_dict()


@app.get("/api/v1/models/{model_id}/keys")
async def get_extracted_keys(model_id: str):
    """Get the keys a model extracted, by cluster"""
    try:
        keys = await _get_service().get_extracted_keys(model_id)
    except FormRecognizerServiceError as e:
        raise _service_error("Get list of extracted keys", e)
    return {
        "model_id": model_id,
        "clusters": keys.clusters,
        "total_keys": keys.key_count()
    }


@app.post("/api/v1/models/{model_id}/analyze")
async def analyze_form(
    model_id: str,
    kind: str = Form("pdf"),
    file: UploadFile = File(...)
):
    """Analyze an uploaded form with a trained model"""
    if kind not in CONTENT_TYPES:
        raise HTTPException(
            status_code=422,
            detail=f"Unsupported form kind '{kind}'. Supported kinds: {', '.join(CONTENT_TYPES)}"
        )

    service = _get_service()
    file_content = await file.read()
    filename = file.filename or f"form.{kind}"

    validation = await file_validator.validate_form(file_content, filename, kind)
    if not validation["valid"]:
        raise HTTPException(status_code=422, detail={"filename": filename, "errors": validation["errors"]})

    try:
        result = await service.analyze_with_custom_model(
            model_id,
            file_content,
            content_type=CONTENT_TYPES[kind],
            filename=filename
        )
    except FormRecognizerServiceError as e:
        raise _service_error(f"Analyze {kind.upper()} form", e)

    return {
        "model_id": model_id,
        "filename": filename,
        "pages": validation["pages"],
        "result": result.to_dict()
    }


@app.delete("/api/v1/models/{model_id}")
async def delete_model(model_id: str):
    """Delete a model"""
    try:
        await _get_service().delete_custom_model(model_id)
    except FormRecognizerServiceError as e:
        raise _service_error("Delete model", e)
    return {"model_id": model_id, "status": "deleted"}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
