"""Tests for the HTTP endpoints."""
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

import main
from agents.file_validation_agent import FileValidationAgent
from models import AnalyzeResult, KeysResult, ModelResult, ModelsResult, TrainResult
from services.form_recognizer_service import FormRecognizerServiceError
from conftest import ANALYZE_PAYLOAD, KEYS_PAYLOAD, MODEL_ID, MODEL_PAYLOAD, TRAIN_PAYLOAD


@pytest.fixture
def form_recognizer():
    service = Mock()
    service.train_custom_model = AsyncMock(return_value=TrainResult.model_validate(TRAIN_PAYLOAD))
    service.get_custom_model = AsyncMock(return_value=ModelResult.model_validate(MODEL_PAYLOAD))
    service.get_extracted_keys = AsyncMock(return_value=KeysResult.model_validate(KEYS_PAYLOAD))
    service.analyze_with_custom_model = AsyncMock(return_value=AnalyzeResult.model_validate(ANALYZE_PAYLOAD))
    service.get_custom_models = AsyncMock(return_value=ModelsResult.model_validate({"models": [MODEL_PAYLOAD]}))
    service.delete_custom_model = AsyncMock(return_value=None)
    return service


@pytest.fixture
def client(form_recognizer, config_loader, monkeypatch):
    monkeypatch.setattr(main, "form_recognizer", form_recognizer)
    monkeypatch.setattr(main, "file_validator", FileValidationAgent(config_loader))
    return TestClient(main.app)


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["client_configured"] is True


def test_train(client, form_recognizer):
    response = client.post("/api/v1/models/train", json={
        "source": "https://account.blob.core.windows.net/forms?sig=abc",
        "prefix": "invoices/"
    })

    assert response.status_code == 200
    body = response.json()
    assert body["model_id"] == MODEL_ID
    assert body["status"] == "ready"
    assert body["training_documents"][0]["documentName"] == "Invoice_1.pdf"
    form_recognizer.train_custom_model.assert_awaited_once_with(
        "https://account.blob.core.windows.net/forms?sig=abc",
        {"prefix": "invoices/", "includeSubFolders": False}
    )


def test_train_rejects_invalid_url(client, form_recognizer):
    response = client.post("/api/v1/models/train", json={"source": "<AzureBlobSaS>"})

    assert response.status_code == 400
    form_recognizer.train_custom_model.assert_not_called()


def test_list_get_keys_and_delete(client):
    assert client.get("/api/v1/models").json()["total_models"] == 1
    assert client.get(f"/api/v1/models/{MODEL_ID}").json()["modelId"] == MODEL_ID
    assert client.get(f"/api/v1/models/{MODEL_ID}/keys").json()["total_keys"] == 3
    assert client.delete(f"/api/v1/models/{MODEL_ID}").json() == {"model_id": MODEL_ID, "status": "deleted"}


def test_analyze_upload(client, form_recognizer, pdf_bytes):
    response = client.post(
        f"/api/v1/models/{MODEL_ID}/analyze",
        data={"kind": "pdf"},
        files={"file": ("Invoice_6.pdf", pdf_bytes, "application/pdf")}
    )

    assert response.status_code == 200
    assert response.json()["result"]["pages"][0]["clusterId"] == 0
    assert form_recognizer.analyze_with_custom_model.await_args.kwargs["content_type"] == "application/pdf"


def test_analyze_rejects_invalid_form(client, form_recognizer, png_bytes):
    response = client.post(
        f"/api/v1/models/{MODEL_ID}/analyze",
        data={"kind": "pdf"},
        files={"file": ("Invoice_6.pdf", png_bytes, "application/pdf")}
    )

    assert response.status_code == 422
    form_recognizer.analyze_with_custom_model.assert_not_called()


def test_service_error_status_is_forwarded(client, form_recognizer):
    form_recognizer.get_custom_model.side_effect = FormRecognizerServiceError(
        "Model not found.", status_code=404, error_code="1022"
    )

    response = client.get("/api/v1/models/unknown")

    assert response.status_code == 404
    assert response.json()["detail"]["message"] == "Model not found."


def test_transport_error_maps_to_bad_gateway(client, form_recognizer):
    form_recognizer.get_custom_models.side_effect = FormRecognizerServiceError("Request to Form Recognizer failed")

    assert client.get("/api/v1/models").status_code == 502


def test_unconfigured_client(monkeypatch):
    monkeypatch.setattr(main, "form_recognizer", None)
    client = TestClient(main.app)

    assert client.get("/api/v1/models").status_code == 503
