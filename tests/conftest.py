"""Shared fixtures for the Form Recognizer sample client tests."""
import io
import json

import httpx
import pytest
import PyPDF2
from PIL import Image

from config.service_config import ServiceConfig
from config.yaml_config import YAMLConfigLoader
from services.form_recognizer_service import FormRecognizerService

ENDPOINT = "https://westus2.api.cognitive.microsoft.com"
BASE_PATH = "/formrecognizer/v1.0-preview/custom"
MODEL_ID = "3e39bb4b-0c37-4d5c-9f0a-2bd8a1a6a9b1"

MODEL_PAYLOAD = {
    "modelId": MODEL_ID,
    "status": "ready",
    "createdDateTime": "2019-05-01T10:53:21+00:00",
    "lastUpdatedDateTime": "2019-05-01T10:53:23+00:00"
}

TRAIN_PAYLOAD = {
    "modelId": MODEL_ID,
    "trainingDocuments": [
        {"documentName": "Invoice_1.pdf", "pages": 1, "errors": [], "status": "success"},
        {"documentName": "Invoice_2.pdf", "pages": 1, "errors": [], "status": "success"}
    ],
    "errors": []
}

KEYS_PAYLOAD = {
    "clusters": {
        "0": ["Address:", "Invoice For:", "Total"]
    }
}

ANALYZE_PAYLOAD = {
    "status": "success",
    "pages": [
        {
            "number": 1,
            "height": 792,
            "width": 612,
            "clusterId": 0,
            "keyValuePairs": [
                {
                    "key": [{"text": "Address:", "boundingBox": [57.4, 683.1, 100.5, 683.1, 100.5, 673.7, 57.4, 673.7]}],
                    "value": [{"text": "1 Redmond way Suite 6000 Redmond, WA 99243", "boundingBox": [], "confidence": 0.86}]
                },
                {
                    "key": [{"text": "Invoice For:", "boundingBox": []}],
                    "value": []
                }
            ],
            "tables": [
                {
                    "id": "table_0",
                    "columns": [
                        {
                            "header": [{"text": "Invoice Number", "boundingBox": []}],
                            "entries": [[{"text": "34278587", "boundingBox": [], "confidence": 1.0}]]
                        },
                        {
                            "header": [{"text": "Charges", "boundingBox": []}],
                            "entries": [[{"text": "$56,651.49", "boundingBox": [], "confidence": 1.0}]]
                        }
                    ]
                }
            ]
        }
    ],
    "errors": []
}


def error_response(status_code, code, message):
    return httpx.Response(status_code, json={"error": {"code": code, "message": message}})


@pytest.fixture
def config_loader():
    return YAMLConfigLoader()


@pytest.fixture
def service_config(config_loader):
    return ServiceConfig(subscription_key="test_key", endpoint=ENDPOINT, config_loader=config_loader)


@pytest.fixture
def make_service(service_config):
    """Build a FormRecognizerService whose requests go to handler."""
    def _make(handler):
        return FormRecognizerService(service_config, transport=httpx.MockTransport(handler))
    return _make


@pytest.fixture
def pdf_bytes():
    writer = PyPDF2.PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    buffer = io.BytesIO()
    Image.new("RGB", (200, 200), "white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def jpg_bytes():
    buffer = io.BytesIO()
    Image.new("RGB", (200, 200), "white").save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def sample_config(tmp_path, pdf_bytes):
    """Write a samples.yaml pointing at a real PDF and return its loader."""
    form_path = tmp_path / "Invoice_6.pdf"
    form_path.write_bytes(pdf_bytes)
    config = {
        "service": {"api_version": "v1.0-preview", "request_timeout_seconds": 10},
        "training": {"data_url": "https://account.blob.core.windows.net/forms?sv=2018&sig=abc"},
        "forms": {"pdf": str(form_path), "jpg": "", "png": ""},
        "analyze": {"kinds": ["pdf"]},
        "validation": {"max_file_size_mb": 4, "max_pages": 200,
                       "min_image_dimension": 50, "max_image_dimension": 4200}
    }
    config_path = tmp_path / "samples.yaml"
    # JSON is valid YAML
    config_path.write_text(json.dumps(config))
    return YAMLConfigLoader(str(config_path))
