"""
File Validation Agent
Checks a form locally against Form Recognizer's input limits before it is uploaded
"""

import io
from typing import Any, Dict, Optional
from pathlib import Path

import magic
import PyPDF2
from PIL import Image

from config.yaml_config import YAMLConfigLoader
from utils.logger import get_logger

logger = get_logger(__name__)

# Content type sent with each form kind
CONTENT_TYPES = {
    "pdf": "application/pdf",
    "jpg": "image/jpeg",
    "png": "image/png"
}


class FileValidationAgent:
    """Agent responsible for validating forms before analysis"""

    FILE_EXTENSIONS = {
        "pdf": [".pdf"],
        "jpg": [".jpg", ".jpeg"],
        "png": [".png"]
    }

    MIME_TYPES = {
        "pdf": ["application/pdf"],
        "jpg": ["image/jpeg", "image/pjpeg"],
        "png": ["image/png"]
    }

    def __init__(self, config_loader: Optional[YAMLConfigLoader] = None):
        self.config_loader = config_loader or YAMLConfigLoader()

        self.max_file_size_mb = float(self.config_loader.get_validation_setting("max_file_size_mb", 4))
        self.max_pages = int(self.config_loader.get_validation_setting("max_pages", 200))
        self.min_image_dimension = int(self.config_loader.get_validation_setting("min_image_dimension", 50))
        self.max_image_dimension = int(self.config_loader.get_validation_setting("max_image_dimension", 4200))

    async def validate_form(self, file_content: bytes, filename: str, expected_kind: str) -> Dict[str, Any]:
        """
        Validate a single form for format, size, page count and image dimensions

        Args:
            file_content: File content as bytes
            filename: Path or name of the form
            expected_kind: Kind the caller intends to upload it as (pdf, jpg, png)

        Returns:
            Validation result for the file
        """
        validation_result = {
            "valid": True,
            "errors": [],
            "file_size_mb": 0,
            "file_format": None,
            "pages": 1
        }

        file_size_mb = len(file_content) / (1024 * 1024)
        validation_result["file_size_mb"] = round(file_size_mb, 2)

        if not file_content:
            validation_result["valid"] = False
            validation_result["errors"].append("File is empty")
            return validation_result

        if file_size_mb > self.max_file_size_mb:
            validation_result["valid"] = False
            validation_result["errors"].append(
                f"File size {file_size_mb:.2f}MB exceeds maximum allowed {self.max_file_size_mb:g}MB"
            )

        file_format = self._detect_file_format(file_content, filename)
        validation_result["file_format"] = file_format

        if file_format not in CONTENT_TYPES:
            validation_result["valid"] = False
            validation_result["errors"].append(
                f"File format '{file_format}' not supported. Supported formats: {', '.join(CONTENT_TYPES)}"
            )
        elif file_format != expected_kind:
            validation_result["valid"] = False
            validation_result["errors"].append(
                f"File is a {file_format} but was submitted as {expected_kind}"
            )

        if file_format == "pdf":
            try:
                pages = self._count_pdf_pages(file_content)
                validation_result["pages"] = pages

                if pages > self.max_pages:
                    validation_result["valid"] = False
                    validation_result["errors"].append(
                        f"PDF has {pages} pages, exceeds maximum allowed {self.max_pages} pages"
                    )
            except Exception as e:
                validation_result["valid"] = False
                validation_result["errors"].append(f"Error reading PDF: {str(e)}")

        elif file_format in ["jpg", "png"]:
            try:
                self._validate_image_file(file_content)
            except Exception as e:
                validation_result["valid"] = False
                validation_result["errors"].append(f"Invalid image file: {str(e)}")

        if validation_result["valid"]:
            logger.info(f"Form {filename} passed validation ({file_format}, {validation_result['file_size_mb']}MB)")
        else:
            logger.warning(f"Form {filename} failed validation: {'; '.join(validation_result['errors'])}")

        return validation_result

    def _detect_file_format(self, file_content: bytes, filename: str) -> str:
        """Detect file format from the MIME type, then content headers, then the extension"""
        mime_type = magic.from_buffer(file_content, mime=True)
        for format_name, mime_types in self.MIME_TYPES.items():
            if mime_type in mime_types:
                return format_name

        if self._is_pdf_content(file_content):
            return "pdf"
        if file_content.startswith(b'\xFF\xD8\xFF'):
            return "jpg"
        if file_content.startswith(b'\x89PNG\r\n\x1a\n'):
            return "png"

        file_ext = Path(filename).suffix.lower()
        for format_name, extensions in self.FILE_EXTENSIONS.items():
            if file_ext in extensions:
                return format_name
        return "unknown"

    def _count_pdf_pages(self, file_content: bytes) -> int:
        pdf_reader = PyPDF2.PdfReader(io.BytesIO(file_content))
        return len(pdf_reader.pages)

    def _validate_image_file(self, file_content: bytes) -> None:
        image = Image.open(io.BytesIO(file_content))
        image.verify()

        width, height = image.size
        if width < self.min_image_dimension or height < self.min_image_dimension:
            raise ValueError(
                f"Image dimensions too small (minimum {self.min_image_dimension}x{self.min_image_dimension} pixels)"
            )

        if width > self.max_image_dimension or height > self.max_image_dimension:
            raise ValueError(
                f"Image dimensions too large (maximum {self.max_image_dimension}x{self.max_image_dimension} pixels)"
            )

    def _is_pdf_content(self, file_content: bytes) -> bool:
        """Check if content is a PDF by looking at the header"""
        return file_content.startswith(b'%PDF-')
