"""
Storage Service
Local file access for the forms sent to Form Recognizer
"""

from typing import Any, Dict, Optional
from pathlib import Path
from utils.logger import get_logger

logger = get_logger(__name__)


class StorageService:
    """Service for reading sample forms from local storage"""

    def __init__(self, base_path: Optional[str] = None):
        self.base_path = Path(base_path) if base_path else None

    def _resolve(self, file_path: str) -> Path:
        path = Path(file_path).expanduser()
        if self.base_path is not None and not path.is_absolute():
            path = self.base_path / path
        return path

    async def get_local_file(self, file_path: str) -> Dict[str, Any]:
        """
        Read a form from local storage

        Args:
            file_path: Path of the form, relative paths resolved against base_path

        Returns:
            Dict with file content and size
        """
        try:
            full_path = self._resolve(file_path)

            if not full_path.is_file():
                return {
                    "success": False,
                    "error": f"File not found: {file_path}"
                }

            # Handle is only held while reading the upload body
            with open(full_path, 'rb') as stream:
                file_content = stream.read()

            logger.info(f"File retrieved from local storage: {full_path}")

            return {
                "success": True,
                "file_content": file_content,
                "size": len(file_content),
                "file_path": str(full_path)
            }

        except OSError as e:
            error_msg = f"Local file retrieval failed: {str(e)}"
            logger.error(error_msg)
            return {
                "success": False,
                "error": error_msg
            }

    async def file_exists_locally(self, file_path: str) -> bool:
        return self._resolve(file_path).is_file()
