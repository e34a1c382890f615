"""
Utility modules for the Form Recognizer sample client
"""

from .logger import get_logger, setup_logging
from .console import (
    format_model_status,
    format_extracted_keys,
    format_analyze_result,
    format_model_list,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "format_model_status",
    "format_extracted_keys",
    "format_analyze_result",
    "format_model_list",
]
