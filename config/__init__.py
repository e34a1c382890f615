"""
Configuration modules for the Form Recognizer sample client
"""

from .yaml_config import YAMLConfigLoader, SUPPORTED_FORM_KINDS
from .service_config import ServiceConfig

__all__ = [
    "YAMLConfigLoader",
    "SUPPORTED_FORM_KINDS",
    "ServiceConfig"
]
