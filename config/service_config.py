"""
Service Configuration
Form Recognizer credentials read from the environment
"""

import os
from typing import Optional

from .yaml_config import YAMLConfigLoader


class ServiceConfig:
    """Subscription key, endpoint and request settings for the Form Recognizer service"""

    KEY_VARIABLE = "COGNITIVE_SERVICE_KEY"
    ENDPOINT_VARIABLE = "FORM_RECOGNIZER_ENDPOINT"

    def __init__(
        self,
        subscription_key: Optional[str] = None,
        endpoint: Optional[str] = None,
        config_loader: Optional[YAMLConfigLoader] = None
    ):
        self.config_loader = config_loader or YAMLConfigLoader()
        self.subscription_key = subscription_key or os.getenv(self.KEY_VARIABLE)
        self.endpoint = (endpoint or os.getenv(self.ENDPOINT_VARIABLE) or "").rstrip("/")
        self.api_version = self.config_loader.get_api_version()
        self.timeout = self.config_loader.get_request_timeout()

    def is_configured(self) -> bool:
        return bool(self.subscription_key and self.endpoint)

    def missing_settings(self):
        """Names of the environment variables that still need a value"""
        missing = []
        if not self.subscription_key:
            missing.append(self.KEY_VARIABLE)
        if not self.endpoint:
            missing.append(self.ENDPOINT_VARIABLE)
        return missing

    @property
    def custom_models_url(self) -> str:
        """Base URL of the custom model operations"""
        return f"{self.endpoint}/formrecognizer/{self.api_version}/custom"
