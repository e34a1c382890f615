"""
YAML Configuration Loader
Loads the sample client configuration from a YAML file
"""

import os
import yaml
from typing import Dict, List, Any, Optional
from pathlib import Path

SUPPORTED_FORM_KINDS = ["pdf", "jpg", "png"]


class YAMLConfigLoader:
    """Loads configuration from YAML files"""

    def __init__(self, config_file: Optional[str] = None):
        if config_file is None:
            config_file = os.getenv("FORM_RECOGNIZER_CONFIG")
        if config_file:
            self.config_path = Path(config_file)
        else:
            self.config_path = Path(__file__).parent / "samples.yaml"
        self._config = None
        self._load_config()

    def _load_config(self):
        """Load configuration from YAML file"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as file:
                self._config = yaml.safe_load(file) or {}
        except FileNotFoundError:
            raise Exception(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise Exception(f"Error parsing YAML configuration: {str(e)}")

    def get_service_config(self) -> Dict[str, Any]:
        return self._config.get("service", {})

    def get_training_config(self) -> Dict[str, Any]:
        return self._config.get("training", {})

    def get_validation_config(self) -> Dict[str, Any]:
        return self._config.get("validation", {})

    def get_api_version(self) -> str:
        return self.get_service_config().get("api_version", "v1.0-preview")

    def get_request_timeout(self) -> float:
        return float(self.get_service_config().get("request_timeout_seconds", 120))

    def get_training_data_url(self) -> str:
        return self.get_training_config().get("data_url", "")

    def get_training_source_filter(self) -> Dict[str, Any]:
        """Source filter sent with the train request"""
        training = self.get_training_config()
        return {
            "prefix": training.get("source_prefix", ""),
            "includeSubFolders": bool(training.get("include_sub_folders", False))
        }

    def get_form_file(self, kind: str) -> str:
        """Local path of the sample form for a kind (pdf, jpg, png)"""
        return self._config.get("forms", {}).get(kind) or ""

    def get_analyze_kinds(self) -> List[str]:
        """Form kinds analyzed by the sample run, in order"""
        kinds = self._config.get("analyze", {}).get("kinds", ["pdf"])
        unsupported = [kind for kind in kinds if kind not in SUPPORTED_FORM_KINDS]
        if unsupported:
            raise ValueError(
                f"Unsupported form kinds in configuration: {', '.join(unsupported)}. "
                f"Supported kinds: {', '.join(SUPPORTED_FORM_KINDS)}"
            )
        return kinds

    def get_validation_setting(self, setting_name: str, default_value: Any = None) -> Any:
        """Get a file validation limit"""
        return self.get_validation_config().get(setting_name, default_value)

    def reload_config(self):
        """Reload configuration from file"""
        self._load_config()
