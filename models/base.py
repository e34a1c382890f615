"""
Base Model
Common pydantic configuration for Form Recognizer wire payloads
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ServiceModel(BaseModel):
    """Accepts the service's camelCase field names, exposes snake_case attributes"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary using the wire field names"""
        return self.model_dump(by_alias=True, mode="json")
