"""
Analyze Result
Per-page key/value pairs and tables extracted from a single form
"""

from typing import List, Optional

from .base import ServiceModel
from .model_result import FormOperationError


class ExtractedToken(ServiceModel):
    text: str = ""
    bounding_box: List[float] = []
    confidence: Optional[float] = None


class ExtractedKeyValuePair(ServiceModel):
    key: List[ExtractedToken] = []
    value: List[ExtractedToken] = []

    def key_text(self) -> Optional[str]:
        """Text of the first key element, if any"""
        return self.key[0].text if self.key else None

    def value_text(self) -> Optional[str]:
        """Text of the first value element, if any"""
        return self.value[0].text if self.value else None


class ExtractedTableColumn(ServiceModel):
    header: List[ExtractedToken] = []
    entries: List[List[ExtractedToken]] = []


class ExtractedTable(ServiceModel):
    id: str
    columns: List[ExtractedTableColumn] = []


class ExtractedPage(ServiceModel):
    number: int
    height: Optional[int] = None
    width: Optional[int] = None
    cluster_id: Optional[int] = None
    key_value_pairs: List[ExtractedKeyValuePair] = []
    tables: List[ExtractedTable] = []


class AnalyzeResult(ServiceModel):
    status: str = ""
    pages: List[ExtractedPage] = []
    errors: List[FormOperationError] = []

    def succeeded(self) -> bool:
        return self.status in ("success", "partialSuccess")
