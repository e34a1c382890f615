"""
Keys Result
Keys a custom model learned to extract, grouped by cluster
"""

from typing import Dict, List

from .base import ServiceModel


class KeysResult(ServiceModel):
    clusters: Dict[str, List[str]] = {}

    def key_count(self) -> int:
        """Total number of keys across all clusters"""
        return sum(len(keys) for keys in self.clusters.values())
