"""Datapackage registry - holds wrapped datapackages in memory.

Records arrive already materialized (fetching them is someone else's job).
The registry wraps each one in a Datapackage and serves it by key:
- In-memory dict keyed by datapackage id (or name when there is no id)
- Global singleton via get_datapackage_registry()
"""

import logging
from typing import Any, Optional, Union

from .datapackage import Datapackage
from .schemas import DatapackageRecord

logger = logging.getLogger(__name__)


class DatapackageRegistry:
    """Registry of Datapackage instances keyed by id."""

    def __init__(self, lookup_strategy: Optional[str] = None):
        self.lookup_strategy = lookup_strategy
        self._datapackages: dict[str, Datapackage] = {}

    @staticmethod
    def _key_for(record: DatapackageRecord) -> Optional[str]:
        extra = record.model_extra or {}
        key = extra.get("id")
        if key is None:
            key = extra.get("name")
        return str(key) if key is not None else None

    def register(
        self,
        datapackage: Union[Datapackage, DatapackageRecord, dict[str, Any]],
        key: Optional[str] = None,
    ) -> Datapackage:
        """Wrap (if needed) and store a datapackage, replacing any previous one.

        Args:
            datapackage: A Datapackage, a DatapackageRecord or a plain dict
            key: Registry key; defaults to the record's id or name

        Returns:
            The stored Datapackage
        """
        if isinstance(datapackage, dict):
            datapackage = DatapackageRecord.model_validate(datapackage)
        if isinstance(datapackage, DatapackageRecord):
            datapackage = Datapackage(datapackage, self.lookup_strategy)

        if key is None:
            key = self._key_for(datapackage.record)
        if key is None:
            raise ValueError("Datapackage has no id or name; pass an explicit key")

        if key in self._datapackages:
            logger.info(f"Replacing datapackage: {key}")
        self._datapackages[key] = datapackage
        logger.debug(f"Registered datapackage: {key}")
        return datapackage

    def get(self, key: str) -> Optional[Datapackage]:
        """Get a datapackage by key."""
        return self._datapackages.get(key)

    def get_validated(self, key: str) -> Datapackage:
        """Get a datapackage by key, raising if not found."""
        datapackage = self.get(key)
        if datapackage is None:
            available = self.list_keys()
            raise ValueError(f"Datapackage not found: {key}. Available: {available}")
        return datapackage

    def list_keys(self) -> list[str]:
        return list(self._datapackages.keys())

    def count(self) -> int:
        return len(self._datapackages)

    def remove(self, key: str) -> bool:
        """Drop a datapackage. Returns False if the key was unknown."""
        if self._datapackages.pop(key, None) is None:
            return False
        logger.info(f"Removed datapackage: {key}")
        return True

    def clear(self) -> None:
        self._datapackages.clear()


# Global registry instance
_registry: Optional[DatapackageRegistry] = None


def get_datapackage_registry() -> DatapackageRegistry:
    """Get the global datapackage registry instance."""
    global _registry
    if _registry is None:
        _registry = DatapackageRegistry()
    return _registry
