"""Tests for the in-memory datapackage registry."""

import pytest

from odf_datapackage.datapackage.datapackage import Datapackage
from odf_datapackage.datapackage.registry import (
    DatapackageRegistry,
    get_datapackage_registry,
)
from odf_datapackage.datapackage.schemas import DatapackageRecord


def test_register_dict_keys_by_id(document):
    registry = DatapackageRegistry()

    datapackage = registry.register(document)

    assert isinstance(datapackage, Datapackage)
    assert registry.list_keys() == ["dp-1"]
    assert registry.get("dp-1") is datapackage


def test_register_falls_back_to_name():
    registry = DatapackageRegistry()

    registry.register(DatapackageRecord.model_validate({"name": "curve", "owner": {"id": 1}}))

    assert registry.list_keys() == ["curve"]


def test_register_requires_a_key():
    registry = DatapackageRegistry()

    with pytest.raises(ValueError):
        registry.register({"owner": {"id": 1}})


def test_register_explicit_key_and_replace(document):
    registry = DatapackageRegistry()
    first = registry.register(document, key="k")
    second = registry.register(Datapackage.from_dict(document), key="k")

    assert registry.count() == 1
    assert registry.get("k") is second
    assert registry.get("k") is not first


def test_registry_passes_lookup_strategy(document):
    registry = DatapackageRegistry(lookup_strategy="index")

    assert registry.register(document).lookup_strategy == "index"


def test_get_validated_lists_available(document):
    registry = DatapackageRegistry()
    registry.register(document)

    with pytest.raises(ValueError, match="dp-1"):
        registry.get_validated("other")
    assert registry.get_validated("dp-1").record.model_extra["id"] == "dp-1"


def test_remove_and_clear(document):
    registry = DatapackageRegistry()
    registry.register(document)

    assert registry.remove("dp-1") is True
    assert registry.remove("dp-1") is False

    registry.register(document)
    registry.clear()
    assert registry.count() == 0


def test_global_registry_is_singleton():
    assert get_datapackage_registry() is get_datapackage_registry()


def test_zero_id_is_used_as_key():
    registry = DatapackageRegistry()

    registry.register({"id": 0, "name": "curve", "owner": {"id": 1}})

    assert registry.list_keys() == ["0"]
