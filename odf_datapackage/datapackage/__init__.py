"""Datapackage documents and the name-resolution layer over them."""

from .datapackage import Datapackage
from .lookup import NameIndex, filter_by_names, get_by_name, get_many_by_name
from .registry import DatapackageRegistry, get_datapackage_registry
from .schemas import (
    Algorithm,
    AlgorithmInput,
    DatapackageRecord,
    Display,
    DisplayLayout,
    ExecutionStatus,
    LayoutSpec,
    PaneSpec,
    ResolvedPane,
    ResolvedTab,
    Resource,
    TabSpec,
    UserRef,
    View,
)
from .state import ExecutionState

__all__ = [
    "Algorithm",
    "AlgorithmInput",
    "Datapackage",
    "DatapackageRecord",
    "DatapackageRegistry",
    "Display",
    "DisplayLayout",
    "ExecutionState",
    "ExecutionStatus",
    "LayoutSpec",
    "NameIndex",
    "PaneSpec",
    "ResolvedPane",
    "ResolvedTab",
    "Resource",
    "TabSpec",
    "UserRef",
    "View",
    "filter_by_names",
    "get_by_name",
    "get_datapackage_registry",
    "get_many_by_name",
]
