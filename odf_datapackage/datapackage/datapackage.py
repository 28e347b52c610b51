"""Datapackage — read-only query layer over one datapackage record.

Wraps a DatapackageRecord and resolves the name references inside it:
- views, resources, algorithms and displays by name
- display panes into fully resolved tabs and views
- algorithm inputs into the resources they name

Only the execution flags are mutable. Nothing is cached between calls.
"""

import logging
from typing import Any, Iterable, Optional, Union

from odf_datapackage import config
from odf_datapackage.errors import EntityKind, InvalidReferenceError

from .lookup import NameIndex, filter_by_names, get_by_name, get_many_by_name
from .schemas import (
    Algorithm,
    AlgorithmInput,
    DatapackageRecord,
    Display,
    ResolvedPane,
    ResolvedTab,
    Resource,
    TabSpec,
    UserRef,
    View,
)
from .state import ExecutionState

logger = logging.getLogger(__name__)

LOOKUP_STRATEGIES = ("scan", "index")


class Datapackage:
    """Name-resolution layer over a single datapackage record."""

    def __init__(
        self,
        record: DatapackageRecord,
        lookup_strategy: Optional[str] = None,
    ):
        strategy = lookup_strategy or config.LOOKUP_STRATEGY
        if strategy not in LOOKUP_STRATEGIES:
            raise ValueError(
                f"Unknown lookup strategy: {strategy}. Available: {list(LOOKUP_STRATEGIES)}"
            )
        self.record = record
        self.lookup_strategy = strategy
        self.state = ExecutionState()

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], lookup_strategy: Optional[str] = None
    ) -> "Datapackage":
        """Wrap a plain-dict document."""
        return cls(DatapackageRecord.model_validate(data), lookup_strategy)

    # ── Record accessors ─────────────────────────────────

    @property
    def owner(self) -> UserRef:
        return self.record.owner

    @property
    def views(self) -> list[View]:
        return self.record.views

    @property
    def resources(self) -> list[Resource]:
        return self.record.resources

    @property
    def algorithms(self) -> list[Algorithm]:
        return self.record.algorithms

    @property
    def displays(self) -> list[Display]:
        return self.record.displays

    # ── Ownership ────────────────────────────────────────

    def is_owner(self, user: Any) -> bool:
        # ids may arrive as int or str depending on the source
        return str(self.record.owner.id) == str(user.id)

    def read_only(self, user: Any) -> bool:
        return not self.is_owner(user)

    # ── Execution state ──────────────────────────────────

    @property
    def execution_disabled(self) -> bool:
        return self.state.execution_disabled

    @execution_disabled.setter
    def execution_disabled(self, value: bool) -> None:
        self.state.execution_disabled = value

    @property
    def is_execution_error(self) -> bool:
        return self.state.is_execution_error

    @is_execution_error.setter
    def is_execution_error(self, value: bool) -> None:
        self.state.is_execution_error = value

    @property
    def error(self) -> str:
        return self.state.error

    @error.setter
    def error(self, value: str) -> None:
        self.state.error = value

    def reset_error(self) -> None:
        self.state.reset_error()

    # ── Lookup dispatch ──────────────────────────────────

    def _get_one(
        self,
        collection: list,
        name: str,
        kind: EntityKind,
        context: Optional[str] = None,
    ):
        if self.lookup_strategy == "index":
            return NameIndex(collection, kind, context).get(name)
        return get_by_name(collection, name, kind, context)

    def _get_many(
        self,
        collection: list,
        names: Iterable[str],
        kind: EntityKind,
        context: Optional[str] = None,
    ) -> list:
        if self.lookup_strategy == "index":
            return NameIndex(collection, kind, context).get_many(names)
        return get_many_by_name(collection, names, kind, context)

    # ── Views ────────────────────────────────────────────

    def get_view_by_name(self, name: str) -> View:
        return self._get_one(self.record.views, name, EntityKind.VIEW)

    def get_views_by_name(self, names: Iterable[str]) -> list[View]:
        """Resolve view names, keeping the order of `names`."""
        return self._get_many(self.record.views, names, EntityKind.VIEW)

    # ── Resources ────────────────────────────────────────

    def get_resource_by_name(self, name: str) -> Resource:
        return self._get_one(self.record.resources, name, EntityKind.RESOURCE)

    def get_resources_by_name(
        self, names: Iterable[str], ordered: bool = False
    ) -> list[Resource]:
        """Select resources by name.

        By default this is a membership filter: resources come back in the
        datapackage's own order and unknown names are skipped. With
        ordered=True it behaves like the other batch lookups (order of
        `names`, NotFoundError on the first unknown name).
        """
        if ordered:
            return self._get_many(self.record.resources, names, EntityKind.RESOURCE)
        return filter_by_names(self.record.resources, names)

    # ── Algorithms ───────────────────────────────────────

    def get_algorithm_by_name(self, name: str) -> Algorithm:
        return self._get_one(self.record.algorithms, name, EntityKind.ALGORITHM)

    def get_algorithm_input_by_name(
        self, algorithm_name: str, input_name: str
    ) -> AlgorithmInput:
        algorithm = self.get_algorithm_by_name(algorithm_name)
        return self._get_one(
            algorithm.inputs,
            input_name,
            EntityKind.ALGORITHM_INPUT,
            context=f"algorithm '{algorithm_name}'",
        )

    def get_algorithm_input_resource_by_name(
        self, algorithm_name: str, input_name: str
    ) -> Resource:
        """Resolve the resource an algorithm input refers to by name.

        Raises:
            NotFoundError: the algorithm, the input or the resource is missing.
            InvalidReferenceError: the input carries an inline value.
        """
        algorithm_input = self.get_algorithm_input_by_name(algorithm_name, input_name)
        if not algorithm_input.is_reference:
            raise InvalidReferenceError(algorithm_name, input_name)
        return self._get_one(
            self.record.resources,
            algorithm_input.resource,
            EntityKind.RESOURCE,
            context=f"algorithm '{algorithm_name}'",
        )

    # ── Displays ─────────────────────────────────────────

    def get_display_by_name(self, name: str) -> Display:
        return self._get_one(self.record.displays, name, EntityKind.DISPLAY)

    def _as_display(self, display: Union[Display, str]) -> Display:
        if isinstance(display, str):
            return self.get_display_by_name(display)
        return display

    def get_display_tab_by_name(
        self, display: Union[Display, str], name: str
    ) -> TabSpec:
        display = self._as_display(display)
        return self._get_one(
            display.layout.spec.tabs,
            name,
            EntityKind.TAB,
            context=f"display '{display.name}'",
        )

    def get_display_tabs_by_name(
        self, display: Union[Display, str], names: Iterable[str]
    ) -> list[TabSpec]:
        display = self._as_display(display)
        return self._get_many(
            display.layout.spec.tabs,
            names,
            EntityKind.TAB,
            context=f"display '{display.name}'",
        )

    def resolve_tab(self, tab: TabSpec) -> ResolvedTab:
        """Build a ResolvedTab from a TabSpec. The spec is left untouched."""
        views = self._get_many(
            self.record.views,
            tab.views,
            EntityKind.VIEW,
            context=f"tab '{tab.name}'",
        )
        extra = tab.model_dump(exclude={"name", "views"})
        return ResolvedTab(name=tab.name, views=views, **extra)

    def get_display_panes(self, display: Union[Display, str]) -> list[ResolvedPane]:
        """Resolve every pane of a display down to its views.

        Pane order follows layout.spec.panes, tab order follows each
        pane's `tabs`, view order follows each tab's `views`. Any missing
        tab or view aborts the whole assembly.
        """
        display = self._as_display(display)
        panes: list[ResolvedPane] = []
        for pane in display.layout.spec.panes:
            tabs = self.get_display_tabs_by_name(display, pane.tabs)
            panes.append(ResolvedPane(tabs=[self.resolve_tab(tab) for tab in tabs]))
        logger.debug(f"Assembled {len(panes)} panes for display '{display.name}'")
        return panes
