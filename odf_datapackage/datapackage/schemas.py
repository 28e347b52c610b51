"""Datapackage document schemas.

A datapackage holds four named collections (views, resources, algorithms,
displays) plus owner metadata. Relationships between entries are string
names, never direct links:

- an algorithm input names a resource (or carries an inline value)
- a display tab names the views it shows
- a display pane names the tabs it groups

Unresolved specs (TabSpec, PaneSpec) and resolved structures (ResolvedTab,
ResolvedPane) are separate types. Resolution builds the latter from the
former and never rewrites a spec in place.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class View(BaseModel):
    """A named render definition. Everything besides `name` is opaque."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Unique view name within the datapackage")


class Resource(BaseModel):
    """A named data resource. Everything besides `name` is payload."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Unique resource name within the datapackage")


class AlgorithmInput(BaseModel):
    """One named input of an algorithm.

    `resource` is either a resource name (str) or an inline value of any
    other type carrying the data directly.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    resource: Any = Field(
        default=None,
        description="Resource name reference, or an inline value",
    )

    @property
    def is_reference(self) -> bool:
        return isinstance(self.resource, str)


class Algorithm(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    inputs: list[AlgorithmInput] = Field(default_factory=list)


# ── Display layout (unresolved) ──────────────────────────


class TabSpec(BaseModel):
    """A display tab as stored: its views are still names."""

    model_config = ConfigDict(extra="allow")

    name: str
    views: list[str] = Field(
        default_factory=list,
        description="View names, in render order",
    )


class PaneSpec(BaseModel):
    """A display pane as stored: its tabs are still names."""

    model_config = ConfigDict(extra="allow")

    tabs: list[str] = Field(
        default_factory=list,
        description="Tab names, in render order",
    )


class LayoutSpec(BaseModel):
    model_config = ConfigDict(extra="allow")

    tabs: list[TabSpec] = Field(default_factory=list)
    panes: list[PaneSpec] = Field(default_factory=list)


class DisplayLayout(BaseModel):
    model_config = ConfigDict(extra="allow")

    spec: LayoutSpec = Field(default_factory=LayoutSpec)


class Display(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    layout: DisplayLayout = Field(default_factory=DisplayLayout)


# ── Display layout (resolved) ────────────────────────────


class ResolvedTab(BaseModel):
    """A tab whose view names have been replaced by View objects.

    Extra fields of the source TabSpec (labels, icons, ...) are carried over.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    views: list[View] = Field(default_factory=list)


class ResolvedPane(BaseModel):
    """A pane whose tab names have been replaced by ResolvedTabs."""

    tabs: list[ResolvedTab] = Field(default_factory=list)


# ── Root document ────────────────────────────────────────


class UserRef(BaseModel):
    """Reference to a user. Only `id` takes part in ownership checks."""

    model_config = ConfigDict(extra="allow")

    id: Union[str, int]


class DatapackageRecord(BaseModel):
    """The datapackage document as materialized by the persistence layer."""

    model_config = ConfigDict(extra="allow")

    owner: UserRef
    views: list[View] = Field(default_factory=list)
    resources: list[Resource] = Field(default_factory=list)
    algorithms: list[Algorithm] = Field(default_factory=list)
    displays: list[Display] = Field(default_factory=list)


class ExecutionStatus(BaseModel):
    """Point-in-time copy of the UI-facing execution flags."""

    execution_disabled: bool = False
    is_execution_error: bool = False
    error: str = ""
