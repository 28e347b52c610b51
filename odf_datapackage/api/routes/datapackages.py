"""API routes for datapackage queries.

Read-only: every endpoint resolves names inside a registered datapackage
and returns the resolved entities. Dangling names map to 404, inline
values where a resource name was expected map to 422.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from odf_datapackage.datapackage.datapackage import Datapackage
from odf_datapackage.datapackage.registry import get_datapackage_registry
from odf_datapackage.datapackage.schemas import (
    Algorithm,
    ExecutionStatus,
    ResolvedPane,
    Resource,
    TabSpec,
    View,
)
from odf_datapackage.errors import InvalidReferenceError, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/datapackages", tags=["datapackages"])


def _get_or_404(key: str) -> Datapackage:
    """Get a datapackage by key or raise 404."""
    registry = get_datapackage_registry()
    datapackage = registry.get(key)
    if datapackage is None:
        available = registry.list_keys()
        raise HTTPException(
            status_code=404,
            detail=f"Datapackage '{key}' not found. Available: {available}",
        )
    return datapackage


def _http_error(e: Exception) -> HTTPException:
    status_code = 422 if isinstance(e, InvalidReferenceError) else 404
    logger.warning(f"Resolution failed ({status_code}): {e}")
    return HTTPException(status_code=status_code, detail=str(e))


# ── List endpoint ────────────────────────────────────────


@router.get("", response_model=list[str])
async def list_datapackages():
    """List registered datapackage keys."""
    return get_datapackage_registry().list_keys()


# ── Views ────────────────────────────────────────────────


@router.get("/{key}/views", response_model=list[View])
async def get_views(
    key: str,
    names: Optional[list[str]] = Query(None, description="View names, in the order wanted"),
):
    """Get views by name in request order, or all views when no names are given."""
    datapackage = _get_or_404(key)
    if not names:
        return datapackage.views
    try:
        return datapackage.get_views_by_name(names)
    except NotFoundError as e:
        raise _http_error(e)


@router.get("/{key}/views/{name}", response_model=View)
async def get_view(key: str, name: str):
    datapackage = _get_or_404(key)
    try:
        return datapackage.get_view_by_name(name)
    except NotFoundError as e:
        raise _http_error(e)


# ── Resources ────────────────────────────────────────────


@router.get("/{key}/resources", response_model=list[Resource])
async def get_resources(
    key: str,
    names: Optional[list[str]] = Query(None, description="Resource names"),
    ordered: bool = Query(False, description="Keep request order and fail on unknown names"),
):
    """Get resources by name, or all resources when no names are given.

    Without `ordered`, this filters the datapackage's resources and
    ignores unknown names.
    """
    datapackage = _get_or_404(key)
    if not names:
        return datapackage.resources
    try:
        return datapackage.get_resources_by_name(names, ordered=ordered)
    except NotFoundError as e:
        raise _http_error(e)


@router.get("/{key}/resources/{name}", response_model=Resource)
async def get_resource(key: str, name: str):
    datapackage = _get_or_404(key)
    try:
        return datapackage.get_resource_by_name(name)
    except NotFoundError as e:
        raise _http_error(e)


# ── Algorithms ───────────────────────────────────────────


@router.get("/{key}/algorithms/{name}", response_model=Algorithm)
async def get_algorithm(key: str, name: str):
    datapackage = _get_or_404(key)
    try:
        return datapackage.get_algorithm_by_name(name)
    except NotFoundError as e:
        raise _http_error(e)


@router.get(
    "/{key}/algorithms/{name}/inputs/{input_name}/resource",
    response_model=Resource,
)
async def get_algorithm_input_resource(key: str, name: str, input_name: str):
    """Get the resource an algorithm input refers to by name."""
    datapackage = _get_or_404(key)
    try:
        return datapackage.get_algorithm_input_resource_by_name(name, input_name)
    except (NotFoundError, InvalidReferenceError) as e:
        raise _http_error(e)


# ── Displays ─────────────────────────────────────────────


@router.get("/{key}/displays/{name}/panes", response_model=list[ResolvedPane])
async def get_display_panes(key: str, name: str):
    """Get a display's panes with every tab and view resolved."""
    datapackage = _get_or_404(key)
    try:
        return datapackage.get_display_panes(name)
    except NotFoundError as e:
        raise _http_error(e)


@router.get("/{key}/displays/{name}/tabs/{tab_name}", response_model=TabSpec)
async def get_display_tab(key: str, name: str, tab_name: str):
    datapackage = _get_or_404(key)
    try:
        return datapackage.get_display_tab_by_name(name, tab_name)
    except NotFoundError as e:
        raise _http_error(e)


# ── Execution state ──────────────────────────────────────


@router.get("/{key}/execution", response_model=ExecutionStatus)
async def get_execution_status(key: str):
    return _get_or_404(key).state.snapshot()
