"""Shared fixtures: a small but complete datapackage document."""

import pytest

from odf_datapackage.datapackage.datapackage import Datapackage


def make_document() -> dict:
    return {
        "id": "dp-1",
        "owner": {"id": "u-1"},
        "views": [
            {"name": "v1", "specType": "table"},
            {"name": "v2", "specType": "plot"},
            {"name": "v3", "specType": "markdown"},
        ],
        "resources": [
            {"name": "res1", "data": 42},
            {"name": "res2", "data": [1, 2, 3]},
            {"name": "res3", "data": {"x": 1}},
        ],
        "algorithms": [
            {
                "name": "fit",
                "inputs": [
                    {"name": "x", "resource": "res1"},
                    {"name": "y", "resource": "res2"},
                    {"name": "guess", "resource": {"inline": True, "data": [0.5]}},
                    {"name": "dangling", "resource": "nope"},
                ],
            },
        ],
        "displays": [
            {
                "name": "main",
                "layout": {
                    "spec": {
                        "tabs": [
                            {"name": "t1", "views": ["v1", "v2"], "label": "Data"},
                            {"name": "t2", "views": ["v3", "v1"]},
                            {"name": "t3", "views": []},
                        ],
                        "panes": [
                            {"tabs": ["t2", "t1"]},
                            {"tabs": ["t3"]},
                        ],
                    }
                },
            },
            {
                "name": "broken",
                "layout": {
                    "spec": {
                        "tabs": [{"name": "t1", "views": ["v1", "missing"]}],
                        "panes": [{"tabs": ["t1"]}],
                    }
                },
            },
        ],
    }


@pytest.fixture
def document() -> dict:
    return make_document()


@pytest.fixture(params=["scan", "index"])
def datapackage(request, document) -> Datapackage:
    """The sample document wrapped once per lookup strategy."""
    return Datapackage.from_dict(document, lookup_strategy=request.param)
