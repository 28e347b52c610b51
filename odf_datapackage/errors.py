"""Errors raised while resolving name references inside a datapackage."""

from enum import Enum
from typing import Optional


class EntityKind(str, Enum):
    """Which named collection a lookup ran against."""

    VIEW = "View"
    TAB = "Tab"
    DISPLAY = "Display"
    ALGORITHM = "Algorithm"
    ALGORITHM_INPUT = "AlgorithmInput"
    RESOURCE = "Resource"


class DatapackageError(Exception):
    """Base class for datapackage resolution failures."""


class NotFoundError(DatapackageError, LookupError):
    """A name reference did not match any entity in its collection."""

    def __init__(
        self,
        kind: EntityKind,
        name: str,
        context: Optional[str] = None,
    ):
        self.kind = kind
        self.name = name
        self.context = context
        message = f"{kind.value} '{name}' not found"
        if context:
            message += f" in {context}"
        super().__init__(message)


class InvalidReferenceError(DatapackageError, ValueError):
    """An algorithm input holds an inline value where a name was required.

    Inline values are read from the input directly
    (see ``Datapackage.get_algorithm_input_by_name``).
    """

    def __init__(self, algorithm_name: str, input_name: str):
        self.algorithm_name = algorithm_name
        self.input_name = input_name
        super().__init__(
            f"Input '{input_name}' of algorithm '{algorithm_name}' "
            f"holds an inline value, not a resource name"
        )
