"""By-name lookup over datapackage collections.

Every entity in a datapackage carries a `name`. Names are expected to be
unique within a collection but this is not enforced: when a name repeats,
the first entry wins, for both the linear scan and NameIndex.
"""

import logging
from typing import Iterable, Optional, Protocol, Sequence, TypeVar

from odf_datapackage.errors import EntityKind, NotFoundError

logger = logging.getLogger(__name__)


class Named(Protocol):
    name: str


T = TypeVar("T", bound=Named)


def get_by_name(
    collection: Iterable[T],
    name: str,
    kind: EntityKind,
    context: Optional[str] = None,
) -> T:
    """Return the first entity in `collection` whose name is `name`.

    Raises:
        NotFoundError: no entity matches.
    """
    for entity in collection:
        if entity.name == name:
            return entity
    logger.debug(f"Lookup miss: {kind.value} '{name}' (context={context})")
    raise NotFoundError(kind, name, context)


def get_many_by_name(
    collection: Sequence[T],
    names: Iterable[str],
    kind: EntityKind,
    context: Optional[str] = None,
) -> list[T]:
    """Resolve `names` in order. The first miss aborts the whole batch."""
    return [get_by_name(collection, name, kind, context) for name in names]


def filter_by_names(collection: Iterable[T], names: Iterable[str]) -> list[T]:
    """Return entities whose name is in `names`, in collection order.

    Unknown names are ignored and the order of `names` does not matter.
    """
    wanted = set(names)
    return [entity for entity in collection if entity.name in wanted]


class NameIndex:
    """Name -> entity map built once from a collection.

    Behaves exactly like get_by_name/get_many_by_name, including
    first-match on duplicate names, with O(1) lookups after construction.
    """

    def __init__(
        self,
        collection: Iterable[T],
        kind: EntityKind,
        context: Optional[str] = None,
    ):
        self.kind = kind
        self.context = context
        self._by_name: dict[str, T] = {}
        for entity in collection:
            self._by_name.setdefault(entity.name, entity)

    def get(self, name: str) -> T:
        try:
            return self._by_name[name]
        except KeyError:
            logger.debug(
                f"Index miss: {self.kind.value} '{name}' (context={self.context})"
            )
            raise NotFoundError(self.kind, name, self.context) from None

    def get_many(self, names: Iterable[str]) -> list[T]:
        return [self.get(name) for name in names]

    def names(self) -> list[str]:
        return list(self._by_name.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)
