"""The module contains the implementation of the in-memory data store
the selection widgets are bound to.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from typing import Any

    from typing_extensions import Self

    from brokerconsole.types import StoreItem


class MemoryStore:
    """The class implements a queryable collection of items keyed by
    the `id_property` attribute. The items keep their insertion order.
    """

    def __init__(
        self: 'Self',
        data: 'Iterable[StoreItem]' = (),
        id_property: str = 'id',
    ) -> None:
        """Initialize a memory store object."""
        self.id_property = id_property
        self._index: dict[Any, StoreItem] = {}

        for item in data:
            self.put(item)

    def __contains__(self: 'Self', item_id: object) -> bool:
        return item_id in self._index

    def __iter__(self: 'Self') -> 'Iterator[StoreItem]':
        return iter(self.data)

    def __len__(self: 'Self') -> int:
        return len(self._index)

    @property
    def data(self: 'Self') -> 'list[StoreItem]':
        """Return the items of the store."""
        return list(self._index.values())

    def get_identity(self: 'Self', item: 'StoreItem') -> 'Any':
        """Return the identity of the specified item."""
        try:
            return item[self.id_property]
        except KeyError as exc:
            msg = f'The item {item!r} has no {self.id_property!r} property'
            raise ValueError(msg) from exc

    def get(self: 'Self', item_id: 'Any') -> 'StoreItem | None':
        """Return the item with the specified identity."""
        return self._index.get(item_id)

    def put(self: 'Self', item: 'StoreItem') -> 'Any':
        """Add the item to the store or replace the item with the same identity."""
        item_id = self.get_identity(item)
        self._index[item_id] = item
        return item_id

    def remove(self: 'Self', item_id: 'Any') -> bool:
        """Remove the item with the specified identity."""
        return self._index.pop(item_id, None) is not None

    def query(
        self: 'Self',
        predicate: 'Callable[[StoreItem], bool] | None' = None,
        **filters: 'Any',
    ) -> 'list[StoreItem]':
        """Return the items matching both the predicate and the filters,
        where each filter is an exact match on an item property.
        """
        return [
            item for item in self._index.values()
            if all(item.get(key) == value for key, value in filters.items())
            and (predicate is None or predicate(item))
        ]
