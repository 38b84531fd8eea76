"""The module contains the implementation of the searchable selection widget."""

import logging
from typing import TYPE_CHECKING, cast

from brokerconsole.core.store import MemoryStore
from brokerconsole.widgets.base import BaseFormWidget
from brokerconsole.widgets.exceptions import InvalidChoice

if TYPE_CHECKING:
    from typing import Any

    from typing_extensions import Self

    from brokerconsole.core.dom import Element
    from brokerconsole.core.registry import WidgetRegistry
    from brokerconsole.types import StoreItem

LOGGER = logging.getLogger(__name__)


class FilteringSelect(BaseFormWidget):
    """The class implements a selection widget the options of which are
    taken from a store and can be narrowed down by typing the beginning
    of the `search_attr` property of an item. The value of the widget is
    the identity of the selected item.
    """

    empty_value = ''

    def __init__(  # noqa: PLR0913
        self: 'Self',
        registry: 'WidgetRegistry',
        node: 'Element | None' = None,
        *,
        store: 'MemoryStore | None' = None,
        search_attr: str = 'name',
        ignore_case: bool = True,
        required: bool = True,
        **kwargs: 'Any',
    ) -> None:
        """Initialize a filtering select object."""
        self.store: MemoryStore | None = store if store is not None else MemoryStore()
        self.search_attr = search_attr
        self.ignore_case = ignore_case
        super().__init__(registry, node, required=required, **kwargs)

        self.node.set_attribute('autocomplete', 'off')

    #
    # Private methods
    #

    def _get_store(self: 'Self') -> 'MemoryStore':
        self._check_alive()
        return cast('MemoryStore', self.store)

    def _release(self: 'Self') -> None:
        """Discard the store the widget is bound to."""
        self.store = None

    #
    # Public methods
    #

    @BaseFormWidget.value.setter  # type: ignore[attr-defined]
    def value(self: 'Self', value: 'Any') -> None:
        store = self._get_store()
        if value in (None, ''):
            self._value = self.empty_value
            return

        if value not in store:
            msg = f'{value!r} is not one of the options of {self.__class__.__name__} {self.id!r}'
            raise InvalidChoice(msg)

        self._value = value

    @property
    def display_value(self: 'Self') -> str:
        """Return the label of the selected item."""
        if not self.value:
            return ''

        item = self._get_store().get(self.value) or {}
        return str(item.get(self.search_attr, ''))

    @property
    def item(self: 'Self') -> 'StoreItem | None':
        """Return the selected item."""
        if not self.value:
            return None

        return self._get_store().get(self.value)

    def get_options(self: 'Self', text: str = '') -> 'list[StoreItem]':
        """Return the items whose `search_attr` starts with the specified text."""
        store = self._get_store()
        if self.ignore_case:
            text = text.lower()

        def matches(item: 'StoreItem') -> bool:
            label = str(item.get(self.search_attr, ''))
            if self.ignore_case:
                label = label.lower()

            return label.startswith(text)

        return store.query(matches)

    def select(self: 'Self', text: str) -> 'StoreItem':
        """Select the single option whose label equals the specified text."""
        candidates = [
            item for item in self.get_options(text)
            if len(str(item.get(self.search_attr, ''))) == len(text)
        ]
        if len(candidates) != 1:
            msg = f'{text!r} does not identify an option of {self.__class__.__name__} {self.id!r}'
            raise InvalidChoice(msg)

        item = candidates[0]
        self.value = self._get_store().get_identity(item)
        LOGGER.debug('%r selected %r', self, self.value)
        return item
