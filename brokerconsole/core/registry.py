"""The module contains the implementation of the widget registry."""

import logging
from typing import TYPE_CHECKING

from brokerconsole.core.exceptions import DuplicateWidgetId

if TYPE_CHECKING:
    from collections.abc import Iterator

    from typing_extensions import Self

    from brokerconsole.core.dom import Element
    from brokerconsole.widgets.base import BaseWidget

LOGGER = logging.getLogger(__name__)


class WidgetRegistry:
    """The class implements an index of the currently instantiated widgets,
    keyed by their ids. The registry is owned by a console and passed to
    everything which creates or destroys widgets.
    """

    def __init__(self: 'Self') -> None:
        """Initialize a widget registry object."""
        self._widgets: dict[str, BaseWidget] = {}

    def __contains__(self: 'Self', widget_id: object) -> bool:
        return widget_id in self._widgets

    def __iter__(self: 'Self') -> 'Iterator[BaseWidget]':
        return iter(self.to_list())

    def __len__(self: 'Self') -> int:
        return len(self._widgets)

    def __repr__(self: 'Self') -> str:
        return f'<{self.__class__.__name__} ({len(self)} widgets)>'

    def add(self: 'Self', widget: 'BaseWidget') -> None:
        """Register the specified widget."""
        if widget.id in self._widgets:
            msg = f'Tried to register widget with id=={widget.id} but that id is already registered'
            raise DuplicateWidgetId(msg)

        self._widgets[widget.id] = widget

    def remove(self: 'Self', widget_id: str) -> None:
        """Unregister the widget with the specified id if there is one."""
        self._widgets.pop(widget_id, None)

    def by_id(self: 'Self', widget_id: str) -> 'BaseWidget | None':
        """Return the widget with the specified id."""
        return self._widgets.get(widget_id)

    def to_list(self: 'Self') -> 'list[BaseWidget]':
        """Return a snapshot of the registered widgets in registration order."""
        return list(self._widgets.values())

    def find_widgets(self: 'Self', node: 'Element') -> 'list[BaseWidget]':
        """Return the widgets whose nodes are located inside the specified node."""
        return [
            widget for widget in self._widgets.values()
            if widget.node is not node and node.contains(widget.node)
        ]

    def destroy_by_prefix(self: 'Self', prefix: str) -> list[str]:
        """Recursively destroy every widget whose id starts with the specified
        prefix. Return the ids of the destroyed widgets including
        the descendants which went along with them.
        """
        destroyed = []
        for widget in self.to_list():
            # The widget might have gone along with its ancestor.
            if widget.destroyed or not widget.id.startswith(prefix):
                continue

            destroyed.extend(item.id for item in widget.destroy_recursive())

        LOGGER.debug('Destroyed %d widget(s) under the prefix %s', len(destroyed), prefix)
        return destroyed
