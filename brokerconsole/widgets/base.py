"""The module contains the base class for widgets from the library."""

import itertools
import logging
from collections import defaultdict
from typing import TYPE_CHECKING

from brokerconsole.core.dom import create_element
from brokerconsole.widgets.exceptions import WidgetIsDestroyed

if TYPE_CHECKING:
    from typing import Any

    from typing_extensions import Self

    from brokerconsole.core.dom import Element
    from brokerconsole.core.registry import WidgetRegistry

LOGGER = logging.getLogger(__name__)

_ID_COUNTERS: 'defaultdict[str, itertools.count[int]]' = defaultdict(itertools.count)


class BaseWidget:
    """The class implements the base interface for widgets from the library.

    A widget is bound to an element of a document and registers itself
    in the specified registry under its id. When no element is passed,
    the widget creates a detached one using `tag_name`.
    """

    tag_name = 'div'

    def __init__(
        self: 'Self',
        registry: 'WidgetRegistry',
        node: 'Element | None' = None,
        *,
        id: str | None = None,  # noqa: A002
        name: str = '',
        disabled: bool = False,
    ) -> None:
        """Initialize a widget object."""
        self.registry = registry
        self.node = node if node is not None else create_element(self.tag_name)
        self.id = id or self.node.id or self._generate_id()
        self.name = name or self.node.get_attribute('name') or ''
        self.disabled = disabled
        self.destroyed = False
        self.started = False

        self.registry.add(self)
        self.node.set_attribute('id', self.id)
        if self.name:
            self.node.set_attribute('name', self.name)

        self.node.set_attribute('disabled', self.disabled)

    def __repr__(self: 'Self') -> str:
        """Return a system representation of the widget."""
        state = ' destroyed' if self.destroyed else ''
        return f'<{self.__class__.__name__} {self.id!r}{state}>'

    #
    # Private methods
    #

    def _check_alive(self: 'Self') -> None:
        if self.destroyed:
            msg = f'{self.__class__.__name__} {self.id!r} has been destroyed'
            raise WidgetIsDestroyed(msg)

    def _generate_id(self: 'Self') -> str:
        return f'{self.__class__.__name__}_{next(_ID_COUNTERS[self.__class__.__name__])}'

    def _release(self: 'Self') -> None:
        """Release the resources held by the widget."""

    #
    # Public methods
    #

    def get_descendants(self: 'Self') -> 'list[BaseWidget]':
        """Return the widgets located inside the node of the widget."""
        return self.registry.find_widgets(self.node)

    def startup(self: 'Self') -> None:
        """Finish the widget creation once the whole markup is activated."""
        self._check_alive()
        self.started = True

    def destroy(self: 'Self') -> None:
        """Destroy the widget, leaving the widgets it contains intact.
        Destroying an already destroyed widget does nothing.
        """
        if self.destroyed:
            return

        self.registry.remove(self.id)
        self.node.remove()
        self._release()
        self.destroyed = True
        LOGGER.debug('%r was destroyed', self)

    def destroy_recursive(self: 'Self') -> 'list[BaseWidget]':
        """Destroy the widget along with the widgets it contains.
        Return the destroyed widgets, the descendants coming first.
        """
        if self.destroyed:
            return []

        destroyed = []
        for descendant in self.get_descendants():
            if not descendant.destroyed:
                descendant.destroy()
                destroyed.append(descendant)

        self.destroy()
        destroyed.append(self)
        return destroyed


class BaseFormWidget(BaseWidget):
    """The class implements the base interface for widgets holding a value."""

    empty_value: 'Any' = None
    tag_name = 'input'

    def __init__(
        self: 'Self',
        registry: 'WidgetRegistry',
        node: 'Element | None' = None,
        *,
        required: bool = False,
        value: 'Any' = None,
        **kwargs: 'Any',
    ) -> None:
        """Initialize a form widget object."""
        super().__init__(registry, node, **kwargs)

        self.required = required
        self.node.set_attribute('required', self.required)
        self._value: Any = self.empty_value
        if value is not None:
            self.value = value
        elif self.node.has_attribute('value'):
            self.value = self.node.get_attribute('value')

    @property
    def value(self: 'Self') -> 'Any':
        """Return the value of the widget."""
        return self._value

    @value.setter
    def value(self: 'Self', value: 'Any') -> None:
        self._check_alive()
        self._value = value

    def is_valid(self: 'Self') -> bool:
        """Check if the current value of the widget is acceptable."""
        return not self.required or self.value not in (None, self.empty_value)
