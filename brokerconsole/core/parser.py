"""The module contains the routine for activating the widgets declared
in markup. An element declares a widget by carrying the `data-widget-type`
attribute, the value of which is a key of the WIDGET_TYPES setting.
The optional `data-widget-props` attribute holds a JSON object passed
to the widget as keyword arguments.
"""

import json
import logging
from typing import TYPE_CHECKING

from brokerconsole.conf import settings
from brokerconsole.core.exceptions import UnknownWidgetType, WidgetPropsAreInvalid
from brokerconsole.utils.module_loading import import_string

if TYPE_CHECKING:
    from brokerconsole.core.dom import Element
    from brokerconsole.core.registry import WidgetRegistry
    from brokerconsole.types import Props
    from brokerconsole.widgets.base import BaseWidget

LOGGER = logging.getLogger(__name__)

WIDGET_PROPS_ATTR = 'data-widget-props'

WIDGET_TYPE_ATTR = 'data-widget-type'


def get_widget_class(type_name: str) -> 'type[BaseWidget]':
    """Return the widget class registered under the specified name."""
    try:
        dotted_path = settings.WIDGET_TYPES[type_name]
    except KeyError as exc:
        msg = f'{type_name!r} is not listed in the WIDGET_TYPES setting'
        raise UnknownWidgetType(msg) from exc

    widget_class: type[BaseWidget] = import_string(dotted_path)
    return widget_class


def get_widget_props(element: 'Element') -> 'Props':
    """Return the properties declared by the specified element."""
    raw_props = element.get_attribute(WIDGET_PROPS_ATTR)
    if not raw_props:
        return {}

    try:
        props = json.loads(raw_props)
    except json.JSONDecodeError as exc:
        msg = f'{WIDGET_PROPS_ATTR} of {element!r} is not valid JSON'
        raise WidgetPropsAreInvalid(msg) from exc

    if not isinstance(props, dict):
        msg = f'{WIDGET_PROPS_ATTR} of {element!r} must be a JSON object'
        raise WidgetPropsAreInvalid(msg)

    return props


def parse(root: 'Element', registry: 'WidgetRegistry') -> 'list[BaseWidget]':
    """Instantiate the widgets declared inside the specified element in
    document order and start them up once all of them are created.
    Return the created widgets.
    """
    declared = [
        element for element in root.iter_elements()
        if element.has_attribute(WIDGET_TYPE_ATTR)
    ]

    widgets = []
    for element in declared:
        widget_class = get_widget_class(element.get_attribute(WIDGET_TYPE_ATTR) or '')
        props = get_widget_props(element)
        try:
            widget = widget_class(registry, element, **props)
        except TypeError as exc:
            msg = f'{WIDGET_PROPS_ATTR} of {element!r} does not suit {widget_class.__name__}'
            raise WidgetPropsAreInvalid(msg) from exc

        widgets.append(widget)

    for widget in widgets:
        widget.startup()

    LOGGER.debug('Activated %d widget(s) inside %r', len(widgets), root)
    return widgets
