"""The core of the brokerconsole framework."""

from brokerconsole.core.dom import Document, Element, create_element
from brokerconsole.core.registry import WidgetRegistry

__all__ = ('Document', 'Element', 'WidgetRegistry', 'create_element')
