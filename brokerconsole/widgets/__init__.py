"""The package contains the widget library forms of the console are built from."""

__all__ = (
    'BaseWidget',
    'CheckBox',
    'ContentPane',
    'FilteringSelect',
    'TextBox',
    'ValidationTextBox',
)

from brokerconsole.widgets.base import BaseWidget
from brokerconsole.widgets.filtering_select import FilteringSelect
from brokerconsole.widgets.form import CheckBox, ContentPane, TextBox, ValidationTextBox
