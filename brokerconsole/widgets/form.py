"""The module contains the implementation of the simple form widgets."""

import re
from typing import TYPE_CHECKING

from brokerconsole.widgets.base import BaseFormWidget, BaseWidget

if TYPE_CHECKING:
    from typing import Any

    from typing_extensions import Self

    from brokerconsole.core.dom import Element
    from brokerconsole.core.registry import WidgetRegistry


class ContentPane(BaseWidget):
    """The class implements a container grouping other widgets."""


class TextBox(BaseFormWidget):
    """The class implements a single line text input."""

    empty_value = ''

    def __init__(
        self: 'Self',
        registry: 'WidgetRegistry',
        node: 'Element | None' = None,
        *,
        trim: bool = False,
        placeholder: str = '',
        **kwargs: 'Any',
    ) -> None:
        """Initialize a text box object."""
        self.trim = trim
        super().__init__(registry, node, **kwargs)

        if placeholder:
            self.node.set_attribute('placeholder', placeholder)

    @BaseFormWidget.value.setter  # type: ignore[attr-defined]
    def value(self: 'Self', value: 'Any') -> None:
        self._check_alive()
        value = '' if value is None else str(value)
        self._value = value.strip() if self.trim else value


class ValidationTextBox(TextBox):
    """The class implements a text input checking its value
    against a regular expression.
    """

    def __init__(
        self: 'Self',
        registry: 'WidgetRegistry',
        node: 'Element | None' = None,
        *,
        regexp: str = '.*',
        invalid_message: str = 'The value entered is not valid.',
        **kwargs: 'Any',
    ) -> None:
        """Initialize a validation text box object."""
        self.pattern = re.compile(regexp)
        self.invalid_message = invalid_message
        super().__init__(registry, node, **kwargs)

    def is_valid(self: 'Self') -> bool:
        """Check if the value is present when required and matches the pattern."""
        if not self.value:
            return not self.required

        return self.pattern.fullmatch(self.value) is not None

    @property
    def validation_message(self: 'Self') -> str:
        """Return the message explaining why the value is rejected or
        an empty string if the value is valid.
        """
        return '' if self.is_valid() else self.invalid_message


class CheckBox(BaseFormWidget):
    """The class implements a check box."""

    def __init__(
        self: 'Self',
        registry: 'WidgetRegistry',
        node: 'Element | None' = None,
        *,
        checked: bool = False,
        **kwargs: 'Any',
    ) -> None:
        """Initialize a check box object."""
        super().__init__(registry, node, **kwargs)
        self.checked = checked or self.node.has_attribute('checked')

    @property
    def checked(self: 'Self') -> bool:
        """Return True if the check box is checked."""
        return bool(self.node.has_attribute('checked'))

    @checked.setter
    def checked(self: 'Self', checked: bool) -> None:
        self._check_alive()
        self.node.set_attribute('checked', bool(checked))
