"""
The module contains the exception classes
related to the widget library.
"""


class InvalidChoice(Exception):
    """Raised when a selection widget is given a value
    which is not present in its store.
    """


class WidgetIsDestroyed(Exception):
    """Raised when trying to use a widget after it has been destroyed."""
