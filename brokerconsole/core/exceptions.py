"""The module contains the global brokerconsole exception classes."""


class DuplicateWidgetId(Exception):
    """Raised when trying to register a widget with an id
    which is already taken by another registered widget.
    """


class FragmentNotFound(Exception):
    """Raised when a fragment is requested from the resources,
    but there is no such file.
    """


class ImproperlyConfigured(Exception):
    """Raised when brokerconsole is somehow improperly configured."""


class MalformedResponse(Exception):
    """Raised when the management API returns a body that does not
    have the expected shape.
    """


class NodeNotFound(Exception):
    """Raised when the document doesn't contain a node with the requested id."""


class UnknownWidgetType(Exception):
    """Raised when markup declares a widget type which is not listed
    in the WIDGET_TYPES setting.
    """


class WidgetPropsAreInvalid(Exception):
    """Raised when the data-widget-props attribute of an element
    is not a JSON object.
    """
