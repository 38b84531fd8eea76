"""The module contains the types used throughout the framework."""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypedDict, TypeVar

AttrValue = str | int | float | bool | None

Props = dict[str, Any]

Func = TypeVar('Func', bound=Callable[..., Any])

StoreItem = dict[str, Any]


class StoreTypeOption(TypedDict):
    """The class represents one available message store type.
    The identifier doubles as the display label.
    """

    id: str
    name: str


class FragmentSource(Protocol):
    """The class describes the objects fragments can be fetched from."""

    def get_fragment(self, path: str) -> Awaitable[str]:
        """Return the markup of the fragment located at the specified path."""
        ...
