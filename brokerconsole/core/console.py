"""The module contains the implementation of the high-level console class."""

import logging
from typing import TYPE_CHECKING

from brokerconsole.core.client import ManagementClient
from brokerconsole.core.dom import Document
from brokerconsole.core.registry import WidgetRegistry
from brokerconsole.utils.log import configure_logging

if TYPE_CHECKING:
    from types import TracebackType

    from typing_extensions import Self

    from brokerconsole.types import FragmentSource

__all__ = ('Console', )

LOGGER = logging.getLogger(__name__)


class Console:
    """The class ties together the things the forms of the console need:
    - the document the forms are rendered into;
    - the registry of the instantiated widgets;
    - the management client and the source of the fragments.

    It also configures logging.
    """

    def __init__(
        self: 'Self',
        document: 'Document | None' = None,
        *,
        client: 'ManagementClient | None' = None,
        fragment_source: 'FragmentSource | None' = None,
        registry: 'WidgetRegistry | None' = None,
    ) -> None:
        """Initialize a console object."""
        from brokerconsole.conf import settings

        configure_logging(settings.LOGGING)

        self.client = client or ManagementClient()
        self.document = document if document is not None else Document()
        self.fragment_source: FragmentSource = fragment_source or self.client
        self.registry = registry if registry is not None else WidgetRegistry()

    async def __aenter__(self: 'Self') -> 'Self':
        return self

    async def __aexit__(
        self: 'Self',
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: 'TracebackType | None',
    ) -> None:
        await self.close()

    async def close(self: 'Self') -> None:
        """Destroy the registered widgets and close the management client."""
        for widget in self.registry.to_list():
            widget.destroy()

        await self.client.aclose()
        LOGGER.debug('%r was closed', self)
