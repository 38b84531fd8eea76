"""The module contains the implementation of the loader rendering
the type-specific part of the "add virtual host" form.

Every call of `show` runs the following pipeline:
1. destroy the widgets left from the previous render of the type-specific
   part and empty its container;
2. fetch the fragment of the virtual host type, inject it into
   the container and activate the widgets declared in it;
3. destroy the store type chooser created by the previous call;
4. fetch the message store types from the management API and bind them
   into a new chooser placed inside the fresh fragment.
"""

import asyncio
import logging
from typing import TYPE_CHECKING

from brokerconsole.conf import settings
from brokerconsole.core import parser
from brokerconsole.core.dom import create_element
from brokerconsole.core.store import MemoryStore
from brokerconsole.widgets import FilteringSelect

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typing_extensions import Self

    from brokerconsole.core.console import Console
    from brokerconsole.core.dom import Element
    from brokerconsole.types import StoreTypeOption

LOGGER = logging.getLogger(__name__)


def build_store_type_lookup(store_types: 'Iterable[str]') -> 'MemoryStore':
    """Return a store of the specified message store types, the identifier
    of each type doubling as its label. The store is keyed by the identifier,
    so a type reported more than once yields a single item, kept at
    the position where the type was first seen.
    """
    options: list[StoreTypeOption] = [
        {'id': store_type, 'name': store_type} for store_type in store_types
    ]
    return MemoryStore(options)


class TypeSpecificFormLoader:
    """The class implements the loader of the type-specific part of
    the "add virtual host" form.
    """

    def __init__(self: 'Self', console: 'Console', vhost_type: str | None = None) -> None:
        """Initialize a type-specific form loader object."""
        self.console = console
        self.vhost_type = vhost_type or settings.VIRTUALHOST_TYPE

        self._pipeline: asyncio.Task[FilteringSelect] | None = None
        self._store_type_chooser: FilteringSelect | None = None

    def __repr__(self: 'Self') -> str:
        return f'<{self.__class__.__name__} {self.vhost_type!r}>'

    #
    # Private methods
    #

    def _clear_type_specific_widgets(self: 'Self', container: 'Element') -> None:
        destroyed = self.console.registry.destroy_by_prefix(settings.TYPE_SPECIFIC_PREFIX)
        container.clear()
        LOGGER.debug('%r cleared the container, destroyed widgets: %s', self, destroyed)

    async def _load_fragment(self: 'Self', container: 'Element') -> None:
        path = settings.FRAGMENT_PATH.format(type=self.vhost_type)
        markup = await self.console.fragment_source.get_fragment(path)

        container.inner_html = markup
        parser.parse(container, self.console.registry)

    async def _load_store_type_chooser(self: 'Self') -> 'FilteringSelect':
        store_types = await self.console.client.list_message_store_types()

        store = build_store_type_lookup(store_types)
        placeholder = self.console.document.by_id(settings.STORE_TYPE_PLACEHOLDER_ID)
        anchor = create_element(
            'input',
            {'id': settings.STORE_TYPE_INPUT_ID, 'required': False},
            placeholder,
        )
        chooser = FilteringSelect(
            self.console.registry,
            anchor,
            id=settings.STORE_TYPE_CHOOSER_ID,
            name='storeType',
            store=store,
            search_attr='name',
            required=False,
        )
        chooser.startup()
        self.store_type_chooser = chooser
        LOGGER.info('%r offers %d message store type(s)', self, len(store))
        return chooser

    async def _show(self: 'Self') -> 'FilteringSelect':
        container = self.console.document.by_id(settings.TYPE_SPECIFIC_CONTAINER_ID)

        self._clear_type_specific_widgets(container)
        await self._load_fragment(container)
        self.store_type_chooser = None

        return await self._load_store_type_chooser()

    async def _abort(self: 'Self', pipeline: 'asyncio.Task[FilteringSelect] | None') -> bool:
        if pipeline is None or pipeline.done():
            return False

        pipeline.cancel()
        await asyncio.wait([pipeline])
        LOGGER.warning('%r aborted the unfinished rendering', self)
        return True

    async def _supersede(
        self: 'Self',
        previous: 'asyncio.Task[FilteringSelect] | None',
    ) -> 'FilteringSelect':
        await self._abort(previous)
        return await self._show()

    #
    # Public methods
    #

    @property
    def is_loading(self: 'Self') -> bool:
        """Return True while the pipeline started by `show` is running."""
        return self._pipeline is not None and not self._pipeline.done()

    @property
    def store_type_chooser(self: 'Self') -> 'FilteringSelect | None':
        """Return the store type chooser created by the latest call of `show`."""
        return self._store_type_chooser

    @store_type_chooser.setter
    def store_type_chooser(self: 'Self', chooser: 'FilteringSelect | None') -> None:
        """Replace the store type chooser, destroying the previous one."""
        previous, self._store_type_chooser = self._store_type_chooser, None
        if previous is not None and previous is not chooser:
            previous.destroy()

        self._store_type_chooser = chooser

    async def cancel(self: 'Self') -> bool:
        """Abort the pipeline started by `show` if it's still running.
        Return True if there was a pipeline to abort.
        """
        return await self._abort(self._pipeline)

    async def show(self: 'Self') -> 'FilteringSelect':
        """Render the type-specific part of the form and return the store
        type chooser. An unfinished rendering started by a previous call is
        aborted first.
        """
        # The pipeline is replaced before the first await, so the latest call
        # always supersedes every earlier one.
        pipeline = asyncio.ensure_future(self._supersede(self._pipeline))
        self._pipeline = pipeline
        return await pipeline
