"""The module contains the asynchronous client of the broker management API."""

import json
import logging
from typing import TYPE_CHECKING

import httpx

from brokerconsole.conf import settings
from brokerconsole.core.exceptions import MalformedResponse

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Any

    from typing_extensions import Self

LOGGER = logging.getLogger(__name__)

_UNSET: 'Any' = object()


class ManagementClient:
    """The class implements the client of the management API. It serves
    both the fragments the forms are composed from and the helper actions
    reporting the capabilities of the broker.

    Transport failures and non-2xx responses are not handled here and
    propagate as `httpx.TransportError` and `httpx.HTTPStatusError`.
    """

    def __init__(
        self: 'Self',
        base_url: str | None = None,
        *,
        auth: 'httpx.Auth | tuple[str, str] | None' = None,
        timeout: 'float | None' = _UNSET,
        transport: 'httpx.AsyncBaseTransport | None' = None,
    ) -> None:
        """Initialize a management client object."""
        self.base_url = base_url or settings.MANAGEMENT_URL
        self._client = httpx.AsyncClient(
            auth=auth,
            base_url=self.base_url,
            timeout=settings.REQUEST_TIMEOUT if timeout is _UNSET else timeout,
            transport=transport,
        )

    async def __aenter__(self: 'Self') -> 'Self':
        return self

    async def __aexit__(
        self: 'Self',
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: 'TracebackType | None',
    ) -> None:
        await self.aclose()

    def __repr__(self: 'Self') -> str:
        return f'<{self.__class__.__name__} {self.base_url!r}>'

    #
    # Private methods
    #

    async def _get(self: 'Self', path: str, **params: str) -> 'httpx.Response':
        LOGGER.debug('GET %s %s', path, params or '')
        response = await self._client.get(path, params=params or None)
        response.raise_for_status()
        return response

    #
    # Public methods
    #

    async def aclose(self: 'Self') -> None:
        """Close the underlying HTTP connections."""
        await self._client.aclose()

    async def get_fragment(self: 'Self', path: str) -> str:
        """Return the markup of the fragment located at the specified path."""
        response = await self._get(path)
        return response.text

    async def call_helper(self: 'Self', action: str) -> 'Any':
        """Invoke the specified action of the helper endpoint and return
        the decoded JSON body.
        """
        response = await self._get(settings.HELPER_PATH, action=action)
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            msg = f'The {action} helper action returned a body which is not JSON'
            raise MalformedResponse(msg) from exc

    async def list_message_store_types(self: 'Self') -> list[str]:
        """Return the identifiers of the message store types
        the broker supports.
        """
        store_types = await self.call_helper(settings.STORE_TYPES_ACTION)
        if not isinstance(store_types, list) or not all(
            isinstance(store_type, str) for store_type in store_types
        ):
            msg = f'{settings.STORE_TYPES_ACTION} must return a JSON array of strings'
            raise MalformedResponse(msg)

        return store_types
