# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are
# met:
#
#     * Redistributions of source code must retain the above copyright
# notice, this list of conditions and the following disclaimer.
#     * Redistributions in binary form must reproduce the above
# copyright notice, this list of conditions and the following disclaimer
# in the documentation and/or other materials provided with the
# distribution.
#     * Neither the name of Google Inc. nor the names of its
# contributors may be used to endorse or promote products derived from
# this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR
# A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
# OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
# SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE,
# DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY
# THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT
# (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.

"""The module contains utils for writing tests."""

import asyncio
from functools import wraps
from typing import TYPE_CHECKING

from brokerconsole.conf import settings

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType
    from typing import Any

    from typing_extensions import Self

    from brokerconsole.types import Func


class OverriddenSettings:
    """The class holds the overridden settings, falling back to
    the settings it wraps for the rest of them.
    """

    def __init__(self: 'Self', wrapped: 'Any', **options: 'Any') -> None:
        self.__dict__['_wrapped'] = wrapped
        self.__dict__.update(options)

    def __getattr__(self: 'Self', name: str) -> 'Any':
        return getattr(self.__dict__['_wrapped'], name)

    def __repr__(self: 'Self') -> str:
        return f'<{self.__class__.__name__} over {self.__dict__["_wrapped"]!r}>'


class override_settings:  # noqa: N801
    """Temporarily alters the settings. Can be used as a context manager
    or as a decorator of either a coroutine or a function.
    """

    def __init__(self: 'Self', **kwargs: 'Any') -> None:
        self.options = kwargs
        self.wrapped: Any = None

    def __enter__(self: 'Self') -> None:
        self.enable()

    def __exit__(
        self: 'Self',
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: 'TracebackType | None',
    ) -> None:
        self.disable()

    def __call__(self: 'Self', func: 'Func') -> 'Callable[..., Any]':
        """Wraps the specified coroutine or function."""

        if not callable(func):
            msg = f'Cannot decorate object of type {type(func)}'
            raise TypeError(msg)

        if asyncio.iscoroutinefunction(func):
            # The `with` statement must be executed when the coroutine
            # runs rather than when it's created.
            @wraps(func)
            async def inner(*args: 'Any', **kwargs: 'Any') -> 'Any':
                with self:
                    return await func(*args, **kwargs)
        else:
            @wraps(func)
            def inner(*args: 'Any', **kwargs: 'Any') -> 'Any':
                with self:
                    return func(*args, **kwargs)

        return inner

    def enable(self: 'Self') -> None:
        """Invoked when execution enters the context of the with statement."""

        if not settings.configured:
            settings._setup()  # noqa: SLF001

        self.wrapped = settings._wrapped  # noqa: SLF001
        settings._wrapped = OverriddenSettings(self.wrapped, **self.options)  # noqa: SLF001

    def disable(self: 'Self') -> None:
        """Invoked when execution leaves the context of the with statement."""

        settings._wrapped = self.wrapped  # noqa: SLF001
        self.wrapped = None
