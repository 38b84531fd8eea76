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
"""The module contains facilities for working with the settings of the consoles
based on brokerconsole.

brokerconsole.conf.global_settings acts as a source for the settings and
their default values. Then, the values can be overridden either using the
module specified via the BROKERCONSOLE_SETTINGS_MODULE environment variable
or by calling settings.configure().

See the global_settings.py for a list of all possible settings.
"""

import importlib
import numbers
import operator
import os
from typing import TYPE_CHECKING

from brokerconsole.conf import global_settings
from brokerconsole.core.exceptions import ImproperlyConfigured

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import ModuleType
    from typing import Any

    from typing_extensions import Self

_EMPTY = object()

_SETTINGS_MODULE_VAR = 'BROKERCONSOLE_SETTINGS_MODULE'


def new_method_proxy(func: 'Callable[..., Any]') -> 'Any':
    """Route functions to the _wrapped object."""

    def inner(self: 'LazyObject', *args: 'Any') -> 'Any':
        if self._wrapped is _EMPTY:
            self._setup()

        return func(self._wrapped, *args)
    return inner


class LazyObject:
    """The class implements a wrapper for another class that can be used to delay
    instantiation of the wrapped class.
    """

    # Avoid infinite recursion when tracing __init__.
    _wrapped: 'Settings | object' = _EMPTY

    def __init__(self: 'Self') -> None:
        """Initialize a lazy object."""
        self._wrapped = _EMPTY

    def _setup(self: 'Self') -> None:
        """Initialize the wrapped object."""
        msg = 'subclasses of LazyObject must provide a _setup() method.'
        raise NotImplementedError(msg)

    __getattr__ = new_method_proxy(getattr)

    def __setattr__(self: 'Self', name: str, value: 'Any') -> None:
        """Set the value of a lazy object."""
        if name == '_wrapped':
            # Assign to __dict__ to avoid infinite __setattr__ loops.
            self.__dict__['_wrapped'] = value
        else:
            if self._wrapped is _EMPTY:
                self._setup()

            setattr(self._wrapped, name, value)

    def __delattr__(self: 'Self', name: str) -> None:
        """Delete a lazy object."""
        if name == '_wrapped':
            msg = "can't delete _wrapped."
            raise TypeError(msg)

        if self._wrapped is _EMPTY:
            self._setup()

        delattr(self._wrapped, name)

    __str__ = new_method_proxy(str)
    __bool__ = new_method_proxy(bool)

    # Introspection support.
    __dir__ = new_method_proxy(dir)

    # Pretend to be the wrapped class.
    __class__ = property(
        new_method_proxy(operator.attrgetter('__class__')),  # type: ignore[assignment]
    )
    __eq__ = new_method_proxy(operator.eq)
    __ne__ = new_method_proxy(operator.ne)
    __hash__ = new_method_proxy(hash)


class LazySettings(LazyObject):
    """The class implements a lazy proxy for brokerconsole settings.
    brokerconsole uses the settings module specified via
    the BROKERCONSOLE_SETTINGS_MODULE environment variable unless
    the settings are configured manually.
    """

    def _setup(self: 'Self', name: str | None = None) -> None:
        """Load the settings module specified via the BROKERCONSOLE_SETTINGS_MODULE
        environment variable. This is used the first time settings are needed,
        if the user hasn't configured settings manually.
        """
        settings_module = os.environ.get(_SETTINGS_MODULE_VAR)
        if not settings_module:
            desc = f'setting {name}' if name else 'settings'
            msg = (
                f'Requested {desc}, but settings are not configured. '
                f'You must either define the environment variable '
                f'{_SETTINGS_MODULE_VAR} or call settings.configure() '
                f'before accessing settings.'
            )
            raise ImproperlyConfigured(msg)

        self._wrapped = Settings(settings_module)

    def __repr__(self: 'Self') -> str:
        """Return a system representation of the lazy settings."""
        # Hardcode the class name as otherwise it yields 'Settings'.
        if self._wrapped is _EMPTY:
            return '<LazySettings [Unevaluated]>'

        return (
            f'<LazySettings "{self._wrapped.settings_module_name}">'  # type: ignore[attr-defined]
        )

    def __getattr__(self: 'Self', name: str) -> 'Any':
        """Return the value of a setting and caches it in self.__dict__."""
        if self._wrapped is _EMPTY:
            self._setup(name)

        val = getattr(self._wrapped, name)
        self.__dict__[name] = val

        return val

    def __setattr__(self: 'Self', name: str, value: 'Any') -> None:
        """Set the value of setting. Clear all cached values if _wrapped changes
        (@override_settings does this) or clears single values when set.
        """
        if name == '_wrapped':
            self.__dict__.clear()
        else:
            self.__dict__.pop(name, None)

        super().__setattr__(name, value)

    def __delattr__(self: 'Self', name: str) -> None:
        """Delete a setting and clear it from cache if needed."""
        super().__delattr__(name)
        self.__dict__.pop(name, None)

    @property
    def configured(self: 'Self') -> bool:
        """Return True if the settings have already been configured."""
        return self._wrapped is not _EMPTY

    def configure(self: 'Self', **options: 'Any') -> None:
        """Configure the settings manually, bypassing
        the BROKERCONSOLE_SETTINGS_MODULE environment variable.
        """
        if self.configured:
            msg = 'Settings already configured.'
            raise RuntimeError(msg)

        for name in options:
            if not name.isupper():
                msg = f'Setting {name} must be uppercase.'
                raise TypeError(msg)

        self._wrapped = Settings(None, options)


class Settings:
    """The class implements the interface for working with the settings of
    the consoles based on brokerconsole.
    """

    def __init__(
        self: 'Self',
        settings_module: str | None,
        options: 'dict[str, Any] | None' = None,
    ) -> None:
        """Initialize a settings object."""
        self.settings_module_name = settings_module or 'UserSettings'

        self._explicit_settings: dict[str, Any] = {}

        # update this dict from global settings (but only for ALL_CAPS settings)
        for setting in dir(global_settings):
            if setting.isupper():
                setattr(self, setting, getattr(global_settings, setting))

        if settings_module:
            module: ModuleType = importlib.import_module(settings_module)
            options = {
                setting: getattr(module, setting)
                for setting in dir(module) if setting.isupper()
            }

        for setting, setting_value in (options or {}).items():
            setattr(self, setting, setting_value)
            self._explicit_settings[setting] = setting_value

        self._check()

    def _check(self: 'Self') -> None:
        """Check the settings for gross errors."""
        if self._is_overridden('WIDGET_TYPES'):
            setting_value = self._explicit_settings['WIDGET_TYPES']
            if not isinstance(setting_value, dict):
                msg = "The 'WIDGET_TYPES' setting must be a dict."
                raise ImproperlyConfigured(msg)

        if self._is_overridden('REQUEST_TIMEOUT'):
            setting_value = self._explicit_settings['REQUEST_TIMEOUT']
            if setting_value is not None and (
                isinstance(setting_value, bool)
                or not isinstance(setting_value, numbers.Real)
                or setting_value <= 0
            ):
                msg = "The 'REQUEST_TIMEOUT' setting must be either a positive number or None."
                raise ImproperlyConfigured(msg)

        if self._is_overridden('MANAGEMENT_URL') and not self._explicit_settings['MANAGEMENT_URL']:
            msg = "The 'MANAGEMENT_URL' setting must not be empty."
            raise ImproperlyConfigured(msg)

    def _is_overridden(self: 'Self', setting: str) -> bool:
        """Check if the specified setting is overriden."""
        return setting in self._explicit_settings

    def __repr__(self: 'Self') -> str:
        """Return a system representation of the settings."""
        return f"<{self.__class__.__name__} '{self.settings_module_name}'>"


settings = LazySettings()
