"""The module contains the source serving fragments from a local
resources directory, the way the broker serves them over HTTP.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import aiofiles

from brokerconsole.conf import settings
from brokerconsole.core.exceptions import FragmentNotFound

if TYPE_CHECKING:
    from os import PathLike

    from typing_extensions import Self

LOGGER = logging.getLogger(__name__)

PACKAGE_RESOURCES_DIR = Path(__file__).resolve().parent.parent / 'resources'


class ResourceFragmentSource:
    """The class implements a fragment source reading the fragments from
    the RESOURCES_DIR directory or, when the setting is empty, from
    the resources shipped with the package.
    """

    def __init__(self: 'Self', resources_dir: 'str | PathLike[str] | None' = None) -> None:
        """Initialize a resource fragment source object."""
        resources_dir = resources_dir or settings.RESOURCES_DIR or PACKAGE_RESOURCES_DIR
        self.resources_dir = Path(resources_dir).resolve()

    def __repr__(self: 'Self') -> str:
        return f"<{self.__class__.__name__} '{self.resources_dir}'>"

    def resolve(self: 'Self', path: str) -> Path:
        """Return the location of the fragment with the specified path."""
        location = (self.resources_dir / path.lstrip('/')).resolve()
        if not location.is_relative_to(self.resources_dir) or not location.is_file():
            msg = f'unknown file: {path}'
            raise FragmentNotFound(msg)

        return location

    async def get_fragment(self: 'Self', path: str) -> str:
        """Return the markup of the fragment located at the specified path."""
        location = self.resolve(path)
        LOGGER.debug('Reading the fragment %s', location)
        async with aiofiles.open(location, encoding='utf-8') as infile:
            return await infile.read()
