import asyncio
import os

from brokerconsole.core.console import Console
from brokerconsole.core.dom import Document
from brokerconsole.virtualhost import TypeSpecificFormLoader

DIALOG = (
    '<form id="formAddVirtualHost">'
    '<input id="formAddVirtualHost.name" name="name">'
    '<div id="addVirtualHost.typeSpecificDiv"></div>'
    '</form>'
)


async def main():
    """Renders the type-specific part of the "add virtual host" form
    using the broker specified in the settings.
    """

    async with Console(Document.from_markup(DIALOG)) as console:
        loader = TypeSpecificFormLoader(console)
        chooser = await loader.show()

        print(console.document.outer_html)
        for item in chooser.get_options():
            print('Store type:', item['name'])


if __name__ == '__main__':
    os.environ.setdefault('BROKERCONSOLE_SETTINGS_MODULE', 'demos.add_virtualhost.settings')

    asyncio.run(main())
