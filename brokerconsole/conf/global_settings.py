"""
Default brokerconsole settings. Override these using the module specified via
the BROKERCONSOLE_SETTINGS_MODULE environment variable.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

FRAGMENT_PATH = 'virtualhost/{type}/add.html'

HELPER_PATH = 'rest/helper'

LOGGING: dict[str, 'Any'] = {}

MANAGEMENT_URL = 'http://127.0.0.1:8080/'

REQUEST_TIMEOUT: float | None = 30.0

RESOURCES_DIR = ''

STORE_TYPE_CHOOSER_ID = 'addVirtualHost.specific.storeType'

STORE_TYPE_INPUT_ID = 'addStoreType'

STORE_TYPE_PLACEHOLDER_ID = 'addVirtualHost.specific.selectStoreType'

STORE_TYPES_ACTION = 'ListMessageStoreTypes'

TYPE_SPECIFIC_CONTAINER_ID = 'addVirtualHost.typeSpecificDiv'

TYPE_SPECIFIC_PREFIX = 'formAddVirtualHost.specific'

VIRTUALHOST_TYPE = 'standard'

WIDGET_TYPES = {
    'CheckBox': 'brokerconsole.widgets.CheckBox',
    'ContentPane': 'brokerconsole.widgets.ContentPane',
    'FilteringSelect': 'brokerconsole.widgets.FilteringSelect',
    'TextBox': 'brokerconsole.widgets.TextBox',
    'ValidationTextBox': 'brokerconsole.widgets.ValidationTextBox',
}
