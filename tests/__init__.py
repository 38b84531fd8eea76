import os

os.environ.setdefault('BROKERCONSOLE_SETTINGS_MODULE', 'tests.settings')
