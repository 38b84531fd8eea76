MANAGEMENT_URL = 'http://127.0.0.1:8080/'

REQUEST_TIMEOUT = 10.0
