class ApiError(Exception):
    """Base class for anything that goes wrong talking to the backend"""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class NetworkError(ApiError):
    """The request never got an HTTP response (refused, DNS, timeout...)"""


class HTTPError(ApiError):
    """The backend answered with a non-2xx status"""

    def __init__(self, status_code, reason='', body='', path=None):
        super().__init__(f'{status_code} {reason}: {body}'.strip(), path=path)
        self.status_code = status_code
        self.reason = reason
        self.body = body
