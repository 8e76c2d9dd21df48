import logging

import requests

from bloodportal.errors import ApiError, HTTPError, NetworkError

logger = logging.getLogger(__name__)

# Endpoints of the external backend (persistence, matching, notifications)
REQUESTS_PATH = '/api/requests'
DONORS_PATH = '/api/donors'
HOSPITALS_PATH = '/api/hospitals'
CONTACT_PATH = '/api/contact'


class BackendClient:
    """Thin JSON wrapper around the backend's REST endpoints"""

    def __init__(self, base_url, timeout=None, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Content-Type': 'application/json'})

    @classmethod
    def from_config(cls, config):
        return cls(config['BACKEND_URL'], timeout=config.get('BACKEND_TIMEOUT'))

    def api_fetch(self, path, method='GET', payload=None):
        """Send one request and return the decoded JSON body (None when empty).

        Raises NetworkError when no response arrives, HTTPError on a non-2xx
        status (with the body text kept for diagnostics) and ApiError when the
        body is not JSON. Every failure is logged here before it is raised.
        """
        url = f'{self.base_url}{path}'
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error('API fetch error %s %s: %s', method, path, e)
            raise NetworkError(str(e), path=path) from e

        if not response.ok:
            error = HTTPError(response.status_code, response.reason or '', response.text, path=path)
            logger.error('API fetch error %s %s: %s', method, path, error)
            raise error

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error('API fetch error %s %s: invalid JSON body', method, path)
            raise ApiError(f'Invalid JSON body from {path}', path=path) from e

    def fetch_requests(self):
        """GET the active requests as a list of dicts. A null body counts as no requests."""
        data = self.api_fetch(REQUESTS_PATH)
        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
            logger.error('API fetch error GET %s: expected a JSON array of objects', REQUESTS_PATH)
            raise ApiError(f'Expected a JSON array of requests from {REQUESTS_PATH}', path=REQUESTS_PATH)
        return data

    def create_request(self, blood_request):
        return self.api_fetch(REQUESTS_PATH, method='POST', payload=blood_request.to_dict())

    def register_donor(self, donor):
        return self.api_fetch(DONORS_PATH, method='POST', payload=donor.to_dict())

    def fetch_hospitals(self):
        # Optional on the backend; the portal serves its static directory instead
        return self.api_fetch(HOSPITALS_PATH)

    def send_contact(self, message):
        return self.api_fetch(CONTACT_PATH, method='POST', payload=message.to_dict())
