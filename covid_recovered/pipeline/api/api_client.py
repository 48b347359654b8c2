import requests

from .exceptions import TransportError

DEFAULT_HEADERS = {
    'User-Agent': 'covid-recovered/1.0',
    'Accept': 'application/json'
}


def new_session() -> requests.Session:
    """Create a requests session with the default headers. No retry adapter is mounted."""
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    return session


class ApiClient():
    def __init__(self, url:str, session:requests.Session, timeout:float):
        """Simple HTTP client for GET-based APIs.

        Args:
            url (str): Base url of the api
            session (requests.Session): Session used for every request. Injected so tests can pass a mock.
            timeout (float): Timeout in seconds for a single request.
        """
        self.url = url.rstrip('/')
        self.session = session
        self.timeout = timeout

    def get_json(self, path:str, params:dict=None) -> dict | list:
        """
        Issue a single GET request and decode the body as JSON.

        Args:
            path (str): Path appended to the base url (ex. '/FranceGlobalDataByDate').
            params (dict, optional): Query string parameters. Defaults to None.

        Raises:
            TransportError: Connection failure, timeout, non-2xx status or invalid JSON.

        Returns:
            dict | list: Decoded JSON document.
        """
        url = f'{self.url}{path}'
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise TransportError(f'HTTP request failed for {url}: {e}') from e
        except ValueError as e:
            raise TransportError(f'Invalid JSON response from {url}: {e}') from e
