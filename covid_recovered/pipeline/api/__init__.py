from .api_client import ApiClient
from .api_reader import ApiReader
from .exceptions import FetchError, MalformedResponseError, NoDataError, TransportError
