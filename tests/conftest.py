from unittest.mock import Mock

import pytest
import requests


@pytest.fixture
def make_response():
    """Factory for mocked requests.Response objects."""
    def _make_response(payload=None, status_code=200):
        response = Mock(spec=requests.Response)
        response.status_code = status_code
        response.json.return_value = payload
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(f'{status_code} Error')
        return response
    return _make_response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)
