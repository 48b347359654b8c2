API_URL = 'http://coronavirusapi-france.now.sh'
SOURCE = 'ministere-sante'
TIMEOUT = 30


class PipelineConfig():
    def __init__(self, api_url: str = API_URL, source: str = SOURCE, timeout: float = TIMEOUT):
        """Pipeline configuration object. Parameters for the Pipeline Class components.

        Args:
            api_url (str): Base URL of the COVID-19 statistics API.
            source (str): Source identifier of the records to read (sourceType).
            timeout (float): Timeout in seconds applied to every API request.
        """
        self.api_url = api_url
        self.source = source
        self.timeout = timeout
