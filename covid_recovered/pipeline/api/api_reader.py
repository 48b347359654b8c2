from datetime import date
import json
import logging

from pydantic import ValidationError

from covid_recovered.models.schemas import GlobalDataByDateSchema, PerSourceRecordSchema
from covid_recovered.utils.date_utils import format_date_param
from .api_client import ApiClient
from .exceptions import MalformedResponseError, NoDataError

GLOBAL_DATA_BY_DATE_PATH = '/FranceGlobalDataByDate'
GLOBAL_DATA_BY_DATE_KEY = 'FranceGlobalDataByDate'


class ApiReader(ApiClient):
    def __init__(self, url:str, session, timeout:float):
        """Reader class to extract recovered counts from the API. Inherits from ApiClient parent class.

        Args:
            url (str): Base URL of the API.
            session (requests.Session): HTTP session shared by the reads.
            timeout (float): Timeout in seconds for a single request.
        """
        ApiClient.__init__(self, url, session, timeout)

    def read(self, date: date, source: str) -> int:
        """
        Reads the cumulative recovered count reported by one source on one date.

        Args:
            date (date): Date of the report, sent as 'YYYY-MM-DD'.
            source (str): sourceType of the record to select.

        Raises:
            TransportError: The request itself failed.
            MalformedResponseError: The body has no FranceGlobalDataByDate list, or the matched record is invalid.
            NoDataError: No record for the source, or its recovered count is missing.

        Returns:
            int: Recovered count ('gueris' field) of the first matching record.
        """
        logging.info(f'Fetching recovered count for {date} on source {source}...')
        json_data = self.get_json(
            GLOBAL_DATA_BY_DATE_PATH,
            params={'date': format_date_param(date)}
        )
        logging.info(f'Data received: {json.dumps(json_data, indent=2, ensure_ascii=False)}')

        record = find_source_record(json_data, source)
        if record is None or record.recovered is None:
            raise NoDataError(f'No data for date {date} on source {source}')

        logging.info(f'Recovered count for {date} on source {source}: {record.recovered}')
        return record.recovered


def find_source_record(json_data: dict | list, source: str) -> PerSourceRecordSchema | None:
    """
    Scan the FranceGlobalDataByDate list in order and return the first record of the source.

    Args:
        json_data (dict | list): Decoded response body.
        source (str): sourceType to match exactly.

    Raises:
        MalformedResponseError: The body is not an object holding a FranceGlobalDataByDate list,
            or the matching record does not validate.

    Returns:
        PerSourceRecordSchema | None: The matching record, None if no record matches.
    """
    if not isinstance(json_data, dict) or GLOBAL_DATA_BY_DATE_KEY not in json_data:
        raise MalformedResponseError(f'Response has no {GLOBAL_DATA_BY_DATE_KEY} field')
    try:
        global_data = GlobalDataByDateSchema.model_validate(json_data)
    except ValidationError as e:
        raise MalformedResponseError(f'{GLOBAL_DATA_BY_DATE_KEY} is not a list: {e}') from e

    for row in global_data.records:
        if isinstance(row, dict) and row.get('sourceType') == source:
            try:
                return PerSourceRecordSchema.model_validate(row)
            except ValidationError as e:
                raise MalformedResponseError(f'Invalid record for source {source}: {e}') from e
    return None
