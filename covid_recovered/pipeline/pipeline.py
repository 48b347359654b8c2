from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from datetime import date
import logging

from covid_recovered.pipeline.pipeline_config import PipelineConfig
from covid_recovered.pipeline.api.api_reader import ApiReader
from covid_recovered.utils.date_utils import get_previous_days


class Pipeline():
    def __init__(self, config: PipelineConfig, api_reader: ApiReader):
        """Recovered patients pipeline: two dated reads joined into a day-over-day delta.

        Args:
            config (PipelineConfig): Source identifier and API settings.
            api_reader (ApiReader): Reader used for both dates.
        """
        self.config = config
        self.api_reader = api_reader

    def run(self, reference_date: date | str = None) -> int | None:
        """
        Read the recovered counts of yesterday and the day before concurrently and compute the difference.

        Returns as soon as one read fails; the other read is left to finish in the background.

        Args:
            reference_date (date | str, optional): Date taken as "today". Defaults to the local system date.

        Returns:
            int | None: Newly recovered patients, or None if either read failed.
        """
        yesterday, day_before = get_previous_days(reference_date)
        source = self.config.source

        logging.info('Fetching data between yesterday and the day before...')
        executor = ThreadPoolExecutor(max_workers=2)
        try:
            futures = [
                executor.submit(self.api_reader.read, yesterday, source),
                executor.submit(self.api_reader.read, day_before, source)
            ]
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)

            # yesterday's error wins when both have already failed
            errors = [f.exception() for f in futures if f in done and f.exception() is not None]
            if errors:
                logging.error(f'Problem while fetching the data: {errors[0]}')
                return None

            recovered_yesterday, recovered_day_before = [f.result() for f in futures]
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        new_recovered = recovered_yesterday - recovered_day_before
        logging.info(f'Newly recovered patients between {day_before} and {yesterday}: {new_recovered}')
        return new_recovered
