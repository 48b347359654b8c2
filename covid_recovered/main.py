import sys

from covid_recovered.pipeline.api.api_client import new_session
from covid_recovered.pipeline.api.api_reader import ApiReader
from covid_recovered.pipeline.pipeline import Pipeline
from covid_recovered.pipeline.pipeline_config import PipelineConfig
from covid_recovered.utils.logging_utils import setup_logging


def main() -> int:
    """Run the recovered patients pipeline once. Returns the process exit status."""
    setup_logging()

    config = PipelineConfig()

    with new_session() as session:
        covid_pipeline = Pipeline(
            config=config,
            api_reader=ApiReader(
                url=config.api_url,
                session=session,
                timeout=config.timeout
                )
        )
        new_recovered = covid_pipeline.run()

    return 0 if new_recovered is not None else 1


if __name__ == '__main__':
    sys.exit(main())
