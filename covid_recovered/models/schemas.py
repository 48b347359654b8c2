from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class PerSourceRecordSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source_type: Optional[str] = Field(default=None, alias='sourceType')
    # strict: "42" and true are not counts
    recovered: Optional[StrictInt] = Field(default=None, alias='gueris')


class GlobalDataByDateSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    records: list[Any] = Field(alias='FranceGlobalDataByDate')
