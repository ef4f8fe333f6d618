from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from quiz_trends.models import Granularity

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
TableFormat = Literal["csv", "parquet"]


class ColumnsConfig(BaseModel):
    quiz_date: str = "quiz_date"
    category: str = "category"
    correctness: str = "correctness"


class AggregationConfig(BaseModel):
    overall_granularity: Granularity = "day"
    category_granularity: Granularity = "week"


class BandsConfig(BaseModel):
    strong_above: float = Field(default=60.0, ge=0.0, le=100.0)
    moderate_from: float = Field(default=35.0, ge=0.0, le=100.0)

    @model_validator(mode="after")
    def _check_order(self) -> BandsConfig:
        if self.moderate_from > self.strong_above:
            raise ValueError("bands.moderate_from must not exceed bands.strong_above")
        return self


class LoggingConfig(BaseModel):
    level: LogLevel = "INFO"


class OutputsConfig(BaseModel):
    tables_format: TableFormat = "csv"
    figures_format: str = "png"


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    columns: ColumnsConfig = Field(default_factory=ColumnsConfig)
    aggregation: AggregationConfig = Field(default_factory=AggregationConfig)
    bands: BandsConfig = Field(default_factory=BandsConfig)
    outputs: OutputsConfig = Field(default_factory=OutputsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def load_config(path: Path) -> AppConfig:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    return AppConfig.model_validate(data)
