"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field


class ReportConfig(BaseModel):
    model_config = {"extra": "forbid"}

    month: int = Field(default=8, ge=1, le=12)
    hot_threshold_c: float = Field(default=33.0, allow_inf_nan=False)


class LoaderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    skip_malformed: bool = False


class AnalyzerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    report: ReportConfig = ReportConfig()
    loader: LoaderConfig = LoaderConfig()
