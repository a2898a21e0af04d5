"""Rate histogram Pydantic models"""
from pydantic import BaseModel, Field, computed_field
from typing import List, Optional


class HistogramBucket(BaseModel):
    """One equal-width rate interval"""
    start: int
    end: int
    count: int
    height: float = Field(ge=0, le=100)

    @computed_field
    @property
    def label(self) -> str:
        plural = "" if self.count == 1 else "s"
        return f"${self.start}-${self.end}: {self.count} VA{plural}"


class RateHistogram(BaseModel):
    """Histogram over valid rates; no buckets when there were none"""
    buckets: List[HistogramBucket]
    min_value: int
    max_value: int


class RangePreset(BaseModel):
    """Quick range button"""
    label: str
    min: str
    max: str


class HistogramRequest(BaseModel):
    """Body of POST /api/rates/histogram"""
    rates: List[Optional[float]]
    min_rate: str = ""
    max_rate: str = ""


class HistogramBucketView(HistogramBucket):
    in_range: bool


class RangePresetView(RangePreset):
    active: bool


class HistogramResponse(BaseModel):
    """Histogram plus the current selection, ready to render"""
    buckets: List[HistogramBucketView]
    min_value: int
    max_value: int
    selected_min: float
    selected_max: float
    presets: List[RangePresetView]
