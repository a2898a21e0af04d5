"""Hourly rate histogram endpoints"""
from fastapi import APIRouter, HTTPException
from typing import List, Optional
import logging

from marketplace_api.database import get_supabase_admin
from marketplace_api.models.rates import (
    HistogramBucketView,
    HistogramRequest,
    HistogramResponse,
    RangePresetView,
)
from marketplace_api.services.rate_histogram import (
    PRESETS,
    RateRangeSelector,
    bucket_in_range,
    compute_histogram,
)
from marketplace_api.utils.retry import retry_supabase_query

logger = logging.getLogger(__name__)
router = APIRouter()


def build_histogram_response(
    rates: List[Optional[float]],
    min_rate: str = "",
    max_rate: str = "",
) -> HistogramResponse:
    """Compute the histogram and mark buckets/presets matching the selection"""
    histogram = compute_histogram(rates)
    selector = RateRangeSelector(lambda _min, _max: None, min_rate, max_rate)
    selected_min, selected_max = selector.selected_range(histogram)

    return HistogramResponse(
        buckets=[
            HistogramBucketView(
                **bucket.model_dump(exclude={"label"}),
                in_range=bucket_in_range(bucket, selected_min, selected_max),
            )
            for bucket in histogram.buckets
        ],
        min_value=histogram.min_value,
        max_value=histogram.max_value,
        selected_min=selected_min,
        selected_max=selected_max,
        presets=[
            RangePresetView(**preset.model_dump(), active=selector.is_preset_active(preset))
            for preset in PRESETS
        ],
    )


def fetch_active_rates() -> List[Optional[float]]:
    """Hourly rates of active VA profiles"""
    result = retry_supabase_query(
        lambda: get_supabase_admin().table("vas").select("hourly_rate").eq(
            "is_active", True
        ).execute()
    )
    return [row.get("hourly_rate") for row in result.data or []]


@router.post("/histogram", response_model=HistogramResponse)
async def histogram_from_rates(body: HistogramRequest):
    """Histogram over caller-supplied rates"""
    return build_histogram_response(body.rates, body.min_rate, body.max_rate)


@router.get("/histogram", response_model=HistogramResponse)
async def histogram_for_active_vas(min_rate: str = "", max_rate: str = ""):
    """Histogram over the rates of all active VAs"""
    try:
        rates = fetch_active_rates()
    except Exception as e:
        logger.error(f"Failed to load VA rates: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return build_histogram_response(rates, min_rate, max_rate)
