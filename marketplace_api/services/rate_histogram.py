"""
Hourly rate histogram and min/max range selection.

compute_histogram() is pure; RateRangeSelector holds the selected range
strings and reports every change through its on_range_change callback.
"""
import math
from typing import Callable, Iterable, List, Optional, Tuple

from marketplace_api.models.rates import HistogramBucket, RangePreset, RateHistogram

NUM_BUCKETS = 10
EMPTY_MIN = 0
EMPTY_MAX = 100

PRESETS: List[RangePreset] = [
    RangePreset(label="Any", min="", max=""),
    RangePreset(label="$5-15", min="5", max="15"),
    RangePreset(label="$15-25", min="15", max="25"),
    RangePreset(label="$25+", min="25", max=""),
]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_histogram(rates: Iterable[Optional[float]]) -> RateHistogram:
    """
    Bucket positive rates into NUM_BUCKETS equal-width buckets.

    Zero, negative, non-finite and missing rates are ignored. With nothing
    left the result has no buckets and default bounds of 0..100.
    """
    valid = [
        rate for rate in rates
        if rate is not None and math.isfinite(rate) and rate > 0
    ]
    if not valid:
        return RateHistogram(buckets=[], min_value=EMPTY_MIN, max_value=EMPTY_MAX)

    min_value = math.floor(min(valid))
    max_value = math.ceil(max(valid))
    bucket_size = (max_value - min_value or 1) / NUM_BUCKETS

    counts = [0] * NUM_BUCKETS
    for rate in valid:
        # The top value lands exactly on the upper edge
        index = min(math.floor((rate - min_value) / bucket_size), NUM_BUCKETS - 1)
        counts[index] += 1

    max_count = max(max(counts), 1)
    buckets = [
        HistogramBucket(
            start=_round_half_up(min_value + i * bucket_size),
            end=_round_half_up(min_value + (i + 1) * bucket_size),
            count=count,
            height=count / max_count * 100,
        )
        for i, count in enumerate(counts)
    ]
    return RateHistogram(buckets=buckets, min_value=min_value, max_value=max_value)


def _parse_rate(text: Optional[str], default: float) -> float:
    if text is None or not text.strip():
        return default
    try:
        value = float(text)
    except ValueError:
        return default
    return value if math.isfinite(value) else default


def parse_selected_range(
    min_rate: Optional[str],
    max_rate: Optional[str],
    histogram: RateHistogram,
) -> Tuple[float, float]:
    """Selected bounds, falling back to the histogram's own bounds"""
    return (
        _parse_rate(min_rate, histogram.min_value),
        _parse_rate(max_rate, histogram.max_value),
    )


def bucket_in_range(bucket: HistogramBucket, selected_min: float, selected_max: float) -> bool:
    """Whether the bucket lies fully inside the selection (highlighting only)"""
    return bucket.start >= selected_min and bucket.end <= selected_max


def get_preset(label: str) -> RangePreset:
    for preset in PRESETS:
        if preset.label == label:
            return preset
    raise KeyError(label)


class RateRangeSelector:
    """
    Selected min/max rate filter.

    Values are kept as the raw strings typed by the user; "" means unset.
    """

    def __init__(
        self,
        on_range_change: Callable[[str, str], None],
        min_rate: str = "",
        max_rate: str = "",
    ):
        self.on_range_change = on_range_change
        self.min_rate = min_rate
        self.max_rate = max_rate

    def _change(self, min_rate: str, max_rate: str) -> None:
        self.min_rate = min_rate
        self.max_rate = max_rate
        self.on_range_change(min_rate, max_rate)

    def set_min(self, text: str) -> None:
        self._change(text, self.max_rate)

    def set_max(self, text: str) -> None:
        self._change(self.min_rate, text)

    def select_preset(self, label: str) -> None:
        preset = get_preset(label)
        self._change(preset.min, preset.max)

    def is_preset_active(self, preset: RangePreset) -> bool:
        return self.min_rate == preset.min and self.max_rate == preset.max

    def selected_range(self, histogram: RateHistogram) -> Tuple[float, float]:
        return parse_selected_range(self.min_rate, self.max_rate, histogram)
