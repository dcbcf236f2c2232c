"""Data models for SentiScope."""

import math
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any

from .constants import AspectConstants, UIConstants


def _to_float(value: Any, default: float = 0.0) -> float:
    """Coerce a CSV cell or form value to float."""
    if value is None:
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(result):  # NaN, inf
        return default
    return result


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def normalize_sentiment(value: Any) -> str:
    """Lowercase a sentiment label and check it against the known labels."""
    label = _to_str(value).strip().lower()
    if label not in AspectConstants.SENTIMENTS:
        raise ValueError(f"Unknown sentiment: {value!r}")
    return label


@dataclass
class AspectRow:
    """One (review, aspect) sentiment judgment."""
    review_id: str
    hotel_id: str
    hotel_name: str
    language: str
    review_date: str
    rating: float
    aspect: str
    sentiment: str
    confidence: float
    review_text: str

    def __post_init__(self):
        for name in ("review_id", "hotel_id", "hotel_name", "language", "review_date", "aspect", "review_text"):
            setattr(self, name, _to_str(getattr(self, name)))
        rating = _to_float(self.rating)
        # out-of-range ratings count as unrated
        self.rating = rating if 0 <= rating <= UIConstants.MAX_RATING else 0.0
        self.sentiment = normalize_sentiment(self.sentiment)
        self.confidence = max(0.0, min(1.0, _to_float(self.confidence)))

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "AspectRow":
        """Build a row from a long-format record, defaulting missing fields."""
        return cls(
            review_id=record.get("review_id", ""),
            hotel_id=record.get("hotel_id", ""),
            hotel_name=record.get("hotel_name", ""),
            language=record.get("language", ""),
            review_date=record.get("review_date", ""),
            rating=record.get("rating", 0),
            aspect=record.get("aspect", ""),
            sentiment=record.get("sentiment", ""),
            confidence=record.get("confidence", 0),
            review_text=record.get("review_text", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class FilterCriteria:
    """Conjunctive filter selections; ``"all"`` disables a criterion."""
    hotel: str = UIConstants.ALL
    sentiment: str = UIConstants.ALL
    language: str = UIConstants.ALL
    aspect: str = UIConstants.ALL
    query: str = ""

    def is_noop(self) -> bool:
        return (
            self.hotel == UIConstants.ALL
            and self.sentiment == UIConstants.ALL
            and self.language == UIConstants.ALL
            and self.aspect == UIConstants.ALL
            and not self.query
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class KPISummary:
    """Headline numbers of the dashboard."""
    total_reviews: int
    positive_rate: int  # whole percent
    avg_rating: float  # one decimal


@dataclass
class AspectCounts:
    """Sentiment counts for a single aspect."""
    aspect: str
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative


@dataclass
class HeatmapRow:
    """Net sentiment per aspect for one hotel; ``None`` means no data."""
    hotel: str
    scores: Dict[str, Optional[float]]


@dataclass
class TrendPoint:
    """Net sentiment for one review date."""
    date: str
    score: float


@dataclass
class KeywordCount:
    """Keyword with the number of reviews it was a top keyword of."""
    word: str
    count: int


@dataclass
class ScoreResult:
    """Output of the heuristic ensemble for one row."""
    sentiment: str
    confidence: float


@dataclass
class ManualReview:
    """A review typed into the entry form."""
    hotel_name: str
    rating: int
    language: str
    review_text: str
    aspects: Dict[str, str] = field(default_factory=dict)  # aspect -> sentiment or ""
    user: str = ""

    def __post_init__(self):
        rating = _to_float(self.rating)
        if rating != int(rating):
            raise ValueError(f"Rating must be a whole number, got {self.rating!r}")
        rating = int(rating)
        if not UIConstants.MIN_RATING <= rating <= UIConstants.MAX_RATING:
            raise ValueError(f"Rating must be between {UIConstants.MIN_RATING} and {UIConstants.MAX_RATING}, got {self.rating!r}")
        self.rating = rating
        self.aspects = {
            aspect: normalize_sentiment(label)
            for aspect, label in (self.aspects or {}).items()
            if label
        }


@dataclass
class UploadResult:
    """Outcome of loading a CSV into the dataset."""
    status: str  # "loaded", "empty" or "parse_error"
    message: str
    rows_loaded: int = 0

    @property
    def ok(self) -> bool:
        return self.status == "loaded"


@dataclass
class HybridRunResult:
    """Summary reported when a hybrid ensemble pass completes."""
    rows_scored: int
    rows_changed: int

    @property
    def message(self) -> str:
        return f"Hybrid ensemble updated {self.rows_changed} aspect-rows."
