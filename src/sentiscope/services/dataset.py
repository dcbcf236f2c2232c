"""In-memory aspect-row collection shared by the dashboard."""

import logging
import threading
from datetime import date
from typing import Callable, Iterable, List, Optional, Sequence

from ..core.config import settings
from ..core.constants import AspectConstants, MockDataConstants, UIConstants
from ..core.models import AspectRow, ManualReview, UploadResult
from ..core.normalize import CSVParseError, CSVSource, IdFactory, load_csv, long_rows, new_review_id

logger = logging.getLogger(__name__)


def seed_rows() -> List[AspectRow]:
    """The demo dataset shown before any upload."""
    return long_rows(MockDataConstants.SEED_ROWS)


def build_manual_rows(
    review: ManualReview,
    id_factory: IdFactory = new_review_id,
    today: Optional[date] = None,
    confidence: Optional[float] = None,
) -> List[AspectRow]:
    """One row per aspect the reviewer picked a sentiment for, all sharing one id."""
    if not review.aspects:
        return []
    review_id = id_factory()
    review_date = (today or date.today()).isoformat()
    confidence = settings.manual_review_confidence if confidence is None else confidence
    return [
        AspectRow(
            review_id=review_id,
            hotel_id="",
            hotel_name=review.hotel_name,
            language=review.language,
            review_date=review_date,
            rating=review.rating,
            aspect=aspect,
            sentiment=sentiment,
            confidence=confidence,
            review_text=review.review_text,
        )
        for aspect, sentiment in review.aspects.items()
    ]


class DatasetStore:
    """Single-writer holder of the current row collection.

    Readers take a snapshot; writers (upload, manual add, hybrid pass)
    replace or extend the collection under a lock.
    """

    def __init__(
        self,
        rows: Optional[Iterable[AspectRow]] = None,
        aspects: Sequence[str] = AspectConstants.ASPECTS,
        id_factory: IdFactory = new_review_id,
        clock: Callable[[], date] = date.today,
    ):
        self._rows: List[AspectRow] = seed_rows() if rows is None else list(rows)
        self.aspects = tuple(aspects)
        self.id_factory = id_factory
        self.clock = clock
        self.status = UIConstants.INITIAL_STATUS
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._rows)

    def snapshot(self) -> List[AspectRow]:
        """Consistent copy of the collection at call time."""
        with self._lock:
            return list(self._rows)

    def replace(self, rows: Iterable[AspectRow]) -> None:
        rows = list(rows)
        with self._lock:
            self._rows = rows

    def load_csv(self, source: CSVSource, name: str = "upload.csv") -> UploadResult:
        """Replace the collection with an uploaded CSV.

        Parse failures and empty results leave the collection unchanged.
        """
        try:
            rows = load_csv(source, aspects=self.aspects, id_factory=self.id_factory)
        except CSVParseError as e:
            logger.warning(f"CSV upload {name} rejected: {e}")
            result = UploadResult(status="parse_error", message="Failed to parse CSV")
        else:
            if not rows:
                logger.warning(f"CSV upload {name} produced no aspect rows")
                result = UploadResult(status="empty", message="Failed to read rows from CSV")
            else:
                self.replace(rows)
                logger.info(f"Loaded {len(rows)} aspect-rows from {name}")
                result = UploadResult(
                    status="loaded",
                    message=f"Loaded {len(rows)} aspect-rows from {name}",
                    rows_loaded=len(rows),
                )
        self.status = result.message
        return result

    def add_review(self, review: ManualReview) -> List[AspectRow]:
        """Prepend the rows of a manually entered review."""
        rows = build_manual_rows(review, id_factory=self.id_factory, today=self.clock())
        if rows:
            with self._lock:
                self._rows = rows + self._rows
            logger.info(f"Added review {rows[0].review_id} for '{review.hotel_name}' with {len(rows)} aspects")
        return rows
