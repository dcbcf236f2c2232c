"""Convert uploaded tabular data into canonical long-format aspect rows."""

import io
import logging
import uuid
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Sequence, Union

import pandas as pd

from .constants import AspectConstants
from .models import AspectRow

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]
CSVSource = Union[str, Path, bytes, io.IOBase, Any]


class CSVParseError(ValueError):
    """Raised when uploaded data cannot be parsed as CSV."""


def new_review_id() -> str:
    """Default review id generator."""
    return str(uuid.uuid4())


def _as_record(raw: Union[AspectRow, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(raw, AspectRow):
        return raw.to_dict()
    return raw or {}


def _filled(value: Any) -> bool:
    return value is not None and str(value).strip() != ""


def is_long_format(records: Sequence[Dict[str, Any]]) -> bool:
    """Long format iff the first record carries both an aspect and a sentiment."""
    if not records:
        return False
    first = _as_record(records[0])
    return _filled(first.get("aspect")) and _filled(first.get("sentiment"))


def long_rows(records: Iterable[Dict[str, Any]]) -> List[AspectRow]:
    """Coerce already-long records into aspect rows, skipping invalid ones."""
    rows = []
    for i, raw in enumerate(records):
        try:
            rows.append(AspectRow.from_record(_as_record(raw)))
        except ValueError as e:
            logger.warning(f"Skipping long-format record {i}: {e}")
    return rows


def wide_to_long(
    records: Iterable[Dict[str, Any]],
    aspects: Sequence[str] = AspectConstants.ASPECTS,
    id_factory: IdFactory = new_review_id,
) -> List[AspectRow]:
    """Expand one-row-per-review records into one row per scored aspect."""
    rows = []
    for i, raw in enumerate(records):
        record = _as_record(raw)
        review_id = record.get("review_id") if _filled(record.get("review_id")) else None
        for aspect in aspects:
            label = record.get(AspectConstants.WIDE_SENTIMENT_COLUMN.format(aspect=aspect))
            if not _filled(label):
                continue
            if review_id is None:
                # one id per record keeps its aspects grouped
                review_id = id_factory()
            try:
                rows.append(AspectRow(
                    review_id=review_id,
                    hotel_id=record.get("hotel_id", ""),
                    hotel_name=record.get("hotel_name", ""),
                    language=record.get("language", ""),
                    review_date=record.get("review_date", ""),
                    rating=record.get("rating", 0),
                    aspect=aspect,
                    sentiment=label,
                    confidence=record.get(AspectConstants.WIDE_CONFIDENCE_COLUMN.format(aspect=aspect), 0),
                    review_text=record.get("review_text", ""),
                ))
            except ValueError as e:
                logger.warning(f"Skipping {aspect} of wide-format record {i}: {e}")
    return rows


def normalize(
    raw_rows: Sequence[Union[AspectRow, Dict[str, Any]]],
    aspects: Sequence[str] = AspectConstants.ASPECTS,
    id_factory: IdFactory = new_review_id,
) -> List[AspectRow]:
    """Detect the input shape and return canonical aspect rows.

    An empty list is a normal outcome (nothing usable in the input) and is
    left to the caller to report.
    """
    raw_rows = list(raw_rows or [])
    if not raw_rows:
        return []
    if is_long_format(raw_rows):
        return long_rows(raw_rows)
    return wide_to_long(raw_rows, aspects=aspects, id_factory=id_factory)


def read_csv_records(source: CSVSource) -> List[Dict[str, str]]:
    """Parse a CSV with a header row into string-valued records.

    Blank cells become empty strings; a completely empty file yields no
    records. Malformed input raises ``CSVParseError``.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, UnicodeDecodeError, ValueError) as e:
        raise CSVParseError(f"Failed to parse CSV: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    return df.to_dict(orient="records")


def load_csv(
    source: CSVSource,
    aspects: Sequence[str] = AspectConstants.ASPECTS,
    id_factory: IdFactory = new_review_id,
) -> List[AspectRow]:
    """Read and normalize a long- or wide-format CSV."""
    return normalize(read_csv_records(source), aspects=aspects, id_factory=id_factory)


def to_long_frame(rows: Iterable[AspectRow]) -> pd.DataFrame:
    """Tabulate aspect rows in long-format column order."""
    return pd.DataFrame(
        [row.to_dict() for row in rows],
        columns=list(AspectConstants.LONG_COLUMNS),
    )
