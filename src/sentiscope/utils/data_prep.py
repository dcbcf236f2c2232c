"""Data preparation for export."""

import datetime
import json
from dataclasses import asdict
from typing import Dict, Any, Optional

from ..core.constants import FileConstants
from ..services.dashboard import DashboardView


def prepare_export(view: DashboardView, include_rows: bool = False) -> Dict[str, Any]:
    """Prepare a dashboard view for JSON export."""

    export_data = {
        "filters": view.criteria.to_dict(),
        "summary": {
            "total_reviews": view.kpi.total_reviews,
            "positive_rate": view.kpi.positive_rate,
            "average_rating": view.kpi.avg_rating,
            "aspect_rows": view.total_rows,
            "filtered_rows": len(view.filtered),
        },
        "sentiments": view.sentiments,
        "aspects": [asdict(counts) for counts in view.aspect_counts],
        # None stays None so "no data" survives as JSON null
        "heatmap": [{"hotel": row.hotel, **row.scores} for row in view.heatmap],
        "trend": [asdict(point) for point in view.trend],
        "topics": [asdict(topic) for topic in view.topics],
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": FileConstants.EXPORT_VERSION,
        },
    }

    if include_rows:
        export_data["rows"] = [row.to_dict() for row in view.filtered]

    return export_data


def to_json(data: Dict[str, Any], timestamp: Optional[datetime.datetime] = None) -> str:
    """Stamp and serialize export data."""
    data["metadata"]["export_timestamp"] = (timestamp or datetime.datetime.now()).isoformat()
    return json.dumps(data, indent=2, ensure_ascii=False)


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(to_json(data))
