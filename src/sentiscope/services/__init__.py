"""Services for SentiScope."""

from .dataset import DatasetStore
from .hybrid import HybridAnalysisService, AnalysisInProgressError
from .dashboard import DashboardView, build_dashboard

__all__ = [
    "DatasetStore",
    "HybridAnalysisService",
    "AnalysisInProgressError",
    "DashboardView",
    "build_dashboard",
]
