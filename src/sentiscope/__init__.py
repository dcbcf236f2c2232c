"""SentiScope - aspect-based sentiment dashboard for hotel reviews."""

__version__ = "0.1.0"
__author__ = "SentiScope Team"

from .core.models import *
from .core.config import settings
from .services.dataset import DatasetStore
from .services.hybrid import HybridAnalysisService

__all__ = [
    "settings",
    "DatasetStore",
    "HybridAnalysisService",
]
