"""Configuration management for SentiScope."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Hybrid ensemble
    hybrid_latency_seconds: float = Field(0.8, description="Simulated latency of a hybrid analysis pass")
    change_threshold: float = Field(0.05, description="Confidence delta that counts a row as changed")

    # Keyword extraction
    keyword_top_k: int = Field(6, description="Explainable keywords shown per review")
    topic_keywords_per_review: int = Field(12, description="Keywords taken from each review for the topic sketch")
    topic_chart_size: int = Field(12, description="Keywords plotted in the topic chart")
    topic_cloud_size: int = Field(30, description="Keywords listed in the topic cloud")
    draft_preview_k: int = Field(10, description="Keywords previewed while typing a review")

    # Manual entry and display
    manual_review_confidence: float = Field(0.8, description="Confidence assigned to manually entered aspects")
    review_list_limit: int = Field(250, description="Maximum reviews listed in the analysis view")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
