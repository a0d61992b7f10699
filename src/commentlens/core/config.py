"""Configuration management for CommentLens."""

from dataclasses import dataclass
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""
    
    # YouTube Data API
    youtube_api_key: str = Field("", description="YouTube Data API v3 key")
    
    # Prediction service
    prediction_base_url: str = Field("http://localhost:5000", description="Base URL of the sentiment service")
    prediction_endpoint: str = Field("/predict", description="Path of the prediction endpoint")
    include_timestamps: bool = Field(False, description="Send full comment objects instead of bare texts")
    
    # Visualization service
    visualization_base_url: str = Field("", description="Base URL of the rendering service (defaults to prediction_base_url)")
    wait_for_visualizations: bool = Field(True, description="Wait for all three renderings before returning")
    
    # Pipeline
    comment_cap: int = Field(500, ge=1, le=10000, description="Maximum number of comments to fetch")
    strict_sentiment_bucketing: bool = Field(True, description="Only tally -1/0/1 sentiment values")
    top_comments: int = Field(25, ge=0, description="Number of comments listed in the report")
    
    # HTTP
    request_timeout: Optional[float] = Field(None, description="Per-request timeout in seconds (None waits forever)")
    request_attempts: int = Field(1, ge=1, description="Attempts per HTTP call (1 = no retry)")
    
    # Logging
    log_level: str = Field("INFO", description="Logging level")
    
    @property
    def effective_visualization_url(self) -> str:
        """Rendering endpoints live on the prediction server unless overridden."""
        return self.visualization_base_url or self.prediction_base_url
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@dataclass
class PipelineOptions:
    """Per-run switches for the analysis pipeline."""
    comment_cap: int = 500
    prediction_endpoint: str = "/predict"
    strict_sentiment_bucketing: bool = True
    include_timestamps: bool = False
    wait_for_visualizations: bool = True
    top_comments: int = 25
    
    @classmethod
    def from_settings(cls, source: Settings) -> "PipelineOptions":
        return cls(
            comment_cap=source.comment_cap,
            prediction_endpoint=source.prediction_endpoint,
            strict_sentiment_bucketing=source.strict_sentiment_bucketing,
            include_timestamps=source.include_timestamps,
            wait_for_visualizations=source.wait_for_visualizations,
            top_comments=source.top_comments,
        )


# Global settings instance
settings = Settings()
