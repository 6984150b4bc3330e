"""
Configuration management for the Minecraft goal planner
"""

import os
from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class PlannerConfig(BaseSettings):
    """Configuration for the goal planner and its ADK oracles"""

    # Google AI API configuration
    google_ai_api_key: Optional[SecretStr] = Field(default=None, description="Google AI API key for Gemini models")

    # Google Cloud configuration (alternative to API key)
    google_cloud_project: Optional[str] = Field(default=None, description="Google Cloud project ID for Vertex AI")
    google_cloud_location: Optional[str] = Field(
        default="us-central1", description="Google Cloud location for Vertex AI"
    )

    # Oracle model configuration
    default_model: str = Field(default="gemini-2.0-flash", description="LLM model backing both oracles")
    agent_temperature: float = Field(default=0.2, description="Temperature for oracle responses (0.0-1.0)")
    max_output_tokens: int = Field(default=1024, description="Maximum tokens in an oracle response")

    # Search configuration
    search_mode: Literal["bfs", "dfs"] = Field(default="bfs", description="Default frontier traversal order")
    oracle_timeout_s: Optional[float] = Field(
        default=None, description="Per-call oracle timeout in seconds (None waits indefinitely)"
    )
    max_prompt_chars: int = Field(default=100000, description="Longest prompt an oracle will accept")
    progress_queue_size: int = Field(default=16, description="Snapshots buffered for streaming consumers")

    # Plan stream server configuration
    stream_host: str = Field(default="localhost", description="Plan stream WebSocket host")
    stream_port: int = Field(default=8766, description="Plan stream WebSocket port")

    # Logging configuration
    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_file: Optional[str] = Field(default=None, description="Log file path (None for timestamped name)")
    log_json_format: bool = Field(default=False, description="Use JSON format for console logs")
    google_log_level: str = Field(
        default="WARNING", description="Logging level for Google ADK and other Google libraries"
    )

    class Config:
        env_file = ".env"
        env_prefix = "MINECRAFT_PLANNER_"
        case_sensitive = False
        extra = "ignore"  # Ignore extra environment variables


def get_config() -> PlannerConfig:
    """Get the configuration instance"""
    return PlannerConfig()


def setup_google_ai_credentials(config: PlannerConfig) -> dict:
    """Setup Google AI credentials based on configuration

    Returns:
        Dictionary with credential configuration for ADK
    """
    credentials = {}

    if config.google_ai_api_key:
        os.environ["GOOGLE_API_KEY"] = config.google_ai_api_key.get_secret_value()
    elif config.google_cloud_project:
        credentials["vertexai"] = True
        credentials["project"] = config.google_cloud_project
        credentials["location"] = config.google_cloud_location
        os.environ["GOOGLE_GENAI_USE_VERTEXAI"] = "true"
        os.environ["GOOGLE_CLOUD_PROJECT"] = config.google_cloud_project
        os.environ["GOOGLE_CLOUD_LOCATION"] = config.google_cloud_location
    else:
        api_key = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ValueError(
                "No Google AI credentials found. Set MINECRAFT_PLANNER_GOOGLE_AI_API_KEY "
                "or GOOGLE_API_KEY environment variable, or configure Google Cloud credentials."
            )

    return credentials
