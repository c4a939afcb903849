"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fauxledger.domain.workflow import WorkflowTableName


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="FAUXLEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Dataset
    seed: int = Field(default=42, description="Seed for deterministic document generation")
    dataset_size: int = Field(default=500, ge=0, description="Number of seeded documents")

    # Simulated transport
    latency_ms: float = Field(default=0, ge=0, description="Base latency per operation")
    fail_rate: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Probability of a simulated failure"
    )

    # Workflow
    workflow_table: WorkflowTableName = Field(
        default="branching",
        description="Transition table: branching (INIT..PAID with side exits) or linear",
    )
    approver_user_id: str = Field(default="user-finance-01", description="Default approver id")
    approver_name: str = Field(default="Finance Team", description="Default approver name")

    # Queries
    default_page_limit: int = Field(default=25, ge=1, le=100, description="Default page size")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")
    cors_origins: str = Field(
        default="http://localhost:3000", description="Comma-separated allowed origins"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
