"""Configuration for the vesting calculation engine."""

from typing import List, Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings


class VestingEngineConfig(BaseSettings):
    """Configuration for the vesting calculation engine."""
    
    # Chain Settings
    seconds_per_block: int = Field(default=6, description="Block cadence of the reference chain")
    token_decimals: int = Field(default=10, ge=0, description="Decimals of the chain's native token")
    token_symbol: str = Field(default="DOT", description="Native token symbol")
    
    # Projection Settings
    min_projection_points: int = Field(default=10, ge=1, description="Minimum samples for a readable curve")
    max_projection_points: int = Field(default=100, ge=1, description="Upper bound on projection samples")
    
    # Display Settings
    display_precision: int = Field(default=4, ge=0, description="Decimal places for formatted amounts")
    
    # API Settings
    api_title: str = Field(default="Vesting Engine API", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    cors_origins: List[str] = Field(default=["*"], description="CORS allowed origins")
    
    # Logging Settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json|text)")
    log_file: Optional[str] = Field(default=None, description="Log file path")
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        env_prefix = "VESTING_"
        extra = "ignore"
    
    @validator('seconds_per_block')
    def validate_seconds_per_block(cls, v):
        """Block cadence must be positive."""
        if v <= 0:
            raise ValueError(f"seconds_per_block must be positive, got {v}")
        return v
    
    @validator('max_projection_points')
    def validate_point_bounds(cls, v, values):
        """Projection bounds must be ordered."""
        minimum = values.get('min_projection_points')
        if minimum is not None and minimum > v:
            raise ValueError(
                f"min_projection_points ({minimum}) exceeds max_projection_points ({v})"
            )
        return v
    
    @validator('log_format')
    def validate_log_format(cls, v):
        """Only json and text renderers exist."""
        if v.lower() not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {v}")
        return v.lower()
    
    @property
    def blocks_per_day(self) -> int:
        """Number of blocks produced in 24 hours."""
        return (24 * 60 * 60) // self.seconds_per_block
