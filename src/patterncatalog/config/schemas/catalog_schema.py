"""Configuration for the pattern demonstrations themselves."""

from pydantic import BaseModel, Field, field_validator


class TaxConfig(BaseModel):
    """Tax rates applied by the tax visitor, as fractions of the price."""

    liquor: float = Field(0.18, description="Tax rate for liquor")
    tobacco: float = Field(0.32, description="Tax rate for tobacco")
    necessity: float = Field(0.01, description="Tax rate for necessities")

    @field_validator("liquor", "tobacco", "necessity")
    @classmethod
    def validate_rate(cls, v: float) -> float:
        """Validate tax rate."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("Tax rate must be between 0 and 1")
        return v


class DownloadConfig(BaseModel):
    """Progress settings for the template-method downloader."""

    step_percent: int = Field(10, description="Progress increment per step")

    @field_validator("step_percent")
    @classmethod
    def validate_step(cls, v: int) -> int:
        """Validate progress step."""
        if not 1 <= v <= 100:
            raise ValueError("Download step must be between 1 and 100")
        return v


class CliConfig(BaseModel):
    """Command line defaults."""

    default_format: str = Field("list", description="Default output format")

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate output format."""
        valid_formats = ["json", "yaml", "table", "list"]
        if v not in valid_formats:
            raise ValueError(f"Output format must be one of {valid_formats}")
        return v
