"""Implementation constants for the codec and display formatting.

Not user-configurable: there are no config files or environment variables.
"""

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Fixed settings for the resize and stats operations."""

    output_extension: str = Field(
        default="png", description="Extension required on input and written on output"
    )
    output_format: str = Field(default="PNG", description="Pillow encoder used for output")
    resample: Image.Resampling = Field(
        default=Image.Resampling.LANCZOS, description="Resampling filter for resize"
    )
    timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S UTC", description="strftime format for displayed times"
    )

    model_config = ConfigDict(frozen=True)


settings = Settings()
