"""Image file statistics schema."""

from datetime import datetime

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, NonNegativeInt


class ImageStatsRecord(BaseModel):
    """Filesystem statistics for a single image file.

    Attributes:
        name: Path the statistics were gathered for, as given
        size_bytes: File length in bytes
        created_at: Creation (birth) time, UTC
        modified_at: Last modification time, UTC
    """

    name: str = Field(..., description="Path of the image file")
    size_bytes: NonNegativeInt = Field(..., description="File size in bytes")
    created_at: AwareDatetime = Field(..., description="Creation time (UTC)")
    modified_at: AwareDatetime = Field(..., description="Last modification time (UTC)")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_values(
        cls, name: str, size_bytes: int, created_at: datetime, modified_at: datetime
    ) -> "ImageStatsRecord":
        return cls(
            name=name,
            size_bytes=size_bytes,
            created_at=created_at,
            modified_at=modified_at,
        )
