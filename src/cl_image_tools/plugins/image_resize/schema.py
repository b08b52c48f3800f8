"""Size labels, their fixed dimensions, and the resize result schema."""

from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from ...common.errors import InvalidSizeLabel


class SizeLabel(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def parse(cls, value: "str | SizeLabel") -> "SizeLabel":
        """Validate a user-supplied label. Matching is exact and case-sensitive."""
        if isinstance(value, SizeLabel):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidSizeLabel(value) from None


class Dimensions(BaseModel):
    """Target pixel size. Note the (height, width) order."""

    height: PositiveInt
    width: PositiveInt

    model_config = ConfigDict(frozen=True)


DIMENSIONS: MappingProxyType[SizeLabel, Dimensions] = MappingProxyType(
    {
        SizeLabel.SMALL: Dimensions(height=100, width=400),
        SizeLabel.MEDIUM: Dimensions(height=200, width=800),
        SizeLabel.LARGE: Dimensions(height=400, width=1600),
    }
)


def resolve(label: str | SizeLabel) -> Dimensions:
    """Map a size label to its fixed dimensions.

    Raises:
        InvalidSizeLabel: If label is not one of small, medium, large
    """
    return DIMENSIONS[SizeLabel.parse(label)]


class ResizeResult(BaseModel):
    """Outcome of a single resize operation.

    Attributes:
        input_path: Image that was read
        output_path: Derived path the resized PNG was written to
        size: Size label that was applied
        dimensions: Pixel dimensions of the written image
        elapsed_ms: Wall-clock time of decode, resample and encode
    """

    input_path: str
    output_path: str
    size: SizeLabel
    dimensions: Dimensions
    elapsed_ms: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)
