"""Reader configuration model"""
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from sdo_reader.core import SDO_CONSTANTS


class ReaderConfig(BaseModel):
    """
    Configuration of an SdoReader, set once at construction.

    dimension caps the number of ordinates read per coordinate. With
    strict_dimension the output has exactly that many ordinates, padding
    ordinates missing from the input with NaN.
    """
    model_config = ConfigDict(frozen=True)

    dimension: Optional[int] = Field(
        default=None,
        description="Number of ordinates to read per coordinate (None = native dimension)"
    )
    strict_dimension: bool = Field(
        default=False,
        description="Use dimension as-is even when it exceeds the native dimension"
    )

    @classmethod
    def from_env(cls) -> "ReaderConfig":
        """
        Build a configuration from SDO_READER_DIMENSION and SDO_READER_STRICT_DIMENSION

        Returns:
            ReaderConfig with unset variables left at their defaults
        """
        dimension = os.getenv(SDO_CONSTANTS.ENV_DIMENSION)
        strict = os.getenv(SDO_CONSTANTS.ENV_STRICT_DIMENSION, "false")
        return cls(
            dimension=dimension or None,
            strict_dimension=strict.strip().lower() in ("1", "true", "yes")
        )

    def output_dimension(self, native_dimension: int) -> int:
        """
        Get the number of ordinates to read for a given native dimension

        Args:
            native_dimension: Ordinates per coordinate in the encoding

        Returns:
            Output dimension
        """
        if self.dimension is None:
            return native_dimension
        if self.strict_dimension:
            return self.dimension
        return min(self.dimension, native_dimension)
