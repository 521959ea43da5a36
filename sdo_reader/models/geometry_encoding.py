"""Input model for a raw SDO_GEOMETRY value using Pydantic for validation"""
import math
from typing import Any, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sdo_reader.core import SDO_CONSTANTS, MalformedEncodingError


class ElementInfo(BaseModel):
    """One SDO_ELEM_INFO triplet"""
    model_config = ConfigDict(frozen=True)

    starting_offset: int = Field(..., description="1-based offset of the element's first ordinate")
    element_type: int = Field(..., description="SDO_ETYPE code")
    interpretation: int = Field(..., description="SDO_INTERPRETATION code")

    def as_tuple(self) -> Tuple[int, int, int]:
        """Get the triplet as (starting_offset, element_type, interpretation)"""
        return (self.starting_offset, self.element_type, self.interpretation)


class GeometryEncoding(BaseModel):
    """
    Raw SDO_GEOMETRY attributes as read from a spatial column.

    The value is immutable once built. Element triplets may be supplied as
    ElementInfo models, dicts, or plain 3-item sequences.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "gtype": 2003,
                "srid": 8307,
                "point": None,
                "elements": [[1, 1003, 1], [11, 2003, 1]],
                "ordinates": [0, 0, 10, 0, 10, 10, 0, 10, 0, 0,
                              2, 2, 2, 4, 4, 4, 4, 2, 2, 2]
            }
        }
    )

    gtype: int = Field(..., description="SDO_GTYPE in DLTT form (e.g. 2003)")
    srid: Optional[int] = Field(default=None, description="SDO_SRID, None when unset")
    point: Optional[Tuple[float, float, Optional[float]]] = Field(
        default=None,
        description="SDO_POINT (x, y, z); z is None for 2D points"
    )
    elements: Tuple[ElementInfo, ...] = Field(default=(), description="SDO_ELEM_INFO triplets")
    ordinates: Tuple[float, ...] = Field(default=(), description="SDO_ORDINATES")

    @field_validator("elements", mode="before")
    @classmethod
    def _coerce_elements(cls, value: Any) -> Any:
        if value is None:
            return ()
        coerced = []
        for i, element in enumerate(value):
            if isinstance(element, (ElementInfo, dict)):
                coerced.append(element)
                continue
            if not isinstance(element, (list, tuple)) or len(element) != SDO_CONSTANTS.ELEMENT_TRIPLET_SIZE:
                raise ValueError(
                    f"elements[{i}] must be a (starting_offset, element_type, interpretation) "
                    f"triplet, got {element!r}"
                )
            offset, etype, interpretation = element
            coerced.append({
                "starting_offset": offset,
                "element_type": etype,
                "interpretation": interpretation,
            })
        return coerced

    @field_validator("point", mode="before")
    @classmethod
    def _pad_point(cls, value: Any) -> Any:
        # SDO_POINT_TYPE always has a z slot; accept (x, y) for 2D points
        if isinstance(value, (list, tuple)) and len(value) == SDO_CONSTANTS.COMPACT_POINT_SIZE - 1:
            return (*value, None)
        return value

    @field_validator("ordinates", mode="before")
    @classmethod
    def _coerce_ordinates(cls, value: Any) -> Any:
        if value is None:
            return ()
        return value

    @classmethod
    def from_sdo(
        cls,
        gtype: int,
        srid: Optional[int] = None,
        point: Optional[Sequence[Optional[float]]] = None,
        elem_info: Optional[Sequence[int]] = None,
        ordinates: Optional[Sequence[float]] = None
    ) -> "GeometryEncoding":
        """
        Build an encoding from the flat arrays of an SDO_GEOMETRY value

        Args:
            gtype: SDO_GTYPE
            srid: SDO_SRID (optional)
            point: SDO_POINT as (x, y, z) (optional)
            elem_info: Flat SDO_ELEM_INFO array (optional)
            ordinates: Flat SDO_ORDINATES array (optional)

        Returns:
            GeometryEncoding

        Raises:
            MalformedEncodingError: If elem_info is not made of whole triplets
        """
        elem_info = list(elem_info or [])
        size = SDO_CONSTANTS.ELEMENT_TRIPLET_SIZE
        if len(elem_info) % size != 0:
            raise MalformedEncodingError(
                f"SDO_ELEM_INFO length {len(elem_info)} is not a multiple of {size}"
            )
        triplets = [tuple(elem_info[i:i + size]) for i in range(0, len(elem_info), size)]

        return cls(
            gtype=gtype,
            srid=srid,
            point=tuple(point) if point is not None else None,
            elements=triplets,
            ordinates=ordinates
        )

    @property
    def is_compact_point(self) -> bool:
        """Check if the point attribute carries the whole geometry"""
        return self.point is not None and not self.elements and not self.ordinates

    def compact_point_ordinates(self) -> Tuple[float, float, float]:
        """Get the compact point as three ordinates, with NaN for a missing z"""
        x, y, z = self.point
        return (x, y, math.nan if z is None else z)

    def elem_info(self) -> Tuple[int, ...]:
        """Get the element triplets as a flat SDO_ELEM_INFO array"""
        return tuple(value for element in self.elements for value in element.as_tuple())
