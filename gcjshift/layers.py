"""
Map layer kinds and transform directions
"""

__all__ = ['Direction', 'LayerKind']

from enum import Enum
from typing import Union


class LayerKind(Enum):
    """The rendering layer a coordinate request targets"""
    ROADMAP = 'roadmap'
    SATELLITE = 'satellite'
    HYBRID = 'hybrid'
    OTHER = 'other'

    @classmethod
    def from_map_type(cls, map_type: Union['LayerKind', str, None]) -> 'LayerKind':
        """
        Resolves a host map-type id (e.g. 'roadmap', 'SATELLITE', 'terrain') to
        a LayerKind. Ids that aren't recognized resolve to OTHER, which is
        corrected the same way as ROADMAP.

        Args:
            map_type:
                A LayerKind (returned as-is) or a map-type id string

        Returns:
            LayerKind
        """
        if isinstance(map_type, LayerKind):
            return map_type

        if not isinstance(map_type, str):
            return cls.OTHER

        try:
            return cls(map_type.strip().lower())
        except ValueError:
            return cls.OTHER

    @property
    def is_wgs84_native(self) -> bool:
        """Whether tiles for this layer are already aligned with WGS-84"""
        return self in (LayerKind.SATELLITE, LayerKind.HYBRID)


class Direction(Enum):
    """Which way a coordinate is being converted"""
    TO_GCJ02 = 'to_gcj02'
    TO_WGS84 = 'to_wgs84'

    @classmethod
    def parse(cls, direction: Union['Direction', str]) -> 'Direction':
        """
        Resolves a Direction or its value string, case-insensitively.

        Raises:
            ValueError if the direction isn't recognized
        """
        if isinstance(direction, Direction):
            return direction

        if isinstance(direction, str):
            try:
                return cls(direction.strip().lower())
            except ValueError:
                pass

        raise ValueError(
            f"Unrecognized direction {direction!r}; expected one of "
            f"{', '.join(repr(x.value) for x in cls)}"
        )
