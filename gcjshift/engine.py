"""
Layer policy: decides whether a coordinate bound for a given map layer needs
converting at all, and dispatches to the transformers when it does.
"""

__all__ = ['OffsetEngine', 'apply']

from typing import Union

from gcjshift.coordinates import GeoPoint
from gcjshift.layers import Direction, LayerKind
from gcjshift.transform import forward, inverse
from gcjshift.utils.mixins import LoggingMixin


def apply(
    point: GeoPoint,
    layer_kind: Union[LayerKind, str],
    direction: Union[Direction, str],
) -> GeoPoint:
    """
    Converts a point for display on (or after reading from) a map layer.

    Satellite and hybrid tiles are WGS-84 aligned, so points bound for them
    pass through unchanged. Roads drawn over hybrid tiles remain visibly
    offset; correcting them would misalign the imagery beneath.

    Args:
        point:
            The GeoPoint to convert

        layer_kind:
            A LayerKind, or a map-type id such as 'roadmap' or 'satellite'

        direction:
            Direction.TO_GCJ02 when placing WGS-84 data onto the layer,
            Direction.TO_WGS84 when reading a position off the layer

    Returns:
        GeoPoint

    Raises:
        ValueError if the direction isn't recognized
    """
    direction = Direction.parse(direction)
    if LayerKind.from_map_type(layer_kind).is_wgs84_native:
        return point

    if direction is Direction.TO_GCJ02:
        return forward(point)

    return inverse(point)


class OffsetEngine(LoggingMixin):
    """
    Handle exposing the conversion operations to map-rendering code.

    Holds no mutable state, so a single instance may be constructed once and
    shared freely, including across threads.

    Example:
        engine = OffsetEngine()
        tile_pos = engine.to_gcj02(GeoPoint(39.90923, 116.39742), 'roadmap')
    """

    def __init__(self):
        super().__init__()
        self.logger.debug('Constructed %s', self.__class__.__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}>'

    @staticmethod
    def forward(point: GeoPoint) -> GeoPoint:
        """WGS-84 -> GCJ-02; identity outside China"""
        return forward(point)

    @staticmethod
    def inverse(point: GeoPoint) -> GeoPoint:
        """GCJ-02 -> WGS-84, best effort"""
        return inverse(point)

    def apply(
        self,
        point: GeoPoint,
        layer_kind: Union[LayerKind, str],
        direction: Union[Direction, str],
    ) -> GeoPoint:
        """Layer-aware conversion; see gcjshift.engine.apply"""
        result = apply(point, layer_kind, direction)
        if result is not point:
            self.logger.debug('%s %r -> %r', Direction.parse(direction).value, point, result)

        return result

    def to_gcj02(self, point: GeoPoint, layer_kind: Union[LayerKind, str]) -> GeoPoint:
        """Position at which WGS-84 data should be drawn on the given layer"""
        return self.apply(point, layer_kind, Direction.TO_GCJ02)

    def to_wgs84(self, point: GeoPoint, layer_kind: Union[LayerKind, str]) -> GeoPoint:
        """WGS-84 position of a location read off the given layer"""
        return self.apply(point, layer_kind, Direction.TO_WGS84)
