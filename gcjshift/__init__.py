
from gcjshift._version import __version__  # noqa: F401
from gcjshift.utils.logging import LOGGER
from gcjshift.coordinates import GeoPoint
from gcjshift.layers import Direction, LayerKind
from gcjshift.boundary import is_inside_region, is_outside_region
from gcjshift.transform import InverseResult, forward, inverse, inverse_with_status
from gcjshift.engine import OffsetEngine, apply

__all__ = [
    'Direction',
    'GeoPoint',
    'InverseResult',
    'LayerKind',
    'OffsetEngine',
    'apply',
    'forward',
    'inverse',
    'inverse_with_status',
    'is_inside_region',
    'is_outside_region',
    'LOGGER',
]
