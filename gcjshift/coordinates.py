"""
Representation of a latitude/longitude pair, in either WGS-84 or GCJ-02
"""

__all__ = ['GeoPoint']

from typing import Tuple, Union


class GeoPoint:
    """
    An immutable (latitude, longitude) pair, in degrees.

    Unlike a general-purpose coordinate, values are stored exactly as given:
    no wrapping across the poles or antimeridian is applied, since the offset
    model must see the caller's numbers unaltered.
    """

    __slots__ = ('latitude', 'longitude')

    latitude: float
    longitude: float

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        object.__setattr__(self, 'latitude', float(latitude))
        object.__setattr__(self, 'longitude', float(longitude))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    def __add__(self, other: 'GeoPoint') -> 'GeoPoint':
        if not isinstance(other, GeoPoint):
            return NotImplemented

        return GeoPoint(self.latitude + other.latitude, self.longitude + other.longitude)

    def __sub__(self, other: 'GeoPoint') -> 'GeoPoint':
        if not isinstance(other, GeoPoint):
            return NotImplemented

        return GeoPoint(self.latitude - other.latitude, self.longitude - other.longitude)

    def __reduce__(self):
        return self.__class__, (self.latitude, self.longitude)

    @classmethod
    def from_lnglat(cls, longitude: float, latitude: float) -> 'GeoPoint':
        """Creates a GeoPoint from x/y-ordered (longitude, latitude) values"""
        return cls(latitude, longitude)

    def max_abs_diff(self, other: 'GeoPoint') -> float:
        """The larger of the absolute latitude and longitude differences"""
        return max(
            abs(self.latitude - other.latitude),
            abs(self.longitude - other.longitude)
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of length 2
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude
