"""
Constants declarations for gcjshift
"""

# Krasovsky 1940 Ellipsoid Constants, as used by the GCJ-02 offset model
# a = 6378245.0, 1/f = 298.3, b = a * (1 - f), ee = (a^2 - b^2) / a^2
GCJ_A = 6378245.0  # Major axis (meters)
GCJ_EE = 0.00669342162296594323  # Squared eccentricity

# Region the offset model was fit to (mainland China)
CHINA_MIN_LNG = 72.004
CHINA_MAX_LNG = 137.8347
CHINA_MIN_LAT = 0.8293
CHINA_MAX_LAT = 55.8271

# Origin of the offset series
MODEL_ORIGIN_LNG = 105.0
MODEL_ORIGIN_LAT = 35.0

# Inverse iteration; 1e-6 degrees is ~0.55m at the equator
INVERSE_THRESHOLD = 1e-6
INVERSE_MAX_ITERATIONS = 30

# Mean Earth Radius (approximate for Haversine)
EARTH_RADIUS_METERS = 6_371_000.0
