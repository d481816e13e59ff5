"""
Great-circle movement simulation for moving entities.

The simulator is stateless: ``step`` advances a position one tick toward a
destination and reports arrival. Looping, and resetting to the path source on
arrival, belong to the caller (see ``schema_datagen.streaming.live_feed``).
"""

import math

from ..shared.models import GeoStep

EARTH_RADIUS_KM = 6371.0

# Remaining distances below this are treated as arrived (1 mm)
ARRIVAL_TOLERANCE_KM = 1e-6


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two points using the Haversine formula.

    Args:
        lat1, lon1: First point (degrees)
        lat2, lon2: Second point (degrees)

    Returns:
        Distance in kilometres
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def initial_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """True bearing from the first point toward the second, in radians."""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lon = math.radians(lon2 - lon1)

    y = math.sin(delta_lon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - math.sin(lat1_rad) * math.cos(
        lat2_rad
    ) * math.cos(delta_lon)

    return math.atan2(y, x)


def destination_point(
    lat: float, lon: float, bearing: float, distance_km: float
) -> tuple[float, float]:
    """
    Project a point along a bearing (spherical direct geodesic).

    Args:
        lat, lon: Start point (degrees)
        bearing: True bearing in radians
        distance_km: Distance to travel

    Returns:
        (lat, lon) of the projected point in degrees
    """
    angular = distance_km / EARTH_RADIUS_KM
    lat1 = math.radians(lat)
    lon1 = math.radians(lon)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(angular)
        + math.cos(lat1) * math.sin(angular) * math.cos(bearing)
    )
    lon2 = lon1 + math.atan2(
        math.sin(bearing) * math.sin(angular) * math.cos(lat1),
        math.cos(angular) - math.sin(lat1) * math.sin(lat2),
    )

    return math.degrees(lat2), math.degrees(lon2)


def distance_per_tick_km(speed_kmh: float, interval_seconds: float) -> float:
    return speed_kmh * interval_seconds / 3600


def step(
    current_lat: float,
    current_lon: float,
    dest_lat: float,
    dest_lon: float,
    speed_kmh: float,
    interval_seconds: float,
) -> GeoStep:
    """
    Advance a position one tick toward its destination.

    If the distance covered this tick reaches the remaining distance the
    destination is returned exactly with ``arrived=True``; the simulator never
    overshoots.

    Args:
        current_lat, current_lon: Current position (degrees)
        dest_lat, dest_lon: Destination (degrees)
        speed_kmh: Travel speed in km/h
        interval_seconds: Tick length in seconds

    Returns:
        GeoStep with the new position and arrival flag
    """
    remaining = haversine_km(current_lat, current_lon, dest_lat, dest_lon)
    covered = distance_per_tick_km(speed_kmh, interval_seconds)

    if covered >= remaining - ARRIVAL_TOLERANCE_KM:
        return GeoStep(lat=dest_lat, lon=dest_lon, arrived=True)

    bearing = initial_bearing(current_lat, current_lon, dest_lat, dest_lon)
    lat, lon = destination_point(current_lat, current_lon, bearing, covered)

    return GeoStep(lat=lat, lon=lon, arrived=False)


def point_along_path(
    source_lat: float,
    source_lon: float,
    dest_lat: float,
    dest_lon: float,
    fraction: float,
) -> tuple[float, float]:
    """Point at ``fraction`` (0..1) of the great-circle route from source to destination."""
    fraction = min(max(fraction, 0.0), 1.0)
    if fraction >= 1.0:
        return dest_lat, dest_lon

    total = haversine_km(source_lat, source_lon, dest_lat, dest_lon)
    if total == 0 or fraction == 0:
        return source_lat, source_lon

    bearing = initial_bearing(source_lat, source_lon, dest_lat, dest_lon)
    return destination_point(source_lat, source_lon, bearing, total * fraction)
