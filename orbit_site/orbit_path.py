"""
Planned Orbit Path

Ground circle of a circular orbit with a given inclination, drawn on the globe
as the mission's intended track. Earth rotation is ignored: the path is the
orbit plane's intersection with the sphere, not a ground track over time.
"""

import math
from typing import List, Tuple

from config import (
    DISPLAY_ALTITUDE_SCALE,
    DISPLAY_EARTH_RADIUS_KM,
    MISSION_ALTITUDE_KM,
    MISSION_INCLINATION_DEG,
)
from orbit_site.models import OrbitPath


def display_altitude(height_km: float) -> float:
    """Convert a height above the surface (km) to exaggerated globe units."""
    return height_km / DISPLAY_EARTH_RADIUS_KM * DISPLAY_ALTITUDE_SCALE


def generate_orbit_path(inclination_deg: float, step_deg: int = 1) -> List[Tuple[float, float]]:
    """
    Sample the ground circle of an inclined orbit.

    Args:
        inclination_deg: Orbit inclination (deg)
        step_deg: Argument of latitude step (deg)

    Returns:
        (lat, lng) pairs in degrees for argument of latitude 0, step, ... up
        to 360. With a step dividing 360 the circle is closed (first and last
        points coincide); the default gives 361 points.
    """
    if step_deg <= 0:
        raise ValueError(f"step_deg must be positive, got {step_deg}")

    inc = math.radians(inclination_deg)
    points = []
    for u_deg in range(0, 361, step_deg):
        u = math.radians(u_deg)
        lat = math.degrees(math.asin(math.sin(u) * math.sin(inc)))
        lng = math.degrees(math.atan2(math.sin(u) * math.cos(inc), math.cos(u)))
        points.append((lat, lng))
    return points


def planned_orbit() -> OrbitPath:
    """ORBIT1's planned sun-synchronous path (97.4 deg, ~500 km)."""
    return OrbitPath(
        points=generate_orbit_path(MISSION_INCLINATION_DEG),
        altitude=display_altitude(MISSION_ALTITUDE_KM),
    )
