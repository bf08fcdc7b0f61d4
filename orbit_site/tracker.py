"""
Live Satellite Positions

Propagates catalog element sets with the sgp4 library and converts the
resulting TEME positions to geodetic sub-points for the globe.

Pipeline per satellite:
    TLE lines -> Satrec -> sgp4(jd, fr) -> r_TEME (km)
    r_TEME -> r_ECEF (rotation by GMST) -> WGS-84 lat/lon/height
    height -> display altitude (globe units)

Bad element sets never raise out of this module; they are dropped with a
debug log, since the globe is decorative and a handful of missing points
is acceptable.
"""

import math
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

import numpy as np
from sgp4.api import Satrec, jday

from logging_config import get_logger
from orbit_site.models import SatPoint, TLERecord
from orbit_site.orbit_path import display_altitude

logger = get_logger(__name__)

# WGS-84 ellipsoid
WGS84_A_KM = 6378.137
WGS84_F = 1.0 / 298.257223563


def datetime_to_jd_fr(dt: datetime) -> Tuple[float, float]:
    """
    Convert a datetime to the split Julian date sgp4 expects.

    Naive datetimes are taken as UTC.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    seconds = dt.second + dt.microsecond / 1e6
    return jday(dt.year, dt.month, dt.day, dt.hour, dt.minute, seconds)


def gmst_radians(jd: float, fr: float) -> float:
    """Greenwich mean sidereal time (IAU 1982), in [0, 2*pi)."""
    T = (jd - 2451545.0 + fr) / 36525.0
    gmst_sec = (
        67310.54841 +
        (876600.0 * 3600.0 + 8640184.812866) * T +
        0.093104 * T * T -
        6.2e-6 * T * T * T
    )
    return (gmst_sec % 86400.0) * (2.0 * math.pi / 86400.0)


def teme_to_ecef(r_teme: np.ndarray, jd: float, fr: float) -> np.ndarray:
    """
    Rotate a TEME position into the Earth-fixed frame.

    Polar motion is ignored; at globe scale it is invisible.
    """
    theta = gmst_radians(jd, fr)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return np.array([
        cos_t * r_teme[0] + sin_t * r_teme[1],
        -sin_t * r_teme[0] + cos_t * r_teme[1],
        r_teme[2],
    ])


def ecef_to_geodetic(r_ecef: np.ndarray) -> Tuple[float, float, float]:
    """
    ECEF to WGS-84 geodetic conversion using Bowring's method.

    Args:
        r_ecef: Position vector in ECEF coordinates [x, y, z] (km)

    Returns:
        Tuple of (latitude_deg, longitude_deg, height_km), longitude in
        [-180, 180].
    """
    a = WGS84_A_KM
    f = WGS84_F
    b = a * (1.0 - f)
    e2 = 2.0 * f - f * f
    ep2 = e2 / (1.0 - e2)

    x, y, z = (float(c) for c in r_ecef)
    lon = math.atan2(y, x)
    p = math.hypot(x, y)

    # Pole
    if p < 1e-10:
        lat = math.pi / 2.0 if z >= 0 else -math.pi / 2.0
        return math.degrees(lat), math.degrees(lon), abs(z) - b

    theta = math.atan2(z * a, p * b)
    lat = theta
    for _ in range(5):
        sin_theta = math.sin(theta)
        cos_theta = math.cos(theta)
        lat = math.atan2(
            z + ep2 * b * sin_theta ** 3,
            p - e2 * a * cos_theta ** 3,
        )
        new_theta = math.atan2(b * math.tan(lat), a)
        if abs(new_theta - theta) < 1e-12:
            break
        theta = new_theta

    sin_lat = math.sin(lat)
    cos_lat = math.cos(lat)
    N = a / math.sqrt(1.0 - e2 * sin_lat * sin_lat)

    if abs(cos_lat) > 1e-10:
        height = p / cos_lat - N
    else:
        height = z / sin_lat - N * (1.0 - e2)

    return math.degrees(lat), math.degrees(lon), height


def propagate_record(record: TLERecord, when: datetime) -> Optional[SatPoint]:
    """
    Compute one satellite's sub-point at a given time.

    Args:
        record: Named element set
        when: Target time (UTC)

    Returns:
        SatPoint, or None if the lines do not parse or SGP4 reports an error
    """
    try:
        satellite = Satrec.twoline2rv(record.line1, record.line2)
    except Exception as e:
        logger.debug("Unparseable TLE for %s: %s", record.name, e)
        return None

    jd, fr = datetime_to_jd_fr(when)
    error, r_teme, _ = satellite.sgp4(jd, fr)
    if error != 0:
        logger.debug("SGP4 error %d for %s", error, record.name)
        return None

    r_teme = np.array(r_teme)
    if not np.all(np.isfinite(r_teme)):
        logger.debug("Non-finite position for %s", record.name)
        return None

    lat, lon, height = ecef_to_geodetic(teme_to_ecef(r_teme, jd, fr))
    return SatPoint(lat=lat, lng=lon, alt=display_altitude(height), name=record.name)


def compute_positions(records: Iterable[TLERecord], when: Optional[datetime] = None) -> List[SatPoint]:
    """Propagate all records to one common instant (default: now), dropping failures."""
    if when is None:
        when = datetime.now(timezone.utc)

    points = []
    dropped = 0
    for record in records:
        point = propagate_record(record, when)
        if point is None:
            dropped += 1
        else:
            points.append(point)

    if dropped:
        logger.info("Dropped %d of %d satellites during propagation", dropped, dropped + len(points))
    return points
