"""
ORBIT1 Site Configuration and Constants

This module contains the mission parameters, globe display constants and the
environment-driven runtime settings used throughout the project.

Mission:
    ORBIT1 is a 1U CubeSat targeting a ~500 km sun-synchronous orbit
    (97.4 deg inclination).

Display:
    Satellite heights are drawn on the globe in globe-radius units and
    exaggerated by DISPLAY_ALTITUDE_SCALE so LEO objects are visible above
    the surface.

Environment variables:
    ORBIT1_TLE_URLS      Comma separated TLE feed URLs
    ORBIT1_HTTP_TIMEOUT  Feed request timeout (seconds)
    ORBIT1_CACHE_TTL     In-process feed cache lifetime (seconds, 0 disables)
    ORBIT1_HOST          Bind address for `orbit1-site serve`
    ORBIT1_PORT          Bind port for `orbit1-site serve`
    ORBIT1_LOG_LEVEL     Logging level name
    ORBIT1_REPO_URL      Call-to-action link target
"""

import os
from typing import List, Optional

# Planned mission orbit
MISSION_INCLINATION_DEG: float = 97.4  # Sun-synchronous inclination (deg)
MISSION_ALTITUDE_KM: float = 500.0  # Nominal altitude (km)

# Globe display units
DISPLAY_EARTH_RADIUS_KM: float = 6371.0  # Mean Earth radius used for scaling (km)
DISPLAY_ALTITUDE_SCALE: float = 4.0  # Exaggeration applied to heights on the globe

CELESTRAK_BASE: str = "https://celestrak.org"

# TLE text format; the JSON format does not carry the element lines
DEFAULT_TLE_URLS: List[str] = [
    f"{CELESTRAK_BASE}/NORAD/elements/gp.php?GROUP=visual&FORMAT=tle",
    f"{CELESTRAK_BASE}/NORAD/elements/gp.php?GROUP=stations&FORMAT=tle",
]

DEFAULT_REPO_URL: str = "https://github.com/tomiharu0317/orbit1"


def _split_urls(value: Optional[str]) -> List[str]:
    if not value:
        return list(DEFAULT_TLE_URLS)
    return [url.strip() for url in value.split(",") if url.strip()]


class SiteConfig:
    """Runtime settings, read from the environment with keyword overrides."""

    def __init__(self, **overrides):
        self.TLE_URLS = _split_urls(os.getenv("ORBIT1_TLE_URLS"))
        self.HTTP_TIMEOUT = float(os.getenv("ORBIT1_HTTP_TIMEOUT", "10"))
        self.CACHE_TTL = int(os.getenv("ORBIT1_CACHE_TTL", "600"))
        self.HOST = os.getenv("ORBIT1_HOST", "127.0.0.1")
        self.PORT = int(os.getenv("ORBIT1_PORT", "5000"))
        self.LOG_LEVEL = os.getenv("ORBIT1_LOG_LEVEL", "INFO").upper()
        self.REPO_URL = os.getenv("ORBIT1_REPO_URL", DEFAULT_REPO_URL)

        for key, value in overrides.items():
            key = key.upper()
            if not hasattr(self, key):
                raise AttributeError(f"Unknown configuration key: {key}")
            setattr(self, key, value)

    def __repr__(self):
        return (
            f"SiteConfig(sources={len(self.TLE_URLS)}, timeout={self.HTTP_TIMEOUT}, "
            f"cache_ttl={self.CACHE_TTL}, host={self.HOST!r}, port={self.PORT})"
        )
