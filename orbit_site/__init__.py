"""
ORBIT1 Mission Site Package

Serves the ORBIT1 landing page and the data behind its live satellite globe.

Modules:
    catalog: TLE feed fetching and text parsing
    tracker: SGP4 propagation and geodetic conversion for display
    orbit_path: Planned mission ground circle
    content: Static landing page copy
    preview: Ground-track PNG for social cards
    app: Flask application
    cli: Command line entry point
"""

__version__ = "1.0.0"
