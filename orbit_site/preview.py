"""
Ground-track preview image for social cards (1200x630 PNG).
"""

import io

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from orbit_site.models import GlobeData  # noqa: E402

WIDTH_IN = 12.0
HEIGHT_IN = 6.3
DPI = 100


def _split_at_dateline(lats: np.ndarray, lngs: np.ndarray):
    """Break a path into segments wherever it wraps across +/-180 deg."""
    breaks = np.where(np.abs(np.diff(lngs)) > 180.0)[0] + 1
    return zip(np.split(lats, breaks), np.split(lngs, breaks))


def render_preview(globe_data: GlobeData) -> bytes:
    """
    Draw satellites and the planned path on an equirectangular map.

    Args:
        globe_data: Satellite points and planned path

    Returns:
        PNG bytes
    """
    fig, ax = plt.subplots(figsize=(WIDTH_IN, HEIGHT_IN), dpi=DPI)
    try:
        fig.patch.set_facecolor("black")
        ax.set_facecolor("black")
        ax.set_xlim(-180, 180)
        ax.set_ylim(-90, 90)
        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)

        # Graticule
        for lng in range(-180, 181, 30):
            ax.axvline(lng, color="#27272a", linewidth=0.5)
        for lat in range(-90, 91, 30):
            ax.axhline(lat, color="#27272a", linewidth=0.5)

        if globe_data.satellites:
            lngs = [p.lng for p in globe_data.satellites]
            lats = [p.lat for p in globe_data.satellites]
            ax.scatter(lngs, lats, s=4, color=(0.0, 1.0, 136 / 255, 0.7), linewidths=0)

        path = np.array(globe_data.path.points, dtype=float)
        if len(path):
            for seg_lats, seg_lngs in _split_at_dateline(path[:, 0], path[:, 1]):
                ax.plot(seg_lngs, seg_lats, color="#ff3333", linewidth=2.5, linestyle=(0, (6, 2)))

        ax.text(
            0.5, 0.5, "ORBIT1",
            transform=ax.transAxes, ha="center", va="center",
            color="white", fontsize=72, fontweight="bold",
        )
        ax.text(
            0.97, 0.04, f"{globe_data.count:,} satellites tracked live",
            transform=ax.transAxes, ha="right", va="bottom",
            color="#52525b", fontsize=12, family="monospace",
        )

        fig.subplots_adjust(left=0, right=1, top=1, bottom=0)
        buffer = io.BytesIO()
        fig.savefig(buffer, format="png", facecolor=fig.get_facecolor())
        return buffer.getvalue()
    finally:
        plt.close(fig)
