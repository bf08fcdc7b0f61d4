"""
Data models for the globe feed and the landing page content.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class TLERecord(BaseModel):
    """Named two-line element set, as read from a catalog feed"""
    name: str
    line1: str
    line2: str

    @property
    def norad_id(self) -> Optional[int]:
        try:
            return int(self.line1[2:7])
        except ValueError:
            return None


class SatPoint(BaseModel):
    """Satellite sub-point with altitude in globe display units"""
    lat: float
    lng: float
    alt: float
    name: str


class OrbitPath(BaseModel):
    """Ground circle of a planned orbit as (lat, lng) pairs in degrees"""
    points: List[Tuple[float, float]]
    altitude: float


class GlobeData(BaseModel):
    """Everything the client globe plots"""
    satellites: List[SatPoint] = Field(default_factory=list)
    path: OrbitPath
    count: int = 0
    generated_at: datetime


class TimelineEntry(BaseModel):
    phase: str
    date: str
    title: str
    desc: str
    active: bool = False


class MissionItem(BaseModel):
    label: str
    text: str


class SpecItem(BaseModel):
    label: str
    value: str


class PageMeta(BaseModel):
    """Document title plus Open Graph and Twitter card fields"""
    title: str
    description: str
    og_title: str
    og_description: str
    og_type: str = "website"
    twitter_card: str = "summary_large_image"
    twitter_title: str
    twitter_description: str
