# /lugyi_admin/models/dashboard_model.py

# --- Core Imports ---
# Import the necessary components from Pydantic for data modeling.
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


# --- Enumerations ---
class Period(str, Enum):
    """The reporting granularity accepted by the dashboard."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


# --- Chart Points ---
class ChartPoint(BaseModel):
    date: str = Field(..., description="Bucket label (HH:00, YYYY-MM-DD or YYYY-MM).", example="2024-01-15")
    count: int = Field(..., example=12)


class ViewChartPoint(BaseModel):
    date: str = Field(..., example="2024-01-15")
    total_views: int = Field(..., example=340)
    vip_views: int = Field(..., example=85)


class PopularContent(BaseModel):
    id: int
    title: str
    views_count: int


# --- Per-Domain Stats ---
class UserStats(BaseModel):
    total: int
    change_percentage: float
    chart: List[ChartPoint]


class DeviceStats(BaseModel):
    total: int
    vip_devices: int
    daily_active: int = Field(..., description="Devices whose last activity falls on the current calendar day.")
    change_percentage: float
    chart: List[ChartPoint]


class ContentStats(BaseModel):
    total: int
    vip_content: int
    change_percentage: float
    popular_content: List[PopularContent] = Field(..., max_length=5)
    chart: List[ChartPoint]


class SubscriptionStats(BaseModel):
    total: int
    active: int
    change_percentage: float
    chart: List[ChartPoint]


class ViewStats(BaseModel):
    total: int
    vip_views: int
    change_percentage: float
    chart: List[ViewChartPoint]


class DashboardMeta(BaseModel):
    time_range: Period
    last_updated: str = Field(..., example="2024-01-15 15:00:00")


class DashboardOverview(BaseModel):
    """
    Defines the data contract for the response of the dashboard overview
    endpoint. Every section is computed against the same `meta.time_range`.
    """
    users: UserStats
    devices: DeviceStats
    content: ContentStats
    subscriptions: SubscriptionStats
    views: ViewStats
    meta: DashboardMeta
