"""
Report, analytics and prediction DTOs
"""
from datetime import datetime
from typing import List, Literal, Optional

from lounge.schemas.common import CamelModel, EpochDatetime


class StatsResponse(CamelModel):
    """Totals for a report window"""
    total_bookings: int
    total_revenue: str
    unique_customers: int
    avg_session_duration: int
    food_revenue: str
    completed_bookings: int
    period: str
    start_date: datetime
    end_date: datetime


class RetentionMetrics(CamelModel):
    total_customers: int
    returning_customers: int
    retention_rate: float
    period: str


class CategoryUsage(CamelModel):
    category: str
    occupied: int
    total: int
    percentage: int


class HourlyUsage(CamelModel):
    hour: str
    bookings: int
    revenue: float


class RealtimePoint(CamelModel):
    timestamp: str
    occupancy: int
    capacity: int


class UsageAnalytics(CamelModel):
    """Occupancy dashboard"""
    current_occupancy: int
    total_capacity: int
    occupancy_rate: float
    active_bookings: int
    category_usage: List[CategoryUsage]
    hourly_usage: List[HourlyUsage]
    realtime_data: List[RealtimePoint]
    unique_customers: int
    avg_session_duration: int
    total_food_orders: int
    food_revenue: float


class DeviceMaintenanceResponse(CamelModel):
    id: str
    category: str
    seat_name: str
    last_maintenance_date: Optional[EpochDatetime] = None
    total_usage_hours: float
    total_sessions: int
    issues_reported: int
    maintenance_notes: Optional[str] = None
    status: str
    created_at: EpochDatetime
    updated_at: EpochDatetime


RiskLevel = Literal["low", "medium", "high"]


class MaintenanceMetrics(CamelModel):
    usage_hours: float
    total_sessions: int
    issues_reported: int
    days_since_last_maintenance: Optional[int] = None


class MaintenancePrediction(CamelModel):
    category: str
    seat_name: str
    risk_level: RiskLevel
    recommended_action: str
    estimated_days_until_maintenance: int
    reasoning: str
    metrics: MaintenanceMetrics


class MaintenanceSummary(CamelModel):
    high_risk_devices: int
    medium_risk_devices: int
    low_risk_devices: int
    total_devices: int
    recommended_actions: List[str]


class MaintenancePredictions(CamelModel):
    predictions: List[MaintenancePrediction]
    summary: MaintenanceSummary
    generated_at: datetime


class TrafficPrediction(CamelModel):
    hour: str
    predicted_visitors: int
    confidence: RiskLevel


class TrafficSummary(CamelModel):
    peak_hour: str
    peak_visitors: int
    total_predicted_visitors: int
    average_visitors: int
    insights: List[str]


class TrafficPredictions(CamelModel):
    predictions: List[TrafficPrediction]
    summary: TrafficSummary
    generated_at: datetime


class SeatStatus(CamelModel):
    name: str
    status: Literal["available", "occupied"]


class PublicCategoryStatus(CamelModel):
    """Seat board entry for one category"""
    category: str
    total: int
    available: int
    occupied: int
    seats: List[SeatStatus]
