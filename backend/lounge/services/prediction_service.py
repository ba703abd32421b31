"""
Rule based maintenance risk and traffic estimates
"""
import random
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from lounge.models.device_config import DeviceConfig
from lounge.models.device_maintenance import DeviceMaintenance
from lounge.utils.time_utils import now_ms

DAY_MS = 24 * 60 * 60 * 1000

HIGH_USAGE_HOURS = 1000
HIGH_ISSUES = 5
MEDIUM_USAGE_HOURS = 500
MEDIUM_ISSUES = 2

WEEKEND_FACTOR = 1.3


def classify_risk(usage_hours: float, issues_reported: int) -> dict:
    """Risk level, action and days until maintenance for one seat's counters"""
    if usage_hours > HIGH_USAGE_HOURS or issues_reported > HIGH_ISSUES:
        return {
            "risk_level": "high",
            "recommended_action": "Schedule immediate maintenance check",
            "estimated_days_until_maintenance": 7,
            "reasoning": f"High usage ({usage_hours:g}h) and/or multiple issues reported "
                         f"({issues_reported}). Immediate attention recommended.",
        }
    if usage_hours > MEDIUM_USAGE_HOURS or issues_reported > MEDIUM_ISSUES:
        return {
            "risk_level": "medium",
            "recommended_action": "Plan maintenance within 2 weeks",
            "estimated_days_until_maintenance": 14,
            "reasoning": f"Moderate usage ({usage_hours:g}h) with some issues. Preventive maintenance recommended.",
        }
    return {
        "risk_level": "low",
        "recommended_action": "No action needed",
        "estimated_days_until_maintenance": 90,
        "reasoning": "Device is operating normally with low usage.",
    }


def maintenance_predictions(db: Session) -> dict:
    """One prediction per configured seat; seats without counters count as unused"""
    counters = {record.seat_name: record for record in db.query(DeviceMaintenance).all()}
    current_ms = now_ms()

    predictions = []
    recommended_actions = []
    risk_counts = {"high": 0, "medium": 0, "low": 0}
    for config in db.query(DeviceConfig).order_by(DeviceConfig.category).all():
        for seat_name in config.seats or []:
            record = counters.get(seat_name)
            usage_hours = (record.total_usage_hours or 0) if record else 0
            sessions = (record.total_sessions or 0) if record else 0
            issues = (record.issues_reported or 0) if record else 0
            days_since = None
            if record and record.last_maintenance_date:
                days_since = (current_ms - record.last_maintenance_date) // DAY_MS

            risk = classify_risk(usage_hours, issues)
            risk_counts[risk["risk_level"]] += 1
            if risk["risk_level"] != "low" and risk["recommended_action"] not in recommended_actions:
                recommended_actions.append(risk["recommended_action"])

            predictions.append({
                "category": config.category,
                "seat_name": seat_name,
                **risk,
                "metrics": {
                    "usage_hours": usage_hours,
                    "total_sessions": sessions,
                    "issues_reported": issues,
                    "days_since_last_maintenance": days_since,
                },
            })

    return {
        "predictions": predictions,
        "summary": {
            "high_risk_devices": risk_counts["high"],
            "medium_risk_devices": risk_counts["medium"],
            "low_risk_devices": risk_counts["low"],
            "total_devices": len(predictions),
            "recommended_actions": recommended_actions,
        },
        "generated_at": datetime.now(timezone.utc),
    }


def _js_round(value: float) -> int:
    return int(value + 0.5)


def predicted_visitors(hour: int, weekend: bool, rng: random.Random = random) -> int:
    if 16 <= hour <= 22:
        visitors = 15 + rng.randrange(5)
    elif 10 <= hour <= 15:
        visitors = 8 + rng.randrange(3)
    elif hour >= 23 or hour <= 6:
        visitors = 2
    else:
        visitors = 5
    if weekend:
        visitors = _js_round(visitors * WEEKEND_FACTOR)
    return visitors


def confidence(hour: int) -> str:
    if 16 <= hour <= 20:
        return "high"
    if hour >= 23 or hour <= 8:
        return "low"
    return "medium"


def traffic_predictions(now: Optional[datetime] = None, rng: random.Random = random) -> dict:
    """Hourly visitor estimates from fixed time-of-day buckets with jitter"""
    now = now or datetime.now()
    weekend = now.weekday() >= 5

    predictions = []
    peak_hour, peak_visitors, total = "18:00", 0, 0
    for hour in range(24):
        visitors = predicted_visitors(hour, weekend, rng)
        label = f"{hour:02d}:00"
        if visitors > peak_visitors:
            peak_hour, peak_visitors = label, visitors
        total += visitors
        predictions.append({"hour": label, "predicted_visitors": visitors, "confidence": confidence(hour)})

    insights = []
    if weekend:
        insights.append("Weekend traffic expected to be 30% higher than weekdays")
    insights.append(f"Peak traffic expected around {peak_hour} with approximately {peak_visitors} visitors")
    insights.append("Consider additional staffing during evening hours (4 PM - 10 PM)")

    return {
        "predictions": predictions,
        "summary": {
            "peak_hour": peak_hour,
            "peak_visitors": peak_visitors,
            "total_predicted_visitors": total,
            "average_visitors": _js_round(total / 24),
            "insights": insights,
        },
        "generated_at": datetime.now(timezone.utc),
    }
