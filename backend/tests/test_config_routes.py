"""Tests for device, pricing, happy hours, venue and retention endpoints."""

from datetime import datetime, timedelta

from lounge.models.activity_log import ActivityLog
from lounge.models.booking import BookingHistory
from lounge.models.expense import Expense
from lounge.services.pricing_service import is_happy_hour_active
from lounge.utils.time_utils import to_ms


class TestDeviceConfig:
    def test_seeded_layout(self, admin_client):
        configs = admin_client.get("/api/device-config").json()
        assert [c["category"] for c in configs] == ["PC", "PS5"]
        assert configs[1]["seats"] == ["PS5-1", "PS5-2", "PS5-3"]

    def test_upsert_replaces_seats(self, admin_client):
        response = admin_client.post(
            "/api/device-config", json={"category": "PC", "count": 2, "seats": ["PC-7", "PC-8"]})
        assert response.status_code == 200
        pc = admin_client.get("/api/device-config/PC").json()
        assert pc["count"] == 2
        assert pc["seats"] == ["PC-7", "PC-8"]
        assert len(admin_client.get("/api/device-config").json()) == 2

    def test_new_category_and_delete(self, admin_client):
        created = admin_client.post("/api/device-config", json={"category": "VR", "count": 1, "seats": ["VR-1"]})
        assert created.status_code == 201
        assert admin_client.get("/api/device-config/VR").status_code == 200

        response = admin_client.delete("/api/device-config/VR")
        assert response.status_code == 200
        assert response.json()["success"] is True

        missing = admin_client.get("/api/device-config/VR")
        assert missing.status_code == 404
        assert missing.json() == {"message": "Device config not found"}

    def test_negative_count_rejected(self, admin_client):
        response = admin_client.post("/api/device-config", json={"category": "PC", "count": -1})
        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid count")

    def test_staff_cannot_change_layout(self, staff_client):
        assert staff_client.get("/api/device-config").status_code == 200
        response = staff_client.post("/api/device-config", json={"category": "PC", "count": 1})
        assert response.status_code == 403


class TestPricing:
    def test_seeded_prices(self, admin_client):
        prices = admin_client.get("/api/pricing-config").json()
        pc = {p["duration"]: p["price"] for p in prices if p["category"] == "PC"}
        assert pc == {"30 mins": "10", "1 hour": "18", "2 hours": "30"}

    def test_replace_all_for_category(self, admin_client):
        response = admin_client.post("/api/pricing-config", json={
            "category": "PC",
            "configs": [
                {"duration": "1 hour", "price": "20"},
                {"duration": "1 hour", "price": "35", "personCount": 2},
            ],
        })
        assert response.status_code == 200
        assert len(response.json()) == 2

        prices = admin_client.get("/api/pricing-config").json()
        pc = [p for p in prices if p["category"] == "PC"]
        assert sorted((p["price"], p["personCount"]) for p in pc) == [("20", 1), ("35", 2)]
        assert len([p for p in prices if p["category"] == "PS5"]) == 3

    def test_numeric_price_is_stored_as_text(self, admin_client):
        response = admin_client.post("/api/pricing-config", json={
            "category": "PS5", "configs": [{"duration": "1 hour", "price": 25}]})
        assert response.json()[0]["price"] == "25"

    def test_delete_category_prices(self, admin_client):
        admin_client.delete("/api/pricing-config/PS5")
        prices = admin_client.get("/api/pricing-config").json()
        assert {p["category"] for p in prices} == {"PC"}

    def test_happy_hours_pricing_is_separate(self, admin_client):
        admin_client.post("/api/happy-hours-pricing", json={
            "category": "PC", "configs": [{"duration": "1 hour", "price": "12"}]})
        happy = admin_client.get("/api/happy-hours-pricing").json()
        assert [p["price"] for p in happy] == ["12"]
        assert len(admin_client.get("/api/pricing-config").json()) == 6


class TestHappyHours:
    def test_invalid_time_rejected(self, admin_client):
        response = admin_client.post("/api/happy-hours-config", json={
            "category": "PC", "configs": [{"startTime": "25:00", "endTime": "26:00"}]})
        assert response.status_code == 400

    def test_active_all_day(self, admin_client):
        admin_client.post("/api/happy-hours-config", json={
            "category": "PC", "configs": [{"startTime": "00:00", "endTime": "23:59"}]})
        admin_client.post("/api/auth/logout")

        response = admin_client.get("/api/happy-hours-active/PC")
        assert response.status_code == 200
        assert response.json() == {"active": True, "category": "PC"}

    def test_disabled_window_is_inactive(self, admin_client):
        admin_client.post("/api/happy-hours-config", json={
            "category": "PC", "configs": [{"startTime": "00:00", "endTime": "23:59", "enabled": False}]})
        assert admin_client.get("/api/happy-hours-active/PC").json()["active"] is False

    def test_unknown_category_is_inactive(self, client):
        assert client.get("/api/happy-hours-active/Arcade").json()["active"] is False

    def test_window_bounds(self, admin_client, db):
        admin_client.post("/api/happy-hours-config", json={
            "category": "PS5", "configs": [{"startTime": "14:00", "endTime": "16:00"}]})
        day = datetime(2030, 1, 15)
        assert is_happy_hour_active(db, "PS5", day.replace(hour=14))
        assert is_happy_hour_active(db, "PS5", day.replace(hour=16))
        assert not is_happy_hour_active(db, "PS5", day.replace(hour=16, minute=1))

    def test_window_across_midnight_never_matches(self, admin_client, db):
        admin_client.post("/api/happy-hours-config", json={
            "category": "PS5", "configs": [{"startTime": "22:00", "endTime": "02:00"}]})
        assert not is_happy_hour_active(db, "PS5", datetime(2030, 1, 15, 23))

    def test_replace_and_delete(self, admin_client):
        admin_client.post("/api/happy-hours-config", json={
            "category": "PC", "configs": [{"startTime": "10:00", "endTime": "12:00"}]})
        admin_client.post("/api/happy-hours-config", json={
            "category": "PC", "configs": [{"startTime": "13:00", "endTime": "15:00"}]})
        windows = admin_client.get("/api/happy-hours-config").json()
        assert [(w["startTime"], w["endTime"]) for w in windows] == [("13:00", "15:00")]

        admin_client.delete("/api/happy-hours-config/PC")
        assert admin_client.get("/api/happy-hours-config").json() == []


class TestGamingCenterInfo:
    def test_null_until_configured(self, client):
        response = client.get("/api/gaming-center-info")
        assert response.status_code == 200
        assert response.json() is None

    def test_upsert(self, admin_client):
        first = admin_client.post("/api/gaming-center-info", json={"name": "Pixel Den", "phone": "123"})
        assert first.status_code == 200
        assert first.json()["timezone"] == "Asia/Kolkata"

        second = admin_client.post("/api/gaming-center-info", json={
            "name": "Pixel Den 2", "timezone": "Europe/Berlin"})
        assert second.json()["id"] == first.json()["id"]

        info = admin_client.get("/api/gaming-center-info").json()
        assert info["name"] == "Pixel Den 2"
        assert info["timezone"] == "Europe/Berlin"
        assert info["phone"] == ""

    def test_name_required(self, admin_client):
        response = admin_client.post("/api/gaming-center-info", json={"name": ""})
        assert response.status_code == 400


class TestRetention:
    def test_default_keeps_forever(self, admin_client):
        config = admin_client.get("/api/retention/config").json()
        assert config["bookingHistoryDays"] == 36500
        assert config["activityLogsDays"] == 36500
        assert config["expensesDays"] == 36500

    def test_partial_update(self, admin_client):
        response = admin_client.put("/api/retention/config", json={"expensesDays": 30})
        assert response.status_code == 200
        body = response.json()
        assert body["expensesDays"] == 30
        assert body["bookingHistoryDays"] == 36500

    def test_zero_days_rejected(self, admin_client):
        response = admin_client.put("/api/retention/config", json={"expensesDays": 0})
        assert response.status_code == 400

    def test_staff_forbidden(self, staff_client):
        assert staff_client.get("/api/retention/config").status_code == 403

    def test_cleanup(self, admin_client, db):
        old = to_ms(datetime.now() - timedelta(days=40))
        recent = to_ms(datetime.now() - timedelta(days=2))
        db.add_all([
            Expense(category="rent", description="old", amount="100", date=old),
            Expense(category="rent", description="recent", amount="100", date=recent),
            BookingHistory(
                booking_id="b-old", category="PC", seat_number=1, seat_name="PC-1",
                customer_name="Old", start_time=old, end_time=old + 3600000,
                price="10", status="completed", archived_at=old,
            ),
            ActivityLog(user_id="u1", username="admin", user_role="admin", action="create",
                        entity_type="booking", created_at=old),
        ])
        db.commit()

        admin_client.put("/api/retention/config", json={
            "bookingHistoryDays": 30, "activityLogsDays": 30, "expensesDays": 30})
        response = admin_client.post("/api/retention/cleanup")
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "bookingHistoryDeleted": 1,
            "activityLogsDeleted": 1,
            "expensesDeleted": 1,
        }

        db.expire_all()
        assert [e.description for e in db.query(Expense).all()] == ["recent"]
