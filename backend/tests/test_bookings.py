"""Tests for booking CRUD, availability, archiving and payments."""

from datetime import datetime

import pytest

from conftest import booking_payload, parse_iso

from lounge.models.activity_log import ActivityLog
from lounge.models.booking import Booking, BookingHistory
from lounge.services.booking_service import generate_booking_code, seat_number_from_name

SLOT_DAY = datetime(2030, 1, 15)


def slot(hour: int, minute: int = 0) -> datetime:
    return SLOT_DAY.replace(hour=hour, minute=minute)


def seats_for(response, category: str):
    return next(entry["seats"] for entry in response.json() if entry["category"] == category)


class TestSeatParsing:
    def test_trailing_digits(self):
        assert seat_number_from_name("PS5-12") == 12
        assert seat_number_from_name("PC-3") == 3

    def test_no_trailing_digits(self):
        assert seat_number_from_name("Lounge") == 0
        assert seat_number_from_name("") == 0

    def test_booking_code_format(self):
        # 36**6 + 35 is "100000z" in base36
        code = generate_booking_code(36 ** 6 + 35)
        assert code.startswith("BK-0000Z")
        assert len(code) == 12
        assert code == code.upper()
        int(code[-4:], 16)


class TestCreateAndRead:
    def test_round_trip(self, admin_client):
        payload = booking_payload(
            seatNumber=2,
            seatName="PC-2",
            whatsappNumber="+911234567890",
            bookingType=["walk-in", "happy-hours"],
            personCount=2,
            foodOrders=[{"foodId": "f-1", "foodName": "Cola", "price": "2.50", "quantity": 2}],
            promotionDetails={"type": "discount", "value": 10},
            isPromotionalDiscount=True,
            manualDiscountPercentage=10,
            discount="3.00",
        )
        created = admin_client.post("/api/bookings", json=payload)
        assert created.status_code == 201, created.text
        booking_id = created.json()["id"]

        fetched = admin_client.get(f"/api/bookings/{booking_id}").json()
        for key in ("category", "seatNumber", "seatName", "customerName", "whatsappNumber", "price",
                    "status", "bookingType", "personCount", "foodOrders", "promotionDetails",
                    "isPromotionalDiscount", "manualDiscountPercentage", "discount"):
            assert fetched[key] == payload[key], key
        assert parse_iso(fetched["startTime"]) == parse_iso(payload["startTime"])
        assert parse_iso(fetched["endTime"]) == parse_iso(payload["endTime"])
        assert fetched["paymentStatus"] == "unpaid"
        assert fetched["bookingCode"].startswith("BK-")

    def test_given_booking_code_is_kept(self, admin_client):
        created = admin_client.post("/api/bookings", json=booking_payload(bookingCode="BK-CUSTOM1"))
        assert created.json()["bookingCode"] == "BK-CUSTOM1"
        duplicate = admin_client.post("/api/bookings", json=booking_payload(bookingCode="BK-CUSTOM1"))
        assert duplicate.status_code == 400

    def test_food_orders_are_stored_as_sent(self, admin_client):
        orders = [
            {"foodName": "Cola", "price": 2.5, "quantity": 2},
            {"foodName": "Water", "quantity": 1, "note": "no ice"},
        ]
        created = admin_client.post("/api/bookings", json=booking_payload(foodOrders=orders))
        assert created.status_code == 201, created.text
        assert created.json()["foodOrders"] == orders

        fetched = admin_client.get(f"/api/bookings/{created.json()['id']}").json()
        assert fetched["foodOrders"] == orders

    def test_missing_required_field(self, admin_client):
        payload = booking_payload()
        del payload["customerName"]
        response = admin_client.post("/api/bookings", json=payload)
        assert response.status_code == 400
        assert "customerName" in response.json()["message"]

    def test_get_missing(self, admin_client):
        response = admin_client.get("/api/bookings/nope")
        assert response.status_code == 404
        assert response.json() == {"message": "Booking not found"}

    def test_active_excludes_finished(self, admin_client):
        admin_client.post("/api/bookings", json=booking_payload(status="running"))
        admin_client.post("/api/bookings", json=booking_payload(status="completed"))
        statuses = [b["status"] for b in admin_client.get("/api/bookings/active").json()]
        assert statuses == ["running"]
        assert len(admin_client.get("/api/bookings").json()) == 2

    def test_create_logs_activity(self, admin_client, db):
        booking_id = admin_client.post("/api/bookings", json=booking_payload()).json()["id"]
        entry = db.query(ActivityLog).filter(ActivityLog.entity_id == booking_id).one()
        assert entry.action == "create"
        assert entry.username == "admin"


class TestUpdate:
    def test_patch_only_given_fields(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload(whatsappNumber="123")).json()
        response = admin_client.patch(f"/api/bookings/{booking['id']}", json={"status": "running"})
        assert response.status_code == 200
        updated = response.json()
        assert updated["status"] == "running"
        assert updated["whatsappNumber"] == "123"
        assert updated["customerName"] == booking["customerName"]

    def test_patch_times_and_food(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload()).json()
        new_end = "2030-01-15T10:00:00+00:00"
        orders = [{"foodName": "Chips", "price": "1.00", "quantity": 3}]
        updated = admin_client.patch(
            f"/api/bookings/{booking['id']}", json={"endTime": new_end, "foodOrders": orders}
        ).json()
        assert parse_iso(updated["endTime"]) == parse_iso(new_end)
        assert updated["foodOrders"] == orders

    def test_patch_clears_nullable_field(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload(whatsappNumber="123")).json()
        updated = admin_client.patch(f"/api/bookings/{booking['id']}", json={"whatsappNumber": None}).json()
        assert updated["whatsappNumber"] is None

    def test_patch_rejects_null_required_field(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload()).json()
        response = admin_client.patch(f"/api/bookings/{booking['id']}", json={"customerName": None})
        assert response.status_code == 400

    def test_patch_missing(self, admin_client):
        assert admin_client.patch("/api/bookings/nope", json={"status": "running"}).status_code == 404

    def test_change_seat(self, admin_client, db):
        booking = admin_client.post("/api/bookings", json=booking_payload()).json()
        response = admin_client.patch(f"/api/bookings/{booking['id']}/change-seat", json={"newSeatName": "PC-4"})
        assert response.status_code == 200
        assert response.json()["seatName"] == "PC-4"
        assert response.json()["seatNumber"] == 4
        details = [log.details for log in db.query(ActivityLog).all()]
        assert "Changed seat from PC-1 to PC-4" in details

    def test_change_seat_requires_name(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload()).json()
        response = admin_client.patch(f"/api/bookings/{booking['id']}/change-seat", json={})
        assert response.status_code == 400
        assert response.json()["message"] == "New seat name is required"

    def test_delete(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload()).json()
        assert admin_client.delete(f"/api/bookings/{booking['id']}").json()["success"] is True
        assert admin_client.get(f"/api/bookings/{booking['id']}").status_code == 404
        assert admin_client.delete(f"/api/bookings/{booking['id']}").status_code == 404

    def test_staff_delete_notifies(self, staff_client):
        booking = staff_client.post("/api/bookings", json=booking_payload()).json()
        staff_client.delete(f"/api/bookings/{booking['id']}")
        notifications = staff_client.get("/api/notifications").json()
        assert len(notifications) == 1
        assert notifications[0]["entityId"] == booking["id"]
        assert notifications[0]["isRead"] is False

        read = staff_client.patch(f"/api/notifications/{notifications[0]['id']}/read")
        assert read.json()["isRead"] is True


class TestAvailability:
    def query(self, client, time_slot: str, duration: int = 60):
        return client.get(
            "/api/bookings/available-seats",
            params={"date": "2030-01-15", "timeSlot": time_slot, "durationMinutes": duration},
        )

    def test_all_seats_free(self, admin_client):
        response = self.query(admin_client, "14:00-15:00")
        assert response.status_code == 200
        assert seats_for(response, "PC") == [1, 2, 3, 4, 5]
        assert seats_for(response, "PS5") == [1, 2, 3]

    def test_overlapping_active_booking_blocks_seat(self, admin_client):
        admin_client.post("/api/bookings", json=booking_payload(
            seatNumber=2, seatName="PC-2", start=slot(14), end=slot(15)))
        response = self.query(admin_client, "14:30-15:30")
        assert seats_for(response, "PC") == [1, 3, 4, 5]
        assert seats_for(response, "PS5") == [1, 2, 3]

    def test_overlapping_bookings_block_both_seats(self, admin_client):
        admin_client.post("/api/bookings", json=booking_payload(
            seatNumber=2, seatName="PC-2", status="running", start=slot(14), end=slot(16)))
        admin_client.post("/api/bookings", json=booking_payload(
            seatNumber=3, seatName="PC-3", status="paused", start=slot(15), end=slot(17)))
        assert seats_for(self.query(admin_client, "15:30-16:00", 30), "PC") == [1, 4, 5]
        assert seats_for(self.query(admin_client, "14:00-15:00", 30), "PC") == [1, 3, 4, 5]

    def test_touching_intervals_do_not_overlap(self, admin_client):
        admin_client.post("/api/bookings", json=booking_payload(
            seatNumber=2, seatName="PC-2", start=slot(14), end=slot(15)))
        assert seats_for(self.query(admin_client, "15:00-16:00"), "PC") == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("status", ["completed", "expired"])
    def test_finished_bookings_do_not_block(self, admin_client, status):
        admin_client.post("/api/bookings", json=booking_payload(
            seatNumber=2, seatName="PC-2", status=status, start=slot(14), end=slot(15)))
        assert seats_for(self.query(admin_client, "14:00-15:00"), "PC") == [1, 2, 3, 4, 5]

    def test_config_without_seat_names_uses_count(self, admin_client):
        admin_client.post("/api/device-config", json={"category": "VR", "count": 3, "seats": []})
        assert seats_for(self.query(admin_client, "14:00-15:00"), "VR") == [1, 2, 3]

    @pytest.mark.parametrize("params", [
        {"timeSlot": "14:00-15:00", "durationMinutes": 60},
        {"date": "2030-01-15", "durationMinutes": 60},
        {"date": "2030-01-15", "timeSlot": "14:00-15:00"},
        {"date": "not-a-date", "timeSlot": "14:00-15:00", "durationMinutes": 60},
        {"date": "2030-01-15", "timeSlot": "noon", "durationMinutes": 60},
        {"date": "2030-01-15", "timeSlot": "14:00-15:00", "durationMinutes": "soon"},
        {"date": "2030-01-15", "timeSlot": "14:00-15:00", "durationMinutes": 999999999999},
        {"date": "2030-01-15", "timeSlot": "14:00-15:00", "durationMinutes": -999999999999},
    ])
    def test_bad_parameters(self, admin_client, params):
        response = admin_client.get("/api/bookings/available-seats", params=params)
        assert response.status_code == 400


class TestArchive:
    def test_archive_is_idempotent(self, admin_client, db):
        finished = admin_client.post("/api/bookings", json=booking_payload(status="completed")).json()
        admin_client.post("/api/bookings", json=booking_payload(status="expired"))
        live = admin_client.post("/api/bookings", json=booking_payload(status="running")).json()

        first = admin_client.post("/api/bookings/archive").json()
        assert first == {"success": True, "count": 2}
        second = admin_client.post("/api/bookings/archive").json()
        assert second["count"] == 0

        live_ids = {b.id for b in db.query(Booking).all()}
        archived_ids = {h.booking_id for h in db.query(BookingHistory).all()}
        assert live_ids == {live["id"]}
        assert finished["id"] in archived_ids
        assert not live_ids & archived_ids

    def test_history_keeps_fields(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload(
            status="completed", foodOrders=[{"foodName": "Tea", "price": "1.50", "quantity": 1}])).json()
        admin_client.post("/api/bookings/archive")
        history = admin_client.get("/api/booking-history").json()
        assert len(history) == 1
        entry = history[0]
        assert entry["bookingId"] == booking["id"]
        assert entry["id"] != booking["id"]
        assert entry["bookingCode"] == booking["bookingCode"]
        assert entry["foodOrders"] == booking["foodOrders"]
        assert entry["archivedAt"]


class TestPayments:
    def test_payment_method(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload()).json()
        response = admin_client.post(
            "/api/bookings/payment-method", json={"bookingIds": [booking["id"]], "paymentMethod": "cash"})
        assert response.json() == {"success": True, "count": 1}
        assert admin_client.get(f"/api/bookings/{booking['id']}").json()["paymentMethod"] == "cash"

    def test_payment_method_validation(self, admin_client):
        assert admin_client.post(
            "/api/bookings/payment-method", json={"bookingIds": [], "paymentMethod": "cash"}).status_code == 400
        assert admin_client.post(
            "/api/bookings/payment-method", json={"bookingIds": ["x"], "paymentMethod": "card"}).status_code == 400

    def test_payment_status_skips_missing_ids(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload()).json()
        response = admin_client.post("/api/bookings/payment-status", json={
            "bookingIds": [booking["id"], "missing"], "paymentStatus": "paid", "paymentMethod": "upi_online"})
        body = response.json()
        assert body["count"] == 1
        assert body["bookings"][0]["paymentStatus"] == "paid"
        assert body["bookings"][0]["paymentMethod"] == "upi_online"

        logs = admin_client.get("/api/payment-logs").json()
        assert len(logs) == 1
        assert logs[0]["previousStatus"] == "unpaid"
        assert logs[0]["paymentStatus"] == "paid"

    def test_payment_status_validation(self, admin_client):
        response = admin_client.post(
            "/api/bookings/payment-status", json={"bookingIds": ["x"], "paymentStatus": "refunded"})
        assert response.status_code == 400

    def test_split_payment_requires_an_amount(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload()).json()
        response = admin_client.post("/api/bookings/split-payment", json={
            "bookingIds": [booking["id"]], "cashAmount": 0, "upiAmount": 0})
        assert response.status_code == 400
        assert response.json()["message"] == "At least one payment amount must be greater than zero"

    def test_split_payment(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload()).json()
        response = admin_client.post("/api/bookings/split-payment", json={
            "bookingIds": [booking["id"]], "cashAmount": 10, "upiAmount": "5"})
        assert response.status_code == 200
        updated = response.json()["bookings"][0]
        assert updated["paymentStatus"] == "paid"
        assert updated["paymentMethod"] == "split"
        assert updated["cashAmount"] == "10.00"
        assert updated["upiAmount"] == "5.00"

    def test_split_payment_unparsable_amount_counts_as_zero(self, admin_client):
        booking = admin_client.post("/api/bookings", json=booking_payload()).json()
        response = admin_client.post("/api/bookings/split-payment", json={
            "bookingIds": [booking["id"]], "cashAmount": "abc", "upiAmount": "12.5"})
        updated = response.json()["bookings"][0]
        assert updated["cashAmount"] == "0.00"
        assert updated["upiAmount"] == "12.50"
