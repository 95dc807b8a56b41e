"""
Principles Tests
================

Polymorphism and SOLID warm-ups.
"""

import pytest


class TestPolymorphism:
    """Overrides and optional-argument dispatch."""

    def test_overridden_deliver(self):
        from patternbook.principles import BikePartner, CarPartner, DeliveryPartner

        assert "generic" in DeliveryPartner().deliver("O1")
        assert "Bike" in BikePartner().deliver("O1")
        assert "Car" in CarPartner().deliver("O1")

    def test_assign_order_with_and_without_vehicle(self):
        from patternbook.principles import OrderHelper

        helper = OrderHelper()
        assert helper.assign_order("Rahul") == "Order assigned to delivery partner: Rahul"
        assert helper.assign_order("Priya", "Scooter") == "Order assigned to Priya with vehicle: Scooter"

    def test_assign_order_requires_partner(self):
        from patternbook.errors import ValidationError
        from patternbook.principles import OrderHelper

        with pytest.raises(ValidationError):
            OrderHelper().assign_order("")


class TestSolid:
    """Each SOLID example in isolation."""

    def test_delivery_service_accepts_any_vehicle(self):
        from patternbook.principles import DeliveryService, DeliveryVehicle

        class Scooter(DeliveryVehicle):
            def deliver(self, order_id):
                return f"Scooting {order_id}"

        assert DeliveryService().start_delivery(Scooter(), "O9") == "Scooting O9"

    def test_vehicle_base_is_abstract(self):
        from patternbook.principles import DeliveryVehicle

        with pytest.raises(TypeError):
            DeliveryVehicle()

    def test_fleet_partner_delivers_and_tracks(self):
        from patternbook.principles import FleetPartner

        partner = FleetPartner("Priya")
        assert partner.deliver_order("O4") == "Priya delivered order O4"
        assert partner.track_location() == "Tracking location of Priya..."

    def test_app_uses_injected_payment(self):
        from patternbook.behavioral.strategy import CashOnDelivery, UpiPayment
        from patternbook.principles import DeliveryApp

        assert "UPI" in DeliveryApp(UpiPayment()).make_payment(299.0)
        assert "cash" in DeliveryApp(CashOnDelivery()).make_payment(299.0)
