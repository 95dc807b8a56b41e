"""
Principles
==========

The two warm-up lessons: polymorphism and SOLID, in a food-delivery
setting.

Polymorphism:
    - DeliveryPartner.deliver is overridden by BikePartner / CarPartner
    - OrderHelper.assign_order takes an optional vehicle

SOLID:
    - S: Courier only delivers
    - O: DeliveryVehicle subclasses extend delivery without edits
    - L: DeliveryService works with any DeliveryVehicle
    - I: Deliverable and Trackable are separate protocols
    - D: DeliveryApp depends on a PaymentStrategy, not a concrete payment
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Protocol

from patternbook.behavioral.strategy import PaymentStrategy, UpiPayment
from patternbook.errors import ValidationError


logger = logging.getLogger(__name__)


# =============================================================================
# Polymorphism
# =============================================================================

class DeliveryPartner:
    def deliver(self, order_id: str) -> str:
        return f"Delivering order {order_id} in a generic way."


class BikePartner(DeliveryPartner):
    def deliver(self, order_id: str) -> str:
        return f"Delivering order {order_id} using a Bike"


class CarPartner(DeliveryPartner):
    def deliver(self, order_id: str) -> str:
        return f"Delivering order {order_id} using a Car"


class OrderHelper:
    def assign_order(self, partner_name: str, vehicle: Optional[str] = None) -> str:
        if not partner_name:
            raise ValidationError("Partner name must not be empty")
        if vehicle is None:
            return f"Order assigned to delivery partner: {partner_name}"
        return f"Order assigned to {partner_name} with vehicle: {vehicle}"


# =============================================================================
# SOLID
# =============================================================================

class Courier:
    """Single responsibility: knows who it is and delivers."""

    def __init__(self, name: str) -> None:
        self.name = name

    def deliver_order(self, order_id: str) -> str:
        return f"{self.name} is delivering order {order_id}"


class DeliveryVehicle(ABC):
    @abstractmethod
    def deliver(self, order_id: str) -> str:
        ...


class Bike(DeliveryVehicle):
    def deliver(self, order_id: str) -> str:
        return f"Delivering order {order_id} using Bike"


class Car(DeliveryVehicle):
    def deliver(self, order_id: str) -> str:
        return f"Delivering order {order_id} using Car"


class DeliveryService:
    def start_delivery(self, vehicle: DeliveryVehicle, order_id: str) -> str:
        return vehicle.deliver(order_id)


class Deliverable(Protocol):
    def deliver_order(self, order_id: str) -> str:
        ...


class Trackable(Protocol):
    def track_location(self) -> str:
        ...


class FleetPartner:
    """Implements both Deliverable and Trackable."""

    def __init__(self, name: str) -> None:
        self.name = name

    def deliver_order(self, order_id: str) -> str:
        return f"{self.name} delivered order {order_id}"

    def track_location(self) -> str:
        return f"Tracking location of {self.name}..."


class DeliveryApp:
    """Depends on the PaymentStrategy abstraction, injected at construction."""

    def __init__(self, payment: PaymentStrategy) -> None:
        self.payment = payment

    def make_payment(self, amount: float) -> str:
        logger.debug(f"DeliveryApp paying {amount:.2f} with {type(self.payment).__name__}")
        return self.payment.pay(amount)


def main_polymorphism(settings=None) -> None:
    helper = OrderHelper()
    print(helper.assign_order("Rahul"))
    print(helper.assign_order("Priya", "Scooter"))

    partner: DeliveryPartner
    for partner, order_id in ((BikePartner(), "ORDER123"), (CarPartner(), "ORDER456")):
        print(partner.deliver(order_id))


def main_solid(settings=None) -> None:
    print(Courier("Rahul").deliver_order("ORDER101"))

    service = DeliveryService()
    print(service.start_delivery(Bike(), "ORDER102"))
    print(service.start_delivery(Car(), "ORDER103"))

    partner = FleetPartner("Priya")
    print(partner.deliver_order("ORDER104"))
    print(partner.track_location())

    app = DeliveryApp(UpiPayment())
    print(app.make_payment(299.0))


if __name__ == "__main__":
    main_polymorphism()
    main_solid()
