"""
Factory Method
==============

Each creator subclass decides which delivery to create; the shared
send() operation works with whatever the factory method returns.
"""

from abc import ABC, abstractmethod
from typing import Protocol


class Delivery(Protocol):
    def deliver(self, order_id: int) -> str:
        ...


class BikeDelivery:
    def deliver(self, order_id: int) -> str:
        return f"Delivering order {order_id} by bike (fast for short distances)."


class CarDelivery:
    def deliver(self, order_id: int) -> str:
        return f"Delivering order {order_id} by car (good for long distances)."


class DroneDelivery:
    def deliver(self, order_id: int) -> str:
        return f"Delivering order {order_id} by drone (experimental)."


class DeliveryCreator(ABC):
    """Creator whose subclasses supply the delivery product."""

    @abstractmethod
    def create_delivery(self) -> Delivery:
        """Factory method."""

    def send(self, order_id: int) -> str:
        """Create a delivery and dispatch the order with it."""
        return self.create_delivery().deliver(order_id)


class UrbanDeliveryCreator(DeliveryCreator):
    def create_delivery(self) -> Delivery:
        return BikeDelivery()


class LongDistanceDeliveryCreator(DeliveryCreator):
    def create_delivery(self) -> Delivery:
        return CarDelivery()


class ExperimentalDeliveryCreator(DeliveryCreator):
    def create_delivery(self) -> Delivery:
        return DroneDelivery()


def main(settings=None) -> None:
    print(UrbanDeliveryCreator().send(101))
    print(LongDistanceDeliveryCreator().send(202))
    print(ExperimentalDeliveryCreator().send(303))


if __name__ == "__main__":
    main()
