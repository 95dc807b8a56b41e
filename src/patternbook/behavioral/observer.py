"""
Observer
========

One-to-many notification: a StockMarket publishes price changes to
every registered app.

Rules:
    - Observers are notified once each, in registration order
    - Registering the same observer twice is a no-op
    - Removing an observer that is not registered is a no-op
"""

import logging
from typing import List, Protocol


logger = logging.getLogger(__name__)


class Observer(Protocol):
    def update(self, price: float) -> str:
        ...


class StockMarket:
    """
    Subject holding the current stock price.

    Attributes:
        stock_price: Last price set
        observers: Registered observers in notification order
    """

    def __init__(self) -> None:
        self.stock_price = 0.0
        self.observers: List[Observer] = []

    def register_observer(self, observer: Observer) -> None:
        if observer in self.observers:
            logger.debug(f"{type(observer).__name__} already registered")
            return
        self.observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer not in self.observers:
            logger.debug(f"{type(observer).__name__} not registered, nothing to remove")
            return
        self.observers.remove(observer)

    def notify_observers(self) -> List[str]:
        """Push the current price to every observer and collect their messages."""
        return [observer.update(self.stock_price) for observer in list(self.observers)]

    def set_stock_price(self, price: float) -> List[str]:
        self.stock_price = price
        logger.info(f"Stock price set to {price}, notifying {len(self.observers)} observer(s)")
        return self.notify_observers()


class _RecordingApp:
    label = "App"

    def __init__(self) -> None:
        self.updates: List[float] = []

    def update(self, price: float) -> str:
        self.updates.append(price)
        return f"{self.label}: Stock Price Updated to {price}"


class MobileApp(_RecordingApp):
    label = "Mobile App"


class WebApp(_RecordingApp):
    label = "Web App"


def main(settings=None) -> None:
    stock = StockMarket()
    mobile = MobileApp()
    web = WebApp()

    stock.register_observer(mobile)
    stock.register_observer(web)

    print("Setting stock price to 120.5")
    for line in stock.set_stock_price(120.5):
        print(line)

    print("Removing WebApp observer...")
    stock.remove_observer(web)

    print("Setting stock price to 132.0")
    for line in stock.set_stock_price(132.0):
        print(line)


if __name__ == "__main__":
    main()
