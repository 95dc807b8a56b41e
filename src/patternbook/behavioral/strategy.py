"""
Strategy
========

Interchangeable payment methods behind one checkout.

Checkout holds a PaymentStrategy and delegates to it; switching the
strategy changes how the next payment is made without touching
Checkout itself.

Example:
    checkout = Checkout(UpiPayment("rahul@upi"))
    checkout.pay(299.0)
    checkout.set_strategy(payment_strategy_for("cash"))
"""

import logging
from enum import Enum
from typing import Optional, Protocol, Union

from patternbook.errors import ValidationError, parse_choice


logger = logging.getLogger(__name__)


class PaymentMethod(str, Enum):
    """Payment methods accepted at checkout."""

    UPI = "upi"
    CARD = "card"
    CASH = "cash"
    WALLET = "wallet"


class PaymentStrategy(Protocol):
    """One way of paying an amount."""

    def pay(self, amount: float) -> str:
        ...


class UpiPayment:
    def __init__(self, upi_id: str = "user@upi") -> None:
        self.upi_id = upi_id

    def pay(self, amount: float) -> str:
        return f"Paid Rs.{amount:.2f} via UPI ({self.upi_id})"


class CardPayment:
    def __init__(self, card_number: str = "4111111111111111") -> None:
        self.card_number = card_number

    @property
    def masked_number(self) -> str:
        return "**** " + self.card_number[-4:]

    def pay(self, amount: float) -> str:
        return f"Paid Rs.{amount:.2f} with card {self.masked_number}"


class CashOnDelivery:
    def pay(self, amount: float) -> str:
        return f"Rs.{amount:.2f} to be collected in cash on delivery"


class WalletPayment:
    """Prepaid wallet; payments draw down the balance."""

    def __init__(self, balance: float = 500.0) -> None:
        self.balance = balance

    def pay(self, amount: float) -> str:
        if amount > self.balance:
            raise ValidationError(
                f"Insufficient wallet balance: need Rs.{amount:.2f}, have Rs.{self.balance:.2f}"
            )
        self.balance -= amount
        return f"Paid Rs.{amount:.2f} from wallet (balance Rs.{self.balance:.2f})"


STRATEGIES = {
    PaymentMethod.UPI: UpiPayment,
    PaymentMethod.CARD: CardPayment,
    PaymentMethod.CASH: CashOnDelivery,
    PaymentMethod.WALLET: WalletPayment,
}


def payment_strategy_for(method: Union[PaymentMethod, str]) -> PaymentStrategy:
    """
    Build the default strategy for a payment method.

    Raises:
        ValidationError: If method is not a known payment method.
    """
    return STRATEGIES[parse_choice(PaymentMethod, method, "payment method")]()


class Checkout:
    """Context that pays with whichever strategy is currently set."""

    def __init__(self, strategy: Optional[PaymentStrategy] = None) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[PaymentStrategy]:
        return self._strategy

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        self._strategy = strategy

    def pay(self, amount: float) -> str:
        """
        Pay an amount with the current strategy.

        Raises:
            ValidationError: If amount is not positive or no strategy is set.
        """
        if amount <= 0:
            raise ValidationError(f"Amount must be positive: {amount}")
        if self._strategy is None:
            raise ValidationError("No payment strategy selected")

        receipt = self._strategy.pay(amount)
        logger.info(f"Checkout via {type(self._strategy).__name__}: {amount:.2f}")
        return receipt


def main(settings=None) -> None:
    checkout = Checkout()
    for method, amount in [("upi", 299.0), ("card", 1499.5), ("cash", 120.0), ("wallet", 250.0)]:
        checkout.set_strategy(payment_strategy_for(method))
        print(checkout.pay(amount))


if __name__ == "__main__":
    main()
