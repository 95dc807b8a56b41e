"""
Chain of Responsibility Tests
=============================

The order chain compiled onto a LangGraph StateGraph.
"""

import pytest


ALL_HANDLERS = ("validation", "payment", "preparation", "delivery_assignment", "tracking")


class TestDefaultChain:
    """build_default_chain() behaviour."""

    def test_valid_order_visits_every_handler(self):
        from patternbook.behavioral.chain import build_default_chain

        report = build_default_chain().process("Pizza Margherita - Customer: John")

        assert report.completed
        assert report.handled_by == ALL_HANDLERS
        assert len(report.messages) == 6
        assert report.messages[-1] == "Order completed successfully!"
        assert all("Pizza Margherita" in m for m in report.messages[:-1])

    @pytest.mark.parametrize("order", ["", "   ", None])
    def test_blank_order_halts_at_validation(self, order):
        from patternbook.behavioral.chain import build_default_chain

        report = build_default_chain().process(order)

        assert not report.completed
        assert report.handled_by == ("validation",)
        assert report.messages == ("Order Validation Failed: Order is empty!",)

    def test_chain_is_reusable(self):
        from patternbook.behavioral.chain import build_default_chain

        chain = build_default_chain()
        assert not chain.process("").completed
        assert chain.process("Burger Combo").completed


class TestCustomChain:
    """Chains assembled from arbitrary handlers."""

    def test_halt_in_the_middle(self):
        from patternbook.behavioral.chain import (
            HandlerResult,
            OrderProcessingChain,
            OrderTrackingHandler,
            OrderValidationHandler,
        )

        class OutOfStock:
            name = "stock_check"

            def handle(self, order):
                return HandlerResult(f"Out of stock: {order}", proceed=False)

        chain = OrderProcessingChain([OrderValidationHandler(), OutOfStock(), OrderTrackingHandler()])
        report = chain.process("Sushi Platter")

        assert not report.completed
        assert report.handled_by == ("validation", "stock_check")
        assert report.messages[-1] == "Out of stock: Sushi Platter"

    def test_single_handler_chain(self):
        from patternbook.behavioral.chain import OrderProcessingChain, PaymentProcessingHandler

        report = OrderProcessingChain([PaymentProcessingHandler()]).process("Tea")
        assert report.completed
        assert report.handled_by == ("payment",)

    def test_empty_chain_rejected(self):
        from patternbook.behavioral.chain import OrderProcessingChain
        from patternbook.errors import ValidationError

        with pytest.raises(ValidationError):
            OrderProcessingChain([])

    def test_duplicate_handler_names_rejected(self):
        from patternbook.behavioral.chain import OrderProcessingChain, PaymentProcessingHandler
        from patternbook.errors import ValidationError

        with pytest.raises(ValidationError):
            OrderProcessingChain([PaymentProcessingHandler(), PaymentProcessingHandler()])
