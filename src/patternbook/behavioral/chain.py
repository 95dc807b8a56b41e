"""
Chain of Responsibility
=======================

Order processing as a chain of handlers, compiled into a LangGraph
state machine. LangGraph is used for CONTROL FLOW only.

Graph Structure:
    START → validation → payment → preparation → delivery_assignment → tracking → END

    After every handler a conditional edge either passes the order on
    or jumps straight to END when the handler halted the chain.

Components:
    - OrderHandler: Protocol (name + handle)
    - HandlerResult: one handler's verdict
    - OrderProcessingChain: compiles handlers into a StateGraph
    - OrderReport: what happened to one order
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, TypedDict

from langgraph.graph import StateGraph, END

from patternbook.errors import ValidationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandlerResult:
    """
    Outcome of one handler.

    Attributes:
        message: Human-readable step description
        proceed: False stops the chain after this handler
    """

    message: str
    proceed: bool = True


class OrderHandler(Protocol):
    name: str

    def handle(self, order: Optional[str]) -> HandlerResult:
        ...


class OrderValidationHandler:
    name = "validation"

    def handle(self, order: Optional[str]) -> HandlerResult:
        if order is None or not order.strip():
            return HandlerResult("Order Validation Failed: Order is empty!", proceed=False)
        return HandlerResult(f"Order Validation: Order validated successfully - {order}")


class PaymentProcessingHandler:
    name = "payment"

    def handle(self, order: Optional[str]) -> HandlerResult:
        return HandlerResult(f"Payment Processing: Payment processed for - {order}")


class OrderPreparationHandler:
    name = "preparation"

    def handle(self, order: Optional[str]) -> HandlerResult:
        return HandlerResult(f"Order Preparation: Order is being prepared - {order}")


class DeliveryAssignmentHandler:
    name = "delivery_assignment"

    def handle(self, order: Optional[str]) -> HandlerResult:
        return HandlerResult(f"Delivery Assignment: Delivery agent assigned for - {order}")


class OrderTrackingHandler:
    name = "tracking"

    def handle(self, order: Optional[str]) -> HandlerResult:
        return HandlerResult(f"Order Tracking: Order is out for delivery - {order}")


class OrderChainState(TypedDict):
    """
    State passed through the order graph.

    Attributes:
        order: The order being processed
        messages: Step messages so far
        visited: Names of handlers that ran
        halted: Set when a handler stops the chain
    """
    order: Optional[str]
    messages: List[str]
    visited: List[str]
    halted: bool


@dataclass(frozen=True)
class OrderReport:
    order: Optional[str]
    messages: Tuple[str, ...]
    handled_by: Tuple[str, ...]
    completed: bool


class OrderProcessingChain:
    """
    Runs orders through handlers in a fixed sequence.

    Example:
        chain = build_default_chain()
        report = chain.process("Pizza Margherita - Customer: John")
        report.completed  # True
    """

    def __init__(self, handlers: Sequence[OrderHandler]) -> None:
        if not handlers:
            raise ValidationError("Order chain needs at least one handler")

        names = [handler.name for handler in handlers]
        if len(set(names)) != len(names):
            raise ValidationError(f"Duplicate handler names in chain: {names}")

        self.handlers: Tuple[OrderHandler, ...] = tuple(handlers)
        self._graph = self._build_graph()

        logger.debug(f"OrderProcessingChain compiled: {' -> '.join(names)}")

    def _build_graph(self):
        workflow = StateGraph(OrderChainState)

        for handler in self.handlers:
            workflow.add_node(handler.name, self._make_node(handler))

        workflow.set_entry_point(self.handlers[0].name)

        for current, following in zip(self.handlers, self.handlers[1:]):
            workflow.add_conditional_edges(
                current.name,
                _route,
                {"next": following.name, "halt": END},
            )
        workflow.add_edge(self.handlers[-1].name, END)

        return workflow.compile()

    @staticmethod
    def _make_node(handler: OrderHandler):
        def node(state: OrderChainState) -> Dict[str, Any]:
            result = handler.handle(state["order"])
            if not result.proceed:
                logger.warning(f"Order halted at {handler.name}: {result.message}")
            return {
                "messages": state["messages"] + [result.message],
                "visited": state["visited"] + [handler.name],
                "halted": not result.proceed,
            }
        return node

    def process(self, order: Optional[str]) -> OrderReport:
        """
        Pass an order through the chain.

        Returns:
            OrderReport; completed is True only when every handler ran
            and none halted.
        """
        initial: OrderChainState = {
            "order": order,
            "messages": [],
            "visited": [],
            "halted": False,
        }
        result = self._graph.invoke(initial)

        completed = not result["halted"] and len(result["visited"]) == len(self.handlers)
        messages = list(result["messages"])
        if completed:
            messages.append("Order completed successfully!")

        return OrderReport(
            order=order,
            messages=tuple(messages),
            handled_by=tuple(result["visited"]),
            completed=completed,
        )


def _route(state: OrderChainState) -> str:
    return "halt" if state["halted"] else "next"


def build_default_chain() -> OrderProcessingChain:
    """validation → payment → preparation → delivery assignment → tracking"""
    return OrderProcessingChain([
        OrderValidationHandler(),
        PaymentProcessingHandler(),
        OrderPreparationHandler(),
        DeliveryAssignmentHandler(),
        OrderTrackingHandler(),
    ])


def main(settings=None) -> None:
    chain = build_default_chain()
    orders = [
        ("Order 1", "Pizza Margherita - Customer: John"),
        ("Order 2", "Burger Combo - Customer: Sarah"),
        ("Invalid Order", ""),
    ]
    for title, order in orders:
        print(f"========== Processing {title} ==========")
        for message in chain.process(order).messages:
            print(message)


if __name__ == "__main__":
    main()
