"""Checkout failure taxonomy.

Every failure a shopper can see inherits ``CheckoutError``; the API maps each
kind to its own status code.
"""


class CheckoutError(Exception):
    """Base class for checkout failures."""


class CheckoutValidationError(CheckoutError):
    """The customer details failed field validation.

    ``messages`` maps each failing field to its list of messages.
    """

    def __init__(self, messages: dict[str, list[str]]) -> None:
        self.messages = messages
        super().__init__(f"Invalid customer details: {', '.join(sorted(messages))}")


class EmptyCartError(CheckoutError):
    def __init__(self) -> None:
        super().__init__("Cannot check out an empty cart")


class SubmissionInProgressError(CheckoutError):
    def __init__(self) -> None:
        super().__init__("A checkout submission is already in progress")


class OrderSubmissionError(CheckoutError):
    """The order could not be persisted. Safe to retry.

    ``order_id`` is set when the header was written but its lines were not.
    """

    def __init__(self, order_id: str | None = None) -> None:
        self.order_id = order_id
        super().__init__("The order could not be submitted, please try again")
