"""Tests for the CheckoutSubmitter state machine and two-phase submission."""

from decimal import Decimal
from unittest.mock import patch

import pytest
from ordering.cart.store import CartStore
from ordering.checkout.errors import (
    CheckoutError,
    CheckoutValidationError,
    EmptyCartError,
    OrderSubmissionError,
    SubmissionInProgressError,
)
from ordering.checkout.submitter import ESTIMATED_DELIVERY, CheckoutState, CheckoutSubmitter
from ordering.messaging.fake_messenger import FakeMessenger
from ordering.persistence.fake_adapter import FakeOrderStore
from ordering.toasts.port import DESTRUCTIVE
from ordering.toasts.queue import ToastQueue


@pytest.fixture()
def cart(margherita, calabresa):
    store = CartStore(session_id="sess-001")
    store.add_item(margherita)
    store.add_item(margherita)
    store.add_item(calabresa)
    return store


@pytest.fixture()
def toasts():
    return ToastQueue()


@pytest.fixture()
def submitter(cart, order_store, messenger, toasts):
    return CheckoutSubmitter(
        cart,
        order_store=order_store,
        messenger=messenger,
        toaster=toasts,
        destination="5511999999999",
    )


class TestSuccessfulSubmission:
    def test_worked_example(self, submitter, cart, messenger, checkout_form):
        result = submitter.submit(checkout_form)

        assert submitter.state is CheckoutState.SUCCEEDED
        assert result.total == Decimal("99.00")
        assert cart.total_items == 0
        assert len(messenger.sent) == 1
        text = messenger.sent[0]["text"]
        assert "2x Margherita" in text
        assert "1x Calabresa" in text
        assert "Total: 99,00" in text

    def test_handoff_goes_to_the_fixed_destination(self, submitter, messenger, checkout_form):
        submitter.submit(checkout_form)
        assert messenger.sent[0]["destination"] == "5511999999999"

    def test_result_carries_order_identity(self, submitter, order_store, checkout_form):
        result = submitter.submit(checkout_form)

        assert result.order_id in order_store.headers
        assert result.order_code == result.order_id[:8].upper()
        assert result.order_code in result.summary
        assert result.created_at is not None
        assert result.estimated_delivery == ESTIMATED_DELIVERY == "30-45 minutos"

    def test_header_and_lines_are_written(self, submitter, order_store, checkout_form):
        result = submitter.submit(checkout_form)

        header = order_store.headers[result.order_id]
        assert header.customer_name == "João da Silva"
        assert header.payment_method == "instant_transfer"
        assert header.total_amount == Decimal("99.00")
        assert header.notes == "Sem cebola"

        lines = order_store.lines[result.order_id]
        assert [(line.item_name, line.quantity, line.unit_price) for line in lines] == [
            ("Margherita", 2, Decimal("32.00")),
            ("Calabresa", 1, Decimal("35.00")),
        ]

    def test_header_is_written_before_lines(self, submitter, order_store, checkout_form):
        submitter.submit(checkout_form)
        assert [call["method"] for call in order_store.calls] == ["create_order_header", "create_order_lines"]

    def test_success_toast(self, submitter, toasts, checkout_form):
        submitter.submit(checkout_form)

        toast = toasts.drain()[-1]
        assert toast.title == "Pedido realizado!"
        assert toast.description == "Você receberá seu pedido em breve."

    def test_result_is_remembered(self, submitter, checkout_form):
        result = submitter.submit(checkout_form)
        assert submitter.last_result is result
        assert not submitter.is_busy

    def test_prices_are_captured_at_submission(self, catalog, order_store, messenger, checkout_form):
        cart = CartStore()
        cart.add_item(catalog.add("Margherita", "32.00", menu_item_id="pizza-m"))
        catalog.add("Margherita", "45.00", menu_item_id="pizza-m")

        result = CheckoutSubmitter(cart, order_store=order_store, messenger=messenger).submit(checkout_form)

        assert order_store.lines[result.order_id][0].unit_price == Decimal("32.00")
        assert result.total == Decimal("32.00")


class TestValidationFailure:
    def test_invalid_form_returns_to_idle(self, submitter, cart, order_store, checkout_form):
        checkout_form["name"] = "J"

        with pytest.raises(CheckoutValidationError) as exc:
            submitter.submit(checkout_form)

        assert exc.value.messages == {"name": ["Nome deve ter pelo menos 2 caracteres"]}
        assert submitter.state is CheckoutState.IDLE
        assert order_store.calls == []
        assert cart.total_items == 3

    def test_numeric_payment_method_is_a_field_error(self, submitter, order_store, checkout_form):
        checkout_form["payment_method"] = 1

        with pytest.raises(CheckoutValidationError) as exc:
            submitter.submit(checkout_form)

        assert exc.value.messages == {"payment_method": ["Forma de pagamento inválida"]}
        assert submitter.state is CheckoutState.IDLE
        assert order_store.calls == []


class TestEmptyCart:
    def test_empty_cart_is_rejected(self, order_store, messenger, toasts, checkout_form):
        submitter = CheckoutSubmitter(CartStore(), order_store=order_store, messenger=messenger, toaster=toasts)

        with pytest.raises(EmptyCartError):
            submitter.submit(checkout_form)

        assert submitter.state is CheckoutState.IDLE
        assert order_store.calls == []
        toast = toasts.drain()[-1]
        assert toast.title == "Carrinho vazio"
        assert toast.description == "Adicione itens antes de finalizar o pedido."
        assert toast.variant == DESTRUCTIVE

    def test_cart_emptied_after_adding_is_rejected(self, submitter, cart, order_store, checkout_form):
        cart.clear()
        with pytest.raises(EmptyCartError):
            submitter.submit(checkout_form)
        assert order_store.calls == []


class TestHeaderFailure:
    def test_header_failure_leaves_cart_untouched(self, submitter, cart, order_store, messenger, checkout_form):
        order_store.configure(header_should_succeed=False)

        with pytest.raises(OrderSubmissionError) as exc:
            submitter.submit(checkout_form)

        assert exc.value.order_id is None
        assert submitter.state is CheckoutState.FAILED
        assert cart.total_items == 3
        assert [call["method"] for call in order_store.calls] == ["create_order_header"]
        assert messenger.sent == []

    def test_failure_toast(self, submitter, order_store, toasts, checkout_form):
        order_store.configure(header_should_succeed=False)

        with pytest.raises(OrderSubmissionError):
            submitter.submit(checkout_form)

        toast = toasts.drain()[-1]
        assert toast.title == "Erro ao fazer pedido"
        assert toast.description == "Tente novamente mais tarde."
        assert toast.variant == DESTRUCTIVE


class TestLinesFailure:
    def test_partial_write_leaves_orphaned_header(self, submitter, cart, order_store, messenger, checkout_form):
        order_store.configure(lines_should_succeed=False)

        with pytest.raises(OrderSubmissionError) as exc:
            submitter.submit(checkout_form)

        assert exc.value.order_id is not None
        assert order_store.orphaned_headers() == [exc.value.order_id]
        assert submitter.state is CheckoutState.FAILED
        assert cart.total_items == 3
        assert messenger.sent == []

    def test_retry_after_failure_succeeds(self, submitter, cart, order_store, checkout_form):
        order_store.configure(lines_should_succeed=False)
        with pytest.raises(OrderSubmissionError):
            submitter.submit(checkout_form)

        order_store.configure()
        result = submitter.submit(checkout_form)

        assert submitter.state is CheckoutState.SUCCEEDED
        assert result.total == Decimal("99.00")
        assert cart.total_items == 0

    def test_submission_errors_are_checkout_errors(self):
        assert issubclass(OrderSubmissionError, CheckoutError)
        assert issubclass(EmptyCartError, CheckoutError)
        assert issubclass(CheckoutValidationError, CheckoutError)
        assert issubclass(SubmissionInProgressError, CheckoutError)


class TestHandoffOrdering:
    def test_cart_is_cleared_only_after_the_handoff(self, cart, order_store, toasts, checkout_form):
        class CartWatchingMessenger(FakeMessenger):
            def __init__(self, watched):
                super().__init__()
                self.watched = watched
                self.seen = []

            def dispatch(self, destination, text):
                self.seen.append(
                    (self.watched.total_items, [(line.menu_item_id, line.quantity) for line in self.watched.lines])
                )
                return super().dispatch(destination, text)

        messenger = CartWatchingMessenger(cart)
        submitter = CheckoutSubmitter(cart, order_store=order_store, messenger=messenger, toaster=toasts)

        submitter.submit(checkout_form)

        assert messenger.seen == [(3, [("pizza-margherita", 2), ("pizza-calabresa", 1)])]
        assert cart.total_items == 0
        assert cart.lines == ()


class TestHandoffFailure:
    def test_order_still_succeeds(self, submitter, cart, messenger, checkout_form):
        messenger.configure(should_succeed=False)

        result = submitter.submit(checkout_form)

        assert submitter.state is CheckoutState.SUCCEEDED
        assert result.handoff is None
        assert result.handoff_url is None
        assert cart.total_items == 0


class TestReentry:
    def test_submit_while_busy_is_rejected(self, submitter, cart, order_store, checkout_form):
        submitter.state = CheckoutState.SUBMITTING

        with pytest.raises(SubmissionInProgressError):
            submitter.submit(checkout_form)

        assert submitter.state is CheckoutState.SUBMITTING
        assert order_store.calls == []
        assert cart.total_items == 3

    def test_nested_submit_during_persistence_is_rejected(self, cart, messenger, checkout_form):
        rejected = []

        class ReentrantStore(FakeOrderStore):
            def create_order_header(self, header):
                try:
                    submitter.submit(checkout_form)
                except SubmissionInProgressError as exc:
                    rejected.append(exc)
                return super().create_order_header(header)

        store = ReentrantStore()
        submitter = CheckoutSubmitter(cart, order_store=store, messenger=messenger)
        submitter.submit(checkout_form)

        assert len(rejected) == 1
        assert len(store.headers) == 1
        assert submitter.state is CheckoutState.SUCCEEDED

    def test_new_attempt_starts_from_idle_after_success(self, submitter, checkout_form):
        submitter.submit(checkout_form)
        submitter.reset()
        assert submitter.state is CheckoutState.IDLE

    def test_unexpected_header_error_is_a_submission_failure(self, cart, messenger, toasts, checkout_form):
        class BrokenStore(FakeOrderStore):
            def create_order_header(self, header):
                raise RuntimeError("connection reset")

        submitter = CheckoutSubmitter(cart, order_store=BrokenStore(), messenger=messenger, toaster=toasts)

        with pytest.raises(OrderSubmissionError) as exc:
            submitter.submit(checkout_form)

        assert exc.value.order_id is None
        assert isinstance(exc.value.__cause__, RuntimeError)
        assert submitter.state is CheckoutState.FAILED
        assert not submitter.is_busy
        assert cart.total_items == 3
        assert toasts.drain()[-1].title == "Erro ao fazer pedido"

    def test_unexpected_lines_error_is_logged_as_orphan(self, cart, messenger, toasts, checkout_form):
        class BrokenLinesStore(FakeOrderStore):
            def create_order_lines(self, order_id, lines):
                raise RuntimeError("socket closed")

        store = BrokenLinesStore()
        submitter = CheckoutSubmitter(cart, order_store=store, messenger=messenger, toaster=toasts)

        with patch("ordering.checkout.submitter.logger") as mock_logger:
            with pytest.raises(OrderSubmissionError) as exc:
                submitter.submit(checkout_form)

        order_id = exc.value.order_id
        assert store.orphaned_headers() == [order_id]
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "Order header written without lines"
        assert mock_logger.error.call_args.kwargs["order_id"] == order_id
        assert submitter.state is CheckoutState.FAILED
        assert cart.total_items == 3
        assert messenger.sent == []
        toast = toasts.drain()[-1]
        assert toast.title == "Erro ao fazer pedido"
        assert toast.variant == DESTRUCTIVE


class TestAdapterResolution:
    def test_adapters_come_from_the_factories(self, cart, order_store, messenger, checkout_form, monkeypatch):
        monkeypatch.delenv("WHATSAPP_NUMBER", raising=False)
        submitter = CheckoutSubmitter(cart)

        result = submitter.submit(checkout_form)

        assert result.order_id in order_store.headers
        assert messenger.sent[0]["destination"] == "5511999999999"

    def test_destination_from_environment(self, cart, order_store, messenger, checkout_form, monkeypatch):
        monkeypatch.setenv("WHATSAPP_NUMBER", "5521988887777")
        CheckoutSubmitter(cart).submit(checkout_form)
        assert messenger.sent[0]["destination"] == "5521988887777"
