"""Customer details captured by the checkout form."""

from collections.abc import Mapping

from protean.exceptions import ValidationError
from protean.fields import String

from ordering.checkout.errors import CheckoutValidationError
from ordering.domain import ordering
from ordering.order.order import PAYMENT_METHOD_LABELS, PaymentMethod

FIELDS = ("name", "phone", "address", "notes", "payment_method")

MIN_LENGTHS = {"name": 2, "phone": 10, "address": 10}

# Per-field messages, as (too short / missing, too long)
FIELD_MESSAGES = {
    "name": ("Nome deve ter pelo menos 2 caracteres", "Nome deve ter no máximo 100 caracteres"),
    "phone": ("Telefone inválido", "Telefone inválido"),
    "address": ("Endereço deve ser mais detalhado", "Endereço deve ter no máximo 500 caracteres"),
    "notes": (None, "Observações devem ter no máximo 500 caracteres"),
    "payment_method": ("Selecione a forma de pagamento", "Forma de pagamento inválida"),
}


@ordering.value_object
class CustomerDetails:
    """Who the order is for, where it goes and how it will be paid."""

    name: String(required=True, min_length=MIN_LENGTHS["name"], max_length=100)
    phone: String(required=True, min_length=MIN_LENGTHS["phone"], max_length=20)
    address: String(required=True, min_length=MIN_LENGTHS["address"], max_length=500)
    notes: String(max_length=500)
    payment_method: String(required=True, choices=PaymentMethod)

    @property
    def payment_label(self) -> str:
        return PAYMENT_METHOD_LABELS[self.payment_method]


def normalize_form(form: Mapping) -> dict:
    """Trim the raw form values; blank notes become None."""
    data = {}
    for field in FIELDS:
        value = form.get(field)
        if isinstance(value, str):
            value = value.strip()
        data[field] = value

    if not data["notes"]:
        data["notes"] = None
    if isinstance(data["payment_method"], PaymentMethod):
        data["payment_method"] = data["payment_method"].value
    elif isinstance(data["payment_method"], str) and data["payment_method"]:
        data["payment_method"] = data["payment_method"].lower().replace("-", "_")
    return data


def _message_for(field: str, value) -> str:
    too_short, too_long = FIELD_MESSAGES[field]
    if field == "payment_method":
        return too_long if value else too_short
    if too_short and (not value or len(str(value)) < MIN_LENGTHS[field]):
        return too_short
    return too_long


def validate_customer_details(form) -> CustomerDetails:
    """Build a CustomerDetails from a raw form.

    Raises:
        CheckoutValidationError: with one message per failing field.
    """
    if isinstance(form, CustomerDetails):
        return form

    data = normalize_form(form)
    try:
        return CustomerDetails(**data)
    except ValidationError as exc:
        messages = {
            field: [_message_for(field, data.get(field))] for field in exc.messages if field in FIELD_MESSAGES
        }
        raise CheckoutValidationError(messages or dict(exc.messages)) from exc
