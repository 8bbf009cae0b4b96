"""Human-readable order summary handed off to the restaurant."""

from ordering.cart.store import CartSnapshot
from ordering.checkout.details import CustomerDetails
from ordering.order.order import short_order_code
from ordering.shared.money import format_amount

__all__ = ["build_order_summary", "short_order_code"]


def build_order_summary(order_code: str, snapshot: CartSnapshot, details: CustomerDetails) -> str:
    """Render the order as a chat message.

    Built from the cart snapshot taken before submission, so it stays correct
    after the cart is cleared.
    """
    parts = [f"*Novo pedido #{order_code}*", ""]
    parts.extend(f"{line.quantity}x {line.name}: {format_amount(line.line_total)}" for line in snapshot.lines)
    parts += [
        "",
        f"Total: {format_amount(snapshot.total_price)}",
        f"Pagamento: {details.payment_label}",
        "",
        f"Cliente: {details.name}",
        f"Telefone: {details.phone}",
        f"Endereço: {details.address}",
    ]
    if details.notes:
        parts.append(f"Observações: {details.notes}")
    return "\n".join(parts)
