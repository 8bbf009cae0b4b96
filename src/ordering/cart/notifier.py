"""Cart notifier: turns cart events into transient toasts for the shopper."""

from ordering.cart.events import CartItemAdded, CartItemIncremented
from ordering.toasts.port import ToastPort


class CartNotifier:
    """Cart store subscriber announcing additions to the cart.

    Only additions are announced; removals and quantity changes happen in
    the cart panel where the shopper already sees the result.
    """

    def __init__(self, toaster: ToastPort) -> None:
        self.toaster = toaster

    def __call__(self, event) -> None:
        if isinstance(event, CartItemIncremented):
            self.toaster.show(
                "Quantidade atualizada",
                f"{event.name} agora tem {event.quantity} unidades",
            )
        elif isinstance(event, CartItemAdded):
            self.toaster.show(
                "Adicionado ao carrinho",
                f"{event.name} foi adicionada ao carrinho",
            )
