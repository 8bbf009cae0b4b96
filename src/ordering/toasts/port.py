"""Toast port: transient, non-blocking notices shown to the shopper."""

from abc import ABC, abstractmethod

DEFAULT = "default"
DESTRUCTIVE = "destructive"


class ToastPort(ABC):
    """Abstract interface for user notification adapters."""

    @abstractmethod
    def show(self, title: str, description: str, variant: str = DEFAULT) -> None:
        """Show a notice. Must never raise for presentation reasons."""
        ...
