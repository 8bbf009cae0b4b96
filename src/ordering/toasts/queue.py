"""Toast queue: collects a session's toasts until the next response drains them."""

from dataclasses import asdict, dataclass

from ordering.toasts.port import DEFAULT, ToastPort


@dataclass(frozen=True)
class Toast:
    title: str
    description: str
    variant: str = DEFAULT

    def to_dict(self) -> dict:
        return asdict(self)


class ToastQueue(ToastPort):
    """In-memory toast adapter, one per shopping session."""

    def __init__(self) -> None:
        self._pending: list[Toast] = []

    def show(self, title: str, description: str, variant: str = DEFAULT) -> None:
        self._pending.append(Toast(title=title, description=description, variant=variant))

    @property
    def pending(self) -> list[Toast]:
        return list(self._pending)

    def drain(self) -> list[Toast]:
        """Return and forget every pending toast, oldest first."""
        drained, self._pending = self._pending, []
        return drained
