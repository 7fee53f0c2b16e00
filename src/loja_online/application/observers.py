"""Creation observers.

The default observer turns each ``CreationEvent`` into one structured log
line. Callers that need the events themselves (tests, audit trails) can pass
a ``RecordingObserver`` or any callable instead.
"""

from loja_online.domain.pipeline import CreationEvent
from loja_online.shared.logging import get_logger, sanitize_for_log

LOGGER_NAME = "application.factories"


def log_creation(event: CreationEvent) -> None:
    """Write the diagnostic line for a successful creation.

    Personal data is masked here as well, so the line is safe even when
    logging was never configured with the LGPD processor.
    """
    get_logger(LOGGER_NAME).info(event.name, **sanitize_for_log(dict(event.fields)))


class RecordingObserver:
    """Observer that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[CreationEvent] = []

    def __call__(self, event: CreationEvent) -> None:
        self.events.append(event)

    @property
    def last(self) -> CreationEvent | None:
        return self.events[-1] if self.events else None


def silent(event: CreationEvent) -> None:
    """Observer that ignores the event."""
