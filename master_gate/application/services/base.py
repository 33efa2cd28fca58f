"""Base service logging mixin.

Every service binds its class name once and each operation binds its own
name plus the current correlation ID.

Usage:
    class MyService(LoggingMixin):
        def __init__(self, dependency: SomePort) -> None:
            self._dependency = dependency
            self._init_logger()

        async def do_something(self) -> None:
            log = self._log_operation("do_something", item_id="123")
            log.info("operation_started")
"""

import structlog

from master_gate.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Mixin providing structured, correlated logging for services.

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "master") -> None:
        """Bind the service name and component. Call from __init__."""
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Return a logger bound to one operation and the correlation ID.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind.
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )
