"""Application layer error types.

Expected business failures travel as ``DomainError`` values inside
``Failure``. Anything else (database unreachable, hashing backend failure)
is an infrastructure fault: it is logged and re-raised as
``AuthOperationError`` carrying the operation name, chained to the
original exception.

Exports:
    AuthOperationError: Infrastructure fault wrapped with operation context
    infrastructure_guard: Context manager applying that wrapping
"""

from collections.abc import Iterator
from contextlib import contextmanager

from ipauth.domain.protocols import LoggerProtocol


class AuthOperationError(Exception):
    """Unexpected failure while running an auth operation.

    Attributes:
        operation: Name of the operation that failed (e.g., "login").
    """

    def __init__(self, operation: str, message: str | None = None) -> None:
        self.operation = operation
        super().__init__(message or f"Auth operation '{operation}' failed")


@contextmanager
def infrastructure_guard(operation: str, logger: LoggerProtocol) -> Iterator[None]:
    """Wrap unexpected exceptions raised inside the block.

    Example:
        with infrastructure_guard("login", self._logger):
            account = await self._account_repo.find_by_email(cmd.email)

    Raises:
        AuthOperationError: Chained to whatever the block raised.
    """
    try:
        yield
    except AuthOperationError:
        raise
    except Exception as e:
        logger.error("auth_operation_failed", error=e, operation=operation)
        raise AuthOperationError(operation, f"Auth operation '{operation}' failed: {e}") from e
