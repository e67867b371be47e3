"""Base service class for domain services."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError

from discuss.domain.error import InternalFailureError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate storage exceptions raised inside the block.

    Domain errors pass through untouched; anything raised by SQLAlchemy
    becomes an InternalFailureError so callers only see classified errors.

    Args:
        operation: Name of the operation, recorded on the error
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Storage failure", operation=operation, error=str(e))
        raise InternalFailureError(operation) from e
