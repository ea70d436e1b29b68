import functools
import logging

from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError

from src.app.services.errors import DuplicateRecordError, StoreUnavailableError

logger = logging.getLogger(__name__)


def translate_store_errors(func):
    """Map SQLAlchemy driver failures onto the application's store exceptions"""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except IntegrityError as exc:
            raise DuplicateRecordError(str(exc.orig)) from exc
        except (OperationalError, InterfaceError) as exc:
            logger.error(f"Store unavailable in {func.__qualname__}: {exc.orig}")
            raise StoreUnavailableError("Credential store is unavailable") from exc

    return wrapper
