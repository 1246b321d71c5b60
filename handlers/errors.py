"""
handlers/errors.py
------------------
Request logging and error translation for gRPC servicer methods.
This is the only place domain and storage errors become status codes.
"""

from functools import wraps
from typing import Callable

import grpc
from google.protobuf import text_format

from models.errors import NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


def translate_errors(internal_message: str, not_found_code: grpc.StatusCode = grpc.StatusCode.NOT_FOUND):
    """
    Decorator that logs each request and maps exceptions to gRPC statuses.

    Usage:
        @translate_errors("Failed to delete card")
        def DeleteCard(self, request, context):
            ...

    Behavior:
        - NotFoundError aborts with `not_found_code`. NOT_FOUND carries the
          error text; any other code carries `internal_message`.
        - Every other exception is logged with its traceback and aborts
          with INTERNAL and `internal_message`; the raw error is never sent.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(self, request, context: grpc.ServicerContext):
            logger.info(f"[Request] {func.__name__}")
            logger.debug(f"[Request] {func.__name__}: {text_format.MessageToString(request, as_one_line=True)}")
            try:
                return func(self, request, context)
            except NotFoundError as e:
                logger.info(f"{func.__name__}: {e}")
                details = str(e) if not_found_code == grpc.StatusCode.NOT_FOUND else internal_message
                context.abort(not_found_code, details)
            except Exception:
                logger.exception(f"{func.__name__}: {internal_message}")
                context.abort(grpc.StatusCode.INTERNAL, internal_message)

        return wrapper

    return decorator
