"""
Error taxonomy and request-body helpers shared by the services

Validation and lookup failures are returned as values by the service layer
and rendered by the routes; only unexpected faults travel as exceptions.
"""
from dataclasses import dataclass
from fastapi import Request
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional
import functools
import json
import logging

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Request body must be valid JSON."


@dataclass(frozen=True)
class ServiceError:
    """A failure that is reported to the client as ``{"message": ...}``"""
    message: str
    status_code: int = 500

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content={"message": self.message})


@dataclass(frozen=True)
class ValidationFailure(ServiceError):
    """Malformed client input"""
    status_code: int = 400


@dataclass(frozen=True)
class NotFound(ServiceError):
    """The addressed record does not exist"""
    status_code: int = 404


def guarded(message: str):
    """
    Turn any unexpected exception raised by a route into a 500 response

    Args:
        message: Fixed, client-facing message for the failed operation
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} failed: {e}", exc_info=True)
                return ServiceError(message).to_response()
        return wrapper
    return decorator


def _reject_constant(name: str):
    raise ValueError(f"Unsupported JSON constant: {name}")


async def read_json_body(request: Request) -> Optional[Dict[str, Any]]:
    """
    Read the request body as a JSON object

    An empty body, or a JSON document that is not an object, reads as ``{}``.
    Returns None when the body is not valid JSON.
    """
    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        return None
    except RecursionError:
        # Nested too deeply to be a flat object of fields
        return {}

    if not isinstance(payload, dict):
        return {}
    return payload
