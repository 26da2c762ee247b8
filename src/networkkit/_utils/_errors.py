import logging
from typing import Any, Dict, Tuple

import httpx
from pydantic import ValidationError

from ..models.errors import DecodingErrorCause, NetworkError, NetworkErrorKind

logger = logging.getLogger(__name__)

_CAUSE_LABELS: Dict[DecodingErrorCause, str] = {
    DecodingErrorCause.TYPE_MISMATCH: "Type mismatch",
    DecodingErrorCause.VALUE_NOT_FOUND: "Value not found",
    DecodingErrorCause.KEY_NOT_FOUND: "Coding key not found",
    DecodingErrorCause.DATA_CORRUPTED: "Data corrupted",
    DecodingErrorCause.OTHER: "Decoding error",
}


def classify_exception(error: BaseException) -> NetworkError:
    """Turn an exception raised while talking to the HTTP engine into a NetworkError.

    Timeouts are reported as REQUEST_TIMEOUT. Every other failure, transport
    level or not, is reported as UNKNOWN.

    Args:
        error: The exception raised by the engine or the pipeline.

    Returns:
        NetworkError: The classified error.
    """
    if isinstance(error, httpx.TimeoutException):
        logger.debug("Request timed out: %r", error)
        return NetworkError.of(NetworkErrorKind.REQUEST_TIMEOUT)

    if isinstance(error, httpx.TransportError):
        logger.debug("Transport failure: %r", error)
    else:
        logger.debug("Unexpected failure during fetch", exc_info=error)
    return NetworkError.of(NetworkErrorKind.UNKNOWN)


def decoding_error_cause(error: BaseException) -> Tuple[DecodingErrorCause, str, str]:
    """Work out why decoding failed.

    Returns:
        tuple: The cause, the underlying message and the dotted location of
        the failing value (empty when unknown).
    """
    if isinstance(error, ValidationError):
        errors = error.errors()
        if not errors:
            return DecodingErrorCause.OTHER, str(error), ""
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        return _cause_for(first), first.get("msg", str(error)), location

    if isinstance(error, (ValueError, UnicodeDecodeError)):
        return DecodingErrorCause.DATA_CORRUPTED, str(error), ""

    return DecodingErrorCause.OTHER, str(error), ""


def _cause_for(detail: Dict[str, Any]) -> DecodingErrorCause:
    error_type: str = detail.get("type", "")
    if error_type == "missing":
        return DecodingErrorCause.KEY_NOT_FOUND
    if error_type in ("json_invalid", "json_type"):
        return DecodingErrorCause.DATA_CORRUPTED
    if error_type.endswith(("_type", "_parsing")):
        if detail.get("input", ...) is None:
            return DecodingErrorCause.VALUE_NOT_FOUND
        return DecodingErrorCause.TYPE_MISMATCH
    return DecodingErrorCause.OTHER


def handle_decoding_error(error: BaseException) -> NetworkError:
    """Turn a codec decode failure into a DECODING_FAILED NetworkError.

    The specific cause and location are logged for diagnostics. Callers only
    ever see the DECODING_FAILED kind.
    """
    cause, detail, location = decoding_error_cause(error)
    logger.debug("%s: %s", _CAUSE_LABELS[cause], detail)
    if location:
        logger.debug("codingPath: %s", location)

    message = f"{_CAUSE_LABELS[cause]}: {detail}"
    if location:
        message = f"{message} (at '{location}')"
    return NetworkError(NetworkErrorKind.DECODING_FAILED, message)
