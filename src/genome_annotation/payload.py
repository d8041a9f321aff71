"""Reading and writing ``get_mrna_by_gene`` payloads as JSON text."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from .models import WIRE_KEYS, InputsGetMrnaByGene

logger = logging.getLogger(__name__)

__all__ = ["PayloadError", "PayloadException", "load_payload", "dump_payload"]


@dataclass
class PayloadError:
    """Structured information about a payload that could not be read."""

    message: str
    error_type: str = "invalid_payload"
    exit_code: int = 1
    details: Optional[str] = None


class PayloadException(Exception):
    """Exception that carries structured error information."""

    def __init__(self, error: PayloadError):
        self.error = error
        super().__init__(error.message)


def load_payload(text: str) -> InputsGetMrnaByGene:
    """Parse JSON ``text`` into call parameters.

    Raises:
        PayloadException: If ``text`` is not JSON, is not a JSON object, or
            does not match the declared fields.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Payload is not valid JSON: {e}")
        raise PayloadException(
            PayloadError(
                message="Payload is not valid JSON",
                error_type="invalid_json",
                details=str(e),
            )
        ) from e

    if not isinstance(data, dict):
        logger.error(f"Payload is a JSON {type(data).__name__}, not an object")
        raise PayloadException(
            PayloadError(
                message="Payload must be a JSON object",
                details=f"got {type(data).__name__}",
            )
        )

    try:
        return InputsGetMrnaByGene.from_wire(data)
    except ValidationError as e:
        logger.error(f"Payload failed validation: {e.error_count()} error(s)")
        raise PayloadException(
            PayloadError(
                message="Payload does not match inputs_get_mrna_by_gene",
                error_type="validation_error",
                details=str(e),
            )
        ) from e


def dump_payload(
    params: InputsGetMrnaByGene,
    indent: Optional[int] = None,
    sort_extensions: bool = False,
) -> str:
    """Render ``params`` as wire JSON text.

    Declared fields always come first; with ``sort_extensions`` the extension
    properties follow in key order instead of insertion order. ``indent`` is
    passed to :func:`json.dumps` as is: ``None`` gives a single line and ``0``
    puts each member on its own line without indentation.
    """
    wire: dict[str, Any] = params.to_wire()
    if sort_extensions:
        named = {k: v for k, v in wire.items() if k in WIRE_KEYS}
        extra = {k: wire[k] for k in sorted(wire) if k not in WIRE_KEYS}
        wire = {**named, **extra}
    return json.dumps(wire, indent=indent)
