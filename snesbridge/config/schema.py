"""Marshmallow schema for ClientConfig validation."""

from __future__ import annotations

from typing import Any, Dict
from urllib.parse import urlsplit

from marshmallow import Schema, ValidationError, fields, post_load, pre_load, validate, validates_schema

from ..const import (
    ALLOWED_URL_SCHEMES,
    DEFAULT_ADDRESS,
    DEFAULT_CLOSE_REASON,
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_LOG_SYSLOG,
    DEFAULT_RECEIVE_BUFFER_SIZE,
    DEFAULT_TIMEOUT,
)
from .model import ClientConfig

# RFC 6455 leaves 123 bytes for the close reason after the status code.
MAX_CLOSE_REASON_BYTES = 123


class ClientConfigSchema(Schema):
    """Declarative validation schema for the SNES bridge client."""

    # Connection
    address = fields.Str(load_default=DEFAULT_ADDRESS, validate=validate.Length(min=1))
    timeout = fields.Float(
        load_default=DEFAULT_TIMEOUT,
        validate=validate.Range(min=0.0, min_inclusive=False),
    )
    receive_buffer_size = fields.Int(
        load_default=DEFAULT_RECEIVE_BUFFER_SIZE,
        validate=validate.Range(min=1),
    )
    origin = fields.Str(load_default=None, allow_none=True)
    close_reason = fields.Str(load_default=DEFAULT_CLOSE_REASON)

    # Logging
    debug_logging = fields.Bool(load_default=DEFAULT_DEBUG_LOGGING)
    log_syslog = fields.Bool(load_default=DEFAULT_LOG_SYSLOG)

    @pre_load
    def strip_strings(self, data: Dict[str, Any], **kwargs: Any) -> Dict[str, Any]:
        cleaned = dict(data)
        address = cleaned.get("address")
        if isinstance(address, str):
            cleaned["address"] = address.strip()
        origin = cleaned.get("origin")
        if isinstance(origin, str):
            # An empty origin means "send no Origin header".
            cleaned["origin"] = origin.strip() or None
        return cleaned

    @validates_schema
    def validate_address(self, data: Dict[str, Any], **kwargs: Any) -> None:
        parts = urlsplit(data["address"])
        if parts.scheme not in ALLOWED_URL_SCHEMES:
            raise ValidationError(
                f"address must use one of {sorted(ALLOWED_URL_SCHEMES)}, got '{parts.scheme}'",
                field_name="address",
            )
        if not parts.netloc:
            raise ValidationError("address must include a host", field_name="address")

    @validates_schema
    def validate_close_reason(self, data: Dict[str, Any], **kwargs: Any) -> None:
        if len(data["close_reason"].encode("utf-8")) > MAX_CLOSE_REASON_BYTES:
            raise ValidationError(
                f"close_reason must fit in {MAX_CLOSE_REASON_BYTES} bytes",
                field_name="close_reason",
            )

    @post_load
    def make_config(self, data: Dict[str, Any], **kwargs: Any) -> ClientConfig:
        return ClientConfig(**data)
