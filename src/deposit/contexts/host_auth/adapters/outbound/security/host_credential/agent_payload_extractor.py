from __future__ import annotations

import json
import math
from typing import Any

from deposit.contexts.host_auth.application.ports.host_credential_decoder import (
    IdentifierNotFoundError,
)
from deposit.contexts.host_auth.domain.value_objects import AgentIdentifier

# Priority order: current field name first, then the legacy one.
AGENT_ID_FIELDS: tuple[str, ...] = ("idagen", "idmember")


def extract_agent_identifier(*, payload: bytes) -> AgentIdentifier:
    """
    Parse decrypted JSON payload and return first recognised agent identifier.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/domain/value_objects/agent_identifier.py
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        envelope_host_credential_decoder.py

    Args:
        payload: Plaintext bytes from OAEP decryption.
    Returns:
        AgentIdentifier: Identifier coerced to string.
    Assumptions:
        Fields are tried in `AGENT_ID_FIELDS` order; unusable values fall through.
    Raises:
        IdentifierNotFoundError: If payload is not a JSON object or has no usable field.
    Side Effects:
        None.
    """
    try:
        document = json.loads(
            payload.decode("utf-8"),
            parse_constant=_reject_non_standard_constant,
        )
    except ValueError as error:
        raise IdentifierNotFoundError(message="Decrypted payload is not valid JSON") from error

    if not isinstance(document, dict):
        raise IdentifierNotFoundError(message="Decrypted payload must be a JSON object")

    for field_name in AGENT_ID_FIELDS:
        value = _coerce_identifier(value=document.get(field_name))
        if value is not None:
            return AgentIdentifier(value)

    raise IdentifierNotFoundError(
        message=f"Decrypted payload has none of fields {', '.join(AGENT_ID_FIELDS)}",
    )


def _coerce_identifier(*, value: Any) -> str | None:
    """
    Convert scalar JSON value into identifier text, or None when unusable.

    Args:
        value: Raw JSON value of identifier field.
    Returns:
        str | None: Identifier text, or None for missing/empty/bool/non-scalar values.
    Assumptions:
        Bool is rejected explicitly because it is an int subclass.
        Non-finite floats (e.g. `1e400` overflowing to `inf`) are unusable.
    Raises:
        None.
    Side Effects:
        None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


def _reject_non_standard_constant(name: str) -> Any:
    """
    Reject `NaN`, `Infinity` and `-Infinity` literals accepted by `json` by default.

    Args:
        name: Literal text found in payload.
    Returns:
        Any: Never returns.
    Assumptions:
        Payload must be strict JSON.
    Raises:
        ValueError: Always.
    Side Effects:
        None.
    """
    raise ValueError(f"Non-standard JSON constant: {name}")
