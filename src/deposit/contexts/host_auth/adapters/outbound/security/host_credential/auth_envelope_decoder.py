from __future__ import annotations

import base64
import binascii

from deposit.contexts.host_auth.application.ports.host_credential_decoder import (
    EnvelopeTooShortError,
)
from deposit.contexts.host_auth.domain.value_objects import ENVELOPE_HEADER_LENGTH, AuthEnvelope


def decode_auth_envelope(*, envelope_b64: str) -> AuthEnvelope:
    """
    Decode configured envelope blob and split it into IV, tag and ciphertext.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/domain/value_objects/auth_envelope.py
      - apps/api/wiring/modules/host_auth.py

    Args:
        envelope_b64: Base64 envelope from `HOST_AUTH_ENVELOPE_B64`.
    Returns:
        AuthEnvelope: Fixed-offset envelope fields.
    Assumptions:
        Length is checked before any cryptographic operation runs.
    Raises:
        EnvelopeTooShortError: If blob is not base64 or shorter than 80 bytes.
    Side Effects:
        None.
    """
    try:
        raw = base64.b64decode(envelope_b64.strip(), validate=True)
    except (binascii.Error, ValueError) as error:
        raise EnvelopeTooShortError(message="Auth envelope must be valid base64") from error

    if len(raw) < ENVELOPE_HEADER_LENGTH:
        raise EnvelopeTooShortError(
            message=f"Auth envelope must be at least {ENVELOPE_HEADER_LENGTH} bytes",
        )
    return AuthEnvelope.from_bytes(raw)
