from __future__ import annotations

import base64
import binascii
import re

from deposit.contexts.host_auth.application.ports.host_credential_decoder import (
    MalformedHeaderError,
)
from deposit.contexts.host_auth.domain.value_objects import HostCredential

_CREDENTIAL_PATTERN = re.compile(r'ENC Key="(?P<key>[^"]*)", Signature="(?P<signature>[^"]*)"')


def parse_host_credential(*, credential: str) -> HostCredential:
    """
    Capture `Key` and `Signature` fields from raw host credential string.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/domain/value_objects/host_credential.py
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        envelope_host_credential_decoder.py

    Args:
        credential: Raw `ENC Key="<A>", Signature="<B>"` text.
    Returns:
        HostCredential: Both captured fields, verbatim.
    Assumptions:
        Field names, quoting and the `, ` separator are literal parts of the wire contract.
        Only whitespace around the whole credential is ignored.
    Raises:
        MalformedHeaderError: If the pattern does not match fully or a field is empty.
    Side Effects:
        None.
    """
    match = _CREDENTIAL_PATTERN.fullmatch(credential.strip())
    if match is None:
        raise MalformedHeaderError(
            message='Host credential must match ENC Key="...", Signature="..."',
        )

    auth_key_b64 = match.group("key")
    message_b64 = match.group("signature")
    if not auth_key_b64 or not message_b64:
        raise MalformedHeaderError(message="Host credential Key and Signature must be non-empty")
    return HostCredential(auth_key_b64=auth_key_b64, message_b64=message_b64)


def decode_credential_field(*, value: str, field_name: str) -> bytes:
    """
    Strictly base64-decode one captured credential field.

    Args:
        value: Base64 text captured by `parse_host_credential`.
        field_name: Field label for deterministic error message.
    Returns:
        bytes: Decoded field bytes.
    Assumptions:
        Issuer emits standard padded base64 alphabet.
    Raises:
        MalformedHeaderError: If value is not valid base64 or decodes to nothing.
    Side Effects:
        None.
    """
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as error:
        raise MalformedHeaderError(
            message=f"Host credential {field_name} must be valid base64",
        ) from error
    if not decoded:
        raise MalformedHeaderError(message=f"Host credential {field_name} decodes to empty bytes")
    return decoded
