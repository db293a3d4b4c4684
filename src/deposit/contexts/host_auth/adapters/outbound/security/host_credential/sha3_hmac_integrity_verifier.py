from __future__ import annotations

import hashlib
import hmac

from deposit.contexts.host_auth.application.ports.host_credential_decoder import (
    IntegrityMismatchError,
)
from deposit.contexts.host_auth.domain.value_objects import AuthEnvelope

# Protocol constant shared with the credential issuer. Must not be taken from the
# digest object: the tag is defined over a 72-byte ipad/opad block.
HMAC_BLOCK_SIZE = 72

_IPAD_BYTE = 0x36
_OPAD_BYTE = 0x5C


def derive_verification_key(*, auth_key: bytes) -> bytes:
    """
    Derive the integrity verification key as binary SHA-512 of the auth key.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        envelope_host_credential_decoder.py

    Args:
        auth_key: Raw auth key decoded from credential `Key` field.
    Returns:
        bytes: 64-byte verification key.
    Assumptions:
        This is the only accepted derivation; hex or raw-key variants are never tried.
    Raises:
        None.
    Side Effects:
        None.
    """
    return hashlib.sha512(auth_key).digest()


def compute_integrity_tag(*, ciphertext: bytes, verification_key: bytes) -> bytes:
    """
    Compute HMAC-SHA3-512 tag over ciphertext with fixed 72-byte block size.

    Args:
        ciphertext: Envelope ciphertext bytes.
        verification_key: Key from `derive_verification_key`.
    Returns:
        bytes: 64-byte tag.
    Assumptions:
        Keys longer than `HMAC_BLOCK_SIZE` are first hashed with SHA3-512, then zero-padded.
    Raises:
        None.
    Side Effects:
        None.
    """
    key = verification_key
    if len(key) > HMAC_BLOCK_SIZE:
        key = hashlib.sha3_512(key).digest()
    key = key.ljust(HMAC_BLOCK_SIZE, b"\x00")

    inner_pad = bytes(byte ^ _IPAD_BYTE for byte in key)
    outer_pad = bytes(byte ^ _OPAD_BYTE for byte in key)

    inner = hashlib.sha3_512(inner_pad)
    inner.update(ciphertext)
    outer = hashlib.sha3_512(outer_pad)
    outer.update(inner.digest())
    return outer.digest()


def verify_integrity(*, envelope: AuthEnvelope, auth_key: bytes) -> None:
    """
    Recompute envelope tag and compare it with embedded tag in constant time.

    Args:
        envelope: Decoded envelope.
        auth_key: Raw auth key decoded from credential.
    Returns:
        None.
    Assumptions:
        Nothing downstream of this check runs unless tags match exactly.
        The issuer computes the tag over ciphertext only, so the IV is not covered:
        a tampered IV passes here and fails later in the symmetric or asymmetric
        stage because the first recovered plaintext block is corrupted.
    Raises:
        IntegrityMismatchError: If tags differ.
    Side Effects:
        None.
    """
    expected_tag = compute_integrity_tag(
        ciphertext=envelope.ciphertext,
        verification_key=derive_verification_key(auth_key=auth_key),
    )
    if not hmac.compare_digest(expected_tag, envelope.tag):
        raise IntegrityMismatchError(message="Auth envelope integrity tag verification failed")
