from __future__ import annotations

from dataclasses import dataclass

ENVELOPE_IV_LENGTH = 16
ENVELOPE_TAG_LENGTH = 64
ENVELOPE_HEADER_LENGTH = ENVELOPE_IV_LENGTH + ENVELOPE_TAG_LENGTH


@dataclass(frozen=True, slots=True)
class AuthEnvelope:
    """
    AuthEnvelope — fixed-layout `IV || tag || ciphertext` blob holding wrapped key material.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        auth_envelope_decoder.py
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        sha3_hmac_integrity_verifier.py
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        aes_cbc_rsa_oaep_decryption_chain.py
    """

    iv: bytes | memoryview
    tag: bytes | memoryview
    ciphertext: bytes | memoryview

    def __post_init__(self) -> None:
        """
        Validate fixed field lengths of the envelope layout.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Ciphertext may be empty; its validity is decided by integrity and cipher stages.
        Raises:
            ValueError: If IV or tag length differs from the layout constants.
        Side Effects:
            None.
        """
        if len(self.iv) != ENVELOPE_IV_LENGTH:
            raise ValueError(f"AuthEnvelope.iv must be {ENVELOPE_IV_LENGTH} bytes")
        if len(self.tag) != ENVELOPE_TAG_LENGTH:
            raise ValueError(f"AuthEnvelope.tag must be {ENVELOPE_TAG_LENGTH} bytes")

    @classmethod
    def from_bytes(cls, raw: bytes) -> AuthEnvelope:
        """
        Slice raw envelope bytes at fixed offsets 0, 16 and 80 without copying.

        Args:
            raw: Complete decoded envelope.
        Returns:
            AuthEnvelope: Envelope fields as read-only views over `raw`.
        Assumptions:
            Caller already checked `len(raw) >= ENVELOPE_HEADER_LENGTH`.
            `raw` is immutable, so the views never observe later changes.
        Raises:
            ValueError: If raw bytes are shorter than the fixed header.
        Side Effects:
            None.
        """
        if len(raw) < ENVELOPE_HEADER_LENGTH:
            raise ValueError(f"AuthEnvelope requires at least {ENVELOPE_HEADER_LENGTH} bytes")
        view = memoryview(raw)
        return cls(
            iv=view[:ENVELOPE_IV_LENGTH],
            tag=view[ENVELOPE_IV_LENGTH:ENVELOPE_HEADER_LENGTH],
            ciphertext=view[ENVELOPE_HEADER_LENGTH:],
        )

    def to_bytes(self) -> bytes:
        """
        Join envelope fields back into wire layout.

        Args:
            None.
        Returns:
            bytes: `iv + tag + ciphertext`.
        Assumptions:
            None.
        Raises:
            None.
        Side Effects:
            None.
        """
        return b"".join((self.iv, self.tag, self.ciphertext))
