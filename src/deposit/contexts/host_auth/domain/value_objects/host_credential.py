from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HostCredential:
    """
    HostCredential — two base64 fields captured from `ENC Key="…", Signature="…"`.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        credential_header_parser.py
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        envelope_host_credential_decoder.py
    """

    auth_key_b64: str
    message_b64: str

    def __post_init__(self) -> None:
        """
        Validate both captured fields are present.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Field content is kept verbatim; base64 decoding happens in the decoder.
        Raises:
            ValueError: If one of the fields is empty.
        Side Effects:
            None.
        """
        if not self.auth_key_b64:
            raise ValueError("HostCredential.auth_key_b64 must be non-empty")
        if not self.message_b64:
            raise ValueError("HostCredential.message_b64 must be non-empty")

    def __repr__(self) -> str:
        # Field values are per-request secrets.
        return "HostCredential(auth_key_b64=<redacted>, message_b64=<redacted>)"
