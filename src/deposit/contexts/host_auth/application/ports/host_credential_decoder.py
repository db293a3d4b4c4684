from __future__ import annotations

from typing import Protocol

from deposit.contexts.host_auth.domain.value_objects import AgentIdentifier


class HostCredentialDecodeError(ValueError):
    """
    HostCredentialDecodeError — base error of the host credential decode pipeline.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        envelope_host_credential_decoder.py
      - src/deposit/contexts/host_auth/application/use_cases/resolve_deposit_redirect.py
      - src/deposit/contexts/host_auth/adapters/inbound/api/deps/deposit_agent.py
    """

    code: str = "decode_failed"
    stage: str = "pipeline"

    def __init__(self, *, message: str) -> None:
        """
        Initialize decode error with deterministic message.

        Args:
            message: Human-readable failure description without secret material.
        Returns:
            None.
        Assumptions:
            `code` and `stage` are class-level constants of concrete subclasses.
        Raises:
            None.
        Side Effects:
            None.
        """
        super().__init__(message)
        self.message = message


class MalformedHeaderError(HostCredentialDecodeError):
    """Credential does not match `ENC Key="…", Signature="…"` or a field is not base64."""

    code = "malformed_header"
    stage = "header"


class EnvelopeTooShortError(HostCredentialDecodeError):
    """Configured envelope is not base64 or is shorter than `IV || tag`."""

    code = "envelope_too_short"
    stage = "envelope"


class IntegrityMismatchError(HostCredentialDecodeError):
    """Recomputed envelope tag differs from the embedded one."""

    code = "integrity_mismatch"
    stage = "integrity"


class SymmetricDecryptFailedError(HostCredentialDecodeError):
    """AES-CBC decrypt, unpadding or UTF-8 decoding of key material failed."""

    code = "symmetric_decrypt_failed"
    stage = "symmetric_decrypt"


class AsymmetricDecryptFailedError(HostCredentialDecodeError):
    """Recovered key did not load as RSA or OAEP decryption of the message failed."""

    code = "asymmetric_decrypt_failed"
    stage = "asymmetric_decrypt"


class IdentifierNotFoundError(HostCredentialDecodeError):
    """Decrypted payload is not a JSON object with a recognised identifier field."""

    code = "identifier_not_found"
    stage = "payload"


class HostCredentialDecoder(Protocol):
    """
    HostCredentialDecoder — port turning a raw host credential into an agent identifier.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        envelope_host_credential_decoder.py
      - src/deposit/contexts/host_auth/application/use_cases/resolve_deposit_redirect.py
      - src/deposit/contexts/host_auth/adapters/inbound/api/deps/deposit_agent.py
    """

    def decode(self, *, credential: str) -> AgentIdentifier:
        """
        Verify and decrypt credential and return the agent identifier it carries.

        Args:
            credential: Raw `ENC Key="…", Signature="…"` string.
        Returns:
            AgentIdentifier: Recovered agent identifier.
        Assumptions:
            Implementations are pure and hold no per-call state.
        Raises:
            HostCredentialDecodeError: Concrete subclass naming the failed stage.
        Side Effects:
            None.
        """
        ...
