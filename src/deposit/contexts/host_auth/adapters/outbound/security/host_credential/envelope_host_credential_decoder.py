from __future__ import annotations

import base64
import binascii
import logging

from deposit.contexts.host_auth.application.ports.host_credential_decoder import (
    HostCredentialDecodeError,
    HostCredentialDecoder,
)
from deposit.contexts.host_auth.domain.value_objects import AgentIdentifier

from .aes_cbc_rsa_oaep_decryption_chain import decrypt_key_material, decrypt_message
from .agent_payload_extractor import extract_agent_identifier
from .auth_envelope_decoder import decode_auth_envelope
from .credential_header_parser import decode_credential_field, parse_host_credential
from .sha3_hmac_integrity_verifier import verify_integrity

log = logging.getLogger(__name__)


class EnvelopeHostCredentialDecoder(HostCredentialDecoder):
    """
    EnvelopeHostCredentialDecoder — verify-then-decrypt pipeline for host shell credentials.

    Stages run strictly forward: header, envelope, integrity, AES-CBC, RSA-OAEP, payload.
    The first failing stage aborts the rest.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/application/ports/host_credential_decoder.py
      - src/deposit/contexts/host_auth/application/use_cases/resolve_deposit_redirect.py
      - apps/api/wiring/modules/host_auth.py
    """

    def __init__(self, *, envelope_b64: str) -> None:
        """
        Initialize decoder with configured base64 envelope blob.

        Args:
            envelope_b64: Value of `HOST_AUTH_ENVELOPE_B64`; may be empty in dev.
        Returns:
            None.
        Assumptions:
            Envelope is server-held configuration and never comes from the request.
            Length is checked per call so that an empty dev envelope denies every request.
        Raises:
            ValueError: If envelope is not valid base64.
        Side Effects:
            None.
        """
        normalized_envelope_b64 = envelope_b64.strip()
        try:
            base64.b64decode(normalized_envelope_b64, validate=True)
        except (binascii.Error, ValueError) as error:
            raise ValueError("HOST_AUTH_ENVELOPE_B64 must be valid base64") from error
        self._envelope_b64 = normalized_envelope_b64

    def decode(self, *, credential: str) -> AgentIdentifier:
        """
        Run full decode pipeline and return recovered agent identifier.

        Args:
            credential: Raw `ENC Key="…", Signature="…"` string.
        Returns:
            AgentIdentifier: Identifier from decrypted payload.
        Assumptions:
            Every call decodes from scratch; nothing is cached between calls.
        Raises:
            HostCredentialDecodeError: Subclass naming the first failing stage.
        Side Effects:
            Writes one WARNING log line with stage and code on failure.
        """
        try:
            agent_id = self._run_pipeline(credential=credential)
        except HostCredentialDecodeError as error:
            log.warning(
                "host credential decode failed stage=%s code=%s",
                error.stage,
                error.code,
            )
            raise

        log.debug("host credential decoded agent_id_length=%s", len(agent_id.value))
        return agent_id

    def _run_pipeline(self, *, credential: str) -> AgentIdentifier:
        """
        Execute ordered pipeline stages without logging.

        Args:
            credential: Raw credential string.
        Returns:
            AgentIdentifier: Identifier from decrypted payload.
        Assumptions:
            Integrity check precedes any decryption.
        Raises:
            HostCredentialDecodeError: Subclass naming the failing stage.
        Side Effects:
            None.
        """
        host_credential = parse_host_credential(credential=credential)
        auth_key = decode_credential_field(value=host_credential.auth_key_b64, field_name="Key")
        message = decode_credential_field(
            value=host_credential.message_b64,
            field_name="Signature",
        )

        envelope = decode_auth_envelope(envelope_b64=self._envelope_b64)
        verify_integrity(envelope=envelope, auth_key=auth_key)

        key_material = decrypt_key_material(envelope=envelope, auth_key=auth_key)
        payload = decrypt_message(key_material=key_material, message=message)
        return extract_agent_identifier(payload=payload)
