from .aes_cbc_rsa_oaep_decryption_chain import decrypt_key_material, decrypt_message
from .agent_payload_extractor import AGENT_ID_FIELDS, extract_agent_identifier
from .auth_envelope_decoder import decode_auth_envelope
from .credential_header_parser import decode_credential_field, parse_host_credential
from .envelope_host_credential_decoder import EnvelopeHostCredentialDecoder
from .sha3_hmac_integrity_verifier import (
    HMAC_BLOCK_SIZE,
    compute_integrity_tag,
    derive_verification_key,
    verify_integrity,
)

__all__ = [
    "AGENT_ID_FIELDS",
    "HMAC_BLOCK_SIZE",
    "EnvelopeHostCredentialDecoder",
    "compute_integrity_tag",
    "decode_auth_envelope",
    "decode_credential_field",
    "decrypt_key_material",
    "decrypt_message",
    "derive_verification_key",
    "extract_agent_identifier",
    "parse_host_credential",
    "verify_integrity",
]
