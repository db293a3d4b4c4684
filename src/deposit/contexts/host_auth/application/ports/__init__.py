from .host_credential_decoder import (
    AsymmetricDecryptFailedError,
    EnvelopeTooShortError,
    HostCredentialDecodeError,
    HostCredentialDecoder,
    IdentifierNotFoundError,
    IntegrityMismatchError,
    MalformedHeaderError,
    SymmetricDecryptFailedError,
)

__all__ = [
    "AsymmetricDecryptFailedError",
    "EnvelopeTooShortError",
    "HostCredentialDecodeError",
    "HostCredentialDecoder",
    "IdentifierNotFoundError",
    "IntegrityMismatchError",
    "MalformedHeaderError",
    "SymmetricDecryptFailedError",
]
