from .application import (
    AsymmetricDecryptFailedError,
    DepositRedirect,
    EnvelopeTooShortError,
    HostCredentialDecodeError,
    HostCredentialDecoder,
    IdentifierNotFoundError,
    IntegrityMismatchError,
    MalformedHeaderError,
    ResolveDepositRedirectUseCase,
    SymmetricDecryptFailedError,
)
from .domain import AgentIdentifier, AuthEnvelope, DepositRoute, HostCredential

__all__ = [
    "AgentIdentifier",
    "AsymmetricDecryptFailedError",
    "AuthEnvelope",
    "DepositRedirect",
    "DepositRoute",
    "EnvelopeTooShortError",
    "HostCredential",
    "HostCredentialDecodeError",
    "HostCredentialDecoder",
    "IdentifierNotFoundError",
    "IntegrityMismatchError",
    "MalformedHeaderError",
    "ResolveDepositRedirectUseCase",
    "SymmetricDecryptFailedError",
]
