from .ports import (
    AsymmetricDecryptFailedError,
    EnvelopeTooShortError,
    HostCredentialDecodeError,
    HostCredentialDecoder,
    IdentifierNotFoundError,
    IntegrityMismatchError,
    MalformedHeaderError,
    SymmetricDecryptFailedError,
)
from .use_cases import DepositRedirect, ResolveDepositRedirectUseCase

__all__ = [
    "AsymmetricDecryptFailedError",
    "DepositRedirect",
    "EnvelopeTooShortError",
    "HostCredentialDecodeError",
    "HostCredentialDecoder",
    "IdentifierNotFoundError",
    "IntegrityMismatchError",
    "MalformedHeaderError",
    "ResolveDepositRedirectUseCase",
    "SymmetricDecryptFailedError",
]
