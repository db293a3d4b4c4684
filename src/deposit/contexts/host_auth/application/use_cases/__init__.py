from .resolve_deposit_redirect import DepositRedirect, ResolveDepositRedirectUseCase

__all__ = [
    "DepositRedirect",
    "ResolveDepositRedirectUseCase",
]
