"""
Adapters package for host-auth bounded context.
"""

from .inbound import (
    DepositAgentResponse,
    RequireDepositAgentDependency,
    acquire_host_credential,
    build_host_auth_router,
)
from .outbound import EnvelopeHostCredentialDecoder

__all__ = [
    "DepositAgentResponse",
    "EnvelopeHostCredentialDecoder",
    "RequireDepositAgentDependency",
    "acquire_host_credential",
    "build_host_auth_router",
]
