from .agent_identifier import AgentIdentifier
from .auth_envelope import (
    ENVELOPE_HEADER_LENGTH,
    ENVELOPE_IV_LENGTH,
    ENVELOPE_TAG_LENGTH,
    AuthEnvelope,
)
from .deposit_route import DepositRoute
from .host_credential import HostCredential

__all__ = [
    "ENVELOPE_HEADER_LENGTH",
    "ENVELOPE_IV_LENGTH",
    "ENVELOPE_TAG_LENGTH",
    "AgentIdentifier",
    "AuthEnvelope",
    "DepositRoute",
    "HostCredential",
]
