from .value_objects import AgentIdentifier, AuthEnvelope, DepositRoute, HostCredential

__all__ = [
    "AgentIdentifier",
    "AuthEnvelope",
    "DepositRoute",
    "HostCredential",
]
