from .deposit_agent import AUTHENTICATION_FAILED_DETAIL, RequireDepositAgentDependency
from .host_credential import HOST_CREDENTIAL_HEADER, acquire_host_credential

__all__ = [
    "AUTHENTICATION_FAILED_DETAIL",
    "HOST_CREDENTIAL_HEADER",
    "RequireDepositAgentDependency",
    "acquire_host_credential",
]
