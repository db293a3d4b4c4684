from .api import (
    DepositAgentResponse,
    RequireDepositAgentDependency,
    acquire_host_credential,
    build_host_auth_router,
)

__all__ = [
    "DepositAgentResponse",
    "RequireDepositAgentDependency",
    "acquire_host_credential",
    "build_host_auth_router",
]
