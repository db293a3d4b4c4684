from .deps import RequireDepositAgentDependency, acquire_host_credential
from .routes import DepositAgentResponse, build_host_auth_router

__all__ = [
    "DepositAgentResponse",
    "RequireDepositAgentDependency",
    "acquire_host_credential",
    "build_host_auth_router",
]
