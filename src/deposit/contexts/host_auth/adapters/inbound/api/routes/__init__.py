from .host_auth import DepositAgentResponse, build_host_auth_router

__all__ = [
    "DepositAgentResponse",
    "build_host_auth_router",
]
