from .host_auth import (
    HostAuthRuntimeSettings,
    build_host_auth_router_from_environ,
    resolve_host_auth_runtime_settings,
)

__all__ = [
    "HostAuthRuntimeSettings",
    "build_host_auth_router_from_environ",
    "resolve_host_auth_runtime_settings",
]
