"""
FastAPI application factory for deposit host-auth API.
"""

from __future__ import annotations

import os
from typing import Mapping

from fastapi import FastAPI

from apps.api.wiring.modules import build_host_auth_router_from_environ


def create_app(*, environ: Mapping[str, str] | None = None) -> FastAPI:
    """
    Build FastAPI app with host-auth module wired at startup.

    Docs: docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related: apps.api.wiring.modules.host_auth,
      deposit.contexts.host_auth.adapters.inbound.api.routes.host_auth

    Args:
        environ: Optional environment mapping override.
    Returns:
        FastAPI: Application instance with registered routers.
    Assumptions:
        Module wiring performs fail-fast validation before first request.
    Raises:
        ValueError: If host-auth runtime settings are invalid.
    Side Effects:
        None.
    """
    effective_environ = os.environ if environ is None else environ

    app = FastAPI(
        title="Deposit Host Auth API",
        version="1.0.0",
    )
    app.include_router(build_host_auth_router_from_environ(environ=effective_environ))
    return app


app = create_app()
