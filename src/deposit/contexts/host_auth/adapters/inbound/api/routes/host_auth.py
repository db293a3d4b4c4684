from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from starlette.requests import Request
from starlette.responses import RedirectResponse

from deposit.contexts.host_auth.adapters.inbound.api.deps import (
    RequireDepositAgentDependency,
    acquire_host_credential,
)
from deposit.contexts.host_auth.application.use_cases import ResolveDepositRedirectUseCase
from deposit.contexts.host_auth.domain.value_objects import AgentIdentifier


class DepositAgentResponse(BaseModel):
    """
    DepositAgentResponse — decoded deposit agent returned to the web front end.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/adapters/inbound/api/deps/deposit_agent.py
      - src/deposit/contexts/host_auth/domain/value_objects/agent_identifier.py
    """

    agent_id: str


def build_host_auth_router(
    *,
    resolve_redirect: ResolveDepositRedirectUseCase,
    deposit_agent_dependency: RequireDepositAgentDependency,
) -> APIRouter:
    """
    Build host-auth router with credential decode redirect and current-agent endpoints.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/application/use_cases/resolve_deposit_redirect.py
      - src/deposit/contexts/host_auth/adapters/inbound/api/deps/deposit_agent.py
      - apps/api/wiring/modules/host_auth.py

    Args:
        resolve_redirect: Use-case mapping credential and route slug to redirect target.
        deposit_agent_dependency: FastAPI dependency resolving decoded agent.
    Returns:
        APIRouter: Configured host-auth router.
    Assumptions:
        Both collaborators share one decoder instance.
    Raises:
        ValueError: If collaborators are missing.
    Side Effects:
        None.
    """
    if resolve_redirect is None:  # type: ignore[truthy-bool]
        raise ValueError("build_host_auth_router requires resolve_redirect")
    if deposit_agent_dependency is None:  # type: ignore[truthy-bool]
        raise ValueError("build_host_auth_router requires deposit_agent_dependency")

    router = APIRouter(tags=["host-auth"])

    @router.get("/auth/decode", response_class=RedirectResponse, response_model=None)
    def get_auth_decode(
        request: Request,
        payment_method: str | None = Query(default=None, alias="paymentMethod"),
    ) -> RedirectResponse:
        """
        Decode Authorization header credential and redirect into deposit flow.

        Args:
            request: Inbound request carrying Authorization header.
            payment_method: Deposit route slug (`ewallet`, `vabank`, `qris`, `retail`).
        Returns:
            RedirectResponse: 302 to `/<route>/<agent id>` or to the not-found path.
        Assumptions:
            Failure reason is never exposed in the response.
        Raises:
            None.
        Side Effects:
            None.
        """
        redirect = resolve_redirect.resolve(
            credential=acquire_host_credential(request=request),
            payment_method=payment_method,
        )
        return RedirectResponse(url=redirect.location, status_code=302)

    @router.get("/auth/agent", response_model=DepositAgentResponse)
    def get_auth_agent(
        agent_id: AgentIdentifier = Depends(deposit_agent_dependency),
    ) -> DepositAgentResponse:
        """
        Return decoded deposit agent for request credential.

        Args:
            agent_id: Agent identifier resolved by dependency.
        Returns:
            DepositAgentResponse: Agent id payload.
        Assumptions:
            Dependency already rejected invalid credentials with 401.
        Raises:
            HTTPException: 401 from dependency.
        Side Effects:
            None.
        """
        return DepositAgentResponse(agent_id=str(agent_id))

    return router
