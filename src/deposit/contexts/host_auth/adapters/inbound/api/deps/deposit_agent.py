from fastapi import HTTPException
from starlette.requests import Request

from deposit.contexts.host_auth.application.ports.host_credential_decoder import (
    HostCredentialDecodeError,
    HostCredentialDecoder,
)
from deposit.contexts.host_auth.domain.value_objects import AgentIdentifier

from .host_credential import acquire_host_credential

AUTHENTICATION_FAILED_DETAIL = {
    "error": "authentication_failed",
    "message": "Authentication failed",
}


class RequireDepositAgentDependency:
    """
    RequireDepositAgentDependency — FastAPI dependency resolving decoded deposit agent.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/application/ports/host_credential_decoder.py
      - src/deposit/contexts/host_auth/adapters/inbound/api/deps/host_credential.py
      - src/deposit/contexts/host_auth/adapters/inbound/api/routes/host_auth.py
    """

    def __init__(self, *, decoder: HostCredentialDecoder) -> None:
        """
        Initialize dependency with credential decoder port.

        Args:
            decoder: Host credential decoder.
        Returns:
            None.
        Assumptions:
            Decoder is stateless and safe to share between requests.
        Raises:
            ValueError: If decoder is missing.
        Side Effects:
            None.
        """
        if decoder is None:  # type: ignore[truthy-bool]
            raise ValueError("RequireDepositAgentDependency requires decoder")
        self._decoder = decoder

    def __call__(self, request: Request) -> AgentIdentifier:
        """
        Resolve agent identifier from request Authorization header.

        Args:
            request: FastAPI HTTP request.
        Returns:
            AgentIdentifier: Decoded agent identifier.
        Assumptions:
            Every failure maps to one 401 payload so the failing stage is not disclosed.
        Raises:
            HTTPException: 401 with uniform payload when credential is absent or invalid.
        Side Effects:
            None.
        """
        credential = acquire_host_credential(request=request)
        if credential is None:
            raise HTTPException(status_code=401, detail=dict(AUTHENTICATION_FAILED_DETAIL))
        try:
            return self._decoder.decode(credential=credential)
        except HostCredentialDecodeError as error:
            raise HTTPException(
                status_code=401,
                detail=dict(AUTHENTICATION_FAILED_DETAIL),
            ) from error
