from __future__ import annotations

import logging
from dataclasses import dataclass

from deposit.contexts.host_auth.application.ports.host_credential_decoder import (
    HostCredentialDecodeError,
    HostCredentialDecoder,
)
from deposit.contexts.host_auth.domain.value_objects import AgentIdentifier, DepositRoute

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DepositRedirect:
    """
    DepositRedirect — redirect target produced for one inbound host request.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/application/use_cases/resolve_deposit_redirect.py
      - src/deposit/contexts/host_auth/adapters/inbound/api/routes/host_auth.py
    """

    location: str
    agent_id: AgentIdentifier | None = None
    failure_code: str | None = None

    @property
    def succeeded(self) -> bool:
        """
        Tell whether redirect points to a deposit flow.

        Args:
            None.
        Returns:
            bool: True when an agent identifier was recovered.
        Assumptions:
            Failed redirects never carry an agent identifier.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self.agent_id is not None


class ResolveDepositRedirectUseCase:
    """
    ResolveDepositRedirectUseCase — decode host credential and pick deposit flow redirect.

    Every failure, whatever the stage, yields the same not-found redirect.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/application/ports/host_credential_decoder.py
      - src/deposit/contexts/host_auth/domain/value_objects/deposit_route.py
      - src/deposit/contexts/host_auth/adapters/inbound/api/routes/host_auth.py
    """

    def __init__(self, *, decoder: HostCredentialDecoder, not_found_path: str) -> None:
        """
        Initialize use-case with decoder port and failure redirect path.

        Args:
            decoder: Host credential decoder port.
            not_found_path: Absolute path used for every failed resolution.
        Returns:
            None.
        Assumptions:
            Not-found path is a local absolute path.
        Raises:
            ValueError: If decoder is missing or path is not absolute.
        Side Effects:
            None.
        """
        if decoder is None:  # type: ignore[truthy-bool]
            raise ValueError("ResolveDepositRedirectUseCase requires decoder")
        normalized_path = not_found_path.strip()
        if not normalized_path.startswith("/"):
            raise ValueError("ResolveDepositRedirectUseCase requires absolute not_found_path")

        self._decoder = decoder
        self._not_found_path = normalized_path

    def resolve(self, *, credential: str | None, payment_method: str | None) -> DepositRedirect:
        """
        Resolve redirect for inbound credential and requested deposit route slug.

        Args:
            credential: Raw credential from Authorization header, if present.
            payment_method: Requested deposit route slug, if present.
        Returns:
            DepositRedirect: Deposit flow redirect or uniform not-found redirect.
        Assumptions:
            Route slug is validated before any decode work starts.
        Raises:
            None.
        Side Effects:
            Writes INFO log with failure code on failed resolution.
        """
        if not credential or not credential.strip():
            return self._not_found(failure_code="missing_credential")
        if not payment_method or not payment_method.strip():
            return self._not_found(failure_code="missing_payment_method")

        try:
            route = DepositRoute.from_slug(payment_method)
        except ValueError:
            return self._not_found(failure_code="unknown_payment_method")

        try:
            agent_id = self._decoder.decode(credential=credential)
        except HostCredentialDecodeError as error:
            return self._not_found(failure_code=error.code)

        return DepositRedirect(location=route.build_path(agent_id=agent_id), agent_id=agent_id)

    def _not_found(self, *, failure_code: str) -> DepositRedirect:
        log.info("deposit redirect denied reason=%s", failure_code)
        return DepositRedirect(location=self._not_found_path, failure_code=failure_code)
