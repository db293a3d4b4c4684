from __future__ import annotations

from enum import Enum
from typing import Mapping
from urllib.parse import quote

from deposit.contexts.host_auth.domain.value_objects.agent_identifier import AgentIdentifier


class DepositRoute(str, Enum):
    """
    DepositRoute — payment-method deposit flow a decoded agent is redirected into.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/application/use_cases/resolve_deposit_redirect.py
      - src/deposit/contexts/host_auth/adapters/inbound/api/routes/host_auth.py
    """

    EWALLET = "ewallet"
    VA_BANK = "vabank"
    QRIS = "qris"
    RETAIL = "retail"

    @classmethod
    def from_slug(cls, slug: str) -> DepositRoute:
        """
        Resolve canonical deposit route from request slug or one of its aliases.

        Args:
            slug: Raw `paymentMethod` query value.
        Returns:
            DepositRoute: Canonical route.
        Assumptions:
            Matching is case-insensitive and ignores surrounding whitespace.
        Raises:
            ValueError: If slug is unknown.
        Side Effects:
            None.
        """
        normalized = slug.strip().lower()
        route = _ROUTE_BY_SLUG.get(normalized)
        if route is None:
            raise ValueError(f"Unknown deposit route slug: {slug!r}")
        return route

    def build_path(self, *, agent_id: AgentIdentifier) -> str:
        """
        Build redirect path `/<route>/<agent id>` for decoded agent.

        Args:
            agent_id: Decoded agent identifier.
        Returns:
            str: Absolute path with URL-quoted agent id segment.
        Assumptions:
            Agent id is opaque and may contain path-unsafe characters.
        Raises:
            None.
        Side Effects:
            None.
        """
        return f"/{self.value}/{quote(str(agent_id), safe='')}"


_ROUTE_BY_SLUG: Mapping[str, DepositRoute] = {
    "ewallet": DepositRoute.EWALLET,
    "e-wallet": DepositRoute.EWALLET,
    "vabank": DepositRoute.VA_BANK,
    "va-bank": DepositRoute.VA_BANK,
    "va": DepositRoute.VA_BANK,
    "qris": DepositRoute.QRIS,
    "retail": DepositRoute.RETAIL,
}
