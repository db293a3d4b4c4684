from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AgentIdentifier:
    """
    AgentIdentifier — opaque deposit agent id recovered from a host credential.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        agent_payload_extractor.py
      - src/deposit/contexts/host_auth/application/use_cases/resolve_deposit_redirect.py
      - src/deposit/contexts/host_auth/domain/value_objects/deposit_route.py
    """

    value: str

    def __post_init__(self) -> None:
        """
        Validate agent identifier is a non-blank string.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Identifier content is opaque and is never normalized beyond blank check.
        Raises:
            ValueError: If value is not a string or is blank.
        Side Effects:
            None.
        """
        if not isinstance(self.value, str):
            raise ValueError("AgentIdentifier value must be str")
        if not self.value.strip():
            raise ValueError("AgentIdentifier value must be non-empty")

    def __str__(self) -> str:
        """
        Return raw identifier text.

        Args:
            None.
        Returns:
            str: Identifier value as recovered from payload.
        Assumptions:
            Value was validated in constructor.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self.value
