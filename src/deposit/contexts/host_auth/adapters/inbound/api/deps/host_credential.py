from __future__ import annotations

from starlette.requests import Request

HOST_CREDENTIAL_HEADER = "authorization"


def acquire_host_credential(*, request: Request) -> str | None:
    """
    Read raw host credential from the single supported source, the Authorization header.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - src/deposit/contexts/host_auth/adapters/inbound/api/deps/deposit_agent.py
      - src/deposit/contexts/host_auth/adapters/inbound/api/routes/host_auth.py

    Args:
        request: Inbound HTTP request from host shell web view.
    Returns:
        str | None: Header value verbatim, or None when header is absent or blank.
    Assumptions:
        Cookies and query parameters are never consulted.
    Raises:
        None.
    Side Effects:
        None.
    """
    value = request.headers.get(HOST_CREDENTIAL_HEADER)
    if value is None or not value.strip():
        return None
    return value
