from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.api.wiring.modules import build_host_auth_router_from_environ


def _client(*, envelope_b64: str) -> TestClient:
    """
    Build test client with host-auth router wired from explicit environment.

    Args:
        envelope_b64: Configured auth envelope.
    Returns:
        TestClient: Client for in-process app.
    Assumptions:
        `test` environment disables fail-fast.
    Raises:
        ValueError: If wiring settings are invalid.
    Side Effects:
        None.
    """
    app = FastAPI()
    app.include_router(
        build_host_auth_router_from_environ(
            environ={
                "DEPOSIT_ENV": "test",
                "HOST_AUTH_ENVELOPE_B64": envelope_b64,
            }
        )
    )
    return TestClient(app)


def test_decode_route_redirects_into_requested_deposit_flow(issue_credential) -> None:
    """
    Verify valid credential redirects to `/<route>/<agent id>` with 302.

    Args:
        issue_credential: Reference encoder fixture.
    Returns:
        None.
    Assumptions:
        None.
    Raises:
        AssertionError: If status or location differs.
    Side Effects:
        None.
    """
    issued = issue_credential(document={"idagen": "AG-001"})
    client = _client(envelope_b64=issued.envelope_b64)

    response = client.get(
        "/auth/decode",
        params={"paymentMethod": "va-bank"},
        headers={"Authorization": issued.credential},
        follow_redirects=False,
    )

    assert response.status_code == 302
    assert response.headers["location"] == "/vabank/AG-001"


def test_decode_route_redirects_failures_to_not_found(issue_credential) -> None:
    """
    Verify missing, malformed and tampered credentials share one not-found redirect.

    Args:
        issue_credential: Reference encoder fixture.
    Returns:
        None.
    Assumptions:
        Failure reason is never exposed to the client.
    Raises:
        AssertionError: If any failure leaks a different response.
    Side Effects:
        None.
    """
    issued = issue_credential()
    foreign = issue_credential(auth_key=bytes(range(1, 33)))
    client = _client(envelope_b64=issued.envelope_b64)

    cases = [
        ({}, {"paymentMethod": "qris"}),
        ({"Authorization": "Bearer abc"}, {"paymentMethod": "qris"}),
        ({"Authorization": foreign.credential}, {"paymentMethod": "qris"}),
        ({"Authorization": issued.credential}, {"paymentMethod": "cash"}),
        ({"Authorization": issued.credential}, {}),
    ]
    for headers, params in cases:
        response = client.get(
            "/auth/decode",
            params=params,
            headers=headers,
            follow_redirects=False,
        )
        assert response.status_code == 302
        assert response.headers["location"] == "/not-found"


def test_agent_route_returns_decoded_agent(issue_credential) -> None:
    """
    Verify agent endpoint returns recovered identifier as JSON.

    Args:
        issue_credential: Reference encoder fixture.
    Returns:
        None.
    Assumptions:
        None.
    Raises:
        AssertionError: If payload differs.
    Side Effects:
        None.
    """
    issued = issue_credential(document={"idmember": 1001})
    client = _client(envelope_b64=issued.envelope_b64)

    response = client.get("/auth/agent", headers={"Authorization": issued.credential})

    assert response.status_code == 200
    assert response.json() == {"agent_id": "1001"}


def test_agent_route_returns_uniform_401_for_any_failure(issue_credential) -> None:
    """
    Verify missing and invalid credentials produce identical 401 payloads.

    Args:
        issue_credential: Reference encoder fixture.
    Returns:
        None.
    Assumptions:
        None.
    Raises:
        AssertionError: If failure payloads differ.
    Side Effects:
        None.
    """
    issued = issue_credential()
    client = _client(envelope_b64=issued.envelope_b64)
    expected = {"detail": {"error": "authentication_failed", "message": "Authentication failed"}}

    missing = client.get("/auth/agent")
    malformed = client.get("/auth/agent", headers={"Authorization": "ENC nope"})
    tampered = client.get(
        "/auth/agent",
        headers={"Authorization": issue_credential(auth_key=bytes(32)).credential},
    )

    for response in (missing, malformed, tampered):
        assert response.status_code == 401
        assert response.json() == expected


def test_decode_route_denies_everything_without_configured_envelope(issue_credential) -> None:
    """
    Verify dev wiring without envelope redirects every request to not-found.

    Args:
        issue_credential: Reference encoder fixture.
    Returns:
        None.
    Assumptions:
        None.
    Raises:
        AssertionError: If request succeeds.
    Side Effects:
        None.
    """
    client = _client(envelope_b64="")

    response = client.get(
        "/auth/decode",
        params={"paymentMethod": "qris"},
        headers={"Authorization": issue_credential().credential},
        follow_redirects=False,
    )

    assert response.status_code == 302
    assert response.headers["location"] == "/not-found"
