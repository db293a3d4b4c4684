"""
Composition helpers for host-auth API module.

Docs: docs/architecture/host_auth/host-auth-credential-decode-v1.md
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from fastapi import APIRouter

from deposit.contexts.host_auth.adapters.inbound.api.deps import RequireDepositAgentDependency
from deposit.contexts.host_auth.adapters.inbound.api.routes import build_host_auth_router
from deposit.contexts.host_auth.adapters.outbound import EnvelopeHostCredentialDecoder
from deposit.contexts.host_auth.application.use_cases import ResolveDepositRedirectUseCase

log = logging.getLogger(__name__)

_ENV_NAME_KEY = "DEPOSIT_ENV"
_HOST_AUTH_FAIL_FAST_KEY = "HOST_AUTH_FAIL_FAST"
_HOST_AUTH_ENVELOPE_B64_KEY = "HOST_AUTH_ENVELOPE_B64"
_HOST_AUTH_NOT_FOUND_PATH_KEY = "HOST_AUTH_NOT_FOUND_PATH"
_ALLOWED_ENVS = ("dev", "prod", "test")
_DEFAULT_NOT_FOUND_PATH = "/not-found"


@dataclass(frozen=True, slots=True)
class HostAuthRuntimeSettings:
    """
    HostAuthRuntimeSettings — runtime policy for host-auth wiring.

    Docs:
      - docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related:
      - apps/api/wiring/modules/host_auth.py
      - apps/api/main/app.py
      - src/deposit/contexts/host_auth/adapters/outbound/security/host_credential/
        envelope_host_credential_decoder.py
    """

    env_name: str
    fail_fast: bool
    envelope_b64: str
    not_found_path: str

    def __post_init__(self) -> None:
        """
        Validate host-auth runtime settings invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Values are normalized by resolver before dataclass construction.
        Raises:
            ValueError: If one of invariants is violated.
        Side Effects:
            None.
        """
        if self.env_name not in _ALLOWED_ENVS:
            raise ValueError(
                f"HostAuthRuntimeSettings.env_name must be one of {_ALLOWED_ENVS}, "
                f"got {self.env_name!r}"
            )
        if self.fail_fast and not self.envelope_b64:
            raise ValueError("HostAuthRuntimeSettings.envelope_b64 must be set when fail_fast")
        if not self.not_found_path.startswith("/"):
            raise ValueError("HostAuthRuntimeSettings.not_found_path must be an absolute path")

    def __repr__(self) -> str:
        return (
            "HostAuthRuntimeSettings("
            f"env_name={self.env_name!r}, fail_fast={self.fail_fast!r}, "
            f"envelope_b64=<{len(self.envelope_b64)} chars>, "
            f"not_found_path={self.not_found_path!r})"
        )


def build_host_auth_router_from_environ(*, environ: Mapping[str, str]) -> APIRouter:
    """
    Build fully wired host-auth router from environment settings.

    Docs: docs/architecture/host_auth/host-auth-credential-decode-v1.md
    Related: deposit.contexts.host_auth.adapters.inbound.api.routes,
      deposit.contexts.host_auth.adapters.outbound,
      apps.api.main.app

    Args:
        environ: Runtime environment mapping.
    Returns:
        APIRouter: Host-auth router with decoder, use-case and dependency wired.
    Assumptions:
        One decoder instance is shared by redirect use-case and agent dependency.
    Raises:
        ValueError: If settings are invalid or the envelope is not base64.
    Side Effects:
        Writes WARNING log when envelope is missing and fail-fast is disabled.
    """
    settings = resolve_host_auth_runtime_settings(environ=environ)
    if not settings.envelope_b64:
        log.warning(
            "host auth envelope missing env=%s key=%s; every credential will be rejected",
            settings.env_name,
            _HOST_AUTH_ENVELOPE_B64_KEY,
        )

    decoder = EnvelopeHostCredentialDecoder(envelope_b64=settings.envelope_b64)
    resolve_redirect = ResolveDepositRedirectUseCase(
        decoder=decoder,
        not_found_path=settings.not_found_path,
    )
    deposit_agent_dependency = RequireDepositAgentDependency(decoder=decoder)

    return build_host_auth_router(
        resolve_redirect=resolve_redirect,
        deposit_agent_dependency=deposit_agent_dependency,
    )


def resolve_host_auth_runtime_settings(*, environ: Mapping[str, str]) -> HostAuthRuntimeSettings:
    """
    Resolve host-auth runtime settings with fail-fast policy and defaults.

    Args:
        environ: Runtime environment mapping.
    Returns:
        HostAuthRuntimeSettings: Validated normalized settings.
    Assumptions:
        Missing `DEPOSIT_ENV` defaults to `dev`.
    Raises:
        ValueError: If env values are invalid or fail-fast policy requires missing envelope.
    Side Effects:
        None.
    """
    env_name = _resolve_env_name(environ=environ)
    fail_fast = _resolve_fail_fast(environ=environ, env_name=env_name)
    envelope_b64 = environ.get(_HOST_AUTH_ENVELOPE_B64_KEY, "").strip()

    if fail_fast and not envelope_b64:
        raise ValueError(
            f"{_HOST_AUTH_ENVELOPE_B64_KEY} must be set when {_HOST_AUTH_FAIL_FAST_KEY}=true"
        )

    not_found_path = (
        environ.get(_HOST_AUTH_NOT_FOUND_PATH_KEY, "").strip() or _DEFAULT_NOT_FOUND_PATH
    )
    return HostAuthRuntimeSettings(
        env_name=env_name,
        fail_fast=fail_fast,
        envelope_b64=envelope_b64,
        not_found_path=not_found_path,
    )


def _resolve_env_name(*, environ: Mapping[str, str]) -> str:
    """
    Resolve normalized runtime env name for host-auth wiring.

    Args:
        environ: Runtime environment mapping.
    Returns:
        str: One of `dev`, `prod`, or `test`.
    Assumptions:
        Missing value defaults to `dev`.
    Raises:
        ValueError: If value is outside allowed list.
    Side Effects:
        None.
    """
    raw_env_name = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if raw_env_name not in _ALLOWED_ENVS:
        raise ValueError(f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env_name!r}")
    return raw_env_name


def _resolve_fail_fast(*, environ: Mapping[str, str], env_name: str) -> bool:
    """
    Resolve fail-fast policy for host-auth startup validation.

    Args:
        environ: Runtime environment mapping.
        env_name: Normalized environment name.
    Returns:
        bool: Effective fail-fast flag.
    Assumptions:
        Default is enabled for `prod` and disabled for `dev`/`test`.
    Raises:
        ValueError: If override value is not parseable as boolean.
    Side Effects:
        None.
    """
    raw_override = environ.get(_HOST_AUTH_FAIL_FAST_KEY, "").strip()
    if not raw_override:
        return env_name == "prod"
    return _parse_bool(raw_value=raw_override, key=_HOST_AUTH_FAIL_FAST_KEY)


def _parse_bool(*, raw_value: str, key: str) -> bool:
    """
    Parse strict boolean env value from known textual literals.

    Args:
        raw_value: Raw env string value.
        key: Env key used in error messages.
    Returns:
        bool: Parsed boolean value.
    Assumptions:
        Accepted true values: `1,true,yes,on`; false values: `0,false,no,off`.
    Raises:
        ValueError: If value is not recognized.
    Side Effects:
        None.
    """
    normalized = raw_value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(
        f"{key} must be a boolean literal (1/0/true/false/yes/no/on/off), got {raw_value!r}"
    )
