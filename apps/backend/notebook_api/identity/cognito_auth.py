"""
===============================================================================
TARJETA CRC — identity/cognito_auth.py
===============================================================================

Módulo:
    Autenticación del caller con tokens de Cognito (JWT RS256)

Responsabilidades:
    - Verificar firma contra el JWKS del user pool (PyJWKClient con cache).
    - Validar issuer, exp, token_use (id | access) y, si está configurado,
      el client id de la app (aud en id tokens, client_id en access tokens).
    - Construir Caller(subject_id, email, principal=PrincipalRef(pool, sub)).
    - Exponer la dependencia FastAPI require_caller.

Colaboradores:
    - crosscutting.config.get_settings: user pool, región, client id.
    - crosscutting.error_responses: unauthorized estándar.
    - container.get_token_verifier: instancia cacheada del verificador.

Decisiones de diseño:
    - "Verifier" es puro y testeable (jwks_client inyectable).
    - El adapter FastAPI es mínimo: extrae header, verifica, setea request.state.
    - JWKS inaccesible es falla de dependencia (500), no credencial inválida.
===============================================================================
"""

from __future__ import annotations

from typing import Final

import jwt
from fastapi import Header, Request
from jwt import PyJWKClient
from jwt.exceptions import PyJWKClientConnectionError, PyJWKClientError

from ..crosscutting.error_responses import unauthorized
from ..crosscutting.exceptions import DependencyError
from ..crosscutting.logger import logger
from ..domain.entities import Caller
from ..domain.value_objects import PrincipalRef

JWT_ALGORITHM: Final[str] = "RS256"
_VALID_TOKEN_USE: Final[frozenset[str]] = frozenset({"id", "access"})

# Cache de claves del JWKS (segundos)
_JWKS_LIFESPAN_SECONDS: Final[int] = 600


def jwks_url_for(issuer: str) -> str:
    return f"{issuer}/.well-known/jwks.json"


def build_jwks_client(issuer: str) -> PyJWKClient:
    return PyJWKClient(
        jwks_url_for(issuer), cache_keys=True, lifespan=_JWKS_LIFESPAN_SECONDS
    )


class CognitoTokenVerifier:
    """Valida tokens de un user pool y devuelve el Caller."""

    def __init__(
        self,
        *,
        user_pool_id: str,
        issuer: str,
        client_id: str = "",
        jwks_client: PyJWKClient | None = None,
    ) -> None:
        self._user_pool_id = user_pool_id
        self._issuer = issuer
        self._client_id = (client_id or "").strip()
        self._jwks = jwks_client or build_jwks_client(issuer)

    def verify(self, token: str) -> Caller:
        try:
            signing_key = self._jwks.get_signing_key_from_jwt(token)
        except PyJWKClientConnectionError as exc:
            raise DependencyError(
                "JWKS endpoint unavailable.",
                service="cognito-jwks",
                operation="get_signing_key",
                original_error=exc,
            ) from exc
        except (PyJWKClientError, jwt.InvalidTokenError) as exc:
            raise unauthorized("Invalid token") from exc

        try:
            claims = jwt.decode(
                token,
                signing_key.key,
                algorithms=[JWT_ALGORITHM],
                issuer=self._issuer,
                options={
                    "require": ["sub", "exp", "iss", "token_use"],
                    # aud solo existe en id tokens; se valida abajo.
                    "verify_aud": False,
                },
            )
        except jwt.ExpiredSignatureError as exc:
            raise unauthorized("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise unauthorized("Invalid token") from exc

        token_use = claims.get("token_use")
        if token_use not in _VALID_TOKEN_USE:
            raise unauthorized("Invalid token")

        if self._client_id:
            app_client = claims.get("aud") if token_use == "id" else claims.get("client_id")
            if app_client != self._client_id:
                raise unauthorized("Invalid token")

        subject_id = str(claims["sub"])
        try:
            principal = PrincipalRef(
                directory_id=self._user_pool_id, subject_id=subject_id
            )
        except ValueError as exc:
            raise unauthorized("Invalid token") from exc

        return Caller(
            subject_id=subject_id,
            email=claims.get("email"),
            principal=principal,
        )


# ---------------------------------------------------------------------------
# Extracción de token
# ---------------------------------------------------------------------------


def _extract_bearer_token(authorization: str | None) -> str | None:
    """Extrae token desde `Authorization: Bearer <token>`."""
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


# ---------------------------------------------------------------------------
# Dependencia FastAPI
# ---------------------------------------------------------------------------


def require_caller(
    request: Request,
    authorization: str | None = Header(None, alias="Authorization"),
) -> Caller:
    """Dependency FastAPI: requiere un token de Cognito válido."""
    from ..container import get_token_verifier

    token = _extract_bearer_token(authorization)
    if not token:
        raise unauthorized("Authorization header missing")

    caller = get_token_verifier().verify(token)
    request.state.caller = caller
    logger.debug("caller authenticated", extra={"subject_id": caller.subject_id})
    return caller
