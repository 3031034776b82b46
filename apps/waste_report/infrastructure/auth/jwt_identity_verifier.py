"""JWT Identity Verifier (python-jose).

Bearer 토큰의 서명/만료/audience/issuer를 검증하고 sub 클레임을 사용자 ID로 반환합니다.
"""

from __future__ import annotations

import logging

from jose import JWTError, jwt

from waste_report.application.common.exceptions import UnauthorizedError
from waste_report.application.common.ports import IdentityVerifier, UserIdentity

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def strip_bearer(authorization: str | None) -> str | None:
    """`Authorization` 헤더에서 토큰 추출 (scheme 없는 토큰 허용). 비어 있으면 None."""
    if not authorization:
        return None
    value = authorization.strip()
    scheme, _, credentials = value.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        value = credentials.strip()
    return value or None


class JwtIdentityVerifier(IdentityVerifier):
    """대칭키 JWT 검증기."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        audience: str | None = None,
        issuer: str | None = None,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._audience = audience
        self._issuer = issuer

    async def verify(self, token: str) -> UserIdentity:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={"verify_aud": self._audience is not None},
            )
        except JWTError as exc:
            logger.info("jwt_verification_failed", extra={"error": str(exc)})
            raise UnauthorizedError("Invalid authorization") from exc

        user_id = payload.get("sub")
        if not user_id:
            raise UnauthorizedError("Invalid authorization")

        return UserIdentity(
            user_id=str(user_id),
            email=payload.get("email"),
            role=payload.get("role"),
        )
