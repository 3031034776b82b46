"""Identity Verifier Port - 토큰 검증."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class UserIdentity:
    """검증된 사용자 정보."""

    user_id: str
    email: str | None = None
    role: str | None = None


class IdentityVerifier(ABC):
    """Bearer 토큰 검증 Port.

    인증 방식 자체는 외부 협력자의 책임이며,
    이 서비스는 검증된 사용자 식별자만 필요로 합니다.
    """

    @abstractmethod
    async def verify(self, token: str) -> UserIdentity:
        """토큰 검증.

        Args:
            token: Bearer 토큰 (scheme 제외)

        Returns:
            검증된 사용자 정보

        Raises:
            UnauthorizedError: 토큰이 유효하지 않은 경우
        """
        raise NotImplementedError
