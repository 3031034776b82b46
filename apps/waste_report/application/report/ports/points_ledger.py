"""Points Ledger Port."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PointsLedger(ABC):
    """EcoPoints 적립 포트.

    동시성 보장(원자적 증가)은 구현체의 책임입니다.
    """

    @abstractmethod
    async def increment(self, user_id: str, delta: int) -> None:
        """사용자 포인트 증가."""
        raise NotImplementedError
