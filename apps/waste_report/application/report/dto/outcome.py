"""Side Effect Outcome DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SideEffectOutcome:
    """Best-effort 부수효과(포인트 적립, 알림)의 실행 결과.

    실패는 로깅만 하고 응답에는 영향을 주지 않습니다.
    """

    name: str
    succeeded: bool
    error: str | None = None

    @classmethod
    def ok(cls, name: str) -> SideEffectOutcome:
        return cls(name=name, succeeded=True)

    @classmethod
    def failed(cls, name: str, error: str) -> SideEffectOutcome:
        return cls(name=name, succeeded=False, error=error)
