"""Waste Classifier Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from waste_report.domain.value_objects import ClassificationResult


class WasteClassifier(ABC):
    """폐기물 분류 Port.

    휴리스틱 분류기와 실제 이미지 인식 모델이 같은 인터페이스로
    교체 가능하도록 Orchestrator는 이 Port에만 의존합니다.
    """

    @abstractmethod
    def classify(self, image: bytes, filename: str | None = None) -> ClassificationResult:
        """이미지 분류.

        Args:
            image: 디코딩된 이미지 바이트
            filename: 파일명 힌트 (optional)

        Returns:
            분류 결과. 구현체는 예외를 던지지 않고
            실패 시 GENERAL 결과를 반환해야 합니다.
        """
        raise NotImplementedError
