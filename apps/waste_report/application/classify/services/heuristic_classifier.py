"""Heuristic Waste Classifier.

이미지 인식 모델을 대신하는 키워드/파일명 기반 분류기입니다.
Port 의존성이 없는 순수 로직이며, 난수는 주입된 seed로 고정할 수 있습니다.
"""

from __future__ import annotations

import hashlib
import logging
import random
import re
from dataclasses import dataclass

from waste_report.application.classify.ports import WasteClassifier
from waste_report.domain.enums import WasteType
from waste_report.domain.value_objects import ClassificationResult

logger = logging.getLogger(__name__)

KEYWORD_WEIGHT = 0.15
FILENAME_WEIGHT = 0.30
BASE_WEIGHT = 0.10
MIN_MATCH_SCORE = 0.20
SCORE_BONUS_FACTOR = 0.05
MAX_CONFIDENCE = 0.98

DEFAULT_SIGNAL_WINDOW = 4096
DEFAULT_LARGE_PAYLOAD_BYTES = 500_000

COMPLEX_FALLBACK_TYPES = (WasteType.E_WASTE, WasteType.METAL, WasteType.GLASS)
SIMPLE_FALLBACK_TYPES = (WasteType.PLASTIC, WasteType.PAPER, WasteType.ORGANIC)
COMPLEX_CONFIDENCE_RANGE = (0.75, 0.90)
SIMPLE_CONFIDENCE_RANGE = (0.65, 0.85)
FAILURE_CONFIDENCE_RANGE = (0.50, 0.60)

_TOKEN_PATTERN = re.compile(r"[a-z0-9]+")
_SIGNAL_TOKEN_PATTERN = re.compile(r"[a-z]{3,}")


@dataclass(frozen=True)
class ClassificationRule:
    """분류 규칙."""

    waste_type: WasteType
    keywords: tuple[str, ...]
    filename_patterns: tuple[str, ...]
    base_confidence: float


# 우선순위 순서 (동점이면 앞선 규칙이 이김)
DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        WasteType.PLASTIC,
        ("plastic", "bottle", "pet", "polyethylene", "wrapper"),
        ("plastic", "bottle", "pet"),
        0.92,
    ),
    ClassificationRule(
        WasteType.ORGANIC,
        ("organic", "food", "fruit", "vegetable", "peel", "compost"),
        ("organic", "food", "fruit", "compost"),
        0.88,
    ),
    ClassificationRule(
        WasteType.E_WASTE,
        ("electronic", "battery", "phone", "laptop", "circuit", "charger", "cable"),
        ("electronic", "battery", "phone", "laptop", "ewaste"),
        0.91,
    ),
    ClassificationRule(
        WasteType.GLASS,
        ("glass", "jar"),
        ("glass", "jar"),
        0.89,
    ),
    ClassificationRule(
        WasteType.METAL,
        ("metal", "can", "aluminum", "aluminium", "tin", "steel"),
        ("metal", "can", "aluminum", "tin"),
        0.87,
    ),
    ClassificationRule(
        WasteType.PAPER,
        ("paper", "cardboard", "newspaper", "carton", "magazine"),
        ("paper", "cardboard", "newspaper"),
        0.85,
    ),
    ClassificationRule(
        WasteType.TEXTILE,
        ("textile", "cloth", "clothes", "clothing", "fabric", "shirt"),
        ("textile", "cloth", "clothes", "fabric"),
        0.83,
    ),
    ClassificationRule(
        WasteType.BIOMEDICAL,
        ("medical", "syringe", "needle", "mask", "glove", "bandage"),
        ("medical", "biomedical", "syringe", "needle"),
        0.94,
    ),
)


def _matches(tokens: set[str], word: str) -> bool:
    """단어 일치 (단순 복수형 포함)."""
    return word in tokens or f"{word}s" in tokens or f"{word}es" in tokens


class HeuristicWasteClassifier(WasteClassifier):
    """규칙 점수 기반 폐기물 분류기.

    1. 규칙별 점수 = 키워드 적중 × 0.15 + 파일명 적중 × 0.30 + base × 0.10
    2. 최고 점수가 임계값 이상이면 해당 규칙 채택
       (신뢰도 = base + 점수 × 0.05, 최대 0.98)
    3. 아니면 데이터 크기 기반 fallback
    4. 내부 오류 시 GENERAL (0.5 ~ 0.6)
    """

    def __init__(
        self,
        rules: tuple[ClassificationRule, ...] = DEFAULT_RULES,
        seed: int | None = None,
        signal_window: int = DEFAULT_SIGNAL_WINDOW,
        large_payload_bytes: int = DEFAULT_LARGE_PAYLOAD_BYTES,
    ) -> None:
        """초기화.

        Args:
            rules: 우선순위 순 분류 규칙
            seed: 난수 seed (None이면 매 호출 OS 엔트로피 사용)
            signal_window: 텍스트 신호 추출에 사용할 앞부분 바이트 수
            large_payload_bytes: "큰 이미지"로 간주하는 크기 기준
        """
        if not rules:
            raise ValueError("at least one classification rule is required")
        self._rules = rules
        self._seed = seed
        self._signal_window = signal_window
        self._large_payload_bytes = large_payload_bytes

    def classify(self, image: bytes, filename: str | None = None) -> ClassificationResult:
        rng = self._rng_for(image, filename)
        try:
            matched = self._match_rules(image, filename)
            if matched is not None:
                return matched
            return self._fallback(len(image), rng)
        except Exception:
            logger.warning("classification_failed", exc_info=True)
            return ClassificationResult(
                waste_type=WasteType.GENERAL,
                confidence=rng.uniform(*FAILURE_CONFIDENCE_RANGE),
            )

    def score(self, rule: ClassificationRule, signal: set[str], filename_tokens: set[str]) -> float:
        """규칙의 매칭 점수."""
        keyword_hits = sum(1 for keyword in rule.keywords if _matches(signal, keyword))
        filename_hits = sum(
            1 for pattern in rule.filename_patterns if _matches(filename_tokens, pattern)
        )
        return (
            keyword_hits * KEYWORD_WEIGHT
            + filename_hits * FILENAME_WEIGHT
            + rule.base_confidence * BASE_WEIGHT
        )

    def _match_rules(self, image: bytes, filename: str | None) -> ClassificationResult | None:
        signal = self._text_signal(image)
        filename_tokens = set(_TOKEN_PATTERN.findall(filename.lower())) if filename else set()

        best_rule: ClassificationRule | None = None
        best_score = 0.0
        for rule in self._rules:
            rule_score = self.score(rule, signal, filename_tokens)
            if rule_score > best_score:
                best_rule, best_score = rule, rule_score

        if best_rule is None or best_score < MIN_MATCH_SCORE:
            return None

        confidence = min(
            MAX_CONFIDENCE, best_rule.base_confidence + best_score * SCORE_BONUS_FACTOR
        )
        logger.debug(
            "classification_rule_matched",
            extra={"waste_type": best_rule.waste_type.value, "score": round(best_score, 3)},
        )
        return ClassificationResult(waste_type=best_rule.waste_type, confidence=confidence)

    def _fallback(self, size: int, rng: random.Random) -> ClassificationResult:
        if size >= self._large_payload_bytes:
            candidates, confidence_range = COMPLEX_FALLBACK_TYPES, COMPLEX_CONFIDENCE_RANGE
        else:
            candidates, confidence_range = SIMPLE_FALLBACK_TYPES, SIMPLE_CONFIDENCE_RANGE
        return ClassificationResult(
            waste_type=rng.choice(candidates),
            confidence=rng.uniform(*confidence_range),
        )

    def _text_signal(self, image: bytes) -> set[str]:
        # EXIF/XMP 설명 필드 등 앞부분에 포함된 텍스트만 신호로 사용
        head = image[: self._signal_window].decode("latin-1").lower()
        return set(_SIGNAL_TOKEN_PATTERN.findall(head))

    def _rng_for(self, image: bytes, filename: str | None) -> random.Random:
        if self._seed is None:
            return random.Random()
        digest = hashlib.sha256(image).hexdigest()[:16]
        return random.Random(f"{self._seed}:{digest}:{filename or ''}")
