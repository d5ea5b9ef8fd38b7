"""
PICOTS Assistant - Score Calculator
===================================
The Evaluator: turns pitfall findings into a framework strength score and
study-quality ratings into an evidence quality score, both on a 0-100 scale.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from utils.i18n import get_text

from .state import (
    PitfallFinding,
    QualityAssessment,
    QualityDimension,
    Severity,
    count_by_severity,
)

logger = logging.getLogger(__name__)


class ScoreLevel(Enum):
    """Display level for score meters and badges."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EvidenceBand(Enum):
    """Evidence quality bands."""
    HIGH = "high"           # >= 75
    MODERATE = "moderate"   # 50-74
    LOW = "low"             # 25-49
    VERY_LOW = "very_low"   # < 25

    def label(self, lang: Optional[str] = None) -> str:
        return get_text(f"band_{self.value}", lang)

    def recommendation(self, lang: Optional[str] = None) -> str:
        return get_text(f"band_rec_{self.value}", lang)


class ScoreCalculator:
    """
    Score Calculator (The Evaluator)

    Strength deducts per finding:
    - Critical: 15 points
    - Moderate: 5 points

    Evidence quality sums one lookup per dimension (25 points each at best):
    - Internal/External validity: high 25, moderate 15, low 5
    - Bias risk (inverted): low 25, moderate 15, high 5
    - Evidence grade: A 25, B 15, C 5, D 0
    """

    CRITICAL_WEIGHT = 15
    MODERATE_WEIGHT = 5
    # Normalisation ceiling for the strength meter, not a true bound
    MAX_PITFALLS = 7

    VALIDITY_SCORES = {"high": 25, "moderate": 15, "low": 5, "not_assessed": 0}

    QUALITY_SCORES = {
        QualityDimension.INTERNAL_VALIDITY: VALIDITY_SCORES,
        QualityDimension.EXTERNAL_VALIDITY: VALIDITY_SCORES,
        QualityDimension.BIAS_RISK: {"low": 25, "moderate": 15, "high": 5, "not_assessed": 0},
        QualityDimension.EVIDENCE_GRADING: {"a": 25, "b": 15, "c": 5, "d": 0, "not_assessed": 0},
    }

    # Strength meter cut points
    STRENGTH_LEVELS = [(80, ScoreLevel.HIGH), (50, ScoreLevel.MEDIUM)]
    # Evidence badge cut points
    EVIDENCE_LEVELS = [(75, ScoreLevel.HIGH), (50, ScoreLevel.MEDIUM)]
    EVIDENCE_BANDS = [
        (75, EvidenceBand.HIGH),
        (50, EvidenceBand.MODERATE),
        (25, EvidenceBand.LOW),
    ]

    def strength(self, findings: List[PitfallFinding], has_run: bool) -> Optional[int]:
        """
        Calculate framework strength from pitfall findings.

        Args:
            findings: Findings from the latest analysis
            has_run: Whether the user has triggered analysis at least once

        Returns:
            Score in [0, 100], or None before any analysis with no findings
        """
        if not findings and not has_run:
            return None

        counts = count_by_severity(findings)
        deductions = (
            counts[Severity.CRITICAL] * self.CRITICAL_WEIGHT
            + counts[Severity.MODERATE] * self.MODERATE_WEIGHT
        )
        return max(0, 100 - deductions)

    def dimension_score(self, dimension: QualityDimension, value: Any) -> int:
        """Points for one rating; unknown values score zero."""
        if isinstance(value, Enum):
            value = value.value
        if not isinstance(value, str):
            return 0
        return self.QUALITY_SCORES[dimension].get(value, 0)

    def breakdown(
        self, assessment: Union[QualityAssessment, Mapping[str, Any]]
    ) -> Dict[QualityDimension, int]:
        """Per-dimension points for an assessment."""
        if not isinstance(assessment, QualityAssessment):
            assessment = QualityAssessment.from_dict(assessment)
        return {
            dimension: self.dimension_score(dimension, value)
            for dimension, value in assessment.items()
        }

    def evidence_score(
        self,
        assessment: Union[QualityAssessment, Mapping[str, Any]],
        has_run: bool,
    ) -> Optional[int]:
        """
        Calculate evidence quality from the four quality ratings.

        Args:
            assessment: QualityAssessment or mapping keyed by dimension name
            has_run: Whether the user has triggered evaluation at least once

        Returns:
            Score in [0, 100], or None before any evaluation
        """
        if not has_run:
            return None

        total = sum(self.breakdown(assessment).values())
        logger.debug("Evidence quality score: %d", total)
        return total

    @staticmethod
    def _level(score: int, cut_points) -> ScoreLevel:
        for threshold, level in cut_points:
            if score >= threshold:
                return level
        return ScoreLevel.LOW

    def strength_level(self, score: int) -> ScoreLevel:
        """Meter level for a strength score."""
        return self._level(score, self.STRENGTH_LEVELS)

    def evidence_level(self, score: int) -> ScoreLevel:
        """Badge level for an evidence score (two cut points: 75, 50)."""
        return self._level(score, self.EVIDENCE_LEVELS)

    def evidence_band(self, score: int) -> EvidenceBand:
        """Rating band for an evidence score (four bands)."""
        for threshold, band in self.EVIDENCE_BANDS:
            if score >= threshold:
                return band
        return EvidenceBand.VERY_LOW


_calculator = ScoreCalculator()


def strength(findings: List[PitfallFinding], has_run: bool) -> Optional[int]:
    """Convenience wrapper around ScoreCalculator.strength."""
    return _calculator.strength(findings, has_run)


def evidence_score(
    assessment: Union[QualityAssessment, Mapping[str, Any]], has_run: bool
) -> Optional[int]:
    """Convenience wrapper around ScoreCalculator.evidence_score."""
    return _calculator.evidence_score(assessment, has_run)
