"""
PICOTS Assistant - Engine Module
================================
Pitfall analysis and scoring for PICOTS research-question frameworks.
"""

from .state import (
    PICOTSField,
    Severity,
    Rating,
    EvidenceGrade,
    QualityDimension,
    FrameworkState,
    QualityAssessment,
    PitfallFinding,
)
from .pitfall_agent import PitfallAnalyzer, analyze
from .scoring import ScoreCalculator, ScoreLevel, EvidenceBand, strength, evidence_score
from .completion import completion, field_status, field_summary
from .session import FrameworkSession, FrameworkReport

__all__ = [
    "PICOTSField",
    "Severity",
    "Rating",
    "EvidenceGrade",
    "QualityDimension",
    "FrameworkState",
    "QualityAssessment",
    "PitfallFinding",
    "PitfallAnalyzer",
    "analyze",
    "ScoreCalculator",
    "ScoreLevel",
    "EvidenceBand",
    "strength",
    "evidence_score",
    "completion",
    "field_status",
    "field_summary",
    "FrameworkSession",
    "FrameworkReport",
]
