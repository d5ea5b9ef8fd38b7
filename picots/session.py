"""
PICOTS Assistant - Framework Session
====================================
Caller-side workflow around the stateless engine: holds the field contents,
the quality ratings and the "submitted" flag, and decides when analysis runs.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from config import get_settings
from utils.i18n import get_text

from .completion import completion, field_summary
from .pitfall_agent import PitfallAnalyzer
from .reference import get_example, get_threats_to_validity
from .scoring import ScoreCalculator
from .state import (
    FrameworkState,
    PICOTSField,
    PitfallFinding,
    QualityAssessment,
    QualityDimension,
)

logger = logging.getLogger(__name__)


@dataclass
class FrameworkReport:
    """Snapshot of everything the form displays after analysis."""
    completion: int
    findings: List[PitfallFinding]
    strength_score: Optional[int]
    strength_level: Optional[str]
    evidence_score: Optional[int]
    evidence_level: Optional[str]
    evidence_band: Optional[str]
    evidence_recommendation: Optional[str]
    summary: Dict[str, str]
    threats_to_validity: List[Dict[str, str]] = field(default_factory=list)
    headlines: List[str] = field(default_factory=list)
    # Set only when the form was submitted and no pitfalls were found
    no_issues_title: Optional[str] = None
    no_issues_message: Optional[str] = None
    language: Optional[str] = None

    def finding_dicts(self) -> List[Dict[str, str]]:
        """Findings with a localized severity label for display."""
        return [
            dict(finding.to_dict(), severity_label=finding.severity.label(self.language))
            for finding in self.findings
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "completion": self.completion,
            "findings": self.finding_dicts(),
            "strength_score": self.strength_score,
            "strength_level": self.strength_level,
            "evidence_score": self.evidence_score,
            "evidence_level": self.evidence_level,
            "evidence_band": self.evidence_band,
            "evidence_recommendation": self.evidence_recommendation,
            "summary": self.summary,
            "threats_to_validity": self.threats_to_validity,
            "headlines": self.headlines,
            "no_issues_title": self.no_issues_title,
            "no_issues_message": self.no_issues_message,
        }


class FrameworkSession:
    """
    One user's pass through the PICOTS form.

    Until analyze() or evaluate_quality() is called the session is not
    submitted and both scores are None. Once submitted, every field edit
    recomputes the full finding list (when auto_reanalyze is enabled).
    """

    def __init__(
        self,
        state: Optional[FrameworkState] = None,
        assessment: Optional[QualityAssessment] = None,
        language: Optional[str] = None,
        auto_reanalyze: Optional[bool] = None,
        on_change: Optional[Callable[["FrameworkSession"], None]] = None,
    ):
        """
        Initialize the session.

        Args:
            state: Initial field contents (empty by default)
            assessment: Initial quality ratings (all not assessed by default)
            language: Language for finding and band texts (settings default)
            auto_reanalyze: Re-run analysis on edits after submission (settings default)
            on_change: Optional callback invoked after every state change
        """
        settings = get_settings()
        self.state = state or FrameworkState()
        self.assessment = assessment or QualityAssessment()
        self.language = language or settings.language
        self.auto_reanalyze = settings.auto_reanalyze if auto_reanalyze is None else auto_reanalyze
        self.on_change = on_change

        self.analyzer = PitfallAnalyzer(language=self.language)
        self.calculator = ScoreCalculator()
        self.submitted = False
        self.findings: List[PitfallFinding] = []

    def _notify(self) -> None:
        if self.on_change:
            self.on_change(self)

    def update_field(self, key: Union[PICOTSField, str], value: str) -> None:
        """Edit one PICOTS field."""
        self.state.set(key, value)
        if self.submitted and self.auto_reanalyze:
            self.findings = self.analyzer.analyze(self.state)
        self._notify()

    def update_rating(self, key: Union[QualityDimension, str], value: Any) -> None:
        """Change one quality rating."""
        self.assessment.set(key, value)
        self._notify()

    def use_example(self, key: Union[PICOTSField, str]) -> str:
        """Fill a field with its worked example and return the text."""
        example = get_example(key)
        self.update_field(key, example)
        return example

    def analyze(self) -> List[PitfallFinding]:
        """Mark the form submitted and rebuild the finding list."""
        self.submitted = True
        self.findings = self.analyzer.analyze(self.state)
        logger.info(
            "Framework analyzed: %d finding(s), %d critical, strength %s",
            len(self.findings),
            sum(1 for finding in self.findings if finding.is_critical),
            self.strength_score,
        )
        self._notify()
        return self.findings

    def evaluate_quality(self) -> Optional[int]:
        """Mark the form submitted and return the evidence quality score."""
        self.submitted = True
        score = self.evidence_score
        logger.info("Evidence quality evaluated: %s/100", score)
        self._notify()
        return score

    @property
    def completion(self) -> int:
        return completion(self.state)

    @property
    def strength_score(self) -> Optional[int]:
        return self.calculator.strength(self.findings, self.submitted)

    @property
    def evidence_score(self) -> Optional[int]:
        return self.calculator.evidence_score(self.assessment, self.submitted)

    def report(self) -> FrameworkReport:
        """Build a display snapshot of the current session."""
        strength = self.strength_score
        evidence = self.evidence_score

        strength_level = None
        if strength is not None:
            strength_level = self.calculator.strength_level(strength).value

        evidence_level = evidence_band = evidence_recommendation = None
        if evidence is not None:
            band = self.calculator.evidence_band(evidence)
            evidence_level = self.calculator.evidence_level(evidence).value
            evidence_band = band.label(self.language)
            evidence_recommendation = band.recommendation(self.language)

        headlines = [get_text("msg_completion", self.language, percent=self.completion)]
        if strength is not None:
            headlines.append(get_text("msg_strength_score", self.language, score=strength))
        if evidence is not None:
            headlines.append(get_text("msg_evidence_score", self.language, score=evidence))

        no_issues_title = no_issues_message = None
        if self.submitted and not self.findings:
            no_issues_title = get_text("framework_looks_good", self.language)
            no_issues_message = get_text("no_issues_found", self.language)

        return FrameworkReport(
            completion=self.completion,
            findings=list(self.findings),
            strength_score=strength,
            strength_level=strength_level,
            evidence_score=evidence,
            evidence_level=evidence_level,
            evidence_band=evidence_band,
            evidence_recommendation=evidence_recommendation,
            summary=field_summary(self.state, self.language),
            threats_to_validity=get_threats_to_validity() if self.submitted else [],
            headlines=headlines,
            no_issues_title=no_issues_title,
            no_issues_message=no_issues_message,
            language=self.language,
        )
