"""
PICOTS Assistant - Pitfall Analyzer
===================================
The Reviewer: flags methodological gaps in a PICOTS framework using one
static presence/length rule per field.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from utils.i18n import get_text

from .state import FrameworkState, PICOTSField, PitfallFinding, Severity, count_by_severity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRule:
    """Presence rule for one field, optionally followed by a minimum length."""
    missing_severity: Severity
    missing_key: str
    min_tokens: Optional[int] = None
    vague_key: Optional[str] = None


class PitfallAnalyzer:
    """
    Pitfall Analyzer (The Reviewer)

    Each field is checked for presence first; present text that is shorter
    than the field's minimum token count is flagged as vague:
    - Population: Critical when missing, Moderate under 3 words
    - Intervention: Critical when missing, Moderate under 2 words
    - Comparison: Critical when missing
    - Outcomes: Critical when missing, Moderate under 2 words
    - Timing: Moderate when missing
    - Setting: Moderate when missing
    """

    RULES = {
        PICOTSField.POPULATION: FieldRule(
            Severity.CRITICAL, "population_missing", 3, "population_vague"
        ),
        PICOTSField.INTERVENTION: FieldRule(
            Severity.CRITICAL, "intervention_missing", 2, "intervention_vague"
        ),
        PICOTSField.COMPARISON: FieldRule(Severity.CRITICAL, "comparison_missing"),
        PICOTSField.OUTCOMES: FieldRule(
            Severity.CRITICAL, "outcomes_missing", 2, "outcomes_vague"
        ),
        PICOTSField.TIMING: FieldRule(Severity.MODERATE, "timing_missing"),
        PICOTSField.SETTING: FieldRule(Severity.MODERATE, "setting_missing"),
    }

    def __init__(self, language: Optional[str] = None):
        """Initialize analyzer; language defaults to the current i18n language."""
        self.language = language

    @staticmethod
    def count_tokens(text: str) -> int:
        """Number of whitespace-separated words in text."""
        return len(text.lower().split())

    def _finding(self, picots_field: PICOTSField, severity: Severity, key: str) -> PitfallFinding:
        return PitfallFinding(
            field=picots_field,
            issue=get_text(f"issue_{key}", self.language),
            severity=severity,
            recommendation=get_text(f"rec_{key}", self.language),
        )

    def _check_field(self, picots_field: PICOTSField, text: str) -> Optional[PitfallFinding]:
        rule = self.RULES[picots_field]

        # Presence is plain truthiness: whitespace-only text counts as written
        if not text:
            return self._finding(picots_field, rule.missing_severity, rule.missing_key)

        if rule.min_tokens is not None and self.count_tokens(text) < rule.min_tokens:
            return self._finding(picots_field, Severity.MODERATE, rule.vague_key)

        return None

    def analyze(self, state: FrameworkState) -> List[PitfallFinding]:
        """
        Analyze a framework and list its pitfalls.

        Args:
            state: Current PICOTS field contents

        Returns:
            Findings in PICOTS field order, at most one per field
        """
        findings = []
        for picots_field, text in state.items():
            finding = self._check_field(picots_field, text or "")
            if finding is not None:
                findings.append(finding)

        counts = count_by_severity(findings)
        logger.debug(
            "PICOTS analysis: %d critical, %d moderate",
            counts[Severity.CRITICAL],
            counts[Severity.MODERATE],
        )
        return findings


def analyze(state: FrameworkState, language: Optional[str] = None) -> List[PitfallFinding]:
    """Convenience wrapper around PitfallAnalyzer.analyze."""
    return PitfallAnalyzer(language=language).analyze(state)
