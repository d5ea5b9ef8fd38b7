"""
Test Script for Evidence Quality Scoring
========================================
Strength and evidence scores, display bands, localisation and settings.

Run with pytest, or directly: python test_evidence_quality.py
"""

import sys

import pytest

from config import Settings, configure_logging
from picots import (
    EvidenceBand,
    EvidenceGrade,
    FrameworkSession,
    PICOTSField,
    PitfallFinding,
    QualityAssessment,
    QualityDimension,
    Rating,
    ScoreCalculator,
    ScoreLevel,
    Severity,
    evidence_score,
    strength,
)
from picots.reference import (
    get_dimension_description,
    get_dimension_label,
    get_quality_options,
    get_threats_to_validity,
)
from utils.i18n import (
    SUPPORTED_LANGUAGES,
    TEXTS,
    get_all_texts,
    get_current_language,
    get_text,
    set_language,
)


def _banner(title):
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def _finding(severity):
    return PitfallFinding(
        field=PICOTSField.POPULATION,
        issue="issue",
        severity=severity,
        recommendation="recommendation",
    )


def test_strength_before_and_after_analysis():
    _banner("Testing Strength Score")

    assert strength([], False) is None
    assert strength([], True) == 100

    # Findings without the flag still score
    assert strength([_finding(Severity.CRITICAL)], False) == 85


def test_strength_deductions_floor_at_zero():
    findings = [_finding(Severity.CRITICAL)] * 7 + [_finding(Severity.MODERATE)]
    assert strength(findings, True) == 0

    mixed = [_finding(Severity.CRITICAL)] * 2 + [_finding(Severity.MODERATE)] * 3
    assert strength(mixed, True) == 55


def test_evidence_score_best_and_unassessed():
    _banner("Testing Evidence Quality Score")

    best = QualityAssessment(
        internal_validity=Rating.HIGH,
        external_validity=Rating.HIGH,
        bias_risk=Rating.LOW,
        evidence_grading=EvidenceGrade.A,
    )
    print(f"[OK] Best assessment: {best.to_dict()}")

    assert evidence_score(best, True) == 100
    assert evidence_score(QualityAssessment(), True) == 0
    assert evidence_score(best, False) is None


def test_bias_risk_is_inverted():
    calculator = ScoreCalculator()

    assert calculator.dimension_score(QualityDimension.BIAS_RISK, "low") == 25
    assert calculator.dimension_score(QualityDimension.BIAS_RISK, "high") == 5
    assert calculator.dimension_score(QualityDimension.INTERNAL_VALIDITY, "high") == 25
    assert calculator.dimension_score(QualityDimension.INTERNAL_VALIDITY, "low") == 5
    assert calculator.dimension_score(QualityDimension.EVIDENCE_GRADING, "d") == 0


def test_unknown_ratings_score_zero():
    assessment = QualityAssessment(
        internal_validity="excellent",
        external_validity=None,
        bias_risk="moderate",
        evidence_grading="e",
    )

    assert evidence_score(assessment, True) == 15


def test_evidence_score_from_mapping():
    camel = {
        "internalValidity": "moderate",
        "externalValidity": "low",
        "biasRisk": "moderate",
        "evidenceGrading": "b",
        "notes": "ignored",
    }
    snake = {"internal_validity": "high", "evidence_grading": "c"}

    assert evidence_score(camel, True) == 15 + 5 + 15 + 15
    assert evidence_score(snake, True) == 30


def test_breakdown_per_dimension():
    breakdown = ScoreCalculator().breakdown(
        QualityAssessment(external_validity="moderate", evidence_grading="a")
    )

    assert breakdown == {
        QualityDimension.INTERNAL_VALIDITY: 0,
        QualityDimension.EXTERNAL_VALIDITY: 15,
        QualityDimension.BIAS_RISK: 0,
        QualityDimension.EVIDENCE_GRADING: 25,
    }


@pytest.mark.parametrize("score, level, band", [
    (100, ScoreLevel.HIGH, EvidenceBand.HIGH),
    (75, ScoreLevel.HIGH, EvidenceBand.HIGH),
    (74, ScoreLevel.MEDIUM, EvidenceBand.MODERATE),
    (50, ScoreLevel.MEDIUM, EvidenceBand.MODERATE),
    (45, ScoreLevel.LOW, EvidenceBand.LOW),
    (25, ScoreLevel.LOW, EvidenceBand.LOW),
    (20, ScoreLevel.LOW, EvidenceBand.VERY_LOW),
    (0, ScoreLevel.LOW, EvidenceBand.VERY_LOW),
])
def test_evidence_levels_and_bands(score, level, band):
    calculator = ScoreCalculator()

    assert calculator.evidence_level(score) is level
    assert calculator.evidence_band(score) is band


def test_strength_levels():
    calculator = ScoreCalculator()

    assert calculator.strength_level(80) is ScoreLevel.HIGH
    assert calculator.strength_level(79) is ScoreLevel.MEDIUM
    assert calculator.strength_level(50) is ScoreLevel.MEDIUM
    assert calculator.strength_level(30) is ScoreLevel.LOW


def test_band_texts():
    assert EvidenceBand.HIGH.label() == "High Quality Evidence"
    assert EvidenceBand.VERY_LOW.label() == "Very Low Quality Evidence"
    assert EvidenceBand.MODERATE.recommendation() == (
        "Moderate evidence - can inform decisions but consider limitations"
    )
    assert EvidenceBand.LOW.label("id") == "Bukti Berkualitas Rendah"


def test_session_quality_evaluation():
    _banner("Testing Quality Evaluation Session")

    session = FrameworkSession(language="en")
    session.update_rating("internalValidity", Rating.HIGH)
    session.update_rating(QualityDimension.EXTERNAL_VALIDITY, "moderate")
    session.update_rating("bias_risk", Rating.LOW)
    assert session.evidence_score is None

    score = session.evaluate_quality()
    report = session.report()

    assert score == 65
    assert report.evidence_level == "medium"
    assert report.evidence_band == "Moderate Quality Evidence"
    assert report.strength_score == 100
    with pytest.raises(KeyError):
        session.update_rating("sample_size", "high")


def test_quality_options_and_threats():
    grading = get_quality_options("evidenceGrading")
    assert [option["value"] for option in grading] == ["a", "b", "c", "d", "not_assessed"]
    assert get_quality_options("unknown") == []

    threats = get_threats_to_validity()
    assert [threat["title"] for threat in threats][0] == "Selection Bias"
    assert len(threats) == 6

    assert get_dimension_label("biasRisk") == "Risk of Bias"
    assert get_dimension_label(QualityDimension.EVIDENCE_GRADING) == "Evidence Grade"
    assert get_dimension_description("internal_validity").startswith("The extent to which the design")
    assert get_dimension_description(QualityDimension.BIAS_RISK) == (
        "The likelihood that systematic errors may have influenced the results"
    )
    assert get_dimension_label("sample_size") == ""
    assert get_dimension_description("sample_size") == ""


def test_bilingual_system():
    _banner("Testing Bilingual (i18n) System")

    original = get_current_language()
    try:
        set_language("id")
        assert get_text("issue_timing_missing") == "Durasi studi belum ditentukan"
        set_language("xx")
        assert get_current_language() == "id"
        set_language("en")
        assert get_text("msg_strength_score", score=40) == "Framework Strength: 40/100"
    finally:
        set_language(original)

    assert get_text("unknown_key_xyz") == "unknown_key_xyz"
    assert set(SUPPORTED_LANGUAGES) == {"en", "id"}

    indonesian = get_all_texts("id")
    assert set(indonesian) == set(TEXTS)
    assert indonesian["severity_critical"] == "Kritis"
    assert all(entry["en"] and entry["id"] for entry in TEXTS.values())


def test_severity_labels():
    assert Severity.CRITICAL.label("en") == "Critical"
    assert Severity.MODERATE.label("en") == "Moderate"
    assert Severity.MODERATE.label("id") == "Sedang"
    assert _finding(Severity.CRITICAL).is_critical
    assert not _finding(Severity.MODERATE).is_critical


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PICOTS_LOG_LEVEL", "debug")
    monkeypatch.setenv("PICOTS_LANGUAGE", "id")
    monkeypatch.setenv("PICOTS_AUTO_REANALYZE", "false")

    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.language == "id"
    assert settings.auto_reanalyze is False


def test_settings_reject_unknown_language(monkeypatch):
    monkeypatch.setenv("PICOTS_LANGUAGE", "fr")

    with pytest.raises(ValueError):
        Settings(_env_file=None)


def main():
    """Run all tests."""
    configure_logging()
    print("=" * 60)
    print("  EVIDENCE QUALITY TEST SUITE")
    print("=" * 60)
    return pytest.main([__file__, "-q"])


if __name__ == "__main__":
    sys.exit(main())
