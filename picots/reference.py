"""
PICOTS Assistant - Reference Content
====================================
Tooltips, worked examples, rating options and threats to validity shown
alongside the framework. Static data; nothing here is computed.
"""

from typing import Dict, List, Union

from .state import PICOTSField, QualityDimension


TOOLTIPS: Dict[PICOTSField, str] = {
    PICOTSField.POPULATION: "Define who is being studied (e.g., adults with type 2 diabetes, children ages 5-12 with asthma)",
    PICOTSField.INTERVENTION: "Specify the treatment, approach, or exposure (e.g., cognitive behavioral therapy, new medication)",
    PICOTSField.COMPARISON: "Identify the control or alternative (e.g., placebo, standard of care, no treatment)",
    PICOTSField.OUTCOMES: "List measurable results (e.g., reduction in symptoms, mortality rate, quality of life scores)",
    PICOTSField.TIMING: "Specify timeframe (e.g., 6-month follow-up, measurements at baseline and 12 weeks)",
    PICOTSField.SETTING: "Describe where the study takes place (e.g., urban hospitals, rural clinics, home-based)",
}

EXAMPLES: Dict[PICOTSField, str] = {
    PICOTSField.POPULATION: (
        "Adults aged 40-75 with diagnosed hypertension (systolic BP ≥140 mmHg) "
        "without history of cardiovascular disease"
    ),
    PICOTSField.INTERVENTION: (
        "Mindfulness-based stress reduction program consisting of 8 weekly 2-hour "
        "group sessions plus daily 30-minute home practice"
    ),
    PICOTSField.COMPARISON: "Wait-list control group receiving standard hypertension medication management only",
    PICOTSField.OUTCOMES: (
        "Primary: Change in systolic blood pressure at 12 weeks. "
        "Secondary: Self-reported stress levels measured by PSS-10 scale"
    ),
    PICOTSField.TIMING: "Assessments at baseline, 8 weeks (post-intervention), and 6-month follow-up",
    PICOTSField.SETTING: "Three urban primary care clinics serving diverse socioeconomic populations",
}

DIMENSION_LABELS: Dict[QualityDimension, str] = {
    QualityDimension.INTERNAL_VALIDITY: "Internal Validity",
    QualityDimension.EXTERNAL_VALIDITY: "External Validity",
    QualityDimension.BIAS_RISK: "Risk of Bias",
    QualityDimension.EVIDENCE_GRADING: "Evidence Grade",
}

DIMENSION_DESCRIPTIONS: Dict[QualityDimension, str] = {
    QualityDimension.INTERNAL_VALIDITY: (
        "The extent to which the design and conduct of the study eliminate the possibility of bias"
    ),
    QualityDimension.EXTERNAL_VALIDITY: (
        "The extent to which the results can be generalized to other settings or populations"
    ),
    QualityDimension.BIAS_RISK: "The likelihood that systematic errors may have influenced the results",
    QualityDimension.EVIDENCE_GRADING: (
        "Overall assessment of evidence quality based on study design, implementation, and relevance"
    ),
}

# (value, label) pairs in display order
QUALITY_OPTIONS: Dict[QualityDimension, List[tuple]] = {
    QualityDimension.INTERNAL_VALIDITY: [
        ("high", "High - Robust methodology with minimal bias"),
        ("moderate", "Moderate - Generally sound with some limitations"),
        ("low", "Low - Significant methodological concerns"),
        ("not_assessed", "Not Assessed"),
    ],
    QualityDimension.EXTERNAL_VALIDITY: [
        ("high", "High - Results widely generalizable"),
        ("moderate", "Moderate - Generalizable to similar populations"),
        ("low", "Low - Limited generalizability"),
        ("not_assessed", "Not Assessed"),
    ],
    QualityDimension.BIAS_RISK: [
        ("low", "Low - Minimal bias concerns"),
        ("moderate", "Moderate - Some bias possible but unlikely to alter results"),
        ("high", "High - Significant bias concerns that may impact findings"),
        ("not_assessed", "Not Assessed"),
    ],
    QualityDimension.EVIDENCE_GRADING: [
        ("a", "Grade A - High quality evidence"),
        ("b", "Grade B - Moderate quality evidence"),
        ("c", "Grade C - Low quality evidence"),
        ("d", "Grade D - Very low quality evidence"),
        ("not_assessed", "Not Assessed"),
    ],
}

THREATS_TO_VALIDITY: Dict[str, str] = {
    "selection": "Selection bias occurs when the selection process creates systematic differences between comparison groups.",
    "performance": "Performance bias results from systematic differences in care provided apart from the intervention.",
    "attrition": "Attrition bias occurs when outcome data is incomplete or there are systematic differences in withdrawals.",
    "detection": "Detection bias comes from systematic differences in outcome assessment.",
    "reporting": "Reporting bias results from selective reporting of outcomes.",
    "confounding": "Confounding occurs when an extraneous variable correlates with both the intervention and outcome.",
}


def _field_or_none(key: Union[PICOTSField, str]):
    try:
        return PICOTSField.coerce(key)
    except KeyError:
        return None


def get_tooltip(key: Union[PICOTSField, str]) -> str:
    """Tooltip for a field, or an empty string for an unknown key."""
    return TOOLTIPS.get(_field_or_none(key), "")


def get_example(key: Union[PICOTSField, str]) -> str:
    """Worked example for a field, or an empty string for an unknown key."""
    return EXAMPLES.get(_field_or_none(key), "")


def get_quality_options(key: Union[QualityDimension, str]) -> List[Dict[str, str]]:
    """Selectable options for a quality dimension as value/label dicts."""
    try:
        dimension = QualityDimension.coerce(key)
    except KeyError:
        return []
    return [{"value": value, "label": label} for value, label in QUALITY_OPTIONS[dimension]]


def get_threats_to_validity() -> List[Dict[str, str]]:
    """Common threats to validity with display titles."""
    return [
        {
            "key": key,
            "title": f"{key.capitalize()} Bias",
            "description": description,
        }
        for key, description in THREATS_TO_VALIDITY.items()
    ]


def get_dimension_label(key: Union[QualityDimension, str]) -> str:
    """Display label for a quality dimension, or an empty string for an unknown key."""
    try:
        return DIMENSION_LABELS[QualityDimension.coerce(key)]
    except KeyError:
        return ""


def get_dimension_description(key: Union[QualityDimension, str]) -> str:
    """Explanation of a quality dimension, or an empty string for an unknown key."""
    try:
        return DIMENSION_DESCRIPTIONS[QualityDimension.coerce(key)]
    except KeyError:
        return ""
