"""
PICOTS Assistant - State Definitions
====================================
Value objects shared by the analyzer, the score calculator and the session:
the six-field PICOTS framework, the four-dimension quality assessment and
the pitfall findings produced from them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from utils.i18n import get_text


class PICOTSField(Enum):
    """The six PICOTS fields, in rule-evaluation order."""
    POPULATION = "population"
    INTERVENTION = "intervention"
    COMPARISON = "comparison"
    OUTCOMES = "outcomes"
    TIMING = "timing"
    SETTING = "setting"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def coerce(cls, key: Union["PICOTSField", str]) -> "PICOTSField":
        """Resolve a member from itself, its value or its label."""
        if isinstance(key, cls):
            return key
        try:
            return cls(str(key).lower())
        except ValueError:
            raise KeyError(f"Unknown PICOTS field: {key!r}") from None


class Severity(Enum):
    """Pitfall severity levels."""
    CRITICAL = "Critical"
    MODERATE = "Moderate"

    def label(self, lang: Optional[str] = None) -> str:
        return get_text(f"severity_{self.name.lower()}", lang)


class Rating(Enum):
    """Ordinal rating used for validity and bias risk."""
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"
    NOT_ASSESSED = "not_assessed"


class EvidenceGrade(Enum):
    """Evidence grade (A = highest)."""
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    NOT_ASSESSED = "not_assessed"


class QualityDimension(Enum):
    """The four study-quality dimensions."""
    INTERNAL_VALIDITY = "internal_validity"
    EXTERNAL_VALIDITY = "external_validity"
    BIAS_RISK = "bias_risk"
    EVIDENCE_GRADING = "evidence_grading"

    @property
    def camel_key(self) -> str:
        head, *rest = self.value.split("_")
        return head + "".join(part.capitalize() for part in rest)

    @classmethod
    def coerce(cls, key: Union["QualityDimension", str]) -> "QualityDimension":
        """Resolve a member from itself, its snake_case value or camelCase key."""
        if isinstance(key, cls):
            return key
        for dimension in cls:
            if key in (dimension.value, dimension.camel_key):
                return dimension
        raise KeyError(f"Unknown quality dimension: {key!r}")


NOT_ASSESSED = "not_assessed"


def _option_value(value: Any) -> Any:
    # Enum members are stored by value; anything else is kept as given
    return value.value if isinstance(value, Enum) else value


@dataclass
class FrameworkState:
    """Free-text content of the six PICOTS fields."""
    population: str = ""
    intervention: str = ""
    comparison: str = ""
    outcomes: str = ""
    timing: str = ""
    setting: str = ""

    def get(self, key: Union[PICOTSField, str]) -> str:
        return getattr(self, PICOTSField.coerce(key).value)

    def set(self, key: Union[PICOTSField, str], value: str) -> None:
        """Replace the content of a single field."""
        setattr(self, PICOTSField.coerce(key).value, value)

    def items(self) -> Iterator[Tuple[PICOTSField, str]]:
        """Yield (field, value) pairs in declared PICOTS order."""
        for picots_field in PICOTSField:
            yield picots_field, getattr(self, picots_field.value)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for serialization."""
        return {picots_field.value: value for picots_field, value in self.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FrameworkState":
        """Create from dictionary. Unknown keys are ignored."""
        return cls(**{
            picots_field.value: data.get(picots_field.value, "") or ""
            for picots_field in PICOTSField
        })


@dataclass
class QualityAssessment:
    """
    Ratings for the four quality dimensions.

    Values are kept as plain strings so that a value outside the expected
    options can be held and scored as zero instead of being rejected.
    """
    internal_validity: str = NOT_ASSESSED
    external_validity: str = NOT_ASSESSED
    bias_risk: str = NOT_ASSESSED
    evidence_grading: str = NOT_ASSESSED

    def __post_init__(self):
        for dimension in QualityDimension:
            raw = getattr(self, dimension.value)
            setattr(self, dimension.value, _option_value(raw))

    def get(self, key: Union[QualityDimension, str]) -> Any:
        return getattr(self, QualityDimension.coerce(key).value)

    def set(self, key: Union[QualityDimension, str], value: Any) -> None:
        """Replace the rating of a single dimension."""
        setattr(self, QualityDimension.coerce(key).value, _option_value(value))

    def items(self) -> Iterator[Tuple[QualityDimension, Any]]:
        for dimension in QualityDimension:
            yield dimension, getattr(self, dimension.value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {dimension.value: value for dimension, value in self.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QualityAssessment":
        """Create from dictionary keyed by snake_case or camelCase names."""
        assessment = cls()
        for dimension in QualityDimension:
            for key in (dimension.value, dimension.camel_key):
                if key in data:
                    assessment.set(dimension, data[key])
                    break
        return assessment


@dataclass(frozen=True)
class PitfallFinding:
    """A methodological gap flagged in one PICOTS field."""
    field: PICOTSField
    issue: str
    severity: Severity
    recommendation: str

    @property
    def category(self) -> str:
        return self.field.label

    @property
    def is_critical(self) -> bool:
        return self.severity is Severity.CRITICAL

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for serialization."""
        return {
            "category": self.category,
            "issue": self.issue,
            "severity": self.severity.value,
            "recommendation": self.recommendation,
        }


def count_by_severity(findings: List[PitfallFinding]) -> Dict[Severity, int]:
    """Tally findings per severity (every severity present, zero if unused)."""
    counts = {severity: 0 for severity in Severity}
    for finding in findings:
        counts[finding.severity] = counts.get(finding.severity, 0) + 1
    return counts
