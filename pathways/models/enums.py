"""Domain enums shared by the profile schemas, program modules and validators.

All enums use the str mixin for JSON serialization. Jurisdictions and
occupation categories are closed sets so rule modules can compare them
with plain equality.
"""

from __future__ import annotations

from enum import Enum


class Jurisdiction(str, Enum):
    """Province, territory or "abroad": the only identifiers rule modules compare."""

    ONTARIO = "ontario"
    BRITISH_COLUMBIA = "british_columbia"
    ALBERTA = "alberta"
    SASKATCHEWAN = "saskatchewan"
    MANITOBA = "manitoba"
    NOVA_SCOTIA = "nova_scotia"
    NEW_BRUNSWICK = "new_brunswick"
    NEWFOUNDLAND_AND_LABRADOR = "newfoundland_and_labrador"
    PRINCE_EDWARD_ISLAND = "prince_edward_island"
    QUEBEC = "quebec"
    TERRITORIES = "territories"
    OUTSIDE_CANADA = "outside_canada"


ATLANTIC_JURISDICTIONS: frozenset[Jurisdiction] = frozenset({
    Jurisdiction.NEW_BRUNSWICK,
    Jurisdiction.NOVA_SCOTIA,
    Jurisdiction.NEWFOUNDLAND_AND_LABRADOR,
    Jurisdiction.PRINCE_EDWARD_ISLAND,
})


class MaritalStatus(str, Enum):
    """Selects the single or with-spouse CRS tables."""

    SINGLE = "single"
    MARRIED = "married"


class EducationLevel(str, Enum):
    """Highest completed credential, in ascending order."""

    HIGH_SCHOOL = "high_school"
    ONE_YEAR = "one_year"
    TWO_YEAR = "two_year"
    BACHELORS = "bachelors"
    MASTERS = "masters"
    PHD = "phd"

    @property
    def rank(self) -> int:
        """Position in the ordering (HIGH_SCHOOL = 0)."""
        return _EDUCATION_ORDER.index(self)

    def at_least(self, other: EducationLevel) -> bool:
        return self.rank >= other.rank


_EDUCATION_ORDER: tuple[EducationLevel, ...] = tuple(EducationLevel)


class FieldOfStudy(str, Enum):
    """Broad field of the highest credential; drives OINP and BC graduate streams."""

    STEM_HEALTH_TRADES = "stem_health_trades"
    BUSINESS_ADMIN = "business_admin"
    ARTS_HUMANITIES = "arts_humanities"
    OTHER = "other"


class OccupationCategory(str, Enum):
    """Occupation grouping used by sector-targeted draws."""

    TECH = "tech"
    HEALTH = "health"
    CONSTRUCTION = "construction"
    TRADES = "trades"
    OTHER = "other"


class JobOfferTier(str, Enum):
    """Skill level of a job offer (TEER grouping)."""

    NONE = "none"
    HIGH_SKILL = "high_skill"  # TEER 0-3
    SEMI_SKILL = "semi_skill"  # TEER 4-5


class DrawProbability(str, Enum):
    """Coarse estimate of how likely a stream is to select the candidate."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"

    @property
    def rank(self) -> int:
        return _PROBABILITY_RANK[self]


_PROBABILITY_RANK: dict[DrawProbability, int] = {
    DrawProbability.HIGH: 3,
    DrawProbability.MEDIUM: 2,
    DrawProbability.LOW: 1,
    DrawProbability.NONE: 0,
}


class ProgramCode(str, Enum):
    """One code per registered program rule module."""

    OINP = "oinp"
    BC_PNP = "bc_pnp"
    SINP = "sinp"
    MPNP = "mpnp"
    AAIP = "aaip"
    NSNP = "nsnp"
    AIP = "aip"
    FEDERAL = "federal"


# ── Language tests ──────────────────────────────────────────────────────


class LanguageTest(str, Enum):
    IELTS = "ielts"
    CELPIP = "celpip"
    PTE = "pte"


class Skill(str, Enum):
    LISTENING = "listening"
    READING = "reading"
    WRITING = "writing"
    SPEAKING = "speaking"


# ── Compliance ──────────────────────────────────────────────────────────


class ProgramTarget(str, Enum):
    """Federal economic class the work experience is being counted towards."""

    CEC = "cec"  # Canadian Experience Class
    FSW = "fsw"  # Federal Skilled Worker
    FST = "fst"  # Federal Skilled Trades


class StatusState(str, Enum):
    """Temporary-resident status classification."""

    VALID = "valid"
    MAINTAINED = "maintained"
    RESTORATION_PERIOD = "restoration_period"
    OUT_OF_STATUS = "out_of_status"


class Location(str, Enum):
    INSIDE_CANADA = "inside_canada"
    OUTSIDE_CANADA = "outside_canada"


class OffenseType(str, Enum):
    DUI = "dui"
    THEFT = "theft"
    ASSAULT = "assault"
    FRAUD = "fraud"
    OTHER = "other"


class MedicalConditionType(str, Enum):
    CHRONIC = "chronic"
    DEVELOPMENTAL = "developmental"
    MENTAL_HEALTH = "mental_health"
    OTHER = "other"


class RefusalReason(str, Enum):
    """Categorized reason for a prior refusal."""

    MISREPRESENTATION = "misrepresentation"
    FUNDS = "funds"
    REFERENCE_LETTER = "reference_letter"
    OTHER = "other"


class InadmissibilityGround(str, Enum):
    SERIOUS_CRIMINALITY = "serious_criminality"
    CRIMINALITY = "criminality"
    MEDICAL_EXCESSIVE_DEMAND = "medical_excessive_demand"
    MISREPRESENTATION = "misrepresentation"


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"

    @property
    def rank(self) -> int:
        return {Severity.CRITICAL: 3, Severity.HIGH: 2, Severity.MEDIUM: 1}[self]


class SuccessLikelihood(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
