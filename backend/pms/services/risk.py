"""Applicant risk scoring strategies.

Neither strategy is an underwriting model. The score is narrative metadata
shown to agents next to a dossier; swap the scorer without touching the
application workflow.
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from pms.core.config import RiskScorerKind, get_settings
from pms.models import ApplicationDetails

STRONG_PROFILE = "Strong financial profile based on income-to-rent ratio."
WEAK_PROFILE = "Financial profile below standard thresholds; suggest higher guarantor scrutiny."

# (minimum income/rent ratio, score), checked top down
INCOME_RATIO_BANDS = (
    (4.0, 98),
    (3.0, 88),
    (2.5, 75),
    (2.0, 60),
)
INCOME_RATIO_FLOOR = 40


@dataclass(frozen=True)
class RiskAssessment:
    score: int
    recommendation: str


def recommendation_for(score: int) -> str:
    return STRONG_PROFILE if score > 70 else WEAK_PROFILE


class RiskScorer(ABC):
    """Assigns a score in [0, 100] to a submitted dossier."""

    @abstractmethod
    def score(self, details: ApplicationDetails, monthly_rent: Optional[float] = None) -> RiskAssessment:
        pass


class RandomRiskScorer(RiskScorer):
    """Placeholder: a pseudo-random integer in [60, 95)."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def score(self, details: ApplicationDetails, monthly_rent: Optional[float] = None) -> RiskAssessment:
        value = self.rng.randrange(60, 95)
        return RiskAssessment(score=value, recommendation=recommendation_for(value))


class IncomeRatioRiskScorer(RiskScorer):
    """Scores the declared monthly income against the rent the applicant faces.

    Without a known rent the previous monthly rent from the rental history is
    used; with neither the applicant gets the top score.
    """

    def score(self, details: ApplicationDetails, monthly_rent: Optional[float] = None) -> RiskAssessment:
        rent = monthly_rent if monthly_rent is not None else details.rental_history.monthly_rent
        if not rent:
            return RiskAssessment(score=100, recommendation=recommendation_for(100))

        ratio = details.employment.monthly_income / rent
        value = INCOME_RATIO_FLOOR
        for threshold, band_score in INCOME_RATIO_BANDS:
            if ratio >= threshold:
                value = band_score
                break
        return RiskAssessment(score=value, recommendation=recommendation_for(value))


def get_risk_scorer() -> RiskScorer:
    if get_settings().risk_scorer == RiskScorerKind.INCOME_RATIO:
        return IncomeRatioRiskScorer()
    return RandomRiskScorer()
