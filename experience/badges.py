"""
Badge and tier thresholds.

Ladders are evaluated highest threshold first; each tier includes its
lower bound.
"""
from typing import Optional

from django.db import models


class ExperienceLevel(models.TextChoices):
    BEGINNER = 'Beginner', 'Beginner'
    INTERMEDIATE = 'Intermediate', 'Intermediate'
    ADVANCED = 'Advanced', 'Advanced'
    EXPERT = 'Expert', 'Expert'


class AchievementTier(models.TextChoices):
    BRONZE = 'Bronze', 'Bronze'
    SILVER = 'Silver', 'Silver'
    GOLD = 'Gold', 'Gold'


EXPERIENCE_LADDER = (
    (15, ExperienceLevel.EXPERT),
    (10, ExperienceLevel.ADVANCED),
    (5, ExperienceLevel.INTERMEDIATE),
)

ACHIEVEMENT_LADDER = (
    (5, AchievementTier.GOLD),
    (3, AchievementTier.SILVER),
    (1, AchievementTier.BRONZE),
)


def experience_level(count: int) -> ExperienceLevel:
    """Overall level from a total project count."""
    for threshold, level in EXPERIENCE_LADDER:
        if count >= threshold:
            return level
    return ExperienceLevel.BEGINNER


def achievement_tier(count: int) -> Optional[AchievementTier]:
    """Per-category badge from a single category's project count; None below 1."""
    for threshold, tier in ACHIEVEMENT_LADDER:
        if count >= threshold:
            return tier
    return None
