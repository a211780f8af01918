"""Pydantic models for API request payloads."""

from datetime import date

from pydantic import BaseModel, Field

from babyfeed.domain.models import (
    FeedMode,
    FeedType,
    MedicineTarget,
    StoolColor,
    StoolConsistency,
)


class ProfileIn(BaseModel):
    """Onboarding form."""

    name: str = Field(min_length=1)
    dob: date | None = None
    feed_mode: FeedMode = FeedMode.BREAST
    notes: str = ""


class FeedStartIn(BaseModel):
    """Feed timer start request."""

    feed_type: FeedType | None = None


class BottleIn(BaseModel):
    """Bottle feed entry."""

    amount_ml: int = Field(gt=0)
    time: str | None = Field(default=None, pattern=r"^\d{2}:\d{2}$")


class StoolIn(BaseModel):
    """Diaper change entry."""

    color: StoolColor | None = StoolColor.BROWN
    consistency: StoolConsistency | None = StoolConsistency.SOFT
    notes: str = ""


class MedicineIn(BaseModel):
    """New medicine definition."""

    name: str = Field(min_length=1)
    target: MedicineTarget = MedicineTarget.BABY
    dosage: str = ""
    notes: str = ""
