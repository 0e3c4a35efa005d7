"""Incident report entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from guard.domain.model.common import DomainModel
from guard.domain.value import Evidence, ReportId


class Report(DomainModel):
    """A child abuse incident reported through the app.

    Every descriptive field is optional: reporters often know only part of
    the picture. Ages are free text ("about 10").
    """

    id: ReportId
    abuser_name: Optional[str] = None
    abuser_gender: Optional[str] = None
    abuser_age: Optional[str] = None
    relationship: Optional[str] = None
    nature_of_abuse: Optional[str] = None
    description_of_incident: Optional[str] = None
    location: Optional[str] = None
    reporter_name: Optional[str] = None
    reporter_phone: Optional[str] = None
    victim_name: Optional[str] = None
    victim_age: Optional[str] = None
    victim_gender: Optional[str] = None
    description_of_victim: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    evidence: list[Evidence] = Field(default_factory=list)
