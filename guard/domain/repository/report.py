"""Report repository interface."""

from abc import ABC, abstractmethod

from guard.domain.model.report import Report


class ReportRepository(ABC):
    """Repository for incident reports."""

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Persist a new report."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Report]:
        """Return all reports, newest first."""
        pass
