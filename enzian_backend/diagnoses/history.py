"""
Per-patient diagnosis history with trend indicators.

Input is one patient's diagnoses ordered newest first. Every diagnosis except
the oldest gets a trend against the next-older record:

    severity rank rises  -> worsening
    severity rank falls  -> improving
    unchanged            -> stable

Pure read-time computation; works on any object exposing
``final_classification``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from django.db import models

from enzian_backend.diagnoses.classification import SeverityTier, severity_tier


class Trend(models.TextChoices):
    IMPROVING = 'improving', 'Melhora'
    WORSENING = 'worsening', 'Piora'
    STABLE = 'stable', 'Estável'


@dataclass(frozen=True)
class HistoryEntry:
    diagnosis: Any
    severity: SeverityTier
    trend: Trend | None = None


@dataclass(frozen=True)
class PatientHistory:
    entries: list[HistoryEntry] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def latest(self) -> HistoryEntry | None:
        return self.entries[0] if self.entries else None

    @property
    def latest_classification(self) -> str | None:
        latest = self.latest
        return latest.diagnosis.final_classification if latest else None

    @property
    def latest_severity(self) -> SeverityTier | None:
        latest = self.latest
        return latest.severity if latest else None


def compare_trend(current: SeverityTier, previous: SeverityTier) -> Trend:
    if current.rank > previous.rank:
        return Trend.WORSENING
    if current.rank < previous.rank:
        return Trend.IMPROVING
    return Trend.STABLE


def classification_trend(current_code: str, previous_code: str) -> Trend:
    """Trend between two classification codes (current is the newer one)."""
    return compare_trend(severity_tier(current_code), severity_tier(previous_code))


def build_history(diagnoses: Sequence[Any]) -> PatientHistory:
    """Annotate newest-first diagnoses with severity and trend."""
    diagnoses = list(diagnoses)
    tiers = [severity_tier(d.final_classification) for d in diagnoses]

    entries = []
    for index, (diagnosis, tier) in enumerate(zip(diagnoses, tiers)):
        trend = None
        if index + 1 < len(diagnoses):
            trend = compare_trend(tier, tiers[index + 1])
        entries.append(HistoryEntry(diagnosis=diagnosis, severity=tier, trend=trend))

    return PatientHistory(entries=entries)
