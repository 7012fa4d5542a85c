from __future__ import annotations

from types import SimpleNamespace

from django.test import SimpleTestCase

from enzian_backend.diagnoses.classification import GRAVE, LEVE, MODERADO
from enzian_backend.diagnoses.history import Trend, build_history, classification_trend


def _records(*codes):
    """Newest first, like the history endpoint passes them."""
    return [SimpleNamespace(id=i, final_classification=code) for i, code in enumerate(codes)]


class BuildHistoryTest(SimpleTestCase):
    def test_worsening_pair(self):
        history = build_history(_records("P3O3T3C", "P1O1T1A"))

        self.assertEqual(history.total, 2)
        self.assertEqual(history.entries[0].trend, Trend.WORSENING)
        self.assertIsNone(history.entries[1].trend)
        self.assertEqual(history.latest_classification, "P3O3T3C")
        self.assertEqual(history.latest_severity, GRAVE)

    def test_improving_and_stable(self):
        history = build_history(_records("P1O1T1A", "P1O2T2A", "P3O1T1A"))

        self.assertEqual(
            [entry.trend for entry in history.entries],
            [Trend.STABLE, Trend.IMPROVING, None],
        )
        self.assertEqual(history.entries[2].severity, MODERADO)

    def test_single_entry_has_no_trend(self):
        history = build_history(_records("P2O1T1B"))

        self.assertEqual(history.total, 1)
        self.assertIsNone(history.entries[0].trend)
        self.assertEqual(history.latest_severity, LEVE)

    def test_empty_history(self):
        history = build_history([])

        self.assertEqual(history.total, 0)
        self.assertIsNone(history.latest)
        self.assertIsNone(history.latest_classification)
        self.assertIsNone(history.latest_severity)

    def test_classification_trend(self):
        self.assertEqual(classification_trend("P1O1T1A", "P3O1T1A"), Trend.IMPROVING)
        self.assertEqual(classification_trend("P3O3T1A", "P3O1T1A"), Trend.WORSENING)
