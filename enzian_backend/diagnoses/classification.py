"""
Enzian (Keckstein) classification engine.

A diagnosis scores four independent axes:

    Peritoneum (P1-P3), Ovary (O1-O3), Tube (T1-T3), Deep endometriosis (A-C)

The final classification is the concatenation of the four codes in that
fixed order, e.g. ``"P2O1T1B"``. The severity tier is derived from how many
axes sit at their most severe level (P3, O3, T3, C):

    >= 3 -> Grave, 2 -> Moderado-Grave, 1 -> Moderado, 0 -> Leve

Each axis is classified on its own after splitting the code, so the result
does not depend on how the codes happen to read as one string.

Everything in this module is pure; no database access.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.db import models


# ---------------------------------------------------------------------------
# Axis enumerations
# ---------------------------------------------------------------------------

class PeritoneumCode(models.TextChoices):
    P1 = 'P1', 'Lesões superficiais isoladas'
    P2 = 'P2', 'Lesões múltiplas superficiais'
    P3 = 'P3', 'Lesões profundas ou aderências'


class OvaryCode(models.TextChoices):
    O1 = 'O1', 'Endometrioma superficial'
    O2 = 'O2', 'Endometrioma profundo'
    O3 = 'O3', 'Endometrioma bilateral'


class TubeCode(models.TextChoices):
    T1 = 'T1', 'Lesão tubária unilateral'
    T2 = 'T2', 'Lesão tubária bilateral'
    T3 = 'T3', 'Obstrução tubária completa'


class DeepEndometriosisCode(models.TextChoices):
    A = 'A', 'Infiltração superficial'
    B = 'B', 'Infiltração profunda'
    C = 'C', 'Infiltração de órgãos adjacentes'


class LesionSize(models.TextChoices):
    SMALL = '<3cm', 'Menor que 3 cm'
    MEDIUM = '3-7cm', 'Entre 3 e 7 cm'
    LARGE = '>7cm', 'Maior que 7 cm'


@dataclass(frozen=True)
class Axis:
    key: str
    name: str
    choices: type[models.TextChoices]
    severe_code: str

    def level(self, code: str) -> int:
        """1-based level of ``code`` on this axis (1 mildest, 3 most severe)."""
        return self.choices.values.index(code) + 1


PERITONEUM = Axis('peritoneum', 'Peritônio', PeritoneumCode, 'P3')
OVARY = Axis('ovary', 'Ovário', OvaryCode, 'O3')
TUBE = Axis('tube', 'Tuba', TubeCode, 'T3')
DEEP_ENDOMETRIOSIS = Axis(
    'deep_endometriosis', 'Endometriose Profunda', DeepEndometriosisCode, 'C'
)

# Fixed composition order of the final classification.
AXES = (PERITONEUM, OVARY, TUBE, DEEP_ENDOMETRIOSIS)

SEVERE_MARKERS = frozenset(axis.severe_code for axis in AXES)

# Per-axis level labels used by the reference table and the report.
AXIS_LEVEL_LABELS = {1: 'Leve', 2: 'Moderado', 3: 'Grave'}


# ---------------------------------------------------------------------------
# Severity tiers
# ---------------------------------------------------------------------------

@dataclass(frozen=True, order=True)
class SeverityTier:
    rank: int
    label: str
    color: str

    def to_dict(self) -> dict:
        return {'label': self.label, 'rank': self.rank, 'color': self.color}


LEVE = SeverityTier(0, 'Leve', '#22c55e')
MODERADO = SeverityTier(1, 'Moderado', '#eab308')
MODERADO_GRAVE = SeverityTier(2, 'Moderado-Grave', '#f97316')
GRAVE = SeverityTier(3, 'Grave', '#ef4444')

SEVERITY_TIERS = (LEVE, MODERADO, MODERADO_GRAVE, GRAVE)


class IncompleteClassification(ValueError):
    """Raised when one or more axes have no selection."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Incomplete classification; missing axes: {', '.join(missing)}")


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def final_classification(peritoneum, ovary, tube, deep_endometriosis) -> str:
    """Concatenate the four axis codes in fixed order.

    Raises IncompleteClassification when any axis is empty; a partial code
    is never returned.
    """
    values = (peritoneum, ovary, tube, deep_endometriosis)
    missing = [axis.key for axis, value in zip(AXES, values) if not value]
    if missing:
        raise IncompleteClassification(missing)
    return ''.join(str(value) for value in values)


def split_classification(code: str) -> tuple[str, str, str, str]:
    """Split a stored classification into its four axis codes.

    Three 2-character tokens followed by the single deep-endometriosis
    letter. Raises ValueError for anything that is not a well-formed code.
    """
    if not isinstance(code, str) or len(code) != 7:
        raise ValueError(f'Malformed classification code: {code!r}')

    parts = (code[0:2], code[2:4], code[4:6], code[6])
    for axis, part in zip(AXES, parts):
        if part not in axis.choices.values:
            raise ValueError(f'Malformed classification code: {code!r} (bad {axis.key} {part!r})')
    return parts


def severe_count(code: str) -> int:
    """Number of axes at their most severe level."""
    return sum(1 for part in split_classification(code) if part in SEVERE_MARKERS)


def tier_for_count(count: int) -> SeverityTier:
    if count >= 3:
        return GRAVE
    if count == 2:
        return MODERADO_GRAVE
    if count == 1:
        return MODERADO
    return LEVE


def severity_tier(code: str) -> SeverityTier:
    """Severity tier of a final classification code."""
    return tier_for_count(severe_count(code))


def describe_axes(code: str) -> list[dict]:
    """Per-axis breakdown for display: code, axis name, description, level label."""
    rows = []
    for axis, part in zip(AXES, split_classification(code)):
        rows.append({
            'axis': axis.key,
            'name': axis.name,
            'code': part,
            'description': axis.choices(part).label,
            'severity': AXIS_LEVEL_LABELS[axis.level(part)],
        })
    return rows
