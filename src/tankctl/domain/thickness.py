"""Panel (glass) thickness rules.

Two independent paths describe the same rule:

- :func:`thickness_for` — the authoritative step function on water depth
  with span penalties for long panels.
- :data:`THICKNESS_GRADES` — a depth/volume/thickness table used to
  label a thickness for humans.

INVARIANT: for every grade row, the step function at the row's depth
limit (no span penalty) yields the row's thickness. This is checked when
the module is imported.

Thickness values are abstract grade units (millimetres for float glass)
and are never larger than :data:`MAX_THICKNESS`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pydantic import BaseModel


class ThicknessTableError(ValueError):
    """The grade table disagrees with the step function."""


@dataclass(frozen=True)
class ThicknessGrade:
    """One row of the labeling table."""

    max_depth: float
    max_volume: float
    thickness: int
    description: str


THICKNESS_GRADES: tuple[ThicknessGrade, ...] = (
    ThicknessGrade(12, 20, 3, "3mm (for nano tanks only)"),
    ThicknessGrade(15, 40, 5, "5mm (small tanks)"),
    ThicknessGrade(24, 100, 6, "6mm (small-medium tanks)"),
    ThicknessGrade(30, 200, 8, "8mm (medium tanks)"),
    ThicknessGrade(36, 400, 10, "10mm (large tanks)"),
    ThicknessGrade(48, math.inf, 12, "12mm+ (extra large tanks)"),
)

# (max depth, base thickness), ascending; deeper water gets DEEP_TANK_THICKNESS.
DEPTH_STEPS: tuple[tuple[float, int], ...] = (
    (12, 3),
    (15, 5),
    (24, 6),
    (30, 8),
    (36, 10),
)
DEEP_TANK_THICKNESS = 12

# (span above which the penalty applies, penalty); penalties accumulate.
SPAN_PENALTIES: tuple[tuple[float, int], ...] = (
    (48, 2),
    (60, 2),
)
MAX_THICKNESS = 12

LARGE_PANEL_SPAN = 60
LARGE_PANEL_MIN_THICKNESS = 10

CONSULT_DEPTH = 36
CONSULT_SPAN = 60
BRACING_DEPTH = 24
BRACING_SPAN = 48

CONSULT_NOTE = (
    "Consider professional consultation for tanks over 36\" deep or panels over 5' long."
)
BRACING_NOTE = "Ensure proper bracing and frame support for optimal safety."

STANDARD_CONSIDERATIONS: tuple[str, ...] = (
    "Always use tempered or laminated glass for safety",
    "Consider professional installation for larger tanks",
    "Regular inspection of seals and supports recommended",
)
LONG_PANEL_CONSIDERATION = "Extra reinforcement recommended for panels over 4 feet long"


class ThicknessRecommendation(BaseModel):
    """Recommended panel thickness with safety annotations."""

    model_config = {"frozen": True}

    thickness: int
    label: str
    safety_note: str = ""
    considerations: list[str]
    requires_special_attention: bool = False


def thickness_for(depth: float, span: float) -> int:
    """Step-function thickness for water *depth* and longest panel *span*."""
    thickness = DEEP_TANK_THICKNESS
    for max_depth, base in DEPTH_STEPS:
        if depth <= max_depth:
            thickness = base
            break

    for min_span, penalty in SPAN_PENALTIES:
        if span > min_span:
            thickness += penalty

    return min(thickness, MAX_THICKNESS)


def grade_for_depth(depth: float) -> ThicknessGrade:
    """Table lookup by depth; deeper than every row falls to the last grade."""
    for grade in THICKNESS_GRADES:
        if depth <= grade.max_depth:
            return grade
    return THICKNESS_GRADES[-1]


def grade_for_thickness(thickness: float) -> ThicknessGrade:
    """Table row labelling exactly *thickness*.

    Values with no row of their own (penalised spans give 7, 9 or 11)
    take the highest grade's description.
    """
    for grade in THICKNESS_GRADES:
        if grade.thickness == thickness:
            return grade
    return THICKNESS_GRADES[-1]


def requires_special_attention(length: float, width: float, height: float) -> bool:
    """Whether a tank is deep or long enough to warrant an engineer."""
    return height > CONSULT_DEPTH or max(length, width) > CONSULT_SPAN


def safety_note(depth: float, span: float) -> str:
    if depth > CONSULT_DEPTH or span > CONSULT_SPAN:
        return CONSULT_NOTE
    if depth > BRACING_DEPTH or span > BRACING_SPAN:
        return BRACING_NOTE
    return ""


def recommend(length: float, width: float, height: float) -> ThicknessRecommendation:
    """Full thickness recommendation for a tank measured in inches.

    Panels longer than five feet are never recommended below the
    10-unit grade, whatever their depth.
    """
    span = max(length, width)
    thickness = thickness_for(height, span)
    if span > LARGE_PANEL_SPAN:
        thickness = max(thickness, LARGE_PANEL_MIN_THICKNESS)

    considerations = list(STANDARD_CONSIDERATIONS)
    if span > BRACING_SPAN:
        considerations.append(LONG_PANEL_CONSIDERATION)

    return ThicknessRecommendation(
        thickness=thickness,
        label=grade_for_thickness(thickness).description,
        safety_note=safety_note(height, span),
        considerations=considerations,
        requires_special_attention=requires_special_attention(length, width, height),
    )


def _check_grade_table() -> None:
    """Verify the labeling table against the step function."""
    previous = 0.0
    for grade in THICKNESS_GRADES:
        if grade.max_depth <= previous:
            msg = f"Thickness grades must ascend by depth (at {grade.description!r})"
            raise ThicknessTableError(msg)
        previous = grade.max_depth

        stepped = thickness_for(grade.max_depth, 0)
        if stepped != grade.thickness or grade_for_depth(grade.max_depth) is not grade:
            msg = (
                f"Grade {grade.description!r} says {grade.thickness} at depth "
                f"{grade.max_depth}, step function says {stepped}"
            )
            raise ThicknessTableError(msg)


_check_grade_table()
