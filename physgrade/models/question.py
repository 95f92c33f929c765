"""
Question specification and user answer models.

These mirror the records exchanged with the UI and the question bank.
Field names are snake_case in Python and camelCase on the wire; both are
accepted on input. Unknown fields are ignored so the engine tolerates
whatever extra state the UI attaches to an answer.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    """Question types the engine knows how to grade."""

    MCQ = "mcq"
    NUMERIC = "numeric"
    DCL = "dcl"
    EQUATION = "equation"
    MULTI_STEP = "multi-step"
    WAVE_SKETCH = "wave-sketch"
    WAVE_MATCH = "wave-match"
    PARAMETER_IDENTIFY = "parameter-identify"


class _Record(BaseModel):
    """Base for wire records: camelCase aliases, extra fields ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Point2D(_Record):
    x: float
    y: float


# ---------------------------------------------------------------------------
# Expected answers
# ---------------------------------------------------------------------------


class Answer(_Record):
    """
    Expected numeric answer.

    A tolerance of 0 or a missing tolerance type means "use the
    configured default".
    """

    variable: str = ""
    value: float
    unit: str = ""
    tolerance: float = 0.0
    tolerance_type: Optional[Literal["percent", "absolute"]] = None
    significant_figures: Optional[int] = None


class CommonMistake(_Record):
    """Pre-authored wrong-answer signature with remedial feedback."""

    pattern: str = ""
    pattern_type: Literal["regex", "value", "range"]
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    message: str
    hint: str = ""
    category: str = "calculation"


class MCQOption(_Record):
    id: str
    text: str = ""
    is_correct: bool = False
    feedback: Optional[str] = None


# ---------------------------------------------------------------------------
# Free-body diagrams
# ---------------------------------------------------------------------------


class Force(_Record):
    id: str = ""
    name: str
    magnitude: Optional[float] = None
    angle: float  # degrees from horizontal
    application_point: Point2D
    is_unknown: bool = False


class Support(_Record):
    id: str = ""
    type: str  # pin | roller | fixed | cable | link
    position: Point2D
    angle: Optional[float] = None
    reactions: list[str] = Field(default_factory=list)


class Schema(_Record):
    """Reference diagram for a DCL question."""

    type: str = "beam"
    width: float = 0.0
    height: float = 0.0
    correct_forces: list[Force] = Field(default_factory=list)
    correct_supports: list[Support] = Field(default_factory=list)


class EquationForm(_Record):
    id: str
    latex: str = ""
    terms: list[str] = Field(default_factory=list)
    accepted_variants: list[str] = Field(default_factory=list)


class EquationSet(_Record):
    required: list[str] = Field(default_factory=list)
    forms: list[EquationForm] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Waves
# ---------------------------------------------------------------------------


class WaveSketchConfig(_Record):
    """
    Wave the learner must draw or read.

    Only the physical parameters are used for grading; axis labels,
    ranges and the pixel tolerance are display settings.
    """

    amplitude: float
    wavelength: Optional[float] = None
    frequency: Optional[float] = None
    phase: float = 0.0
    phase_unit: Literal["rad", "deg"] = "rad"
    wave_type: Literal["sine", "cosine"] = "sine"

    x_axis_label: str = ""
    y_axis_label: str = ""
    x_range: Optional[tuple[float, float]] = None
    y_range: Optional[tuple[float, float]] = None
    grid_spacing: Optional[float] = None
    tolerance: Optional[float] = None


class WaveMatchOption(_Record):
    id: str
    equation: str = ""
    is_correct: bool = False
    feedback: Optional[str] = None


class WaveMatchConfig(_Record):
    wave_config: Optional[WaveSketchConfig] = None
    options: list[WaveMatchOption] = Field(default_factory=list)


WaveParameter = Literal["amplitude", "wavelength", "frequency", "period", "phase"]


class ParameterIdentifyConfig(_Record):
    wave_config: WaveSketchConfig
    parameters_to_find: list[WaveParameter] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Question
# ---------------------------------------------------------------------------


class Question(_Record):
    """
    Question specification as supplied by the question bank.

    ``type`` is kept as a plain string so that unknown types reach the
    dispatcher, which answers them with an "unsupported" result.
    ``instantiated_answer`` (a parameterised instance of the question)
    takes precedence over ``answer``.
    """

    id: str = ""
    type: str
    tags: list[str] = Field(default_factory=list)
    title: str = ""

    answer: Union[Answer, list[Answer], None] = None
    instantiated_answer: Union[Answer, list[Answer], None] = None

    diagram_schema: Optional[Schema] = Field(default=None, alias="schema")
    equations: Optional[EquationSet] = None
    options: Optional[list[MCQOption]] = None
    common_mistakes: list[CommonMistake] = Field(default_factory=list)

    wave_sketch: Optional[WaveSketchConfig] = None
    wave_match: Optional[WaveMatchConfig] = None
    parameter_identify: Optional[ParameterIdentifyConfig] = None

    def expected_answer(self) -> Optional[Answer]:
        """First expected answer record, preferring the instantiated one."""
        expected = self.instantiated_answer if self.instantiated_answer is not None else self.answer
        if isinstance(expected, list):
            return expected[0] if expected else None
        return expected


# ---------------------------------------------------------------------------
# User answer
# ---------------------------------------------------------------------------


class PlacedForce(_Record):
    id: str = ""
    name: str = ""
    angle: float
    application_point: Point2D


class PlacedSupport(_Record):
    id: str = ""
    type: str
    position: Point2D


class UserAnswer(_Record):
    """
    Learner's answer: a flat bag of optional fields.

    Which fields are populated depends on the question type; evaluators
    read only the ones they need.
    """

    question_id: Optional[str] = None
    timestamp: Optional[float] = None
    time_spent: Optional[float] = None

    selected_option: Optional[str] = None
    numeric_value: Optional[float] = None
    unit: Optional[str] = None

    placed_forces: Optional[list[PlacedForce]] = None
    placed_supports: Optional[list[PlacedSupport]] = None

    selected_equations: Optional[list[str]] = None
    equation_terms: Optional[dict[str, list[str]]] = None

    intermediate_values: Optional[dict[str, float]] = None
    final_answer: Optional[float] = None

    drawn_points: Optional[list[Point2D]] = None
    selected_wave_option: Optional[str] = None
    identified_parameters: Optional[dict[str, Optional[float]]] = None
