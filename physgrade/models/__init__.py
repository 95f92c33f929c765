"""Question and answer models"""

from .question import (
    Answer,
    CommonMistake,
    EquationForm,
    EquationSet,
    Force,
    MCQOption,
    ParameterIdentifyConfig,
    PlacedForce,
    PlacedSupport,
    Point2D,
    Question,
    QuestionType,
    Schema,
    Support,
    UserAnswer,
    WaveMatchConfig,
    WaveMatchOption,
    WaveSketchConfig,
)

__all__ = [
    "Answer",
    "CommonMistake",
    "EquationForm",
    "EquationSet",
    "Force",
    "MCQOption",
    "ParameterIdentifyConfig",
    "PlacedForce",
    "PlacedSupport",
    "Point2D",
    "Question",
    "QuestionType",
    "Schema",
    "Support",
    "UserAnswer",
    "WaveMatchConfig",
    "WaveMatchOption",
    "WaveSketchConfig",
]
