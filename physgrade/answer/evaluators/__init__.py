"""
Type-specific answer evaluators.

Each module implements the evaluator for one question type (the
selection module covers both multiple-choice and wave-match).
"""

from .choice import MultipleChoiceEvaluator, SelectionEvaluator, WaveMatchEvaluator
from .dcl import ANGLE_TOLERANCE_DEG, POSITION_TOLERANCE, DiagramEvaluator
from .equation import EquationSelectionEvaluator
from .multi_step import MultiStepEvaluator
from .numeric import NumericEvaluator, match_common_mistake
from .parameter_identify import ParameterIdentifyEvaluator
from .wave_sketch import MIN_DRAWN_POINTS, WaveSketchEvaluator

__all__ = [
    "SelectionEvaluator",
    "MultipleChoiceEvaluator",
    "WaveMatchEvaluator",
    "NumericEvaluator",
    "match_common_mistake",
    "DiagramEvaluator",
    "POSITION_TOLERANCE",
    "ANGLE_TOLERANCE_DEG",
    "EquationSelectionEvaluator",
    "MultiStepEvaluator",
    "WaveSketchEvaluator",
    "MIN_DRAWN_POINTS",
    "ParameterIdentifyEvaluator",
]
