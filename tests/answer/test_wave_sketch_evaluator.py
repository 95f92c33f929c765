"""
Tests for drawn-wave grading.

The expected wave is y = 2·sin(2πx/4) unless a test says otherwise; the
sketches are sampled curves over two full wavelengths.
"""

import math

import pytest

from physgrade.answer.evaluators import MIN_DRAWN_POINTS, WaveSketchEvaluator


@pytest.fixture
def sine_question(make_question):
    return make_question(
        "wave-sketch",
        tags=["waves"],
        waveSketch={"amplitude": 2, "wavelength": 4, "phase": 0, "waveType": "sine"},
    )


def evaluate(question, make_answer, points):
    return WaveSketchEvaluator(question=question).evaluate(make_answer(drawnPoints=points))


class TestWaveSketch:
    """Amplitude, wavelength and shape criteria."""

    def test_exact_sketch(self, sine_question, make_answer, sample_wave):
        result = evaluate(sine_question, make_answer, sample_wave())

        assert result.is_correct is True
        assert result.score == 100
        validation = result.wave_sketch_validation
        assert validation.amplitude_correct is True
        assert validation.wavelength_correct is True
        assert validation.shape_correct is True
        assert validation.phase_correct is True
        assert validation.amplitude_error == pytest.approx(0.0, abs=1e-9)
        assert validation.wavelength_error == pytest.approx(0.0, abs=1e-6)
        assert validation.phase_error == 0
        assert validation.overall_accuracy == pytest.approx(100.0)
        assert result.competencies_assessed == ["waves"]

    def test_point_order_does_not_matter(self, sine_question, make_answer, sample_wave):
        forward = evaluate(sine_question, make_answer, sample_wave())
        backward = evaluate(sine_question, make_answer, list(reversed(sample_wave())))

        assert backward.score == forward.score
        assert backward.wave_sketch_validation == forward.wave_sketch_validation

    def test_wrong_amplitude(self, sine_question, make_answer, sample_wave):
        """Half the amplitude keeps the wavelength and most of the shape."""
        result = evaluate(sine_question, make_answer, sample_wave(amplitude=1.0))

        assert result.score == 70
        assert result.is_correct is False
        assert result.wave_sketch_validation.amplitude_correct is False
        assert result.wave_sketch_validation.amplitude_error == pytest.approx(0.5)
        amplitude_items = [item for item in result.feedback if item.target == "wave-amplitude"]
        assert amplitude_items[0].kind == "error"

    def test_wrong_wavelength(self, sine_question, make_answer, sample_wave):
        result = evaluate(sine_question, make_answer, sample_wave(wavelength=2.0))

        assert result.wave_sketch_validation.wavelength_correct is False
        assert result.wave_sketch_validation.wavelength_error == pytest.approx(0.5, abs=0.01)
        assert result.score <= 70
        assert result.is_correct is False

    def test_cosine_drawn_for_sine(self, sine_question, make_answer, sample_wave):
        """A quarter-period shift fails the shape check but not the phase check."""
        result = evaluate(sine_question, make_answer, sample_wave(wave_type="cosine"))

        validation = result.wave_sketch_validation
        assert validation.shape_correct is False
        assert validation.phase_correct is True
        assert 50 < validation.overall_accuracy < 60
        assert result.score == 60
        assert result.is_correct is False

    def test_inverted_wave_gets_phase_hint(self, sine_question, make_answer, sample_wave):
        result = evaluate(sine_question, make_answer, sample_wave(phase=math.pi))

        assert result.wave_sketch_validation.phase_correct is False
        hints = [item for item in result.feedback if item.kind == "hint"]
        assert hints[0].target == "wave-phase"

    def test_phase_in_degrees(self, make_question, make_answer, sample_wave):
        question = make_question(
            "wave-sketch",
            waveSketch={"amplitude": 2, "wavelength": 4, "phase": 90, "phaseUnit": "deg"},
        )
        result = evaluate(question, make_answer, sample_wave(phase=math.pi / 2))

        assert result.score == 100

    def test_cosine_wave_type(self, make_question, make_answer, sample_wave):
        question = make_question(
            "wave-sketch",
            waveSketch={"amplitude": 2, "wavelength": 4, "waveType": "cosine"},
        )
        result = evaluate(question, make_answer, sample_wave(wave_type="cosine"))

        assert result.is_correct is True

    def test_wavelength_check_skipped_without_wavelength(self, make_question, make_answer, sample_wave):
        question = make_question("wave-sketch", waveSketch={"amplitude": 2, "frequency": 0.25})
        result = evaluate(question, make_answer, sample_wave())

        assert result.score == 100
        assert result.wave_sketch_validation.wavelength_correct is True
        assert not [item for item in result.feedback if item.target == "wave-wavelength"]

    def test_flat_line_has_no_crossings(self, sine_question, make_answer):
        """Without two zero crossings the wavelength check is skipped."""
        points = [{"x": x * 0.5, "y": 1.0} for x in range(20)]
        result = evaluate(sine_question, make_answer, points)

        assert result.wave_sketch_validation.amplitude_correct is False
        assert result.wave_sketch_validation.wavelength_correct is True


class TestInsufficientInput:
    def test_too_few_points(self, sine_question, make_answer, sample_wave):
        points = sample_wave(count=MIN_DRAWN_POINTS - 1)
        result = evaluate(sine_question, make_answer, points)

        assert result.score == 0
        assert result.messages() == ["Insufficient drawing"]
        assert result.feedback[0].target == "wave-shape"
        assert result.wave_sketch_validation is None

    def test_no_points(self, sine_question, make_answer):
        result = WaveSketchEvaluator(question=sine_question).evaluate(make_answer())
        assert result.messages() == ["Insufficient drawing"]

    def test_question_without_wave(self, make_question, make_answer, sample_wave):
        result = evaluate(make_question("wave-sketch"), make_answer, sample_wave())

        assert result.score == 0
        assert result.messages() == ["No wave defined for this question"]
