"""
Skin scoring engine unit tests
"""

import pytest

from services.skin_scoring import (
    FaceAnnotation,
    LIKELIHOODS,
    SkinScoringEngine,
    calculate_scores,
    finalize,
    likelihood_index,
    likelihood_score,
)


class TestLikelihoodMapping:

    def test_scale_order(self):
        assert LIKELIHOODS == (
            "UNKNOWN", "VERY_UNLIKELY", "UNLIKELY", "POSSIBLE", "LIKELY", "VERY_LIKELY"
        )

    @pytest.mark.parametrize("value,expected", [
        ("UNKNOWN", 0),
        ("VERY_UNLIKELY", 20),
        ("UNLIKELY", 40),
        ("POSSIBLE", 60),
        ("LIKELY", 80),
        ("VERY_LIKELY", 100),
    ])
    def test_likelihood_score(self, value, expected):
        assert likelihood_score(value) == expected

    def test_unrecognised_value(self):
        assert likelihood_index("SOMEWHAT_LIKELY") == -1
        assert likelihood_score("SOMEWHAT_LIKELY") == -20

    def test_case_sensitive(self):
        assert likelihood_index("likely") == -1


class TestFinalize:

    def test_clamps_high(self):
        assert finalize(150) == 100

    def test_clamps_low(self):
        assert finalize(-30) == 0

    def test_rounds_half_up(self):
        assert finalize(55.5) == 56
        assert finalize(98.5) == 99
        assert finalize(-0.5) == 0

    def test_rounds_down(self):
        assert finalize(55.49) == 55

    def test_returns_int(self):
        assert isinstance(finalize(72.0), int)


class TestSkinScoringEngine:

    def test_neutral_face_scores_full(self):
        scores = calculate_scores(FaceAnnotation())
        assert scores.model_dump() == {
            "dullness": 100,
            "smoothness": 100,
            "firmness": 100,
            "spots": 100,
            "pores": 100,
        }

    def test_smoothness_from_joy_and_sorrow(self):
        face = FaceAnnotation(joy_likelihood="LIKELY", sorrow_likelihood="UNKNOWN")
        assert calculate_scores(face).smoothness == 60

        face = FaceAnnotation(joy_likelihood="VERY_LIKELY", sorrow_likelihood="VERY_LIKELY")
        assert calculate_scores(face).smoothness == 0

    def test_firmness_from_tilt_and_surprise(self):
        face = FaceAnnotation(tilt_angle=10.0, surprise_likelihood="UNLIKELY")
        assert calculate_scores(face).firmness == 75

    def test_firmness_ignores_tilt_sign(self):
        left = calculate_scores(FaceAnnotation(tilt_angle=-10.0, surprise_likelihood="UNLIKELY"))
        right = calculate_scores(FaceAnnotation(tilt_angle=10.0, surprise_likelihood="UNLIKELY"))
        assert left.firmness == right.firmness == 75

    def test_firmness_rounds_half_up(self):
        # (97 + 100) / 2 = 98.5
        face = FaceAnnotation(tilt_angle=3.0)
        assert calculate_scores(face).firmness == 99

    def test_firmness_clamped_after_combination(self):
        # (100 - 180) + (100 - 100) = -80 -> -40 -> 0
        face = FaceAnnotation(tilt_angle=180.0, surprise_likelihood="VERY_LIKELY")
        assert calculate_scores(face).firmness == 0

    def test_dullness_from_under_exposure(self):
        face = FaceAnnotation(under_exposed_likelihood="POSSIBLE")
        assert calculate_scores(face).dullness == 40

    def test_spots_and_pores_share_blur(self):
        face = FaceAnnotation(blurred_likelihood="LIKELY")
        scores = calculate_scores(face)
        assert scores.spots == 20
        assert scores.pores == 20

    def test_unrecognised_likelihood_clamped(self):
        face = FaceAnnotation(under_exposed_likelihood="BOGUS", blurred_likelihood="BOGUS")
        scores = calculate_scores(face)
        # 100 - (-20) = 120 before clamping
        assert scores.dullness == 100
        assert scores.spots == 100

    def test_unrecognised_joy_only_clamped_at_end(self):
        # 100 - (-20 + 80) / 2 = 70
        face = FaceAnnotation(joy_likelihood="BOGUS", sorrow_likelihood="LIKELY")
        assert calculate_scores(face).smoothness == 70

    def test_engine_and_function_agree(self, sample_face):
        assert SkinScoringEngine().calculate(sample_face) == calculate_scores(sample_face)

    def test_all_scores_in_range(self, sample_face):
        for value in calculate_scores(sample_face).model_dump().values():
            assert 0 <= value <= 100
