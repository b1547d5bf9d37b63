# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from healthguard.assessment.bmi import OBESITY_NOTE, OVERWEIGHT_NOTE, bmi_advice_note, calculate_bmi
from healthguard.assessment.classifier import (
    BPTier,
    ColorTag,
    HRStatus,
    evaluate_bp,
    evaluate_hr,
)


class TestEvaluateBP(unittest.TestCase):
    def test_normal(self) -> None:
        result = evaluate_bp(119, 79, age=30)
        self.assertEqual(result.tier, BPTier.NORMAL)
        self.assertEqual(result.color_tag, ColorTag.GREEN)
        self.assertEqual(result.label, "正常")

    def test_systolic_grade3_wins(self) -> None:
        result = evaluate_bp(185, 90, age=40)
        self.assertEqual(result.tier, BPTier.GRADE3)
        self.assertEqual(result.color_tag, ColorTag.RED)

    def test_elder_acceptable(self) -> None:
        result = evaluate_bp(145, 85, age=70, bmi=20)
        self.assertEqual(result.tier, BPTier.ELDER_ACCEPTABLE)
        self.assertEqual(result.color_tag, ColorTag.BLUE)

    def test_high_normal_with_obesity_note(self) -> None:
        result = evaluate_bp(125, 78, age=45, bmi=29)
        self.assertEqual(result.tier, BPTier.HIGH_NORMAL)
        self.assertEqual(result.color_tag, ColorTag.ORANGE)
        self.assertIn(OBESITY_NOTE, result.advice)

    def test_rule_order_at_boundaries(self) -> None:
        cases = [
            ((180, 70), BPTier.GRADE3),
            ((179, 110), BPTier.GRADE3),
            ((160, 70), BPTier.GRADE2),
            ((150, 100), BPTier.GRADE2),
            ((140, 70), BPTier.GRADE1),
            ((130, 90), BPTier.GRADE1),
            ((120, 70), BPTier.HIGH_NORMAL),
            ((110, 80), BPTier.HIGH_NORMAL),
            ((90, 60), BPTier.NORMAL),
            ((89, 70), BPTier.LOW),
            ((130, 59), BPTier.LOW),
            # low is checked first, even against a very high systolic
            ((200, 50), BPTier.LOW),
        ]
        for (sbp, dbp), tier in cases:
            with self.subTest(sbp=sbp, dbp=dbp):
                self.assertEqual(evaluate_bp(sbp, dbp).tier, tier)

    def test_elder_override_conditions(self) -> None:
        self.assertEqual(evaluate_bp(145, 85, age=64).tier, BPTier.GRADE1)
        self.assertEqual(evaluate_bp(145, 85, age=65).tier, BPTier.ELDER_ACCEPTABLE)
        self.assertEqual(evaluate_bp(149, 89, age=65).tier, BPTier.ELDER_ACCEPTABLE)
        self.assertEqual(evaluate_bp(150, 85, age=70).tier, BPTier.GRADE1)
        self.assertEqual(evaluate_bp(130, 90, age=70).tier, BPTier.GRADE1)
        self.assertEqual(evaluate_bp(165, 85, age=70).tier, BPTier.GRADE2)
        self.assertEqual(evaluate_bp(125, 78, age=80).tier, BPTier.HIGH_NORMAL)

    def test_color_mapping(self) -> None:
        colors = {
            (80, 50): ColorTag.YELLOW,
            (110, 70): ColorTag.GREEN,
            (125, 70): ColorTag.ORANGE,
            (145, 70): ColorTag.RED,
            (165, 70): ColorTag.RED,
            (185, 70): ColorTag.RED,
        }
        for (sbp, dbp), color in colors.items():
            self.assertEqual(evaluate_bp(sbp, dbp).color_tag, color)

    def test_bmi_note_only_for_middle_tiers(self) -> None:
        self.assertIn(OVERWEIGHT_NOTE, evaluate_bp(145, 85, age=40, bmi=25).advice)
        self.assertIn(OBESITY_NOTE, evaluate_bp(165, 85, age=40, bmi=30).advice)
        self.assertNotIn(OVERWEIGHT_NOTE, evaluate_bp(145, 85, age=40, bmi=23.9).advice)
        for sbp, dbp, age in ((185, 85, 40), (80, 50, 40), (110, 70, 40), (145, 85, 70)):
            advice = evaluate_bp(sbp, dbp, age=age, bmi=35).advice
            self.assertNotIn(OBESITY_NOTE, advice)
            self.assertNotIn(OVERWEIGHT_NOTE, advice)

    def test_missing_profile_fields_use_defaults(self) -> None:
        self.assertEqual(evaluate_bp(125, 78, None, None, None), evaluate_bp(125, 78))
        self.assertEqual(evaluate_bp(145, 85, age=None).tier, BPTier.GRADE1)
        self.assertEqual(evaluate_bp(125, 78, bmi=float("nan")), evaluate_bp(125, 78, bmi=22))

    def test_gender_does_not_change_tier(self) -> None:
        reference = evaluate_bp(145, 85, age=40, gender="unknown", bmi=25)
        for gender in ("female", "male", "女", None):
            with self.subTest(gender=gender):
                self.assertEqual(evaluate_bp(145, 85, age=40, gender=gender, bmi=25), reference)

    def test_idempotent(self) -> None:
        first = evaluate_bp(150, 95, 55, "female", 26.5)
        second = evaluate_bp(150, 95, 55, "female", 26.5)
        self.assertEqual(first, second)


class TestEvaluateHR(unittest.TestCase):
    def test_status(self) -> None:
        self.assertEqual(evaluate_hr(50).status, HRStatus.SLOW)
        self.assertEqual(evaluate_hr(72).status, HRStatus.NORMAL)
        self.assertEqual(evaluate_hr(105).status, HRStatus.FAST)
        self.assertEqual(evaluate_hr(105, age=40, gender="female").status, HRStatus.NORMAL)
        self.assertEqual(evaluate_hr(57, age=70).status, HRStatus.NORMAL)

    def test_not_measured(self) -> None:
        result = evaluate_hr(0)
        self.assertEqual(result.status, HRStatus.UNKNOWN)
        self.assertEqual(result.label, "未测量")

    def test_carries_threshold(self) -> None:
        result = evaluate_hr(120, age=10)
        self.assertEqual(result.status, HRStatus.FAST)
        self.assertEqual((result.threshold.min, result.threshold.max), (60, 110))


class TestBMI(unittest.TestCase):
    def test_calculate(self) -> None:
        info = calculate_bmi(70, 175)
        self.assertEqual(info["bmi"], 22.9)
        self.assertEqual(info["category"], "正常")
        self.assertEqual(calculate_bmi(90, 170)["category"], "肥胖")
        self.assertEqual(calculate_bmi(45, 170)["category"], "偏瘦")

    def test_missing_inputs(self) -> None:
        self.assertIsNone(calculate_bmi(None, 170))
        self.assertIsNone(calculate_bmi(70, 0))

    def test_advice_note_thresholds(self) -> None:
        self.assertEqual(bmi_advice_note(23.9), "")
        self.assertEqual(bmi_advice_note(24), OVERWEIGHT_NOTE)
        self.assertEqual(bmi_advice_note(27.9), OVERWEIGHT_NOTE)
        self.assertEqual(bmi_advice_note(28), OBESITY_NOTE)


if __name__ == "__main__":
    unittest.main()
