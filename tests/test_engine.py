"""
Tests for the substitution engine.
"""

import pytest

from mathenvirons.engine import Substitutor, transform
from mathenvirons.errors import TransformError
from mathenvirons.markers import PROOF_END, PROOF_START, MarkerRule, MarkerTable


class TestTransform:
    """Literal expansion with the default vocabulary"""

    def test_empty_input(self):
        assert transform("") == ""

    @pytest.mark.parametrize("text", [
        "plain text",
        "# Heading\n\nSome $x^2$ maths and {braces}.",
        "{#Theorem} {proof} {/ proof} #theorem",
        "ünïcödé ∀x ∈ Γ",
    ])
    def test_identity_without_markers(self, text):
        assert transform(text) == text

    def test_single_theorem(self):
        assert transform("{#theorem}") == "<strong>Theorem.</strong>"

    def test_proof_block(self):
        result = transform("{#proof} body {/proof}")
        assert result == PROOF_START.expansion + " body " + PROOF_END.expansion

    def test_every_occurrence_replaced(self):
        text = "{#theorem} A.\n\n{#theorem} B.\n"
        assert transform(text) == (
            "<strong>Theorem.</strong> A.\n\n<strong>Theorem.</strong> B.\n"
        )

    def test_surrounding_text_preserved(self):
        text = "Intro\n{#theorem} Every set has a power set.\n{#proof}\nCantor.\n{/proof}\nOutro"
        expected = (
            "Intro\n<strong>Theorem.</strong> Every set has a power set.\n"
            + PROOF_START.expansion + "\nCantor.\n" + PROOF_END.expansion + "\nOutro"
        )
        assert transform(text) == expected

    def test_unbalanced_markers_are_not_checked(self):
        assert transform("{/proof}{/proof}") == PROOF_END.expansion * 2

    def test_adjacent_markers(self):
        assert transform("{#theorem}{#theorem}") == "<strong>Theorem.</strong>" * 2


class TestRuleOrder:
    """Later rules see text inserted by earlier ones"""

    def test_later_rule_rewrites_earlier_expansion(self):
        table = MarkerTable([
            MarkerRule("{#a}", "[{#b}]"),
            MarkerRule("{#b}", "B"),
        ])
        assert transform("{#a} {#b}", table) == "[B] B"

    def test_earlier_rule_does_not_see_later_expansion(self):
        table = MarkerTable([
            MarkerRule("{#b}", "B"),
            MarkerRule("{#a}", "[{#b}]"),
        ])
        assert transform("{#a} {#b}", table) == "[{#b}] B"

    def test_no_rescan_within_rule(self):
        """An expansion containing its own marker is not expanded again"""
        table = MarkerTable([MarkerRule("{#a}", "{#a}{#a}")])
        assert transform("{#a}", table) == "{#a}{#a}"

    def test_multibyte_marker(self):
        table = MarkerTable([MarkerRule("{#θεώρημα}", "Θ")])
        assert transform("x {#θεώρημα} y", table) == "x Θ y"


class TestSubstitutor:

    def test_reusable_across_calls(self):
        substitutor = Substitutor()
        assert substitutor.transform("{#theorem}") == substitutor.transform("{#theorem}")

    def test_failure_channel(self):
        class Failing(Substitutor):
            def transform(self, text):
                raise TransformError("cannot expand", chapter="Intro")

        with pytest.raises(TransformError, match="Intro: cannot expand"):
            Failing().transform("{#theorem}")
