"""Tests for the whole-word check and the placement/case rule gate."""

from brand_canon.config import Settings
from brand_canon.rules import RuleGate, first_token, is_separate_term


class TestIsSeparateTerm:
    def test_word_at_start_middle_end(self):
        assert is_separate_term("GUM Travel soft Dantų šepetėlis", "gum")
        assert is_separate_term("Parodontax gum paste 75ml", "gum")
        assert is_separate_term("Parodontax whitening gum", "gum")

    def test_substring_rejected(self):
        assert not is_separate_term("sugar crystals 75g", "gum")
        assert not is_separate_term("Sonya speaker", "sony")

    def test_hyphen_and_punctuation_are_boundaries(self):
        assert is_separate_term("Gripp-Heel tab. N50", "heel")
        assert is_separate_term("Beauty, Ultra Clean formula", "ultra")

    def test_case_insensitive(self):
        assert is_separate_term("Happy Baby diapers", "HAPPY")
        assert is_separate_term("HAPPY Baby diapers", "HAPPY")

    def test_no_folding(self):
        assert not is_separate_term("Babē Lip Care 10ml", "Babe")

    def test_regex_characters_escaped(self):
        assert is_separate_term("ultra ginkgo&ginseng 60", "ginkgo&ginseng")
        assert not is_separate_term("a+b cream", "a.b")

    def test_empty_term(self):
        assert not is_separate_term("anything", "")


class TestFirstToken:
    def test_split_on_non_alnum(self):
        assert first_token("ultra ginkgo&ginseng") == "ultra"
        assert first_token("gripp-heel") == "gripp"
        assert first_token("dr_organic") == "dr"


class TestStopwords:
    def test_stopword_always_rejected(self, gate):
        assert not gate.passes("BIO cream", "bio")
        assert not gate.passes("GENEDENS BIO whitening paste", "bio")

    def test_multi_word_alias_with_stopword_is_fine(self, gate):
        assert gate.passes("Bio Oil 60ml", "bio oil")


class TestUppercaseRule:
    def test_exact_uppercase_at_front(self, gate):
        assert gate.passes("HAPPY Baby Diapers Size 3", "happy")
        assert gate.passes("HAPPY-Care Pack", "happy")

    def test_mixed_case_rejected(self, gate):
        assert not gate.passes("Happy Baby Diapers Size 3", "happy")
        assert not gate.passes("happy-Care Pack", "happy")

    def test_not_at_front_rejected(self, gate):
        assert not gate.passes("Baby HAPPY diapers", "happy")

    def test_glued_word_rejected(self, gate):
        assert not gate.passes("HAPPYCARE wipes", "happy")

    def test_configurable(self):
        gate = RuleGate(uppercase_aliases={"nivea": "NIVEA"})
        assert gate.passes("NIVEA Soft", "nivea")
        assert not gate.passes("Nivea Soft", "nivea")
        assert gate.passes("cream by NIVEA", "other")


class TestFrontOnly:
    def test_at_front(self, gate):
        assert gate.passes("ULTRA GINKGO & GINSENG, 60 tablets", "ultra")
        assert gate.passes("ULTRA-CLEAN Whitening Gel", "ultra")
        assert gate.passes("Beauty: ULTRA Gel", "beauty")
        assert gate.passes("112 Face Wash 100ml", "112")

    def test_mid_title_rejected(self, gate):
        assert not gate.passes("PARODONTAX toothpaste ULTRA CLEAN", "ultra")
        assert not gate.passes("Beauty: ULTRA Gel", "ultra")

    def test_multi_token_alias_uses_first_token(self, gate):
        assert gate.passes("ULTRA BEAUTY Cream", "ultra beauty")
        assert not gate.passes("Cream ULTRA BEAUTY Pack", "ultra beauty")

    def test_prefix_of_longer_word_rejected(self, gate):
        assert not gate.passes("Ultrasonic cleaner", "ultra")

    def test_diacritics_folded(self):
        gate = RuleGate(front_only={"orto"})
        assert gate.passes("Ortó cream", "orto")


class TestFrontOrSecond:
    def test_first_or_second_word(self, gate):
        assert gate.passes("Heel Spur cream", "heel")
        assert gate.passes("Comfort Heel Brand", "heel")
        assert gate.passes("Gripp-Heel tab. N50", "heel")

    def test_third_word_rejected(self, gate):
        assert not gate.passes("Very Comfort Heel Brand", "heel")

    def test_only_one_leading_token(self, gate):
        assert not gate.passes("Foo-Bar Heel", "heel")

    def test_only_exact_alias_is_restricted(self, gate):
        assert gate.passes("Very Comfort Heel Brand", "heel brand")


class TestUnrestricted:
    def test_anywhere(self, gate):
        assert gate.passes("Some cream by isdin", "isdin")

    def test_permissive_gate(self):
        gate = RuleGate.permissive()
        assert gate.passes("GENEDENS BIO paste", "bio")
        assert gate.passes("Happy Baby", "happy")

    def test_empty_alias_rejected(self, gate):
        assert not gate.passes("anything", "")
        assert not gate.passes("anything", "   ")

    def test_none_title(self, gate):
        assert gate.passes(None, "isdin")
        assert not gate.passes(None, "ultra")


class TestFromSettings:
    def test_defaults(self):
        gate = RuleGate.from_settings(Settings())
        assert "ultra" in gate.front_only
        assert "heel" in gate.front_or_second
        assert gate.stopwords == frozenset({"bio", "neb"})
        assert gate.uppercase_aliases == {"happy": "HAPPY"}

    def test_override_sets(self):
        gate = RuleGate.from_settings(Settings(front_only={"isdin"}, stopwords=set()))
        assert not gate.passes("Cream ISDIN", "isdin")
        assert gate.passes("GENEDENS BIO paste", "bio")
