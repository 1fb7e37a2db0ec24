"""Tests for the letter rule modules."""

import pytest

from metaphone3.rules import DISPATCH, rules_for, run_cascade
from metaphone3.rules import g, k, l, t, w, x, z


class TestDispatch:
    """Tests for the letter dispatch table."""

    def test_all_consonants(self):
        """Test every consonant has a handler."""
        for letter in "BCDFGHJKLMNPQRSTVWXZ":
            assert letter in DISPATCH

    def test_vowels_not_dispatched(self):
        """Test vowels go through the vowel path instead."""
        for letter in "AEIOUY":
            assert letter not in DISPATCH

    def test_folded_letters(self):
        """Test folded letters are dispatched."""
        for letter in ("ß", "Ç", "Ñ", "Ð", "Þ", "\uC28A", "\uC28E"):
            assert letter in DISPATCH

    def test_rules_for(self):
        """Test rules_for returns the letter's cascade in order."""
        assert rules_for("G") == g.RULES
        assert rules_for("K") == (k.silent_k,)
        assert rules_for("W")[0] is w.silent_w_at_beginning

    def test_rules_for_unknown(self):
        """Test unknown letters raise ValueError."""
        with pytest.raises(ValueError, match="Unknown letter"):
            rules_for("A")

    def test_run_cascade_first_match_wins(self, make_scan):
        """Test the cascade stops at the first matching rule."""
        calls = []

        def no(scan):
            calls.append("no")
            return False

        def yes(scan):
            calls.append("yes")
            return True

        def never(scan):
            calls.append("never")
            return True

        assert run_cascade(make_scan("TOM"), (no, yes, never)) is True
        assert calls == ["no", "yes"]

    def test_run_cascade_no_match(self, make_scan):
        """Test an empty cascade does not match."""
        assert run_cascade(make_scan("TOM"), ()) is False


class TestKRules:
    """Tests for 'K' rules."""

    def test_initial_kn_silent(self, make_scan):
        """Test initial "KN" drops the K."""
        scan = make_scan("KNIGHT")
        assert k.silent_k(scan) is True
        assert scan.buffer.primary == ""
        assert scan.idx == 0

    def test_plain_k(self, make_scan):
        """Test other K spellings do not match."""
        assert k.silent_k(make_scan("KITE")) is False


class TestTRules:
    """Tests for 'T' rules."""

    def test_tch(self, make_scan):
        """Test "TCH" => 'X' and skips the CH."""
        scan = make_scan("MATCH", idx=2)
        assert t.tch(scan) is True
        assert scan.buffer.primary == "X"
        assert scan.idx == 4

    def test_th_theta(self, make_scan):
        """Test "TH" => '0'."""
        scan = make_scan("THINK")
        assert t.th(scan) is True
        assert scan.buffer.primary == "0"
        assert scan.buffer.secondary == "0"
        assert scan.idx == 1

    def test_th_thomas(self, make_scan):
        """Test 'thomas' keeps a T."""
        scan = make_scan("THOMAS")
        assert t.th(scan) is True
        assert scan.buffer.primary == "T"

    def test_th_after_sm(self, make_scan):
        """Test 'smith' gets a 'T' alternate."""
        scan = make_scan("SMITH", idx=3)
        assert t.th(scan) is True
        assert scan.buffer.primary == "0"
        assert scan.buffer.secondary == "T"

    def test_initial_tzar(self, make_scan):
        """Test the T of 'tzar' is silent."""
        scan = make_scan("TZAR")
        assert t.t_initial(scan) is True
        assert scan.buffer.primary == ""

    def test_tion(self, make_scan):
        """Test "-TION" => 'X'."""
        scan = make_scan("NATION", idx=2)
        assert t.ti(scan) is True
        assert scan.buffer.primary == "X"


class TestXRules:
    """Tests for 'X' rules."""

    def test_initial_x(self, make_scan):
        """Test initial X => 'S'."""
        scan = make_scan("XAVIER")
        assert x.initial_x(scan) is True
        assert scan.buffer.primary == "S"

    def test_french_final_x_silent(self, make_scan):
        """Test 'beaux' adds nothing."""
        scan = make_scan("BEAUX", idx=4)
        assert x.french_x_final(scan) is False
        assert scan.buffer.primary == ""

    def test_final_x_continues_cascade(self, make_scan):
        """Test final X adds "KS" but does not end the cascade."""
        scan = make_scan("BOX", idx=2)
        assert x.french_x_final(scan) is False
        assert scan.buffer.primary == "KS"


class TestZRules:
    """Tests for 'Z' rules."""

    def test_italian_zz(self, make_scan):
        """Test 'pizza' => 'TS' with 'S' alternate."""
        scan = make_scan("PIZZA", idx=2)
        assert z.zz(scan) is True
        assert scan.buffer.primary == "TS"
        assert scan.buffer.secondary == "S"
        assert scan.idx == 3

    def test_french_ez(self, make_scan):
        """Test the Z of 'chez' is silent."""
        assert z.french_ez(make_scan("CHEZ", idx=3)) is True


class TestWRules:
    """Tests for 'W' rules."""

    def test_initial_wr(self, make_scan):
        """Test initial "WR" drops the W."""
        assert w.silent_w_at_beginning(make_scan("WRITE")) is True

    def test_wicz(self, make_scan):
        """Test polish "-WICZ"."""
        scan = make_scan("FILIPOWICZ", idx=6)
        assert w.witz_wicz(scan) is True
        assert scan.buffer.primary == "TS"
        assert scan.buffer.secondary == "FX"
        assert scan.idx == 9


class TestGRules:
    """Tests for 'G' rules."""

    def test_initial_gn(self, make_scan):
        """Test initial "GN" drops the G."""
        assert g.silent_g_at_beginning(make_scan("GNU")) is True

    def test_gh_to_f(self, make_scan):
        """Test 'laugh' => 'F'."""
        scan = make_scan("LAUGH", idx=3)
        assert g.gh(scan) is True
        assert scan.buffer.primary == "F"
        assert scan.idx == 4

    def test_ught(self, make_scan):
        """Test 'daughter' => 'T'."""
        scan = make_scan("DAUGHTER", idx=3)
        assert g.gh(scan) is True
        assert scan.buffer.primary == "T"
        assert scan.idx == 5

    def test_sign(self, make_scan):
        """Test the G of 'sign' is silent in the primary key."""
        scan = make_scan("SIGN", idx=2)
        assert g.gn(scan) is True
        assert scan.buffer.primary == "N"
        assert scan.buffer.secondary == "KN"

    def test_exact_g(self, make_scan):
        """Test hard G => 'G' with exact consonants."""
        scan = make_scan("GET", encode_exact=True)
        assert g.initial_g_front_vowel(scan) is True
        assert scan.buffer.primary == "G"
        assert scan.buffer.secondary == "J"


class TestLRules:
    """Tests for 'L' rules."""

    def test_would(self, make_scan):
        """Test the L of 'would' is silent and the D is encoded."""
        scan = make_scan("WOULD", idx=3)
        assert l.silent_l_in_ould(scan) is True
        assert scan.buffer.primary == "T"
        assert scan.idx == 4

    def test_walk(self, make_scan):
        """Test the L of 'walk' is silent."""
        assert l.silent_l_in_lk_lv(make_scan("WALK", idx=2)) is True
