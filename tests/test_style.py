"""Tests for syllable rendering."""

from __future__ import annotations

import unittest

from zhpinyin.style import Style, StyleError, render


class TestStyleParse(unittest.TestCase):
    """Tests for Style.parse."""

    def test_member_passthrough(self) -> None:
        self.assertIs(Style.parse(Style.TONE2), Style.TONE2)

    def test_names_case_insensitive(self) -> None:
        self.assertIs(Style.parse("tone3"), Style.TONE3)
        self.assertIs(Style.parse("NORMAL"), Style.NORMAL)
        self.assertIs(Style.parse("first-letter"), Style.FIRST_LETTER)

    def test_int_values(self) -> None:
        self.assertIs(Style.parse(0), Style.NORMAL)
        self.assertIs(Style.parse(4), Style.INITIALS)

    def test_unknown_raises(self) -> None:
        for bad in ("bogus", 99, -1, True, None, 1.5):
            with self.assertRaises(StyleError, msg=repr(bad)):
                Style.parse(bad)  # type: ignore[arg-type]

    def test_style_error_is_value_error(self) -> None:
        self.assertTrue(issubclass(StyleError, ValueError))


class TestRender(unittest.TestCase):
    """Tests for render on canonical tone-marked syllables."""

    def test_tone_unchanged(self) -> None:
        self.assertEqual(render("zhōng", Style.TONE), "zhōng")
        self.assertEqual(render("lǜ", Style.TONE), "lǜ")

    def test_normal(self) -> None:
        self.assertEqual(render("zhōng", Style.NORMAL), "zhong")
        self.assertEqual(render("guó", Style.NORMAL), "guo")
        self.assertEqual(render("lǜ", Style.NORMAL), "lv")
        self.assertEqual(render("nü", Style.NORMAL), "nv")
        self.assertEqual(render("de", Style.NORMAL), "de")

    def test_tone2_digit_after_vowel(self) -> None:
        self.assertEqual(render("zhōng", Style.TONE2), "zho1ng")
        self.assertEqual(render("hǎo", Style.TONE2), "ha3o")
        self.assertEqual(render("lüè", Style.TONE2), "lve4")

    def test_tone3_digit_at_end(self) -> None:
        self.assertEqual(render("zhōng", Style.TONE3), "zhong1")
        self.assertEqual(render("hǎo", Style.TONE3), "hao3")
        self.assertEqual(render("lǜ", Style.TONE3), "lv4")
        self.assertEqual(render("ń", Style.TONE3), "n2")

    def test_tone3_neutral_tone_has_no_digit(self) -> None:
        self.assertEqual(render("de", Style.TONE3), "de")

    def test_initials(self) -> None:
        self.assertEqual(render("zhōng", Style.INITIALS), "zh")
        self.assertEqual(render("chī", Style.INITIALS), "ch")
        self.assertEqual(render("shì", Style.INITIALS), "sh")
        self.assertEqual(render("zài", Style.INITIALS), "z")
        self.assertEqual(render("bā", Style.INITIALS), "b")

    def test_initials_zero_initial(self) -> None:
        self.assertEqual(render("ài", Style.INITIALS), "")
        self.assertEqual(render("yī", Style.INITIALS), "")
        self.assertEqual(render("wǒ", Style.INITIALS), "")

    def test_first_letter(self) -> None:
        self.assertEqual(render("zhōng", Style.FIRST_LETTER), "z")
        self.assertEqual(render("ǎi", Style.FIRST_LETTER), "a")
        self.assertEqual(render("ēn", Style.FIRST_LETTER), "e")

    def test_accepts_style_names(self) -> None:
        self.assertEqual(render("zhōng", "tone3"), "zhong1")

    def test_unknown_style_fails_fast(self) -> None:
        with self.assertRaises(StyleError):
            render("zhōng", "wade-giles")

    def test_idempotent(self) -> None:
        syllables = ["zhōng", "guó", "lǜ", "lüè", "hǎo", "de", "ài", "yī", "ń", "ê̄"]
        for style in Style:
            for s in syllables:
                once = render(s, style)
                self.assertEqual(render(once, style), once, f"{s!r} in {style.name}")


if __name__ == "__main__":
    unittest.main()
