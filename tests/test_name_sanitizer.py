import unittest

from namesim.core.similarity.normalize import (
    HONORIFICS,
    SUFFIXES,
    collapse_initials,
    sanitize_name,
    strip_diacritics,
)


class TestStripDiacritics(unittest.TestCase):
    def test_removes_accents(self) -> None:
        self.assertEqual(strip_diacritics("café"), "cafe")
        self.assertEqual(strip_diacritics("áéíóú"), "aeiou")
        self.assertEqual(strip_diacritics("Zürich"), "Zurich")
        self.assertEqual(strip_diacritics("naïve"), "naive")
        self.assertEqual(strip_diacritics("São Paulo"), "Sao Paulo")
        self.assertEqual(strip_diacritics("façade"), "facade")

    def test_plain_ascii_unchanged(self) -> None:
        self.assertEqual(strip_diacritics("hello"), "hello")
        self.assertEqual(strip_diacritics("O'Brien-Smith 42"), "O'Brien-Smith 42")

    def test_empty(self) -> None:
        self.assertEqual(strip_diacritics(""), "")

    def test_letters_without_decomposition_pass_through(self) -> None:
        self.assertEqual(strip_diacritics("Øre"), "Øre")


class TestCollapseInitials(unittest.TestCase):
    def test_fuses_consecutive_single_letters(self) -> None:
        self.assertEqual(collapse_initials(["h", "e", "smith"]), ["he", "smith"])

    def test_single_initial_kept(self) -> None:
        self.assertEqual(collapse_initials(["john", "a", "smith"]), ["john", "a", "smith"])

    def test_trailing_run_flushed(self) -> None:
        self.assertEqual(collapse_initials(["smith", "j", "r"]), ["smith", "jr"])

    def test_two_letter_tokens_not_fused(self) -> None:
        self.assertEqual(collapse_initials(["ph", "d"]), ["ph", "d"])

    def test_non_ascii_letter_not_fused(self) -> None:
        self.assertEqual(collapse_initials(["ø", "a", "b"]), ["ø", "ab"])


class TestSanitizeName(unittest.TestCase):
    def test_constants(self) -> None:
        self.assertIsInstance(HONORIFICS, frozenset)
        self.assertIsInstance(SUFFIXES, frozenset)
        self.assertIn("dame", HONORIFICS)
        self.assertIn("esq", SUFFIXES)

    def test_removes_honorifics(self) -> None:
        self.assertEqual(sanitize_name("Mr. John Smith"), "john smith")
        self.assertEqual(sanitize_name("Dr. Jane Doe"), "jane doe")
        self.assertEqual(sanitize_name("Prof. Smith"), "smith")

    def test_removes_repeated_honorifics(self) -> None:
        self.assertEqual(sanitize_name("Sir Dr. John Smith"), "john smith")

    def test_removes_suffixes(self) -> None:
        self.assertEqual(sanitize_name("John Smith, Jr."), "john smith")
        self.assertEqual(sanitize_name("John Smith, Esq."), "john smith")
        self.assertEqual(sanitize_name("John Smith Sr III"), "john smith")

    def test_removes_honorific_and_suffix(self) -> None:
        self.assertEqual(sanitize_name("Mr. John A. Smith, Jr."), "john a smith")

    def test_phd_with_dots_is_kept_literally(self) -> None:
        self.assertEqual(sanitize_name("John Smith, Ph.D."), "john smith ph d")
        self.assertEqual(sanitize_name("Dr. Jane M. Doe, Ph.D."), "jane m doe ph d")

    def test_phd_without_dots_is_removed(self) -> None:
        self.assertEqual(sanitize_name("John Smith PhD"), "john smith")

    def test_lowercases(self) -> None:
        self.assertEqual(sanitize_name("PETER H WILLINGSWORTH"), "peter h willingsworth")

    def test_collapses_initials(self) -> None:
        self.assertEqual(sanitize_name("H E Smith"), "he smith")
        self.assertEqual(sanitize_name("J.R.R. Tolkien"), "jrr tolkien")

    def test_strips_diacritics(self) -> None:
        self.assertEqual(sanitize_name("José García"), "jose garcia")

    def test_punctuation_folded(self) -> None:
        self.assertEqual(sanitize_name("O'Brien"), "o brien")
        self.assertEqual(sanitize_name("Mary-Kate Olsen"), "mary kate olsen")
        self.assertEqual(sanitize_name("Smith/Jones"), "smith jones")
        self.assertEqual(sanitize_name("O’Neil"), "o neil")
        self.assertEqual(sanitize_name("snake_case_name"), "snake case name")

    def test_whitespace_collapsed(self) -> None:
        self.assertEqual(sanitize_name("   John    Smith   "), "john smith")

    def test_missing_input(self) -> None:
        self.assertEqual(sanitize_name(None), "")
        self.assertEqual(sanitize_name(""), "")

    def test_non_string_input_coerced(self) -> None:
        self.assertEqual(sanitize_name(42), "42")
        self.assertEqual(sanitize_name("123"), "123")

    def test_falsy_input(self) -> None:
        self.assertEqual(sanitize_name(False), "")
        self.assertEqual(sanitize_name(0), "")
        self.assertEqual(sanitize_name([]), "")

    def test_everything_stripped(self) -> None:
        self.assertEqual(sanitize_name("Dr."), "")
        self.assertEqual(sanitize_name("Mr. Jr."), "")


if __name__ == "__main__":
    unittest.main()
