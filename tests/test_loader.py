"""
Tests for the token file loader.

Tests cover:
- Token classification by type label and literal text
- Lenient skipping and strict rejection of malformed lines
- Token limit and unreadable or empty files
"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from arithast.config import LoaderConfig
from arithast.loader.tokens import TokenKind
from arithast.loader.loader import TokenLoader, load_string, load_tokens, tokens_from_pairs, classify
from arithast.loader.errors import TokenFileError


class TestClassification(unittest.TestCase):
    """Test cases for token kind classification."""

    def test_type_labels(self):
        self.assertEqual(classify("42", "integer"), TokenKind.INTEGER)
        self.assertEqual(classify("+", "operator"), TokenKind.OPERATOR)

    def test_parens_by_text_whatever_the_label(self):
        """Parentheses are recognised by their text, not their label."""
        self.assertEqual(classify("(", "paren"), TokenKind.LEFT_PAREN)
        self.assertEqual(classify(")", "operator"), TokenKind.RIGHT_PAREN)
        self.assertEqual(classify("(", "punctuation"), TokenKind.LEFT_PAREN)

    def test_integer_label_wins_over_paren_text(self):
        """The integer label is checked before the parenthesis texts."""
        self.assertEqual(classify("(", "integer"), TokenKind.INTEGER)
        self.assertEqual(classify(")", "integer"), TokenKind.INTEGER)

    def test_unknown_label(self):
        self.assertIsNone(classify("x", "identifier"))

    def test_tokens_from_pairs(self):
        tokens = tokens_from_pairs(["8,integer", ("/", "operator"), "4,integer"])
        self.assertEqual([t.kind for t in tokens],
                         [TokenKind.INTEGER, TokenKind.OPERATOR, TokenKind.INTEGER])
        self.assertEqual([t.text for t in tokens], ["8", "/", "4"])

    def test_tokens_from_pairs_rejects_unknown(self):
        with self.assertRaises(TokenFileError):
            tokens_from_pairs(["x,identifier"])


class TestTokenLoader(unittest.TestCase):
    """Test cases for reading token text."""

    def test_basic_file(self):
        """Each line becomes one token with its location."""
        tokens = load_string("2,integer\n+,operator\n3,integer\n", "expr.tokens")

        self.assertEqual([t.text for t in tokens], ["2", "+", "3"])
        self.assertEqual(tokens[1].kind, TokenKind.OPERATOR)
        self.assertEqual(tokens[2].location.line, 3)
        self.assertEqual(str(tokens[0].location), "expr.tokens:1:1")

    def test_whitespace_and_blank_lines(self):
        """Surrounding whitespace, CRLF endings and blank lines are ignored."""
        tokens = load_string("  7 , integer \r\n\n\n*,operator\r\n6,integer")
        self.assertEqual([t.text for t in tokens], ["7", "*", "6"])
        self.assertEqual(tokens[1].location.line, 4)

    def test_type_keeps_text_after_first_comma(self):
        """Only the first comma separates value from type."""
        loader = TokenLoader("1,integer,extra\n2,integer\n")
        tokens = loader.load()
        self.assertEqual([t.text for t in tokens], ["2"])
        self.assertEqual(len(loader.warnings), 1)
        self.assertEqual(loader.warnings[0].diagnostic.code, "T002")

    def test_lenient_skips_malformed_lines(self):
        """Lines without a value or a type are skipped with a warning."""
        loader = TokenLoader("1,integer\njunk\n,operator\n+,\n+,operator\n2,integer\n")
        tokens = loader.load()

        self.assertEqual([t.text for t in tokens], ["1", "+", "2"])
        self.assertTrue(loader.has_warnings())
        self.assertEqual([w.diagnostic.code for w in loader.warnings], ["T001", "T001", "T001"])
        self.assertEqual(loader.warnings[0].diagnostic.location.line, 2)

    def test_lenient_skips_unknown_kinds(self):
        loader = TokenLoader("1,integer\nx,identifier\n")
        self.assertEqual(len(loader.load()), 1)
        self.assertIn("identifier", loader.warnings[0].message)

    def test_strict_rejects_malformed_line(self):
        """Strict loading stops at the first malformed line."""
        config = LoaderConfig(strict=True)
        with self.assertRaises(TokenFileError) as ctx:
            load_string("1,integer\njunk\n2,integer\n", "bad.tokens", config)

        self.assertEqual(ctx.exception.diagnostic.code, "T001")
        self.assertEqual(ctx.exception.diagnostic.location.line, 2)
        self.assertIn("bad.tokens:2:1", str(ctx.exception))

    def test_token_limit(self):
        """More tokens than the limit is an error."""
        source = "1,integer\n" * 3
        with self.assertRaises(TokenFileError) as ctx:
            load_string(source, config=LoaderConfig(max_tokens=2))
        self.assertEqual(ctx.exception.diagnostic.code, "T003")

        self.assertEqual(len(load_string(source, config=LoaderConfig(max_tokens=3))), 3)
        self.assertEqual(len(load_string(source * 100, config=LoaderConfig(max_tokens=None))), 300)

    def test_default_limit_is_one_hundred(self):
        self.assertEqual(len(load_string("1,integer\n" * 100)), 100)
        with self.assertRaises(TokenFileError):
            load_string("1,integer\n" * 101)

    def test_no_tokens(self):
        """A file without a single usable token is an error."""
        with self.assertRaises(TokenFileError) as ctx:
            load_string("")
        self.assertEqual(ctx.exception.diagnostic.code, "T005")

        with self.assertRaises(TokenFileError) as ctx:
            load_string("junk\nmore junk\n")
        self.assertIn("2 line(s)", str(ctx.exception))

    def test_diagnostic_names_error_category(self):
        loader = TokenLoader("junk\n1,integer\n", "cat.tokens")
        loader.load()
        self.assertEqual(loader.warnings[0].diagnostic.category, "Invalid token format")
        self.assertIn("T001: Invalid token format", str(loader.warnings[0]))


class TestLoaderLogging(unittest.TestCase):
    """Test cases for the loader log output."""

    def test_debug_line_per_token(self):
        with self.assertLogs("arithast.loader.loader", "DEBUG") as logs:
            load_string("1,integer\n+,operator\n")
        self.assertEqual(logs.output, [
            "DEBUG:arithast.loader.loader:Read token: type=integer, value=1",
            "DEBUG:arithast.loader.loader:Read token: type=operator, value=+",
        ])

    def test_warning_per_skipped_line(self):
        with self.assertLogs("arithast.loader.loader", "WARNING") as logs:
            load_string("1,integer\njunk\nx,identifier\n2,integer\n")
        self.assertEqual(len(logs.records), 2)
        for line in logs.output:
            self.assertTrue(line.startswith("WARNING:arithast.loader.loader:"))
            self.assertTrue(line.endswith("(line skipped)"))
        self.assertIn("Invalid token format: 'junk'", logs.output[0])


class TestLoadTokens(unittest.TestCase):
    """Test cases for loading from disk."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)

    def _write(self, name: str, content: str) -> str:
        path = os.path.join(self.temp_dir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_load_file(self):
        path = self._write("sum.tokens", "1,integer\n+,operator\n2,integer\n")
        tokens = load_tokens(path)
        self.assertEqual([t.text for t in tokens], ["1", "+", "2"])
        self.assertEqual(tokens[0].location.filename, path)

    def test_missing_file(self):
        """A file that cannot be opened becomes a TokenFileError."""
        path = os.path.join(self.temp_dir.name, "missing.tokens")
        with self.assertRaises(TokenFileError) as ctx:
            load_tokens(path)
        self.assertEqual(ctx.exception.diagnostic.code, "T004")
        self.assertIn("Could not open token file", ctx.exception.message)


if __name__ == '__main__':
    unittest.main()
