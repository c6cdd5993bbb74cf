"""Tests for interactive input parsing."""

import pytest

from cleantodo.parser import ParsedInput, parse_input


class TestParseInput:
    """Tests for parse_input."""

    @pytest.mark.parametrize("line", ["", "   ", "\t\n"])
    def test_blank_input(self, line):
        assert parse_input(line) == ParsedInput("", [])

    def test_double_quoted_argument(self):
        assert parse_input('add "buy milk"') == ("add", ["buy milk"])

    def test_single_quoted_argument(self):
        assert parse_input("add 'walk the  dog'") == ("add", ["walk the  dog"])

    def test_plain_arguments(self):
        parsed = parse_input("complete 2")
        assert parsed.command == "complete"
        assert parsed.args == ["2"]

    def test_command_is_lowercased(self):
        assert parse_input('ADD "Buy Milk"') == ("add", ["Buy Milk"])
        assert parse_input("LiSt") == ("list", [])

    def test_unquoted_words_are_split(self):
        assert parse_input("  add buy   fresh milk ") == ("add", ["buy", "fresh", "milk"])

    def test_mismatched_quotes_fall_back_to_split(self):
        assert parse_input("add \"buy milk'") == ("add", ['"buy', "milk'"])

    def test_trailing_text_after_quote_falls_back_to_split(self):
        assert parse_input('add "buy" milk') == ("add", ['"buy"', "milk"])

    def test_empty_quotes_fall_back_to_split(self):
        assert parse_input('add ""') == ("add", ['""'])
