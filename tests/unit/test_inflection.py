"""
Unit tests for case conversion.

Tests underscore() and classify(), including the acronym handling that
makes classify() lossy.
"""

import pytest

from namewise.naming.inflection import underscore, classify


class TestUnderscore:
    """Test conversion to path-style snake_case."""

    @pytest.mark.parametrize("name,expected", [
        ("HTTPServer", "http_server"),
        ("Some::Module", "some/module"),
        ("camelCase", "camel_case"),
        ("CamelCase", "camel_case"),
        ("Net::HTTPServer", "net/http_server"),
        ("ActiveModel::Errors", "active_model/errors"),
        ("Version2Parser", "version2_parser"),
        ("foo-bar", "foo_bar"),
        ("already_snake", "already_snake"),
        ("HTML", "html"),
        ("", ""),
    ])
    def test_underscore_examples(self, name, expected):
        """Test known conversions."""
        assert underscore(name) == expected

    @pytest.mark.parametrize("name", [
        "HTTPServer",
        "Some::Module",
        "Net::HTTP::Request",
        "foo-Bar-Baz",
        "XMLHttpRequest",
        "a:::b",
        "",
    ])
    def test_underscore_is_idempotent(self, name):
        """Applying underscore twice gives the same result as once."""
        once = underscore(name)
        assert underscore(once) == once

    def test_underscore_output_has_no_uppercase(self):
        """Output is fully lowercased."""
        result = underscore("Deeply::NestedHTTPModule::WithCamelCase")
        assert result == result.lower()
        assert "::" not in result

    def test_underscore_only_ascii_digits_mark_boundaries(self):
        """Non-ASCII digits do not start a camel boundary."""
        assert underscore("x١Y") == "x١y"
        assert underscore("x1Y") == "x1_y"

    def test_underscore_accepts_non_strings(self):
        """Non-string input is converted with str()."""
        assert underscore(42) == "42"


class TestClassify:
    """Test conversion to namespaced PascalCase."""

    @pytest.mark.parametrize("name,expected", [
        ("some_module", "SomeModule"),
        ("some/module", "Some::Module"),
        ("net/http/request", "Net::Http::Request"),
        ("active_model/errors", "ActiveModel::Errors"),
        ("camel_case", "CamelCase"),
        ("foo-bar", "FooBar"),
        ("x", "X"),
        ("", ""),
    ])
    def test_classify_examples(self, name, expected):
        """Test known conversions."""
        assert classify(name) == expected

    def test_classify_capitalizes_every_line(self):
        """Each line starts a new word."""
        assert classify("a\nb") == "A\nB"
        assert classify("some_module\nother/name") == "SomeModule\nOther::Name"

    def test_classify_normalizes_pascal_case(self):
        """PascalCase input goes through underscore first."""
        assert classify("SomeModule") == "SomeModule"
        assert classify("someModule") == "SomeModule"

    @pytest.mark.parametrize("name", [
        "SomeModule",
        "Some::Module",
        "Net::Client::Request",
        "A::B",
        "Version2Parser",
        "ABc",
    ])
    def test_round_trip_without_acronyms(self, name):
        """classify(underscore(s)) restores names without acronym runs."""
        assert classify(underscore(name)) == name

    def test_round_trip_loses_acronyms(self):
        """Acronym runs do not survive a round trip."""
        assert classify(underscore("HTTPServer")) == "HttpServer"
        assert classify(underscore("Net::HTTP")) == "Net::Http"
