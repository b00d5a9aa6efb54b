"""Tests for i18nkit.interpolation module."""

from dataclasses import dataclass

import pytest

from i18nkit.interpolation import execute_template, resolve_path


@dataclass
class User:
    name: str
    _secret: str = "hidden"


class TestExecuteTemplate:
    """Tests for execute_template()."""

    @pytest.mark.parametrize(
        "template,data,expected",
        [
            ("Hello {{.Name}}", {"Name": "John"}, "Hello John"),
            ("Hello {{ .Name }}", {"Name": "John"}, "Hello John"),
            ("Hello {{- .Name -}}!", {"Name": "John"}, "Hello John!"),
            ("{{.Name}} {{.SurName}}", {"Name": "John", "SurName": "Doe"}, "John Doe"),
            ("You have {{.EmailQty}} emails", {"EmailQty": 100}, "You have 100 emails"),
            ("{{.Name}}{{.Name}}", {"Name": "ab"}, "abab"),
            ("No placeholders", {"Name": "John"}, "No placeholders"),
            ("", {"Name": "John"}, ""),
        ],
    )
    def test_renders_placeholders(self, template, data, expected):
        assert execute_template(template, data) == expected

    def test_missing_field_renders_empty(self):
        assert execute_template("Hello {{.Name}}!", {}) == "Hello !"

    def test_none_value_renders_empty(self):
        assert execute_template("[{{.Name}}]", {"Name": None}) == "[]"

    def test_none_data_renders_empty(self):
        assert execute_template("Hello {{.Name}}", None) == "Hello "

    def test_nested_mapping(self):
        data = {"User": {"Name": "Ana", "Address": {"City": "Lima"}}}
        assert execute_template("{{.User.Name}} from {{.User.Address.City}}", data) == "Ana from Lima"

    def test_missing_nested_segment_renders_empty(self):
        assert execute_template("[{{.User.Name}}]", {"User": "plain"}) == "[]"

    def test_dot_renders_data_itself(self):
        assert execute_template("Count: {{.}}", 5) == "Count: 5"

    def test_object_attributes(self):
        assert execute_template("Hi {{.name}}", User(name="Ana")) == "Hi Ana"

    def test_private_attributes_are_not_exposed(self):
        assert execute_template("[{{._secret}}]", User(name="Ana")) == "[]"

    def test_other_actions_left_untouched(self):
        template = "{{if .Name}}Hi{{end}} {{Name}}"
        assert execute_template(template, {"Name": "John"}) == template

    def test_no_html_escaping(self):
        assert execute_template("{{.Tag}}", {"Tag": "<b>&</b>"}) == "<b>&</b>"


class TestResolvePath:
    """Tests for resolve_path()."""

    def test_mapping_before_attribute(self):
        class Box(dict):
            value = "attribute"

        assert resolve_path(Box(value="key"), ".value") == "key"

    def test_root_path(self):
        data = {"a": 1}
        assert resolve_path(data, ".") is data

    def test_missing_returns_none(self):
        assert resolve_path({"a": {}}, ".a.b") is None
