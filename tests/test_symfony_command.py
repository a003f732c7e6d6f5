"""Tests for the symfony_command prompt."""

import pytest
from unittest.mock import patch

from debug_mcp.errors import InvalidParameter, TemplateNotFound
from debug_mcp.prompts import symfony_command
from debug_mcp.prompts.symfony_command import CommandParams, SymfonyCommandPrompt, substitute

SIMPLE = "Command Name: {command_name}\nDescription: {description}"


@pytest.fixture
def templates(tmp_path):
    """Directory with distinct basic and interactive templates."""
    (tmp_path / "command-basic.txt").write_text("BASIC\n" + SIMPLE)
    (tmp_path / "command-interactive.txt").write_text("INTERACTIVE\n" + SIMPLE)
    return tmp_path


@pytest.fixture
def prompt(templates):
    return SymfonyCommandPrompt(templates_dir=templates)


class TestValidation:
    """Empty strings are rejected before any template is read."""

    def test_empty_command_name(self, prompt):
        with pytest.raises(InvalidParameter, match="Command name cannot be empty") as exc_info:
            prompt.generate("", "x")
        assert exc_info.value.field == "command_name"

    def test_empty_description(self, prompt):
        with pytest.raises(InvalidParameter, match="Description cannot be empty") as exc_info:
            prompt.generate("x", "")
        assert exc_info.value.field == "description"

    def test_command_name_checked_first(self, prompt):
        with pytest.raises(InvalidParameter) as exc_info:
            prompt.generate("", "")
        assert exc_info.value.field == "command_name"

    def test_no_io_on_invalid_input(self, tmp_path):
        prompt = SymfonyCommandPrompt(templates_dir=tmp_path)
        with patch.object(symfony_command, "load_template") as load:
            with pytest.raises(InvalidParameter):
                prompt.generate("app:x", "")
        load.assert_not_called()

    def test_whitespace_is_not_empty(self, prompt):
        result = prompt.generate(" ", " ")
        assert result[0]["content"] == "BASIC\nCommand Name:  \nDescription:  "

    def test_no_format_check(self, prompt):
        result = prompt.generate("not a namespaced name", "y")
        assert "Command Name: not a namespaced name" in result[0]["content"]


class TestTemplateSelection:
    """The interactive flag alone picks the template."""

    def test_basic_by_default(self, prompt):
        assert prompt.generate("app:x", "d")[0]["content"].startswith("BASIC\n")

    def test_basic_when_false(self, prompt):
        assert prompt.generate("app:x", "d", False)[0]["content"].startswith("BASIC\n")

    def test_interactive_when_true(self, prompt):
        assert prompt.generate("app:x", "d", True)[0]["content"].startswith("INTERACTIVE\n")

    def test_results_differ(self, prompt):
        assert prompt.generate("app:x", "d", False) != prompt.generate("app:x", "d", True)

    def test_missing_template(self, tmp_path):
        (tmp_path / "command-basic.txt").write_text(SIMPLE)
        prompt = SymfonyCommandPrompt(templates_dir=tmp_path)

        assert prompt.generate("app:x", "d")[0]["content"] == "Command Name: app:x\nDescription: d"
        with pytest.raises(TemplateNotFound) as exc_info:
            prompt.generate("app:x", "d", interactive=True)
        assert exc_info.value.template_id == "command-interactive"


class TestSubstitution:
    """Placeholders are replaced literally, everywhere, in one pass."""

    def test_example_scenario(self, tmp_path):
        (tmp_path / "command-interactive.txt").write_text(SIMPLE)
        prompt = SymfonyCommandPrompt(templates_dir=tmp_path)

        result = prompt.generate("app:import-users", "Import users from CSV file", True)

        assert result[0]["content"] == (
            "Command Name: app:import-users\nDescription: Import users from CSV file"
        )

    def test_every_occurrence_replaced(self):
        template = "{command_name} {description} {command_name}\n{description}{command_name}"
        result = substitute(template, CommandParams("a:b", "desc"))
        assert result == "a:b desc a:b\ndesca:b"

    def test_template_without_placeholders(self):
        assert substitute("static text", CommandParams("a", "b")) == "static text"

    def test_description_not_reexpanded(self):
        result = substitute(SIMPLE, CommandParams("app:x", "{command_name}"))
        assert result == "Command Name: app:x\nDescription: {command_name}"

    def test_command_name_not_reexpanded(self):
        result = substitute(SIMPLE, CommandParams("{description}", "desc"))
        assert result == "Command Name: {description}\nDescription: desc"

    def test_other_braces_untouched(self):
        template = "public function run(): int { return 0; } {other} {command_name}"
        result = substitute(template, CommandParams("app:x", "d"))
        assert result == "public function run(): int { return 0; } {other} app:x"

    def test_backslashes_inserted_verbatim(self):
        result = substitute("{description}", CommandParams("a", r"App\Command\1 \g<0>"))
        assert result == r"App\Command\1 \g<0>"

    def test_no_placeholder_left_in_packaged_templates(self):
        prompt = SymfonyCommandPrompt()
        for interactive in (False, True):
            content = prompt.generate("app:process-data", "Process data", interactive)[0]["content"]
            assert "{command_name}" not in content
            assert "{description}" not in content
            assert "app:process-data" in content
            assert "Process data" in content


class TestOutput:
    """One user message, same bytes every time."""

    def test_shape(self, prompt):
        result = prompt.generate("app:x", "d")

        assert isinstance(result, list)
        assert len(result) == 1
        assert result[0]["role"] == "user"
        assert result[0]["content"]
        assert set(result[0]) == {"role", "content"}

    def test_idempotent(self, prompt):
        first = prompt.generate("app:import-users", "Import users", True)
        second = prompt.generate("app:import-users", "Import users", True)
        assert first == second

    def test_name_and_description(self):
        assert SymfonyCommandPrompt.name == "symfony_command"
        assert SymfonyCommandPrompt.description == (
            "Generate a Symfony Console Command with proper structure and best practices"
        )
