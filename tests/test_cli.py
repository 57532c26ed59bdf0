"""CLI integration tests for namecraft."""

import json
from pathlib import Path

from typer.testing import CliRunner

from namecraft.cli import app


def read_answers(directory: Path) -> dict[str, str]:
    return json.loads((directory / "answers.json").read_text())


class TestVersionCommand:
    """Tests for --version flag."""

    def test_version_shows_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "namecraft" in result.stdout
        assert "0.1.0" in result.stdout

    def test_version_short_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert "namecraft" in result.stdout


class TestHelpCommand:
    """Tests for --help flag."""

    def test_help_shows_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "run" in result.stdout
        assert "check" in result.stdout
        assert "init" in result.stdout


class TestRunQuestionnaire:
    """Tests for running the questionnaire."""

    def test_no_command_runs_questionnaire(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(app, ["--no-color"], input="cat\nred\n")

        assert result.exit_code == 0, result.output
        assert "Name: red-colored_cat" in result.stdout
        assert read_answers(project_dir) == {"a": "cat", "b": "red"}

    def test_run_command(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(app, ["--no-color", "run"], input="cat\nred\n")

        assert result.exit_code == 0, result.output
        assert "Name: red-colored_cat" in result.stdout

    def test_first_run_seeds_defaults(self, runner: CliRunner, project_dir: Path) -> None:
        """Without an answers file, prompts start from item defaults."""
        result = runner.invoke(app, ["--no-color"], input="\nblue\n")

        assert result.exit_code == 0, result.output
        assert "Animal [cat] ? " in result.output
        assert "Name: blue-colored_cat" in result.stdout

    def test_second_run_recalls_answers(self, runner: CliRunner, project_dir: Path) -> None:
        (project_dir / "answers.json").write_text('{"a": "cat", "b": "blue"}')

        result = runner.invoke(app, ["--no-color"], input="\n\n")

        assert result.exit_code == 0, result.output
        assert "Color [blue] ? " in result.output
        assert "Name: blue-colored_cat" in result.stdout

    def test_defaults_flag_ignores_memory(self, runner: CliRunner, project_dir: Path) -> None:
        (project_dir / "answers.json").write_text('{"a": "dog"}')

        result = runner.invoke(app, ["--no-color", "run", "--defaults"], input="\n\n")

        assert result.exit_code == 0, result.output
        assert "Animal [cat] ? " in result.output
        assert read_answers(project_dir) == {"a": "cat", "b": ""}

    def test_excluded_item_keeps_old_memory(self, runner: CliRunner, project_dir: Path) -> None:
        (project_dir / "answers.json").write_text('{"a": "cat", "b": "blue"}')

        result = runner.invoke(app, ["--no-color"], input="dog\n")

        assert result.exit_code == 0, result.output
        assert "Color" not in result.output
        assert "Name: dog" in result.stdout
        assert read_answers(project_dir) == {"a": "dog", "b": "blue"}

    def test_malformed_answers_reverts_to_defaults(
        self, runner: CliRunner, project_dir: Path
    ) -> None:
        (project_dir / "answers.json").write_text("{broken")

        result = runner.invoke(app, ["--no-color"], input="\nred\n")

        assert result.exit_code == 0, result.output
        assert "Unable to access last answers. Reverting to defaults." in result.output
        assert "Animal [cat] ? " in result.output
        assert read_answers(project_dir) == {"a": "cat", "b": "red"}

    def test_cancel_exits_without_saving(self, runner: CliRunner, project_dir: Path) -> None:
        """Running out of input cancels like Ctrl+D: exit 1, nothing written."""
        result = runner.invoke(app, ["--no-color"], input="cat\n")

        assert result.exit_code == 1
        assert "You requested to exit. Bye!" in result.output
        assert "Name:" not in result.output
        assert not (project_dir / "answers.json").exists()

    def test_dry_run_does_not_save(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(app, ["--no-color", "--dry-run"], input="cat\nred\n")

        assert result.exit_code == 0, result.output
        assert "Name: red-colored_cat" in result.stdout
        assert not (project_dir / "answers.json").exists()

    def test_json_output(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(app, ["--no-color", "--json"], input="cat\nred\n")

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout[result.stdout.index("{") :])
        assert data["name"] == "red-colored_cat"
        assert data["fragments"] == ["red-colored", "cat"]
        assert data["answers"] == {"a": "cat", "b": "red"}

    def test_config_changes_separator(self, runner: CliRunner, project_dir: Path) -> None:
        (project_dir / "namecraft.toml").write_text('[naming]\nseparator = "."\n')

        result = runner.invoke(app, ["--no-color"], input="cat\nlight red\n")

        assert result.exit_code == 0, result.output
        assert "Name: light-red-colored.cat" in result.stdout

    def test_definition_option(self, runner: CliRunner, workdir: Path) -> None:
        (workdir / "other.json").write_text('[{"id": "x", "prompt": "Thing"}]')

        result = runner.invoke(app, ["--no-color", "run", "-d", "other.json"], input="box\n")

        assert result.exit_code == 0, result.output
        assert "Name: box" in result.stdout

    def test_unknown_constraint_id_warns(self, runner: CliRunner, workdir: Path) -> None:
        definition = [
            {"id": "x", "prompt": "Thing"},
            {"id": "y", "prompt": "Extra", "constraints": [{"id": "ghost", "answers": ["a"]}]},
        ]
        (workdir / "definition.json").write_text(json.dumps(definition))

        result = runner.invoke(app, ["--no-color"], input="box\n")

        assert result.exit_code == 0, result.output
        assert "Could not find constraint id: ghost" in result.output
        assert "Extra" not in result.output
        assert "Name: box" in result.stdout


class TestStartupErrors:
    """Tests for exit codes on startup failures."""

    def test_missing_definition(self, runner: CliRunner, workdir: Path) -> None:
        result = runner.invoke(app, ["--no-color"])

        assert result.exit_code == 1
        assert "Unable to read definition file" in result.output

    def test_malformed_definition(self, runner: CliRunner, workdir: Path) -> None:
        (workdir / "definition.json").write_text("not json")

        result = runner.invoke(app, ["--no-color"])

        assert result.exit_code == 1
        assert "Unable to parse definition file" in result.output

    def test_unreadable_answers(self, runner: CliRunner, project_dir: Path) -> None:
        (project_dir / "answers.json").mkdir()

        result = runner.invoke(app, ["--no-color"])

        assert result.exit_code == 2
        assert "Unable to read answers file" in result.output

    def test_invalid_config(self, runner: CliRunner, project_dir: Path) -> None:
        (project_dir / "namecraft.toml").write_text("[naming\n")

        result = runner.invoke(app, ["--no-color"])

        assert result.exit_code == 1
        assert "Invalid config file" in result.output


class TestCheckCommand:
    """Tests for namecraft check."""

    def test_clean_definition(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(app, ["--no-color", "check"])

        assert result.exit_code == 0, result.output
        assert "2 items, no issues" in result.output

    def test_clean_summary_keeps_long_path_on_one_line(
        self, runner: CliRunner, workdir: Path, sample_definition: list
    ) -> None:
        nested = workdir / ("deeply-nested-definition-directory-" * 3) / "[drafts]"
        nested.mkdir(parents=True)
        definition = nested / "definition.json"
        definition.write_text(json.dumps(sample_definition))

        result = runner.invoke(app, ["--no-color", "check", "-d", str(definition)])

        assert result.exit_code == 0, result.output
        assert f"{definition}: 2 items, no issues" in result.output

    def test_forward_reference_fails(self, runner: CliRunner, workdir: Path) -> None:
        definition = [
            {"id": "a", "prompt": "A", "constraints": [{"id": "b", "answers": ["x"]}]},
            {"id": "b", "prompt": "B"},
            {"id": "b", "prompt": "B again"},
        ]
        (workdir / "definition.json").write_text(json.dumps(definition))

        result = runner.invoke(app, ["--no-color", "check"])

        assert result.exit_code == 1
        assert "1 error(s), 1 warning(s)" in result.output

    def test_json_report(self, runner: CliRunner, workdir: Path) -> None:
        definition = [{"id": "a", "prompt": "A", "constraints": [{"id": "z", "answers": []}]}]
        (workdir / "definition.json").write_text(json.dumps(definition))

        result = runner.invoke(app, ["--no-color", "--json", "check"])

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["ok"] is False
        assert data["issues"][0]["item_id"] == "a"
        assert data["issues"][0]["severity"] == "error"

    def test_missing_definition(self, runner: CliRunner, workdir: Path) -> None:
        result = runner.invoke(app, ["--no-color", "check"])
        assert result.exit_code == 1


class TestInitCommand:
    """Tests for namecraft init."""

    def test_init_creates_files(self, runner: CliRunner, workdir: Path) -> None:
        result = runner.invoke(app, ["--no-color", "init"])

        assert result.exit_code == 0, result.output
        assert (workdir / "namecraft.toml").exists()
        assert (workdir / "definition.json").exists()

        check = runner.invoke(app, ["--no-color", "check"])
        assert check.exit_code == 0, check.output

    def test_init_keeps_existing_files(self, runner: CliRunner, project_dir: Path) -> None:
        original = (project_dir / "definition.json").read_text()

        result = runner.invoke(app, ["--no-color", "init"])

        assert result.exit_code == 0
        assert "Definition already exists" in result.output
        assert (project_dir / "definition.json").read_text() == original

    def test_init_dry_run(self, runner: CliRunner, workdir: Path) -> None:
        result = runner.invoke(app, ["--no-color", "--dry-run", "init"])

        assert result.exit_code == 0
        assert "DRY RUN" in result.output
        assert not (workdir / "namecraft.toml").exists()
