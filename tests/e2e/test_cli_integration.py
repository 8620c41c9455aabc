"""End-to-end tests driving the command line entry point."""

import json

import pytest
import yaml

from patterncatalog.cli.main import main, parse_args


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PATTERNS_LOG_LEVEL", "PATTERNS_LOG_DESTINATION", "PATTERNS_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)


class TestParseArgs:
    def test_run_single(self):
        args = parse_args(["demos", "run", "observer"])

        assert args.resource == "demos"
        assert args.action == "run"
        assert args.name == "observer"
        assert args.all is False

    def test_run_requires_name_or_all(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["demos", "run"])

        assert exc_info.value.code == 2

    def test_name_and_all_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["demos", "run", "observer", "--all"])

    def test_invalid_category_choice(self):
        with pytest.raises(SystemExit):
            parse_args(["demos", "list", "--category", "functional"])


class TestCliCommands:
    def test_list_default_format(self, capsys):
        assert main(["demos", "list"]) == 0

        out = capsys.readouterr().out
        assert "behavioral:" in out
        assert "creational:" in out
        assert "  observer - Weather report fanned out to subscribers" in out

    def test_list_json(self, capsys):
        assert main(["--format", "json", "demos", "list", "--category", "structural"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [d["name"] for d in data["demonstrations"]] == [
            "adapter", "bridge", "composite", "decorator", "proxy",
        ]

    def test_list_table(self, capsys):
        assert main(["--format", "table", "demos", "list"]) == 0

        out = capsys.readouterr().out
        assert "| NAME" in out
        assert "| visitor" in out

    def test_run_single_list_format(self, capsys):
        assert main(["demos", "run", "mediator"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "== mediator (behavioral)",
            "myCheckBox is checked true",
            "myRadioButton is selected 2",
            "myButton clicked",
        ]

    def test_run_yaml(self, capsys):
        assert main(["--format", "yaml", "demos", "run", "singleton"]) == 0

        data = yaml.safe_load(capsys.readouterr().out)
        assert data == {"results": [{"name": "singleton", "category": "creational", "lines": ["1", "2"]}]}

    def test_run_all_by_category(self, capsys):
        assert main(["--format", "json", "demos", "run", "--all", "--category", "creational"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert len(data["results"]) == 5

    def test_name_with_matching_category(self, capsys):
        assert main(["demos", "run", "observer", "--category", "behavioral"]) == 0

        assert "== observer (behavioral)" in capsys.readouterr().out

    def test_name_with_other_category_exits_nonzero(self, capsys):
        assert main(["demos", "run", "observer", "--category", "structural"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "not in category" in captured.err

    def test_stream_prints_lines_directly(self, capsys):
        assert main(["demos", "run", "state", "--stream"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "== state",
            "Call fetch to update state",
            "Loading, please be patient",
            "Show: Done",
        ]

    def test_stream_all_separates_blocks(self, capsys):
        assert main(["demos", "run", "--all", "--category", "creational", "--stream"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("== abstract_factory\n")
        assert "\n\n== singleton\n1\n2\n" in out

    def test_unknown_demonstration_exits_nonzero(self, capsys):
        assert main(["demos", "run", "flyweight"]) == 1

        assert "Error:" in capsys.readouterr().err

    def test_missing_config_file_exits_nonzero(self, tmp_path, capsys):
        missing = tmp_path / "absent.json"

        assert main(["--config", str(missing), "demos", "list"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_config_file_changes_output(self, tmp_path, capsys):
        config_file = tmp_path / "patterns.json"
        config_file.write_text(json.dumps({
            "download": {"step_percent": 100},
            "cli": {"default_format": "json"},
        }))

        assert main(["--config", str(config_file), "demos", "run", "template_method"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["results"][0]["lines"] == [
            "Start download https://video",
            "Downloading..... 100%",
            "https://video done",
        ]
