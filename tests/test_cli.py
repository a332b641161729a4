"""
tests/test_cli.py
=================
Command-line front end, driven through ``main(argv)``.
"""
import json

import pytest
import requests

from password_forge import cli


def run(argv, capsys):
    code = cli.main(argv)
    return code, capsys.readouterr().out


class TestGenerateCommand:

    def test_defaults_from_settings(self, settings_file, capsys):
        settings_file.write_text(json.dumps({"generation": {"length": 21}}), encoding="utf-8")
        code, out = run(["generate"], capsys)
        assert code == 0
        assert len(out.strip()) == 21

    def test_flags_override_settings(self, settings_file, capsys):
        code, out = run(
            ["generate", "--length", "12", "--no-uppercase", "--no-lowercase", "--no-symbols", "--count", "5"],
            capsys,
        )
        assert code == 0
        lines = out.split()
        assert len(lines) == 5
        assert all(len(line) == 12 and line.isdigit() for line in lines)

    def test_exclude_flags(self, settings_file, capsys):
        code, out = run(
            ["generate", "--length", "200", "--no-uppercase", "--no-lowercase", "--exclude-ambiguous"],
            capsys,
        )
        assert code == 0
        assert set(out.strip()) <= set("23456789!@#$%^&*")

    def test_seed_is_reproducible(self, settings_file, capsys, caplog):
        _, first = run(["generate", "--seed", "7"], capsys)
        _, second = run(["generate", "--seed", "7"], capsys)
        assert first == second
        assert "pseudo-random" in caplog.text

    def test_json_with_strength(self, settings_file, capsys):
        code, out = run(["generate", "--json", "--show-strength", "--count", "2"], capsys)
        assert code == 0
        payload = json.loads(out)
        assert len(payload) == 2
        assert set(payload[0]) == {"password", "strength"}
        assert set(payload[0]["strength"]) == {"score", "label", "color_tag", "points"}

    def test_show_strength_text(self, settings_file, capsys):
        code, out = run(["generate", "--show-strength"], capsys)
        assert code == 0
        assert "%" in out

    def test_no_class_selected(self, settings_file, capsys):
        code, out = run(["generate", "--no-uppercase", "--no-lowercase", "--no-numbers", "--no-symbols"], capsys)
        assert code == 2
        assert out.startswith("Error: Select at least one character class.")

    @pytest.mark.parametrize("count", ["0", "-3", "many"])
    def test_non_positive_count_rejected(self, settings_file, capsys, count):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["generate", "--count", count])
        assert excinfo.value.code == 2
        assert "--count" in capsys.readouterr().err

    def test_string_length_in_settings(self, settings_file, capsys):
        settings_file.write_text(json.dumps({"generation": {"length": "16"}}), encoding="utf-8")
        code, out = run(["generate"], capsys)
        assert code == 2
        assert out.startswith("Error: 'generation.length' must be an integer")

    def test_string_flag_in_settings(self, settings_file, capsys):
        settings = {
            "generation": {
                "include_uppercase": False,
                "include_lowercase": False,
                "include_numbers": False,
                "include_symbols": "false",
            }
        }
        settings_file.write_text(json.dumps(settings), encoding="utf-8")
        code, out = run(["generate"], capsys)
        assert code == 2
        assert "generation.include_symbols" in out

    def test_zero_length(self, settings_file, capsys):
        code, out = run(["generate", "--length", "0"], capsys)
        assert code == 2
        assert "at least 1" in out


class TestScoreCommand:

    def test_text_output(self, settings_file, capsys):
        code, out = run(["score", "Aa1!Aa1!Aa1!Aa1!"], capsys)
        assert code == 0
        assert "100.0% very strong (green)" in out
        assert "Points: 8/8" in out

    def test_json_output(self, settings_file, capsys):
        code, out = run(["score", "aaaaaaaa", "--json"], capsys)
        assert code == 0
        assert json.loads(out) == {"score": 25.0, "label": "weak", "color_tag": "orange", "points": 2}

    def test_empty_password(self, settings_file, capsys):
        code, out = run(["score", "", "--json"], capsys)
        assert code == 0
        assert json.loads(out)["label"] == "very weak"

    def test_prompts_when_password_omitted(self, settings_file, capsys, monkeypatch):
        monkeypatch.setattr(cli, "getpass", lambda prompt: "aaaaaaaa")
        code, out = run(["score"], capsys)
        assert code == 0
        assert "weak (orange)" in out

    def test_breach_hit(self, settings_file, capsys, monkeypatch):
        monkeypatch.setattr(cli, "pwned_password_count", lambda password, timeout: 42)
        code, out = run(["score", "password", "--check-breach"], capsys)
        assert code == 0
        assert "appears in 42 breach records" in out

    def test_breach_json(self, settings_file, capsys, monkeypatch):
        monkeypatch.setattr(cli, "pwned_password_count", lambda password, timeout: 0)
        code, out = run(["score", "password", "--check-breach", "--json"], capsys)
        assert code == 0
        assert json.loads(out)["pwned_count"] == 0

    def test_breach_enabled_in_settings(self, settings_file, capsys, monkeypatch):
        settings_file.write_text(json.dumps({"breach": {"enabled": True, "timeout_seconds": 5}}), encoding="utf-8")
        calls = []
        monkeypatch.setattr(cli, "pwned_password_count", lambda password, timeout: calls.append(timeout) or 0)
        code, out = run(["score", "password"], capsys)
        assert code == 0
        assert calls == [5]
        assert "not found in breach corpus" in out

    def test_no_check_breach_overrides_settings(self, settings_file, capsys, monkeypatch):
        settings_file.write_text(json.dumps({"breach": {"enabled": True}}), encoding="utf-8")
        monkeypatch.setattr(cli, "pwned_password_count", lambda password, timeout: pytest.fail("lookup ran"))
        code, _ = run(["score", "password", "--no-check-breach"], capsys)
        assert code == 0

    def test_breach_section_not_object(self, settings_file, capsys):
        settings_file.write_text(json.dumps({"breach": False}), encoding="utf-8")
        code, out = run(["score", "password", "--check-breach"], capsys)
        assert code == 2
        assert out.startswith("Error: 'breach' settings must be a JSON object")

    def test_breach_api_down(self, settings_file, capsys, monkeypatch):
        def boom(password, timeout):
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(cli, "pwned_password_count", boom)
        code, out = run(["score", "password", "--check-breach"], capsys)
        assert code == 3
        assert "Breach API unavailable" in out


class TestInteractiveCommand:

    def test_generates_then_stops(self, settings_file, capsys, monkeypatch):
        answers = iter(["10", "n", "n", "", "n", "", "", "n"])
        monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
        code, out = run(["interactive"], capsys)
        assert code == 0
        password = out.strip().splitlines()[0]
        assert len(password) == 10
        assert password.isdigit()

    def test_length_out_of_range_is_reprompted(self, settings_file, capsys, monkeypatch):
        answers = iter(["2", "99", "8", "", "", "", "", "", "", "n"])
        monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
        code, out = run(["interactive"], capsys)
        assert code == 0
        assert out.count("Enter a whole number between 4 and 50.") == 2
        assert len(out.strip().splitlines()[-2]) == 8


    def test_reasks_classes_when_none_selected(self, settings_file, capsys, monkeypatch):
        answers = iter([
            "6",
            "n", "n", "n", "n", "", "",
            "n", "n", "y", "n", "", "",
            "n",
        ])
        monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
        code, out = run(["interactive"], capsys)
        assert code == 0
        lines = out.strip().splitlines()
        assert lines[0] == "Select at least one character class."
        assert len(lines[-2]) == 6
        assert lines[-2].isdigit()

    def test_length_limits_section_not_object(self, settings_file, capsys):
        settings_file.write_text(json.dumps({"length_limits": [4, 50]}), encoding="utf-8")
        code, out = run(["interactive"], capsys)
        assert code == 2
        assert "length_limits" in out


class TestInitConfigCommand:

    def test_writes_file(self, settings_file, capsys):
        code, out = run(["init-config"], capsys)
        assert code == 0
        assert settings_file.exists()
        assert str(settings_file) in out

    def test_invalid_settings_reported(self, settings_file, capsys):
        settings_file.write_text("[]", encoding="utf-8")
        code, out = run(["generate"], capsys)
        assert code == 2
        assert out.startswith("Error:")


def test_command_required(capsys):
    with pytest.raises(SystemExit):
        cli.main([])
