"""Tests for the CLI commands."""

import json
import tempfile
from pathlib import Path

import yaml
from click.testing import CliRunner

from humanduration.cli import caret_line, cli


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "humanduration" in result.output
    assert "0.1.0" in result.output


class TestParse:
    def test_human_output(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", "/nonexistent.yaml", "parse", "150min"])
        assert result.exit_code == 0
        assert result.output.strip() == "2h 30m"

    def test_several_values(self):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["-c", "/nonexistent.yaml", "parse", "1h2m3s", "32ms"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1h 2m 3s", "32ms"]

    def test_seconds_output(self):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["-c", "/nonexistent.yaml", "parse", "-o", "seconds", "1s 32ms", "2h"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.032000000", "7200"]

    def test_nanos_output(self):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["-c", "/nonexistent.yaml", "parse", "-o", "nanos", "1s 5ns"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "1000000005"

    def test_json_output(self):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["-c", "/nonexistent.yaml", "parse", "-o", "json", "2h 37min"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "input": "2h 37min",
            "seconds": 9420,
            "nanoseconds": 0,
            "formatted": "2h 37m",
        }

    def test_error_exits_nonzero(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["-c", "/nonexistent.yaml", "parse", "1xyz"])
        assert result.exit_code == 1
        assert "unknown time unit 'xyz'" in result.output
        assert " ^^^" in result.output

    def test_presets_from_config(self):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "humanduration.yaml"
            config_path.write_text(
                yaml.dump({"output": {"format": "seconds"}, "presets": {"short": "5m"}}),
                encoding="utf-8",
            )
            result = runner.invoke(cli, ["-c", str(config_path), "parse", "short", "1m"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["300", "60"]

    def test_invalid_config(self):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "humanduration.yaml"
            config_path.write_text("presets:\n  bad: 5 parsecs\n", encoding="utf-8")
            result = runner.invoke(cli, ["-c", str(config_path), "parse", "1m"])
        assert result.exit_code == 1
        assert "Invalid config" in result.output


class TestFormat:
    def test_seconds(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "9420"])
        assert result.exit_code == 0
        assert result.output.strip() == "2h 37m"

    def test_nanos(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "0", "--nanos", "32000000"])
        assert result.exit_code == 0
        assert result.output.strip() == "32ms"

    def test_nanos_out_of_range(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["format", "0", "--nanos", "1000000000"])
        assert result.exit_code != 0


class TestCheck:
    def _write(self, tmpdir: str, data) -> str:
        path = Path(tmpdir) / "service.yaml"
        path.write_text(yaml.dump(data), encoding="utf-8")
        return str(path)

    def test_all_valid(self):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(tmpdir, {
                "server": {"timeout": "30s", "retries": 3},
                "cache": {"ttl": "1day 12h"},
            })
            result = runner.invoke(cli, ["check", path])
        assert result.exit_code == 0
        assert "server.timeout: 30s" in result.output
        assert "cache.ttl: 1day 12h" in result.output
        assert "2/2 values OK" in result.output

    def test_reports_failures(self):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(tmpdir, {"server": {"timeout": "30 parsecs"}})
            result = runner.invoke(cli, ["check", path])
        assert result.exit_code == 1
        assert "server.timeout" in result.output
        assert "unknown time unit 'parsecs'" in result.output
        assert "0/1 values OK" in result.output

    def test_selected_keys(self):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(tmpdir, {
                "server": {"timeout": "30s", "name": "api"},
            })
            result = runner.invoke(cli, ["check", path, "-k", "server.timeout"])
        assert result.exit_code == 0
        assert "1/1 values OK" in result.output

    def test_missing_key(self):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(tmpdir, {"server": {}})
            result = runner.invoke(cli, ["check", path, "-k", "server.timeout"])
        assert result.exit_code == 1
        assert "key not found" in result.output

    def test_missing_file(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["check", "/nonexistent/service.yaml"])
        assert result.exit_code != 0


def test_caret_line_uses_characters():
    assert caret_line("1xyz", (1, 4)) == " ^^^"
    # "µ" occupies two bytes but one column
    assert caret_line("1µx", (1, 4)) == " ^^"
    assert caret_line("10", (2, 2)) == "  ^"
