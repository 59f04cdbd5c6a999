import json

from click.testing import CliRunner

from tsconfig_init.cli import cli
from tsconfig_init.core.config import CONFIG_FILENAME


def _run(args, tmp_path, monkeypatch, input=None):
    monkeypatch.chdir(tmp_path)
    return CliRunner().invoke(cli, args, input=input)


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))["compilerOptions"]


def test_interactive_defaults_write_current_directory(tmp_path, monkeypatch):
    # Six empty answers accept every default.
    result = _run([], tmp_path, monkeypatch, input="\n" * 6)

    assert result.exit_code == 0, result.output
    assert "tsconfig.json has been generated in" in result.output
    opts = _read(tmp_path / "tsconfig.json")
    assert opts["strict"] is True
    assert opts["module"] == "NodeNext"
    assert opts["lib"] == ["es2022"]


def test_interactive_answers(tmp_path, monkeypatch):
    answers = "\n".join(["web", "3", "n", "y", "y", "y"]) + "\n"
    result = _run([], tmp_path, monkeypatch, input=answers)

    assert result.exit_code == 0, result.output
    assert "Rigorous (Maximum safety)" in result.output
    opts = _read(tmp_path / "web" / "tsconfig.json")
    assert opts["noUncheckedIndexedAccess"] is True
    assert opts["module"] == "preserve"
    assert opts["declaration"] is True
    assert opts["composite"] is True
    assert opts["lib"] == ["es2022", "dom", "dom.iterable"]
    assert "outDir" not in opts


def test_flags_with_yes_do_not_prompt(tmp_path, monkeypatch):
    result = _run(["--yes", "--name", "lib", "--strictness", "off", "--library"], tmp_path, monkeypatch)

    assert result.exit_code == 0, result.output
    assert "?" not in result.output
    opts = _read(tmp_path / "lib" / "tsconfig.json")
    assert "strict" not in opts
    assert opts["declaration"] is True


def test_config_file_supplies_defaults(tmp_path, monkeypatch):
    (tmp_path / CONFIG_FILENAME).write_text("strictness: strict\ndom: true\n", encoding="utf-8")
    result = _run(["-y"], tmp_path, monkeypatch)

    assert result.exit_code == 0, result.output
    opts = _read(tmp_path / "tsconfig.json")
    assert opts["noImplicitOverride"] is True
    assert "dom" in opts["lib"]


def test_dry_run_prints_and_writes_nothing(tmp_path, monkeypatch):
    result = _run(["-y", "--dry-run", "--no-transpiler"], tmp_path, monkeypatch)

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["compilerOptions"]["noEmit"] is True
    assert not (tmp_path / "tsconfig.json").exists()


def test_closed_input_aborts_without_writing(tmp_path, monkeypatch):
    result = _run([], tmp_path, monkeypatch, input="web\n")

    assert result.exit_code == 1
    assert "Error: Input aborted" in result.output
    assert not (tmp_path / "web").exists()
    assert not (tmp_path / "tsconfig.json").exists()


def test_filesystem_failure_exits_non_zero(tmp_path, monkeypatch):
    (tmp_path / "taken").write_text("file in the way", encoding="utf-8")
    result = _run(["-y", "--name", "taken"], tmp_path, monkeypatch)

    assert result.exit_code == 1
    assert "Error: Could not create directory" in result.output


def test_empty_name_is_rejected(tmp_path, monkeypatch):
    result = _run(["-y", "--name", "  "], tmp_path, monkeypatch)
    assert result.exit_code == 2


def test_version_flag(tmp_path, monkeypatch):
    result = _run(["--version"], tmp_path, monkeypatch)
    assert result.exit_code == 0
    assert "tsconfig-init" in result.output


def test_blank_configured_name_writes_current_directory(tmp_path, monkeypatch):
    (tmp_path / CONFIG_FILENAME).write_text('project_name: "   "\n', encoding="utf-8")
    result = _run(["-y"], tmp_path, monkeypatch)

    assert result.exit_code == 0, result.output
    assert (tmp_path / "tsconfig.json").exists()
    assert sorted(p.name for p in tmp_path.iterdir()) == [CONFIG_FILENAME, "tsconfig.json"]


def test_removed_working_directory_is_reported(tmp_path, monkeypatch):
    gone = tmp_path / "gone"
    gone.mkdir()
    monkeypatch.chdir(gone)
    gone.rmdir()

    result = CliRunner().invoke(cli, ["-y"])

    assert result.exit_code == 1
    assert "Error: Could not determine the current directory" in result.output
    assert not isinstance(result.exception, FileNotFoundError)
