"""Tests for the ``generate-component`` CLI."""

from __future__ import annotations

from pathlib import Path

import pytest

from component_kit.scaffolder.cli import main


pytestmark = pytest.mark.unit


class TestGenerateComponentCLI:
    def test_success_lists_files(self, workdir: Path, capsys):
        main(["Button"])
        out = capsys.readouterr().out
        assert "Created component: Button" in out
        for name in ("Button.tsx", "Button.module.css", "index.ts", "Button.test.tsx"):
            assert name in out
            assert (workdir / "components" / "Button" / name).exists()

    def test_missing_name_exits_1(self, workdir: Path):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert not (workdir / "components").exists()

    def test_type_flag(self, workdir: Path):
        main(["Login", "--type=form"])
        source = (workdir / "components" / "Login" / "Login.tsx").read_text(encoding="utf-8")
        assert "<form onSubmit={handleSubmit}" in source

    def test_no_styled_and_no_typed(self, workdir: Path):
        main(["Toggle", "--type=interactive", "--no-styled", "--no-typed"])
        component_dir = workdir / "components" / "Toggle"
        assert not (component_dir / "Toggle.module.css").exists()
        assert "type " not in (component_dir / "index.ts").read_text(encoding="utf-8")

    def test_explicit_styled_and_typed(self, workdir: Path):
        main(["Chip", "--styled", "--typed"])
        component_dir = workdir / "components" / "Chip"
        assert (component_dir / "Chip.module.css").exists()
        assert "type ChipProps" in (component_dir / "index.ts").read_text(encoding="utf-8")

    def test_invalid_name_exits_1(self, workdir: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["not-valid"])
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().out

    def test_write_failure_exits_1(self, workdir: Path):
        # A regular file where the components directory should be.
        (workdir / "components").write_text("", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["Button"])
        assert exc_info.value.code == 1

    def test_env_defaults(self, workdir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CK_COMPONENTS_DIR", "ui")
        monkeypatch.setenv("CK_STYLED", "false")
        main(["Tag"])
        component_dir = workdir / "ui" / "Tag"
        assert (component_dir / "Tag.tsx").exists()
        assert not (component_dir / "Tag.module.css").exists()

    @pytest.mark.parametrize(
        "name, value",
        [("CK_STYLED", "maybe"), ("CK_WATCH_INTERVAL", "soon"), ("CK_CSS_MODULE_SUFFIX", "module.css")],
    )
    def test_bad_env_value_exits_1(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys, name: str, value: str):
        monkeypatch.setenv(name, value)
        with pytest.raises(SystemExit) as exc_info:
            main(["Tag"])
        assert exc_info.value.code == 1
        assert "Invalid configuration" in capsys.readouterr().out
        assert not (workdir / "components").exists()
