"""Tests for scripts/inspect_edtr.py."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from unittest.mock import patch

import pytest

import edtr.config
from conftest import dumps, text_node
from edtr import SchemaError

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "inspect_edtr.py"


def load_script() -> ModuleType:
    spec = importlib.util.spec_from_file_location("inspect_edtr", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def box_file(tmp_path: Path) -> Path:
    path = tmp_path / "box.json"
    box = {
        "plugin": "box",
        "state": {"type": "note", "title": text_node("t"), "anchorId": "a", "content": text_node("c")},
    }
    path.write_bytes(dumps({"plugin": "rows", "state": [box]}))
    return path


class TestInspectScript:
    def test_counts_plugins(self, box_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        script = load_script()

        with patch.object(sys, "argv", ["inspect_edtr.py", str(box_file), "--schema-revision", "v2"]):
            script.main()

        out = capsys.readouterr().out
        assert "box: 1" in out
        assert "text: 2" in out

    def test_default_revision_follows_configuration(
        self, box_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(edtr.config, "EDTR_SCHEMA_REVISION", "v1")
        script = load_script()

        with patch.object(sys, "argv", ["inspect_edtr.py", str(box_file)]):
            with pytest.raises(SchemaError, match="unknown plugin 'box'"):
                script.main()
