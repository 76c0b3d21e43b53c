from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

REPO_ROOT = Path(__file__).resolve().parents[3]


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(data: Any) -> str:
        path = tmp_path / "premium.yml"
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return str(path)

    return _write


@pytest.fixture
def example_config() -> str:
    return str(REPO_ROOT / "config" / "premium.yml")


@pytest.fixture
def parse_printed_json():
    def _parse(text: str) -> dict[str, Any]:
        return json.loads(text)

    return _parse


@pytest.fixture
def run_help(capsys):
    def _run(mod, expected: str) -> None:
        with pytest.raises(SystemExit) as exc:
            mod.main(["--help"])
        assert exc.value.code == 0
        assert expected in capsys.readouterr().out

    return _run
