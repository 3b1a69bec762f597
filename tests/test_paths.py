import os
from pathlib import Path

import pytest

from initiative.data import paths


def test_default_data_path_under_base_dir(tmp_path: Path) -> None:
    assert paths.get_default_data_path(tmp_path) == tmp_path / "data.yaml"


def test_log_path_under_base_dir(tmp_path: Path) -> None:
    assert paths.get_log_path(tmp_path) == tmp_path / "initiative.log"


@pytest.mark.skipif(os.name == "nt", reason="POSIX layout")
def test_user_data_dir_uses_dot_config(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert paths.get_user_data_dir() == tmp_path / ".config" / "initiative"
    assert paths.get_default_data_path() == tmp_path / ".config" / "initiative" / "data.yaml"
