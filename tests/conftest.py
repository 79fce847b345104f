import pytest

import config


@pytest.fixture
def generated_dir(tmp_path, monkeypatch):
    """Points all generated output at a temporary directory."""
    out_dir = tmp_path / "generated"
    monkeypatch.setattr(config, "GENERATED_DIR", out_dir)
    monkeypatch.setattr(config, "CONSOLE_OUTPUT_PATH", out_dir / "console_output.txt")
    monkeypatch.setattr(config, "EVENT_LOG_PATH", out_dir / "event_log.csv")
    return out_dir
