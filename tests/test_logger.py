# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_constitution


from importlib import reload
from pathlib import Path
from typing import Iterator

import pytest

import japanese_law_id.utils.logger as logger_module
from japanese_law_id.utils.logger import logger


@pytest.fixture  # type: ignore
def restore_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    yield monkeypatch
    monkeypatch.delenv("JAPANESE_LAW_ID_LOG_FILE", raising=False)
    monkeypatch.delenv("JAPANESE_LAW_ID_LOG_LEVEL", raising=False)
    reload(logger_module)


def test_logger_defaults(restore_logger: pytest.MonkeyPatch) -> None:
    """Without configuration the logger writes warnings to stderr only."""
    restore_logger.delenv("JAPANESE_LAW_ID_LOG_FILE", raising=False)
    restore_logger.delenv("JAPANESE_LAW_ID_LOG_LEVEL", raising=False)
    reload(logger_module)

    assert logger_module.LOG_LEVEL == "WARNING"
    assert logger_module.LOG_FILE is None


def test_logger_file_sink(restore_logger: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Test that a configured log file gets its directory created."""
    log_file = tmp_path / "logs" / "japanese_law_id.log"
    restore_logger.setenv("JAPANESE_LAW_ID_LOG_FILE", str(log_file))
    restore_logger.setenv("JAPANESE_LAW_ID_LOG_LEVEL", "debug")

    reload(logger_module)

    assert logger_module.LOG_LEVEL == "DEBUG"
    assert log_file.parent.is_dir()


def test_logger_exports() -> None:
    """Test that logger is exported."""
    assert logger is not None
    assert logger_module.__all__ == ["logger"]


def test_import_replaces_existing_sinks(restore_logger: pytest.MonkeyPatch) -> None:
    """Sinks added before the configuration runs are removed by it."""
    handler_id = logger.add(lambda msg: None)

    reload(logger_module)

    with pytest.raises(ValueError):
        logger.remove(handler_id)
