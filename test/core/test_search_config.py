import logging
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from TSPSearch.core.config import SearchConfig
from TSPSearch.core.utils import is_finite, setup_logging


def test_defaults():
    config = SearchConfig()
    assert config.problem_name == "tsp"
    assert config.max_start_vertex == 0
    assert config.record_all_best is True
    assert config.time_denominator == 1000.0


def test_round_trip_through_dict():
    config = SearchConfig(problem_name="depot", max_start_vertex=2)
    assert SearchConfig.from_dict(config.to_json_dict()) == config


def test_unknown_keys_rejected():
    with pytest.raises(ValueError, match="Unknown search config keys"):
        SearchConfig.from_dict({"max_start": 1})


@pytest.mark.parametrize(
    "kwargs",
    [{"max_start_vertex": -1}, {"max_start_vertex": 1.5}, {"max_start_vertex": True}, {"time_denominator": 0}],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        SearchConfig(**kwargs)


def test_is_finite():
    assert is_finite(3.0)
    assert not is_finite(float("inf"))
    assert not is_finite(float("nan"))


class TestSetupLogging:
    def test_stream_only_without_log_dir(self):
        logger = setup_logging("greedy", "stream_only_case")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_does_not_duplicate_handlers(self):
        first = setup_logging("exact", "repeat_case")
        second = setup_logging("exact", "repeat_case")
        assert first is second
        assert len(second.handlers) == 1

    def test_writes_log_file(self, tmp_path: Path):
        logger = setup_logging("exact", "file_case", log_dir=tmp_path / "logs", session_id=7)
        logger.info("weight: %s", 35.0)
        for handler in logger.handlers:
            handler.flush()
        text = (tmp_path / "logs" / "exact_logs.log").read_text(encoding="utf-8")
        assert "[Session: 7]-[Problem: file_case]" in text
        assert "weight: 35.0" in text
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_numpy_integer_start_vertex_accepted():
    assert SearchConfig(max_start_vertex=np.int64(2)).max_start_vertex == 2
