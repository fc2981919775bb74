import logging

import pytest

from fire_projector.engine.projector import project
from fire_projector.errors import AllocationError, DegenerateRateError
from fire_projector.utils.logger import ROOT_LOGGER, get_logger, setup_logging, timer


@pytest.fixture(autouse=True)
def reset_root_logger():
    yield
    root = logging.getLogger(ROOT_LOGGER)
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    root.propagate = True


def test_get_logger_namespaced():
    assert get_logger("engine").name == "fire_projector.engine"
    assert get_logger("fire_projector.engine.projector").name == "fire_projector.engine.projector"


def test_setup_logging_writes_file(tmp_path, scenario_a):
    setup_logging(console_level="WARNING", log_dir=tmp_path)
    project(scenario_a)
    logs = list(tmp_path.glob("projection_*.log"))
    assert len(logs) == 1
    assert "Independence reached" in logs[0].read_text(encoding="utf-8")


def test_validation_failure_logged(caplog, scenario_a):
    with caplog.at_level(logging.WARNING, logger=ROOT_LOGGER):
        with pytest.raises(AllocationError):
            project(scenario_a.replace(stock_allocation=10))
    assert "Allocation rejected" in caplog.text


def test_rate_failure_logged(caplog, scenario_a):
    with caplog.at_level(logging.WARNING, logger=ROOT_LOGGER):
        with pytest.raises(DegenerateRateError):
            project(scenario_a.replace(tax_rate=120))
    assert "Rate rejected" in caplog.text
    assert "tax_rate" in caplog.text


def test_timer_measures_and_reraises():
    t = timer("noop")
    with t:
        pass
    assert t.elapsed >= 0

    with pytest.raises(RuntimeError):
        with timer("boom"):
            raise RuntimeError("boom")
