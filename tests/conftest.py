import logging

import pytest

from html2jpg.logger import BASE_LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def propagate_logs(monkeypatch):
    # Handlers are attached once; letting records reach the root keeps caplog working.
    configure_logging()
    monkeypatch.setattr(logging.getLogger(BASE_LOGGER_NAME), "propagate", True)
