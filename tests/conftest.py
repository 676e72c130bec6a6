import sys
from pathlib import Path

import pytest
import yaml

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def load_fixture(name: str):
    with open(FIXTURES_DIR / name, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def package_logger():
    import logging

    logger = logging.getLogger("openapi_schema_checks")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
