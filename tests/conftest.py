import pytest

from reframer.core.logging import configure_logging
from reframer.rules.engine import reset_rule_engines


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep test output readable; tests that inspect logging reconfigure it."""
    configure_logging(level="silent", force=True)


@pytest.fixture(autouse=True)
def fresh_rule_engines():
    """Each test compiles rules from the bundled YAML."""
    reset_rule_engines()
    yield
    reset_rule_engines()
