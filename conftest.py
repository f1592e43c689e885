"""
Pytest configuration for project root.

Ensures project modules can be imported in tests and isolates every test
from the developer's real OpenAI environment and config file.
"""

import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


OPENAI_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_ORGANIZATION_KEY",
    "OPENAI_API_URL",
    "OPENAI_AZURE_DEPLOYMENT_ID",
    "OPENAI_AZURE_API_VERSION",
    "OPENAI_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def isolated_defaults(tmp_path, monkeypatch):
    """Clear OPENAI_* vars, point the config file at tmp, and reset caches.

    .env loading is disabled so a developer's local .env can't leak in.
    """
    from openai_api.config import runtime
    from openai_api.rest import client as client_module

    for var in OPENAI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    config_path = tmp_path / "openai-api" / "config.yaml"
    monkeypatch.setenv("OPENAI_CONFIG_PATH", str(config_path))
    monkeypatch.setattr(runtime, "load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setattr(client_module, "_default_client", None)

    runtime.get_defaults.cache_clear()
    yield config_path
    runtime.get_defaults.cache_clear()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by configure_logging() (CLI tests call it)."""
    import logging
    from openai_api.logger import LOGGER_NAME

    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
