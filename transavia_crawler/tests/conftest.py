import pytest

from transavia_crawler.config import get_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for key in (
        "TRANSAVIA_API_KEY",
        "TRANSAVIA_API_URL",
        "MAIL_HOST",
        "MAIL_PORT",
        "MAIL_USER",
        "MAIL_PASS",
        "MAIL_FROM",
        "LOG_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
