"""
Tests for logging helpers and settings.
"""

import logging

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.shared.logging import (
    NO_REQUEST_ID,
    RequestIdFilter,
    configure_logging,
    mask_email,
    request_id_var,
)


class TestMaskEmail:
    @pytest.mark.parametrize(
        ("email", "masked"),
        [
            ("jane.doe@example.com", "j***@example.com"),
            ("a@b.io", "a***@b.io"),
            ("not-an-email", "***"),
        ],
    )
    def test_masks_local_part(self, email: str, masked: str) -> None:
        assert mask_email(email) == masked


class TestRequestIdFilter:
    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

    def test_outside_request_uses_placeholder(self) -> None:
        record = self._record()
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == NO_REQUEST_ID

    def test_uses_current_request_id(self) -> None:
        token = request_id_var.set("abc")
        try:
            record = self._record()
            RequestIdFilter().filter(record)
        finally:
            request_id_var.reset(token)
        assert record.request_id == "abc"


class TestConfigureLogging:
    def test_repeated_calls_keep_one_app_handler(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "app.log"
        configure_logging("DEBUG", log_file=str(log_file))
        configure_logging("WARNING")
        root = logging.getLogger()
        own = [h for h in root.handlers if getattr(h, "_users_api_handler", False)]
        assert len(own) == 1
        assert root.level == logging.WARNING
        assert log_file.exists()
        configure_logging("INFO")


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        assert s.port == 3000
        assert s.rate_limit_default == "100/minute"
        assert s.seed_demo_data is True

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("CORS_ORIGIN", "http://a.test, http://b.test")
        s = Settings(_env_file=None)
        assert s.port == 8080
        assert s.cors_origins() == ["http://a.test", "http://b.test"]

    def test_invalid_integer_fails(self, monkeypatch) -> None:
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_file_only_defaults_in_development(self) -> None:
        assert Settings(_env_file=None, environment="development").effective_log_file() == "logs/app.log"
        assert Settings(_env_file=None, environment="production").effective_log_file() is None
        assert Settings(_env_file=None, environment="test", log_file="x.log").effective_log_file() == "x.log"
