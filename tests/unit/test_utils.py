"""Unit tests for utilities and configuration."""

import logging

import pytest
from pydantic import ValidationError

from plangeom.config import ClipConfig, PlangeomSettings, get_default_settings
from plangeom.utils import configure_logging, drop_consecutive_duplicates


def _plangeom_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_plangeom", False)]


@pytest.fixture
def clean_logging():
    """Remove handlers installed by configure_logging after the test."""
    yield
    root = logging.getLogger()
    for handler in _plangeom_handlers():
        root.removeHandler(handler)
        handler.close()


class TestDropConsecutiveDuplicates:
    """Tests for drop_consecutive_duplicates."""

    def test_runs_collapse(self):
        """Runs of equal items keep their first item."""
        assert drop_consecutive_duplicates([1, 1, 2, 2, 3, 1]) == [1, 2, 3, 1]

    def test_cyclic(self):
        """The wrap-around pair is also compared."""
        assert drop_consecutive_duplicates([1, 1, 2, 2, 3, 1], cyclic=True) == [1, 2, 3]

    def test_cyclic_single_value(self):
        """A run covering the whole list keeps one item."""
        assert drop_consecutive_duplicates(["a", "a", "a"], cyclic=True) == ["a"]

    def test_key(self):
        """Items are compared through the key."""
        items = [("a", 1), ("a", 2), ("b", 3)]
        assert drop_consecutive_duplicates(items, key=lambda item: item[0]) == [
            ("a", 1),
            ("b", 3),
        ]

    def test_empty(self):
        """Test an empty sequence."""
        assert drop_consecutive_duplicates([], cyclic=True) == []

    def test_input_not_mutated(self):
        """A new list is returned."""
        items = [1, 1, 2]
        drop_consecutive_duplicates(items)
        assert items == [1, 1, 2]


class TestConfig:
    """Tests for pydantic settings."""

    def test_clip_defaults(self):
        """Test default clip scale and offset."""
        config = ClipConfig()
        assert config.clip_scale == 100.0
        assert config.offset == 0.01

    @pytest.mark.parametrize("field", ["clip_scale", "offset"])
    def test_clip_values_must_be_positive(self, field):
        """Zero or negative values are rejected."""
        with pytest.raises(ValidationError):
            ClipConfig(**{field: 0})

    def test_clip_config_frozen(self):
        """Clip settings cannot change after creation."""
        config = ClipConfig()
        with pytest.raises(ValidationError):
            config.clip_scale = 10.0

    def test_default_settings(self):
        """Test the default settings tree."""
        settings = get_default_settings()
        assert isinstance(settings, PlangeomSettings)
        assert settings.clip == ClipConfig()
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_only(self, clean_logging):
        """Without a log file only a console handler is installed."""
        configure_logging()
        handlers = _plangeom_handlers()
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_quiet_raises_console_level(self, clean_logging):
        """Quiet mode only lets errors through."""
        configure_logging(console_level="DEBUG", quiet=True)
        assert _plangeom_handlers()[0].level == logging.ERROR

    def test_log_file(self, clean_logging, tmp_path):
        """A log file receives library log records."""
        log_file = tmp_path / "plangeom.log"
        configure_logging(log_file=log_file)
        assert len(_plangeom_handlers()) == 2

        logging.getLogger("plangeom.core.setops").debug("union of %d points", 4)
        for handler in _plangeom_handlers():
            handler.flush()

        assert "union of 4 points" in log_file.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self, clean_logging, tmp_path):
        """Calling again does not stack handlers."""
        configure_logging(log_file=tmp_path / "a.log")
        configure_logging()
        assert len(_plangeom_handlers()) == 1
