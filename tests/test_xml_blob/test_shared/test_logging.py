"""Tests for correlation-aware logging."""

import logging

from xml_blob.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Test suite for CorrelationLogger."""

    def test_component_defaults_to_last_name_part(self):
        """Test the component name is derived from the logger name."""
        logger = get_logger("xml_blob.tree.blobs")

        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "blobs"
        assert logger.correlation_id is None

    def test_records_carry_correlation_info(self, caplog):
        """Test component and correlation ID are attached to each record."""
        logger = get_logger("xml_blob.test", "req-42", "printer")

        with caplog.at_level(logging.DEBUG, logger="xml_blob.test"):
            logger.debug("hello", extra={"node_kind": "ElementNode"})

        record = caplog.records[-1]
        assert record.levelno == logging.DEBUG
        assert record.getMessage() == "hello"
        assert record.component == "printer"
        assert record.correlation_id == "req-42"
        assert record.node_kind == "ElementNode"

    def test_bind(self):
        """Test binding a correlation ID keeps name and component."""
        logger = get_logger("xml_blob.test", component="tree")

        bound = logger.bind("req-1")

        assert bound.correlation_id == "req-1"
        assert bound.component == "tree"
        assert bound.logger is logger.logger
        assert logger.correlation_id is None
        assert logger.bind(None) is logger

    def test_only_debug_surface(self):
        """Test the logger exposes only what the printing path uses."""
        logger = get_logger("xml_blob.test")

        assert not hasattr(logger, "info")
        assert not hasattr(logger, "error")

    def test_is_debug_enabled(self, caplog):
        """Test the debug check follows the logger level."""
        logger = get_logger("xml_blob.debugcheck")

        with caplog.at_level(logging.DEBUG, logger="xml_blob.debugcheck"):
            assert logger.is_debug_enabled() is True

        with caplog.at_level(logging.INFO, logger="xml_blob.debugcheck"):
            assert logger.is_debug_enabled() is False
