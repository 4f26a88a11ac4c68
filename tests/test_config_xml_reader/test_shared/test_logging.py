"""Tests for correlation-aware logging."""

import logging

from config_xml_reader.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Test the logging wrapper."""

    def test_component_defaults_to_last_name_segment(self):
        logger = get_logger("config_xml_reader.api.loader")

        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "loader"
        assert logger.correlation_id is None

    def test_records_carry_correlation_fields(self, caplog):
        logger = get_logger("config_xml_reader.test", "req-1", "unit")

        with caplog.at_level(logging.INFO, logger="config_xml_reader.test"):
            logger.info("hello", extra={"size": 3})

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.component == "unit"
        assert record.correlation_id == "req-1"
        assert record.size == 3

    def test_error_records_have_no_traceback(self, caplog):
        logger = get_logger("config_xml_reader.test", "req-2")

        with caplog.at_level(logging.ERROR, logger="config_xml_reader.test"):
            logger.error("broken", extra={"position": 4})

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info is None
        assert record.position == 4
        assert record.component == "test"
