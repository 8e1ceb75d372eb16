"""Tests for the pipeline notification surface."""

from __future__ import annotations

import logging

import pytest

from cbomlens.notifications import ErrorStatus, Notifier, status_message


class TestErrorStatus:

    def test_ignored_component_is_informational(self) -> None:
        assert not ErrorStatus.IGNORED_COMPONENT.is_error
        assert ErrorStatus.INVALID_CBOM.is_error
        assert ErrorStatus.JSON_PARSING.is_error

    @pytest.mark.parametrize("status", list(ErrorStatus))
    def test_every_status_has_a_message(self, status: ErrorStatus) -> None:
        assert status_message(status)


class TestNotifier:

    def test_deduplicates_in_first_seen_order(self) -> None:
        notifier = Notifier()
        notifier.add(ErrorStatus.IGNORED_COMPONENT)
        notifier.add(ErrorStatus.INVALID_CBOM)
        notifier.add(ErrorStatus.IGNORED_COMPONENT)
        assert notifier.statuses == [ErrorStatus.IGNORED_COMPONENT, ErrorStatus.INVALID_CBOM]

    def test_has_errors(self) -> None:
        notifier = Notifier()
        notifier.add(ErrorStatus.IGNORED_COMPONENT)
        assert notifier.has(ErrorStatus.IGNORED_COMPONENT)
        assert not notifier.has_errors
        notifier.add(ErrorStatus.JSON_PARSING)
        assert notifier.has_errors

    def test_clear(self) -> None:
        notifier = Notifier()
        notifier.add(ErrorStatus.INVALID_CBOM)
        notifier.clear()
        assert notifier.statuses == []

    def test_logs_detail(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="cbomlens.notifications"):
            Notifier().add(ErrorStatus.INVALID_CBOM, "Missing mandatory field: version.")
        assert "Missing mandatory field: version." in caplog.text
        assert caplog.records[0].levelno == logging.ERROR
