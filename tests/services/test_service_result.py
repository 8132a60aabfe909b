"""Tests for ServiceResult and ServiceError contracts."""

import pytest

from billingctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_defaults(self) -> None:
        result = ServiceResult(ok=True, op="list_commands")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure(self) -> None:
        error = ServiceError(code="error.msg.command.unsupported", message="nope")
        result = ServiceResult(ok=False, op="validate", error=error)
        assert result.error is not None
        assert result.error.detail == {}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="validate")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
