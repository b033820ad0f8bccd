"""Tests for TypeGuard / type_of and the logging around them."""

import pytest
import structlog
from structlog.testing import capture_logs

from gatekeep import DefaultKey, GatekeepViolation, Num, Str, TypeGuard, WithOptional, check, type_of
from gatekeep.renderers import format_error
from gatekeep.validators import ObjectError


@pytest.fixture(autouse=True)
def default_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def point_guard():
    return type_of({"x": Num, "y": Num}, name="point")


class TestTypeGuard:

    def test_type_of_builds_a_guard(self, point_guard):
        assert isinstance(point_guard, TypeGuard)
        assert point_guard.descriptor == {"x": Num, "y": Num}
        assert point_guard.name == "point"

    def test_check_matches_module_check(self, point_guard):
        for value in ({"x": 1, "y": 2}, {"x": 1}, {"x": 1, "y": "2"}, None):
            assert point_guard.check(value) == check(point_guard.descriptor, value)

    def test_predicate(self, point_guard):
        assert point_guard({"x": 1, "y": 2}) is True
        assert point_guard({"x": 1}) is False
        assert point_guard.is_valid({"x": 1, "y": 2}) is True

    def test_validate_returns_value(self, point_guard):
        value = {"x": 1, "y": 2}
        assert point_guard.validate(value) is value

    def test_validate_raises(self, point_guard):
        value = {"x": 1, "y": "2"}
        with pytest.raises(GatekeepViolation) as excinfo:
            point_guard.validate(value)

        violation = excinfo.value
        assert violation.value is value
        assert isinstance(violation.error, ObjectError)
        assert str(violation) == format_error(violation.error)

    def test_default_name(self):
        assert type_of(Num).name == "<Number>"
        assert repr(type_of(Num, name="count")) == "TypeGuard(count)"

    def test_usable_as_filter(self):
        is_str = type_of(Str)
        assert list(filter(is_str, ["a", 1, "b", None])) == ["a", "b"]


class TestLogging:

    def test_failures_not_logged_by_default(self, point_guard):
        with capture_logs() as logs:
            point_guard.check({"x": 1})
        assert logs == []

    def test_failures_logged_when_enabled(self, monkeypatch, point_guard):
        monkeypatch.setenv("GATEKEEP_LOG_FAILURES", "true")
        with capture_logs() as logs:
            point_guard.check({"x": 1})
            point_guard.check({"x": 1, "y": 2})

        assert len(logs) == 1
        assert logs[0]["event"] == "check_failed"
        assert logs[0]["log_level"] == "debug"
        assert logs[0]["guard"] == "point"
        assert logs[0]["kind"] == "ObjectRequiredKeyMissing"
        assert "duration_ms" in logs[0]

    def test_descriptor_misuse_logged(self):
        with capture_logs() as logs:
            with pytest.raises(ValueError):
                WithOptional({DefaultKey: Num}, {})

        assert logs[0]["event"] == "descriptor_misuse"
        assert logs[0]["log_level"] == "error"
