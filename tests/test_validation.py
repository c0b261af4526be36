"""Tests for validation rules and colour feedback."""

from __future__ import annotations

from typing import Annotated, ClassVar

import pytest

from configfactory.core import Config, ConfigModule
from configfactory.core.validation import FAILURE_COLOR, SUCCESS_COLOR, SUCCESS_MESSAGE


class RecordingSink:
    def __init__(self) -> None:
        self.reports = []

    def set_validation_color(self, prop, color):
        self.reports.append((prop.name, color))


class ServerConfig(ConfigModule):
    host: Annotated[str, Config("Host")] = "localhost"
    port: Annotated[int, Config("Port")] = 8080
    workers: Annotated[int, Config("Workers")] = 4

    def register_validators(self) -> None:
        self.add_validator("host", lambda value: bool(value.strip()), "Host must not be empty")
        self.add_validator("port", lambda value: 0 < value < 65536, "Port out of range")


def _attach(config: ConfigModule) -> RecordingSink:
    sink = RecordingSink()
    config.validation.sink = sink
    return sink


def test_rules_registered_in_constructor_are_listed():
    config = ServerConfig()

    assert list(config.validators) == ["host", "port"]
    assert config.validators["port"][0].message == "Port out of range"


def test_add_validator_reports_colour_immediately():
    config = ServerConfig()
    sink = _attach(config)

    result = config.add_validator("workers", lambda value: value <= 2, "Too many workers")

    assert result.ok is False
    assert result.message == "Too many workers"
    assert sink.reports == [("workers", FAILURE_COLOR)]


@pytest.mark.parametrize("port, expected", [(8081, SUCCESS_COLOR), (0, FAILURE_COLOR), (70000, FAILURE_COLOR)])
def test_reported_colour_matches_predicate(port, expected):
    config = ServerConfig()
    sink = _attach(config)

    config.port = port

    assert sink.reports[-1] == ("port", expected)


def test_assignment_reevaluates_only_changed_property():
    config = ServerConfig()
    sink = _attach(config)

    config.host = "  "
    config.workers = 8

    assert sink.reports == [("host", FAILURE_COLOR)]


def test_validate_all_returns_first_failure_in_registration_order():
    config = ServerConfig(host="", port=0)
    sink = _attach(config)

    result = config.validate_all()

    assert result.ok is False
    assert result.message == "Host must not be empty"
    assert result.target.name == "host"
    assert sink.reports == [("host", FAILURE_COLOR)]


def test_validate_all_success_reports_every_property():
    config = ServerConfig()
    sink = _attach(config)

    result = config.validate_all()

    assert result.ok is True
    assert result.message == SUCCESS_MESSAGE
    assert result.target is None
    assert sink.reports == [("host", SUCCESS_COLOR), ("port", SUCCESS_COLOR)]


def test_multiple_rules_per_property_short_circuit_on_first_failure():
    config = ServerConfig()
    calls = []

    def low(value):
        calls.append("low")
        return value >= 1024

    def high(value):
        calls.append("high")
        return value <= 9000

    config.add_validator("workers", lambda value: True)
    config.add_validator("port", low, "Privileged port")
    config.add_validator("port", high, "Port too high")
    calls.clear()

    config.port = 80
    result = config.validate_all()

    assert calls == ["low", "low"]
    assert result.message == "Privileged port"
    assert len(config.validators["port"]) == 3


def test_colour_overrides_are_used():
    config = ServerConfig()
    sink = _attach(config)

    config.add_validator("workers", lambda value: value > 0, success_color="green", failure_color="red")
    config.workers = 0

    assert sink.reports == [("workers", "green"), ("workers", "red")]


def test_module_default_colours_can_be_overridden():
    class Branded(ServerConfig):
        success_color: ClassVar[str] = "#00FF00"
        failure_color: ClassVar[str] = "#FF0000"

    config = Branded()
    sink = _attach(config)

    config.port = -1

    assert sink.reports == [("port", "#FF0000")]


def test_validator_for_unknown_property_raises():
    config = ServerConfig()

    with pytest.raises(KeyError):
        config.add_validator("missing", lambda value: True)
