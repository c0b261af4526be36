"""Tests for property discovery and catalog generation."""

from __future__ import annotations

import enum
from decimal import Decimal
from pathlib import Path
from typing import Annotated, Literal, Optional

import pytest
from pydantic import Field

from configfactory.core import (
    BrowseConfig,
    Config,
    ConfigModule,
    ConfigProperties,
    ConfigurationError,
    DropdownConfig,
    FieldKind,
    NumericConfig,
    on_changed,
)


class Theme(enum.Enum):
    LIGHT = "light"
    DARK = "dark"


class SampleConfig(ConfigModule):
    username: Annotated[str, Config("User name", "Shown in the title bar", category="Account", group="Profile")] = "guest"
    volume: Annotated[int, Config("Volume", category="Audio"), NumericConfig(increment=5)] = Field(50, ge=0, le=100)
    gain: Annotated[float, Config("Gain", category="Audio"), NumericConfig(minimum=-1.5, maximum=1.5)] = 0.0
    theme: Annotated[Theme, Config("Theme")] = Theme.LIGHT
    layout: Annotated[Literal["grid", "list"], Config("Layout")] = "grid"
    retries: Annotated[Optional[int], Config("Retries")] = None
    ratio: Annotated[Decimal, Config("Ratio"), NumericConfig(increment=Decimal("0.1"))] = Decimal("1.0")
    enabled: Annotated[bool, Config()] = True
    output: Annotated[Path, Config("Output"), BrowseConfig(mode="folder")] = Path(".")
    quality: Annotated[int, Config("Quality"), DropdownConfig(options=[("Low", 1), ("High", 2)])] = 1
    tags: Annotated[list[str], Config("Tags")] = Field(default_factory=list)
    internal_counter: int = 0

    @on_changed("volume")
    def volume_changed(self, value):
        pass


def test_catalog_skips_unmarked_fields_and_keeps_declaration_order():
    catalog = ConfigProperties.for_module(SampleConfig)

    assert "internal_counter" not in catalog
    assert list(catalog)[:3] == ["username", "volume", "gain"]
    assert len(catalog) == 11


def test_catalog_records_labels_and_defaults():
    catalog = ConfigProperties.for_module(SampleConfig)

    username = catalog["username"]
    assert (username.header, username.description) == ("User name", "Shown in the title bar")
    assert (username.category, username.group) == ("Account", "Profile")
    assert username.path == "Account/Profile/username"

    enabled = catalog["enabled"]
    assert enabled.header == "enabled"
    assert (enabled.category, enabled.group) == ("General", "Common")


def test_numeric_bounds_come_from_pydantic_and_numeric_config():
    catalog = ConfigProperties.for_module(SampleConfig)

    volume = catalog["volume"]
    assert volume.kind is FieldKind.NUMERIC
    assert (volume.minimum, volume.maximum, volume.increment) == (0, 100, 5)

    gain = catalog["gain"]
    assert (gain.minimum, gain.maximum, gain.increment) == (-1.5, 1.5, None)


def test_field_kinds_resolve_from_types_and_markers():
    catalog = ConfigProperties.for_module(SampleConfig)

    assert catalog["username"].kind is FieldKind.TEXT
    assert catalog["enabled"].kind is FieldKind.BOOLEAN
    assert catalog["output"].kind is FieldKind.PATH
    assert catalog["output"].browse.mode == "folder"
    assert catalog["tags"].kind is FieldKind.CUSTOM
    assert catalog["retries"].value_type is int
    assert catalog["retries"].kind is FieldKind.NUMERIC


def test_enum_literal_and_dropdown_fields_become_dropdowns():
    catalog = ConfigProperties.for_module(SampleConfig)

    theme = catalog["theme"]
    assert theme.kind is FieldKind.DROPDOWN
    assert [option.value for option in theme.options] == [Theme.LIGHT, Theme.DARK]

    layout = catalog["layout"]
    assert layout.kind is FieldKind.DROPDOWN
    assert layout.value_type is str
    assert [option.label for option in layout.options] == ["grid", "list"]

    quality = catalog["quality"]
    assert quality.kind is FieldKind.DROPDOWN
    assert [(option.label, option.value) for option in quality.options] == [("Low", 1), ("High", 2)]


def test_change_hooks_are_attached_to_their_property():
    catalog = ConfigProperties.for_module(SampleConfig)

    assert catalog["volume"].hooks == (SampleConfig.volume_changed,)
    assert catalog["gain"].hooks == ()


def test_catalog_is_generated_once_per_module_type():
    first = SampleConfig()
    second = SampleConfig()

    assert first.properties is second.properties
    assert first.properties is ConfigProperties.for_module(SampleConfig)


def test_unknown_property_raises_key_error_listing_available():
    catalog = ConfigProperties.for_module(SampleConfig)

    with pytest.raises(KeyError, match="Available: username"):
        catalog["missing"]


def test_colliding_storage_keys_are_fatal():
    class Colliding(ConfigModule):
        first: Annotated[int, Config()] = Field(0, serialization_alias="shared")
        second: Annotated[int, Config()] = Field(0, serialization_alias="shared")

    with pytest.raises(ConfigurationError, match="shared"):
        Colliding()


def test_numeric_config_on_text_field_is_fatal():
    class Misplaced(ConfigModule):
        label: Annotated[str, Config(), NumericConfig(minimum=0)] = ""

    with pytest.raises(ConfigurationError, match="non-numeric"):
        Misplaced()


def test_inverted_bounds_are_fatal():
    class Inverted(ConfigModule):
        level: Annotated[int, Config(), NumericConfig(minimum=10, maximum=1)] = 5

    with pytest.raises(ConfigurationError, match="exceeds maximum"):
        Inverted()


def test_dropdown_without_options_is_fatal():
    class Empty(ConfigModule):
        choice: Annotated[str, Config(), DropdownConfig()] = ""

    with pytest.raises(ConfigurationError, match="exactly one"):
        Empty()


def test_hook_for_unknown_property_is_fatal():
    class Orphan(ConfigModule):
        level: Annotated[int, Config()] = 0

        @on_changed("levle")
        def level_changed(self, value):
            pass

    with pytest.raises(ConfigurationError, match="levle"):
        Orphan()


def test_declaration_errors_pass_through_model_validation():
    class Inverted(ConfigModule):
        level: Annotated[int, Config(), NumericConfig(minimum=10, maximum=1)] = 5

    assert not issubclass(ConfigurationError, ValueError)
    with pytest.raises(ConfigurationError, match="exceeds maximum"):
        Inverted.model_validate({"level": 5})


def test_exclusive_pydantic_bounds_are_flagged():
    class Rates(ConfigModule):
        rate: Annotated[int, Config("Rate")] = Field(5, gt=0)
        ratio: Annotated[float, Config("Ratio")] = Field(0.5, ge=0.0, lt=1.0)
        level: Annotated[int, Config("Level"), NumericConfig(minimum=1)] = Field(5, gt=0)

    catalog = ConfigProperties.for_module(Rates)

    rate = catalog["rate"]
    assert (rate.minimum, rate.minimum_exclusive, rate.maximum) == (0, True, None)
    ratio = catalog["ratio"]
    assert (ratio.minimum_exclusive, ratio.maximum, ratio.maximum_exclusive) == (False, 1.0, True)
    level = catalog["level"]
    assert (level.minimum, level.minimum_exclusive) == (1, False)


def test_persisted_keys_map_back_to_field_names():
    class Aliased(ConfigModule):
        volume: Annotated[int, Config("Volume")] = Field(50, serialization_alias="Volume")

    catalog = ConfigProperties.for_module(Aliased)

    assert catalog["volume"].key == "Volume"
    assert catalog.by_name_payload({"Volume": 80, "stray": 1}) == {"volume": 80, "stray": 1}
