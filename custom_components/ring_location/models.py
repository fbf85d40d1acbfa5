"""Data models for Ring Location integration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import voluptuous as vol

from .const import CONF_NIGHT_MODE_BYPASS


class DeviceType(StrEnum):
    """Local device type tags."""

    CAMERA = "Camera"
    DOORBELL = "Doorbell"
    SENSOR = "Sensor"
    LOCK = "Lock"


class Capability(StrEnum):
    """Behavioral roles a local device can fulfill."""

    BATTERY = "Battery"
    BINARY_SENSOR = "BinarySensor"
    CAMERA = "Camera"
    DEVICE_PROVIDER = "DeviceProvider"
    ENTRY_SENSOR = "EntrySensor"
    FLOOD_SENSOR = "FloodSensor"
    INTERCOM = "Intercom"
    LOCK = "Lock"
    MOTION_SENSOR = "MotionSensor"
    RTC_SIGNALING_CHANNEL = "RTCSignalingChannel"
    TAMPER_SENSOR = "TamperSensor"
    VIDEO_CAMERA = "VideoCamera"
    VIDEO_CLIPS = "VideoClips"


class SecuritySystemMode(StrEnum):
    """Modes of the location security system."""

    DISARMED = "Disarmed"
    HOME_ARMED = "HomeArmed"
    AWAY_ARMED = "AwayArmed"
    NIGHT_ARMED = "NightArmed"


class NightModeBypass(StrEnum):
    """How night mode is synthesized from the vendor's modes."""

    DISABLED = "Disabled"
    AWAY = "Away"
    HOME = "Home"


@dataclass(frozen=True)
class DeviceDescriptorInfo:
    """Vendor metadata attached to a descriptor."""

    model: str
    manufacturer: str
    firmware: str | None = None
    serial_number: str | None = None


@dataclass(frozen=True)
class DeviceDescriptor:
    """Declarative record produced by a discovery pass."""

    native_id: str
    provider_id: str
    name: str
    type: DeviceType
    capabilities: tuple[Capability, ...]
    info: DeviceDescriptorInfo


@dataclass(frozen=True)
class ClassificationSkip:
    """A vendor record that yields no local device."""

    reason: str


@dataclass(frozen=True)
class SecuritySystemState:
    """Snapshot of the location security system."""

    mode: SecuritySystemMode
    triggered: bool
    supported_modes: tuple[SecuritySystemMode, ...]


OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(
            CONF_NIGHT_MODE_BYPASS, default=NightModeBypass.DISABLED.value
        ): vol.In([bypass.value for bypass in NightModeBypass]),
    },
    extra=vol.ALLOW_EXTRA,
)


@dataclass(frozen=True)
class LocationConfig:
    """Immutable snapshot of the location options."""

    night_mode_bypass: NightModeBypass = NightModeBypass.DISABLED

    @property
    def night_mode_enabled(self) -> bool:
        """Return True if night mode can be requested."""
        return self.night_mode_bypass is not NightModeBypass.DISABLED

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> LocationConfig:
        """Build a config snapshot from config entry options.

        Raises:
            vol.Invalid: If the options do not match the schema

        """
        validated = OPTIONS_SCHEMA(dict(options))
        return cls(night_mode_bypass=NightModeBypass(validated[CONF_NIGHT_MODE_BYPASS]))
