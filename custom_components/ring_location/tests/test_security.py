"""Test the security system reconciliation."""

import asyncio

import pytest

from custom_components.ring_location.api import RingConnectionError, RingDeviceData
from custom_components.ring_location.models import (
    LocationConfig,
    NightModeBypass,
    SecuritySystemMode,
)
from custom_components.ring_location.security import (
    RingSecurityCoordinator,
    security_state_from_mode,
)
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from .common import FakeLocation, FakePanel

PANEL_DATA = RingDeviceData(device_type="security-panel")
BASE_MODES = {
    SecuritySystemMode.DISARMED,
    SecuritySystemMode.AWAY_ARMED,
    SecuritySystemMode.HOME_ARMED,
}


async def _setup(
    hass: HomeAssistant,
    entry: MockConfigEntry,
    location: FakeLocation,
    config: LocationConfig | None = None,
) -> RingSecurityCoordinator:
    coordinator = RingSecurityCoordinator(
        hass, entry, location, config or LocationConfig()
    )
    await coordinator.async_setup()
    return coordinator


@pytest.mark.parametrize(
    ("location_mode", "expected"),
    [
        ("away", SecuritySystemMode.AWAY_ARMED),
        ("home", SecuritySystemMode.HOME_ARMED),
        ("disarmed", SecuritySystemMode.DISARMED),
        ("disabled", SecuritySystemMode.DISARMED),
        ("something-new", SecuritySystemMode.DISARMED),
        (None, SecuritySystemMode.DISARMED),
    ],
)
def test_state_from_mode(location_mode, expected) -> None:
    """Test the mapping of location modes."""
    state = security_state_from_mode(location_mode, LocationConfig())

    assert state.mode is expected
    assert state.triggered is False
    assert set(state.supported_modes) == BASE_MODES


@pytest.mark.parametrize("bypass", [NightModeBypass.AWAY, NightModeBypass.HOME])
def test_night_mode_supported_when_enabled(bypass: NightModeBypass) -> None:
    """Test night mode is offered unless disabled."""
    state = security_state_from_mode("home", LocationConfig(night_mode_bypass=bypass))

    assert state.supported_modes == (
        SecuritySystemMode.DISARMED,
        SecuritySystemMode.AWAY_ARMED,
        SecuritySystemMode.HOME_ARMED,
        SecuritySystemMode.NIGHT_ARMED,
    )


async def test_mode_feed_without_panel(
    hass: HomeAssistant, config_entry: MockConfigEntry
) -> None:
    """Test a location without a panel follows the mode feed."""
    location = FakeLocation()
    coordinator = await _setup(hass, config_entry, location)

    assert coordinator.has_panel is False
    assert coordinator.data is None
    assert len(location.mode_feed.callbacks) == 1

    location.mode_feed.emit("away")

    assert coordinator.data.mode is SecuritySystemMode.AWAY_ARMED
    assert coordinator.data.triggered is False
    assert BASE_MODES <= set(coordinator.data.supported_modes)
    assert SecuritySystemMode.NIGHT_ARMED not in coordinator.data.supported_modes


async def test_night_mode_disabled_for_any_feed_input(
    hass: HomeAssistant, config_entry: MockConfigEntry
) -> None:
    """Test a disabled night mode is never offered."""
    location = FakeLocation(panel=FakePanel())
    coordinator = await _setup(hass, config_entry, location)

    for location_mode in ("away", "home", "disarmed", "unexpected"):
        location.mode_feed.emit(location_mode)
        assert SecuritySystemMode.NIGHT_ARMED not in coordinator.data.supported_modes

        location.mode = location_mode
        location.panel.feed.emit(PANEL_DATA)
        await hass.async_block_till_done(wait_background_tasks=True)
        assert SecuritySystemMode.NIGHT_ARMED not in coordinator.data.supported_modes


async def test_panel_feed_alone(
    hass: HomeAssistant, config_entry: MockConfigEntry
) -> None:
    """Test a panel update re-queries the mode without any mode feed event."""
    location = FakeLocation(panel=FakePanel(), mode="home")
    coordinator = await _setup(hass, config_entry, location)

    assert coordinator.has_panel is True
    assert coordinator.data is None

    location.panel.feed.emit(PANEL_DATA)
    await hass.async_block_till_done(wait_background_tasks=True)

    assert location.mode_queries == 1
    assert coordinator.data.mode is SecuritySystemMode.HOME_ARMED


async def test_base_station_fetches_mode(
    hass: HomeAssistant, config_entry: MockConfigEntry
) -> None:
    """Test a location with a base station starts from the current mode."""
    location = FakeLocation(has_alarm_base_station=True, mode="away")
    coordinator = await _setup(hass, config_entry, location)

    assert location.mode_queries == 1
    assert coordinator.data.mode is SecuritySystemMode.AWAY_ARMED


async def test_base_station_falls_back_to_disarmed(
    hass: HomeAssistant, config_entry: MockConfigEntry
) -> None:
    """Test a failed startup query still leaves a known state."""
    location = FakeLocation(has_alarm_base_station=True)
    location.mode_error = RingConnectionError("timeout")
    coordinator = await _setup(hass, config_entry, location)

    assert coordinator.data.mode is SecuritySystemMode.DISARMED
    assert coordinator.last_update_success is True


async def test_no_base_station_stays_unknown(
    hass: HomeAssistant, config_entry: MockConfigEntry
) -> None:
    """Test the state is unknown until a feed reports."""
    location = FakeLocation()
    coordinator = await _setup(hass, config_entry, location)

    assert location.mode_queries == 0
    assert coordinator.data is None


async def test_stale_panel_query_overwrites_newer_mode(
    hass: HomeAssistant, config_entry: MockConfigEntry
) -> None:
    """Test the last write wins, even when it carries an older mode."""
    location = FakeLocation(panel=FakePanel(), mode="disarmed")
    coordinator = await _setup(hass, config_entry, location)

    location.mode_gate = asyncio.Event()
    location.panel.feed.emit(PANEL_DATA)
    await asyncio.sleep(0)
    location.mode_feed.emit("away")
    assert coordinator.data.mode is SecuritySystemMode.AWAY_ARMED

    location.mode_gate.set()
    await hass.async_block_till_done(wait_background_tasks=True)

    assert coordinator.data.mode is SecuritySystemMode.DISARMED


async def test_update_config(
    hass: HomeAssistant, config_entry: MockConfigEntry
) -> None:
    """Test enabling night mode recomputes the current state."""
    location = FakeLocation()
    coordinator = await _setup(hass, config_entry, location)
    location.mode_feed.emit("home")

    coordinator.async_update_config(
        LocationConfig(night_mode_bypass=NightModeBypass.HOME)
    )

    assert coordinator.data.mode is SecuritySystemMode.HOME_ARMED
    assert SecuritySystemMode.NIGHT_ARMED in coordinator.data.supported_modes


async def test_shutdown_releases_feeds(
    hass: HomeAssistant, config_entry: MockConfigEntry
) -> None:
    """Test shutting down unsubscribes both feeds."""
    location = FakeLocation(panel=FakePanel())
    coordinator = await _setup(hass, config_entry, location)

    await coordinator.async_shutdown()

    assert location.mode_feed.callbacks == []
    assert location.panel.feed.callbacks == []
