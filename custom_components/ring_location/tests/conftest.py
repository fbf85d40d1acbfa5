"""Global fixtures for Ring Location integration."""

from typing import Any

import pytest

from custom_components.ring_location.api import RingDeviceData
from custom_components.ring_location.const import CONF_LOCATION_ID, DOMAIN
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from .common import (
    FakeAccount,
    FakeCamera,
    FakeDevice,
    FakeLocation,
    FakePanel,
    contact_sensor,
    lock_device,
)

pytest_plugins = "pytest_homeassistant_custom_component"


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> None:  # noqa: D103
    return


@pytest.fixture
def location() -> FakeLocation:
    """Return a location with a base station, a camera, sensors and a lock."""
    return FakeLocation(
        cameras=[FakeCamera(id=100, name="Driveway", battery_level=80)],
        devices=[
            contact_sensor("s1"),
            contact_sensor("s2"),
            FakeDevice(
                id="m1",
                name="Hallway",
                data=RingDeviceData(device_type="sensor.motion", battery_status="ok"),
            ),
            lock_device("l1"),
            FakeDevice(
                id="hub",
                name="Base Station",
                data=RingDeviceData(device_type="hub.redsky"),
            ),
        ],
        panel=FakePanel(),
        has_alarm_base_station=True,
    )


@pytest.fixture
def account(location: FakeLocation) -> FakeAccount:
    """Return an account serving the location."""
    return FakeAccount(location)


@pytest.fixture
def config_entry(hass: HomeAssistant, location: FakeLocation) -> MockConfigEntry:
    """Return a config entry for the location, added to hass."""
    entry = MockConfigEntry(
        domain=DOMAIN,
        title=location.name,
        data={CONF_LOCATION_ID: location.id},
    )
    entry.add_to_hass(hass)
    return entry
