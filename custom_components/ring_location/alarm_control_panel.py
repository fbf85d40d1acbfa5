"""Support for the Ring location security system."""

from __future__ import annotations

from homeassistant.components.alarm_control_panel import (
    AlarmControlPanelEntity,
    AlarmControlPanelEntityFeature,
    AlarmControlPanelState,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity import DeviceInfo
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .api import RingApiError, RingConnectionError
from .const import DOMAIN, MANUFACTURER
from .location import RingLocationController
from .models import SecuritySystemMode
from .security import RingSecurityCoordinator

ALARM_STATES = {
    SecuritySystemMode.DISARMED: AlarmControlPanelState.DISARMED,
    SecuritySystemMode.HOME_ARMED: AlarmControlPanelState.ARMED_HOME,
    SecuritySystemMode.AWAY_ARMED: AlarmControlPanelState.ARMED_AWAY,
    SecuritySystemMode.NIGHT_ARMED: AlarmControlPanelState.ARMED_NIGHT,
}

MODE_FEATURES = {
    SecuritySystemMode.HOME_ARMED: AlarmControlPanelEntityFeature.ARM_HOME,
    SecuritySystemMode.AWAY_ARMED: AlarmControlPanelEntityFeature.ARM_AWAY,
    SecuritySystemMode.NIGHT_ARMED: AlarmControlPanelEntityFeature.ARM_NIGHT,
}


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the Ring security system."""
    controller: RingLocationController = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([RingAlarmControlPanel(controller)])


class RingAlarmControlPanel(
    CoordinatorEntity[RingSecurityCoordinator], AlarmControlPanelEntity
):
    """The security system of a Ring location."""

    _attr_has_entity_name = True
    _attr_name = None
    _attr_code_arm_required = False

    def __init__(self, controller: RingLocationController) -> None:
        """Initialize the alarm control panel."""
        super().__init__(controller.security)
        self._controller = controller

        location = controller.location
        self._attr_unique_id = location.id
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, location.id)},
            name=location.name,
            manufacturer=MANUFACTURER,
            model="Location",
        )

    @property
    def alarm_state(self) -> AlarmControlPanelState | None:  # type: ignore[override]
        """Return the state of the security system."""
        state = self.coordinator.data
        if state is None:
            return None
        if state.triggered:
            return AlarmControlPanelState.TRIGGERED
        return ALARM_STATES[state.mode]

    @property
    def supported_features(self) -> AlarmControlPanelEntityFeature:  # type: ignore[override]
        """Return the arming modes the location supports."""
        features = AlarmControlPanelEntityFeature(0)
        state = self.coordinator.data
        if state is None:
            return features
        for mode in state.supported_modes:
            features |= MODE_FEATURES.get(mode, AlarmControlPanelEntityFeature(0))
        return features

    async def async_alarm_disarm(self, code: str | None = None) -> None:
        """Send disarm command."""
        await self._async_arm(SecuritySystemMode.DISARMED, "disarm")

    async def async_alarm_arm_home(self, code: str | None = None) -> None:
        """Send arm home command."""
        await self._async_arm(SecuritySystemMode.HOME_ARMED, "arm home")

    async def async_alarm_arm_away(self, code: str | None = None) -> None:
        """Send arm away command."""
        await self._async_arm(SecuritySystemMode.AWAY_ARMED, "arm away")

    async def async_alarm_arm_night(self, code: str | None = None) -> None:
        """Send arm night command."""
        await self._async_arm(SecuritySystemMode.NIGHT_ARMED, "arm night")

    async def _async_arm(self, mode: SecuritySystemMode, action: str) -> None:
        """Forward an arming request, with error handling."""
        try:
            if mode is SecuritySystemMode.DISARMED:
                await self._controller.async_disarm()
            else:
                await self._controller.async_arm(mode)
        except (RingApiError, RingConnectionError) as err:
            raise HomeAssistantError(
                f"Failed to {action} {self._controller.location.name}: {err}"
            ) from err
