"""Security system state for a Ring location."""

from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import CALLBACK_TYPE, HomeAssistant, callback
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .api import RingApiError, RingConnectionError, RingDeviceData, RingLocation
from .const import (
    DOMAIN,
    LOCATION_MODE_AWAY,
    LOCATION_MODE_DISABLED,
    LOCATION_MODE_HOME,
)
from .models import LocationConfig, SecuritySystemMode, SecuritySystemState

_LOGGER = logging.getLogger(__name__)

LOCATION_MODES = {
    LOCATION_MODE_AWAY: SecuritySystemMode.AWAY_ARMED,
    LOCATION_MODE_HOME: SecuritySystemMode.HOME_ARMED,
}


def security_state_from_mode(
    location_mode: str | None, config: LocationConfig
) -> SecuritySystemState:
    """Map a vendor location mode to a security system snapshot."""
    supported_modes = [
        SecuritySystemMode.DISARMED,
        SecuritySystemMode.AWAY_ARMED,
        SecuritySystemMode.HOME_ARMED,
    ]
    if config.night_mode_enabled:
        supported_modes.append(SecuritySystemMode.NIGHT_ARMED)

    return SecuritySystemState(
        mode=LOCATION_MODES.get(location_mode or "", SecuritySystemMode.DISARMED),
        # No feed reports an alarm trigger yet
        triggered=False,
        supported_modes=tuple(supported_modes),
    )


class RingSecurityCoordinator(DataUpdateCoordinator[SecuritySystemState | None]):
    """Reconcile the mode feed and the panel feed of a location.

    Both feeds write the same snapshot and the last write wins. Locations
    with a base station do not report arming done at the panel on the mode
    feed, so panel updates trigger a fresh mode query.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        entry: ConfigEntry,
        location: RingLocation,
        config: LocationConfig,
    ) -> None:
        """Initialize the coordinator."""
        super().__init__(
            hass,
            _LOGGER,
            config_entry=entry,
            name=f"{DOMAIN} {location.id} security",
            update_interval=None,
        )
        self.location = location
        self.config = config
        self.has_panel = False
        self._location_mode: str | None = None
        self._unsubscribers: list[CALLBACK_TYPE] = []

    async def async_setup(self) -> None:
        """Subscribe to the feeds and initialize the snapshot."""
        self._unsubscribers.append(
            self.location.subscribe_location_mode(self.async_apply_mode)
        )

        try:
            panel = await self.location.async_get_security_panel()
        except (RingApiError, RingConnectionError) as err:
            # Not every location has a security panel
            _LOGGER.debug(
                "No security panel for location %s: %s", self.location.id, err
            )
        else:
            self.has_panel = True
            self._unsubscribers.append(panel.subscribe_data(self._async_panel_updated))

        if self.location.has_alarm_base_station:
            await self.async_refresh()
            if self.data is None:
                self.async_apply_mode(LOCATION_MODE_DISABLED)

    @callback
    def async_apply_mode(self, location_mode: str) -> SecuritySystemState:
        """Overwrite the snapshot from a location mode."""
        _LOGGER.debug("Location %s mode is %s", self.location.id, location_mode)
        self._location_mode = location_mode
        state = security_state_from_mode(location_mode, self.config)
        self.async_set_updated_data(state)
        return state

    @callback
    def async_update_config(self, config: LocationConfig) -> None:
        """Swap the config snapshot and recompute the supported modes."""
        self.config = config
        if self.data is not None:
            self.async_apply_mode(self._location_mode or LOCATION_MODE_DISABLED)

    @callback
    def _async_panel_updated(self, _data: RingDeviceData) -> None:
        self.config_entry.async_create_background_task(
            self.hass, self.async_refresh(), f"{self.name} panel refresh"
        )

    async def _async_update_data(self) -> SecuritySystemState | None:
        """Query the current location mode.

        Raises:
            UpdateFailed: If the mode query fails

        """
        try:
            location_mode = await self.location.async_get_location_mode()
        except RingConnectionError as err:
            raise UpdateFailed(f"Error communicating with Ring: {err}") from err
        except RingApiError as err:
            raise UpdateFailed(f"Invalid response from Ring: {err}") from err

        self._location_mode = location_mode
        return security_state_from_mode(location_mode, self.config)

    async def async_shutdown(self) -> None:
        """Release the feed subscriptions."""
        await super().async_shutdown()
        while self._unsubscribers:
            self._unsubscribers.pop()()
