"""Constants for the Ring Location integration."""

from homeassistant.const import Platform

DOMAIN = "ring_location"
MANUFACTURER = "Ring"

# Platforms
PLATFORMS = [
    Platform.ALARM_CONTROL_PANEL,
    Platform.BINARY_SENSOR,
    Platform.LOCK,
    Platform.SENSOR,
]

# Config entry keys
CONF_LOCATION_ID = "location_id"
CONF_NIGHT_MODE_BYPASS = "night_mode_bypass_alarm_state"

# hass.data key holding the registered account client
DATA_ACCOUNT = "account"

# Dispatcher signal sent after each discovery pass, formatted with the entry id
SIGNAL_DEVICES_DISCOVERED = f"{DOMAIN}_devices_discovered_{{}}"

# Identifier suffixes, one per local role
SENSOR_SUFFIX = "-sensor"
LOCK_SUFFIX = "-lock"

# Vendor device type tags
DEVICE_TYPE_CONTACT_SENSOR = "sensor.contact"
DEVICE_TYPE_RETROFIT_ZONE = "sensor.zone"
DEVICE_TYPE_TILT_SENSOR = "sensor.tilt"
DEVICE_TYPE_MOTION_SENSOR = "sensor.motion"
DEVICE_TYPE_FLOOD_FREEZE_SENSOR = "sensor.flood-freeze"
DEVICE_TYPE_WATER_SENSOR = "sensor.water"

# Hyphenated spellings of the same sensor families
DEVICE_TYPE_ALIASES = {
    "contact-sensor": DEVICE_TYPE_CONTACT_SENSOR,
    "retrofit-zone": DEVICE_TYPE_RETROFIT_ZONE,
    "tilt-sensor": DEVICE_TYPE_TILT_SENSOR,
    "motion-sensor": DEVICE_TYPE_MOTION_SENSOR,
    "flood-freeze-sensor": DEVICE_TYPE_FLOOD_FREEZE_SENSOR,
    "water-sensor": DEVICE_TYPE_WATER_SENSOR,
}

ENTRY_SENSOR_TYPES = frozenset(
    {DEVICE_TYPE_CONTACT_SENSOR, DEVICE_TYPE_RETROFIT_ZONE, DEVICE_TYPE_TILT_SENSOR}
)
MOTION_SENSOR_TYPES = frozenset({DEVICE_TYPE_MOTION_SENSOR})
FLOOD_SENSOR_TYPES = frozenset(
    {DEVICE_TYPE_FLOOD_FREEZE_SENSOR, DEVICE_TYPE_WATER_SENSOR}
)

# Faulted sensors of these types are bypassed when arming night mode
BYPASS_SENSOR_TYPES = frozenset(
    {DEVICE_TYPE_CONTACT_SENSOR, DEVICE_TYPE_RETROFIT_ZONE}
)

LOCK_TYPE_PATTERN = r"^lock($|\.)"

STATUS_DISABLED = "disabled"
BATTERY_STATUS_NONE = "none"
TAMPER_STATUS_TAMPER = "tamper"

# Location modes reported by the mode feed
LOCATION_MODE_AWAY = "away"
LOCATION_MODE_HOME = "home"
LOCATION_MODE_DISABLED = "disabled"

# Lock commands
COMMAND_LOCK = "lock.lock"
COMMAND_UNLOCK = "lock.unlock"
