"""Collapse Ring device records into local capability descriptors."""

from __future__ import annotations

import re

from .api import RingCamera, RingDevice
from .const import (
    BATTERY_STATUS_NONE,
    DEVICE_TYPE_ALIASES,
    ENTRY_SENSOR_TYPES,
    FLOOD_SENSOR_TYPES,
    LOCK_SUFFIX,
    LOCK_TYPE_PATTERN,
    MANUFACTURER,
    MOTION_SENSOR_TYPES,
    SENSOR_SUFFIX,
    STATUS_DISABLED,
)
from .models import (
    Capability,
    ClassificationSkip,
    DeviceDescriptor,
    DeviceDescriptorInfo,
    DeviceType,
)

SKIP_DISABLED = ClassificationSkip("disabled by account owner")
SKIP_UNSUPPORTED = ClassificationSkip("unsupported device type")

_LOCK_TYPE = re.compile(LOCK_TYPE_PATTERN)


def normalize_device_type(device_type: str) -> str:
    """Return the canonical tag for a vendor device type."""
    return DEVICE_TYPE_ALIASES.get(device_type, device_type)


def classify_camera(
    camera: RingCamera, provider_id: str
) -> DeviceDescriptor | ClassificationSkip:
    """Classify a camera or doorbell."""
    if camera.data.get("status") == STATUS_DISABLED:
        return SKIP_DISABLED

    capabilities = [
        Capability.CAMERA,
        Capability.MOTION_SENSOR,
        Capability.RTC_SIGNALING_CHANNEL,
    ]
    # Ring Edge cameras process video on the hub and expose no streams
    if not camera.is_ring_edge_enabled:
        capabilities.extend(
            (Capability.VIDEO_CAMERA, Capability.INTERCOM, Capability.VIDEO_CLIPS)
        )
    if camera.operating_on_battery:
        capabilities.append(Capability.BATTERY)
    if camera.is_doorbot:
        capabilities.append(Capability.BINARY_SENSOR)
    if camera.has_light:
        capabilities.append(Capability.DEVICE_PROVIDER)
    if camera.has_siren:
        capabilities.append(Capability.DEVICE_PROVIDER)

    return DeviceDescriptor(
        native_id=str(camera.id),
        provider_id=provider_id,
        name=camera.name,
        type=DeviceType.DOORBELL if camera.is_doorbot else DeviceType.CAMERA,
        capabilities=tuple(capabilities),
        info=DeviceDescriptorInfo(
            model=f"{camera.model} ({camera.data.get('kind')})",
            manufacturer=MANUFACTURER,
            firmware=camera.data.get("firmware_version"),
            serial_number=camera.data.get("device_id"),
        ),
    )


def classify_device(
    device: RingDevice, provider_id: str
) -> DeviceDescriptor | ClassificationSkip:
    """Classify a generic location device."""
    data = device.data
    if data.status == STATUS_DISABLED:
        return SKIP_DISABLED

    device_type = normalize_device_type(data.device_type)
    device_id = str(device.id)

    if device_type in ENTRY_SENSOR_TYPES:
        native_id = device_id + SENSOR_SUFFIX
        type_ = DeviceType.SENSOR
        capabilities = [Capability.TAMPER_SENSOR, Capability.ENTRY_SENSOR]
    elif device_type in MOTION_SENSOR_TYPES:
        native_id = device_id + SENSOR_SUFFIX
        type_ = DeviceType.SENSOR
        capabilities = [Capability.TAMPER_SENSOR, Capability.MOTION_SENSOR]
    elif device_type in FLOOD_SENSOR_TYPES:
        native_id = device_id + SENSOR_SUFFIX
        type_ = DeviceType.SENSOR
        capabilities = [Capability.TAMPER_SENSOR, Capability.FLOOD_SENSOR]
    elif _LOCK_TYPE.match(device_type):
        native_id = device_id + LOCK_SUFFIX
        type_ = DeviceType.LOCK
        capabilities = [Capability.LOCK]
    else:
        return SKIP_UNSUPPORTED

    if data.battery_status != BATTERY_STATUS_NONE:
        capabilities.append(Capability.BATTERY)

    return DeviceDescriptor(
        native_id=native_id,
        provider_id=provider_id,
        name=device.name,
        type=type_,
        capabilities=tuple(capabilities),
        info=DeviceDescriptorInfo(
            model=data.device_type,
            manufacturer=MANUFACTURER,
            serial_number=data.serial_number or "Unknown",
        ),
    )
