"""Camera capability providers."""

from __future__ import annotations

import asyncio
import glob
import os

from regionwatch.core.models.detection import PermissionStatus


class VideoDeviceCapabilityProvider:
    """Derives camera permission from the video device nodes.

    A readable device means granted, devices that exist but cannot be opened
    mean denied, and no device at all is undetermined.
    """

    name = "camera"

    def __init__(self, device_glob: str = "/dev/video*") -> None:
        self._device_glob = device_glob

    async def request_permission(self) -> PermissionStatus:
        return await asyncio.to_thread(self._probe)

    def _probe(self) -> PermissionStatus:
        devices = sorted(glob.glob(self._device_glob))
        if not devices:
            return PermissionStatus.UNDETERMINED
        if any(os.access(device, os.R_OK) for device in devices):
            return PermissionStatus.GRANTED
        return PermissionStatus.DENIED


class StaticCapabilityProvider:
    """Reports a fixed permission status."""

    name = "camera"

    def __init__(self, status: PermissionStatus | str = PermissionStatus.UNDETERMINED) -> None:
        self._status = PermissionStatus(status)

    async def request_permission(self) -> PermissionStatus:
        return self._status
