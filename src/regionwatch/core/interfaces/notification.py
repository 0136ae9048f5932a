"""Capability and notification surface interface definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from regionwatch.core.models.detection import PermissionStatus
    from regionwatch.core.models.notification import NotificationAction


@runtime_checkable
class ICapabilityProvider(Protocol):
    """Contract for a secondary capability such as the camera."""

    @property
    def name(self) -> str:
        """Capability name."""
        ...

    async def request_permission(self) -> PermissionStatus:
        """Ask for the capability permission."""
        ...


@runtime_checkable
class INotificationSurface(Protocol):
    """Contract for a single-button modal notification surface."""

    async def show(
        self,
        title: str,
        message: str,
        actions: list[NotificationAction],
    ) -> None:
        """
        Present a notification.

        The surface must invoke ``on_acknowledge`` of the chosen action once
        the user has dismissed the notification.
        """
        ...
