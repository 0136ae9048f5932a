"""Configuration models using Pydantic."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ERROR_MESSAGE = "Your country could not be detected. Please check your internet connection."

DEFAULT_ADVISORY = (
    "This application is under review. Access to certain features may be limited "
    "until the review is completed. You will be informed once approval is granted."
)


class IpGeoEndpoint(BaseModel):
    """One IP-geolocation provider endpoint."""

    name: str
    url: str
    fields: list[str] = Field(min_length=1)  # Tried in order, first non-empty wins


class ResolverConfig(BaseModel):
    """Country resolver configuration."""

    primary_ip: IpGeoEndpoint = Field(
        default_factory=lambda: IpGeoEndpoint(
            name="ipapi",
            url="https://ipapi.co/json/",
            fields=["country_name", "country"],
        )
    )
    secondary_ip: IpGeoEndpoint = Field(
        default_factory=lambda: IpGeoEndpoint(
            name="ipwhois",
            url="https://ipwho.is/",
            fields=["country", "country_code"],
        )
    )
    http_client: Literal["httpx", "aiohttp"] = "httpx"
    request_timeout: float = Field(default=10.0, gt=0)
    user_agent: str = "regionwatch/0.1"
    error_message: str = DEFAULT_ERROR_MESSAGE


class LocationConfig(BaseModel):
    """Device location configuration."""

    enabled: bool = True
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class LocaleConfig(BaseModel):
    """Device locale configuration."""

    region_override: str | None = None


class CapabilityConfig(BaseModel):
    """Secondary capability (camera) configuration."""

    provider: Literal["video_device", "static"] = "video_device"
    static_status: Literal["granted", "denied", "undetermined"] = "undetermined"
    device_glob: str = "/dev/video*"


class NotifierConfig(BaseModel):
    """Notification texts and display behaviour."""

    title: str = "Region Check"
    advisory: str = DEFAULT_ADVISORY
    button_label: str = "OK"
    capability_label: str = "Camera"
    separator: str = " • "
    surface_retry_delay: float = Field(default=1.0, gt=0)


class LogConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    structured: bool = False


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="REGIONWATCH_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    location: LocationConfig = Field(default_factory=LocationConfig)
    locale: LocaleConfig = Field(default_factory=LocaleConfig)
    capability: CapabilityConfig = Field(default_factory=CapabilityConfig)
    notifier: NotifierConfig = Field(default_factory=NotifierConfig)
    logs: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> Config:
        """
        Load a YAML file; values in the file take precedence over the environment.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the document is not a mapping or fails validation
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """Plain, YAML-safe representation."""
        return self.model_dump(mode="json")

    def to_yaml(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
