"""Client configuration for outletmap."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from outletmap._constants import (
    BASE_URL,
    CHATBOT_ENDPOINT,
    DEFAULT_CENTER,
    DEFAULT_ZOOM,
    FLY_DURATION,
    FRAME_INTERVAL,
    MAX_ICON_SIZE,
    MIN_ICON_SIZE,
    OUTLETS_ENDPOINT,
)
from outletmap.exceptions import OutletMapConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _parse_center(value: str) -> tuple[float, float]:
    try:
        lat_text, lng_text = value.split(",")
        return float(lat_text), float(lng_text)
    except ValueError as exc:
        raise OutletMapConfigError(f"center must be 'lat,lng', got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class MapConfig:
    """Map and assistant configuration.

    Parameters
    ----------
    outlets_url : str
        Endpoint returning the JSON array of outlets.
    chatbot_url : str
        Endpoint of the conversational assistant.
    min_icon_size : int
        Resting marker icon size.
    max_icon_size : int
        Marker icon size while hovered.
    frame_interval : float
        Seconds between animation frames for the asyncio scheduler.
    center : tuple of float
        Initial viewport centre ``(lat, lng)``.
    zoom : int
        Initial viewport zoom level.
    fly_duration : float
        Duration in seconds of the smooth transition when focusing an outlet.
    force_colorful : bool
        Draw every marker with the colourful icon regardless of highlighting.
    request_timeout : float or None
        Total timeout for HTTP requests. ``None`` waits indefinitely.
    """

    outlets_url: str = f"{BASE_URL}{OUTLETS_ENDPOINT}"
    chatbot_url: str = f"{BASE_URL}{CHATBOT_ENDPOINT}"
    min_icon_size: int = MIN_ICON_SIZE
    max_icon_size: int = MAX_ICON_SIZE
    frame_interval: float = FRAME_INTERVAL
    center: tuple[float, float] = DEFAULT_CENTER
    zoom: int = DEFAULT_ZOOM
    fly_duration: float = FLY_DURATION
    force_colorful: bool = False
    request_timeout: float | None = None

    def __post_init__(self) -> None:
        if self.min_icon_size > self.max_icon_size:
            raise OutletMapConfigError(
                f"min_icon_size ({self.min_icon_size}) must not exceed max_icon_size ({self.max_icon_size})"
            )
        if self.frame_interval < 0:
            raise OutletMapConfigError("frame_interval must be non-negative")
        if self.fly_duration < 0:
            raise OutletMapConfigError("fly_duration must be non-negative")

    @classmethod
    def from_env(cls, **overrides: Any) -> MapConfig:
        """Create configuration from environment variables.

        Reads optional ``OUTLETMAP_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        MapConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_STR_MAP = {
            "OUTLETMAP_OUTLETS_URL": "outlets_url",
            "OUTLETMAP_CHATBOT_URL": "chatbot_url",
        }
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        _ENV_NUMERIC_MAP = {
            "OUTLETMAP_MIN_ICON_SIZE": ("min_icon_size", int),
            "OUTLETMAP_MAX_ICON_SIZE": ("max_icon_size", int),
            "OUTLETMAP_FRAME_INTERVAL": ("frame_interval", float),
            "OUTLETMAP_ZOOM": ("zoom", int),
            "OUTLETMAP_FLY_DURATION": ("fly_duration", float),
            "OUTLETMAP_REQUEST_TIMEOUT": ("request_timeout", float),
        }
        for env_key, (field_name, convert) in _ENV_NUMERIC_MAP.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = convert(val)
            except ValueError as exc:
                raise OutletMapConfigError(f"{env_key} is not a valid number: {val!r}") from exc

        center_env = env.get("OUTLETMAP_CENTER")
        if center_env is not None and "center" not in overrides:
            config_kwargs["center"] = _parse_center(center_env)

        if "force_colorful" not in overrides:
            config_kwargs["force_colorful"] = _env_bool(env.get("OUTLETMAP_FORCE_COLORFUL"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
