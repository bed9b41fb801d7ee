import os
from pathlib import Path
from typing import Any, TypeVar, cast

from dotenv import dotenv_values

from app.components.configuration.configuration_interface import (
    ConfigurationInterface,
)

T = TypeVar("T")

_TRUE_VALUES = {"true", "1", "yes", "on"}


class Configuration(ConfigurationInterface):
    """
    Configuration read from ``<config_path>/<env>.env``.

    Process environment variables take precedence over the file.
    """

    def __init__(self, env: str, config_path: str) -> None:
        self.env = env
        self.config_file = Path(config_path) / f"{env}.env"
        self.values: dict[str, str | None] = {}

        if self.config_file.is_file():
            self.values.update(dotenv_values(self.config_file))

        self.values.update(os.environ)

    def get_configuration(
        self, key: str, value_type: type[T], default: Any = None
    ) -> T:
        raw = self.values.get(key)

        if raw is None or raw == "":
            if default is None:
                raise ValueError(f"Configuration key {key} is not set")
            return cast(T, default)

        if value_type is bool:
            return cast(T, raw.strip().lower() in _TRUE_VALUES)

        try:
            return value_type(raw)  # type: ignore[call-arg]
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Configuration key {key} cannot be read as {value_type.__name__}: {raw!r}"
            ) from e
