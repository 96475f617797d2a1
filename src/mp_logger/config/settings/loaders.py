"""Config settings – EnvSettingsLoader, DotenvSettingsLoader.

A loader reports the fields its source defines (:meth:`SettingsLoader.collect`);
:class:`~mp_logger.config.settings.factory.SettingsFactory` merges several
sources before the settings object is built, so a required field may come
from any of them.
"""
from __future__ import annotations

import abc
import dataclasses
import enum
import os
import types
import typing
from typing import Any, TypeVar, Union

from mp_logger.config.settings.base import Settings
from mp_logger.kernel.errors.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = ("1", "true", "yes", "on")


def _required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


class SettingsLoader(abc.ABC):
    """Port: read settings values from an external source."""

    @abc.abstractmethod
    def collect(self, settings_class: type[Settings]) -> dict[str, Any]:
        """Field values this source defines, already coerced to the field types."""

    def load(self, settings_class: type[T]) -> T:
        """Build *settings_class* from this source alone.

        Raises
        ------
        MissingRequiredSettingError
            When a field without a default is not defined by the source.
        """
        values = self.collect(settings_class)
        prefix = settings_class._prefix.upper()
        for field in dataclasses.fields(settings_class):
            if field.name not in values and _required(field):
                raise MissingRequiredSettingError(f"{prefix}_{field.name}".upper().lstrip("_"))
        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc


def _strip_optional(type_hint: Any) -> Any:
    origin = typing.get_origin(type_hint)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(type_hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return type_hint


class EnvSettingsLoader(SettingsLoader):
    """Read settings from OS environment variables.

    Nested dataclass fields are read from ``{PREFIX}_{FIELD}_{SUBFIELD}``;
    when none of those variables is set the field keeps its default.
    Mappings are written ``key=value,key2=value2``, lists ``a,b,c``.
    Enums accept their value or name, or go through a ``parse`` classmethod
    when the enum has one (see :meth:`~mp_logger.kernel.levels.Level.parse`).
    """

    def collect(self, settings_class: type[Settings]) -> dict[str, Any]:
        return self._collect(settings_class, settings_class._prefix.upper())

    def _collect(self, cls: type[Any], prefix: str) -> dict[str, Any]:
        hints = typing.get_type_hints(cls)
        values: dict[str, Any] = {}

        for field in dataclasses.fields(cls):
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            type_hint = _strip_optional(hints.get(field.name, str))

            if dataclasses.is_dataclass(type_hint):
                nested = self._collect(type_hint, env_key)
                if nested:
                    try:
                        values[field.name] = type_hint(**nested)
                    except TypeError as exc:
                        raise InvalidSettingValueError(env_key, nested, str(exc)) from exc
                continue

            raw = os.environ.get(env_key)
            if raw is None:
                continue
            try:
                values[field.name] = self._coerce(raw, type_hint)
            except (ValueError, KeyError) as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        return values

    def _coerce(self, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = typing.get_origin(type_hint)
        if type_hint is bool:
            return value.strip().lower() in _TRUTHY
        if isinstance(type_hint, type) and issubclass(type_hint, enum.Enum):
            parse = getattr(type_hint, "parse", None)
            if parse is not None:
                return parse(value)
            try:
                return type_hint(value.strip())
            except ValueError:
                return type_hint[value.strip().upper()]
        if type_hint is int:
            return int(value)
        if type_hint is float:
            return float(value)
        if origin is list:
            return [v.strip() for v in value.split(",") if v.strip()]
        if origin is dict or type_hint is dict:
            pairs = (item.split("=", 1) for item in value.split(",") if item.strip())
            return {k.strip(): v.strip() for k, v in pairs}
        return value


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the environment, then read it like :class:`EnvSettingsLoader`.

    Variables already set in the process win unless *override* is true.
    A missing file is not an error.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def collect(self, settings_class: type[Settings]) -> dict[str, Any]:
        from dotenv import load_dotenv

        load_dotenv(self._env_file, override=self._override)
        return super().collect(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
