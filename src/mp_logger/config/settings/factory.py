"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Sequence, TypeVar

from mp_logger.config.settings.base import Settings
from mp_logger.config.settings.loaders import SettingsLoader
from mp_logger.kernel.errors.base import error_fields
from mp_logger.kernel.errors.config import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

logger = logging.getLogger(__name__)


class SettingsFactory:
    """Build a settings object from several sources in one step.

    Sources are merged field by field before construction: later loaders
    override earlier ones, and *overrides* win over every loader.  A loader
    that fails with anything other than a :class:`ConfigError` is skipped
    (and reported on the diagnostic logger); a bad value in a source is a
    configuration error and propagates.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            When a field without a default is defined by no source.
        ConfigError
            When a source holds an invalid value or the settings class
            rejects the merged values.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                merged.update(loader.collect(settings_cls))
            except ConfigError:
                raise
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "settings.loader_failed",
                    extra={"loader": type(loader).__name__, "settings": settings_cls.__name__, **error_fields(exc)},
                )
        merged.update(overrides or {})

        prefix = settings_cls._prefix.upper()
        for field in dataclasses.fields(settings_cls):
            if field.name in merged or field.init is False:
                continue
            if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                raise MissingRequiredSettingError(f"{prefix}_{field.name}".upper().lstrip("_"))

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
