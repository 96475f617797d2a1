"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, TypeVar

T = TypeVar("T", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    ``_prefix`` names the environment namespace: a field ``batch_size`` on a
    class with ``_prefix = "LOKI"`` is read from ``LOKI_BATCH_SIZE``.
    Subclasses normalise and check their fields in :meth:`_validate`, which
    runs on construction and on :meth:`evolve`.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def from_env(cls: type[T], env_file: str | None = None, **overrides: Any) -> T:
        """Read ``{_prefix}_*`` variables (after *env_file*, if given) and apply *overrides*."""
        from mp_logger.config.settings.factory import SettingsFactory
        from mp_logger.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader

        loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
        return SettingsFactory.create(cls, [loader], overrides or None)

    def evolve(self: T, **changes: Any) -> T:
        """Copy with *changes* applied, validated like a new instance."""
        return dataclasses.replace(self, **changes)


__all__ = ["Settings"]
