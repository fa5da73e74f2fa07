"""Typed view of the ``[basicdefs]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field

SECTION = "basicdefs"


class HelperSettings(BaseModel):
    """Pydantic model for ``[basicdefs]`` section validation.

    Example:
        >>> HelperSettings().naturals_count
        10
        >>> HelperSettings(naturals_count=3).naturals_count
        3
    """

    naturals_count: int = Field(default=10, ge=0)

    model_config = ConfigDict(extra="ignore", frozen=True)


def load_helper_settings(config: Config) -> HelperSettings:
    """Parse the ``[basicdefs]`` section, falling back to model defaults.

    Raises:
        pydantic.ValidationError: If a configured value has the wrong type or range.
    """
    raw: object = config.get(SECTION, default={})
    return HelperSettings.model_validate(cast("dict[str, object]", raw) if raw else {})


__all__ = ["HelperSettings", "SECTION", "load_helper_settings"]
