"""ConversionOptions and resolution of the keys the target dialect does not support."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, computed_field, field_validator

from openapi_jsonschema.config import Config
from openapi_jsonschema.errors import ConfigError

__all__ = [
    "ConversionOptions",
    "DEFAULT_NOT_SUPPORTED",
    "DEFAULT_STRUCTURAL_KEYS",
    "JSON_SCHEMA_DRAFT_04",
    "resolve_not_supported",
]

logger = logging.getLogger(__name__)

JSON_SCHEMA_DRAFT_04 = "http://json-schema.org/draft-04/schema#"

DEFAULT_NOT_SUPPORTED: tuple[str, ...] = (
    "nullable",
    "discriminator",
    "readOnly",
    "writeOnly",
    "xml",
    "externalDocs",
    "example",
    "deprecated",
)

DEFAULT_STRUCTURAL_KEYS: tuple[str, ...] = (
    "allOf",
    "anyOf",
    "oneOf",
    "not",
    "items",
    "additionalProperties",
)


def resolve_not_supported(not_supported: Iterable[str], keep: Iterable[str]) -> list[str]:
    """Return ``not_supported`` minus ``keep``, in the original order."""
    candidates = list(not_supported)
    retained = set(keep)
    unknown = sorted(retained.difference(candidates))
    if unknown:
        logger.warning("Keys to keep are not in the unsupported set and have no effect: %s", unknown)
    return [key for key in candidates if key not in retained]


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


class ConversionOptions(BaseModel):
    """Settings for one conversion call.

    The value is frozen. ``not_supported`` and ``removal_flags`` are derived
    from the other fields, so any instance can be handed to the converter
    directly. ``prepare()`` additionally folds the ``readOnly``/``writeOnly``
    removal flags into ``remove_props`` itself.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    date_to_date_time: bool = False
    clone_schema: bool = True
    support_pattern_properties: bool = True
    keep_not_supported: tuple[str, ...] = ()
    remove_read_only: bool = False
    remove_write_only: bool = False
    structural_keys: tuple[str, ...] = DEFAULT_STRUCTURAL_KEYS
    remove_props: tuple[str, ...] = ()

    # Rule exceptions applied to property maps
    enum_to_integer: bool = False
    nullable_everywhere: bool = False
    string_accepts_integer: bool = False

    @field_validator("structural_keys", "keep_not_supported", "remove_props", mode="after")
    @classmethod
    def _dedupe(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _unique(value)

    @field_validator("keep_not_supported", mode="after")
    @classmethod
    def _warn_unknown_keep(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        resolve_not_supported(DEFAULT_NOT_SUPPORTED, value)
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def not_supported(self) -> tuple[str, ...]:
        """Keys stripped from every node: the defaults minus ``keep_not_supported``."""
        return tuple(key for key in DEFAULT_NOT_SUPPORTED if key not in self.keep_not_supported)

    @property
    def removal_flags(self) -> tuple[str, ...]:
        """Flags that drop a whole property, including ``readOnly``/``writeOnly`` when enabled."""
        flags = list(self.remove_props)
        if self.remove_read_only:
            flags.append("readOnly")
        if self.remove_write_only:
            flags.append("writeOnly")
        return _unique(flags)

    def prepare(self) -> ConversionOptions:
        """Return a copy with the removal flags folded into ``remove_props``."""
        return self.model_copy(update={"remove_props": self.removal_flags})

    @classmethod
    def permissive(cls, **overrides: Any) -> ConversionOptions:
        """Options with every rule exception enabled, as used for schema-set export."""
        values: dict[str, Any] = {
            "enum_to_integer": True,
            "nullable_everywhere": True,
            "string_accepts_integer": True,
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def from_config(cls, config: Config, key: str = "conversion") -> ConversionOptions:
        """Build options from the mapping stored under ``key`` in a Config."""
        section = config.section(key)
        if "not_supported" in section:
            raise ConfigError(message=f"'{key}.not_supported' is computed and cannot be configured")
        try:
            return cls(**section)
        except ValidationError as e:
            raise ConfigError(message=f"Invalid conversion options in '{key}': {e}", cause=e) from e
