"""
Configuration schema validation for Rift Core.

Purpose
-------
Provides a recursive schema type used by ConfigManager to validate the
shape of each top-level configuration block (``rift``, ``loot``, ``enemy``)
both when YAML defaults are loaded and when runtime overrides are written.

Design Notes
------------
- Missing fields are allowed (sparse configs, code defaults fill the gaps).
- ``int`` is accepted where ``float`` is expected.
- ``list`` fields are checked for container type only; element checks are
  the job of per-key validators registered on ConfigManager.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from riftcore.core.config.errors import ConfigValidationError


SchemaField = Union[type, "ConfigSchema"]


@dataclass(slots=True)
class ConfigSchema:
    """
    Recursive schema for nested configuration validation.

    Attributes
    ----------
    fields:
        Mapping of field names to expected types or nested schemas.
    allow_extra:
        Whether to allow fields not defined in the schema.

    Examples
    --------
    >>> schema = ConfigSchema(fields={"boss_chance": float})
    >>> schema.validate({"boss_chance": 0.8})
    {'boss_chance': 0.8}

    >>> schema.validate({"boss_chance": "high"})
    Traceback (most recent call last):
        ...
    ConfigValidationError: Config value at 'boss_chance' must be float; got str
    """

    fields: Mapping[str, SchemaField]
    allow_extra: bool = True

    def validate(self, value: Any, path: str = "") -> Any:
        """
        Validate value against this schema.

        Raises
        ------
        ConfigValidationError
            If validation fails, with the dot-notation path of the offending field.
        """
        if not isinstance(value, Mapping):
            raise ConfigValidationError(
                f"Config value at '{path or '<root>'}' must be a mapping; "
                f"got {type(value).__name__}"
            )

        for key, expected in self.fields.items():
            full_path = f"{path}.{key}" if path else key

            if key not in value:
                continue

            raw = value[key]

            if isinstance(expected, ConfigSchema):
                expected.validate(raw, path=full_path)
                continue

            # bool is an int subclass; never accept it for numeric fields
            if expected in (int, float) and isinstance(raw, bool):
                raise ConfigValidationError(
                    f"Config value at '{full_path}' must be {expected.__name__}; got bool"
                )

            if expected is float and isinstance(raw, int):
                continue

            if not isinstance(raw, expected):
                raise ConfigValidationError(
                    f"Config value at '{full_path}' must be {expected.__name__}; "
                    f"got {type(raw).__name__}"
                )

        if not self.allow_extra:
            unknown_keys = set(value.keys()) - set(self.fields.keys())
            if unknown_keys:
                unknown_list = ", ".join(sorted(str(k) for k in unknown_keys))
                raise ConfigValidationError(
                    f"Unexpected config keys at '{path or '<root>'}': {unknown_list}"
                )

        return value


# ============================================================================
# Schema Registry
# ============================================================================

_SCHEMAS: Dict[str, ConfigSchema] = {
    "rift": ConfigSchema(
        fields={
            "decay": ConfigSchema(
                fields={
                    "base_thresholds_s": list,
                    "compression_per_level": float,
                    "min_compression": float,
                    "chunk_spawn_cap": int,
                    "chunk_spawn_hard_cap": int,
                },
            ),
            "corruption_start_stage": int,
        },
    ),
    "loot": ConfigSchema(
        fields={
            "tiers": ConfigSchema(
                fields={
                    "base_weights": list,
                    "rift_bonus_per_level": float,
                    "rift_bonus_cap": float,
                    "rift_bonus_tier_step": float,
                    "enemy_shift_levels": int,
                },
            ),
            "crafting": ConfigSchema(
                fields={
                    "boss_drop_chance": float,
                    "normal_drop_chance": float,
                    "boss_key_chance": float,
                },
            ),
        },
    ),
    "enemy": ConfigSchema(
        fields={
            "base_health": ConfigSchema(fields={"normal": int, "boss": int}),
            "health_damping": list,
            "base_deck_size": ConfigSchema(fields={"normal": int, "boss": int}),
            "deck_size_bonus": list,
            "base_credits": ConfigSchema(fields={"normal": int, "boss": int}),
            "credit_growth_per_level": float,
            "xp": ConfigSchema(
                fields={
                    "normal_base": int,
                    "normal_per_level": int,
                    "boss_base": int,
                    "boss_per_level": int,
                },
            ),
        },
    ),
}


def get_schema_for_top_key(top_key: str) -> Optional[ConfigSchema]:
    """Return the validation schema for a top-level key, or None."""
    return _SCHEMAS.get(top_key)


def register_schema(top_key: str, schema: ConfigSchema) -> None:
    """
    Register a schema for a top-level configuration key.

    Example
    -------
    >>> register_schema("events", ConfigSchema(fields={"enabled": bool}))
    >>> get_schema_for_top_key("events") is not None
    True
    """
    _SCHEMAS[top_key] = schema


def unregister_schema(top_key: str) -> Optional[ConfigSchema]:
    """Remove and return the schema registered for ``top_key``, if any."""
    return _SCHEMAS.pop(top_key, None)


def validate_config_value(top_key: str, value: Any) -> Any:
    """
    Validate a top-level configuration value against its schema.

    Keys without a registered schema pass through unchanged.
    """
    schema = get_schema_for_top_key(top_key)
    if schema is None:
        return value
    return schema.validate(value, path=top_key)


__all__ = [
    "ConfigSchema",
    "SchemaField",
    "get_schema_for_top_key",
    "register_schema",
    "unregister_schema",
    "validate_config_value",
]
