"""Enum registry: allowed vocabulary for audit events, merged from defaults and an optional YAML file."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Union

import yaml

logger = logging.getLogger(__name__)


class EnumConfigurationError(Exception):
    """Raised when an enum config file exists but cannot be used. Fatal at startup."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EnumCategory(str, Enum):
    """Vocabulary categories. Values are the keys used in the YAML config."""

    EVENT_TYPES = "eventTypes"
    EVENT_ACTIONS = "eventActions"
    ACTOR_TYPES = "actorTypes"
    TARGET_TYPES = "targetTypes"


DEFAULT_ENUM_VALUES: Dict[EnumCategory, FrozenSet[str]] = {
    EnumCategory.EVENT_TYPES: frozenset({"MANAGEMENT_EVENT", "USER_MANAGEMENT", "DATA_FETCH"}),
    EnumCategory.EVENT_ACTIONS: frozenset({"CREATE", "READ", "UPDATE", "DELETE"}),
    EnumCategory.ACTOR_TYPES: frozenset({"SERVICE", "ADMIN", "MEMBER", "SYSTEM"}),
    EnumCategory.TARGET_TYPES: frozenset({"SERVICE", "RESOURCE"}),
}

# Optional wrapper key used by the shipped configs/enums.yaml
_ROOT_KEY = "enums"


@dataclass(frozen=True)
class AuditEnums:
    """
    Immutable registry of allowed values per category.
    Built once at startup and shared by reference; never mutated afterwards.
    """

    event_types: FrozenSet[str]
    event_actions: FrozenSet[str]
    actor_types: FrozenSet[str]
    target_types: FrozenSet[str]

    @classmethod
    def from_values(cls, values: Mapping[EnumCategory, Iterable[str]]) -> "AuditEnums":
        """Build a registry from any iterables; missing categories are empty."""
        return cls(
            event_types=frozenset(values.get(EnumCategory.EVENT_TYPES, ())),
            event_actions=frozenset(values.get(EnumCategory.EVENT_ACTIONS, ())),
            actor_types=frozenset(values.get(EnumCategory.ACTOR_TYPES, ())),
            target_types=frozenset(values.get(EnumCategory.TARGET_TYPES, ())),
        )

    @classmethod
    def defaults(cls) -> "AuditEnums":
        return cls.from_values(DEFAULT_ENUM_VALUES)

    def values_for(self, category: EnumCategory) -> FrozenSet[str]:
        return {
            EnumCategory.EVENT_TYPES: self.event_types,
            EnumCategory.EVENT_ACTIONS: self.event_actions,
            EnumCategory.ACTOR_TYPES: self.actor_types,
            EnumCategory.TARGET_TYPES: self.target_types,
        }[category]

    def is_valid(self, category: EnumCategory, value: Optional[str]) -> bool:
        """Empty or missing values are valid (nullable fields); otherwise membership."""
        if not value:
            return True
        return value in self.values_for(category)

    def is_valid_event_type(self, value: Optional[str]) -> bool:
        return self.is_valid(EnumCategory.EVENT_TYPES, value)

    def is_valid_event_action(self, value: Optional[str]) -> bool:
        return self.is_valid(EnumCategory.EVENT_ACTIONS, value)

    def is_valid_actor_type(self, value: Optional[str]) -> bool:
        return self.is_valid(EnumCategory.ACTOR_TYPES, value)

    def is_valid_target_type(self, value: Optional[str]) -> bool:
        return self.is_valid(EnumCategory.TARGET_TYPES, value)


def merge_enums(
    defaults: AuditEnums,
    overrides: Mapping[EnumCategory, Iterable[str]],
) -> AuditEnums:
    """Union each category with its override values. Pure; no I/O."""
    merged = {
        category: defaults.values_for(category) | frozenset(overrides.get(category, ()))
        for category in EnumCategory
    }
    return AuditEnums.from_values(merged)


def _parse_overrides(data: Any, path: Path) -> Dict[EnumCategory, FrozenSet[str]]:
    """Extract per-category values from a parsed YAML document. Raises on wrong shape."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise EnumConfigurationError(f"Enum config root must be a mapping: {path}")
    if _ROOT_KEY in data:
        data = data[_ROOT_KEY]
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise EnumConfigurationError(f"'{_ROOT_KEY}' must be a mapping: {path}")

    overrides: Dict[EnumCategory, FrozenSet[str]] = {}
    for category in EnumCategory:
        raw = data.get(category.value)
        if raw is None:
            continue
        if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
            raise EnumConfigurationError(
                f"'{category.value}' must be a list of strings: {path}"
            )
        overrides[category] = frozenset(raw)
    return overrides


def load_enums(path: Optional[Union[str, Path]]) -> AuditEnums:
    """
    Load the enum registry: built-in defaults merged with values from the YAML file at path.
    Missing or unreadable file falls back to defaults. Malformed file raises EnumConfigurationError.
    """
    defaults = AuditEnums.defaults()
    if path is None:
        logger.info("enum_config_not_set", extra={"enum_config_path": None})
        return defaults

    config_path = Path(path)
    try:
        content = config_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise EnumConfigurationError(f"Enum config {config_path} is not valid UTF-8: {e}") from e
    except OSError as e:
        logger.warning(
            "enum_config_unavailable",
            extra={"enum_config_path": str(config_path), "error": str(e)},
        )
        return defaults

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise EnumConfigurationError(f"Invalid YAML in enum config {config_path}: {e}") from e

    enums = merge_enums(defaults, _parse_overrides(data, config_path))
    logger.info(
        "enum_config_loaded",
        extra={
            "enum_config_path": str(config_path),
            "event_types": len(enums.event_types),
            "event_actions": len(enums.event_actions),
            "actor_types": len(enums.actor_types),
            "target_types": len(enums.target_types),
        },
    )
    return enums
