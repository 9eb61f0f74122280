"""Enum registry tests: defaults, YAML merge, malformed config, nullable membership."""

from pathlib import Path

import pytest

from argus.config.enums import (
    DEFAULT_ENUM_VALUES,
    AuditEnums,
    EnumCategory,
    EnumConfigurationError,
    load_enums,
    merge_enums,
)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "enums.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_enums_missing_file_returns_defaults():
    enums = load_enums("/nonexistent/path/enums.yaml")
    assert enums == AuditEnums.defaults()
    assert enums.event_types
    assert enums.event_actions
    assert enums.actor_types
    assert enums.target_types


def test_load_enums_none_path_returns_defaults():
    assert load_enums(None) == AuditEnums.defaults()


def test_load_enums_unreadable_path_returns_defaults(tmp_path):
    """A directory cannot be read as a file; treated like a missing file."""
    assert load_enums(tmp_path) == AuditEnums.defaults()


def test_load_enums_merges_file_values_with_defaults(tmp_path):
    path = _write(
        tmp_path,
        """enums:
  eventTypes:
    - MANAGEMENT_EVENT
    - USER_MANAGEMENT
  eventActions:
    - CREATE
    - READ
  actorTypes:
    - SERVICE
    - ADMIN
  targetTypes:
    - SERVICE
    - RESOURCE
""",
    )
    enums = load_enums(path)
    assert {"MANAGEMENT_EVENT", "USER_MANAGEMENT"} <= enums.event_types
    # Defaults are merged in even when the file lists fewer values
    assert "DATA_FETCH" in enums.event_types
    assert enums.actor_types == DEFAULT_ENUM_VALUES[EnumCategory.ACTOR_TYPES]


def test_load_enums_only_event_types_leaves_other_categories_unchanged(tmp_path):
    path = _write(tmp_path, "eventTypes:\n  - FOO\n")
    enums = load_enums(path)
    defaults = AuditEnums.defaults()
    assert enums.event_types == defaults.event_types | {"FOO"}
    assert enums.event_actions == defaults.event_actions
    assert enums.actor_types == defaults.actor_types
    assert enums.target_types == defaults.target_types


def test_load_enums_empty_file_returns_defaults(tmp_path):
    assert load_enums(_write(tmp_path, "")) == AuditEnums.defaults()


def test_load_enums_non_utf8_file_raises(tmp_path):
    path = tmp_path / "enums.yaml"
    path.write_bytes(b"eventTypes:\n  - \xff\xfe\n")
    with pytest.raises(EnumConfigurationError) as exc_info:
        load_enums(path)
    assert "UTF-8" in exc_info.value.message


def test_load_enums_invalid_yaml_raises(tmp_path):
    path = _write(tmp_path, "eventTypes: [FOO\n")
    with pytest.raises(EnumConfigurationError):
        load_enums(path)


def test_load_enums_non_mapping_root_raises(tmp_path):
    path = _write(tmp_path, "- FOO\n- BAR\n")
    with pytest.raises(EnumConfigurationError):
        load_enums(path)


def test_load_enums_category_not_a_list_raises(tmp_path):
    path = _write(tmp_path, "actorTypes: SERVICE\n")
    with pytest.raises(EnumConfigurationError) as exc_info:
        load_enums(path)
    assert "actorTypes" in exc_info.value.message


def test_merge_enums_collapses_duplicates():
    defaults = AuditEnums.defaults()
    merged = merge_enums(
        defaults,
        {EnumCategory.TARGET_TYPES: ["SERVICE", "SERVICE", "DATABASE"]},
    )
    assert merged.target_types == frozenset({"SERVICE", "RESOURCE", "DATABASE"})
    assert merged.event_types == defaults.event_types


def test_merge_enums_does_not_mutate_defaults():
    defaults = AuditEnums.defaults()
    merge_enums(defaults, {EnumCategory.EVENT_TYPES: ["FOO"]})
    assert "FOO" not in defaults.event_types


def test_is_valid_membership(enums):
    assert enums.is_valid_event_type("MANAGEMENT_EVENT")
    assert enums.is_valid_event_action("CREATE")
    assert enums.is_valid_actor_type("SERVICE")
    assert enums.is_valid_target_type("RESOURCE")

    assert not enums.is_valid_event_type("INVALID")
    assert not enums.is_valid_event_action("INVALID")
    assert not enums.is_valid_actor_type("INVALID")
    assert not enums.is_valid_target_type("INVALID")


def test_is_valid_empty_values_are_nullable():
    empty = AuditEnums.from_values({})
    for category in EnumCategory:
        assert empty.is_valid(category, "")
        assert empty.is_valid(category, None)


def test_registry_is_immutable(enums):
    with pytest.raises(AttributeError):
        enums.event_types = frozenset()  # type: ignore[misc]


def test_shipped_config_loads():
    path = Path(__file__).resolve().parents[3] / "configs" / "enums.yaml"
    enums = load_enums(path)
    assert enums.event_types >= AuditEnums.defaults().event_types
