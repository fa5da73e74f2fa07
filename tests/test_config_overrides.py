"""Unit tests for ``--set SECTION.KEY=VALUE`` configuration overrides."""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from basicdefs.adapters.config.overrides import (
    ConfigOverride,
    apply_overrides,
    coerce_value,
    parse_override,
)

# ======================== parse_override ========================


@pytest.mark.os_agnostic
def test_parse_override_section_and_key() -> None:
    """The first dotted segment is the section, the rest the key path."""
    assert parse_override("basicdefs.naturals_count=5") == ConfigOverride(
        section="basicdefs", key_path=("naturals_count",), value=5
    )


@pytest.mark.os_agnostic
def test_parse_override_nested_key_path() -> None:
    """Further dots nest below the section."""
    parsed = parse_override("lib_log_rich.payload_limits.message_max_chars=8192")

    assert parsed.section == "lib_log_rich"
    assert parsed.key_path == ("payload_limits", "message_max_chars")
    assert parsed.value == 8192


@pytest.mark.os_agnostic
def test_parse_override_splits_on_first_equals_only() -> None:
    """An '=' inside the value is kept."""
    assert parse_override("s.key=a=b").value == "a=b"


@pytest.mark.os_agnostic
def test_parse_override_empty_value_is_empty_string() -> None:
    """Nothing after '=' yields ''."""
    assert parse_override("s.key=").value == ""


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("basicdefs.naturals_count", "must contain '='"),
        ("naturals_count=3", "at least one dot"),
        (".naturals_count=3", "section name is empty"),
        ("basicdefs.=3", "empty component"),
        ("basicdefs.a..b=3", "empty component"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    """Each malformed shape has its own message."""
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("25", 25),
        ("-5", -5),
        ("2.5", 2.5),
        ("true", True),
        ("null", None),
        ("[1, 2]", [1, 2]),
        ('{"k": "v"}', {"k": "v"}),
        ('"quoted"', "quoted"),
    ],
)
def test_coerce_value_parses_json(raw: str, expected: object) -> None:
    """JSON literals become Python values."""
    assert coerce_value(raw) == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["WARNING", "hello world", "日本語", ""])
def test_coerce_value_keeps_plain_strings(raw: str) -> None:
    """Anything that is not JSON stays a string."""
    assert coerce_value(raw) == raw


# ======================== apply_overrides ========================


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_instance() -> None:
    """Nothing to apply means no copy."""
    config = Config({"basicdefs": {"naturals_count": 10}}, {})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_keeps_sibling_keys_and_sections() -> None:
    """Only the targeted key changes."""
    config = Config({"basicdefs": {"naturals_count": 10, "other": "kept"}, "lib_log_rich": {"environment": "prod"}}, {})

    result = apply_overrides(config, ("basicdefs.naturals_count=3",))

    assert result["basicdefs"]["naturals_count"] == 3
    assert result["basicdefs"]["other"] == "kept"
    assert result["lib_log_rich"]["environment"] == "prod"


@pytest.mark.os_agnostic
def test_apply_overrides_merges_several_into_one_section() -> None:
    """Repeated --set options targeting one section all apply."""
    config = Config({}, {})

    result = apply_overrides(config, ("s.a=1", "s.nested.b=2", "t.c=x"))

    assert result["s"]["a"] == 1
    assert result["s"]["nested"]["b"] == 2
    assert result["t"]["c"] == "x"


@pytest.mark.os_agnostic
def test_apply_overrides_later_value_wins() -> None:
    """The last override of a key takes effect."""
    result = apply_overrides(Config({}, {}), ("s.k=1", "s.k=2"))

    assert result["s"]["k"] == 2


@pytest.mark.os_agnostic
def test_apply_overrides_leaves_original_untouched() -> None:
    """Config instances are immutable."""
    config = Config({"s": {"k": "original"}}, {})

    apply_overrides(config, ("s.k=changed",))

    assert config["s"]["k"] == "original"


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_nesting_below_a_scalar() -> None:
    """A key cannot be both a value and a table."""
    with pytest.raises(ValueError, match="Cannot override below 'k'"):
        apply_overrides(Config({}, {}), ("s.k=1", "s.k.deeper=2"))
