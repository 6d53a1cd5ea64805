"""Tests for option targets and the target helper factories."""

import pytest

from flagset.errors import ConversionError, InvalidChoiceError
from flagset.targets import (
    Ref,
    Target,
    TargetKind,
    choice,
    decrement,
    increment,
    reset_flag,
)


class TestTargetApply:
    """Applying parameters to each target kind."""

    def test_text_stores_verbatim(self):
        ref = Ref("")
        Target.text(ref).apply("foo bar")
        assert ref.value == "foo bar"

    @pytest.mark.parametrize(
        "factory",
        [Target.uint32, Target.int32, Target.uint64, Target.int64],
    )
    def test_integer_kinds(self, factory):
        ref = Ref(0)
        factory(ref).apply("3")
        assert ref.value == 3

    @pytest.mark.parametrize(
        ("factory", "type_name"),
        [
            (Target.uint32, "uint32"),
            (Target.int32, "int32"),
            (Target.uint64, "uint64"),
            (Target.int64, "int64"),
            (Target.float64, "float64"),
        ],
    )
    def test_numeric_failure_leaves_ref_unchanged(self, factory, type_name):
        ref = Ref(7)
        with pytest.raises(ConversionError) as exc_info:
            factory(ref).apply("bad")
        assert exc_info.value.type_name == type_name
        assert ref.value == 7

    def test_float(self):
        ref = Ref(0.0)
        Target.float64(ref).apply("3")
        assert ref.value == 3.0

    def test_flag_ignores_parameter(self):
        ref = Ref(False)
        Target.flag(ref).apply("")
        assert ref.value is True

    def test_text_list_appends_in_order(self):
        ref = Ref([])
        target = Target.text_list(ref)
        for value in ("foo", "bar", "foo"):
            target.apply(value)
        assert ref.value == ["foo", "bar", "foo"]

    def test_actions(self):
        calls = []
        Target.action(lambda: calls.append("plain")).apply("")
        Target.action_with_param(calls.append).apply("param")
        Target.checked_action(lambda: calls.append("checked")).apply("")
        Target.checked_action_with_param(calls.append).apply("checked param")
        assert calls == ["plain", "param", "checked", "checked param"]

    def test_unsupported_kind_raises(self):
        with pytest.raises(TypeError):
            Target("bogus", Ref(0)).apply("1")


class TestTargetShape:
    """Parameter requirements and validity checks."""

    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            (Target.flag(Ref(False)), False),
            (Target.int32(Ref(0)), True),
            (Target.text_list(Ref([])), True),
            (Target.action(lambda: None), False),
            (Target.checked_action(lambda: None), False),
            (Target.action_with_param(lambda value: None), True),
            (Target.checked_action_with_param(lambda value: None), True),
        ],
    )
    def test_takes_parameter(self, target, expected):
        assert target.takes_parameter is expected

    def test_is_valid(self):
        assert Target.text(Ref("")).is_valid()
        assert Target.action(lambda: None).is_valid()

        assert not Target(TargetKind.TEXT, "not a ref").is_valid()
        assert not Target.text_list(Ref(None)).is_valid()
        assert not Target.action(3).is_valid()
        assert not Target("bogus", Ref("")).is_valid()

    def test_numeric_and_checked_kinds_are_checked(self):
        assert Target.int64(Ref(0)).is_checked
        assert Target.float64(Ref(0.0)).is_checked
        assert Target.checked_action(lambda: None).is_checked
        assert not Target.action(lambda: None).is_checked
        assert not Target.text(Ref("")).is_checked


def test_increment_and_decrement():
    ref = Ref(0)
    inc, dec = increment(ref), decrement(ref)
    for target in (inc, inc, dec, inc):
        target.apply("")
    assert ref.value == 2
    assert not inc.takes_parameter


def test_reset_flag():
    ref = Ref(True)
    reset_flag(ref).apply("")
    assert ref.value is False


def test_choice_accepts_listed_values():
    ref = Ref("")
    target = choice(ref, ["foo", "bar"])
    target.apply("bar")
    assert ref.value == "bar"
    assert target.kind == TargetKind.CHECKED_ACTION_WITH_PARAM


def test_choice_rejects_other_values():
    ref = Ref("foo")
    with pytest.raises(InvalidChoiceError) as exc_info:
        choice(ref, ["foo", "bar"]).apply("baz")
    assert str(exc_info.value) == "invalid parameter value 'baz'"
    assert exc_info.value.choices == ("foo", "bar")
    assert ref.value == "foo"
