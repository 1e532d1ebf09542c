"""Tests for variant resolution."""

import logging
from concurrent.futures import ThreadPoolExecutor

from varistyle.core.ir import VariantDescriptor
from varistyle.core.resolver import (
    effective_selection,
    join_tokens,
    resolve,
    resolve_class_name,
)


class TestResolveOrdering:
    """Tests for the base ++ axes ++ overrides contract."""

    def test_end_to_end_example(self, button_descriptor: VariantDescriptor):
        tokens = resolve(button_descriptor, {"kind": "destructive"}, ["custom-class"])
        assert tokens == ["btn", "dest-kind", "pad-sm", "custom-class"]

    def test_defaults_with_nothing_selected(self, button_descriptor: VariantDescriptor):
        assert resolve(button_descriptor, {}, []) == ["btn", "base-kind", "pad-sm"]

    def test_all_arguments_optional(self, button_descriptor: VariantDescriptor):
        assert resolve(button_descriptor) == resolve(button_descriptor, {}, [])

    def test_axis_order_follows_declaration_not_selection(
        self, button_descriptor: VariantDescriptor
    ):
        tokens = resolve(button_descriptor, {"size": "lg", "kind": "destructive"})
        assert tokens == ["btn", "dest-kind", "pad-lg"]

    def test_overrides_come_last_in_given_order(self, button_descriptor: VariantDescriptor):
        tokens = resolve(button_descriptor, {"size": "lg"}, ["y", "x"])
        assert tokens[-2:] == ["y", "x"]

    def test_duplicate_tokens_are_kept(self, button_descriptor: VariantDescriptor):
        tokens = resolve(button_descriptor, {}, ["pad-sm", "btn", "pad-sm"])
        assert tokens == ["btn", "base-kind", "pad-sm", "pad-sm", "btn", "pad-sm"]

    def test_string_overrides_are_split(self, button_descriptor: VariantDescriptor):
        tokens = resolve(button_descriptor, {}, "  w-full  mt-2 ")
        assert tokens[-2:] == ["w-full", "mt-2"]

    def test_none_overrides(self, button_descriptor: VariantDescriptor):
        assert resolve(button_descriptor, {}, None) == ["btn", "base-kind", "pad-sm"]

    def test_result_is_a_fresh_list(self, button_descriptor: VariantDescriptor):
        first = resolve(button_descriptor)
        first.append("mutated")
        assert resolve(button_descriptor) == ["btn", "base-kind", "pad-sm"]


class TestUnknownSelections:
    """Unknown selections degrade to defaults instead of raising."""

    def test_unknown_value_matches_omitted(self, button_descriptor: VariantDescriptor):
        assert resolve(button_descriptor, {"size": "nonexistent-value"}, []) == resolve(
            button_descriptor, {}, []
        )

    def test_none_value_matches_omitted(self, button_descriptor: VariantDescriptor):
        assert resolve(button_descriptor, {"kind": None}) == resolve(button_descriptor)

    def test_undeclared_axis_is_ignored(self, button_descriptor: VariantDescriptor):
        assert resolve(button_descriptor, {"colour": "red"}) == resolve(button_descriptor)

    def test_non_string_value_does_not_raise(self, button_descriptor: VariantDescriptor):
        assert resolve(button_descriptor, {"size": 3}) == resolve(button_descriptor)

    def test_unknown_value_logged_at_debug(self, button_descriptor: VariantDescriptor, caplog):
        caplog.set_level(logging.DEBUG, logger="varistyle.core.resolver")

        resolve(button_descriptor, {"size": "huge"})

        assert any(
            record.levelno == logging.DEBUG and "huge" in record.getMessage()
            for record in caplog.records
        )


class TestForcedValues:
    """Forced values beat explicit selections, which beat defaults."""

    def test_forced_beats_selection(self, field_descriptor: VariantDescriptor):
        tokens = resolve(
            field_descriptor,
            {"variant": "success"},
            [],
            forced={"variant": "error"},
        )
        assert tokens == ["field", "h-10", "border-red"]

    def test_forced_beats_default(self, field_descriptor: VariantDescriptor):
        tokens = resolve(field_descriptor, {}, [], forced={"variant": "error"})
        assert tokens == ["field", "h-10", "border-red"]

    def test_selection_used_without_forced(self, field_descriptor: VariantDescriptor):
        tokens = resolve(field_descriptor, {"variant": "success"}, [], forced={})
        assert tokens == ["field", "h-10", "border-green"]

    def test_forced_only_touches_its_axis(self, field_descriptor: VariantDescriptor):
        tokens = resolve(field_descriptor, {"size": "lg"}, ["x"], forced={"variant": "error"})
        assert tokens == ["field", "h-12", "border-red", "x"]

    def test_forced_none_is_ignored(self, field_descriptor: VariantDescriptor):
        tokens = resolve(field_descriptor, {"variant": "success"}, forced={"variant": None})
        assert tokens == ["field", "h-10", "border-green"]

    def test_unknown_forced_value_falls_back_to_selection(
        self, field_descriptor: VariantDescriptor, caplog
    ):
        caplog.set_level(logging.WARNING, logger="varistyle.core.resolver")

        tokens = resolve(field_descriptor, {"variant": "success"}, forced={"variant": "bogus"})

        assert tokens == ["field", "h-10", "border-green"]
        assert any("bogus" in record.getMessage() for record in caplog.records)

    def test_effective_selection(self, field_descriptor: VariantDescriptor):
        chosen = effective_selection(
            field_descriptor,
            {"size": "lg", "variant": "success"},
            {"variant": "error"},
        )
        assert chosen == {"size": "lg", "variant": "error"}


class TestClassNames:
    """Tests for the flattened class-string output."""

    def test_resolve_class_name(self, button_descriptor: VariantDescriptor):
        class_name = resolve_class_name(button_descriptor, {"kind": "destructive"}, "custom")
        assert class_name == "btn dest-kind pad-sm custom"

    def test_empty_override_tokens_do_not_leave_gaps(self, button_descriptor: VariantDescriptor):
        class_name = resolve_class_name(button_descriptor, {}, ["", "x"])
        assert class_name == "btn base-kind pad-sm x"

    def test_descriptor_is_callable(self, button_descriptor: VariantDescriptor):
        assert button_descriptor(kind="destructive", size="lg", class_name="w-full") == (
            "btn dest-kind pad-lg w-full"
        )
        assert button_descriptor() == "btn base-kind pad-sm"

    def test_join_tokens(self):
        assert join_tokens("p-6 pt-0", None, ["mt-4"], "") == "p-6 pt-0 mt-4"
        assert join_tokens() == ""


class TestPurity:
    """Resolution has no hidden state."""

    def test_repeatable(self, button_descriptor: VariantDescriptor):
        args = ({"kind": "destructive", "size": "lg"}, ["a", "b"])
        assert resolve(button_descriptor, *args) == resolve(button_descriptor, *args)

    def test_inputs_not_mutated(self, field_descriptor: VariantDescriptor):
        selection = {"variant": "success"}
        overrides = ["x"]
        forced = {"variant": "error"}

        resolve(field_descriptor, selection, overrides, forced)

        assert selection == {"variant": "success"}
        assert overrides == ["x"]
        assert forced == {"variant": "error"}

    def test_concurrent_resolution(self, button_descriptor: VariantDescriptor):
        selections = [{"kind": "destructive"}, {"size": "lg"}, {}, {"size": "bogus"}] * 50
        expected = [resolve(button_descriptor, s, ["z"]) for s in selections]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda s: resolve(button_descriptor, s, ["z"]), selections))

        assert results == expected
