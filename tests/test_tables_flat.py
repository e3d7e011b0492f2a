from enum import Enum

import pytest

from repeat_maps.tables import (
    EXIT_ONLY,
    ActionName,
    EmptyEntryList,
    EntrySpec,
    FlatSpecError,
    ModeSpec,
    action,
    build,
    parse_flat_mode,
    parse_flat_modes,
)


class Command(Enum):
    NEXT = "next"
    PREVIOUS = "previous"


def test_parse_flat_mode_groups_triggers_by_action() -> None:
    spec = parse_flat_mode(
        ("yank-only", action("yank"), "a", EXIT_ONLY, action("yank_pop"), "b")
    )

    assert spec == ModeSpec(
        "yank-only",
        (
            EntrySpec("yank", ("a",)),
            EntrySpec("yank_pop", ("b",), exit_only=True),
        ),
    )


def test_exit_only_marker_applies_to_next_entry_only() -> None:
    spec = parse_flat_mode(
        ("m", EXIT_ONLY, action("quit"), "q", action("step"), "s", "n")
    )

    assert [entry.exit_only for entry in spec.entries] == [True, False]
    assert spec.entries[1].triggers == ("s", "n")


def test_non_string_objects_are_actions() -> None:
    spec = parse_flat_mode(
        ("buffers", Command.PREVIOUS, "<left>", Command.NEXT, "<right>", "n")
    )

    assert [entry.action for entry in spec.entries] == [Command.PREVIOUS, Command.NEXT]


def test_action_names_compare_equal_to_plain_strings() -> None:
    name = action("yank")

    assert isinstance(name, ActionName)
    assert name == "yank"
    assert hash(name) == hash("yank")
    assert repr(name) == "action('yank')"


def test_flat_modes_build_chaining_scenario() -> None:
    specs = parse_flat_modes(
        [
            ("yank-only", action("yank"), "a", EXIT_ONLY, action("yank_pop"), "b"),
            ("yank-popping", action("yank_pop"), "b", "c"),
        ]
    )

    tables, reentry = build(specs)

    assert dict(tables["yank-only"]) == {"a": "yank", "b": "yank_pop"}
    assert dict(tables["yank-popping"]) == {"b": "yank_pop", "c": "yank_pop"}
    assert reentry.mode_for("yank") == "yank-only"
    assert reentry.mode_for("yank_pop") == "yank-popping"


def test_flat_group_without_entries_is_left_to_build() -> None:
    specs = parse_flat_modes([("lonely",)])

    assert specs == (ModeSpec("lonely"),)
    with pytest.raises(EmptyEntryList):
        build(specs)


def test_parse_flat_modes_does_not_mutate_input() -> None:
    group = ["m", action("act"), "x"]

    parse_flat_modes([group])

    assert group == ["m", action("act"), "x"]


@pytest.mark.parametrize(
    "group",
    [
        (),
        (action("name"), "x"),
        (42, action("act"), "x"),
        ("m", "x", action("act")),
        ("m", EXIT_ONLY, "x"),
        ("m", action("act"), "x", EXIT_ONLY),
        ("m", EXIT_ONLY, EXIT_ONLY, action("act"), "x"),
    ],
)
def test_malformed_groups_raise(group: tuple) -> None:
    with pytest.raises(FlatSpecError):
        parse_flat_mode(group)


class Motion(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


def test_str_mixin_enum_members_are_actions() -> None:
    spec = parse_flat_mode(("motion", Motion.FORWARD, "f", Motion.BACKWARD, "b"))

    assert [entry.action for entry in spec.entries] == [
        Motion.FORWARD,
        Motion.BACKWARD,
    ]
    assert [entry.triggers for entry in spec.entries] == [("f",), ("b",)]


def test_enum_member_cannot_name_a_mode() -> None:
    with pytest.raises(FlatSpecError):
        parse_flat_mode((Motion.FORWARD, "f"))
