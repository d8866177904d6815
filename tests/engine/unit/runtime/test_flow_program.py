from __future__ import annotations

import pytest

from frame_engine.api.flow import FlowContext, FlowTransition, create_flow_program
from frame_engine.runtime.flow import RuntimeFlowProgram


def test_flow_program_fires_matching_transition() -> None:
    program = create_flow_program(
        (
            FlowTransition(trigger="go", source="A", target="B"),
            FlowTransition(trigger="go", source="B", target="C"),
        )
    )
    assert program.fire("A", "go") == "B"
    assert program.fire("B", "go") == "C"
    assert program.fire("C", "go") is None


def test_exact_source_wins_over_wildcard() -> None:
    program = RuntimeFlowProgram(
        (
            FlowTransition(trigger="back", source=None, target="home"),
            FlowTransition(trigger="back", source="detail", target="list"),
        )
    )
    assert program.fire("detail", "back") == "list"
    assert program.fire("other", "back") == "home"


def test_guard_rejection_falls_through_to_next_rule() -> None:
    program = RuntimeFlowProgram(
        (
            FlowTransition(trigger="go", source="A", target="B", guard=lambda ctx: ctx.payload == 1),
            FlowTransition(trigger="go", source="A", target="C"),
        )
    )
    assert program.fire("A", "go", payload=1) == "B"
    assert program.fire("A", "go", payload=2) == "C"


def test_effect_runs_on_fire_but_not_on_resolve() -> None:
    seen: list[FlowContext[str]] = []
    program = RuntimeFlowProgram(
        (FlowTransition(trigger="go", source="A", target="B", effect=seen.append),)
    )

    transition = program.resolve("A", "go", payload="p")
    assert transition is not None and transition.target == "B"
    assert seen == []

    assert program.fire("A", "go", payload="p") == "B"
    assert seen == [FlowContext(trigger="go", source="A", target="B", payload="p")]


def test_triggers_for_lists_exact_rules_only() -> None:
    program = RuntimeFlowProgram(
        (
            FlowTransition(trigger="go", source="A", target="B"),
            FlowTransition(trigger="stop", source="A", target="A"),
            FlowTransition(trigger="any", source=None, target="A"),
        )
    )
    assert program.triggers_for("A") == frozenset({"go", "stop"})
    assert program.triggers_for("B") == frozenset()


def test_empty_trigger_is_rejected() -> None:
    with pytest.raises(ValueError):
        RuntimeFlowProgram((FlowTransition(trigger="", source="A", target="B"),))
