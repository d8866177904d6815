"""Public flow-table API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class FlowContext[TState]:
    """Transition execution context."""

    trigger: str
    source: TState
    target: TState
    payload: object | None = None


type TransitionGuard[TState] = Callable[[FlowContext[TState]], bool]
type TransitionHook[TState] = Callable[[FlowContext[TState]], None]


@dataclass(frozen=True, slots=True)
class FlowTransition[TState]:
    """Public transition definition.

    A ``source`` of ``None`` matches any state and is only consulted when no
    transition is registered for the exact ``(source, trigger)`` pair.
    ``effect`` runs when the transition is taken, before the caller commits the
    target state.
    """

    trigger: str
    source: TState | None
    target: TState
    guard: TransitionGuard[TState] | None = None
    effect: TransitionHook[TState] | None = None


class FlowProgram[TState](Protocol):
    """Reusable transition table keyed by ``(state, trigger)``."""

    def resolve(
        self, current_state: TState, trigger: str, *, payload: object | None = None
    ) -> FlowTransition[TState] | None:
        """Return the transition that applies, without running hooks."""

    def fire(
        self, current_state: TState, trigger: str, *, payload: object | None = None
    ) -> TState | None:
        """Resolve, run the ``effect`` hook and return the target state."""

    def triggers_for(self, state: TState) -> frozenset[str]:
        """Return triggers with an exact rule for ``state``."""


def create_flow_program[TState](
    transitions: tuple[FlowTransition[TState], ...],
) -> FlowProgram[TState]:
    """Create the default transition program implementation."""
    from frame_engine.runtime.flow import RuntimeFlowProgram

    return RuntimeFlowProgram(transitions)
