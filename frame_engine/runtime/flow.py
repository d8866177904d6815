"""Table-driven state-flow executor."""

from __future__ import annotations

from frame_engine.api.flow import FlowContext, FlowTransition


class RuntimeFlowProgram[TState]:
    """Deterministic transition table indexed by ``(source, trigger)``.

    Exact-source rules win over wildcard rules. Within one key, rules are tried
    in registration order and the first whose guard passes applies.
    """

    def __init__(self, transitions: tuple[FlowTransition[TState], ...]) -> None:
        self._exact: dict[tuple[TState, str], list[FlowTransition[TState]]] = {}
        self._wildcard: dict[str, list[FlowTransition[TState]]] = {}
        for transition in transitions:
            self.add_transition(transition)

    def add_transition(self, transition: FlowTransition[TState]) -> None:
        """Register one transition."""
        if not transition.trigger:
            raise ValueError("trigger must not be empty")
        if transition.source is None:
            self._wildcard.setdefault(transition.trigger, []).append(transition)
            return
        key = (transition.source, transition.trigger)
        self._exact.setdefault(key, []).append(transition)

    def resolve(
        self, current_state: TState, trigger: str, *, payload: object | None = None
    ) -> FlowTransition[TState] | None:
        candidates = (
            *self._exact.get((current_state, trigger), ()),
            *self._wildcard.get(trigger, ()),
        )
        for transition in candidates:
            if transition.guard is None:
                return transition
            context = FlowContext(
                trigger=trigger,
                source=current_state,
                target=transition.target,
                payload=payload,
            )
            if transition.guard(context):
                return transition
        return None

    def fire(
        self, current_state: TState, trigger: str, *, payload: object | None = None
    ) -> TState | None:
        transition = self.resolve(current_state, trigger, payload=payload)
        if transition is None:
            return None
        if transition.effect is not None:
            transition.effect(
                FlowContext(
                    trigger=trigger,
                    source=current_state,
                    target=transition.target,
                    payload=payload,
                )
            )
        return transition.target

    def triggers_for(self, state: TState) -> frozenset[str]:
        return frozenset(trigger for source, trigger in self._exact if source == state)


FlowProgram = RuntimeFlowProgram
