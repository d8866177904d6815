"""Screen flow: one semantic event in, next screen plus side effects out."""

from __future__ import annotations

import logging

from canvas_rpg.app.config import GameConfig
from canvas_rpg.app.session import recenter
from canvas_rpg.core.models import MENU_SCREENS, OVERLAY_SCREENS, Region, Screen, SessionState
from canvas_rpg.input.events import EventKind, SemanticEvent
from frame_engine.api.flow import FlowContext, FlowTransition, create_flow_program

logger = logging.getLogger(__name__)

# Consulted only when no table rule matched an Escape. Login and HUD are absent:
# there is nothing to back out to.
ESCAPE_FALLBACK: dict[Screen, Screen] = {
    Screen.SERVER_SELECT: Screen.LOGIN,
    Screen.MAIN_MENU: Screen.SERVER_SELECT,
    Screen.INVENTORY: Screen.HUD,
    Screen.SHOP: Screen.HUD,
    Screen.HELP_MODAL: Screen.HUD,
}

_POSITIONAL = (EventKind.CLICK, EventKind.TOUCH)


def region_for_height(y: float, height: float) -> Region:
    """Pick a region from the vertical third of the canvas that was hit."""
    if y < height / 3.0:
        return Region.EU
    if y < 2.0 * height / 3.0:
        return Region.ASIA
    return Region.VIETNAM


class ScreenStateMachine:
    """Own the current screen and apply the canonical transition table."""

    def __init__(self, session: SessionState, config: GameConfig) -> None:
        self._session = session
        self._config = config
        self._program = create_flow_program(self._build_transitions())

    @property
    def screen(self) -> Screen:
        return self._session.screen

    def reachable(self, screen: Screen) -> bool:
        """Whether ``screen`` exists in the configured start mode."""
        return self._config.start_mode.menus_enabled or screen not in MENU_SCREENS

    def handled_kinds(self, screen: Screen) -> frozenset[EventKind]:
        """Event kinds with a specific rule on ``screen`` (Escape fallback excluded)."""
        return frozenset(EventKind(trigger) for trigger in self._program.triggers_for(screen))

    def apply(self, event: SemanticEvent) -> bool:
        """Apply one event. Returns ``False`` when no rule matched."""
        source = self._session.screen
        target = self._program.fire(source, event.kind.value, payload=event)
        if target is None and event.kind is EventKind.ESCAPE:
            target = ESCAPE_FALLBACK.get(source)
        if target is None:
            logger.debug("screen_event_unhandled screen=%s event=%s", source.value, event.kind.value)
            return False
        self._enter(target)
        logger.debug(
            "screen_transition from=%s to=%s trigger=%s",
            source.value,
            target.value,
            event.kind.value,
        )
        return True

    def transition_to(self, screen: Screen) -> bool:
        """Jump directly to ``screen`` without consulting the table."""
        if not self.reachable(screen):
            logger.debug("screen_jump_ignored target=%s", screen.value)
            return False
        if self._session.region is None and screen not in (Screen.LOGIN, Screen.SERVER_SELECT):
            self._session.region = Region.EU
        source = self._session.screen
        self._enter(screen)
        logger.debug("screen_jump from=%s to=%s", source.value, screen.value)
        return True

    def set_region(self, region: Region) -> None:
        self._session.region = region

    def set_player_name(self, name: str) -> None:
        self._session.player_name = name

    def set_loading(self, loading: bool) -> None:
        self._session.is_loading = loading

    def set_error(self, message: str) -> None:
        self._session.error_message = message

    def clear_error(self) -> None:
        self._session.error_message = None

    def reset(self) -> None:
        """Restore initial screen, default region and name, and recentre entities."""
        session = self._session
        session.screen = self._config.start_mode.initial_screen
        session.region = Region.EU
        session.player_name = self._config.default_player_name
        session.is_loading = False
        session.error_message = None
        recenter(session, self._config)

    def _enter(self, screen: Screen) -> None:
        self._session.screen = screen
        self._session.error_message = None

    def _build_transitions(self) -> tuple[FlowTransition[Screen], ...]:
        transitions: list[FlowTransition[Screen]] = []
        for kind in (EventKind.ENTER, *_POSITIONAL):
            transitions.append(
                FlowTransition(
                    trigger=kind.value,
                    source=Screen.LOGIN,
                    target=Screen.SERVER_SELECT,
                    effect=self._assign_default_name,
                )
            )
        transitions.append(
            FlowTransition(
                trigger=EventKind.ENTER.value,
                source=Screen.SERVER_SELECT,
                target=Screen.MAIN_MENU,
                effect=self._ensure_region,
            )
        )
        for kind in _POSITIONAL:
            transitions.append(
                FlowTransition(
                    trigger=kind.value,
                    source=Screen.SERVER_SELECT,
                    target=Screen.MAIN_MENU,
                    effect=self._pick_region,
                )
            )
        for kind in (EventKind.ENTER, *_POSITIONAL):
            transitions.append(
                FlowTransition(trigger=kind.value, source=Screen.MAIN_MENU, target=Screen.HUD)
            )
        for kind, overlay in (
            (EventKind.TOGGLE_INVENTORY, Screen.INVENTORY),
            (EventKind.TOGGLE_SHOP, Screen.SHOP),
            (EventKind.TOGGLE_HELP, Screen.HELP_MODAL),
        ):
            transitions.append(FlowTransition(trigger=kind.value, source=Screen.HUD, target=overlay))
        for overlay in sorted(OVERLAY_SCREENS):
            for kind in (EventKind.ESCAPE, EventKind.MENU_BACK):
                transitions.append(
                    FlowTransition(trigger=kind.value, source=overlay, target=Screen.HUD)
                )
        return tuple(transitions)

    def _assign_default_name(self, context: FlowContext[Screen]) -> None:
        _ = context
        self._session.player_name = self._config.default_player_name

    def _ensure_region(self, context: FlowContext[Screen]) -> None:
        _ = context
        if self._session.region is None:
            self._session.region = Region.EU

    def _pick_region(self, context: FlowContext[Screen]) -> None:
        event = context.payload
        if not isinstance(event, SemanticEvent) or event.y is None:
            self._ensure_region(context)
            return
        self._session.region = region_for_height(event.y, self._session.world_height)
