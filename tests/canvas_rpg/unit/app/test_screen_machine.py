from __future__ import annotations

import pytest

from canvas_rpg.app.config import GameConfig, StartMode
from canvas_rpg.app.screen_machine import ScreenStateMachine, region_for_height
from canvas_rpg.app.session import create_session
from canvas_rpg.core.models import Region, Screen
from canvas_rpg.input.events import EventKind, SemanticEvent


def _machine(start_mode: StartMode = StartMode.LOGIN) -> ScreenStateMachine:
    config = GameConfig(start_mode=start_mode)
    return ScreenStateMachine(create_session(config), config)


def _walk(machine: ScreenStateMachine, *kinds: EventKind) -> None:
    for kind in kinds:
        assert machine.apply(SemanticEvent(kind))


def test_login_flow_assigns_default_name_and_region() -> None:
    machine = _machine()
    session = machine._session
    assert machine.screen is Screen.LOGIN
    assert session.region is None
    assert session.player_name is None

    assert machine.apply(SemanticEvent(EventKind.ENTER))
    assert machine.screen is Screen.SERVER_SELECT
    assert session.player_name == "Player"

    assert machine.apply(SemanticEvent(EventKind.ENTER))
    assert machine.screen is Screen.MAIN_MENU
    assert session.region is Region.EU

    assert machine.apply(SemanticEvent(EventKind.TOUCH, 10.0, 10.0))
    assert machine.screen is Screen.HUD


@pytest.mark.parametrize(
    ("y", "region"),
    [(60.0, Region.EU), (300.0, Region.ASIA), (540.0, Region.VIETNAM)],
)
def test_server_select_click_picks_region_by_third(y: float, region: Region) -> None:
    machine = _machine()
    _walk(machine, EventKind.ENTER)
    assert machine.apply(SemanticEvent(EventKind.CLICK, 400.0, y))
    assert machine.screen is Screen.MAIN_MENU
    assert machine._session.region is region


def test_region_for_height_boundaries() -> None:
    assert region_for_height(0.0, 600.0) is Region.EU
    assert region_for_height(200.0, 600.0) is Region.ASIA
    assert region_for_height(400.0, 600.0) is Region.VIETNAM
    assert region_for_height(-10.0, 600.0) is Region.EU
    assert region_for_height(9000.0, 600.0) is Region.VIETNAM


def test_server_select_enter_keeps_chosen_region() -> None:
    machine = _machine()
    _walk(machine, EventKind.ENTER)
    machine.set_region(Region.ASIA)
    _walk(machine, EventKind.ENTER)
    assert machine._session.region is Region.ASIA


@pytest.mark.parametrize(
    ("kind", "overlay"),
    [
        (EventKind.TOGGLE_INVENTORY, Screen.INVENTORY),
        (EventKind.TOGGLE_SHOP, Screen.SHOP),
        (EventKind.TOGGLE_HELP, Screen.HELP_MODAL),
    ],
)
@pytest.mark.parametrize("back", [EventKind.ESCAPE, EventKind.MENU_BACK])
def test_hud_overlays_open_and_close(kind: EventKind, overlay: Screen, back: EventKind) -> None:
    machine = _machine(StartMode.HUD)
    assert machine.apply(SemanticEvent(kind))
    assert machine.screen is overlay
    assert machine.apply(SemanticEvent(back))
    assert machine.screen is Screen.HUD


def test_escape_backs_out_of_menus() -> None:
    machine = _machine()
    assert not machine.apply(SemanticEvent(EventKind.ESCAPE))
    assert machine.screen is Screen.LOGIN

    _walk(machine, EventKind.ENTER, EventKind.ENTER)
    _walk(machine, EventKind.ESCAPE)
    assert machine.screen is Screen.SERVER_SELECT
    _walk(machine, EventKind.ESCAPE)
    assert machine.screen is Screen.LOGIN


def test_unmatched_events_leave_state_untouched() -> None:
    machine = _machine(StartMode.HUD)
    machine.set_error("boom")
    assert not machine.apply(SemanticEvent(EventKind.ESCAPE))
    assert not machine.apply(SemanticEvent(EventKind.MOVE_UP))
    _walk(machine, EventKind.TOGGLE_INVENTORY)
    assert not machine.apply(SemanticEvent(EventKind.ENTER))
    assert not machine.apply(SemanticEvent(EventKind.TOGGLE_SHOP))
    assert machine.screen is Screen.INVENTORY


def test_every_transition_clears_error() -> None:
    machine = _machine()
    machine.set_error("timeout")
    machine.set_loading(True)
    _walk(machine, EventKind.ENTER)
    assert machine._session.error_message is None

    machine.set_error("again")
    _walk(machine, EventKind.ESCAPE)
    assert machine._session.error_message is None


def test_unhandled_event_keeps_error() -> None:
    machine = _machine(StartMode.HUD)
    machine.set_error("offline")
    assert not machine.apply(SemanticEvent(EventKind.ENTER))
    assert machine._session.error_message == "offline"


def test_hud_mode_blocks_menu_screens() -> None:
    machine = _machine(StartMode.HUD)
    assert not machine.reachable(Screen.LOGIN)
    assert not machine.transition_to(Screen.MAIN_MENU)
    assert machine.screen is Screen.HUD
    assert machine.transition_to(Screen.SHOP)
    assert machine.screen is Screen.SHOP


def test_transition_to_past_server_select_defaults_region() -> None:
    machine = _machine()
    assert machine.transition_to(Screen.HUD)
    assert machine._session.region is Region.EU


def test_handled_kinds_per_screen() -> None:
    machine = _machine()
    assert machine.handled_kinds(Screen.HUD) == frozenset(
        {EventKind.TOGGLE_INVENTORY, EventKind.TOGGLE_SHOP, EventKind.TOGGLE_HELP}
    )
    assert machine.handled_kinds(Screen.LOGIN) == frozenset(
        {EventKind.ENTER, EventKind.CLICK, EventKind.TOUCH}
    )
    assert machine.handled_kinds(Screen.SHOP) == frozenset(
        {EventKind.ESCAPE, EventKind.MENU_BACK}
    )


def test_reset_is_idempotent() -> None:
    machine = _machine()
    _walk(machine, EventKind.ENTER, EventKind.ENTER, EventKind.ENTER)
    machine._session.ball.x = 12.0
    machine.set_error("x")

    machine.reset()
    first = (machine.screen, machine._session.region, machine._session.player_name)
    first_ball = (machine._session.ball.x, machine._session.ball.dx)
    machine.reset()

    assert first == (Screen.LOGIN, Region.EU, "Player")
    assert (machine.screen, machine._session.region, machine._session.player_name) == first
    assert (machine._session.ball.x, machine._session.ball.dx) == first_ball == (400.0, 3.0)
    assert machine._session.error_message is None
