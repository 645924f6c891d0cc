import pytest

from hearthdeck.constants import MAX_MANA
from hearthdeck.turns import HeroState, TurnController


def make(mana=5, max_mana=5, turn_time=30):
    return TurnController(HeroState(mana=mana, max_mana=max_mana), HeroState(), turn_time)


def test_hero_spend_mana_reduces_mana():
    hero = HeroState(mana=4, max_mana=4)
    hero.spend_mana(3)
    assert hero.mana == 1
    assert hero.has_enough_mana(1)
    assert not hero.has_enough_mana(2)


def test_hero_spend_too_much_raises():
    hero = HeroState(mana=1, max_mana=1)
    with pytest.raises(ValueError):
        hero.spend_mana(2)
    assert hero.mana == 1


def test_indicator_texts():
    controller = make()
    assert controller.indicator() == "Your Turn"
    controller.end_turn()
    assert controller.indicator() == "Opponent's Turn"


def test_mana_text_format():
    controller = make(mana=3, max_mana=5)
    assert controller.mana_text() == "3/5"


def test_end_turn_to_opponent_disables_controls():
    controller = make()
    controller.end_turn()
    assert controller.is_player_turn is False
    assert controller.end_turn_enabled is False
    assert controller.hero_power_enabled is False
    assert controller.auto_end_pending == 5


def test_end_turn_back_to_player_grows_and_refills_mana():
    controller = make(mana=1, max_mana=5)
    controller.end_turn()
    controller.end_turn()
    assert controller.is_player_turn
    assert controller.player.max_mana == 5 + 2
    assert controller.player.mana == controller.player.max_mana
    assert controller.hero_power_enabled


def test_mana_never_exceeds_cap():
    controller = make(mana=9, max_mana=9)
    for _ in range(6):
        controller.end_turn()
        assert controller.player.max_mana <= MAX_MANA
    assert controller.player.max_mana == MAX_MANA


def test_start_turn_refills_and_caps():
    controller = make(mana=0, max_mana=9)
    controller.start_turn()
    assert controller.player.max_mana == MAX_MANA
    assert controller.player.mana == MAX_MANA
    assert controller.is_player_turn is False
    assert controller.time_remaining == controller.turn_time


def test_timer_runs_out_on_player_turn():
    controller = make(turn_time=3)
    controller.tick()
    controller.tick()
    assert controller.is_player_turn
    controller.tick()
    assert controller.is_player_turn is False
    assert controller.time_remaining == 3


def test_opponent_turn_ends_by_itself():
    controller = make(mana=5, max_mana=5)
    controller.end_turn()
    for _ in range(4):
        controller.tick()
        assert controller.is_player_turn is False
    controller.tick()
    assert controller.is_player_turn
    assert controller.auto_end_pending is None
    assert controller.player.mana == controller.player.max_mana == 5 + 2


def test_timer_warning():
    controller = make(turn_time=30)
    assert not controller.timer_warning
    while controller.time_remaining > 5:
        controller.tick()
    assert controller.timer_warning


def test_add_mana_capped_at_max():
    controller = make(mana=2, max_mana=5)
    controller.add_mana(100)
    assert controller.player.mana == controller.player.max_mana


def test_use_mana():
    controller = make(mana=3, max_mana=5)
    assert controller.use_mana(2) is True
    assert controller.player.mana == 1
    assert controller.use_mana(2) is False
    assert controller.player.mana == 1
    assert controller.has_enough_mana(1)
    assert not controller.has_enough_mana(2)


def test_attack_state_cleared_on_turn_change():
    controller = make()
    controller.mark_attacked("minion")
    assert not controller.can_attack("minion")
    controller.end_turn()
    controller.end_turn()
    assert controller.can_attack("minion")


def test_invalid_turn_time():
    with pytest.raises(ValueError):
        TurnController(turn_time=0)