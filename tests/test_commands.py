import pytest

from dungeonterm.commands import ExitResult, PlayerCommand, PlayerMessage, translate
from dungeonterm.input import Attack, Drop, Move, Pickup, Quit, Say, Travel


def test_quit_produces_no_request():
    assert translate(Quit(), 7) is None


def test_move_carries_direction():
    assert translate(Move(-1, 1), 7) == PlayerCommand(7, "move", x=-1, y=1)


def test_move_has_no_target():
    command = translate(Move(1, 0), 3)
    assert command.command_target is None
    assert command.entity_id == 3


@pytest.mark.parametrize(
    "event, command_type",
    [
        (Attack(42), "attack"),
        (Pickup(42), "pickup"),
        (Travel(42), "travel"),
        (Drop(42), "drop"),
    ],
)
def test_targeted_commands(event, command_type):
    assert translate(event, 9) == PlayerCommand(
        9, command_type, x=None, y=None, command_target=42
    )


def test_say_splits_at_first_space():
    message = translate(Say("snake hello there"), 5)
    assert message == PlayerMessage(5, "snake", "hello there")


def test_say_round_trip_reassembles_text():
    text = "human where is the stair"
    message = translate(Say(text), 1)
    assert f"{message.recipient_species} {message.message}" == text


def test_say_without_space_is_rejected():
    with pytest.raises(ValueError):
        translate(Say("snake"), 5)


def test_empty_say_is_rejected():
    with pytest.raises(ValueError):
        translate(Say(""), 5)


def test_unknown_event_is_rejected():
    with pytest.raises(TypeError):
        translate(object(), 5)


def test_exit_result_lookup_by_value():
    assert ExitResult("login_failed") is ExitResult.LOGIN_FAILED


def test_player_command_is_immutable():
    command = translate(Attack(2), 1)
    with pytest.raises(AttributeError):
        command.entity_id = 5
    assert command.entity_id == 1