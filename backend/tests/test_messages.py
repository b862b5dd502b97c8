import pytest

from tictactoe.constants import GameResult, Marker, Turn
from tictactoe.errors import MalformedMessageError
from tictactoe.messages import (
    GameOverMessage,
    HandshakeMessage,
    OpponentUpdateMessage,
    TurnMessage,
    dump,
    parse_move,
)


def test_parse_move():
    move = parse_move('{"gameId": 3, "player": "O", "gridId": "7", "extra": true}')
    assert move.gameId == 3
    assert move.player is Marker.O
    assert move.gridId == "7"
    assert move.grid_id_as_int == 7


@pytest.mark.parametrize("raw", [
    "",
    "{}",
    '{"gameId": 1, "player": "X", "gridId": true}',
    '{"gameId": 1, "player": "X", "gridId": "4a"}',
    '{"gameId": 1, "player": "x", "gridId": "4"}',
    '{"gameId": 1, "player": "X", "gridId": "\u00b2"}',
    '{"gameId": 1, "player": "X", "gridId": "' + "9" * 5000 + '"}',
    '{"gameId": 1, "player": "X", "gridId": "-"}',
])
def test_parse_move_rejects_schema_violations(raw):
    with pytest.raises(MalformedMessageError):
        parse_move(raw)


def test_outgoing_shapes():
    assert dump(HandshakeMessage(gameId=1, playerLetter=Marker.X)) == {
        "type": "handshake", "gameId": 1, "playerLetter": "X",
    }
    assert dump(TurnMessage(turn=Turn.WAITING)) == {"type": "turn", "turn": "waiting"}
    assert dump(OpponentUpdateMessage(markedBy=Marker.O, gridId="5", winner=False, tied=True)) == {
        "type": "response", "markedBy": "O", "gridId": "5", "winner": False, "tied": True,
    }
    assert dump(GameOverMessage(result=GameResult.TIED)) == {"type": "game_over", "result": "TIED"}
