import pytest
from starlette.websockets import WebSocketDisconnect


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "games": 0, "connections": 0}


def test_pairing_and_moves(client):
    with client.websocket_connect("/websocket") as a:
        assert a.receive_json() == {"type": "handshake", "gameId": 1, "playerLetter": "X"}
        with client.websocket_connect("/websocket") as b:
            assert b.receive_json() == {"type": "handshake", "gameId": 1, "playerLetter": "O"}
            assert a.receive_json() == {"type": "turn", "turn": "your_turn"}
            assert b.receive_json() == {"type": "turn", "turn": "waiting"}

            a.send_json({"gameId": 1, "player": "X", "gridId": "4"})
            assert b.receive_json() == {
                "type": "response", "markedBy": "X", "gridId": "4", "winner": False, "tied": False,
            }

            # Ход не в свою очередь молча отбрасывается
            a.send_json({"gameId": 1, "player": "X", "gridId": "0"})

            b.send_json({"gameId": 1, "player": "O", "gridId": "0"})
            assert a.receive_json() == {
                "type": "response", "markedBy": "O", "gridId": "0", "winner": False, "tied": False,
            }


def test_top_row_win(client):
    with client.websocket_connect("/websocket") as a:
        a.receive_json()
        with client.websocket_connect("/websocket") as b:
            b.receive_json()
            a.receive_json()
            b.receive_json()

            for x_cell, o_cell in [(0, 3), (1, 4)]:
                a.send_json({"gameId": 1, "player": "X", "gridId": str(x_cell)})
                assert b.receive_json()["gridId"] == str(x_cell)
                b.send_json({"gameId": 1, "player": "O", "gridId": str(o_cell)})
                assert a.receive_json()["gridId"] == str(o_cell)

            a.send_json({"gameId": 1, "player": "X", "gridId": "2"})
            assert b.receive_json() == {
                "type": "response", "markedBy": "X", "gridId": "2", "winner": True, "tied": False,
            }
            assert a.receive_json() == {"type": "game_over", "result": "YOU_WIN"}


def test_malformed_frame_keeps_connection(client):
    with client.websocket_connect("/websocket") as a:
        a.receive_json()
        with client.websocket_connect("/websocket") as b:
            b.receive_json()
            a.receive_json()
            b.receive_json()

            a.send_text("{broken")
            a.send_json({"gameId": 1, "player": "X", "gridId": "8"})
            assert b.receive_json()["gridId"] == "8"


def test_binary_frame_closes_connection(client):
    with client.websocket_connect("/websocket") as a:
        assert a.receive_json()["playerLetter"] == "X"
        a.send_bytes(b"x")
        with pytest.raises(WebSocketDisconnect) as exc:
            a.receive_json()
        assert exc.value.code == 1011

    # Ожидающая партия ушедшего игрока убрана, соединение забыто
    assert client.get("/health").json() == {"status": "ok", "games": 0, "connections": 0}
