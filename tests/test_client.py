import socket
import threading

import pytest

from homerun.client import ENEMY, ME, GameClient
from homerun.netio import recv_packet, send_packet
from homerun.protocol import (
    MAX_HEIGHT,
    GameOver,
    GameReady,
    InitCars,
    InitPlayer,
    InitRoads,
    InitWoods,
    UpdateData,
)

ROADS = InitRoads([True, False, False, True], [False, True])
CARS = InitCars([0.1, 0.25], [(0.5, 0.25, 0.0), (1.0, 0.0, 0.5)])
WOODS = InitWoods([tuple([True] * 12), tuple([False] * 12)])


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    a.settimeout(5)
    b.settimeout(5)
    yield a, b
    a.close()
    b.close()


def _send_world(sock, player_id):
    send_packet(sock, InitPlayer(player_id).to_json())
    send_packet(sock, ROADS.to_json())
    send_packet(sock, CARS.to_json())
    send_packet(sock, WOODS.to_json())


def test_receive_world_data(pair):
    client_end, server_end = pair
    client = GameClient(tick=0)
    client.sock = client_end
    _send_world(server_end, 1)
    client.receive_world_data()
    assert client.my_id == 1
    assert client.player_data[ME].player_id == 1
    assert client.roads == ROADS
    assert client.cars == CARS
    assert client.woods == WOODS


def test_exchange_sends_and_receives(pair):
    client_end, server_end = pair
    client = GameClient(tick=0)
    client.sock = client_end
    client.player_data[ME].x = 0.5
    send_packet(server_end, UpdateData(player_id=1, z=-2.0).to_json())
    send_packet(server_end, GameOver().to_json())

    assert client.exchange() is False
    sent = UpdateData.from_json(recv_packet(server_end))
    assert sent.x == 0.5
    assert client.player_data[ENEMY].z == -2.0
    assert len(client.enemy_queue) == 1


def test_enemy_queue_keeps_recent(pair):
    client_end, server_end = pair
    client = GameClient(tick=0)
    client.sock = client_end
    updates = [UpdateData(player_id=1, x=float(i)) for i in range(5)]
    for update in updates:
        send_packet(server_end, update.to_json())
        send_packet(server_end, GameOver().to_json())
    for _ in updates:
        client.exchange()
    assert len(client.enemy_queue) == 3
    assert client.enemy_queue.front().x == updates[-3].x
    assert client.enemy_queue.second().x == updates[-2].x


def test_exchange_reports_finish(pair):
    client_end, server_end = pair
    client = GameClient(tick=0)
    client.sock = client_end
    client.player_data[ME].y = MAX_HEIGHT
    send_packet(server_end, UpdateData(player_id=1).to_json())
    send_packet(server_end, GameOver(True, [True, False]).to_json())
    assert client.exchange() is True
    assert client.winner.winner_ids == [True, False]


def test_exchange_not_finished_while_rising(pair):
    client_end, server_end = pair
    client = GameClient(tick=0)
    client.sock = client_end
    send_packet(server_end, UpdateData(player_id=1).to_json())
    send_packet(server_end, GameOver(True, [True, False]).to_json())
    assert client.exchange() is False


def test_update_world_runs_until_finish(pair):
    client_end, server_end = pair
    client = GameClient(tick=0)
    client.sock = client_end
    client.player_data[ME].y = MAX_HEIGHT
    send_packet(server_end, GameReady(True).to_json())
    send_packet(server_end, UpdateData(player_id=1).to_json())
    send_packet(server_end, GameOver(True, [True, False]).to_json())

    client.update_world()
    assert client.sock is None
    assert GameReady.from_json(recv_packet(server_end)).ready is True
    assert UpdateData.from_json(recv_packet(server_end)).y == MAX_HEIGHT
    with pytest.raises(ConnectionError):
        recv_packet(server_end)


def test_exchange_requires_connection():
    with pytest.raises(ConnectionError):
        GameClient().exchange()


def test_connect_downloads_world():
    listener = socket.create_server(("127.0.0.1", 0))
    port = listener.getsockname()[1]
    accepted = []

    def serve_one():
        conn, _ = listener.accept()
        accepted.append(conn)
        _send_world(conn, 1)

    thread = threading.Thread(target=serve_one)
    thread.start()
    client = GameClient("127.0.0.1", port, tick=0)
    try:
        client.connect()
        thread.join(timeout=5)
        assert client.my_id == 1
        assert client.roads == ROADS
    finally:
        client.disconnect()
        for conn in accepted:
            conn.close()
        listener.close()
    assert client.sock is None