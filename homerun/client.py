"""Network side of the game client: world download and position exchange."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
import time

from homerun import netio
from homerun.netio import recv_packet, recv_start_flag, send_packet, send_start_flag
from homerun.playerqueue import PlayerQueue
from homerun.protocol import (
    MAX_HEIGHT,
    PACKET_FREQ,
    SERVER_PORT,
    GameOver,
    InitCars,
    InitPlayer,
    InitRoads,
    InitWoods,
    UpdateData,
)

log = logging.getLogger(__name__)

ME, ENEMY = 0, 1
ENEMY_HISTORY = 3


class GameClient:
    """Connects to the server and keeps both players' data up to date."""

    def __init__(
        self,
        server_ip: str = "127.0.0.1",
        port: int = SERVER_PORT,
        tick: float = 1 / PACKET_FREQ,
    ) -> None:
        self.server_ip = server_ip
        self.port = port
        self.tick = tick
        self.player_data = [UpdateData(), UpdateData()]
        self.winner = GameOver()
        self.my_id = 0
        self.enemy_queue = PlayerQueue()
        self.sock: socket.socket | None = None
        self.roads = InitRoads()
        self.cars = InitCars()
        self.woods = InitWoods()

    def _socket(self) -> socket.socket:
        if self.sock is None:
            raise ConnectionError("not connected to a server")
        return self.sock

    def connect(self) -> socket.socket:
        """Connect to the server and download the world."""
        self.sock = socket.create_connection((self.server_ip, self.port))
        log.info("Server connected")
        self.receive_world_data()
        return self.sock

    def receive_world_data(self) -> None:
        """Read the player id, roads, cars and woods sent by the server."""
        sock = self._socket()
        player = InitPlayer.from_json(recv_packet(sock))
        self.my_id = player.player_id
        self.player_data[ME].player_id = self.my_id
        self.roads = InitRoads.from_json(recv_packet(sock))
        self.cars = InitCars.from_json(recv_packet(sock))
        self.woods = InitWoods.from_json(recv_packet(sock))

    def exchange(self) -> bool:
        """Send our data, read the other player's and the race state; return True once finished."""
        sock = self._socket()
        send_packet(sock, self.player_data[ME].to_json())

        enemy = UpdateData.from_json(recv_packet(sock))
        self.player_data[ENEMY] = enemy
        if len(self.enemy_queue) >= ENEMY_HISTORY:
            self.enemy_queue.dequeue()
        self.enemy_queue.enqueue(enemy)

        self.winner = GameOver.from_json(recv_packet(sock))
        if not self.winner.end:
            return False
        winner = ME if self.winner.winner_ids[self.my_id] else ENEMY
        return self.player_data[winner].y >= MAX_HEIGHT

    def update_world(self) -> None:
        """Signal readiness, wait for the start, then exchange data until the race ends."""
        sock = self._socket()
        try:
            send_start_flag(sock)
            recv_start_flag(sock)
            while not self.exchange():
                if self.tick > 0:
                    time.sleep(self.tick)
        finally:
            self.disconnect()

    def disconnect(self) -> None:
        if self.sock is not None:
            netio.disconnect(self.sock)
            self.sock = None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Connect to a race server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=SERVER_PORT)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    client = GameClient(args.host, args.port)
    try:
        client.connect()
        client.update_world()
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        client.disconnect()
    return 0