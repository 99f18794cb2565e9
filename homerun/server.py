"""Game server: builds a shared world and relays positions between two players."""

from __future__ import annotations

import argparse
import logging
import random
import socket
import threading
import time
from collections import deque
from dataclasses import dataclass, field

from homerun.netio import (
    disconnect,
    recv_packet,
    recv_start_flag,
    send_packet,
    send_start_flag,
)
from homerun.protocol import (
    GRASS,
    MAX_HEIGHT,
    PACKET_FREQ,
    ROAD,
    SERVER_PORT,
    WOODS_PER_ROW,
    GameOver,
    InitCars,
    InitPlayer,
    InitRoads,
    InitWoods,
    UpdateData,
)

log = logging.getLogger(__name__)

MAX_TILES = 150
ROAD_RUN = (5, 10)
CAR_SPEED_FACTOR = (1, 3)
HOME_ROWS = 10
GOAL_Z = -15.0


@dataclass
class WorldData:
    """Everything the server sends a client before the race starts."""

    roads: InitRoads
    cars: InitCars
    woods: InitWoods
    players: list[InitPlayer] = field(
        default_factory=lambda: [InitPlayer(0), InitPlayer(1)]
    )


def generate_world(rng: random.Random | None = None) -> WorldData:
    """Lay out grass and road rows, one car per road and the trees on grass rows."""
    rng = rng if rng is not None else random.Random()
    road, grass = bool(ROAD), bool(GRASS)

    roads = [grass]
    dirs: list[bool] = []
    index = 1
    while index < MAX_TILES:
        count = min(rng.randint(*ROAD_RUN), MAX_TILES - index)
        for _ in range(count):
            roads.append(road)
            dirs.append(bool(rng.randint(0, 1)))
        index += count
        roads.append(grass)
        index += 1
    roads.extend([grass] * HOME_ROWS)

    velocities: list[float] = []
    colors: list[tuple[float, float, float]] = []
    for i, tile in enumerate(roads):
        if tile == road:
            velocities.append(0.1 + i * 0.002 * rng.randint(*CAR_SPEED_FACTOR))
            colors.append((rng.random(), rng.random(), rng.random()))

    rows = [
        tuple(bool(rng.randint(0, 1)) for _ in range(WOODS_PER_ROW))
        for tile in roads
        if tile == grass
    ]

    return WorldData(InitRoads(roads, dirs), InitCars(velocities, colors), InitWoods(rows))


class SessionManager:
    """Runs one race between two connected clients."""

    def __init__(
        self,
        world: WorldData | None = None,
        rng: random.Random | None = None,
        tick: float = 1 / PACKET_FREQ,
    ) -> None:
        self.world = world if world is not None else generate_world(rng)
        self.update_data = [UpdateData(player_id=0), UpdateData(player_id=1)]
        self.winner = GameOver()
        self.tick = tick
        self.end_flag = threading.Event()
        self.threads: list[threading.Thread] = []
        self._start_flags = (threading.Event(), threading.Event())
        self._lock = threading.Lock()

    def start_game(self, sock1: socket.socket, sock2: socket.socket) -> list[threading.Thread]:
        """Serve both players, each on its own thread."""
        log.info("Starting game")
        for player_id, sock in enumerate((sock1, sock2)):
            thread = threading.Thread(
                target=self._serve_player, args=(sock, player_id), daemon=True
            )
            self.threads.append(thread)
            thread.start()
        return self.threads

    def _serve_player(self, sock: socket.socket, player_id: int) -> None:
        try:
            self.update_world(sock, player_id)
        except (OSError, ValueError) as exc:
            log.warning("player %d dropped: %s", player_id, exc)

    def update_world(self, sock: socket.socket, my_id: int) -> None:
        """Send the world, wait for both players, then relay updates until the race ends."""
        other_id = 1 - my_id
        self.update_data[my_id].player_id = my_id
        try:
            self.send_world_data(sock, my_id)
            recv_start_flag(sock)
            self._start_flags[my_id].set()
            self._start_flags[other_id].wait()
            send_start_flag(sock)

            while True:
                self.update_data[my_id] = UpdateData.from_json(recv_packet(sock))
                self.check_winner(my_id)
                send_packet(sock, self.update_data[other_id].to_json())
                send_packet(sock, self.winner.to_json())
                if self._finished(my_id):
                    self.end_flag.set()
                    break
                if self.tick > 0:
                    time.sleep(self.tick)
        finally:
            self.end_game(sock)

    def _finished(self, my_id: int) -> bool:
        with self._lock:
            if not self.winner.end:
                return False
            winner_id = my_id if self.winner.winner_ids[my_id] else 1 - my_id
            return self.update_data[winner_id].y >= MAX_HEIGHT

    def send_world_data(self, sock: socket.socket, player_id: int) -> None:
        """Send the player's id, then the roads, cars and woods."""
        send_packet(sock, self.world.players[player_id].to_json())
        send_packet(sock, self.world.roads.to_json())
        send_packet(sock, self.world.cars.to_json())
        send_packet(sock, self.world.woods.to_json())

    def check_winner(self, my_id: int) -> bool:
        """Mark a player who has reached the goal line as winner; return whether the race ended."""
        other_id = 1 - my_id
        with self._lock:
            for player_id in (my_id, other_id):
                if self.update_data[player_id].z <= GOAL_Z:
                    self.update_data[player_id].game_over = True
                    self.winner.winner_ids[player_id] = True
                    self.winner.end = True
                    break
            return self.winner.end

    def end_game(self, sock: socket.socket) -> None:
        log.info("Client disconnected")
        disconnect(sock)


def serve(host: str = "0.0.0.0", port: int = SERVER_PORT) -> None:
    """Accept clients forever, starting a game for every two that connect."""
    waiting: deque[socket.socket] = deque()
    with socket.create_server((host, port), backlog=socket.SOMAXCONN) as listener:
        log.info("Listening on %s:%d", host, port)
        while True:
            try:
                client, address = listener.accept()
            except ConnectionError:
                continue
            log.info("Client connected from %s", address)
            waiting.append(client)
            if len(waiting) >= 2:
                SessionManager().start_game(waiting.popleft(), waiting.popleft())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the race server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=SERVER_PORT)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        log.error("server failed: %s", exc)
        return 1
    return 0