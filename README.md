# homerun

A two-player race across rows of roads and grass. Each player's chicken starts
on the first grass row and heads home along the negative z axis, past cars
driving sideways and trees standing on the grass. The first player to reach
the goal line (z at or below -15) wins.

The package holds:

- a game **server** (`homerun.server`) that pairs up clients, builds a random
  world and relays player positions between the two players of a game;
- a network **client** (`homerun.client`) that joins a game, downloads the
  world and swaps position updates with the server;
- the **wire format** (`homerun.protocol`, `homerun.netio`);
- the **world model**: cars, roads, lane marks, grass, trees, the border and
  wall, the camera, the day-to-night light and the on-screen panel.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Start the server. It listens on TCP port 9000 of every interface and starts a
game, on its own threads, each time two clients have connected:

```
homerun-server
homerun-server --host 127.0.0.1 --port 9000
```

Start one client per player. It connects to `127.0.0.1:9000` unless told
otherwise:

```
homerun-client
homerun-client --host 192.0.2.10 --port 9000
```

Both commands return exit status 1 on a network error.

## How a game runs

1. The server sends each client four packets: its player id (`InitPlayer`),
   the rows (`InitRoads`), one car per road (`InitCars`) and the trees of each
   grass row (`InitWoods`).
2. Each client sends a ready packet (`GameReady`). When both players are
   ready, the server answers each with a ready packet of its own.
3. Then, about 30 times a second, each client sends its `UpdateData` and
   receives the other player's `UpdateData` followed by a `GameOver`.
4. Once a player's z reaches -15 the server marks that player as winner. The
   exchange stops when the winner's y has reached `MAX_HEIGHT` (4.0), and the
   connections are closed.

## Using the library

### Packets

Every message is a JSON document preceded by its byte length as a 4-byte
little-endian header. `homerun.netio` provides `send_packet`, `recv_packet`,
`send_start_flag`, `recv_start_flag` and `disconnect`. Malformed packets raise
`homerun.protocol.ProtocolError`; a connection closed in the middle of a
packet raises `ConnectionError`.

```python
from homerun.protocol import GameOver, UpdateData

update = UpdateData(player_id=1, x=0.07, z=-3.2)
same = UpdateData.from_json(update.to_json())

over = GameOver(end=True, winner_ids=[False, True])
```

### Building a world

```python
import random
from homerun.server import generate_world

world = generate_world(random.Random(7))
world.roads.roads     # True for a grass row, False for a road row
world.cars.velocities # one velocity per road row
world.woods.rows      # twelve tree slots per grass row
```

The course has 150 rows starting with grass, runs of 5 to 10 roads separated
by single grass rows, and ten more grass rows at the end.

### Driving a client from code

```python
from homerun.client import GameClient

client = GameClient("127.0.0.1", 9000)
client.connect()                    # downloads the world
client.player_data[0].z = -1.0      # our own position, sent on each exchange
client.update_world()               # ready handshake, then exchange until the race ends
```

`GameClient.exchange()` performs a single round and returns `True` once the
race has finished. The opponent's three most recent updates are kept in
`client.enemy_queue`, a thread-safe `PlayerQueue` (`homerun.playerqueue`)
with `enqueue`, `dequeue`, `front`, `second`, `clear` and `len()`.

### World objects

All scene objects derive from `homerun.basis.BasisComponent`: a unit cube with
a position (`x`, `y`, `z`), a size (`sx`, `sy`, `sz`), a colour, and
`boundaries()`, `overlaps(other)`, `world_matrix()` and `update(dt)`.

- `homerun.traffic`: `Road(index, car_dir)` with `create_car(speed, rgb)` and
  `create_lanes()`; `Car`, whose `update(dt)` drives its body and its parts
  across the road, wrapping round at the far edge; `RoadLane`.
- `homerun.carparts`: `CarPart` and `build_car_parts(direction, index, velocity)`
  for the cabin, window, four wheels and four hubs of a car.
- `homerun.nature`: `Grass`, `Wood`, `WoodLeaf` and `plant_tree(x_idx, z_idx)`,
  which returns a trunk and three spinning leaf blocks.
- `homerun.scenery`: the `Border` frame and the side `Wall`.
- `homerun.camera.Camera`: third-person, first-person, chicken and border view
  matrices and the perspective projection, as numpy arrays.
- `homerun.light.Light`: `update(chicken_z)` shifts the light colour from white
  to sunset over the first 7 units and towards night up to 20 units.
- `homerun.ui`: `Panel`, a screen quad with `resize`, `move`, `contains` and
  `change_image` (which checks that a PNG file is RGB or RGBA), and
  `window_to_gl` for pixel to screen coordinates.
- `homerun.basis` also has the matrix helpers `translate`, `rotate`, `scale`,
  `look_at` and `perspective`; `homerun.geometry` has the cube mesh and
  `homerun.timer.FrameTimer` measures time between frames.

## What this package does not do

- There is no game window, rendering or sound. The camera, light, panel and
  scene objects compute positions, colours and matrices only; nothing draws
  them, and `Panel.change_image` reads a PNG file's header, not its pixels.
- There is no keyboard control and no chicken: nothing moves a player or
  checks it against cars and trees. The `homerun-client` command sends its
  starting position on every round, so a race between two such clients never
  reaches the goal. Code that uses `GameClient` must set
  `player_data[0]` itself.