import pytest

from homerun.carparts import SPAWN_X, CarPart
from homerun.protocol import MINUS, PLUS
from homerun.traffic import Car, Road, RoadLane


@pytest.mark.parametrize("direction", [PLUS, MINUS])
def test_car_spawns_on_its_side(direction):
    car = Car(direction, 4, 0.2, (0.1, 0.2, 0.3))
    assert car.x == pytest.approx(-SPAWN_X * direction)
    assert car.z == pytest.approx(car.parts[0].z)


def test_car_has_ten_parts_sharing_its_lane():
    car = Car(PLUS, 3, 0.2)
    assert len(car.parts) == 10
    assert all(isinstance(p, CarPart) for p in car.parts)
    assert all(p.index == car.index and p.direction == car.direction for p in car.parts)


def test_car_body_colour_and_cabin_colour():
    car = Car(PLUS, 1, 0.2, (0.25, 0.5, 0.75))
    assert car.color == (0.25, 0.5, 0.75)
    middle = next(p for p in car.parts if p.kind == "middle")
    assert middle.color == car.color


def test_car_moves_by_velocity_times_dt():
    car = Car(MINUS, 2, 0.3)
    start = car.x
    car.move(0.5)
    assert car.x == pytest.approx(start + 0.3 * MINUS * 0.5)


@pytest.mark.parametrize("direction", [PLUS, MINUS])
def test_car_wraps_round(direction):
    car = Car(direction, 2, 1.0)
    car.move(2.0)
    assert car.x == pytest.approx(-SPAWN_X * direction)


def test_car_update_moves_parts_too():
    car = Car(PLUS, 2, 0.2)
    before = [p.x for p in car.parts]
    car.update(0.1)
    after = [p.x for p in car.parts]
    for b, a in zip(before, after):
        assert a - b == pytest.approx(0.2 * 0.1)


def test_car_rejects_bad_direction():
    with pytest.raises(ValueError):
        Car(0, 1, 0.1)


def test_car_rejects_bad_colour():
    with pytest.raises(ValueError):
        Car(PLUS, 1, 0.1, (1.0, 1.0))


def test_road_spawn_direction():
    assert Road(3, False).car_direction == PLUS
    assert Road(3, True).car_direction == MINUS


def test_road_position_follows_index():
    road = Road(7)
    assert road.z == pytest.approx(-7 * road.sz)
    assert Road(0).z == pytest.approx(0.0)


def test_road_creates_car_on_itself():
    road = Road(5, True)
    car = road.create_car(0.3, (0.5, 0.5, 0.5))
    assert car.direction == MINUS
    assert car.index == 5
    assert car.velocity == pytest.approx(0.3)


def test_road_lanes():
    road = Road(6)
    lanes = road.create_lanes()
    assert len(lanes) == 10
    assert all(isinstance(lane, RoadLane) for lane in lanes)
    xs = [lane.x for lane in lanes]
    assert all(b > a for a, b in zip(xs, xs[1:]))
    assert all(lane.z == pytest.approx(road.z - road.sz / 2) for lane in lanes)


def test_lane_spacing_is_even():
    a, b = RoadLane(1, 2), RoadLane(2, 2)
    c = RoadLane(3, 2)
    assert b.x - a.x == pytest.approx(c.x - b.x)