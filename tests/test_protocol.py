import json

import pytest

from homerun.protocol import (
    Dir,
    GameOver,
    GameReady,
    InitCars,
    InitPlayer,
    InitRoads,
    InitWoods,
    ProtocolError,
    Toggle,
    UpdateData,
    WOODS_PER_ROW,
)


def test_dir_looked_up_from_wire_numbers():
    assert [Dir(value) for value in range(5)] == list(Dir)
    assert Dir(3) is Dir.NORTH


def test_toggle_looked_up_from_index():
    assert Toggle(10) is Toggle.END
    assert Toggle(2) is Toggle.NEAR_FAR


def test_game_ready_uses_four_space_indent():
    assert GameReady(True).to_json() == '{\n    "Ready": true\n}'


def test_game_ready_round_trip():
    assert GameReady.from_json(GameReady(True).to_json()) == GameReady(True)


def test_game_ready_missing_field():
    with pytest.raises(ProtocolError):
        GameReady.from_json("{}")


def test_invalid_json_is_protocol_error():
    with pytest.raises(ProtocolError):
        GameReady.from_json("not json")


def test_game_over_keys_and_round_trip():
    over = GameOver(True, [False, True])
    assert json.loads(over.to_json()) == {"End": True, "WinnerID": [False, True]}
    assert GameOver.from_json(over.to_json()) == over


def test_game_over_default_has_no_winner():
    assert GameOver().winner_ids == [False, False]
    assert GameOver().end is False


def test_game_over_requires_two_winner_slots():
    with pytest.raises(ProtocolError):
        GameOver.from_json('{"End": true, "WinnerID": [true]}')


def test_init_player_round_trip():
    assert InitPlayer.from_json(InitPlayer(1).to_json()).player_id == 1
    assert json.loads(InitPlayer(1).to_json()) == {"ID": 1}


def test_init_player_rejects_boolean_id():
    with pytest.raises(ProtocolError):
        InitPlayer.from_json('{"ID": true}')


def test_init_roads_round_trip():
    roads = InitRoads([True, False, False, True], [False, True])
    data = json.loads(roads.to_json())
    assert set(data) == {"Roads", "Dir"}
    assert InitRoads.from_json(roads.to_json()) == roads


def test_init_cars_round_trip():
    cars = InitCars([0.25, 0.5], [(0.0, 0.5, 1.0), (1.0, 1.0, 0.0)])
    back = InitCars.from_json(cars.to_json())
    assert back.velocities == cars.velocities
    assert back.colors == cars.colors


def test_init_cars_missing_rgb():
    with pytest.raises(ProtocolError):
        InitCars.from_json('{"Velocity": [0.1]}')


def test_init_cars_rgb_needs_three_components():
    with pytest.raises(ProtocolError):
        InitCars.from_json('{"Velocity": [0.1], "RGB": [[0.1, 0.2]]}')


def test_init_woods_round_trip():
    row = tuple(i % 2 == 0 for i in range(WOODS_PER_ROW))
    woods = InitWoods([row, tuple([False] * WOODS_PER_ROW)])
    assert InitWoods.from_json(woods.to_json()) == woods


def test_init_woods_row_length_checked():
    with pytest.raises(ProtocolError):
        InitWoods.from_json('{"Wood": [[true, false]]}')


def test_update_data_defaults():
    data = UpdateData()
    assert data.face_degree == 180.0
    assert (data.x, data.y, data.z, data.game_over) == (0.0, 0.0, 0.0, False)


def test_update_data_wire_keys():
    keys = set(json.loads(UpdateData().to_json()))
    assert keys == {"ID", "OtherPos_x", "OtherPos_y", "OtherPos_z", "OtherFace", "Over"}


def test_update_data_round_trip():
    data = UpdateData(1, 0.25, 2.0, -15.5, 90.0, True)
    assert UpdateData.from_json(data.to_json()) == data


def test_update_data_id_sent_as_boolean():
    assert json.loads(UpdateData(player_id=1).to_json())["ID"] is True


def test_update_data_copy_is_independent():
    data = UpdateData(0, 1.0, 2.0, 3.0)
    snapshot = data.copy()
    data.x = 9.0
    assert snapshot.x == 1.0
    assert snapshot == UpdateData(0, 1.0, 2.0, 3.0)


def test_update_data_bad_type():
    text = UpdateData().to_json().replace('"Over": false', '"Over": 3')
    with pytest.raises(ProtocolError):
        UpdateData.from_json(text)