import pytest

from citybuild.enums import (
    ALL_LAYERS_ORDERED,
    LAYERS_IN_ACTIVE_ORDER,
    Layer,
    powerlines_can_cross,
)


@pytest.mark.parametrize("layer", list(Layer))
def test_layer_round_trips_through_its_value(layer):
    assert Layer(int(layer)) is layer


def test_layer_none_is_zero():
    assert Layer(0) is Layer.NONE


def test_layer_count_is_last_value():
    assert Layer(14) is Layer.LAYERS_COUNT


@pytest.mark.parametrize(
    "value, layer",
    [(3, Layer.TERRAIN), (5, Layer.ROAD), (8, Layer.BUILDINGS), (10, Layer.FLORA)],
)
def test_layer_values(value, layer):
    assert Layer(value) is layer


def test_layer_rejects_unknown_value():
    with pytest.raises(ValueError):
        Layer(99)


def test_crossable_layers_in_drawing_order():
    crossable = [layer for layer in ALL_LAYERS_ORDERED if powerlines_can_cross(layer)]
    assert crossable == [Layer.WATER, Layer.ROAD, Layer.FLORA]


def test_crossable_layers_in_active_order():
    crossable = [
        layer for layer in LAYERS_IN_ACTIVE_ORDER if powerlines_can_cross(layer)
    ]
    assert crossable == [Layer.ROAD, Layer.FLORA, Layer.WATER]


@pytest.mark.parametrize("layer", [Layer.ROAD, Layer.WATER, Layer.FLORA])
def test_powerlines_cross(layer):
    assert powerlines_can_cross(layer) is True


@pytest.mark.parametrize(
    "layer", [Layer.BUILDINGS, Layer.TERRAIN, Layer.ZONE, Layer.POWERLINES]
)
def test_powerlines_do_not_cross(layer):
    assert powerlines_can_cross(layer) is False


def test_powerlines_can_cross_accepts_int():
    assert powerlines_can_cross(int(Layer.ROAD)) is True


def test_powerlines_can_cross_rejects_unknown_value():
    with pytest.raises(ValueError):
        powerlines_can_cross(99)