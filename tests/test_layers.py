import pytest

from ironcat.layers import Layer, LayerList


class RecordingLayer(Layer):
    def __init__(self, name, log):
        super().__init__(name)
        self.log = log

    def on_detach(self):
        self.log.append(f"detach:{self.name}")


def test_layer_keeps_name():
    assert Layer("Background").name == "Background"


def test_layers_iterate_in_insertion_order():
    layers = LayerList()
    first, second, third = Layer("a"), Layer("b"), Layer("c")
    for layer in (first, second, third):
        layers.add(layer)
    assert list(layers) == [first, second, third]
    assert len(layers) == 3


def test_remove_takes_out_only_that_layer():
    layers = LayerList()
    first, second = Layer("a"), Layer("b")
    layers.add(first)
    layers.add(second)
    layers.remove(first)
    assert list(layers) == [second]


def test_remove_missing_layer_raises():
    layers = LayerList()
    layers.add(Layer("a"))
    with pytest.raises(ValueError):
        layers.remove(Layer("b"))


def test_close_detaches_all_and_empties():
    log = []
    layers = LayerList()
    layers.add(RecordingLayer("a", log))
    layers.add(RecordingLayer("b", log))
    layers.close()
    assert log == ["detach:a", "detach:b"]
    assert len(layers) == 0


def test_context_manager_closes():
    log = []
    with LayerList() as layers:
        layers.add(RecordingLayer("x", log))
        assert log == []
    assert log == ["detach:x"]


def test_iteration_is_safe_while_removing():
    layers = LayerList()
    first, second = Layer("a"), Layer("b")
    layers.add(first)
    layers.add(second)
    seen = []
    for layer in layers:
        seen.append(layer)
        if layer is first:
            layers.remove(second)
    assert seen == [first, second]
    assert list(layers) == [first]