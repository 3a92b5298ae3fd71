from __future__ import annotations

import pytest

from gaengine.foundation.registry import Registry


def test_register_as_call_and_as_decorator():
    reg: Registry[type] = Registry("Demo")
    reg.register("int", int)

    @reg.register("tuple")
    class Pair(tuple):
        pass

    assert reg.get("int") is int
    assert reg.get("tuple") is Pair
    assert reg.names() == ["int", "tuple"]
    assert "int" in reg and "float" not in reg
    assert len(reg) == 2
    assert list(reg) == ["int", "tuple"]


def test_duplicate_key_needs_override():
    reg: Registry[type] = Registry("Demo")
    reg.register("num", int)
    with pytest.raises(ValueError, match="already has an entry named 'num'"):
        reg.register("num", float)
    reg.register("num", float, override=True)
    assert reg.get("num") is float


def test_missing_key_names_the_registry():
    with pytest.raises(KeyError, match="Crossover registry has no entry named 'nope'"):
        Registry("Crossover").get("nope")
