from random import Random

from optres.adapters import choose, lookup, optional, parse
from optres.result import Empty, Failed, Present


class BrokenMapping(dict):
    def __getitem__(self, key):
        raise RuntimeError("storage offline")


def test_optional():
    assert optional(None) == Empty()
    assert optional(0) == Present(0)


def test_choose_is_deterministic_with_seed():
    pets = ["Rex", "Tom", "Bella"]
    a = [choose(pets, Random(1234)) for _ in range(3)]
    b = [choose(pets, Random(1234)) for _ in range(3)]
    assert a == b
    assert all(isinstance(r, Present) and r.value in pets for r in a)


def test_choose_empty_sequence():
    assert choose([], Random()) == Empty()


def test_lookup():
    ages = {"ada": 36}
    assert lookup(ages, "ada") == Present(36)
    assert lookup(ages, "bob") == Empty()

    r = lookup(BrokenMapping(), "ada")
    assert isinstance(r, Failed)
    assert r.error.message == "storage offline"


def test_parse():
    assert parse(int, "42") == Present(42)
    r = parse(int, "forty-two")
    assert isinstance(r, Failed)
    assert isinstance(r.error.cause, ValueError)
