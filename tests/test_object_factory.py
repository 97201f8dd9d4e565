import pytest

from mettle import object_factory


def test_make_calls_registered_function():
    factory = object_factory.ObjectFactory()
    factory.add("pair", lambda a, b=0: (a, b))
    assert factory.make("pair", 1, b=2) == (1, 2)
    assert factory.make("pair", 3) == (3, 0)


def test_unknown_name_raises_key_error():
    factory = object_factory.ObjectFactory()
    factory.add("brief", lambda: "brief")
    with pytest.raises(KeyError):
        factory.make("verbose")


def test_add_keeps_first_registration():
    factory = object_factory.ObjectFactory()
    factory.add("name", lambda: "first")
    factory.add("name", lambda: "second")
    assert factory.make("name") == "first"
    assert len(factory) == 1


def test_iteration_is_sorted_by_name():
    factory = object_factory.ObjectFactory()
    for name in ("xunit", "brief", "silent", "counter", "verbose"):
        factory.add(name, lambda n=name: n)
    names = [name for name, _ in factory]
    assert names == sorted(names)
    assert names == ["brief", "counter", "silent", "verbose", "xunit"]


def test_iterated_functions_match_names():
    factory = object_factory.ObjectFactory()
    for name in ("b", "a"):
        factory.add(name, lambda n=name: n.upper())
    assert [(name, func()) for name, func in factory] == \
        [("a", "A"), ("b", "B")]


def test_contains():
    factory = object_factory.ObjectFactory()
    factory.add("silent", lambda: None)
    assert "silent" in factory
    assert "brief" not in factory