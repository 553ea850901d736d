import pytest

from chwire.tls_config import deregister_tls_config, get_tls_config, register_tls_config

KEY = "custom"


@pytest.fixture(autouse=True)
def _clean_registry():
    yield
    deregister_tls_config(KEY)
    deregister_tls_config("other")


def test_missing_key_returns_none():
    assert get_tls_config("never-registered") is None


def test_register_and_get_returns_equal_copy():
    config = {"verify": False, "server_name": "localhost"}
    register_tls_config(KEY, config)
    fetched = get_tls_config(KEY)
    assert fetched == config
    assert fetched is not config


def test_mutating_copy_does_not_change_registry():
    register_tls_config(KEY, {"verify": True})
    fetched = get_tls_config(KEY)
    fetched["verify"] = False
    assert get_tls_config(KEY) == {"verify": True}


def test_register_replaces_previous():
    register_tls_config(KEY, {"n": 1})
    register_tls_config(KEY, {"n": 2})
    assert get_tls_config(KEY) == {"n": 2}


def test_deregister_removes_entry():
    register_tls_config(KEY, {"n": 1})
    deregister_tls_config(KEY)
    assert get_tls_config(KEY) is None


def test_deregister_missing_key_leaves_others():
    register_tls_config("other", {"n": 3})
    deregister_tls_config(KEY)
    assert get_tls_config(KEY) is None
    assert get_tls_config("other") == {"n": 3}


def test_uncopyable_object_returned_as_is():
    class Uncopyable:
        def __reduce_ex__(self, protocol):
            raise TypeError("cannot copy")

    config = Uncopyable()
    register_tls_config(KEY, config)
    assert get_tls_config(KEY) is config