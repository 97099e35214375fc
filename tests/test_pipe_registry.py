import pytest

from oracompat.pipe_registry import MAX_PIPES, PipeError, PipeRegistry


@pytest.fixture
def registry():
    return PipeRegistry()


def _names(registry):
    return [info.name for info in registry.list_pipes()]


def test_messages_come_out_in_order(registry):
    assert registry.send("p", "one", 3)
    assert registry.send("p", "two", 3)
    assert registry.receive("p") == "one"
    assert registry.receive("p") == "two"
    assert registry.receive("p") is None


def test_implicit_pipe_disappears_when_drained(registry):
    registry.send("p", "m", 10)
    assert _names(registry) == ["p"]
    registry.receive("p")
    assert _names(registry) == []


def test_receive_on_unknown_pipe_creates_empty_pipe(registry):
    assert registry.receive("ghost") is None
    infos = registry.list_pipes()
    assert [(i.name, i.items) for i in infos] == [("ghost", 0)]


def test_registered_pipe_survives_draining(registry):
    registry.create_pipe("reg")
    registry.send("reg", "m", 4)
    assert registry.receive("reg") == "m"
    assert _names(registry) == ["reg"]


def test_send_without_message_registers(registry):
    assert registry.send("reg", None)
    registry.send("reg", "m", 1)
    registry.receive("reg")
    assert _names(registry) == ["reg"]


def test_limit_refuses_extra_messages(registry):
    assert registry.send("p", "a", 1, limit=2)
    assert registry.send("p", "b", 1)
    assert not registry.send("p", "c", 1)
    info = registry.list_pipes()[0]
    assert info.items == 2
    assert info.limit == 2


def test_limit_can_only_grow_on_existing_pipe(registry):
    registry.create_pipe("p", limit=3)
    registry.send("p", "a", 1, limit=1)
    assert registry.list_pipes()[0].limit == 3
    registry.send("p", "b", 1, limit=5)
    assert registry.list_pipes()[0].limit == 5


def test_size_tracks_messages(registry):
    registry.send("p", "a", 100)
    registry.send("p", "b", 50)
    assert registry.list_pipes()[0].size == 150
    registry.receive("p")
    assert registry.list_pipes()[0].size == 50


def test_unlimited_pipe_reports_no_limit(registry):
    registry.send("p", "a", 1)
    assert registry.list_pipes()[0].limit is None


def test_duplicate_create_fails(registry):
    registry.create_pipe("p")
    with pytest.raises(PipeError, match="pipe creation error"):
        registry.create_pipe("p")


def test_private_pipe_rejects_other_user(registry):
    registry.create_pipe("secret_pipe", private=True, user="alice")
    info = registry.list_pipes()[0]
    assert info.private is True
    assert info.owner == "alice"
    with pytest.raises(PipeError, match="insufficient privilege"):
        registry.send("secret_pipe", "m", 1, user="bob")
    assert registry.send("secret_pipe", "m", 1, user="alice")
    assert registry.receive("secret_pipe", user="alice") == "m"


def test_no_free_slot(registry):
    small = PipeRegistry(max_pipes=1)
    assert small.send("a", "m", 1)
    assert not small.send("b", "m", 1)
    with pytest.raises(PipeError, match="lock request error"):
        small.create_pipe("c")
    assert _names(small) == ["a"]


def test_failed_send_to_new_pipe_leaves_no_pipe(registry):
    assert not registry.send("p", "m", 1, limit=0)
    assert _names(registry) == []


def test_purge_keeps_registered_pipe(registry):
    registry.create_pipe("p")
    registry.send("p", "a", 7)
    registry.remove_pipe("p", purge=True)
    info = registry.list_pipes()[0]
    assert (info.name, info.items, info.size) == ("p", 0, 0)


def test_purge_drops_implicit_pipe(registry):
    registry.send("p", "a", 7)
    registry.remove_pipe("p", purge=True)
    assert _names(registry) == []


def test_remove_drops_registered_pipe(registry):
    registry.create_pipe("p")
    registry.remove_pipe("p")
    assert _names(registry) == []
    registry.remove_pipe("missing")
    assert _names(registry) == []


def test_null_name_rejected(registry):
    with pytest.raises(PipeError, match="pipe name is NULL"):
        registry.send(None, "m", 1)


def test_session_ids_increase(registry):
    first = registry.new_session_id()
    second = registry.new_session_id()
    assert first == 1
    assert second == first + 1


def test_default_capacity(registry):
    for i in range(MAX_PIPES):
        assert registry.send(f"p{i}", "m", 1)
    assert not registry.send("overflow", "m", 1)
    assert len(registry.list_pipes()) == MAX_PIPES