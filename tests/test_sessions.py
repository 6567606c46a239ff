"""Tests for the in-memory page session store."""

from payflow.sessions import SessionStore


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class TestSessionStore:
    def setup_method(self):
        self.clock = FakeClock()
        self.store = SessionStore(ttl=60, max_sessions=3, clock=self.clock)

    def test_size_is_bounded(self):
        ids = [self.store.create()[0] for _ in range(50)]

        assert len(self.store) == 3
        # oldest go first
        assert ids[-1] in self.store
        assert ids[0] not in self.store

    def test_idle_sessions_expire(self):
        old_id, _ = self.store.create()
        self.clock.now += 61
        new_id, _ = self.store.create()

        assert old_id not in self.store
        assert new_id in self.store
        assert self.store.get(old_id) is None

    def test_get_refreshes_session(self):
        session_id, session = self.store.create()
        self.clock.now += 50
        assert self.store.get(session_id) is session
        self.clock.now += 50

        assert self.store.get(session_id) is session

    def test_pop_removes_session(self):
        session_id, session = self.store.create()

        assert self.store.pop(session_id) is session
        assert self.store.pop(session_id) is None
        assert len(self.store) == 0

    def test_missing_ids(self):
        assert self.store.get(None) is None
        assert self.store.pop(None) is None
        assert self.store.get("unknown") is None
        self.store.discard("unknown")

    def test_put_back_after_pop(self):
        session_id, session = self.store.create()
        self.store.pop(session_id)

        self.store.put(session_id, session)

        assert self.store.get(session_id) is session
