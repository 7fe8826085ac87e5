"""
Test doubles for the quote provider collaborators.
"""
import copy

API_URL = "https://frinkiac.com/api/random"

SAMPLE_PAYLOAD = {
    "Episode": {
        "Id": 233,
        "Key": "S12E09",
        "Season": 12,
        "EpisodeNumber": 9,
        "Title": "Trilogy of Error",
        "Director": "Mike B. Anderson",
        "Writer": "Matt Selman",
        "OriginalAirDate": "29-Apr-01",
    },
    "Frame": {"Id": 1034219, "Episode": "S12E09", "Timestamp": 54321},
    "Subtitles": [
        {"Id": 153001, "Episode": "S12E09", "Content": "D'oh!", "StartTimestamp": 53900},
        {"Id": 153002, "Episode": "S12E09", "Content": "Woo-hoo!", "StartTimestamp": 55100},
    ],
    "Nearby": [],
}


class FakeClock:
    """Clock the tests move by hand."""

    def __init__(self, now=1_000_000.0):
        self.now = now

    def advance(self, seconds):
        self.now += seconds


class FakeCache:
    """In-memory stand-in for Django's cache API with TTLs on a FakeClock."""

    def __init__(self, clock):
        self.clock = clock
        self._data = {}
        self.set_calls = []

    def get(self, key, default=None):
        entry = self._data.get(key)
        if entry is None:
            return default
        value, expires_at = entry
        if expires_at is not None and self.clock.now >= expires_at:
            del self._data[key]
            return default
        return copy.deepcopy(value)

    def set(self, key, value, timeout=None):
        expires_at = None if timeout is None else self.clock.now + timeout
        self._data[key] = (copy.deepcopy(value), expires_at)
        self.set_calls.append((key, timeout))

    def delete(self, key):
        self._data.pop(key, None)

    def __contains__(self, key):
        return self.get(key) is not None


class FakeOptions:
    """Dict-backed option store."""

    def __init__(self, **values):
        self.values = dict(values)

    def get(self, name, default=None):
        return self.values.get(name, default)

    def set(self, name, value):
        self.values[name] = str(value)


class StubClient:
    """Records calls and returns queued payloads or raises queued errors."""

    def __init__(self, *responses):
        self.responses = list(responses) or [SAMPLE_PAYLOAD]
        self.calls = 0

    def get_random(self):
        self.calls += 1
        response = self.responses[min(self.calls, len(self.responses)) - 1]
        if isinstance(response, Exception):
            raise response
        return copy.deepcopy(response)
