import threading
import time

from linkconsole.batch import BatchDeleteResult, delete_many
from linkconsole.upstream_client import ParsedJson, UpstreamResult, UpstreamUnavailable


class FakeClient:
    def __init__(self, failing=(), unreachable=(), delay=0.0):
        self.failing = set(failing)
        self.unreachable = set(unreachable)
        self.delay = delay
        self.calls = []
        self.lock = threading.Lock()

    def delete_link(self, path):
        with self.lock:
            self.calls.append(path)
        if self.delay:
            time.sleep(self.delay)
        if path in self.unreachable:
            raise UpstreamUnavailable("connection reset")
        status = 500 if path in self.failing else 200
        return UpstreamResult(status_code=status, body=ParsedJson({}))


def test_sequential_partial_failure():
    client = FakeClient(failing={"b"})
    result = delete_many(client, ["a", "b", "c"])
    assert result.failed == ["b"]
    assert result.succeeded == ["a", "c"]
    assert client.calls == ["a", "b", "c"]
    assert not result.all_succeeded


def test_unreachable_counts_as_failure():
    client = FakeClient(unreachable={"a"})
    result = delete_many(client, ["a", "b"])
    assert result.to_dict() == {"succeeded": ["b"], "failed": ["a"]}


def test_paths_are_normalized_and_deduplicated():
    client = FakeClient()
    result = delete_many(client, ["/a/", "a", "b", "  "])
    assert client.calls == ["a", "b"]
    assert result.succeeded == ["a", "b"]
    assert result.failed == [""]


def test_worker_pool_keeps_input_order():
    paths = [f"p{i}" for i in range(8)]
    client = FakeClient(failing={"p1", "p6"}, delay=0.01)
    result = delete_many(client, paths, max_workers=4)
    assert sorted(client.calls) == sorted(paths)
    assert result.failed == ["p1", "p6"]
    assert result.succeeded == [p for p in paths if p not in {"p1", "p6"}]


def test_empty_result():
    result = BatchDeleteResult()
    assert result.all_succeeded
    assert result.to_dict() == {"succeeded": [], "failed": []}
