from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .config import dlog
from .paths import normalize_path
from .upstream_client import AdminApiClient, UpstreamUnavailable


@dataclass
class BatchDeleteResult:
    succeeded: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict[str, List[str]]:
        return {"succeeded": list(self.succeeded), "failed": list(self.failed)}


def _delete_one(client: AdminApiClient, path: str) -> bool:
    if not path:
        return False
    try:
        return client.delete_link(path).ok
    except UpstreamUnavailable as e:
        dlog("batch_delete_unreachable", {"path": path, "error": str(e)})
        return False


def delete_many(client: AdminApiClient, paths: Iterable[str], max_workers: int = 1) -> BatchDeleteResult:
    """Delete each path independently; failures are collected, successes kept.

    Results are reported in input order whether the calls ran one at a
    time or on a bounded pool.
    """
    ordered: List[str] = []
    seen = set()
    for raw in paths:
        path = normalize_path(raw)
        if path in seen:
            continue
        seen.add(path)
        ordered.append(path)

    if max_workers <= 1 or len(ordered) <= 1:
        outcomes = [_delete_one(client, p) for p in ordered]
    else:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(ordered))) as pool:
            outcomes = list(pool.map(lambda p: _delete_one(client, p), ordered))

    result = BatchDeleteResult()
    for path, ok in zip(ordered, outcomes):
        (result.succeeded if ok else result.failed).append(path)
    dlog("batch_delete_result", result.to_dict())
    return result
