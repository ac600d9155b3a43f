"""A scripted stand-in for the Joplin service behind a mocked session."""

import json
from collections import defaultdict, deque
from typing import Any, Dict, List, Tuple
from unittest.mock import MagicMock
from urllib.parse import urlparse

import requests


def make_response(status: int = 200, body: Any = None) -> MagicMock:
    """Build a mock ``requests.Response``."""
    resp = MagicMock()
    resp.status_code = status
    if isinstance(body, (dict, list)):
        text = json.dumps(body)
        resp.json.return_value = body
    else:
        text = body or ""
        resp.json.side_effect = ValueError("not json")
    resp.text = text
    resp.content = text.encode("utf-8")
    return resp


class FakeJoplin:
    """
    Route ``session.request`` calls by port, method and path.

    Ports outside ``live_ports`` refuse connections. Routes are queues of
    responses; the last response of a queue repeats once the others are used.
    """

    def __init__(self, live_ports=(41184,)):
        self.live_ports = set(live_ports)
        self.routes: Dict[Tuple[str, str], deque] = defaultdict(deque)
        self.calls: List[Dict[str, Any]] = []
        self.session = MagicMock(spec=requests.Session)
        self.session.request.side_effect = self._handle
        self.add("GET", "/ping", make_response(200, "JoplinClipperServer"))

    def add(self, method: str, path: str, *responses: MagicMock) -> None:
        self.routes[(method, path)].extend(responses)

    def add_json(self, method: str, path: str, *bodies: Any) -> None:
        self.add(method, path, *(make_response(200, b) for b in bodies))

    def requests_to(self, method: str, path: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["method"] == method and c["path"] == path]

    def _handle(self, method, url, params=None, json=None, timeout=None):
        parsed = urlparse(url)
        self.calls.append(
            {
                "method": method,
                "port": parsed.port,
                "path": parsed.path,
                "params": dict(params or {}),
                "json": json,
                "timeout": timeout,
            }
        )
        if parsed.port not in self.live_ports:
            raise requests.ConnectionError(f"Connection refused: {url}")
        queue = self.routes.get((method, parsed.path))
        if not queue:
            return make_response(404, {"error": "Not Found"})
        if len(queue) > 1:
            return queue.popleft()
        return queue[0]
