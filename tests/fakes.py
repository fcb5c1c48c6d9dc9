"""Small stand-ins for requests.Session / Response."""

import json


class FakeResponse:
    def __init__(self, status_code=200, body=None, content=None):
        self.status_code = status_code
        self._body = body
        if content is None:
            content = b"" if body is None else json.dumps(body).encode()
        self.content = content

    def json(self):
        if self._body is None:
            return json.loads(self.content)
        return self._body


class FakeSession:
    """Stands in for requests.Session; records calls, replays canned responses."""

    def __init__(self, *responses, error=None):
        self.responses = list(responses)
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append(dict(method=method, url=url, **kwargs))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)
