import pytest

from core.models import ShellResult


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool and resource registration."""

    def __init__(self) -> None:
        self.tools = {}
        self.resources = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator

    def resource(self, uri: str, **kwargs):
        def _decorator(fn):
            self.resources[uri] = fn
            return fn
        return _decorator


class FakeExecutor:
    """ShellExecutor double: answers from a callable, records every call."""

    def __init__(self, respond=None):
        self.respond = respond or (lambda args: ShellResult())
        self.calls = []

    def run(self, args, *, cwd=None):
        self.calls.append((list(args), cwd))
        out = self.respond(list(args))
        if isinstance(out, BaseException):
            raise out
        return out


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def fake_executor():
    return FakeExecutor()
