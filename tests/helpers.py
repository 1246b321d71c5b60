"""Test doubles shared by the servicer tests."""


class AbortError(Exception):
    """Raised by FakeContext.abort, like grpc does on a real context."""


class FakeContext:
    """Minimal stand-in for grpc.ServicerContext."""

    def __init__(self):
        self.code = None
        self.details = None

    def abort(self, code, details):
        self.code = code
        self.details = details
        raise AbortError(code, details)
