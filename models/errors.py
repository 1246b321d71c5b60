"""
models/errors.py
----------------
Domain-level errors shared by every layer.
"""


class NotFoundError(Exception):
    """No row matched the requested identifier."""

    def __init__(self, entity: str = "record", ident=None):
        self.entity = entity
        self.ident = ident
        if ident is None:
            super().__init__(f"{entity} not found")
        else:
            super().__init__(f"{entity} {ident} not found")
