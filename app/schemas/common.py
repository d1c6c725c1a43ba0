from typing import Any


def ok(data: Any = None, message: str = "OK") -> dict:
    """Success envelope shared by every endpoint."""
    return {"status": "success", "message": message, "data": data}
