# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""HTTP controllers. Each module exposes a ``router``."""
from typing import Any


def envelope(message: str, **payload: Any) -> dict[str, Any]:
    return {"message": message, **payload}
