"""Validation helpers."""

def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def ensure_port(port: object) -> int:
    ensure(
        isinstance(port, int) and not isinstance(port, bool),
        f"port must be an integer, got {port!r}",
    )
    ensure(1 <= port <= 65535, f"port out of range: {port}")
    return port
