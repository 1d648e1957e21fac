"""Response Messages: fixed user-facing strings returned by the API.

Invariants:
    - All strings are pure data (no IO, no computation)
    - Error messages never carry internal details
"""

ROOT_MESSAGE = "Servidor Express funcionando!"
HELLO_MESSAGE = "Hello, World!"
STATUS_ONLINE = "online"

ROUTE_NOT_FOUND_MESSAGE = "Rota não encontrada"
INTERNAL_ERROR_MESSAGE = "Algo deu errado!"


def startup_message(port: int) -> str:
    """Log line emitted once the listener is up."""
    return f"Servidor rodando na porta {port}"
