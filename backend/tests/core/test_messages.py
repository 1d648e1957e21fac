"""Response message tests: fixed public strings."""

from app.core import messages


def test_public_messages():
    assert messages.ROOT_MESSAGE == "Servidor Express funcionando!"
    assert messages.HELLO_MESSAGE == "Hello, World!"
    assert messages.ROUTE_NOT_FOUND_MESSAGE == "Rota não encontrada"
    assert messages.INTERNAL_ERROR_MESSAGE == "Algo deu errado!"


def test_startup_message_names_port():
    assert messages.startup_message(8080) == "Servidor rodando na porta 8080"
