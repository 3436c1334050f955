"""Ciclo de vida do cliente Discord.

Login, espera pelo evento ``ready`` e encerramento do cliente. Erros
assíncronos da conexão (gateway) podem chegar a qualquer momento depois do
login; por isso a operação principal roda em paralelo com a task de conexão
e quem terminar primeiro decide o resultado.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar, Union

import discord

from .config import NotifierConfig
from .errors import ClientFaultError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ready:
    """Login concluído; ``connection`` é a task que mantém o gateway."""

    connection: asyncio.Task


@dataclass(frozen=True)
class AsyncFault:
    """A conexão falhou antes do evento ``ready``."""

    error: BaseException
    connection: asyncio.Task


AuthOutcome = Union[Ready, AsyncFault]


def create_client() -> discord.Client:
    """Cria cliente Discord com o mínimo de intents (apenas DMs)."""
    intents = discord.Intents.none()
    intents.dm_messages = True
    return discord.Client(intents=intents)


def _connection_error(connection: asyncio.Task) -> BaseException:
    """Extrai o erro de uma task de conexão já finalizada."""
    if connection.cancelled():
        return ConnectionError("conexão com o Discord cancelada")
    error = connection.exception()
    if error is None:
        return ConnectionError("conexão com o Discord encerrada inesperadamente")
    return error


async def _settle(task: asyncio.Task) -> None:
    """Cancela (se preciso) e aguarda uma task sem propagar seu resultado."""
    if not task.done():
        task.cancel()
    await asyncio.gather(task, return_exceptions=True)


async def authenticate(client: discord.Client, token: str) -> AuthOutcome:
    """Faz login e aguarda o evento ``ready`` ou uma falha, o que vier primeiro.

    Args:
        client: Cliente Discord (já dentro de ``async with``).
        token: Token do bot.

    Returns:
        ``Ready`` se o cliente ficou pronto; ``AsyncFault`` se a conexão
        falhou antes disso.
    """
    connection = asyncio.create_task(client.start(token), name="discord-connection")
    ready = asyncio.create_task(client.wait_until_ready(), name="discord-ready")

    done, _ = await asyncio.wait({connection, ready}, return_when=asyncio.FIRST_COMPLETED)

    if connection in done:
        await _settle(ready)
        return AsyncFault(error=_connection_error(connection), connection=connection)

    error = ready.exception()
    if error is not None:
        return AsyncFault(error=error, connection=connection)
    return Ready(connection=connection)


async def run_with_client(
    config: NotifierConfig,
    operation: Callable[[discord.Client], Awaitable[T]],
    *,
    platform_exit_code: int,
) -> T:
    """Executa ``operation`` com um cliente autenticado e o encerra ao final.

    O cliente é fechado exatamente uma vez em qualquer caminho (sucesso,
    erro da operação ou erro assíncrono da conexão).

    Args:
        config: Configuração validada.
        operation: Corrotina que recebe o cliente pronto.
        platform_exit_code: Código de saída para erros do cliente.

    Returns:
        O resultado de ``operation``.

    Raises:
        ClientFaultError: Se a conexão falhar antes ou durante a operação.
    """
    client = create_client()
    connection: asyncio.Task | None = None

    try:
        async with client:
            outcome = await authenticate(client, config.bot_token)
            connection = outcome.connection

            if isinstance(outcome, AsyncFault):
                raise ClientFaultError(
                    f"Erro do cliente Discord: {outcome.error}",
                    exit_code=platform_exit_code,
                ) from outcome.error

            logger.info("Logado como: %s (id=%s)", client.user, client.user.id)

            work = asyncio.create_task(operation(client), name="discord-operation")
            done, _ = await asyncio.wait({work, connection}, return_when=asyncio.FIRST_COMPLETED)

            if work in done:
                return work.result()

            await _settle(work)
            error = _connection_error(connection)
            logger.error("Erro do cliente Discord durante a operação: %s", error)
            raise ClientFaultError(
                f"Erro do cliente Discord: {error}", exit_code=platform_exit_code
            ) from error
    finally:
        if connection is not None:
            await _settle(connection)
