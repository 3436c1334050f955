"""Leitura da mensagem a enviar via stdin."""

import asyncio
import logging
import sys
from typing import BinaryIO

from .constants import SendExitCode
from .errors import EmptyInputError, InputStreamError

logger = logging.getLogger(__name__)


async def read_message(stream: BinaryIO | None = None) -> str:
    """Lê stdin até o EOF e devolve o texto sem espaços nas pontas.

    A leitura bloqueante roda fora do event loop (``asyncio.to_thread``).

    Args:
        stream: Stream binário a ler (padrão: ``sys.stdin.buffer``).

    Returns:
        Mensagem decodificada como UTF-8, com ``strip()`` aplicado.

    Raises:
        EmptyInputError: Se não houver texto depois do ``strip()``.
        InputStreamError: Se a leitura ou a decodificação falhar.
    """
    source = stream if stream is not None else sys.stdin.buffer

    try:
        raw = await asyncio.to_thread(source.read)
        text = raw.decode("utf-8")
    except (OSError, ValueError) as e:
        # UnicodeDecodeError é subclasse de ValueError
        raise InputStreamError(
            f"Falha ao ler stdin: {e}", exit_code=SendExitCode.STDIN_ERROR
        ) from e

    message = text.strip()
    if not message:
        raise EmptyInputError(
            "Nenhuma mensagem recebida via stdin", exit_code=SendExitCode.NO_MESSAGE
        )

    logger.debug("Mensagem lida do stdin (%s caracteres)", len(message))
    return message
