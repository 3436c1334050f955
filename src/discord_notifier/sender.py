"""Envio de mensagens diretas (DM) pelo bot."""

import logging

import discord

from .constants import SendExitCode
from .errors import DeliveryError, RecipientNotFoundError

logger = logging.getLogger(__name__)


async def resolve_recipient(client: discord.Client, user_id: int, *, exit_code: int) -> discord.User:
    """Busca o usuário destinatário na API do Discord.

    Args:
        client: Cliente Discord pronto.
        user_id: ID do usuário.
        exit_code: Código de saída usado se a busca falhar.

    Raises:
        RecipientNotFoundError: Se o usuário não existir.
        DeliveryError: Se a API falhar por outro motivo.
    """
    try:
        user = await client.fetch_user(user_id)
    except discord.NotFound as e:
        raise RecipientNotFoundError(
            f"Usuário {user_id} não encontrado", exit_code=exit_code
        ) from e
    except discord.HTTPException as e:
        raise DeliveryError(
            f"Falha ao buscar usuário {user_id}: {e}", exit_code=exit_code
        ) from e

    return user


async def send_dm(client: discord.Client, user_id: int, message: str) -> None:
    """Envia ``message`` como DM para ``user_id``. Uma única tentativa.

    Raises:
        RecipientNotFoundError: Se o usuário não existir.
        DeliveryError: Se o envio falhar (permissão, DMs fechadas, erro da API).
    """
    user = await resolve_recipient(client, user_id, exit_code=SendExitCode.DISCORD_ERROR)

    try:
        await user.send(message)
    except discord.HTTPException as e:
        raise DeliveryError(
            f"Falha ao enviar DM: {e}", exit_code=SendExitCode.DISCORD_ERROR
        ) from e

    logger.info("DM enviada para %s (id=%s)", user, user_id)
