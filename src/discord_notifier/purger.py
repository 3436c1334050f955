"""Módulo de purge do discord-notifier.

Apaga todas as mensagens enviadas pelo bot na DM com o destinatário
configurado, página a página, do mais recente para o mais antigo.
"""

import logging

import discord

from .constants import (
    BATCH_SIZE,
    DELETE_DELAY_SECONDS,
    MISSING_ACCESS_CODE,
    MISSING_PERMISSIONS_CODE,
    PurgeExitCode,
)
from .errors import PurgeError, RateLimitError
from .sender import resolve_recipient
from .utils import safe_sleep

logger = logging.getLogger(__name__)

_FAULT_MESSAGES = {
    "rate_limited": "Rate limit do Discord atingido",
    "missing_access": "Sem acesso para apagar mensagens (código 50001)",
    "missing_permissions": "Sem permissão para apagar mensagens (código 50013)",
}


def classify_delete_fault(error: Exception) -> str | None:
    """Classifica uma falha de exclusão que deve interromper o purge.

    O Discord usa o mesmo tipo de erro (403) tanto para falta de acesso
    quanto para falta de permissão; o código da API distingue os dois.

    Returns:
        ``"rate_limited"``, ``"missing_access"``, ``"missing_permissions"``
        ou None se a falha afeta só a mensagem atual.
    """
    if isinstance(error, discord.RateLimited):
        return "rate_limited"
    if not isinstance(error, discord.HTTPException):
        return None
    if error.status == 429:
        return "rate_limited"
    if error.code == MISSING_ACCESS_CODE:
        return "missing_access"
    if error.code == MISSING_PERMISSIONS_CODE:
        return "missing_permissions"
    return None


async def purge_bot_messages(
    client: discord.Client,
    user_id: int,
    *,
    batch_size: int = BATCH_SIZE,
    delay: float = DELETE_DELAY_SECONDS,
    dry_run: bool = False,
) -> int:
    """Apaga as mensagens do bot na DM com ``user_id``.

    Args:
        client: Cliente Discord pronto.
        user_id: ID do usuário dono da conversa.
        batch_size: Mensagens por página.
        delay: Espera (segundos) após cada exclusão bem-sucedida.
        dry_run: Se True, só conta o que seria apagado.

    Returns:
        Quantidade de mensagens apagadas.

    Raises:
        RateLimitError: Em rate limit ou falta de permissão; as mensagens já
            apagadas não são restauradas (``deleted_count``).
        PurgeError: Se abrir a DM ou buscar uma página falhar.
    """
    user = await resolve_recipient(client, user_id, exit_code=PurgeExitCode.DISCORD_ERROR)
    try:
        channel = await user.create_dm()
    except discord.HTTPException as e:
        raise PurgeError(
            f"Falha ao abrir DM com {user_id}: {e}",
            exit_code=PurgeExitCode.DISCORD_ERROR,
            deleted_count=0,
        ) from e
    bot_id = client.user.id

    deleted = 0
    cursor: int | None = None

    while True:
        before = discord.Object(id=cursor) if cursor is not None else None
        try:
            page = [m async for m in channel.history(limit=batch_size, before=before)]
        except discord.HTTPException as e:
            raise PurgeError(
                f"Falha ao buscar mensagens da DM: {e}",
                exit_code=PurgeExitCode.DISCORD_ERROR,
                deleted_count=deleted,
            ) from e
        logger.debug("Página com %s mensagens (before=%s)", len(page), cursor)
        if not page:
            break

        for message in page:
            if message.author.id != bot_id:
                continue

            if dry_run:
                logger.info("[dry-run] Apagaria mensagem ID: %s", message.id)
                deleted += 1
                continue

            try:
                await message.delete()
            except discord.DiscordException as e:
                reason = classify_delete_fault(e)
                if reason is not None:
                    logger.debug("%s; interrompendo purge: %s", _FAULT_MESSAGES[reason], e)
                    raise RateLimitError(
                        _FAULT_MESSAGES[reason],
                        exit_code=PurgeExitCode.RATE_LIMIT,
                        deleted_count=deleted,
                        reason=reason,
                    ) from e
                logger.warning("Falha ao apagar mensagem %s: %s", message.id, e)
                continue

            deleted += 1
            logger.info("Mensagem apagada ID: %s", message.id)
            await safe_sleep(delay)

        # Página incompleta: não há mensagens mais antigas
        if len(page) < batch_size:
            break
        cursor = page[-1].id

    return deleted
