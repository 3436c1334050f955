"""Funções utilitárias para o discord-notifier."""

import asyncio
import logging

logger = logging.getLogger(__name__)


async def safe_sleep(seconds: float) -> None:
    """Sleep curto para reduzir risco de rate limit.

    Args:
        seconds: Tempo de espera em segundos. Deve ser um número não negativo.

    Raises:
        ValueError: Se seconds não for um número ou for negativo.
    """
    if not isinstance(seconds, (int, float)):
        raise ValueError("safe_sleep: seconds deve ser um número (int ou float)")
    if seconds < 0:
        raise ValueError("safe_sleep: seconds deve ser não negativo")

    if seconds > 0:
        logger.debug("Aguardando %.2fs antes da próxima operação", seconds)
    await asyncio.sleep(seconds)


def setup_logging(level: int = logging.INFO) -> None:
    """Configura o logging do processo (chamado uma vez pela CLI)."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
