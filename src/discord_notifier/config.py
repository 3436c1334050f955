"""Configuração do discord-notifier a partir de variáveis de ambiente."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .constants import REQUIRED_ENV_VARS
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotifierConfig:
    """Configuração validada do bot."""

    bot_token: str
    dm_user_id: int


def validate_environment(
    *,
    exit_code: int,
    environ: Mapping[str, str] | None = None,
) -> NotifierConfig:
    """Valida as variáveis de ambiente obrigatórias.

    Não faz I/O nem acessa a rede; deve rodar antes de qualquer recurso
    ser criado.

    Args:
        exit_code: Código de saída usado se a validação falhar.
        environ: Ambiente a validar (padrão: ``os.environ``).

    Returns:
        Configuração validada.

    Raises:
        ConfigurationError: Se alguma variável faltar (todas são listadas)
            ou se ``DM_USER_ID`` não for numérico.
    """
    env = os.environ if environ is None else environ

    missing = tuple(name for name in REQUIRED_ENV_VARS if not (env.get(name) or "").strip())
    if missing:
        logger.debug("Variáveis de ambiente ausentes: %s", ", ".join(missing))
        raise ConfigurationError(
            f"Faltam variáveis de ambiente obrigatórias: {', '.join(missing)}",
            exit_code=exit_code,
            missing=missing,
        )

    raw_user_id = env["DM_USER_ID"].strip()
    try:
        dm_user_id = int(raw_user_id)
    except ValueError:
        logger.debug("DM_USER_ID contém valor inválido: %s", raw_user_id)
        raise ConfigurationError(
            f"DM_USER_ID inválido: '{raw_user_id}' não é um ID numérico",
            exit_code=exit_code,
        ) from None

    return NotifierConfig(bot_token=env["BOT_TOKEN"].strip(), dm_user_id=dm_user_id)
