"""Constantes compartilhadas pelo discord-notifier."""

from enum import IntEnum

REQUIRED_ENV_VARS = ("BOT_TOKEN", "DM_USER_ID")

# Paginação e rate limit do purge
BATCH_SIZE = 50
DELETE_DELAY_SECONDS = 1.0

# Códigos de erro da API do Discord tratados como esgotamento de permissão
MISSING_ACCESS_CODE = 50001
MISSING_PERMISSIONS_CODE = 50013


class SendExitCode(IntEnum):
    """Códigos de saída do comando discord-notify."""

    SUCCESS = 0
    NO_MESSAGE = 1
    MISSING_ENV = 2
    DISCORD_ERROR = 3
    STDIN_ERROR = 4


class PurgeExitCode(IntEnum):
    """Códigos de saída do comando discord-purge."""

    SUCCESS = 0
    MISSING_ENV = 1
    DISCORD_ERROR = 2
    RATE_LIMIT = 3
