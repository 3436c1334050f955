"""CLI module for discord-notifier.

Dois comandos:

- ``discord-notify``: lê uma mensagem do stdin e envia como DM.
- ``discord-purge``: apaga as mensagens do bot na DM com o destinatário.
"""

import argparse
import asyncio
import logging
from collections.abc import Awaitable, Callable

from dotenv import load_dotenv

from .config import validate_environment
from .constants import PurgeExitCode, SendExitCode
from .errors import ConfigurationError, NotifierError, PurgeError
from .message_source import read_message
from .purger import purge_bot_messages
from .sender import send_dm
from .session import run_with_client
from .ui import print_error, print_success, print_warning
from .utils import setup_logging

logger = logging.getLogger(__name__)


def parse_send_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse argumentos do discord-notify (só --help)."""
    parser = argparse.ArgumentParser(
        prog="discord-notify",
        description="Envia o texto recebido via stdin como DM para DM_USER_ID.",
    )
    return parser.parse_args(argv)


def parse_purge_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse argumentos do discord-purge."""
    parser = argparse.ArgumentParser(
        prog="discord-purge",
        description="Apaga todas as mensagens do bot na DM com DM_USER_ID.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Não apaga nada; só conta as mensagens que seriam apagadas.",
    )
    return parser.parse_args(argv)


def error_hint(error: NotifierError) -> str | None:
    """Dica amigável para o usuário conforme o tipo de erro."""
    if isinstance(error, ConfigurationError):
        return "Defina BOT_TOKEN e DM_USER_ID no ambiente ou em um arquivo .env."
    if isinstance(error, PurgeError):
        return (
            f"{error.deleted_count} mensagem(ns) já apagada(s) antes da interrupção "
            "não serão restauradas."
        )
    return None


async def run_send() -> int:
    """Fluxo do discord-notify: valida ambiente, lê stdin e envia a DM."""
    config = validate_environment(exit_code=SendExitCode.MISSING_ENV)

    # stdin é lido antes de abrir a sessão com o Discord
    message = await read_message()

    async def operation(client) -> None:
        await send_dm(client, config.dm_user_id, message)

    await run_with_client(config, operation, platform_exit_code=SendExitCode.DISCORD_ERROR)
    return SendExitCode.SUCCESS


async def run_purge(*, dry_run: bool = False) -> int:
    """Fluxo do discord-purge: valida ambiente e apaga as mensagens do bot."""
    config = validate_environment(exit_code=PurgeExitCode.MISSING_ENV)
    if dry_run:
        print_warning("Modo dry-run: nenhuma mensagem será apagada.")

    async def operation(client) -> int:
        return await purge_bot_messages(client, config.dm_user_id, dry_run=dry_run)

    deleted = await run_with_client(
        config, operation, platform_exit_code=PurgeExitCode.DISCORD_ERROR
    )

    if dry_run:
        print_success(f"Dry-run concluído. {deleted} mensagens seriam apagadas.")
    else:
        print_success(f"Concluído. {deleted} mensagens apagadas.")
    return PurgeExitCode.SUCCESS


def run_cli(main: Callable[[], Awaitable[int]], *, platform_exit_code: int) -> int:
    """Executa ``main`` e converte o resultado em código de saída.

    Erros conhecidos já trazem o próprio código de saída. Qualquer outra
    exceção vira ``platform_exit_code``.
    """
    try:
        return int(asyncio.run(main()))
    except NotifierError as e:
        print_error(str(e), hint=error_hint(e))
        return e.exit_code
    except (KeyboardInterrupt, asyncio.CancelledError):
        print_error("Interrompido.")
        return platform_exit_code
    except Exception as e:
        logger.exception("Erro inesperado")
        print_error(f"Erro inesperado: {e}")
        return platform_exit_code


def send_main(argv: list[str] | None = None) -> None:
    """Entry-point do discord-notify."""
    setup_logging()
    load_dotenv()
    parse_send_args(argv)
    raise SystemExit(run_cli(run_send, platform_exit_code=SendExitCode.DISCORD_ERROR))


def purge_main(argv: list[str] | None = None) -> None:
    """Entry-point do discord-purge."""
    setup_logging()
    load_dotenv()
    args = parse_purge_args(argv)
    raise SystemExit(
        run_cli(
            lambda: run_purge(dry_run=args.dry_run),
            platform_exit_code=PurgeExitCode.DISCORD_ERROR,
        )
    )


if __name__ == "__main__":
    send_main()
