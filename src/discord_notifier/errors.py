"""Hierarquia de erros do discord-notifier.

Cada erro carrega o código de saída do processo, definido no ponto onde o
erro é levantado. A CLI só precisa ler ``exit_code``.
"""


class NotifierError(Exception):
    """Erro base; ``exit_code`` é o código de saída do processo."""

    def __init__(self, message: str, *, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = int(exit_code)


class ConfigurationError(NotifierError):
    """Variáveis de ambiente obrigatórias ausentes ou inválidas."""

    def __init__(self, message: str, *, exit_code: int, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message, exit_code=exit_code)
        self.missing = missing


class EmptyInputError(NotifierError):
    """Nenhuma mensagem recebida via stdin."""


class InputStreamError(NotifierError):
    """Falha ao ler stdin."""


class RecipientNotFoundError(NotifierError):
    """Usuário destinatário não encontrado no Discord."""


class DeliveryError(NotifierError):
    """Falha ao enviar a DM."""


class ClientFaultError(NotifierError):
    """Erro assíncrono do cliente Discord (login, gateway, conexão)."""


class PurgeError(NotifierError):
    """Purge interrompido por erro da API do Discord.

    Attributes:
        deleted_count: Mensagens apagadas antes da interrupção.
    """

    def __init__(self, message: str, *, exit_code: int, deleted_count: int) -> None:
        super().__init__(message, exit_code=exit_code)
        self.deleted_count = deleted_count


class RateLimitError(PurgeError):
    """Purge interrompido por rate limit ou falta de permissão.

    Attributes:
        reason: ``"rate_limited"``, ``"missing_access"`` ou ``"missing_permissions"``.
    """

    def __init__(self, message: str, *, exit_code: int, deleted_count: int, reason: str) -> None:
        super().__init__(message, exit_code=exit_code, deleted_count=deleted_count)
        self.reason = reason
