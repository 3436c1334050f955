"""discord-notifier: envia notificações por DM via bot do Discord.

Este pacote fornece funcionalidades para:
- Enviar o texto recebido via stdin como DM para um usuário fixo
- Apagar as mensagens do bot nessa DM (purge com rate limit)
"""

__version__ = "0.1.0"

from .purger import purge_bot_messages
from .sender import send_dm
from .utils import safe_sleep

__all__ = ["purge_bot_messages", "send_dm", "safe_sleep"]
