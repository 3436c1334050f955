"""Saída formatada para o usuário usando Rich.

Mensagens de sucesso vão para stdout; diagnósticos de erro para stderr.
"""

from rich.console import Console
from rich.markup import escape

# Consoles globais para uso em todo o projeto
console = Console()
err_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Exibe mensagem de sucesso formatada."""
    console.print(f"[bold green]✅ {escape(message)}[/]")


def print_error(message: str, hint: str | None = None) -> None:
    """Exibe mensagem de erro formatada (stderr).

    Args:
        message: Mensagem de erro principal.
        hint: Dica opcional de como resolver o problema.
    """
    err_console.print(f"[bold red]❌ {escape(message)}[/]")
    if hint:
        err_console.print(f"[dim]   💡 {escape(hint)}[/]")


def print_warning(message: str) -> None:
    """Exibe mensagem de aviso formatada (stderr)."""
    err_console.print(f"[bold yellow]⚠️  {escape(message)}[/]")
