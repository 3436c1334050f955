"""Configuração de testes para discord-notifier."""

import asyncio
from types import SimpleNamespace
from unittest import mock

import discord
import pytest

BOT_ID = 999
USER_ID = 123456789012345678


# =============================================================================
# Erros HTTP do discord.py
# =============================================================================


def make_http_error(cls=discord.HTTPException, *, status=400, code=0, message="erro"):
    """Cria exceção HTTP do discord.py sem resposta real."""
    response = mock.Mock(status=status, reason="Erro")
    return cls(response, {"code": code, "message": message})


# =============================================================================
# Fakes do Discord (usuário, canal de DM, mensagens, cliente)
# =============================================================================


class FakeMessage:
    """Mensagem de DM com autor e exclusão controlável."""

    def __init__(self, channel, message_id, author_id):
        self.channel = channel
        self.id = message_id
        self.author = SimpleNamespace(id=author_id)

    async def delete(self):
        self.channel.delete_attempts.append(self.id)
        error = self.channel.delete_errors.get(self.id)
        if error is not None:
            raise error
        self.channel.messages.remove(self)
        self.channel.deleted.append(self.id)


class FakeDMChannel:
    """Canal de DM com histórico ordenado do mais novo para o mais antigo."""

    def __init__(self):
        self.messages = []
        self.history_calls = []
        self.history_errors = {}
        self.delete_attempts = []
        self.deleted = []
        self.delete_errors = {}

    def add_messages(self, author_ids):
        """Adiciona mensagens; a primeira da lista é a mais antiga."""
        next_id = max((m.id for m in self.messages), default=1000) + 1
        for offset, author_id in enumerate(author_ids):
            self.messages.insert(0, FakeMessage(self, next_id + offset, author_id))
        return [m.id for m in self.messages]

    def history(self, *, limit=100, before=None):
        before_id = before.id if before is not None else None
        self.history_calls.append((limit, before_id))
        error = self.history_errors.get(len(self.history_calls) - 1)
        page = [m for m in self.messages if before_id is None or m.id < before_id][:limit]

        async def _iterate():
            if error is not None:
                raise error
            for message in page:
                yield message

        return _iterate()


class FakeUser:
    """Usuário destinatário da DM."""

    def __init__(self, user_id, channel=None):
        self.id = user_id
        self.name = "destinatario"
        self.channel = channel or FakeDMChannel()
        self.send = mock.AsyncMock()

    async def create_dm(self):
        return self.channel

    def __str__(self):
        return self.name


class FakeDiscordClient:
    """Cliente Discord falso com login, ready e close controláveis."""

    def __init__(self, *, users=None, login_error=None):
        self.user = SimpleNamespace(id=BOT_ID, name="notifier-bot")
        self.users = users or {}
        self.login_error = login_error
        self.token = None
        self.close_calls = 0
        self.fetch_user_calls = []
        self._ready = asyncio.Event()
        self._stopped = asyncio.Event()
        self._crash = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        if not self.is_closed():
            await self.close()

    async def start(self, token):
        self.token = token
        if self.login_error is not None:
            raise self.login_error
        self._ready.set()
        await self._stopped.wait()
        if self._crash is not None:
            raise self._crash

    async def wait_until_ready(self):
        await self._ready.wait()

    async def close(self):
        self.close_calls += 1
        self._stopped.set()

    def is_closed(self):
        return self.close_calls > 0

    def crash(self, error):
        """Simula erro assíncrono do gateway depois do ready."""
        self._crash = error
        self._stopped.set()

    async def fetch_user(self, user_id):
        self.fetch_user_calls.append(user_id)
        if user_id not in self.users:
            raise make_http_error(
                discord.NotFound, status=404, code=10013, message="Unknown User"
            )
        return self.users[user_id]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def dm_channel():
    """Canal de DM vazio."""
    return FakeDMChannel()


@pytest.fixture
def recipient(dm_channel):
    """Usuário destinatário ligado ao canal de DM."""
    return FakeUser(USER_ID, dm_channel)


@pytest.fixture
def fake_client(recipient):
    """Cliente falso que conhece o destinatário."""
    return FakeDiscordClient(users={USER_ID: recipient})


@pytest.fixture
def bot_env(monkeypatch):
    """Define as variáveis de ambiente obrigatórias."""
    monkeypatch.setenv("BOT_TOKEN", "token-de-teste")
    monkeypatch.setenv("DM_USER_ID", str(USER_ID))


@pytest.fixture
def no_sleep(mocker):
    """Substitui o sleep entre exclusões por um AsyncMock."""
    return mocker.patch("discord_notifier.purger.safe_sleep", new=mock.AsyncMock())
