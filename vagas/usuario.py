"""User records: types, CSV persistence and registration of internal and guest users."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

MAX_LOGIN_LEN = 64
MAX_SENHA_LEN = 64
USERS_FILE = "users.csv"

_MATRICULA_LEN = 8
_ATOI = re.compile(r"\s*([+-]?[0-9]+)")

log = logging.getLogger(__name__)


class TipoUsuario(IntEnum):
    """Kind of user; EXTERNO stands for someone without a record."""

    INTERNO = 1
    CONVIDADO = 2
    EXTERNO = 3


class UsuarioError(Exception):
    """Raised when a user cannot be registered."""


@dataclass
class Usuario:
    """A registered user."""

    login: str
    senha: str
    tipo: Union[TipoUsuario, int]

    def __post_init__(self) -> None:
        self.login = self.login[: MAX_LOGIN_LEN - 1]
        self.senha = self.senha[: MAX_SENHA_LEN - 1]
        self.tipo = _to_tipo(int(self.tipo))


def _to_tipo(value: int) -> Union[TipoUsuario, int]:
    try:
        return TipoUsuario(value)
    except ValueError:
        return value


def _atoi(text: Optional[str]) -> int:
    if text is None:
        return 0
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


class _Tokenizer:
    """Splits a line into fields, skipping runs of delimiters as strtok does."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next(self, delims: str) -> Optional[str]:
        cls = re.escape(delims)
        match = re.compile(f"[{cls}]*([^{cls}]+)").match(self._text, self._pos)
        if match is None:
            self._pos = len(self._text)
            return None
        self._pos = match.end() + 1
        return match.group(1)


def _lines(path: Union[str, Path]) -> Iterator[str]:
    with open(path, encoding="utf-8", newline="") as handle:
        yield from handle


def valida_login(login: str) -> bool:
    """Return True if the login is a registration number of exactly 8 digits."""
    return len(login) == _MATRICULA_LEN and all(c in "0123456789" for c in login)


def carregar_usuarios_csv(
    path: Union[str, Path] = USERS_FILE, max_usuarios: Optional[int] = None
) -> list[Usuario]:
    """Read users from a ``login,senha,tipo`` CSV file.

    Lines missing a field are skipped. Raises OSError if the file cannot be read.
    """
    usuarios: list[Usuario] = []
    for linha in _lines(path):
        if max_usuarios is not None and len(usuarios) >= max_usuarios:
            break
        tokens = _Tokenizer(linha)
        login = tokens.next(",")
        senha = tokens.next(",")
        tipo = tokens.next(",\r\n")
        if login and senha and tipo:
            usuarios.append(Usuario(login, senha, _atoi(tipo)))
    return usuarios


def _login_existe(login: str, path: Union[str, Path]) -> bool:
    if not Path(path).exists():
        return False
    return any(u.login == login for u in carregar_usuarios_csv(path))


def _registra(login: str, senha: str, tipo: TipoUsuario, path: Union[str, Path]) -> Usuario:
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{login},{senha},{int(tipo)}\n")
    return Usuario(login, senha, tipo)


def cria_interno(mtr: str, senha: str, path: Union[str, Path] = USERS_FILE) -> Usuario:
    """Register an internal user identified by an 8-digit registration number."""
    if not valida_login(mtr):
        raise UsuarioError("login inválido")
    if _login_existe(mtr, path):
        raise UsuarioError("login já existe")
    return _registra(mtr, senha, TipoUsuario.INTERNO, path)


def cria_convidado(
    cpf: str,
    senha: str,
    convidados: Iterable[Usuario],
    path: Union[str, Path] = USERS_FILE,
) -> Usuario:
    """Register a guest whose CPF appears among today's invited guests."""
    if not any(c.login == cpf for c in convidados):
        raise UsuarioError("CPF não autorizado como convidado hoje")
    if _login_existe(cpf, path):
        raise UsuarioError("convidado já registrado hoje")
    return _registra(cpf, senha, TipoUsuario.CONVIDADO, path)


def get_tipo(login: str, path: Union[str, Path] = USERS_FILE) -> Union[TipoUsuario, int]:
    """Return the type recorded for a login, or EXTERNO if it has no record."""
    try:
        linhas = list(_lines(path))
    except OSError as exc:
        log.error("%s: %s", path, exc)
        return TipoUsuario.EXTERNO
    for linha in linhas:
        tokens = _Tokenizer(linha)
        if tokens.next(",") == login:
            tokens.next(",")
            return _to_tipo(_atoi(tokens.next(",")))
    return TipoUsuario.EXTERNO