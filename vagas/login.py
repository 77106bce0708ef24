"""Credential checking against a list of users."""

from __future__ import annotations

from typing import Iterable, Optional

from vagas.usuario import Usuario


class AuthError(Exception):
    """Authentication failed; ``code`` identifies the reason."""

    code = 0


class UserNotFoundError(AuthError):
    """No user has the given login."""

    code = 1


class BadPasswordError(AuthError):
    """The password does not match the user's."""

    code = 2


class InvalidFieldError(AuthError):
    """Login or password is missing or empty."""

    code = 3


def autentica(
    login: Optional[str], senha: Optional[str], usuarios: Iterable[Usuario]
) -> Usuario:
    """Return the user matching login and password, or raise an AuthError."""
    if not login or not senha:
        raise InvalidFieldError("campos de login e/ou senha inválidos")
    usuario = next((u for u in usuarios if u.login == login), None)
    if usuario is None:
        raise UserNotFoundError("usuário não encontrado")
    if usuario.senha != senha:
        raise BadPasswordError("senha incorreta")
    return usuario