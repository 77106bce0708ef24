"""Interactive menu for the parking-spot allocation system."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from vagas.login import (
    AuthError,
    BadPasswordError,
    InvalidFieldError,
    UserNotFoundError,
    autentica,
)
from vagas.usuario import MAX_LOGIN_LEN, USERS_FILE, Usuario, carregar_usuarios_csv

_MSG_SEM_USUARIO = "Erro: usuário não encontrado."
_MSG_SENHA_ERRADA = "Erro: senha incorreta."
_MSG_CAMPO_INVALIDO = "Erro: campos de login e/ou senha inválidos."
_MSG_DESCONHECIDO = "Erro desconhecido."

_MENSAGENS_POR_CLASSE = (
    (UserNotFoundError, _MSG_SEM_USUARIO),
    (BadPasswordError, _MSG_SENHA_ERRADA),
    (InvalidFieldError, _MSG_CAMPO_INVALIDO),
)

_MENSAGENS_POR_NUMERO = {
    1: _MSG_SEM_USUARIO,
    2: _MSG_SENHA_ERRADA,
    3: _MSG_CAMPO_INVALIDO,
}


def _mensagem(erro: Union[AuthError, int]) -> str:
    if isinstance(erro, AuthError):
        for classe, mensagem in _MENSAGENS_POR_CLASSE:
            if isinstance(erro, classe):
                return mensagem
        return _MSG_DESCONHECIDO
    return _MENSAGENS_POR_NUMERO.get(erro, _MSG_DESCONHECIDO)


class Sistema:
    """Console session: reads choices from ``entrada`` and reports on ``saida``."""

    def __init__(
        self,
        entrada: Optional[TextIO] = None,
        saida: Optional[TextIO] = None,
        usuarios_path: Union[str, Path] = USERS_FILE,
    ) -> None:
        self.entrada = entrada if entrada is not None else sys.stdin
        self.saida = saida if saida is not None else sys.stdout
        self.usuarios_path = usuarios_path
        self.usuario_sessao = ""
        self._tokens: list[str] = []

    def _escreve(self, texto: str) -> None:
        self.saida.write(texto)
        self.saida.flush()

    def _proximo_token(self) -> Optional[str]:
        """Return the next whitespace-separated word of input, or None at end."""
        while not self._tokens:
            linha = self.entrada.readline()
            if not linha:
                return None
            self._tokens.extend(linha.split())
        return self._tokens.pop(0)

    def _usuarios(self) -> list[Usuario]:
        try:
            return carregar_usuarios_csv(self.usuarios_path)
        except OSError:
            return []

    def iniciar(self) -> None:
        """Prepare the system before interaction starts."""
        self._escreve("Inicializando o sistema...\n")
        self.usuario_sessao = ""
        self._escreve("Sistema iniciado com sucesso.\n")

    def exibir_menu_principal(self) -> bool:
        """Show the menu, run the chosen action and return False once the user leaves."""
        self._escreve(
            "\n--- Menu Principal ---\n"
            "1. Login\n"
            "2. Consultar Vagas\n"
            "3. Alocar Vaga\n"
            "4. Liberar Vaga\n"
            "5. Exibir Resumo\n"
            "6. Sair\n"
            "Escolha uma opção: "
        )
        token = self._proximo_token()
        if token is None:
            self.encerrar()
            return False
        try:
            opcao = int(token)
        except ValueError:
            opcao = 0

        if opcao == 1:
            self.autenticar_usuario()
        elif opcao == 2:
            pass
        elif opcao == 3:
            self.alocar_vaga()
        elif opcao == 4:
            self.liberar_vaga()
        elif opcao == 5:
            self.exibir_resumo()
        elif opcao == 6:
            self.encerrar()
            return False
        else:
            self._escreve("Opção inválida.\n")
        return True

    def autenticar_usuario(self) -> None:
        """Ask for login and password and keep the user in the session on success."""
        self._escreve("Login: ")
        login = self._proximo_token()
        self._escreve("Senha: ")
        senha = self._proximo_token()
        try:
            usuario = autentica(login, senha, self._usuarios())
        except AuthError as erro:
            self.tratar_erro(erro)
            return
        self.usuario_sessao = usuario.login[: MAX_LOGIN_LEN - 1]
        self._escreve("Autenticação realizada com sucesso!\n")

    def alocar_vaga(self) -> None:
        """Handle a request for a parking spot."""
        self._escreve("Função de alocação de vaga chamada.\n")

    def liberar_vaga(self) -> None:
        """Handle the release of a parking spot."""
        self._escreve("Função de liberação de vaga chamada.\n")

    def exibir_resumo(self) -> None:
        """Show the current state of the system."""
        self._escreve("\n--- Resumo do Sistema ---\n")
        self._escreve(f"Usuário autenticado: {self.usuario_sessao or '(nenhum)'}\n")

    def encerrar(self) -> None:
        """Shut the system down."""
        self._escreve("Encerrando sistema...\n")

    def tratar_erro(self, erro: Union[AuthError, int]) -> None:
        """Report an authentication failure, given as an AuthError or its number."""
        self._escreve(_mensagem(erro) + "\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive menu until the user leaves."""
    parser = argparse.ArgumentParser(description="Sistema de alocação de vagas")
    parser.add_argument(
        "--usuarios", default=USERS_FILE, help="arquivo CSV de usuários"
    )
    args = parser.parse_args(argv)

    sistema = Sistema(usuarios_path=args.usuarios)
    sistema.iniciar()
    while sistema.exibir_menu_principal():
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())