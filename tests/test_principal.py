import io

import pytest

from vagas.login import BadPasswordError, InvalidFieldError, UserNotFoundError
from vagas.principal import Sistema, main


@pytest.fixture
def users_file(tmp_path):
    path = tmp_path / "users.csv"
    path.write_text("alice,password,1\nbob,secret,2\n", encoding="utf-8")
    return path


def make(text, path):
    saida = io.StringIO()
    return Sistema(io.StringIO(text), saida, path), saida


def test_iniciar_messages(users_file):
    sistema, saida = make("", users_file)
    sistema.iniciar()
    assert saida.getvalue() == (
        "Inicializando o sistema...\nSistema iniciado com sucesso.\n"
    )
    assert sistema.usuario_sessao == ""


def test_menu_sair_returns_false(users_file):
    sistema, saida = make("6\n", users_file)
    assert sistema.exibir_menu_principal() is False
    assert saida.getvalue().endswith("Encerrando sistema...\n")
    assert "1. Login" in saida.getvalue()


def test_menu_opcao_invalida(users_file):
    sistema, saida = make("9\n", users_file)
    assert sistema.exibir_menu_principal() is True
    assert saida.getvalue().endswith("Opção inválida.\n")


def test_menu_opcao_nao_numerica(users_file):
    sistema, saida = make("abc\n", users_file)
    assert sistema.exibir_menu_principal() is True
    assert "Opção inválida." in saida.getvalue()


def test_menu_end_of_input_stops(users_file):
    sistema, saida = make("", users_file)
    assert sistema.exibir_menu_principal() is False
    assert "Encerrando sistema..." in saida.getvalue()


def test_login_success_sets_session(users_file):
    sistema, saida = make("1\nalice password\n", users_file)
    assert sistema.exibir_menu_principal() is True
    assert sistema.usuario_sessao == "alice"
    assert "Autenticação realizada com sucesso!" in saida.getvalue()


def test_login_wrong_password(users_file):
    sistema, saida = make("alice secret\n", users_file)
    sistema.autenticar_usuario()
    assert sistema.usuario_sessao == ""
    assert saida.getvalue().endswith("Erro: senha incorreta.\n")


def test_login_unknown_user(users_file):
    sistema, saida = make("carol\npassword\n", users_file)
    sistema.autenticar_usuario()
    assert sistema.usuario_sessao == ""
    assert saida.getvalue().endswith("Erro: usuário não encontrado.\n")


def test_login_missing_file_reports_unknown_user(tmp_path):
    sistema, saida = make("alice password\n", tmp_path / "none.csv")
    sistema.autenticar_usuario()
    assert "Erro: usuário não encontrado." in saida.getvalue()


def test_login_without_password_is_invalid_field(users_file):
    sistema, saida = make("alice\n", users_file)
    sistema.autenticar_usuario()
    assert saida.getvalue().endswith(
        "Erro: campos de login e/ou senha inválidos.\n"
    )


def test_resumo_without_session(users_file):
    sistema, saida = make("", users_file)
    sistema.exibir_resumo()
    assert "Usuário autenticado: (nenhum)" in saida.getvalue()


def test_resumo_after_login(users_file):
    sistema, saida = make("1 bob secret 5\n", users_file)
    sistema.exibir_menu_principal()
    sistema.exibir_menu_principal()
    assert "Usuário autenticado: bob\n" in saida.getvalue()


def test_alocar_e_liberar_via_menu(users_file):
    sistema, saida = make("3\n4\n", users_file)
    sistema.exibir_menu_principal()
    sistema.exibir_menu_principal()
    text = saida.getvalue()
    assert "Função de alocação de vaga chamada." in text
    assert "Função de liberação de vaga chamada." in text


@pytest.mark.parametrize(
    "erro, mensagem",
    [
        (UserNotFoundError("x"), "Erro: usuário não encontrado.\n"),
        (BadPasswordError("x"), "Erro: senha incorreta.\n"),
        (InvalidFieldError("x"), "Erro: campos de login e/ou senha inválidos.\n"),
        (2, "Erro: senha incorreta.\n"),
        (42, "Erro desconhecido.\n"),
    ],
)
def test_tratar_erro(users_file, erro, mensagem):
    sistema, saida = make("", users_file)
    sistema.tratar_erro(erro)
    assert saida.getvalue() == mensagem


def test_main_runs_session(users_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nalice\npassword\n5\n6\n"))
    assert main(["--usuarios", str(users_file)]) == 0
    out = capsys.readouterr().out
    assert "Sistema iniciado com sucesso." in out
    assert "Usuário autenticado: alice" in out
    assert out.endswith("Encerrando sistema...\n")