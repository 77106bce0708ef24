# vagas

A small console program for a parking-space system. It keeps a registry of
users in a CSV file and checks a login and password against it. Messages are
in Portuguese.

## Installation

```
pip install .
```

## Running

```
vagas
vagas --usuarios path/to/users.csv
```

`--usuarios` names the CSV file of users (default: `users.csv` in the current
directory). The program prints a start-up message and then shows the main menu
again after every choice:

```
--- Menu Principal ---
1. Login
2. Consultar Vagas
3. Alocar Vaga
4. Liberar Vaga
5. Exibir Resumo
6. Sair
```

- **1** asks for a login and a password (each one whitespace-separated word)
  and checks them against the users file. On success the login is kept as the
  session user; otherwise an error message says why it failed.
- **5** shows the session user, or `(nenhum)` if nobody has logged in.
- **6** prints a shutdown message and quits. The program also quits when input ends.
- Any other number, or input that is not a number, prints `Opção inválida.`

The same loop can be driven from code through `vagas.principal.Sistema`, which
takes the input and output streams and the users file path:

```python
import io
from vagas.principal import Sistema

saida = io.StringIO()
sistema = Sistema(io.StringIO("5\n6\n"), saida, "users.csv")
sistema.iniciar()
while sistema.exibir_menu_principal():
    pass
```

## What it does not do

There are no parking spaces and no waiting queue behind the menu. Option 2
does nothing, and options 3 and 4 only print a message saying they were
called: no space is looked up, allocated or released, and nothing about spaces
is stored or shown in the summary.

## Users

Users are kept in a CSV file, one per line, in the form `login,password,type`.
The type is a `TipoUsuario` value:

| value | name        | meaning                                    |
|-------|-------------|--------------------------------------------|
| 1     | `INTERNO`   | internal user, identified by an 8-digit id |
| 2     | `CONVIDADO` | one-time guest, identified by a CPF        |
| 3     | `EXTERNO`   | no record                                  |

```python
from vagas.usuario import (
    TipoUsuario, Usuario, carregar_usuarios_csv, cria_convidado, cria_interno, get_tipo,
)

password = "password"
interno = cria_interno("12345678", password, "users.csv")
assert get_tipo("12345678", "users.csv") is TipoUsuario.INTERNO

convidados = [Usuario("guest-0001", password, TipoUsuario.CONVIDADO)]
convidado = cria_convidado("guest-0001", password, convidados, "users.csv")

usuarios = carregar_usuarios_csv("users.csv", 100)
```

- `valida_login(login)` is true only for exactly 8 digits.
- `cria_interno` and `cria_convidado` append a line to the file and return the
  new `Usuario`. They raise `UsuarioError` if the internal id is badly formed,
  the login is already in the file, or the guest is not among `convidados`.
- `carregar_usuarios_csv(path, max_usuarios)` reads at most `max_usuarios`
  users (all of them if it is `None`), skips lines that lack a field, and
  raises `OSError` if the file cannot be read.
- `get_tipo(login, path)` returns the recorded type, or `EXTERNO` if the login
  has no record or the file cannot be read.

Logins and passwords longer than 63 characters are cut to 63.

## Authentication

```python
from vagas.login import AuthError, autentica

try:
    usuario = autentica("12345678", "password", usuarios)
except AuthError as erro:
    print(erro.code, erro)
```

`autentica` returns the matching `Usuario`. Otherwise it raises one of the
subclasses of `AuthError`, whose `code` attribute gives a number:

- `UserNotFoundError` (1): no user has that login
- `BadPasswordError` (2): the user exists but the password does not match
- `InvalidFieldError` (3): the login or the password is missing or empty

## Tests

```
pip install ".[test]"
pytest
```