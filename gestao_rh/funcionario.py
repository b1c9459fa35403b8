"""Employee record and the validation rules that apply to its fields."""

from __future__ import annotations

import string

MAX_FUNCIONARIOS = 1000
MAX_SETORES = 20
MAX_CARGOS = 20
MAX_PONTOS = 10000
ID_MIN = 1
ID_MAX = 99999
CPF_LENGTH = 11
ID_LENGTH = 5

_ASCII_LETTERS = frozenset(string.ascii_letters)
_ASCII_DIGITS = frozenset(string.digits)


def nome_valido(nome: str) -> bool:
    """A name has 2 to 50 characters, only ASCII letters and spaces."""
    if not 2 <= len(nome) <= 50:
        return False
    return all(c in _ASCII_LETTERS or c == " " for c in nome)


def cpf_valido(cpf: str) -> bool:
    """A CPF is exactly eleven ASCII digits (check digits are not verified)."""
    return len(cpf) == CPF_LENGTH and all(c in _ASCII_DIGITS for c in cpf)


def setor_valido(setor: str) -> bool:
    """A department name has 2 to 30 characters."""
    return 2 <= len(setor) <= 30


def cargo_valido(cargo: str) -> bool:
    """A position name has 2 to 40 characters."""
    return 2 <= len(cargo) <= 40


def foto_valida(foto: str) -> bool:
    """A photo path is optional and at most 100 characters long."""
    return len(foto) <= 100


def formatar_cpf(cpf: str) -> str:
    """Format an eleven-character CPF as ``XXX.XXX.XXX-XX``; other input is returned as is."""
    if len(cpf) != CPF_LENGTH:
        return cpf
    return f"{cpf[0:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:11]}"


def formatar_nome(nome: str) -> str:
    """Lower-case a name and capitalise the first letter of each space-separated word."""
    partes = []
    proxima_maiuscula = True
    for c in nome.lower():
        if c in _ASCII_LETTERS:
            if proxima_maiuscula:
                c = c.upper()
                proxima_maiuscula = False
        elif c == " ":
            proxima_maiuscula = True
        partes.append(c)
    return "".join(partes)


class Funcionario:
    """An employee.

    The constructor stores its arguments unchecked. Assigning to an attribute
    afterwards validates the new value and ignores it when invalid; a valid
    name is normalised with :func:`formatar_nome`.
    """

    __slots__ = ("_id", "_nome", "_cpf", "_setor", "_cargo", "_foto")

    def __init__(
        self,
        id: int,
        nome: str,
        cpf: str,
        setor: str,
        cargo: str,
        foto: str = "",
    ) -> None:
        self._id = int(id)
        self._nome = nome
        self._cpf = cpf
        self._setor = setor
        self._cargo = cargo
        self._foto = foto

    @property
    def id(self) -> int:
        return self._id

    @id.setter
    def id(self, valor: int) -> None:
        if ID_MIN <= valor <= ID_MAX:
            self._id = valor

    @property
    def nome(self) -> str:
        return self._nome

    @nome.setter
    def nome(self, valor: str) -> None:
        if nome_valido(valor):
            self._nome = formatar_nome(valor)

    @property
    def cpf(self) -> str:
        return self._cpf

    @cpf.setter
    def cpf(self, valor: str) -> None:
        if cpf_valido(valor):
            self._cpf = valor

    @property
    def setor(self) -> str:
        return self._setor

    @setor.setter
    def setor(self, valor: str) -> None:
        if setor_valido(valor):
            self._setor = valor

    @property
    def cargo(self) -> str:
        return self._cargo

    @cargo.setter
    def cargo(self, valor: str) -> None:
        if cargo_valido(valor):
            self._cargo = valor

    @property
    def foto(self) -> str:
        return self._foto

    @foto.setter
    def foto(self, valor: str) -> None:
        if foto_valida(valor):
            self._foto = valor

    def _campos(self) -> tuple:
        return (self._id, self._nome, self._cpf, self._setor, self._cargo, self._foto)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Funcionario):
            return NotImplemented
        return self._campos() == other._campos()

    def __hash__(self) -> int:
        return hash(self._campos())

    def __repr__(self) -> str:
        return (
            f"Funcionario(id={self._id!r}, nome={self._nome!r}, cpf={self._cpf!r}, "
            f"setor={self._setor!r}, cargo={self._cargo!r}, foto={self._foto!r})"
        )

    def descrever(self) -> str:
        """Return the employee's data as a framed block of lines."""
        borda = "-" * 29
        linhas = [
            borda,
            f"Nome   : {self._nome}",
            f"CPF    : {self._cpf}",
            f"ID     : {self._id:05d}",
            f"Setor  : {self._setor}",
            f"Cargo  : {self._cargo}",
            f"Foto   : {self._foto or 'Nao cadastrada'}",
            borda,
        ]
        return "\n".join(linhas)

    def para_linha(self) -> str:
        """Return the ``id;nome;cpf;setor;cargo;foto`` line used in data files."""
        return ";".join(
            [str(self._id), self._nome, self._cpf, self._setor, self._cargo, self._foto]
        )