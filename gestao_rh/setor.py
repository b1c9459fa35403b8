"""Departments, positions and the rules for their names."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_PERMITIDOS = frozenset(string.ascii_letters + string.digits + " -_")


@dataclass
class Cargo:
    """A position that can be held within a department."""

    nome: str = ""


@dataclass
class Setor:
    """A department and the positions it allows."""

    nome: str = ""
    cargos: list[Cargo] = field(default_factory=list)

    def adicionar_cargo(self, cargo: Cargo) -> None:
        """Append a position to the department."""
        self.cargos.append(cargo)


def _nome_com_limite(nome: str, maximo: int) -> bool:
    return 2 <= len(nome) <= maximo and all(c in _PERMITIDOS for c in nome)


def nome_setor_valido(nome: str) -> bool:
    """A department name has 2 to 50 letters, digits, spaces, hyphens or underscores."""
    return _nome_com_limite(nome, 50)


def nome_cargo_valido(nome: str) -> bool:
    """A position name has 2 to 40 letters, digits, spaces, hyphens or underscores."""
    return _nome_com_limite(nome, 40)


def setor_tem_cargo(setor: Setor, nome_cargo: str) -> bool:
    """Tell whether the department allows a position with this name."""
    return any(cargo.nome == nome_cargo for cargo in setor.cargos)


def listar_cargos_permitidos(setor: Setor) -> list[str]:
    """Return the names of the department's positions in order."""
    return [cargo.nome for cargo in setor.cargos]