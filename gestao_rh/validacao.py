"""Id rules and validated prompts."""

from __future__ import annotations

from typing import Callable

from .funcionario import ID_LENGTH, ID_MAX, ID_MIN
from .interface import Console
from .sistema import SistemaRH

_DIGITOS = frozenset("0123456789")


def id_valido(id_funcionario: int, sistema: SistemaRH, id_atual: int = -1) -> bool:
    """An id is in range and not taken by another employee than ``id_atual``."""
    if not ID_MIN <= id_funcionario <= ID_MAX:
        return False
    return not any(
        f.id == id_funcionario and id_funcionario != id_atual for f in sistema.funcionarios
    )


def id_formato_valido(id_str: str) -> bool:
    """An id is written as exactly five ASCII digits."""
    return len(id_str) == ID_LENGTH and all(c in _DIGITOS for c in id_str)


def funcionario_existe(id_funcionario: int, sistema: SistemaRH) -> bool:
    """Tell whether an in-range id belongs to some employee."""
    if not ID_MIN <= id_funcionario <= ID_MAX:
        return False
    return any(f.id == id_funcionario for f in sistema.funcionarios)


def entrada_string(
    console: Console,
    mensagem: str,
    validador: Callable[[str], bool] | None = None,
    obrigatorio: bool = True,
) -> str | None:
    """Prompt until a valid answer is given.

    Returns None when the user types ``0``; returns ``""`` for an empty answer
    when the field is optional.
    """
    while True:
        entrada = console.ler(mensagem)
        if entrada == "0":
            return None
        if not obrigatorio and not entrada:
            return ""
        if validador is None or validador(entrada):
            return entrada
        console.escrever("Entrada invalida. Tente novamente ou digite 0 para cancelar.")


def entrada_id(
    console: Console, mensagem: str, sistema: SistemaRH, id_atual: int = -1
) -> int | None:
    """Prompt for a free five-digit id; None when the user types ``0``."""
    while True:
        entrada = console.ler(mensagem)
        if entrada == "0":
            return None
        if id_formato_valido(entrada) and id_valido(int(entrada), sistema, id_atual):
            return int(entrada)
        console.escrever("ID invalido. Tente novamente ou digite 0 para cancelar.")


def entrada_id_existente(console: Console, mensagem: str, sistema: SistemaRH) -> int | None:
    """Prompt for the five-digit id of an existing employee; None when the user types ``0``."""
    while True:
        entrada = console.ler(mensagem)
        if entrada == "0":
            return None
        if id_formato_valido(entrada) and funcionario_existe(int(entrada), sistema):
            return int(entrada)
        console.escrever(
            "Funcionario nao encontrado. Tente novamente ou digite 0 para cancelar."
        )