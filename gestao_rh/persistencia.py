"""Reading and writing employees and time-clock entries as text files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Union

from .funcionario import Funcionario
from .registro_ponto import RegistroPonto
from .sistema import SistemaRH

Caminho = Union[str, "os.PathLike[str]"]

_INTEIRO = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def _stoi(texto: str) -> int:
    correspondencia = _INTEIRO.match(texto)
    if correspondencia is None:
        raise ValueError(f"not an integer: {texto!r}")
    valor = int(correspondencia.group(1))
    if not -(2**31) <= valor < 2**31:
        raise ValueError(f"integer out of range: {texto!r}")
    return valor


@dataclass
class ResultadoImportacao:
    """Outcome of an import: how many records were read, and the lines rejected."""

    importados: int = 0
    linhas_invalidas: list[str] = field(default_factory=list)


def _linhas(caminho: Caminho):
    with open(caminho, encoding="utf-8") as arquivo:
        for linha in arquivo:
            linha = linha.rstrip("\n")
            if linha:
                yield linha


def importar_funcionarios(sistema: SistemaRH, caminho: Caminho) -> ResultadoImportacao:
    """Load ``id;nome;cpf;setor;cargo;foto`` lines into the system.

    Lines with fewer fields are skipped; lines whose id is not a number are
    reported. Raises OSError when the file cannot be opened.
    """
    resultado = ResultadoImportacao()
    for linha in _linhas(caminho):
        campos = linha.split(";", 5)
        if len(campos) < 6:
            continue
        id_str, nome, cpf, setor, cargo, foto = campos
        try:
            id_funcionario = _stoi(id_str)
        except ValueError:
            resultado.linhas_invalidas.append(linha)
            continue
        sistema.adicionar_funcionario(Funcionario(id_funcionario, nome, cpf, setor, cargo, foto))
        resultado.importados += 1
    return resultado


def exportar_funcionarios(sistema: SistemaRH, caminho: Caminho) -> int:
    """Write every employee as one line; return how many were written."""
    with open(caminho, "w", encoding="utf-8") as arquivo:
        for funcionario in sistema.funcionarios:
            arquivo.write(funcionario.para_linha() + "\n")
    return len(sistema.funcionarios)


def importar_pontos(sistema: SistemaRH, caminho: Caminho) -> ResultadoImportacao:
    """Load ``id|data|hora|tipo|observacao`` lines into the system.

    Lines with fewer fields are skipped; lines whose id is not a number are
    reported. Raises OSError when the file cannot be opened.
    """
    resultado = ResultadoImportacao()
    for linha in _linhas(caminho):
        campos = linha.split("|", 4)
        if len(campos) < 5:
            continue
        id_str, data, hora, tipo, observacao = campos
        try:
            id_funcionario = _stoi(id_str)
        except ValueError:
            resultado.linhas_invalidas.append(linha)
            continue
        sistema.adicionar_ponto(RegistroPonto(id_funcionario, data, hora, tipo, observacao))
        resultado.importados += 1
    return resultado


def exportar_pontos(sistema: SistemaRH, caminho: Caminho) -> int:
    """Write every time-clock entry as one ``;``-separated line; return the count."""
    with open(caminho, "w", encoding="utf-8") as arquivo:
        for ponto in sistema.pontos:
            arquivo.write(ponto.para_linha() + "\n")
    return len(sistema.pontos)