"""Clocking in and out, and reports over the recorded time-clock entries."""

from __future__ import annotations

import re
from datetime import datetime
from operator import attrgetter

from .registro_ponto import ENTRADA, SAIDA, RegistroPonto, data_valida, hora_valida
from .sistema import SistemaRH

_INTEIRO = re.compile(r"\s*([+-]?\d+)", re.ASCII)


class PontoError(Exception):
    """A clock-in or clock-out that contradicts the entries already recorded."""


def _stoi(texto: str) -> int:
    correspondencia = _INTEIRO.match(texto)
    if correspondencia is None:
        raise ValueError(f"not an integer: {texto!r}")
    valor = int(correspondencia.group(1))
    if not -(2**31) <= valor < 2**31:
        raise ValueError(f"integer out of range: {texto!r}")
    return valor


def _nome_funcionario(sistema: SistemaRH, id_funcionario: int) -> str:
    funcionario = sistema.buscar_funcionario(id_funcionario)
    return funcionario.nome if funcionario is not None else "Desconhecido"


def obter_data_atual(agora: datetime | None = None) -> str:
    """Return the date as ``DD/MM/AAAA`` (the current local date by default)."""
    agora = agora or datetime.now()
    return f"{agora.day:02d}/{agora.month:02d}/{agora.year}"


def obter_hora_atual(agora: datetime | None = None) -> str:
    """Return the time as ``HH:MM:SS`` (the current local time by default)."""
    agora = agora or datetime.now()
    return f"{agora.hour:02d}:{agora.minute:02d}:{agora.second:02d}"


def validar_data(data: str) -> bool:
    """Tell whether ``data`` is a valid ``DD/MM/AAAA`` date."""
    return data_valida(data)


def validar_hora(hora: str) -> bool:
    """Tell whether ``hora`` is a valid ``HH:MM:SS`` time."""
    return hora_valida(hora)


def ultimo_tipo(sistema: SistemaRH, id_funcionario: int, data: str) -> str:
    """Return the type of the latest entry of the employee on that date, or ``""``."""
    tipo, ultima_hora = "", ""
    for ponto in sistema.pontos:
        if ponto.id_funcionario == id_funcionario and ponto.data == data:
            if ponto.hora > ultima_hora:
                ultima_hora, tipo = ponto.hora, ponto.tipo
    return tipo


def registrar_manual(
    sistema: SistemaRH,
    id_funcionario: int,
    data: str,
    hora: str,
    tipo: str,
    observacao: str = "",
) -> RegistroPonto:
    """Record an entry with the given date, time and type; return it."""
    ponto = RegistroPonto(id_funcionario, data, hora, tipo, observacao)
    sistema.adicionar_ponto(ponto)
    return ponto


def registrar_entrada(
    sistema: SistemaRH,
    id_funcionario: int,
    observacao: str = "",
    agora: datetime | None = None,
) -> RegistroPonto:
    """Clock the employee in now.

    Raises PontoError when the employee is already clocked in today.
    """
    data, hora = obter_data_atual(agora), obter_hora_atual(agora)
    if ultimo_tipo(sistema, id_funcionario, data) == ENTRADA:
        raise PontoError(
            "Já existe uma entrada registrada sem saída para este funcionário hoje."
        )
    return registrar_manual(sistema, id_funcionario, data, hora, ENTRADA, observacao)


def registrar_saida(
    sistema: SistemaRH,
    id_funcionario: int,
    observacao: str = "",
    agora: datetime | None = None,
) -> RegistroPonto:
    """Clock the employee out now.

    Raises PontoError when the employee is not clocked in today.
    """
    data, hora = obter_data_atual(agora), obter_hora_atual(agora)
    if ultimo_tipo(sistema, id_funcionario, data) != ENTRADA:
        raise PontoError("Não há entrada registrada para este funcionário hoje.")
    return registrar_manual(sistema, id_funcionario, data, hora, SAIDA, observacao)


def listar_por_funcionario(sistema: SistemaRH, id_funcionario: int) -> str:
    """Return a table of the employee's entries."""
    linhas = [
        f"\n=== Registros de Ponto - Funcionário ID: {id_funcionario} ===",
        "Data       | Hora     | Tipo    | Observação",
        "-----------|----------|---------|------------------------",
    ]
    encontrados = [
        f"{p.data} | {p.hora} | {p.tipo:<7} | {p.observacao}"
        for p in sistema.pontos
        if p.id_funcionario == id_funcionario
    ]
    linhas.extend(encontrados or ["Nenhum registro encontrado para este funcionário."])
    return "\n".join(linhas)


def listar_por_data(sistema: SistemaRH, data: str) -> str:
    """Return a table of every entry on the given date."""
    linhas = [
        f"\n=== Registros de Ponto - Data: {data} ===",
        "Funcionário                   | Hora     | Tipo    | Observação",
        "-------------------------------|----------|---------|------------------------",
    ]
    encontrados = [
        f"{_nome_funcionario(sistema, p.id_funcionario):<30} | {p.hora} | "
        f"{p.tipo:<7} | {p.observacao}"
        for p in sistema.pontos
        if p.data == data
    ]
    linhas.extend(encontrados or ["Nenhum registro encontrado para esta data."])
    return "\n".join(linhas)


def listar_todos(sistema: SistemaRH) -> str:
    """Return a table of every recorded entry."""
    linhas = [
        "\n=== Todos os Registros de Ponto ===",
        "Data       | Funcionário               | Hora     | Tipo    | Observação",
        "-----------|---------------------------|----------|---------|------------------------",
    ]
    linhas.extend(
        f"{p.data} | {_nome_funcionario(sistema, p.id_funcionario):<25} | "
        f"{p.hora} | {p.tipo:<7} | {p.observacao}"
        for p in sistema.pontos
    )
    if not sistema.pontos:
        linhas.append("Nenhum registro encontrado.")
    return "\n".join(linhas)


def relatorio_mensal(sistema: SistemaRH, id_funcionario: int, mes: int, ano: int) -> str:
    """Return the employee's worked hours per day of a month, with the total.

    Raises ValueError when a stored date of the employee has no numeric month or year.
    """
    linhas = [
        f"\n=== Relatório Mensal - Funcionário ID: {id_funcionario} - {mes}/{ano} ==="
    ]
    por_dia: dict[str, list[RegistroPonto]] = {}
    for ponto in sistema.pontos:
        if ponto.id_funcionario != id_funcionario or len(ponto.data) < 10:
            continue
        if _stoi(ponto.data[3:5]) == mes and _stoi(ponto.data[6:10]) == ano:
            por_dia.setdefault(ponto.data, []).append(ponto)

    if not por_dia:
        linhas.append("Nenhum registro encontrado para este período.")
        return "\n".join(linhas)

    linhas.append("Data       | Entrada  | Saída    | Horas Trabalhadas")
    linhas.append("-----------|----------|----------|------------------")

    total = 0.0
    for data in sorted(por_dia):
        entrada = saida = "-"
        horas_dia = 0.0
        for ponto in sorted(por_dia[data], key=attrgetter("hora")):
            if ponto.tipo == ENTRADA and entrada == "-":
                entrada = ponto.hora
            elif ponto.tipo == SAIDA and entrada != "-":
                saida = ponto.hora
                horas_dia += horas_entre(entrada, saida)
                entrada = "-"
        total += horas_dia
        linhas.append(f"{data} | {entrada:<8} | {saida:<8} | {horas_dia:.2f}h")

    linhas.append(f"\nTotal de horas trabalhadas no mês: {total:.2f}h")
    return "\n".join(linhas)


def calcular_horas_trabalhadas(
    sistema: SistemaRH, id_funcionario: int, mes: int, ano: int
) -> str:
    """Same report as :func:`relatorio_mensal`."""
    return relatorio_mensal(sistema, id_funcionario, mes, ano)


def listar_horas_diarias(sistema: SistemaRH, id_funcionario: int, mes: int, ano: int) -> str:
    """Same report as :func:`relatorio_mensal`."""
    return relatorio_mensal(sistema, id_funcionario, mes, ano)


def hora_para_decimal(hora: str) -> float:
    """Convert ``HH:MM:SS`` to hours; shorter strings count as zero.

    Raises ValueError when a field is not numeric.
    """
    if len(hora) < 8:
        return 0.0
    h, m, s = _stoi(hora[0:2]), _stoi(hora[3:5]), _stoi(hora[6:8])
    return h + m / 60.0 + s / 3600.0


def horas_entre(entrada: str, saida: str) -> float:
    """Hours from ``entrada`` to ``saida``; an earlier exit means the next day."""
    inicio = hora_para_decimal(entrada)
    fim = hora_para_decimal(saida)
    if fim >= inicio:
        return fim - inicio
    return (24.0 - inicio) + fim