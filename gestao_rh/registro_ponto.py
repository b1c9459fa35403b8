"""Time-clock entries and the rules for their fields."""

from __future__ import annotations

import string
from dataclasses import dataclass

ENTRADA = "ENTRADA"
SAIDA = "SAIDA"

_DIGITOS = frozenset(string.digits)
_DIAS_POR_MES = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass
class RegistroPonto:
    """One clock-in or clock-out of an employee.

    ``data`` is ``DD/MM/AAAA``, ``hora`` is ``HH:MM:SS`` and ``tipo`` is
    ``ENTRADA`` or ``SAIDA``.
    """

    id_funcionario: int
    data: str
    hora: str
    tipo: str
    observacao: str = ""

    def para_linha(self) -> str:
        """Return the ``id;data;hora;tipo;observacao`` line for this entry."""
        return ";".join(
            [str(self.id_funcionario), self.data, self.hora, self.tipo, self.observacao]
        )


def _campos_numericos(texto: str, separador: str, tamanho: int) -> list[int] | None:
    if len(texto) != tamanho or texto[2] != separador or texto[5] != separador:
        return None
    if not all(c in _DIGITOS for i, c in enumerate(texto) if i not in (2, 5)):
        return None
    return [int(parte) for parte in texto.split(separador)]


def _bissexto(ano: int) -> bool:
    return ano % 4 == 0 and (ano % 100 != 0 or ano % 400 == 0)


def data_valida(data: str) -> bool:
    """Tell whether ``data`` is a real calendar date ``DD/MM/AAAA`` in 1900–2100."""
    campos = _campos_numericos(data, "/", 10)
    if campos is None:
        return False
    dia, mes, ano = campos
    if not 1 <= mes <= 12 or not 1 <= dia <= 31 or not 1900 <= ano <= 2100:
        return False
    limite = 29 if mes == 2 and _bissexto(ano) else _DIAS_POR_MES[mes - 1]
    return dia <= limite


def hora_valida(hora: str) -> bool:
    """Tell whether ``hora`` is a time of day ``HH:MM:SS``."""
    campos = _campos_numericos(hora, ":", 8)
    if campos is None:
        return False
    horas, minutos, segundos = campos
    return horas < 24 and minutos < 60 and segundos < 60


def tipo_valido(tipo: str) -> bool:
    """Tell whether ``tipo`` is ``ENTRADA`` or ``SAIDA``."""
    return tipo in (ENTRADA, SAIDA)


def observacao_valida(observacao: str) -> bool:
    """A note has at most 100 characters."""
    return len(observacao) <= 100


def formatar_data(data: str) -> str:
    """Return the date unchanged if valid, otherwise an empty string."""
    return data if data_valida(data) else ""


def formatar_hora(hora: str) -> str:
    """Return the time unchanged if valid, otherwise an empty string."""
    return hora if hora_valida(hora) else ""