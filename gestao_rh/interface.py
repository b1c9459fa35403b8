"""Console interaction: prompts, menus, selections and messages."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from typing import TextIO

from .setor import Setor
from .sistema import SistemaRH

_INTEIRO = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def _stoi(texto: str) -> int:
    correspondencia = _INTEIRO.match(texto)
    if correspondencia is None:
        raise ValueError(f"not an integer: {texto!r}")
    valor = int(correspondencia.group(1))
    if not -(2**31) <= valor < 2**31:
        raise ValueError(f"integer out of range: {texto!r}")
    return valor


def limpar_tela() -> int:
    """Clear the terminal screen and return the exit status of the clear command."""
    comando = "cls" if os.name == "nt" else "clear"
    resultado = subprocess.run(comando, shell=True, check=False)
    return resultado.returncode


def formatar_data(data: str) -> str:
    """Dates are already kept as ``DD/MM/AAAA``; return the value unchanged."""
    return data


def formatar_hora(hora: str) -> str:
    """Times are already kept as ``HH:MM:SS``; return the value unchanged."""
    return hora


def formatar_cpf(cpf: str) -> str:
    """Format an 11-digit CPF as ``XXX.XXX.XXX-XX``; other values are returned unchanged."""
    if len(cpf) == 11:
        return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"
    return cpf


def formatar_id(id_funcionario: int) -> str:
    """Pad an id with zeros to five characters."""
    return str(id_funcionario).rjust(5, "0")


class Console:
    """Line-based dialogue over a pair of text streams."""

    def __init__(self, entrada: TextIO | None = None, saida: TextIO | None = None) -> None:
        self._entrada = entrada if entrada is not None else sys.stdin
        self._saida = saida if saida is not None else sys.stdout

    def ler(self, mensagem: str) -> str:
        """Show a prompt and return the next input line without its newline.

        Raises EOFError when the input is exhausted.
        """
        self._saida.write(mensagem)
        self._saida.flush()
        linha = self._entrada.readline()
        if not linha:
            raise EOFError("end of input")
        return linha[:-1] if linha.endswith("\n") else linha

    def escrever(self, texto: str) -> None:
        """Write a line of text."""
        self._saida.write(texto + "\n")

    def _opcoes(self, titulo: str, linhas: list[str]) -> None:
        self.escrever(titulo)
        for linha in linhas:
            self.escrever(linha)
        self._saida.write("Opção: ")
        self._saida.flush()

    def exibir_menu(self) -> None:
        """Show the classic main menu."""
        self._opcoes(
            "\n=== SISTEMA DE RH ===",
            [
                "1. Cadastrar funcionário",
                "2. Buscar funcionário",
                "3. Editar funcionário",
                "4. Excluir funcionário",
                "5. Bater ponto",
                "6. Registrar ponto manual",
                "7. Consultar pontos",
                "8. Listagens",
                "9. Importar dados",
                "10. Exportar dados",
                "0. Sair",
            ],
        )

    def exibir_submenu_listagens(self) -> None:
        """Show the listings menu."""
        self._opcoes(
            "\n=== LISTAGENS ===",
            [
                "1. Exibir todos os funcionários",
                "2. Listar por nome (A-Z)",
                "3. Listar por hierarquia de cargo",
                "4. Listar por setor",
                "5. Listar por setor e cargo",
                "0. Voltar",
            ],
        )

    def exibir_submenu_pontos(self) -> None:
        """Show the time-clock menu."""
        self._opcoes(
            "\n=== GESTÃO DE PONTOS ===",
            [
                "1. Registrar entrada",
                "2. Registrar saída",
                "3. Registrar ponto manual",
                "4. Consultar pontos por funcionário",
                "5. Consultar pontos por data",
                "6. Relatório mensal",
                "7. Calcular horas trabalhadas",
                "0. Voltar",
            ],
        )

    def cabecalho(self, titulo: str) -> None:
        """Show a title between two separators."""
        self.separador()
        self.escrever(f"   {titulo}")
        self.separador()

    def separador(self) -> None:
        """Show a line of fifty equals signs."""
        self.escrever("=" * 50)

    def pausar(self) -> None:
        """Wait for the user to press ENTER."""
        self._saida.write("\nPressione ENTER para continuar...")
        self._saida.flush()
        self._entrada.readline()

    def _escolher(self, titulo: str, nomes: list[str]) -> int | None:
        self.escrever(titulo)
        for numero, nome in enumerate(nomes, start=1):
            self.escrever(f"{numero}. {nome}")
        self.escrever("0. Cancelar")
        entrada = self.ler("Opção: ")
        if entrada == "0":
            return None
        try:
            indice = _stoi(entrada) - 1
        except ValueError:
            indice = -1
        if 0 <= indice < len(nomes):
            return indice
        self.escrever("Opção inválida.")
        return None

    def selecionar_setor(self, sistema: SistemaRH) -> int | None:
        """Let the user pick a department; return its index or None if cancelled."""
        return self._escolher(
            "\n=== Selecionar Setor ===", [s.nome for s in sistema.setores]
        )

    def selecionar_cargo(self, setor: Setor) -> int | None:
        """Let the user pick a position; return its index or None if cancelled."""
        return self._escolher(
            f"\n=== Selecionar Cargo - {setor.nome} ===", [c.nome for c in setor.cargos]
        )

    def selecionar_funcionario(self, sistema: SistemaRH) -> int | None:
        """List employees and read an id; return it, or None if cancelled or unknown."""
        if not sistema.funcionarios:
            self.info("Nenhum funcionário cadastrado.")
            return None
        self.escrever("\n=== Selecionar Funcionário ===")
        self.escrever(f"{'ID':>5} | {'Nome':<30} | Setor")
        self.escrever("-" * 60)
        for func in sistema.funcionarios:
            self.escrever(f"{func.id:<5} | {func.nome:<30} | {func.setor}")
        entrada = self.ler("\nDigite o ID do funcionário (0 para cancelar): ")
        if entrada == "0":
            return None
        try:
            id_funcionario = _stoi(entrada)
        except ValueError:
            self.erro("ID inválido.")
            return None
        if sistema.buscar_funcionario(id_funcionario) is None:
            self.erro("Funcionário não encontrado.")
            return None
        return id_funcionario

    def confirmar(self, mensagem: str) -> bool:
        """Ask a yes/no question; only an explicit yes counts."""
        resposta = self.ler(f"{mensagem} (s/N): ")
        return resposta in ("s", "S", "sim", "Sim")

    def sucesso(self, mensagem: str) -> None:
        """Show a success message."""
        self.escrever(f"\n✓ {mensagem}")

    def erro(self, mensagem: str) -> None:
        """Show an error message."""
        self.escrever(f"\n✗ ERRO: {mensagem}")

    def info(self, mensagem: str) -> None:
        """Show an informational message."""
        self.escrever(f"\nℹ {mensagem}")