"""Interactive operations of the HR system: employees, time clock and listings."""

from __future__ import annotations

import re

from .funcionario import Funcionario, cpf_valido, formatar_cpf, nome_valido
from .interface import Console, formatar_id
from .ponto import (
    PontoError,
    listar_por_data,
    listar_por_funcionario,
    listar_todos,
    registrar_entrada,
    registrar_manual,
    registrar_saida,
    relatorio_mensal,
)
from .registro_ponto import ENTRADA, SAIDA, RegistroPonto, data_valida, hora_valida
from .sistema import SistemaRH, cargo_rank
from .validacao import entrada_id, entrada_id_existente, entrada_string

_INTEIRO = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def _stoi(texto: str) -> int:
    correspondencia = _INTEIRO.match(texto)
    if correspondencia is None:
        raise ValueError(f"not an integer: {texto!r}")
    valor = int(correspondencia.group(1))
    if not -(2**31) <= valor < 2**31:
        raise ValueError(f"integer out of range: {texto!r}")
    return valor


def _mostrar_com_divisoria(console: Console, funcionarios: list[Funcionario]) -> None:
    for funcionario in funcionarios:
        console.escrever(funcionario.descrever())
        console.escrever("---")


def cadastrar_funcionario(sistema: SistemaRH, console: Console) -> Funcionario | None:
    """Ask for a new employee's data and add it; return it, or None if cancelled."""
    console.cabecalho("CADASTRAR FUNCIONÁRIO")

    nome = entrada_string(console, "Nome: ", nome_valido)
    if nome is None:
        return None
    cpf = entrada_string(console, "CPF (11 dígitos): ", cpf_valido)
    if cpf is None:
        return None
    id_funcionario = entrada_id(console, "ID (5 dígitos): ", sistema, -1)
    if id_funcionario is None:
        return None
    idx_setor = console.selecionar_setor(sistema)
    if idx_setor is None:
        return None
    setor = sistema.setores[idx_setor]
    idx_cargo = console.selecionar_cargo(setor)
    if idx_cargo is None:
        return None
    foto = entrada_string(console, "Foto (opcional): ", None, False) or ""

    funcionario = Funcionario(
        id_funcionario,
        nome,
        formatar_cpf(cpf),
        setor.nome,
        setor.cargos[idx_cargo].nome,
        foto,
    )
    sistema.adicionar_funcionario(funcionario)
    console.sucesso("Funcionário cadastrado com sucesso!")
    return funcionario


def buscar_funcionario(sistema: SistemaRH, console: Console) -> Funcionario | None:
    """Let the user pick an employee and show their data; return the employee."""
    console.cabecalho("BUSCAR FUNCIONÁRIO")
    id_funcionario = console.selecionar_funcionario(sistema)
    if id_funcionario is None:
        return None
    funcionario = sistema.buscar_funcionario(id_funcionario)
    if funcionario is None:
        console.erro("Funcionário não encontrado.")
        return None
    console.escrever("")
    console.separador()
    console.escrever(f"Nome: {funcionario.nome}")
    console.escrever(f"CPF: {formatar_cpf(funcionario.cpf)}")
    console.escrever(f"ID: {formatar_id(funcionario.id)}")
    console.escrever(f"Setor: {funcionario.setor}")
    console.escrever(f"Cargo: {funcionario.cargo}")
    console.escrever(f"Foto: {funcionario.foto or 'Não cadastrada'}")
    console.separador()
    return funcionario


def editar_funcionario(sistema: SistemaRH, console: Console) -> bool:
    """Edit an employee's name, CPF and photo; tell whether the edit was completed."""
    console.escrever("\n=== Editar Funcionário ===")
    id_funcionario = entrada_id_existente(console, "ID do funcionário: ", sistema)
    if id_funcionario is None:
        return False
    funcionario = sistema.buscar_funcionario(id_funcionario)
    if funcionario is None:
        console.escrever("Funcionário não encontrado.")
        return False

    console.escrever("\nDados atuais:")
    console.escrever(funcionario.descrever())
    console.escrever("\n=== Editar Dados (deixe em branco para manter valor atual) ===")

    nome = entrada_string(console, "Novo nome: ", nome_valido, False)
    if nome is None:
        return False
    if nome:
        funcionario.nome = nome

    cpf = entrada_string(console, "Novo CPF: ", cpf_valido, False)
    if cpf is None:
        return False
    if cpf:
        funcionario.cpf = cpf

    foto = entrada_string(console, "Nova foto: ", None, False)
    if foto is None:
        return False
    if foto:
        funcionario.foto = foto

    console.escrever("Funcionário editado com sucesso!")
    return True


def excluir_funcionario(sistema: SistemaRH, console: Console) -> bool:
    """Remove an employee after confirmation; tell whether one was removed."""
    console.cabecalho("EXCLUIR FUNCIONÁRIO")
    id_funcionario = console.selecionar_funcionario(sistema)
    if id_funcionario is None:
        return False
    funcionario = sistema.buscar_funcionario(id_funcionario)
    if funcionario is None:
        console.erro("Funcionário não encontrado.")
        return False

    console.escrever("\nDados do funcionário a ser excluído:")
    console.escrever(f"Nome: {funcionario.nome}")
    console.escrever(f"CPF: {formatar_cpf(funcionario.cpf)}")
    console.escrever(f"ID: {formatar_id(funcionario.id)}")
    console.escrever(f"Setor: {funcionario.setor} / {funcionario.cargo}")

    if console.confirmar("Tem certeza que deseja excluir este funcionário?"):
        sistema.remover_funcionario(id_funcionario)
        console.sucesso("Funcionário excluído com sucesso!")
        return True
    console.info("Operação cancelada.")
    return False


def bater_ponto(sistema: SistemaRH, console: Console) -> RegistroPonto | None:
    """Clock an employee in or out now; return the new entry, or None."""
    console.cabecalho("BATER PONTO")
    id_funcionario = console.selecionar_funcionario(sistema)
    if id_funcionario is None:
        return None
    funcionario = sistema.buscar_funcionario(id_funcionario)
    if funcionario is None:
        console.erro("Funcionário não encontrado.")
        return None

    console.escrever(f"\nFuncionário: {funcionario.nome}")
    console.escrever("1. Registrar Entrada")
    console.escrever("2. Registrar Saída")
    console.escrever("0. Cancelar")
    opcao = console.ler("Opção: ")
    if opcao == "0":
        return None

    observacao = entrada_string(console, "Observação (opcional): ", None, False) or ""

    if opcao == "1":
        registrar, mensagem = registrar_entrada, "Entrada registrada com sucesso às {}."
    elif opcao == "2":
        registrar, mensagem = registrar_saida, "Saída registrada com sucesso às {}."
    else:
        console.erro("Opção inválida.")
        return None

    try:
        ponto = registrar(sistema, id_funcionario, observacao)
    except PontoError as erro:
        console.escrever(f"Erro: {erro}")
        return None
    console.escrever(mensagem.format(ponto.hora))
    return ponto


def registrar_ponto_manual(sistema: SistemaRH, console: Console) -> RegistroPonto | None:
    """Record an entry with a date and time typed by the user; return it, or None."""
    console.escrever("\n=== Registrar Ponto Manual ===")
    id_funcionario = entrada_id_existente(console, "ID do funcionário: ", sistema)
    if id_funcionario is None:
        return None
    funcionario = sistema.buscar_funcionario(id_funcionario)
    if funcionario is None:
        console.escrever("Funcionário não encontrado.")
        return None

    console.escrever(f"Funcionário: {funcionario.nome}")

    data = entrada_string(console, "Data (DD/MM/AAAA): ", data_valida)
    if data is None:
        return None
    hora = entrada_string(console, "Hora (HH:MM:SS): ", hora_valida)
    if hora is None:
        return None

    console.escrever("1. Entrada")
    console.escrever("2. Saída")
    opcao = console.ler("Tipo: ")
    if opcao == "0":
        return None
    tipo = ENTRADA if opcao == "1" else SAIDA

    observacao = entrada_string(console, "Observação (opcional): ", None, False) or ""

    ponto = registrar_manual(sistema, id_funcionario, data, hora, tipo, observacao)
    console.escrever("Ponto registrado com sucesso!")
    return ponto


def consultar_pontos(sistema: SistemaRH, console: Console) -> None:
    """Show time-clock entries by employee, by date, all of them, or a monthly report.

    Raises ValueError when the month or year typed for the report is not a number.
    """
    console.escrever("\n=== Consultar Pontos ===")
    console.escrever("1. Por funcionário")
    console.escrever("2. Por data")
    console.escrever("3. Todos os registros")
    console.escrever("4. Relatório mensal")
    opcao = console.ler("Opção: ")

    if opcao == "0":
        return
    if opcao == "1":
        id_funcionario = entrada_id_existente(console, "ID do funcionário: ", sistema)
        if id_funcionario is not None:
            console.escrever(listar_por_funcionario(sistema, id_funcionario))
    elif opcao == "2":
        data = entrada_string(console, "Data (DD/MM/AAAA): ", data_valida)
        if data is not None:
            console.escrever(listar_por_data(sistema, data))
    elif opcao == "3":
        console.escrever(listar_todos(sistema))
    elif opcao == "4":
        id_funcionario = entrada_id_existente(console, "ID do funcionário: ", sistema)
        if id_funcionario is None:
            return
        mes = _stoi(console.ler("Mês (1-12): "))
        ano = _stoi(console.ler("Ano: "))
        console.escrever(relatorio_mensal(sistema, id_funcionario, mes, ano))
    else:
        console.escrever("Opção inválida.")


def exibir_funcionarios(sistema: SistemaRH, console: Console) -> None:
    """Show every employee as a table row, in insertion order."""
    console.escrever("\n=== Lista de Funcionários ===")
    if not sistema.funcionarios:
        console.escrever("Nenhum funcionário cadastrado.")
        return
    console.escrever("ID   | Nome                          | CPF          | Setor/Cargo")
    console.escrever(
        "-----|-------------------------------|--------------|----------------------------"
    )
    for f in sistema.funcionarios:
        console.escrever(f"{f.id:<4} | {f.nome:<29} | {f.cpf} | {f.setor}/{f.cargo}")


def listar_por_nome(sistema: SistemaRH, console: Console) -> list[Funcionario]:
    """Show the employees sorted by name; return them in that order."""
    console.escrever("\n=== Funcionários por Nome (A-Z) ===")
    ordenados = sorted(sistema.funcionarios, key=lambda f: f.nome)
    _mostrar_com_divisoria(console, ordenados)
    return ordenados


def listar_por_cargo_hierarquico(sistema: SistemaRH, console: Console) -> list[Funcionario]:
    """Show the employees sorted by position rank; return them in that order."""
    console.escrever("\n=== Funcionários por Hierarquia de Cargo ===")
    ordenados = sorted(sistema.funcionarios, key=lambda f: cargo_rank(f.cargo))
    _mostrar_com_divisoria(console, ordenados)
    return ordenados


def listar_por_setor_hierarquico(sistema: SistemaRH, console: Console) -> None:
    """Show the employees grouped under each department."""
    console.escrever("\n=== Funcionários por Setor ===")
    for setor in sistema.setores:
        console.escrever(f"\n{setor.nome}:")
        console.escrever("=" * (len(setor.nome) + 1))
        _mostrar_com_divisoria(
            console, [f for f in sistema.funcionarios if f.setor == setor.nome]
        )


def listar_por_setor_e_cargo(sistema: SistemaRH, console: Console) -> None:
    """Show the employees grouped by department and then by position."""
    console.escrever("\n=== Funcionários por Setor e Cargo ===")
    for setor in sistema.setores:
        console.escrever(f"\n{setor.nome}:")
        console.escrever("=" * (len(setor.nome) + 1))
        for cargo in setor.cargos:
            console.escrever(f"\n  {cargo.nome}:")
            nomes = [
                f"    {f.nome} (ID: {f.id})"
                for f in sistema.funcionarios
                if f.setor == setor.nome and f.cargo == cargo.nome
            ]
            for linha in nomes or ["    (Nenhum funcionário)"]:
                console.escrever(linha)