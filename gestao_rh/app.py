"""Entry point of the integrated HR system: main menu, submenus and startup."""

from __future__ import annotations

import argparse
from typing import Callable

from .funcionario import Funcionario, cpf_valido, foto_valida, nome_valido
from .interface import Console, limpar_tela
from .operacoes import (
    bater_ponto,
    buscar_funcionario,
    consultar_pontos,
    editar_funcionario,
    excluir_funcionario,
    exibir_funcionarios,
    listar_por_cargo_hierarquico,
    listar_por_nome,
    listar_por_setor_e_cargo,
    listar_por_setor_hierarquico,
    registrar_ponto_manual,
)
from .persistencia import (
    exportar_funcionarios,
    exportar_pontos,
    importar_funcionarios,
    importar_pontos,
)
from .sistema import SistemaRH, cargo_rank
from .validacao import id_formato_valido, id_valido

ARQUIVO_FUNCIONARIOS = "funcionarios.txt"
ARQUIVO_PONTOS = "pontos.txt"

Acao = Callable[[SistemaRH, Console], object]


def entrada_validada(
    console: Console,
    mensagem: str,
    validador: Callable[[str], bool],
    obrigatorio: bool = True,
) -> str | None:
    """Prompt until ``validador`` accepts the answer.

    Returns None when the user types ``0``; returns ``""`` for an empty answer
    when the field is optional.
    """
    while True:
        entrada = console.ler(mensagem)
        if entrada == "0":
            return None
        if not obrigatorio and not entrada:
            return ""
        if validador(entrada):
            return entrada
        console.escrever("Entrada invalida. Tente novamente ou digite 0 para cancelar.")


def listar_por_nome_estendido(sistema: SistemaRH, console: Console) -> list[Funcionario]:
    """Show the employees in alphabetical order; return them in that order."""
    if not sistema.funcionarios:
        console.escrever("Nenhum funcionario cadastrado.")
        return []
    ordenados = sorted(sistema.funcionarios, key=lambda f: f.nome)
    console.escrever("\nFuncionarios em ordem alfabetica (polimorfismo):")
    for funcionario in ordenados:
        console.escrever(funcionario.descrever())
    return ordenados


def listar_por_cargo_estendido(sistema: SistemaRH, console: Console) -> list[Funcionario]:
    """Show the employees by position rank, then by name; return them in that order."""
    if not sistema.funcionarios:
        console.escrever("Nenhum funcionario cadastrado.")
        return []
    ordenados = sorted(sistema.funcionarios, key=lambda f: (cargo_rank(f.cargo), f.nome))
    console.escrever(
        "\nFuncionarios ordenados por cargo (hierarquia crescente - polimorfismo):"
    )
    for funcionario in ordenados:
        console.escrever(funcionario.descrever())
    return ordenados


def cadastrar_funcionario_estendido(
    sistema: SistemaRH, console: Console
) -> Funcionario | None:
    """Ask for a new employee's data and add it; return it, or None if cancelled."""
    console.escrever("\n=== Cadastrar Funcionário ===")

    def cancelar() -> None:
        console.escrever("Cadastro cancelado.")

    nome = entrada_validada(console, "Nome (ou 0 para cancelar): ", nome_valido)
    if nome is None:
        return cancelar()
    cpf = entrada_validada(console, "CPF (11 digitos, ou 0 para cancelar): ", cpf_valido)
    if cpf is None:
        return cancelar()
    id_str = entrada_validada(
        console,
        "ID (00001 a 99999, 5 digitos, ou 0 para cancelar): ",
        lambda s: id_formato_valido(s) and id_valido(int(s), sistema),
    )
    if id_str is None:
        return cancelar()

    idx_setor = console.selecionar_setor(sistema)
    if idx_setor is None:
        return cancelar()
    setor = sistema.setores[idx_setor]
    idx_cargo = console.selecionar_cargo(setor)
    if idx_cargo is None:
        return cancelar()

    foto = entrada_validada(console, "Caminho da foto (ou deixe vazio): ", foto_valida, False)
    if foto is None:
        foto = "0"

    funcionario = Funcionario(
        int(id_str), nome, cpf, setor.nome, setor.cargos[idx_cargo].nome, foto
    )
    sistema.adicionar_funcionario(funcionario)
    console.escrever("Funcionario cadastrado com sucesso!")
    return funcionario


def _importar_funcionarios(sistema: SistemaRH, console: Console, caminho: str) -> None:
    try:
        resultado = importar_funcionarios(sistema, caminho)
    except OSError:
        console.escrever(f"Não foi possível abrir o arquivo: {caminho}")
        return
    for linha in resultado.linhas_invalidas:
        console.escrever(f"Erro ao processar linha: {linha}")
    console.escrever(f"Importados {resultado.importados} funcionários de {caminho}")


def _importar_pontos(sistema: SistemaRH, console: Console, caminho: str) -> None:
    try:
        resultado = importar_pontos(sistema, caminho)
    except OSError:
        console.escrever(f"Não foi possível abrir o arquivo: {caminho}")
        return
    for linha in resultado.linhas_invalidas:
        console.escrever(f"Erro ao processar linha: {linha}")
    console.escrever(f"Importados {resultado.importados} registros de ponto de {caminho}")


def _exportar_funcionarios(sistema: SistemaRH, console: Console, caminho: str) -> None:
    try:
        quantidade = exportar_funcionarios(sistema, caminho)
    except OSError:
        console.escrever(f"Não foi possível criar o arquivo: {caminho}")
        return
    console.escrever(f"Exportados {quantidade} funcionários para {caminho}")


def _exportar_pontos(sistema: SistemaRH, console: Console, caminho: str) -> None:
    try:
        quantidade = exportar_pontos(sistema, caminho)
    except OSError:
        console.escrever(f"Não foi possível criar o arquivo: {caminho}")
        return
    console.escrever(f"Exportados {quantidade} registros de ponto para {caminho}")


def _salvar(sistema: SistemaRH, console: Console) -> None:
    _exportar_funcionarios(sistema, console, ARQUIVO_FUNCIONARIOS)
    _exportar_pontos(sistema, console, ARQUIVO_PONTOS)


def _ler_arquivo(console: Console, descricao: str, padrao: str) -> str:
    return console.ler(f"Nome do arquivo para {descricao} (ENTER para '{padrao}'): ") or padrao


_LISTAGENS: dict[str, Acao] = {
    "1": exibir_funcionarios,
    "2": listar_por_nome,
    "3": listar_por_nome_estendido,
    "4": listar_por_cargo_hierarquico,
    "5": listar_por_cargo_estendido,
    "6": listar_por_setor_hierarquico,
    "7": listar_por_setor_e_cargo,
}


def _submenu_listagens(sistema: SistemaRH, console: Console) -> None:
    while True:
        console.escrever("\n--- LISTAGENS INTEGRADAS ---")
        for linha in (
            "1 - Listar todos (original)",
            "2 - Listar por nome (original)",
            "3 - Listar por nome (interface avançada)",
            "4 - Listar por cargo hierarquico (original)",
            "5 - Listar por cargo hierarquico (interface avançada)",
            "6 - Listar por setor hierarquico",
            "7 - Listar por setor e cargo",
            "0 - Voltar",
            "============================",
        ):
            console.escrever(linha)
        opcao = console.ler("Selecione a opcao: ")
        if opcao == "0":
            console.escrever("Voltando ao menu principal...")
            return
        acao = _LISTAGENS.get(opcao)
        if acao is None:
            console.escrever("Opcao invalida.")
        else:
            acao(sistema, console)


def _submenu_importar_exportar(sistema: SistemaRH, console: Console) -> None:
    while True:
        console.escrever("\n--- IMPORTAR/EXPORTAR ---")
        for linha in (
            "1 - Salvar dados atuais",
            "2 - Importar funcionários de arquivo",
            "3 - Importar pontos de arquivo",
            "4 - Exportar funcionários para arquivo",
            "5 - Exportar pontos para arquivo",
            "0 - Voltar",
            "=========================",
        ):
            console.escrever(linha)
        opcao = console.ler("Selecione a opcao: ")
        if opcao == "0":
            console.escrever("Voltando ao menu principal...")
            return
        if opcao == "1":
            _salvar(sistema, console)
            console.escrever("Dados salvos com sucesso.")
        elif opcao == "2":
            caminho = _ler_arquivo(console, "importar funcionários", ARQUIVO_FUNCIONARIOS)
            _importar_funcionarios(sistema, console, caminho)
        elif opcao == "3":
            caminho = _ler_arquivo(console, "importar pontos", ARQUIVO_PONTOS)
            _importar_pontos(sistema, console, caminho)
        elif opcao == "4":
            caminho = _ler_arquivo(console, "exportar funcionários", ARQUIVO_FUNCIONARIOS)
            _exportar_funcionarios(sistema, console, caminho)
        elif opcao == "5":
            caminho = _ler_arquivo(console, "exportar pontos", ARQUIVO_PONTOS)
            _exportar_pontos(sistema, console, caminho)
        else:
            console.escrever("Opcao invalida.")


_ACOES: dict[str, Acao] = {
    "1": cadastrar_funcionario_estendido,
    "2": _submenu_listagens,
    "3": buscar_funcionario,
    "4": editar_funcionario,
    "5": excluir_funcionario,
    "6": bater_ponto,
    "7": registrar_ponto_manual,
    "8": consultar_pontos,
    "9": _submenu_importar_exportar,
}


def _menu_principal(console: Console) -> str:
    console.escrever("")
    console.separador()
    console.escrever("           SISTEMA RH INTEGRADO")
    console.separador()
    for linha in (
        "1 - Cadastrar funcionário",
        "2 - Listar funcionários",
        "3 - Buscar funcionário por ID",
        "4 - Editar funcionário",
        "5 - Excluir funcionário",
        "6 - Bater ponto",
        "7 - Registrar ponto manual",
        "8 - Consultar pontos",
        "9 - Importar/Exportar dados",
        "0 - Sair",
    ):
        console.escrever(linha)
    console.separador()
    return console.ler("Selecione a opção desejada: ")


def _encerrar(sistema: SistemaRH, console: Console) -> None:
    if console.confirmar("Deseja salvar antes de sair?"):
        _salvar(sistema, console)
        console.sucesso("Dados salvos com sucesso!")
    console.cabecalho("OBRIGADO POR USAR O SISTEMA RH!")
    console.escrever("Sistema encerrado com sucesso.")


def executar(sistema: SistemaRH, console: Console) -> None:
    """Run the main menu until the user quits or the input ends."""
    try:
        while True:
            opcao = _menu_principal(console)
            if opcao == "0":
                _encerrar(sistema, console)
                return
            acao = _ACOES.get(opcao)
            if acao is None:
                console.erro("Opção inválida. Tente novamente.")
            else:
                acao(sistema, console)
            console.pausar()
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the HR system on the terminal, loading and saving the default data files."""
    parser = argparse.ArgumentParser(
        prog="gestao-rh", description="Sistema de gestão de recursos humanos."
    )
    parser.parse_args(argv)

    sistema = SistemaRH()
    sistema.inicializar_setores()
    console = Console()

    limpar_tela()
    console.cabecalho("SISTEMA DE GESTÃO DE RECURSOS HUMANOS")
    console.escrever("Bem-vindo ao Sistema RH Integrado!")
    console.separador()

    _importar_funcionarios(sistema, console, ARQUIVO_FUNCIONARIOS)
    _importar_pontos(sistema, console, ARQUIVO_PONTOS)
    if sistema.funcionarios:
        console.info("Dados carregados com sucesso!")

    executar(sistema, console)
    return 0