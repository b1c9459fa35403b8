import io

import pytest

from gestao_rh.funcionario import Funcionario, formatar_cpf, formatar_nome
from gestao_rh.interface import Console
from gestao_rh.operacoes import (
    bater_ponto,
    buscar_funcionario,
    cadastrar_funcionario,
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
from gestao_rh.ponto import listar_todos, relatorio_mensal
from gestao_rh.registro_ponto import ENTRADA, SAIDA, RegistroPonto
from gestao_rh.sistema import SistemaRH


def _console(*linhas):
    entrada = io.StringIO("".join(linha + "\n" for linha in linhas))
    saida = io.StringIO()
    return Console(entrada, saida), saida


@pytest.fixture
def sistema():
    s = SistemaRH()
    s.inicializar_setores()
    s.adicionar_funcionario(
        Funcionario(42, "Ana Silva", "12345678901", "Financeiro", "Gerente")
    )
    return s


def test_cadastrar_adiciona_funcionario():
    s = SistemaRH()
    s.inicializar_setores()
    console, _ = _console("Bruno Lima", "98765432100", "00007", "1", "1", "")
    novo = cadastrar_funcionario(s, console)
    assert s.funcionarios == [novo]
    assert novo.id == 7
    assert novo.cpf == formatar_cpf("98765432100")
    assert novo.setor == s.setores[0].nome
    assert novo.cargo == s.setores[0].cargos[0].nome
    assert novo.foto == ""


def test_cadastrar_cancelado_no_nome(sistema):
    console, _ = _console("0")
    assert cadastrar_funcionario(sistema, console) is None
    assert len(sistema.funcionarios) == 1


def test_cadastrar_rejeita_id_em_uso(sistema):
    console, saida = _console("Bruno Lima", "98765432100", "00042", "0")
    assert cadastrar_funcionario(sistema, console) is None
    assert "ID invalido" in saida.getvalue()
    assert len(sistema.funcionarios) == 1


def test_buscar_mostra_dados(sistema):
    console, saida = _console("42")
    encontrado = buscar_funcionario(sistema, console)
    assert encontrado is sistema.funcionarios[0]
    texto = saida.getvalue()
    assert f"CPF: {formatar_cpf('12345678901')}" in texto
    assert "ID: 00042" in texto
    assert "Foto: Não cadastrada" in texto


def test_buscar_id_desconhecido(sistema):
    console, saida = _console("99")
    assert buscar_funcionario(sistema, console) is None
    assert "Funcionário não encontrado." in saida.getvalue()


def test_editar_altera_nome_e_mantem_resto(sistema):
    console, _ = _console("00042", "maria souza", "", "")
    assert editar_funcionario(sistema, console) is True
    funcionario = sistema.funcionarios[0]
    assert funcionario.nome == formatar_nome("maria souza")
    assert funcionario.cpf == "12345678901"


def test_editar_cancelado(sistema):
    console, _ = _console("00042", "0")
    assert editar_funcionario(sistema, console) is False
    assert sistema.funcionarios[0].nome == "Ana Silva"


def test_excluir_confirmado(sistema):
    console, _ = _console("42", "s")
    assert excluir_funcionario(sistema, console) is True
    assert sistema.funcionarios == []


def test_excluir_negado(sistema):
    console, saida = _console("42", "n")
    assert excluir_funcionario(sistema, console) is False
    assert len(sistema.funcionarios) == 1
    assert "Operação cancelada." in saida.getvalue()


def test_bater_ponto_entrada_e_repeticao(sistema):
    console, _ = _console("42", "1", "")
    ponto = bater_ponto(sistema, console)
    assert ponto.tipo == ENTRADA
    assert sistema.pontos == [ponto]

    console, saida = _console("42", "1", "")
    assert bater_ponto(sistema, console) is None
    assert "Erro:" in saida.getvalue()
    assert len(sistema.pontos) == 1


def test_bater_ponto_saida_sem_entrada(sistema):
    console, saida = _console("42", "2", "")
    assert bater_ponto(sistema, console) is None
    assert sistema.pontos == []
    assert "Erro:" in saida.getvalue()


def test_registrar_manual_entrada(sistema):
    console, _ = _console("00042", "10/03/2024", "08:00:00", "1", "chegada")
    ponto = registrar_ponto_manual(sistema, console)
    assert ponto == RegistroPonto(42, "10/03/2024", "08:00:00", ENTRADA, "chegada")
    assert sistema.pontos == [ponto]


def test_registrar_manual_outro_tipo_vira_saida(sistema):
    console, _ = _console("00042", "10/03/2024", "17:00:00", "2", "")
    ponto = registrar_ponto_manual(sistema, console)
    assert ponto.tipo == SAIDA


def test_registrar_manual_repete_data_invalida(sistema):
    console, saida = _console("00042", "31/02/2024", "0")
    assert registrar_ponto_manual(sistema, console) is None
    assert "Entrada invalida" in saida.getvalue()
    assert sistema.pontos == []


def test_consultar_todos(sistema):
    sistema.adicionar_ponto(RegistroPonto(42, "10/03/2024", "08:00:00", ENTRADA))
    console, saida = _console("3")
    consultar_pontos(sistema, console)
    assert listar_todos(sistema) in saida.getvalue()


def test_consultar_relatorio_mensal(sistema):
    sistema.adicionar_ponto(RegistroPonto(42, "10/03/2024", "08:00:00", ENTRADA))
    sistema.adicionar_ponto(RegistroPonto(42, "10/03/2024", "12:00:00", SAIDA))
    console, saida = _console("4", "00042", "3", "2024")
    consultar_pontos(sistema, console)
    assert relatorio_mensal(sistema, 42, 3, 2024) in saida.getvalue()


def test_consultar_relatorio_mes_invalido(sistema):
    console, _ = _console("4", "00042", "abc")
    with pytest.raises(ValueError):
        consultar_pontos(sistema, console)


def test_consultar_opcao_invalida(sistema):
    console, saida = _console("9")
    consultar_pontos(sistema, console)
    assert saida.getvalue().rstrip().endswith("Opção inválida.")


def test_exibir_funcionarios_vazio():
    console, saida = _console()
    exibir_funcionarios(SistemaRH(), console)
    assert "Nenhum funcionário cadastrado." in saida.getvalue()


def test_exibir_funcionarios_linha(sistema):
    console, saida = _console()
    exibir_funcionarios(sistema, console)
    assert "| 12345678901 | Financeiro/Gerente" in saida.getvalue()


def test_listar_por_nome_ordena(sistema):
    sistema.adicionar_funcionario(
        Funcionario(7, "Aaron Reis", "11111111111", "TI", "Auxiliar")
    )
    console, _ = _console()
    ordenados = listar_por_nome(sistema, console)
    nomes = [f.nome for f in ordenados]
    assert nomes == sorted(nomes)
    assert len(ordenados) == 2


def test_listar_por_cargo_ordena(sistema):
    sistema.adicionar_funcionario(
        Funcionario(7, "Zeca Reis", "11111111111", "TI", "Estagiario")
    )
    console, _ = _console()
    ordenados = listar_por_cargo_hierarquico(sistema, console)
    assert [f.id for f in ordenados] == [7, 42]


def test_listar_por_setor(sistema):
    console, saida = _console()
    listar_por_setor_hierarquico(sistema, console)
    texto = saida.getvalue()
    assert "\nFinanceiro:\n===========\n" in texto
    assert texto.count("Nome   : Ana Silva") == 1


def test_listar_por_setor_e_cargo(sistema):
    console, saida = _console()
    listar_por_setor_e_cargo(sistema, console)
    texto = saida.getvalue()
    assert "    Ana Silva (ID: 42)" in texto
    assert "    (Nenhum funcionário)" in texto