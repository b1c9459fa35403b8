from datetime import datetime

import pytest

from gestao_rh.funcionario import Funcionario
from gestao_rh.ponto import (
    PontoError,
    calcular_horas_trabalhadas,
    hora_para_decimal,
    horas_entre,
    listar_horas_diarias,
    listar_por_data,
    listar_por_funcionario,
    listar_todos,
    obter_data_atual,
    obter_hora_atual,
    registrar_entrada,
    registrar_manual,
    registrar_saida,
    relatorio_mensal,
    ultimo_tipo,
    validar_data,
    validar_hora,
)
from gestao_rh.registro_ponto import RegistroPonto
from gestao_rh.sistema import SistemaRH


@pytest.fixture
def sistema():
    s = SistemaRH()
    s.adicionar_funcionario(Funcionario(1, "Ana", "12345678901", "TI", "Gerente"))
    return s


def test_obter_data_e_hora_formatadas():
    momento = datetime(2024, 3, 5, 9, 7, 2)
    assert obter_data_atual(momento) == "05/03/2024"
    assert obter_hora_atual(momento) == "09:07:02"


def test_obter_data_atual_sem_argumento_e_valida():
    assert validar_data(obter_data_atual())
    assert validar_hora(obter_hora_atual())


def test_validar_delegates():
    assert validar_data("29/02/2024")
    assert not validar_data("29/02/2023")
    assert validar_hora("23:59:59")
    assert not validar_hora("24:00:00")


def test_registrar_manual_adiciona(sistema):
    ponto = registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "ENTRADA", "obs")
    assert ponto == RegistroPonto(1, "01/02/2024", "08:00:00", "ENTRADA", "obs")
    assert sistema.pontos == [ponto]


def test_registrar_entrada_usa_agora(sistema):
    momento = datetime(2024, 3, 5, 8, 0, 0)
    ponto = registrar_entrada(sistema, 1, "cedo", agora=momento)
    assert ponto.data == "05/03/2024"
    assert ponto.hora == "08:00:00"
    assert ponto.tipo == "ENTRADA"
    assert ponto.observacao == "cedo"


def test_entrada_duplicada_rejeitada(sistema):
    registrar_entrada(sistema, 1, agora=datetime(2024, 3, 5, 8, 0, 0))
    with pytest.raises(PontoError):
        registrar_entrada(sistema, 1, agora=datetime(2024, 3, 5, 9, 0, 0))
    assert len(sistema.pontos) == 1


def test_saida_sem_entrada_rejeitada(sistema):
    with pytest.raises(PontoError):
        registrar_saida(sistema, 1, agora=datetime(2024, 3, 5, 17, 0, 0))
    assert sistema.pontos == []


def test_entrada_e_saida(sistema):
    registrar_entrada(sistema, 1, agora=datetime(2024, 3, 5, 8, 0, 0))
    saida = registrar_saida(sistema, 1, agora=datetime(2024, 3, 5, 17, 0, 0))
    assert saida.tipo == "SAIDA"
    assert ultimo_tipo(sistema, 1, "05/03/2024") == "SAIDA"
    registrar_entrada(sistema, 1, agora=datetime(2024, 3, 5, 18, 0, 0))
    assert ultimo_tipo(sistema, 1, "05/03/2024") == "ENTRADA"


def test_entrada_outro_dia_permitida(sistema):
    registrar_entrada(sistema, 1, agora=datetime(2024, 3, 5, 8, 0, 0))
    ponto = registrar_entrada(sistema, 1, agora=datetime(2024, 3, 6, 8, 0, 0))
    assert ponto.data == "06/03/2024"
    assert len(sistema.pontos) == 2


def test_ultimo_tipo_por_hora_nao_por_ordem(sistema):
    registrar_manual(sistema, 1, "01/02/2024", "17:00:00", "SAIDA")
    registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "ENTRADA")
    assert ultimo_tipo(sistema, 1, "01/02/2024") == "SAIDA"
    assert ultimo_tipo(sistema, 1, "02/02/2024") == ""
    assert ultimo_tipo(sistema, 2, "01/02/2024") == ""


def test_ultimo_tipo_hora_igual_mantem_primeiro(sistema):
    registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "ENTRADA")
    registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "SAIDA")
    assert ultimo_tipo(sistema, 1, "01/02/2024") == "ENTRADA"


def test_hora_para_decimal():
    assert hora_para_decimal("12:00:00") == 12.0
    assert hora_para_decimal("12:00") == 0.0
    with pytest.raises(ValueError):
        hora_para_decimal("ab:cd:ef")


def test_horas_entre_invariantes():
    assert horas_entre("08:00:00", "08:00:00") == 0.0
    ida = horas_entre("08:15:00", "22:45:30")
    volta = horas_entre("22:45:30", "08:15:00")
    assert ida > 0 and volta > 0
    assert ida + volta == pytest.approx(24.0)


def test_listar_por_funcionario(sistema):
    registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "ENTRADA", "obs")
    registrar_manual(sistema, 2, "01/02/2024", "09:00:00", "SAIDA")
    texto = listar_por_funcionario(sistema, 1)
    assert "01/02/2024 | 08:00:00 | ENTRADA | obs" in texto.splitlines()
    assert "09:00:00" not in texto


def test_listar_por_funcionario_vazio(sistema):
    texto = listar_por_funcionario(sistema, 1)
    assert texto.splitlines()[-1] == "Nenhum registro encontrado para este funcionário."


def test_listar_por_data(sistema):
    registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "SAIDA")
    registrar_manual(sistema, 7, "01/02/2024", "09:00:00", "ENTRADA")
    linhas = listar_por_data(sistema, "01/02/2024").splitlines()
    assert "Ana".ljust(30) + " | 08:00:00 | SAIDA   | " in linhas
    assert "Desconhecido".ljust(30) + " | 09:00:00 | ENTRADA | " in linhas


def test_listar_por_data_vazio(sistema):
    texto = listar_por_data(sistema, "01/02/2024")
    assert texto.splitlines()[-1] == "Nenhum registro encontrado para esta data."


def test_listar_todos(sistema):
    assert listar_todos(sistema).splitlines()[-1] == "Nenhum registro encontrado."
    registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "ENTRADA")
    linhas = listar_todos(sistema).splitlines()
    assert linhas[-1] == "01/02/2024 | " + "Ana".ljust(25) + " | 08:00:00 | ENTRADA | "


def test_relatorio_mensal_sem_registros(sistema):
    registrar_manual(sistema, 1, "01/03/2024", "08:00:00", "ENTRADA")
    texto = relatorio_mensal(sistema, 1, 2, 2024)
    assert texto.splitlines()[-1] == "Nenhum registro encontrado para este período."


def test_relatorio_mensal_um_dia(sistema):
    registrar_manual(sistema, 1, "01/02/2024", "17:00:00", "SAIDA")
    registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "ENTRADA")
    linhas = relatorio_mensal(sistema, 1, 2, 2024).splitlines()
    assert linhas[-1] == "Total de horas trabalhadas no mês: 9.00h"
    assert any(l.startswith("01/02/2024 | -        | 17:00:00 | 9.00h") for l in linhas)


def test_relatorio_mensal_ordena_dias_e_soma(sistema):
    registrar_manual(sistema, 1, "02/02/2024", "08:00:00", "ENTRADA")
    registrar_manual(sistema, 1, "02/02/2024", "12:00:00", "SAIDA")
    registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "ENTRADA")
    registrar_manual(sistema, 1, "01/02/2024", "12:00:00", "SAIDA")
    registrar_manual(sistema, 2, "01/02/2024", "08:00:00", "ENTRADA")
    linhas = relatorio_mensal(sistema, 1, 2, 2024).splitlines()
    dias = [l for l in linhas if l[:2].isdigit()]
    assert [l[:10] for l in dias] == ["01/02/2024", "02/02/2024"]
    assert all(l.endswith("4.00h") for l in dias)
    assert linhas[-1].endswith("8.00h")


def test_relatorio_entrada_aberta(sistema):
    registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "ENTRADA")
    linhas = relatorio_mensal(sistema, 1, 2, 2024).splitlines()
    assert "01/02/2024 | 08:00:00 | -        | 0.00h" in linhas


def test_relatorio_data_invalida_levanta(sistema):
    registrar_manual(sistema, 1, "xx/yy/zzzz", "08:00:00", "ENTRADA")
    with pytest.raises(ValueError):
        relatorio_mensal(sistema, 1, 2, 2024)


def test_aliases_do_relatorio(sistema):
    registrar_manual(sistema, 1, "01/02/2024", "08:00:00", "ENTRADA")
    registrar_manual(sistema, 1, "01/02/2024", "10:00:00", "SAIDA")
    esperado = relatorio_mensal(sistema, 1, 2, 2024)
    assert calcular_horas_trabalhadas(sistema, 1, 2, 2024) == esperado
    assert listar_horas_diarias(sistema, 1, 2, 2024) == esperado