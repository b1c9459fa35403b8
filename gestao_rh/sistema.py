"""In-memory store of employees, departments and time-clock entries."""

from __future__ import annotations

from dataclasses import dataclass, field

from .funcionario import MAX_FUNCIONARIOS, MAX_PONTOS, MAX_SETORES, Funcionario
from .registro_ponto import RegistroPonto
from .setor import Cargo, Setor

HIERARQUIA = (
    "Estagiario",
    "Auxiliar",
    "Assistente 2",
    "Assistente 1",
    "Analista Junior",
    "Analista Pleno",
    "Analista Senior",
    "Coordenador",
    "Gerente",
)

SETORES_PADRAO = (
    "Recursos Humanos",
    "Financeiro",
    "Producao",
    "Estoque",
    "Compras",
    "Vendas",
    "TI",
    "Manutencao",
    "Controle de Qualidade",
    "Garantia de Qualidade",
)


def cargo_rank(cargo: str) -> int:
    """Return the position's rank in the hierarchy; unknown positions rank last."""
    try:
        return HIERARQUIA.index(cargo)
    except ValueError:
        return len(HIERARQUIA)


@dataclass
class SistemaRH:
    """Holds every employee, department and time-clock entry of the system."""

    funcionarios: list[Funcionario] = field(default_factory=list)
    setores: list[Setor] = field(default_factory=list)
    pontos: list[RegistroPonto] = field(default_factory=list)

    def adicionar_funcionario(self, funcionario: Funcionario) -> bool:
        """Add an employee unless the store is full; tell whether it was added."""
        if len(self.funcionarios) >= MAX_FUNCIONARIOS:
            return False
        self.funcionarios.append(funcionario)
        return True

    def buscar_funcionario(self, id_funcionario: int) -> Funcionario | None:
        """Return the first employee with this id, or None."""
        return next((f for f in self.funcionarios if f.id == id_funcionario), None)

    def remover_funcionario(self, id_funcionario: int) -> bool:
        """Remove the first employee with this id; tell whether one was removed."""
        for posicao, funcionario in enumerate(self.funcionarios):
            if funcionario.id == id_funcionario:
                del self.funcionarios[posicao]
                return True
        return False

    def adicionar_setor(self, setor: Setor) -> bool:
        """Add a department unless the store is full; tell whether it was added."""
        if len(self.setores) >= MAX_SETORES:
            return False
        self.setores.append(setor)
        return True

    def inicializar_setores(self) -> None:
        """Replace the departments with the defaults, each allowing every position."""
        self.setores[:] = [
            Setor(nome, [Cargo(cargo) for cargo in HIERARQUIA]) for nome in SETORES_PADRAO
        ]

    def adicionar_ponto(self, ponto: RegistroPonto) -> bool:
        """Add a time-clock entry unless the store is full; tell whether it was added."""
        if len(self.pontos) >= MAX_PONTOS:
            return False
        self.pontos.append(ponto)
        return True