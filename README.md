# gestao-rh

A console human-resources system. It keeps employee records, lists them by
name, by position in the job hierarchy, by sector, or by sector and position,
and records clock-in and clock-out entries with a monthly hours report. The
interface text is in Portuguese.

## Installation

```
pip install .
```

## Usage

Start the interactive menu from the directory that holds your data:

```
gestao-rh
```

The command clears the screen, then tries to load `funcionarios.txt` and
`pontos.txt` from the current directory, reporting how many records were read
or that a file could not be opened. The main menu offers:

1. register an employee (name, 11-digit CPF, 5-digit ID from 00001 to 99999, sector, position, optional photo path)
2. listings: all employees as a table, by name, by position hierarchy, by sector, or by sector and position
3. look up an employee by ID
4. edit an employee's name, CPF and photo
5. delete an employee, after confirmation
6. clock in or out at the current time
7. record a clock entry by hand (date `DD/MM/AAAA`, time `HH:MM:SS`)
8. query clock entries by employee, by date, all of them, or as a monthly hours report
9. save, import or export the data files
0. quit

At most prompts, entering `0` cancels the current action. Clocking in is
refused while the employee's latest entry of the day is already an entry;
clocking out is refused unless it is. On quitting, the program asks whether to
save to `funcionarios.txt` and `pontos.txt` first. The program also stops when
its input ends.

## Data files

Each line of `funcionarios.txt` describes one employee:

```
id;nome;cpf;setor;cargo;foto
```

Clock entries are exported one per line, separated by `;`:

```
idFuncionario;data;hora;tipo;observacao
```

but they are imported with `|` as the separator:

```
idFuncionario|data|hora|tipo|observacao
```

`tipo` is `ENTRADA` or `SAIDA`. Empty lines and lines with too few fields are
skipped; a line whose ID is not a number is reported and skipped.

Every sector (Recursos Humanos, Financeiro, Producao, Estoque, Compras,
Vendas, TI, Manutencao, Controle de Qualidade, Garantia de Qualidade) has the
same positions, from lowest to highest: Estagiario, Auxiliar, Assistente 2,
Assistente 1, Analista Junior, Analista Pleno, Analista Senior, Coordenador,
Gerente.

## Using it as a library

```python
from datetime import datetime

from gestao_rh.funcionario import Funcionario
from gestao_rh.persistencia import exportar_funcionarios, importar_funcionarios
from gestao_rh.ponto import PontoError, registrar_entrada, relatorio_mensal
from gestao_rh.sistema import SistemaRH

sistema = SistemaRH()
sistema.inicializar_setores()
sistema.adicionar_funcionario(
    Funcionario(1, "Maria Souza", "00000000000", "Financeiro", "Analista Pleno")
)

registrar_entrada(sistema, 1, agora=datetime(2024, 3, 4, 8, 0, 0))
try:
    registrar_entrada(sistema, 1, agora=datetime(2024, 3, 4, 9, 0, 0))
except PontoError as erro:
    print(erro)

print(relatorio_mensal(sistema, 1, 3, 2024))

exportar_funcionarios(sistema, "funcionarios.txt")
resultado = importar_funcionarios(SistemaRH(), "funcionarios.txt")
print(resultado.importados, resultado.linhas_invalidas)
```

- `gestao_rh.funcionario`: `Funcionario` and the field checks (`nome_valido`, `cpf_valido`, ...).
  Assigning an invalid value to an attribute is ignored; a valid name is re-capitalised.
- `gestao_rh.setor`: `Setor`, `Cargo` and name checks.
- `gestao_rh.registro_ponto`: `RegistroPonto`, `data_valida`, `hora_valida`.
- `gestao_rh.sistema`: `SistemaRH`, which holds at most 1000 employees, 20 sectors
  and 10000 clock entries, and `cargo_rank`.
- `gestao_rh.ponto`: clocking in and out, and report tables returned as strings.
- `gestao_rh.persistencia`: reading and writing the data files; opening errors raise `OSError`.
- `gestao_rh.interface`: `Console`, the line-based dialogue used by the menus.
- `gestao_rh.operacoes` and `gestao_rh.app`: the interactive operations and the main menu.

## Limitations

- CPF check digits are not verified; any eleven digits are accepted.
- A clock-entry file written by the export cannot be read back by the import,
  because the two use different separators.
- Typing a non-numeric month or year for the monthly report raises `ValueError`.

## Tests

```
pip install .[test]
pytest
```