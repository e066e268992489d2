"""
Pytest Configuration and Fixtures
==================================
Fixtures compartilhadas: XML de exemplo, provedores falsos e banco SQLite temporário.
"""

import os
import sys
import sqlite3

import pytest

# Adicionar a raiz do projeto ao path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database import init_db
from processor import ContextoExecucao
from services.referencia import ProvedorReferencia


CABECALHO_BTCS = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<btcs versaoApp="1.0" dataGeracao="2024-01-15 10:00:00" DataIni="2024-01-15" '
    'DataFim="2024-01-15" CodFuncionario="123" NFuncionario="João Silva" CodEmpresa="1">\n'
)


def montar_operacao(linha="1001", veiculo="1001", inicio="2024-01-15 08:00:00",
                    fim="2024-01-15 09:30:00", total="50", passageiros=None):
    passageiros = passageiros if passageiros is not None else {"1": 20}
    itens = "".join(
        f'<passageiro tipo="{tipo}" vlUnitario="5.00" qtd="{qtd}" qtdCreditos="0" idoso="0"/>'
        for tipo, qtd in passageiros.items()
    )
    return (
        f'<operacao codigoEmpresa="1" veiculo="{veiculo}" linha="{linha}" roletaInicial="1000" '
        f'roletaFinal="2000" totalPassageiros="{total}" tarifaAtual="5.00" Receita="250.00" '
        f'datainicio="{inicio}" datafim="{fim}">'
        f'<passageiros>{itens}</passageiros>'
        f'<coletas recebido="250.00" girosPagantes="45" girosCartoes="35" engolidos="0"/>'
        f'</operacao>'
    )


def montar_xml(*operacoes, matdmtu="951716"):
    return (
        CABECALHO_BTCS
        + f'<btc doc="123456" matdmtu="{matdmtu}" data="2024-01-15" nome="João Silva" codigoTD="TD001">'
        + "<operacoes>" + "".join(operacoes) + "</operacoes></btc></btcs>"
    )


class IdentidadeFalsa:
    """Resolvedor em memória; conta as consultas feitas."""

    def __init__(self, cpfs=None, erro=None):
        self.cpfs = cpfs or {}
        self.erro = erro
        self.consultas = []

    def cpf_motorista(self, codigo):
        self.consultas.append(codigo)
        if self.erro:
            raise self.erro
        return self.cpfs.get(codigo, "")


@pytest.fixture
def xml_valido():
    """Um lote com uma operação da linha 1001 (fixture do caso ponta a ponta)."""
    return montar_xml(montar_operacao(passageiros={"1": 20, "2": 15, "3": 5, "4": 10}))


@pytest.fixture
def escrever_xml(tmp_path):
    def _escrever(conteudo, nome="btc.xml"):
        caminho = tmp_path / nome
        caminho.write_text(conteudo, encoding="utf-8")
        return str(caminho)
    return _escrever


@pytest.fixture
def identidade():
    return IdentidadeFalsa({"951716": "377.209.881-91"})


@pytest.fixture
def contexto(identidade):
    return ContextoExecucao(referencia=ProvedorReferencia(fonte="estatica"), identidade=identidade)


@pytest.fixture
def banco_sqlite(tmp_path):
    """
    Banco SQLite em arquivo temporário com o schema criado e referência populada.

    Returns:
        Função que abre uma nova conexão (mesma assinatura de get_connection)
    """
    caminho = str(tmp_path / "teste.db")

    def factory():
        return sqlite3.connect(caminho)

    conn = factory()
    init_db(conn)
    conn.executemany(
        "INSERT INTO pessoa (cod_identificador, cpf, funcao) VALUES (?, ?, ?)",
        [(951716, "377.209.881-91", "Motorista"), (100200, None, "Motorista")],
    )
    conn.commit()
    conn.close()
    return factory


@pytest.fixture
def banco_fora_do_ar():
    def factory():
        raise sqlite3.OperationalError("unable to open database file")
    return factory
