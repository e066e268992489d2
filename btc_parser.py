"""
Leitura do arquivo BTC
======================
Converte o XML exportado pelo validador (raiz <btcs>) em tuplas imutáveis:

    <btcs CodEmpresa=... >
      <btc matdmtu="951716" nome=... >
        <operacoes>
          <operacao veiculo=... linha=... totalPassageiros=... datainicio=... datafim=...>
            <passageiros>
              <passageiro tipo="1" qtd="20"/>

Os valores são lidos dos atributos; quando o atributo não existe, procura um
elemento filho com o mesmo nome (algumas versões do app exportam assim).
"""

import logging
import xml.etree.ElementTree as ET
from typing import NamedTuple

logger = logging.getLogger(__name__)


class ErroProcessamento(Exception):
    """Falha que impede gerar o arquivo de saída (arquivo, XML ou data inválidos)."""


class Passageiro(NamedTuple):
    tipo: str
    qtd: int


class Operacao(NamedTuple):
    veiculo: str
    linha: str
    total_passageiros: int
    datainicio: str
    datafim: str
    passageiros: tuple = ()


class Btc(NamedTuple):
    matdmtu: str
    nome: str
    doc: str
    data: str
    codigo_td: str
    operacoes: tuple = ()


class DocumentoBTC(NamedTuple):
    versao_app: str
    data_geracao: str
    data_ini: str
    data_fim: str
    cod_funcionario: str
    cod_empresa: str
    btcs: tuple = ()

    @property
    def total_operacoes(self):
        return sum(len(btc.operacoes) for btc in self.btcs)


def _valor(elem, nome, padrao=""):
    """Atributo 'nome' ou texto do filho 'nome'."""
    valor = elem.get(nome)
    if valor is None:
        filho = elem.find(nome)
        if filho is not None and filho.text is not None:
            valor = filho.text
    if valor is None:
        return padrao
    return valor.strip()


def _inteiro(valor):
    try:
        return int(valor)
    except (TypeError, ValueError):
        return 0


def _parse_operacao(elem) -> Operacao:
    passageiros = tuple(
        Passageiro(tipo=_valor(p, "tipo"), qtd=_inteiro(_valor(p, "qtd")))
        for p in elem.findall("passageiros/passageiro")
    )
    return Operacao(
        veiculo=_valor(elem, "veiculo"),
        linha=_valor(elem, "linha"),
        total_passageiros=_inteiro(_valor(elem, "totalPassageiros")),
        datainicio=_valor(elem, "datainicio"),
        datafim=_valor(elem, "datafim"),
        passageiros=passageiros,
    )


def _parse_btc(elem) -> Btc:
    return Btc(
        matdmtu=_valor(elem, "matdmtu"),
        nome=_valor(elem, "nome"),
        doc=_valor(elem, "doc"),
        data=_valor(elem, "data"),
        codigo_td=_valor(elem, "codigoTD"),
        operacoes=tuple(_parse_operacao(op) for op in elem.findall("operacoes/operacao")),
    )


def parse_btcs(conteudo) -> DocumentoBTC:
    """Faz o parse do conteúdo XML (str ou bytes)."""
    if not conteudo or not conteudo.strip():
        raise ErroProcessamento("Arquivo XML vazio")

    try:
        root = ET.fromstring(conteudo.strip())
    except ET.ParseError as e:
        raise ErroProcessamento(f"XML inválido: {e}") from e

    if root.tag != "btcs":
        raise ErroProcessamento(f"Elemento raiz inesperado: <{root.tag}> (esperado <btcs>)")

    btcs = tuple(_parse_btc(b) for b in root.findall("btc"))
    documento = DocumentoBTC(
        versao_app=_valor(root, "versaoApp"),
        data_geracao=_valor(root, "dataGeracao"),
        data_ini=_valor(root, "DataIni"),
        data_fim=_valor(root, "DataFim"),
        cod_funcionario=_valor(root, "CodFuncionario"),
        cod_empresa=_valor(root, "CodEmpresa"),
        btcs=btcs,
    )
    logger.info(
        f"BTC lido: app {documento.versao_app}, gerado em {documento.data_geracao}, "
        f"período {documento.data_ini} a {documento.data_fim}, empresa {documento.cod_empresa}, "
        f"funcionário {documento.cod_funcionario}: {len(btcs)} lote(s), {documento.total_operacoes} operação(ões)"
    )
    return documento


def carregar_btcs(caminho) -> DocumentoBTC:
    try:
        with open(caminho, "rb") as f:
            conteudo = f.read()
    except OSError as e:
        raise ErroProcessamento(f"Não foi possível ler o arquivo {caminho}: {e}") from e
    return parse_btcs(conteudo)
