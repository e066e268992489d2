"""
Processador de BTC
==================
Converte o XML do validador em uma linha de relatório por operação (viagem):
- Sentido alternado por linha (1ª ocorrência GO-DF, 2ª DF-GO, ...)
- Prefixo ANTT, coordenadas e km a partir dos dados de referência
- Placa do veículo e CPF do motorista (matrícula do lote)
- Passageiros por categoria, com divisão do tipo 2 (1/3 passe livre, 2/3 idoso)
- Tempo, distância e velocidade média, com a velocidade limitada à faixa plausível

Tudo é calculado em memória antes de escrever; se qualquer data for inválida
nenhum arquivo é gerado.
"""

import os
import math
import logging
import argparse
from collections import defaultdict
from datetime import datetime
from enum import IntEnum
from functools import lru_cache
from typing import NamedTuple

from btc_parser import ErroProcessamento, carregar_btcs
from exportador import ESCRITORES
from services.geodesia import distancia_km
from services.identidade import ResolvedorIdentidade, formatar_cpf
from services.referencia import ProvedorReferencia
from config import (
    EMPRESA_NOME, VELOCIDADE_MAXIMA_KMH, VELOCIDADE_MINIMA_KMH, VELOCIDADE_MEDIA_KMH,
    FORMATO_DATA_ENTRADA, FORMATO_DATA_SAIDA, FORMATO_HORA_SAIDA
)

# Configurar logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

SENTIDO_IDA = "GO-DF"
SENTIDO_VOLTA = "DF-GO"


class CategoriaTarifa(IntEnum):
    VT = 1            # eletrônico vale-transporte
    COMUM = 2         # eletrônico comum (mistura idoso e passe livre)
    PASSE_LIVRE = 3
    DINHEIRO = 4
    IDOSO = 5
    FUNCIONARIO = 6


# ==========================================
# SENTIDO
# ==========================================

class ContadorSentido:
    """Contador de ocorrências por linha. Uma instância por execução."""

    def __init__(self):
        self._ocorrencias = defaultdict(int)

    def proximo(self, codigo_linha):
        self._ocorrencias[codigo_linha] += 1
        if self._ocorrencias[codigo_linha] % 2 == 0:
            return SENTIDO_VOLTA
        return SENTIDO_IDA


# ==========================================
# VELOCIDADE
# ==========================================

class PoliticaVelocidade(NamedTuple):
    """
    Faixa de velocidade plausível para um ônibus.

    O horário do validador não é confiável: motorista que não encerra o turno
    gera tempos enormes (velocidade baixa demais), e fechamentos em sequência
    geram tempos curtos demais. Fora da faixa o tempo registrado é descartado.
    """
    maxima: float = VELOCIDADE_MAXIMA_KMH
    minima: float = VELOCIDADE_MINIMA_KMH
    media: float = VELOCIDADE_MEDIA_KMH

    def sanear(self, distancia, horas):
        """
        Returns:
            (velocidade_kmh, horas_consideradas)
        """
        if distancia <= 0 or horas <= 0:
            return 0.0, 0.0

        velocidade = distancia / horas
        if velocidade > self.maxima:
            return float(self.maxima), distancia / self.maxima
        if velocidade < self.minima:
            return float(self.media), distancia / self.media
        return velocidade, horas


# ==========================================
# PASSAGEIROS
# ==========================================

class TotaisPassageiros(NamedTuple):
    pagantes: int
    idoso: int
    passe_livre: int
    outras_gratuidades: int
    dinheiro: int
    eletronico: int


def contar_passageiros(passageiros):
    """
    Soma as quantidades por categoria e divide o tipo 2:
    1/3 (divisão inteira) vai para passe livre, o restante conta como idoso.
    """
    qtd = defaultdict(int)
    for p in passageiros:
        try:
            categoria = CategoriaTarifa(int(p.tipo))
        except ValueError:
            logger.warning(f"Categoria de passageiro desconhecida: {p.tipo!r} (ignorada)")
            continue
        qtd[categoria] += p.qtd

    passe_livre_extra = qtd[CategoriaTarifa.COMUM] // 3
    idoso = qtd[CategoriaTarifa.COMUM] - passe_livre_extra

    return TotaisPassageiros(
        pagantes=qtd[CategoriaTarifa.VT] + idoso + qtd[CategoriaTarifa.DINHEIRO],
        idoso=idoso,
        passe_livre=qtd[CategoriaTarifa.PASSE_LIVRE] + passe_livre_extra,
        outras_gratuidades=qtd[CategoriaTarifa.FUNCIONARIO],
        dinheiro=qtd[CategoriaTarifa.DINHEIRO],
        eletronico=qtd[CategoriaTarifa.VT] + idoso,
    )


# ==========================================
# TEMPO
# ==========================================

def parse_data(valor, campo="data"):
    try:
        return datetime.strptime(valor, FORMATO_DATA_ENTRADA)
    except (TypeError, ValueError) as e:
        raise ErroProcessamento(f"{campo} inválida: {valor!r} (formato esperado AAAA-MM-DD hh:mm:ss)") from e


def formatar_duracao(duracao):
    """timedelta -> 'hh:mm:ss' com horas corridas (pode passar de 24)."""
    total = int(duracao.total_seconds())
    sinal = "-" if total < 0 else ""
    total = abs(total)
    horas, resto = divmod(total, 3600)
    minutos, segundos = divmod(resto, 60)
    return f"{sinal}{horas:02d}:{minutos:02d}:{segundos:02d}"


# ==========================================
# EXECUÇÃO
# ==========================================

@lru_cache(maxsize=1)
def provedor_referencia_padrao():
    return ProvedorReferencia()


@lru_cache(maxsize=1)
def resolvedor_identidade_padrao():
    return ResolvedorIdentidade()


class ContextoExecucao:
    """
    Estado de uma conversão. O contador de sentido é sempre novo; os caches
    de referência e de CPF podem ser compartilhados entre execuções.
    """

    def __init__(self, referencia=None, identidade=None, calcular_distancia=distancia_km,
                 politica=None, empresa=EMPRESA_NOME):
        self.sentidos = ContadorSentido()
        self.referencia = referencia or provedor_referencia_padrao()
        self.identidade = identidade or resolvedor_identidade_padrao()
        self.calcular_distancia = calcular_distancia
        self.politica = politica or PoliticaVelocidade()
        self.empresa = empresa


class LinhaSaida(NamedTuple):
    empresa: str
    prefixo: str
    codigo_linha: str
    sentido: str
    data_inicio_viagem: str
    hora_inicio_viagem: str
    hora_final_viagem: str
    qte_pax_pagantes: int
    qte_idoso: int
    qte_pl: int
    qte_outras_gratuidade: int
    qte_total_pax: int
    qte_pago_dinheiro: int
    qte_pago_eletronico: int
    distancia_viagem: int
    tempo_viagem: str
    velocidade_media: int
    lt_abertura_viagem: str
    lg_abertura_viagem: str
    lt_fechamento_viagem: str
    lg_fechamento_viagem: str
    veiculo_numero: str
    cpf_rodoviario: str


def buscar_cpf(codigo_pessoal, contexto, nome=""):
    if not codigo_pessoal:
        logger.warning(f"Matrícula vazia para motorista {nome or '?'}, CPF não consultado")
        return ""
    try:
        cpf = contexto.identidade.cpf_motorista(codigo_pessoal)
    except Exception as e:
        # CPF é enriquecimento opcional, nunca interrompe a conversão
        logger.error(f"ERRO ao buscar CPF para matrícula {codigo_pessoal}: {e}")
        return ""
    return formatar_cpf(cpf)


def enriquecer_operacao(operacao, codigo_pessoal, contexto, nome_motorista=""):
    """Monta a linha de saída de uma operação."""
    inicio = parse_data(operacao.datainicio, "datainicio")
    fim = parse_data(operacao.datafim, "datafim")

    sentido = contexto.sentidos.proximo(operacao.linha)
    ida = sentido == SENTIDO_IDA

    linha_certa = prefixo = ""
    lat_abertura = lng_abertura = lat_fechamento = lng_fechamento = ""
    distancia = 0.0
    parametros = contexto.referencia.parametros_linha(operacao.linha)
    if parametros is not None:
        linha_certa = parametros.cod
        prefixo = parametros.prefixo_antt
        lat_abertura, lng_abertura, lat_fechamento, lng_fechamento = parametros.coordenadas(ida)
        distancia = parametros.km_pre_calculado
        if distancia is None:
            distancia = contexto.calcular_distancia(lat_abertura, lng_abertura, lat_fechamento, lng_fechamento)

    placa = contexto.referencia.placa_veiculo(operacao.veiculo)
    cpf = buscar_cpf(codigo_pessoal, contexto, nome_motorista)
    totais = contar_passageiros(operacao.passageiros)

    duracao = fim - inicio
    if duracao.total_seconds() < 0:
        logger.warning(f"Linha {operacao.linha}: datafim anterior a datainicio ({operacao.datainicio} -> {operacao.datafim})")

    horas = duracao.total_seconds() / 3600
    velocidade, horas_consideradas = contexto.politica.sanear(distancia, horas)
    if distancia > 0 and horas > 0 and not math.isclose(horas_consideradas, horas):
        logger.info(f"Linha {operacao.linha}: tempo registrado {horas:.2f}h fora da faixa, "
                    f"velocidade ajustada para {velocidade:.0f} km/h")

    return LinhaSaida(
        empresa=contexto.empresa,
        prefixo=prefixo,
        codigo_linha=linha_certa,
        sentido=sentido,
        data_inicio_viagem=inicio.strftime(FORMATO_DATA_SAIDA),
        hora_inicio_viagem=inicio.strftime(FORMATO_HORA_SAIDA),
        hora_final_viagem=fim.strftime(FORMATO_HORA_SAIDA),
        qte_pax_pagantes=totais.pagantes,
        qte_idoso=totais.idoso,
        qte_pl=totais.passe_livre,
        qte_outras_gratuidade=totais.outras_gratuidades,
        qte_total_pax=operacao.total_passageiros,
        qte_pago_dinheiro=totais.dinheiro,
        qte_pago_eletronico=totais.eletronico,
        distancia_viagem=math.ceil(distancia),
        tempo_viagem=formatar_duracao(duracao),
        velocidade_media=math.ceil(velocidade),
        lt_abertura_viagem=lat_abertura,
        lg_abertura_viagem=lng_abertura,
        lt_fechamento_viagem=lat_fechamento,
        lg_fechamento_viagem=lng_fechamento,
        veiculo_numero=placa,
        cpf_rodoviario=cpf,
    )


def processar_documento(documento, contexto=None):
    """Todas as operações do documento, na ordem do arquivo."""
    contexto = contexto or ContextoExecucao()
    linhas = []
    for btc in documento.btcs:
        logger.info(f"Lote {btc.doc} de {btc.data} (TD {btc.codigo_td}), motorista {btc.matdmtu} {btc.nome}: "
                    f"{len(btc.operacoes)} operação(ões)")
        for operacao in btc.operacoes:
            linhas.append(enriquecer_operacao(operacao, btc.matdmtu, contexto, btc.nome))
    return linhas


def processar_xml(caminho_xml, caminho_saida=None, formato="csv", contexto=None):
    """
    Converte um arquivo BTC no relatório de viagens.

    Args:
        caminho_xml: arquivo XML do validador
        caminho_saida: destino (padrão: mesmo nome do XML com a extensão do formato)
        formato: 'csv' ou 'xlsx'
        contexto: ContextoExecucao (padrão: novo, com provedores compartilhados)

    Returns:
        Caminho do arquivo gerado. Levanta ErroProcessamento sem gerar arquivo
        quando o XML ou alguma data é inválida.
    """
    formato = formato.lower()
    if formato not in ESCRITORES:
        raise ErroProcessamento(f"Formato de saída não suportado: {formato}")

    documento = carregar_btcs(caminho_xml)
    linhas = processar_documento(documento, contexto)

    if caminho_saida is None:
        caminho_saida = f"{os.path.splitext(caminho_xml)[0]}.{formato}"

    try:
        ESCRITORES[formato](linhas, caminho_saida)
    except OSError as e:
        raise ErroProcessamento(f"Não foi possível gravar {caminho_saida}: {e}") from e
    return caminho_saida


if __name__ == "__main__":
    import sys

    parser = argparse.ArgumentParser(description="Conversor BTC -> relatório de viagens")
    parser.add_argument("arquivo", help="Arquivo XML exportado pelo validador")
    parser.add_argument("--saida", help="Arquivo de saída (padrão: ao lado do XML)")
    parser.add_argument("--formato", choices=sorted(ESCRITORES), default="csv")
    args = parser.parse_args()

    try:
        destino = processar_xml(args.arquivo, args.saida, args.formato)
    except ErroProcessamento as e:
        logger.error(f"Falha no processamento: {e}")
        sys.exit(1)

    print(f"✅ Arquivo gerado: {destino}")
