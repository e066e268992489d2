"""
Exportação das viagens processadas
==================================
Uma linha por operação, colunas na ordem exigida pelo relatório:
CSV separado por ';' ou planilha XLSX formatada.
"""

import os
import logging

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from config import SEPARADOR_CSV

logger = logging.getLogger(__name__)

COLUNAS_SAIDA = [
    "EMPRESA",
    "PREFIXO",
    "CODIGO_LINHA",
    "SENTIDO",
    "DATA_INICIO_VIAGEM",
    "HORA_INICIO_VIAGEM",
    "HORA_FINAL_VIAGEM",
    "QTE_PAX_PAGANTES",
    "QTE_IDOSO",
    "QTE_PL",
    "QTE_OUTRAS_GRATUIDADE",
    "QTE_TOTAL_PAX",
    "QTE_PAGO_DINHEIRO",
    "QTE_PAGO_ELETRONICO",
    "DISTANCIA_VIAGEM",
    "TEMPO_VIAGEM",
    "VELOCIDADE_MEDIA",
    "LT_ABERTURA_VIAGEM",
    "LG_ABERTURA_VIAGEM",
    "LT_FECHAMENTO_VIAGEM",
    "LG_FECHAMENTO_VIAGEM",
    "VEICULO_NUMERO",
    "CPF_RODOVIARIO",
]

NOME_ABA = "Viagens"
COR_CABECALHO = "1F4E78"


def montar_dataframe(linhas):
    """DataFrame com as colunas de saída; texto fica como texto (CPF, placa, coordenadas)."""
    return pd.DataFrame([tuple(linha) for linha in linhas], columns=COLUNAS_SAIDA)


def _remover_parcial(caminho):
    if os.path.exists(caminho):
        os.remove(caminho)


def escrever_csv(linhas, caminho):
    df = montar_dataframe(linhas)
    try:
        df.to_csv(caminho, sep=SEPARADOR_CSV, index=False, encoding="utf-8")
    except Exception:
        _remover_parcial(caminho)
        raise
    logger.info(f"CSV gerado: {caminho} ({len(df)} viagens)")
    return caminho


def escrever_excel(linhas, caminho):
    """Planilha com cabeçalho destacado, congelado e colunas ajustadas ao conteúdo."""
    df = montar_dataframe(linhas)
    try:
        with pd.ExcelWriter(caminho, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=NOME_ABA, index=False)
            ws = writer.sheets[NOME_ABA]

            fonte = Font(bold=True, color="FFFFFF")
            preenchimento = PatternFill(start_color=COR_CABECALHO, end_color=COR_CABECALHO, fill_type="solid")
            for celula in ws[1]:
                celula.font = fonte
                celula.fill = preenchimento
                celula.alignment = Alignment(horizontal="center", vertical="center")
            ws.freeze_panes = "A2"

            for idx, coluna in enumerate(COLUNAS_SAIDA, start=1):
                maior = max([len(coluna)] + [len(str(v)) for v in df[coluna]])
                ws.column_dimensions[get_column_letter(idx)].width = min(maior + 2, 60)
    except Exception:
        _remover_parcial(caminho)
        raise
    logger.info(f"Planilha gerada: {caminho} ({len(df)} viagens)")
    return caminho


def ler_saida(caminho, formato):
    """Lê de volta um arquivo gerado, com todas as colunas como texto."""
    if formato == "csv":
        return pd.read_csv(caminho, sep=SEPARADOR_CSV, dtype=str, keep_default_na=False)
    return pd.read_excel(caminho, sheet_name=NOME_ABA, dtype=str).fillna("")


ESCRITORES = {
    "csv": escrever_csv,
    "xlsx": escrever_excel,
}
