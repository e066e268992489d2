"""
Conversor BTC - Console
=======================
Upload do XML do validador, conversão e download do relatório (CSV ou XLSX).
"""

import os
import tempfile

import streamlit as st

st.set_page_config(page_title="Conversor BTC", layout="wide", initial_sidebar_state="expanded")
st.markdown("<style>.block-container{padding-top:0.5rem!important}#MainMenu,footer,header{visibility:hidden}</style>", unsafe_allow_html=True)

from btc_parser import ErroProcessamento
from database import verificar_saude, consultar_cpf_debug
from exportador import COLUNAS_SAIDA, ler_saida
from processor import processar_xml

MIME = {
    "csv": "text/csv; charset=utf-8",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


@st.cache_data(ttl=60)
def saude_banco():
    return verificar_saude()


def converter(arquivo, formato):
    """Grava o upload em diretório temporário, converte e devolve (bytes, DataFrame)."""
    with tempfile.TemporaryDirectory() as tmp:
        caminho_xml = os.path.join(tmp, "btc.xml")
        with open(caminho_xml, "wb") as f:
            f.write(arquivo.getvalue())

        caminho_saida = processar_xml(caminho_xml, os.path.join(tmp, f"output.{formato}"), formato)
        with open(caminho_saida, "rb") as f:
            conteudo = f.read()

        df = ler_saida(caminho_saida, formato)
    return conteudo, df


# Sidebar
st.sidebar.title("🚌 Conversor BTC")
saude = saude_banco()
if saude.get("status") == "connected":
    st.sidebar.success(f"Banco OK | pessoas: {saude.get('pessoa_count', '-')}")
else:
    st.sidebar.error(f"Banco indisponível: {saude.get('error', saude.get('message'))}")
    st.sidebar.caption("CPF dos motoristas ficará em branco.")

with st.sidebar.expander("🔎 Consultar CPF"):
    codigo = st.text_input("Matrícula (cod_identificador)")
    if st.button("Consultar") and codigo:
        st.json(consultar_cpf_debug(codigo))


# Conversão
st.subheader("Converter arquivo BTC")
arquivo = st.file_uploader("Arquivo XML do validador", type=["xml"])
formato = st.radio("Formato de saída", ["csv", "xlsx"], horizontal=True)

if arquivo is not None and st.button("⚙️ Processar", type="primary"):
    with st.spinner(f"Processando {arquivo.name}..."):
        try:
            conteudo, df = converter(arquivo, formato)
        except ErroProcessamento as e:
            st.error(f"Erro: {e}")
            st.stop()

    c1, c2, c3 = st.columns(3)
    c1.metric("Viagens", len(df))
    c2.metric("Linhas", df["CODIGO_LINHA"].nunique() if not df.empty else 0)
    c3.metric("Sem CPF", int((df["CPF_RODOVIARIO"] == "").sum()) if not df.empty else 0)

    st.dataframe(df[COLUNAS_SAIDA], use_container_width=True, hide_index=True, height=400)
    st.download_button(
        "⬇️ Baixar",
        data=conteudo,
        file_name=f"output.{formato}",
        mime=MIME[formato],
    )

st.caption("Conversor BTC")
