# Configurações centralizadas do Conversor BTC
# =============================================
# Este arquivo contém todas as constantes configuráveis do sistema.
# Cada valor pode ser sobrescrito por variável de ambiente (ou pelo .env).

import os
from dotenv import load_dotenv

# Carregar variaveis do arquivo .env
load_dotenv()


def _env_float(nome, padrao):
    valor = os.getenv(nome)
    if valor is None or valor.strip() == "":
        return padrao
    return float(valor)


# ==========================================
# IDENTIFICAÇÃO DA EMPRESA
# ==========================================

# Nome gravado na coluna EMPRESA de todas as linhas
EMPRESA_NOME = os.getenv("EMPRESA_NOME", "Amazonia Inter Turismo LTDA")

# ==========================================
# FAIXA DE VELOCIDADE PLAUSÍVEL (km/h)
# ==========================================

# Acima disso o tempo registrado é curto demais para ser real
VELOCIDADE_MAXIMA_KMH = _env_float("VELOCIDADE_MAXIMA_KMH", 70.0)

# Abaixo disso o tempo registrado inclui ociosidade (turno não encerrado)
VELOCIDADE_MINIMA_KMH = _env_float("VELOCIDADE_MINIMA_KMH", 20.0)

# Velocidade média assumida quando o tempo registrado é descartado
VELOCIDADE_MEDIA_KMH = _env_float("VELOCIDADE_MEDIA_KMH", 45.0)

# ==========================================
# DADOS DE REFERÊNCIA
# ==========================================

# 'estatica' usa linhas_data.py, 'banco' consulta as tabelas linhas/veiculos
FONTE_REFERENCIA = os.getenv("FONTE_REFERENCIA", "estatica").lower()

# ==========================================
# FORMATOS DE ENTRADA E SAÍDA
# ==========================================

FORMATO_DATA_ENTRADA = "%Y-%m-%d %H:%M:%S"
FORMATO_DATA_SAIDA = "%d/%m/%Y"
FORMATO_HORA_SAIDA = "%H:%M:%S"

SEPARADOR_CSV = os.getenv("SEPARADOR_CSV", ";")

# ==========================================
# BANCO DE DADOS
# ==========================================

# Usado quando nenhuma URL PostgreSQL está configurada
SQLITE_PATH = os.getenv("SQLITE_PATH", "frota.db")

# Timeout de conexão com o PostgreSQL (segundos)
DB_CONNECT_TIMEOUT = int(_env_float("DB_CONNECT_TIMEOUT", 5))
