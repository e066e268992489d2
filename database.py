import sqlite3
import os
import logging
from urllib.parse import quote_plus

from dotenv import load_dotenv

from config import SQLITE_PATH, DB_CONNECT_TIMEOUT

# Carregar variáveis de ambiente localmente
load_dotenv()

logger = logging.getLogger(__name__)

# Ordem de prioridade das variáveis de ambiente com a URL do banco
ENV_VARS_BANCO = ("DATABASE_URL", "POSTGRES_URL", "DATABASE_PUBLIC_URL")


def get_database_url():
    """Obtém a URL do banco de dados de várias fontes possíveis"""
    # 1. Tentar Streamlit secrets primeiro (para Streamlit Cloud)
    try:
        import streamlit as st
        if hasattr(st, 'secrets'):
            if 'DATABASE_URL' in st.secrets:
                return st.secrets['DATABASE_URL']
            if 'database' in st.secrets:
                db = st.secrets['database']
                # Codificar @ na senha como %40
                password = quote_plus(db.get('password', ''))
                return f"postgresql://{db['user']}:{password}@{db['host']}:{db['port']}/{db['database']}"
    except Exception:
        # Fora do Streamlit (ou sem secrets.toml) o acesso a st.secrets falha
        pass

    # 2. Variáveis de ambiente
    for env_var in ENV_VARS_BANCO:
        url = os.getenv(env_var)
        if url:
            logger.info(f"Variável de ambiente encontrada: {env_var}")
            return url
    return None


def mascarar_url(url):
    """Oculta a senha da URL para poder logar com segurança"""
    if not url or "@" not in url or "://" not in url:
        return url
    esquema, resto = url.split("://", 1)
    credenciais, host = resto.rsplit("@", 1)
    usuario = credenciais.split(":", 1)[0]
    return f"{esquema}://{usuario}:***@{host}"


def preparar_url_postgres(url):
    """Adiciona sslmode=require quando a URL não define o modo SSL"""
    if "sslmode=" in url:
        return url
    separador = "&" if "?" in url else "?"
    return f"{url}{separador}sslmode=require"


# Detectar configuração de Banco
DB_URL = get_database_url()
IS_POSTGRES = bool(DB_URL and "postgres" in DB_URL)

if IS_POSTGRES:
    import psycopg2
    DB_URL = preparar_url_postgres(DB_URL)
    logger.info(f"URL de conexão (senha oculta): {mascarar_url(DB_URL)}")

# Exceções de driver tratadas como "banco indisponível"
ERROS_BANCO = (sqlite3.Error, OSError)
if IS_POSTGRES:
    ERROS_BANCO = ERROS_BANCO + (psycopg2.Error,)


def get_connection():
    """Retorna conexão com o banco (SQLite ou PostgreSQL)"""
    if IS_POSTGRES:
        return psycopg2.connect(DB_URL, connect_timeout=DB_CONNECT_TIMEOUT)
    return sqlite3.connect(SQLITE_PATH, timeout=DB_CONNECT_TIMEOUT)


def get_placeholder(count=1):
    """Retorna string de placeholders SQL correta (? ou %s)"""
    token = "%s" if IS_POSTGRES else "?"
    return ", ".join([token] * count)


def init_db(conn=None):
    """Cria as tabelas pessoa, linhas e veiculos se ainda não existirem."""
    fechar = conn is None
    conn = conn or get_connection()
    c = conn.cursor()

    if IS_POSTGRES:
        TYPE_PK_AUTO = "SERIAL PRIMARY KEY"
    else:
        TYPE_PK_AUTO = "INTEGER PRIMARY KEY AUTOINCREMENT"

    # Tabela: Pessoas (motoristas) - cod_identificador é a matrícula do BTC
    c.execute(f'''
        CREATE TABLE IF NOT EXISTS pessoa (
            id_pessoa {TYPE_PK_AUTO},
            cod_identificador INTEGER NOT NULL,
            cpf VARCHAR(14),
            funcao VARCHAR(100),
            status BOOLEAN DEFAULT TRUE
        )
    ''')

    # Tabela: Parâmetros das linhas
    c.execute('''
        CREATE TABLE IF NOT EXISTS linhas (
            cod TEXT PRIMARY KEY,
            local1 TEXT,
            local2 TEXT,
            linha TEXT,
            cod_antt TEXT,
            km TEXT,
            duracao_min TEXT,
            lat1 TEXT,
            lng1 TEXT,
            lat2 TEXT,
            lng2 TEXT
        )
    ''')

    # Tabela: Mapeamento número do veículo -> placa
    c.execute('''
        CREATE TABLE IF NOT EXISTS veiculos (
            codigo TEXT PRIMARY KEY,
            placa TEXT NOT NULL
        )
    ''')
    conn.commit()

    c.execute("CREATE INDEX IF NOT EXISTS idx_pessoa_cod_identificador ON pessoa(cod_identificador)")
    conn.commit()

    seed_referencia(conn)

    if fechar:
        conn.close()
    logger.info("Banco %s inicializado.", "PostgreSQL" if IS_POSTGRES else "SQLite")


def seed_referencia(conn):
    """Popula linhas/veiculos a partir das tabelas estáticas, se vazias."""
    from linhas_data import LINHAS, PLACAS

    c = conn.cursor()
    c.execute("SELECT count(*) FROM linhas")
    if c.fetchone()[0] == 0:
        colunas = ("cod", "local1", "local2", "linha", "cod_antt", "km",
                   "duracao_min", "lat1", "lng1", "lat2", "lng2")
        registros = [tuple(dados.get(col, "") for col in colunas) for dados in LINHAS.values()]
        sql = f"INSERT INTO linhas ({', '.join(colunas)}) VALUES ({get_placeholder(len(colunas))})"
        c.executemany(sql, registros)
        logger.info(f"{len(registros)} linhas inseridas.")

    c.execute("SELECT count(*) FROM veiculos")
    if c.fetchone()[0] == 0:
        sql = f"INSERT INTO veiculos (codigo, placa) VALUES ({get_placeholder(2)})"
        c.executemany(sql, list(PLACAS.items()))
        logger.info(f"{len(PLACAS)} veículos inseridos.")

    conn.commit()


def parametro_codigo(codigo):
    """Matrícula numérica vai como inteiro; o resto segue como texto."""
    codigo = str(codigo).strip()
    if codigo.isascii() and codigo.isdigit():
        return int(codigo)
    return codigo


def tabela_existe(cursor, nome):
    if IS_POSTGRES:
        cursor.execute(
            "SELECT EXISTS (SELECT FROM information_schema.tables "
            "WHERE table_schema = 'public' AND table_name = %s)", (nome,))
        return bool(cursor.fetchone()[0])
    cursor.execute("SELECT count(*) FROM sqlite_master WHERE type = 'table' AND name = ?", (nome,))
    return cursor.fetchone()[0] > 0


def verificar_saude(connection_factory=get_connection):
    """
    Testa a conexão com o banco e a presença da tabela pessoa.

    Returns:
        dict com status ('connected' ou 'error'), mensagem e contagem de pessoas
        (-1 quando a contagem falha).
    """
    try:
        conn = connection_factory()
    except ERROS_BANCO as e:
        logger.error(f"Não foi possível conectar ao banco de dados: {e}")
        return {"status": "error", "message": "Não foi possível conectar ao banco de dados", "error": str(e)}

    try:
        c = conn.cursor()
        try:
            c.execute("SELECT 1")
            c.fetchone()
        except ERROS_BANCO as e:
            return {"status": "error", "message": "Conexão estabelecida, mas query de teste falhou", "error": str(e)}

        try:
            existe = tabela_existe(c, "pessoa")
        except ERROS_BANCO as e:
            return {"status": "connected", "message": "Conexão OK, mas não foi possível verificar tabela pessoa",
                    "query_test": "OK", "table_check": "error", "error": str(e)}

        total = 0
        if existe:
            try:
                c.execute("SELECT COUNT(*) FROM pessoa")
                total = c.fetchone()[0]
            except ERROS_BANCO:
                total = -1

        return {"status": "connected", "message": "Conexão com banco de dados OK",
                "query_test": "OK", "table_exists": existe, "pessoa_count": total}
    finally:
        conn.close()


def consultar_cpf_debug(codigo, connection_factory=get_connection, limite_amostra=10):
    """Consulta direta (sem cache) do CPF, com amostra da tabela pessoa para diagnóstico."""
    param = parametro_codigo(codigo)
    resultado = {"codigo": codigo, "query_param": param, "query_param_type": type(param).__name__}

    try:
        conn = connection_factory()
    except ERROS_BANCO as e:
        resultado.update(status="error", message="Não foi possível conectar ao banco de dados", error=str(e))
        return resultado

    try:
        c = conn.cursor()
        c.execute(f"SELECT cpf FROM pessoa WHERE cod_identificador = {get_placeholder(1)}", (param,))
        row = c.fetchone()
        if row is None:
            resultado.update(status="not_found", message=f"CPF não encontrado para código: {codigo}")
            return resultado

        cpf = row[0] or ""
        c.execute("SELECT COUNT(*) FROM pessoa")
        total = c.fetchone()[0]
        c.execute(f"SELECT cod_identificador, cpf FROM pessoa LIMIT {int(limite_amostra)}")
        amostra = [
            {"cod_identificador": cod, "cpf": cpf_amostra or "", "cpf_length": len(cpf_amostra or "")}
            for cod, cpf_amostra in c.fetchall()
        ]
        resultado.update(status="success", cpf=cpf, cpf_valid=row[0] is not None,
                         total_records=total, sample_records=amostra)
        return resultado
    except ERROS_BANCO as e:
        resultado.update(status="error", message="Erro ao consultar CPF", error=str(e))
        return resultado
    finally:
        conn.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    init_db()
    print(verificar_saude())
