"""
Identidade do Motorista
=======================
Busca o CPF na tabela pessoa pela matrícula (cod_identificador) do BTC.

A busca é "melhor esforço": nunca levanta exceção para o processador.
- Resultado encontrado (ou não encontrado) fica em cache; "não encontrado"
  é guardado como "" para não repetir a consulta na mesma execução.
- Falha de conexão devolve "" e NÃO entra no cache.
"""

import logging
import re
import threading

from database import get_connection, get_placeholder, parametro_codigo, ERROS_BANCO
from services.resultado import ResultadoConsulta, StatusConsulta, NAO_ENCONTRADO, INDISPONIVEL

logger = logging.getLogger(__name__)


class ResolvedorIdentidade:

    def __init__(self, connection_factory=None):
        self._connection_factory = connection_factory
        self._cache = {}
        self._lock = threading.Lock()

    def cpf_motorista(self, codigo) -> str:
        resultado = self.consultar(codigo)
        return resultado.valor if resultado.encontrado else ""

    def limpar_cache(self):
        with self._lock:
            self._cache.clear()

    def consultar(self, codigo) -> ResultadoConsulta:
        codigo = (codigo or "").strip()

        with self._lock:
            if codigo in self._cache:
                cpf = self._cache[codigo]
                return ResultadoConsulta(StatusConsulta.ENCONTRADO, cpf) if cpf else NAO_ENCONTRADO

        if not codigo:
            logger.warning("Código identificador vazio, CPF não consultado")
            self._guardar(codigo, "")
            return NAO_ENCONTRADO

        param = parametro_codigo(codigo)
        if isinstance(param, str):
            logger.warning(f"Não foi possível converter código '{codigo}' para inteiro, consultando como texto")

        factory = self._connection_factory or get_connection
        try:
            conn = factory()
            try:
                c = conn.cursor()
                c.execute(f"SELECT cpf FROM pessoa WHERE cod_identificador = {get_placeholder(1)}", (param,))
                row = c.fetchone()
            finally:
                conn.close()
        except ERROS_BANCO as e:
            logger.error(f"ERRO ao consultar CPF para código {codigo}: {e}")
            return INDISPONIVEL

        if row is None:
            logger.warning(f"CPF não encontrado para código identificador: {codigo}")
            self._guardar(codigo, "")
            return NAO_ENCONTRADO

        cpf = (row[0] or "").strip()
        if not cpf:
            logger.warning(f"CPF vazio ou NULL para código {codigo}. Verificar cadastro na tabela pessoa.")
            self._guardar(codigo, "")
            return NAO_ENCONTRADO

        self._guardar(codigo, cpf)
        return ResultadoConsulta(StatusConsulta.ENCONTRADO, cpf)

    def _guardar(self, codigo, cpf):
        with self._lock:
            self._cache[codigo] = cpf


def formatar_cpf(cpf):
    """Mantém só os dígitos: '377.209.881-91' -> '37720988191'"""
    if not cpf:
        return ""
    return re.sub(r"[^0-9]", "", cpf)
