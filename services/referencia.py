"""
Dados de Referência
===================
Parâmetros de linha (pontos finais, prefixo ANTT, coordenadas, km) e placas
dos veículos, lidos da tabela estática (linhas_data.py) ou do banco.

Consultas ao banco ficam em cache na instância, inclusive as que não
encontram nada. Falhas de conexão viram "não encontrado" para quem chama.
"""

import logging
import math
import threading
from typing import NamedTuple, Optional

from config import FONTE_REFERENCIA
from database import get_connection, get_placeholder, ERROS_BANCO
from services.resultado import ResultadoConsulta, StatusConsulta, NAO_ENCONTRADO, INDISPONIVEL

logger = logging.getLogger(__name__)

FONTES_VALIDAS = ("estatica", "banco")


class ParametrosLinha(NamedTuple):
    cod: str
    local1: str
    local2: str
    linha: str
    cod_antt: str
    lat1: str
    lng1: str
    lat2: str
    lng2: str
    km: str = ""
    duracao_min: str = ""

    @classmethod
    def de_registro(cls, dados):
        """Monta a partir de um dict (tabela estática ou linha do banco)."""
        return cls(**{campo: str(dados.get(campo) or "").strip() for campo in cls._fields})

    @property
    def prefixo_antt(self):
        return self.cod_antt.replace("-", "")

    def coordenadas(self, ida):
        """(lat_abertura, lng_abertura, lat_fechamento, lng_fechamento) conforme o sentido."""
        if ida:
            return self.lat1, self.lng1, self.lat2, self.lng2
        return self.lat2, self.lng2, self.lat1, self.lng1

    @property
    def km_pre_calculado(self) -> Optional[float]:
        try:
            km = float(self.km)
        except ValueError:
            return None
        return km if math.isfinite(km) and km > 0 else None


class ProvedorReferencia:
    """
    Busca de linhas e placas.

    fonte='estatica' usa os dicts LINHAS/PLACAS (ou os informados);
    fonte='banco' consulta as tabelas linhas/veiculos via connection_factory.
    """

    def __init__(self, fonte=None, linhas=None, placas=None, connection_factory=None):
        self.fonte = (fonte or FONTE_REFERENCIA).lower()
        if self.fonte not in FONTES_VALIDAS:
            raise ValueError(f"Fonte de referência inválida: {self.fonte} (use {', '.join(FONTES_VALIDAS)})")

        if self.fonte == "estatica" and (linhas is None or placas is None):
            from linhas_data import LINHAS, PLACAS
            linhas = LINHAS if linhas is None else linhas
            placas = PLACAS if placas is None else placas
        self._linhas = linhas or {}
        self._placas = placas or {}

        self._connection_factory = connection_factory
        self._cache_linhas = {}
        self._cache_placas = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # API usada pelo processador
    # ------------------------------------------------------------------

    def parametros_linha(self, codigo) -> Optional[ParametrosLinha]:
        resultado = self.consultar_linha(codigo)
        return resultado.valor if resultado.encontrado else None

    def placa_veiculo(self, codigo) -> str:
        """Placa do veículo; sem cadastro devolve o próprio código."""
        resultado = self.consultar_placa(codigo)
        return resultado.valor if resultado.encontrado else codigo

    # ------------------------------------------------------------------

    def consultar_linha(self, codigo) -> ResultadoConsulta:
        if self.fonte == "estatica":
            dados = self._linhas.get(codigo)
            if dados is None:
                logger.warning(f"Linha {codigo} sem cadastro de referência")
                return NAO_ENCONTRADO
            return ResultadoConsulta(StatusConsulta.ENCONTRADO, ParametrosLinha.de_registro(dados))

        return self._consultar_cacheado(
            self._cache_linhas, codigo,
            "SELECT cod, local1, local2, linha, cod_antt, km, duracao_min, lat1, lng1, lat2, lng2 "
            "FROM linhas WHERE cod = {ph}",
            self._montar_linha,
        )

    def consultar_placa(self, codigo) -> ResultadoConsulta:
        if self.fonte == "estatica":
            placa = self._placas.get(codigo)
            if not placa:
                return NAO_ENCONTRADO
            return ResultadoConsulta(StatusConsulta.ENCONTRADO, placa)

        return self._consultar_cacheado(
            self._cache_placas, codigo,
            "SELECT placa FROM veiculos WHERE codigo = {ph}",
            lambda row: row[0] or None,
        )

    @staticmethod
    def _montar_linha(row):
        campos = ("cod", "local1", "local2", "linha", "cod_antt", "km",
                  "duracao_min", "lat1", "lng1", "lat2", "lng2")
        return ParametrosLinha.de_registro(dict(zip(campos, row)))

    def _consultar_cacheado(self, cache, codigo, sql, montar):
        with self._lock:
            if codigo in cache:
                return cache[codigo]

        factory = self._connection_factory or get_connection
        try:
            conn = factory()
            try:
                c = conn.cursor()
                c.execute(sql.format(ph=get_placeholder(1)), (codigo,))
                row = c.fetchone()
            finally:
                conn.close()
        except ERROS_BANCO as e:
            logger.warning(f"Banco indisponível ao consultar referência {codigo}: {e}")
            return INDISPONIVEL

        valor = montar(row) if row else None
        if valor is None:
            logger.warning(f"Referência {codigo} não encontrada no banco")
            resultado = NAO_ENCONTRADO
        else:
            resultado = ResultadoConsulta(StatusConsulta.ENCONTRADO, valor)

        with self._lock:
            cache[codigo] = resultado
        return resultado
