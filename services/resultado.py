from enum import Enum
from typing import Any, NamedTuple


class StatusConsulta(Enum):
    ENCONTRADO = "encontrado"
    NAO_ENCONTRADO = "nao_encontrado"
    INDISPONIVEL = "indisponivel"


class ResultadoConsulta(NamedTuple):
    """Resultado de uma busca externa; valor é None fora de ENCONTRADO."""
    status: StatusConsulta
    valor: Any = None

    @property
    def encontrado(self):
        return self.status is StatusConsulta.ENCONTRADO


NAO_ENCONTRADO = ResultadoConsulta(StatusConsulta.NAO_ENCONTRADO)
INDISPONIVEL = ResultadoConsulta(StatusConsulta.INDISPONIVEL)
