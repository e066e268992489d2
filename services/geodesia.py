"""
Distância Geodésica
===================
Distância em linha reta entre os dois pontos finais de uma linha,
pela fórmula de Haversine.
"""

import math
import logging

logger = logging.getLogger(__name__)

# Raio médio da Terra em quilômetros
RAIO_TERRA_KM = 6371.0


def _para_float(valor):
    if valor is None:
        raise ValueError("coordenada ausente")
    if isinstance(valor, str):
        valor = valor.strip()
        if not valor:
            raise ValueError("coordenada vazia")
    resultado = float(valor)
    if math.isnan(resultado) or math.isinf(resultado):
        raise ValueError("coordenada não finita")
    return resultado


def distancia_km(lat1, lng1, lat2, lng2) -> float:
    """
    Distância entre (lat1, lng1) e (lat2, lng2) em km.

    As coordenadas chegam como string em graus decimais. Se qualquer uma
    estiver vazia ou não for numérica retorna 0 ("distância desconhecida").
    """
    try:
        lat1_f = _para_float(lat1)
        lng1_f = _para_float(lng1)
        lat2_f = _para_float(lat2)
        lng2_f = _para_float(lng2)
    except (ValueError, TypeError):
        logger.warning(f"Erro ao converter coordenadas: lat1={lat1}, lng1={lng1}, lat2={lat2}, lng2={lng2}")
        return 0

    lat1_rad = math.radians(lat1_f)
    lat2_rad = math.radians(lat2_f)
    delta_lat = math.radians(lat2_f - lat1_f)
    delta_lng = math.radians(lng2_f - lng1_f)

    a = math.sin(delta_lat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lng / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return RAIO_TERRA_KM * c
