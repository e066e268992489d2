"""
Testes Unitários: processador de BTC
Sentido, passageiros, tempo, velocidade e montagem da linha de saída.
"""

import logging
import math
from datetime import timedelta

import pytest

from btc_parser import ErroProcessamento, Operacao, Passageiro, parse_btcs
from processor import (
    SENTIDO_IDA, SENTIDO_VOLTA, ContadorSentido, ContextoExecucao, PoliticaVelocidade,
    contar_passageiros, enriquecer_operacao, formatar_duracao, parse_data, processar_documento,
)
from services.referencia import ProvedorReferencia
from tests.conftest import IdentidadeFalsa, montar_operacao, montar_xml


def operacao(linha="1001", veiculo="1001", inicio="2024-01-15 08:00:00", fim="2024-01-15 09:30:00",
             passageiros=(("1", 20),), total=50):
    return Operacao(
        veiculo=veiculo, linha=linha, total_passageiros=total, datainicio=inicio, datafim=fim,
        passageiros=tuple(Passageiro(t, q) for t, q in passageiros),
    )


class TestContadorSentido:

    def test_alterna_por_linha(self):
        contador = ContadorSentido()
        sentidos = [contador.proximo("1001") for _ in range(4)]
        assert sentidos == [SENTIDO_IDA, SENTIDO_VOLTA, SENTIDO_IDA, SENTIDO_VOLTA]

    def test_linhas_independentes(self):
        contador = ContadorSentido()
        contador.proximo("1001")
        assert contador.proximo("1002") == SENTIDO_IDA
        assert contador.proximo("1001") == SENTIDO_VOLTA
        assert contador.proximo("1002") == SENTIDO_VOLTA

    def test_contexto_novo_reinicia_contagem(self, identidade):
        ref = ProvedorReferencia(fonte="estatica")
        primeiro = ContextoExecucao(referencia=ref, identidade=identidade)
        primeiro.sentidos.proximo("1001")
        segundo = ContextoExecucao(referencia=ref, identidade=identidade)
        assert segundo.sentidos.proximo("1001") == SENTIDO_IDA


class TestPassageiros:

    def test_divisao_tipo_2(self):
        totais = contar_passageiros([Passageiro("2", 15)])
        assert totais.passe_livre == 5
        assert totais.idoso == 10

    def test_divisao_trunca(self):
        totais = contar_passageiros([Passageiro("2", 7)])
        assert totais.passe_livre == 2
        assert totais.idoso == 5

    def test_totais_completos(self):
        totais = contar_passageiros([
            Passageiro("1", 20), Passageiro("2", 15), Passageiro("3", 5),
            Passageiro("4", 10), Passageiro("5", 3), Passageiro("6", 2),
        ])
        assert totais.pagantes == 40  # 20 VT + 10 idoso + 10 dinheiro
        assert totais.idoso == 10
        assert totais.passe_livre == 10
        assert totais.outras_gratuidades == 2
        assert totais.dinheiro == 10
        assert totais.eletronico == 30

    def test_soma_repetidos_e_ignora_desconhecidos(self):
        totais = contar_passageiros([Passageiro("1", 3), Passageiro("1", 4), Passageiro("9", 50), Passageiro("x", 1)])
        assert totais.pagantes == 7
        assert totais.eletronico == 7


class TestTempo:

    def test_parse_data(self):
        assert parse_data("2024-01-15 08:00:00").hour == 8

    @pytest.mark.parametrize("valor", ["2024-01-15T08:00:00", "15/01/2024 08:00:00", "", None])
    def test_parse_data_invalida(self, valor):
        with pytest.raises(ErroProcessamento):
            parse_data(valor)

    def test_formatar_duracao(self):
        assert formatar_duracao(timedelta(hours=1, minutes=30)) == "01:30:00"
        assert formatar_duracao(timedelta(0)) == "00:00:00"

    def test_horas_passam_de_24(self):
        assert formatar_duracao(timedelta(days=1, hours=2, minutes=5, seconds=3)) == "26:05:03"

    def test_duracao_negativa(self):
        assert formatar_duracao(timedelta(minutes=-90)) == "-01:30:00"


class TestPoliticaVelocidade:

    politica = PoliticaVelocidade(maxima=70, minima=20, media=45)

    def test_abaixo_do_minimo_usa_media(self):
        velocidade, horas = self.politica.sanear(70, 8)
        assert velocidade == 45
        assert horas == pytest.approx(70 / 45)

    def test_acima_do_maximo_limita(self):
        velocidade, horas = self.politica.sanear(210, 1)
        assert velocidade == 70
        assert horas == pytest.approx(3)

    def test_dentro_da_faixa_aceita(self):
        assert self.politica.sanear(50, 1) == (50, 1)

    def test_limites_sao_aceitos(self):
        assert self.politica.sanear(70, 1) == (70, 1)
        assert self.politica.sanear(20, 1) == (20, 1)

    def test_distancia_zero(self):
        assert self.politica.sanear(0, 2) == (0.0, 0.0)

    def test_tempo_zero(self):
        assert self.politica.sanear(70, 0) == (0.0, 0.0)

    def test_piso_configuravel(self):
        politica = PoliticaVelocidade(maxima=70, minima=25, media=45)
        assert politica.sanear(22, 1)[0] == 45
        assert self.politica.sanear(22, 1)[0] == 22


class TestEnriquecerOperacao:

    def test_caso_completo(self, contexto):
        op = operacao(passageiros=(("1", 20), ("2", 15), ("3", 5), ("4", 10)))
        linha = enriquecer_operacao(op, "951716", contexto)

        assert linha.empresa == "Amazonia Inter Turismo LTDA"
        assert linha.prefixo == "12073070"
        assert linha.codigo_linha == "1001"
        assert linha.sentido == SENTIDO_IDA
        assert linha.data_inicio_viagem == "15/01/2024"
        assert linha.hora_inicio_viagem == "08:00:00"
        assert linha.hora_final_viagem == "09:30:00"
        assert linha.qte_pax_pagantes == 40
        assert linha.qte_idoso == 10
        assert linha.qte_pl == 10
        assert linha.qte_total_pax == 50
        assert linha.qte_pago_dinheiro == 10
        assert linha.qte_pago_eletronico == 30
        assert linha.distancia_viagem == 71  # km cadastrado 70.6, arredondado para cima
        assert linha.tempo_viagem == "01:30:00"
        assert linha.velocidade_media == math.ceil(70.6 / 1.5)
        assert linha.lt_abertura_viagem == "-15.43488062"
        assert linha.lg_fechamento_viagem == "-47.8829638"
        assert linha.veiculo_numero == "JHX-0E23"
        assert linha.cpf_rodoviario == "37720988191"

    def test_volta_inverte_coordenadas(self, contexto):
        ida = enriquecer_operacao(operacao(), "951716", contexto)
        volta = enriquecer_operacao(operacao(), "951716", contexto)
        assert volta.sentido == SENTIDO_VOLTA
        assert (volta.lt_abertura_viagem, volta.lg_abertura_viagem) == (ida.lt_fechamento_viagem, ida.lg_fechamento_viagem)
        assert (volta.lt_fechamento_viagem, volta.lg_fechamento_viagem) == (ida.lt_abertura_viagem, ida.lg_abertura_viagem)

    def test_sem_km_cadastrado_usa_haversine(self, contexto):
        # linha 1057 não tem km, só coordenadas
        linha = enriquecer_operacao(operacao(linha="1057"), "951716", contexto)
        assert 50 < linha.distancia_viagem < 65

    def test_km_cadastrado_vale_sem_coordenada(self, contexto):
        linha = enriquecer_operacao(operacao(linha="9903"), "951716", contexto)
        assert linha.distancia_viagem == 81
        assert linha.lt_fechamento_viagem == ""

    def test_distancia_injetada(self, identidade):
        ref = ProvedorReferencia(fonte="estatica", linhas={
            "5000": {"cod": "5000", "cod_antt": "12-0000-70", "lat1": "1", "lng1": "1", "lat2": "2", "lng2": "2"},
        }, placas={})
        chamadas = []

        def distancia_fixa(*coords):
            chamadas.append(coords)
            return 30.0

        ctx = ContextoExecucao(referencia=ref, identidade=identidade, calcular_distancia=distancia_fixa)
        linha = enriquecer_operacao(operacao(linha="5000"), "951716", ctx)
        assert linha.distancia_viagem == 30
        assert linha.velocidade_media == 20
        assert chamadas == [("1", "1", "2", "2")]

    @pytest.mark.parametrize("km", ["inf", "1e400", "nan"])
    def test_km_nao_finito_usa_haversine(self, identidade, km):
        ref = ProvedorReferencia(fonte="estatica", linhas={
            "5000": {"cod": "5000", "cod_antt": "12-0000-70", "km": km,
                     "lat1": "1", "lng1": "1", "lat2": "2", "lng2": "2"},
        }, placas={})
        ctx = ContextoExecucao(referencia=ref, identidade=identidade, calcular_distancia=lambda *c: 30.0)
        linha = enriquecer_operacao(operacao(linha="5000"), "951716", ctx)
        assert linha.distancia_viagem == 30
        assert linha.velocidade_media == 20

    def test_tempo_longo_demais(self, contexto):
        linha = enriquecer_operacao(operacao(fim="2024-01-15 16:00:00"), "951716", contexto)
        assert linha.tempo_viagem == "08:00:00"
        assert linha.velocidade_media == 45
        assert linha.distancia_viagem == 71

    def test_tempo_curto_demais(self, contexto):
        linha = enriquecer_operacao(operacao(fim="2024-01-15 08:30:00"), "951716", contexto)
        assert linha.velocidade_media == 70

    def test_tempo_zero(self, contexto):
        linha = enriquecer_operacao(operacao(fim="2024-01-15 08:00:00"), "951716", contexto)
        assert linha.tempo_viagem == "00:00:00"
        assert linha.velocidade_media == 0

    def test_linha_sem_cadastro(self, contexto):
        linha = enriquecer_operacao(operacao(linha="7777", veiculo="4242"), "951716", contexto)
        assert linha.codigo_linha == ""
        assert linha.prefixo == ""
        assert linha.lt_abertura_viagem == linha.lg_fechamento_viagem == ""
        assert linha.distancia_viagem == 0
        assert linha.velocidade_media == 0
        assert linha.sentido == SENTIDO_IDA
        assert linha.veiculo_numero == "4242"

    def test_total_pax_nao_e_reconciliado(self, contexto):
        linha = enriquecer_operacao(operacao(total=999), "951716", contexto)
        assert linha.qte_total_pax == 999
        assert linha.qte_pax_pagantes == 20

    def test_sem_matricula_nao_consulta_cpf(self, contexto, identidade):
        linha = enriquecer_operacao(operacao(), "", contexto)
        assert linha.cpf_rodoviario == ""
        assert identidade.consultas == []

    def test_falha_no_cpf_nao_interrompe(self):
        ctx = ContextoExecucao(referencia=ProvedorReferencia(fonte="estatica"),
                               identidade=IdentidadeFalsa(erro=RuntimeError("timeout")))
        linha = enriquecer_operacao(operacao(), "951716", ctx)
        assert linha.cpf_rodoviario == ""
        assert linha.codigo_linha == "1001"

    def test_data_invalida_e_fatal(self, contexto):
        with pytest.raises(ErroProcessamento):
            enriquecer_operacao(operacao(inicio="15/01/2024 08:00"), "951716", contexto)


class TestProcessarDocumento:

    def test_ordem_do_documento(self, contexto):
        xml = montar_xml(
            montar_operacao(linha="1001", inicio="2024-01-15 08:00:00", fim="2024-01-15 09:30:00"),
            montar_operacao(linha="1002", inicio="2024-01-15 09:00:00", fim="2024-01-15 10:30:00"),
            montar_operacao(linha="1001", inicio="2024-01-15 10:00:00", fim="2024-01-15 11:15:00"),
        )
        linhas = processar_documento(parse_btcs(xml), contexto)
        assert [(l.codigo_linha, l.sentido) for l in linhas] == [
            ("1001", SENTIDO_IDA), ("1002", SENTIDO_IDA), ("1001", SENTIDO_VOLTA),
        ]

    def test_matricula_do_lote_para_todas_as_operacoes(self, contexto, identidade):
        xml = montar_xml(montar_operacao(), montar_operacao())
        linhas = processar_documento(parse_btcs(xml), contexto)
        assert [l.cpf_rodoviario for l in linhas] == ["37720988191", "37720988191"]
        assert identidade.consultas == ["951716", "951716"]

    def test_resumo_do_lote_no_log(self, contexto, caplog):
        caplog.set_level(logging.INFO, logger="processor")
        processar_documento(parse_btcs(montar_xml(montar_operacao(), montar_operacao())), contexto)
        assert "Lote 123456 de 2024-01-15 (TD TD001), motorista 951716 João Silva: 2 operação(ões)" in caplog.text
