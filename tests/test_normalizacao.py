"""Testes da normalização de textos, chave de deduplicação e classificadores."""

from types import SimpleNamespace

import pytest

from remanejamentos.services.classificador import ClassificadorPalavrasChave, LocalizadorEquipe
from remanejamentos.services.normalizacao import (
    ChaveTarefa,
    chave_tarefa,
    contem_normalizado,
    mapear_prioridade,
    normalizar,
)


def _tarefa(responsavel, tipo, treinamento_id=None):
    return SimpleNamespace(responsavel=responsavel, tipo=tipo, treinamento_id=treinamento_id)


class TestNormalizar:
    def test_remove_acentos_e_colapsa_espacos(self):
        assert normalizar('  Exame   Médico\tadmissão ') == 'EXAME MEDICO ADMISSAO'

    def test_none_vira_vazio(self):
        assert normalizar(None) == ''

    def test_contem_em_qualquer_direcao(self):
        assert contem_normalizado('Integração de segurança', 'INTEGRACAO')
        assert contem_normalizado('ctps', 'Enviar CTPS digital')
        assert not contem_normalizado('', 'CTPS')


class TestChaveTarefa:
    def test_treinamento_vinculado_usa_id(self):
        assert chave_tarefa(_tarefa('Treinamento', 'NR-35', treinamento_id=7)) == ChaveTarefa('TREINAMENTO', '#7')

    def test_treinamento_sem_vinculo_usa_tipo(self):
        assert chave_tarefa(_tarefa('TREINAMENTO', 'NR-35')) == ChaveTarefa('TREINAMENTO', 'NR-35')

    def test_outros_setores_ignoram_caixa_e_acentos(self):
        a = chave_tarefa(_tarefa('rh', 'Emissão  CTPS'))
        b = chave_tarefa(_tarefa('RH', 'EMISSAO CTPS'))
        assert a == b
        assert str(a) == 'RH|EMISSAO CTPS'

    def test_treinamento_id_fora_do_setor_nao_altera_chave(self):
        assert chave_tarefa(_tarefa('RH', 'CTPS', treinamento_id=3)) == ChaveTarefa('RH', 'CTPS')


class TestPrioridade:
    @pytest.mark.parametrize('valor,esperado', [
        ('baixa', 'BAIXA'),
        ('media', 'MEDIA'),
        ('Normal', 'MEDIA'),
        ('alta', 'ALTA'),
        ('URGENTE', 'URGENTE'),
        ('qualquer', 'MEDIA'),
        (None, 'MEDIA'),
    ])
    def test_mapeamento(self, valor, esperado):
        assert mapear_prioridade(valor) == esperado


class TestClassificador:
    def test_primeira_regra_vence(self):
        classificador = ClassificadorPalavrasChave([
            (('REPROV', 'INVALID'), 'REPROVADO'),
            (('APROV', 'VALIDAD'), 'CONCLUIDO'),
        ])
        assert classificador.classificar('INVALIDADO') == 'REPROVADO'
        assert classificador.classificar('Reprovado pelo setor') == 'REPROVADO'
        assert classificador.classificar('Aprovado') == 'CONCLUIDO'
        assert classificador.classificar('Pendente') is None

    def test_textos_em_ordem(self):
        classificador = ClassificadorPalavrasChave.de_setores()
        assert classificador.classificar(None, 'Exame ASO', 'Treinamento') == 'MEDICINA'
        assert classificador.classificar('Integração', 'ASO') == 'TREINAMENTO'
        assert classificador.classificar('Admissão CTPS') == 'RH'
        assert classificador.classificar('ASO de integração') == 'MEDICINA'

    def test_regras_do_settings(self, settings):
        settings.REMANEJAMENTOS = {'REGRAS_SETOR': ((('LOGIST',), 'LOGISTICA'),)}
        assert ClassificadorPalavrasChave.de_setores().classificar('Logística de embarque') == 'LOGISTICA'


class TestLocalizadorEquipe:
    def _equipes(self, *nomes):
        return [SimpleNamespace(pk=i, nome=nome) for i, nome in enumerate(nomes, 1)]

    def test_palavras_por_setor(self):
        localizador = LocalizadorEquipe(
            equipes=self._equipes('Medicina Ocupacional', 'Recursos Humanos', 'Treinamentos'),
            regras={'RH': ('RH', 'RECURSOS'), 'MEDICINA': ('MEDIC',), 'TREINAMENTO': ('TREIN',)},
        )
        assert localizador.equipe_por_setor('rh') == 2
        assert localizador.equipe_por_setor('Medicina') == 1
        assert localizador.equipe_por_setor('TREINAMENTO') == 3

    def test_outros_setores_exigem_nome_igual(self):
        localizador = LocalizadorEquipe(equipes=self._equipes('Logística', 'Logística Offshore'), regras={})
        assert localizador.equipe_por_setor('LOGISTICA') == 1
        assert localizador.equipe_por_setor('Suprimentos') is None
