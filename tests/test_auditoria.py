"""Testes do registro de auditoria e da imutabilidade do histórico."""

import pytest

from remanejamentos.models import HistoricoRemanejamento, TarefaRemanejamento, TarefaStatusEvento
from remanejamentos.services import auditoria, concluir_tarefa

pytestmark = pytest.mark.django_db


def _falhar(*args, **kwargs):
    raise RuntimeError('banco indisponível')


class TestRegistrar:
    def test_preenche_vinculos(self, remanejamento, criar_tarefa, equipes):
        tarefa = criar_tarefa(remanejamento, 'CTPS', equipe=equipes['RH'])

        historico = auditoria.registrar(
            HistoricoRemanejamento.ATUALIZACAO_CAMPO, 'TAREFA', 'Prazo alterado',
            tarefa=tarefa, campo='data_limite', valor_novo='2026-01-01',
        )

        assert historico.remanejamento == remanejamento
        assert historico.solicitacao_id == remanejamento.solicitacao_id
        assert historico.entidade_id == str(tarefa.pk)
        assert historico.equipe == equipes['RH']
        assert historico.usuario_responsavel == 'Sistema'
        assert historico.valor_anterior is None

    def test_usuario_com_funcionario(self, remanejamento, funcionario, admin):
        admin.funcionario = funcionario
        admin.save()

        historico = auditoria.registrar(
            HistoricoRemanejamento.CRIACAO, 'REMANEJAMENTO', 'Teste',
            remanejamento=remanejamento, usuario=admin,
        )

        assert historico.usuario == admin
        assert historico.usuario_responsavel == 'Maria Souza'

    def test_falha_e_descartada(self, remanejamento, monkeypatch, caplog):
        monkeypatch.setattr(HistoricoRemanejamento.objects, 'create', _falhar)

        resultado = auditoria.registrar(
            HistoricoRemanejamento.CRIACAO, 'REMANEJAMENTO', 'Teste', remanejamento=remanejamento,
        )

        assert resultado is None
        assert 'Falha ao registrar histórico' in caplog.text

    def test_falha_nao_desfaz_operacao_principal(self, remanejamento, criar_tarefa, monkeypatch):
        tarefa = criar_tarefa(remanejamento, 'CTPS')
        monkeypatch.setattr(HistoricoRemanejamento.objects, 'create', _falhar)
        monkeypatch.setattr(TarefaStatusEvento.objects, 'create', _falhar)

        concluir_tarefa(tarefa.pk)

        tarefa.refresh_from_db()
        assert tarefa.status == TarefaRemanejamento.CONCLUIDO


class TestImutabilidade:
    @pytest.fixture
    def historico(self, remanejamento):
        return auditoria.registrar(
            HistoricoRemanejamento.CRIACAO, 'REMANEJAMENTO', 'Criado', remanejamento=remanejamento,
        )

    def test_alteracao_de_conteudo_e_bloqueada(self, historico):
        historico.descricao_acao = 'outra coisa'
        with pytest.raises(ValueError):
            historico.save()
        with pytest.raises(ValueError):
            historico.save(update_fields=['descricao_acao'])

    def test_vinculos_podem_ser_completados(self, historico, equipes):
        historico.equipe = equipes['RH']
        historico.save(update_fields=['equipe'])

        historico.refresh_from_db()
        assert historico.equipe == equipes['RH']

    def test_exclusao_bloqueada(self, historico):
        with pytest.raises(ValueError):
            historico.delete()
        assert HistoricoRemanejamento.objects.filter(pk=historico.pk).exists()

    def test_evento_de_status_imutavel(self, remanejamento, criar_tarefa):
        tarefa = criar_tarefa(remanejamento, 'CTPS')
        evento = auditoria.registrar_evento_status(tarefa, None, 'PENDENTE')

        evento.status_novo = 'CONCLUIDO'
        with pytest.raises(ValueError):
            evento.save()
        with pytest.raises(ValueError):
            evento.delete()
