"""Testes da deduplicação de tarefas."""

import pytest

from remanejamentos.exceptions import RemanejamentoFechado
from remanejamentos.models import (
    Funcionario,
    HistoricoRemanejamento,
    RemanejamentoFuncionario,
    TarefaRemanejamento,
    TarefaStatusEvento,
)
from remanejamentos.services import deduplicar

pytestmark = pytest.mark.django_db


def _status(*tarefas):
    for tarefa in tarefas:
        tarefa.refresh_from_db()
    return [t.status for t in tarefas]


class TestDeduplicarRemanejamento:
    def test_tres_ctps_mantem_a_mais_antiga(self, remanejamento, criar_tarefa):
        antiga = criar_tarefa(remanejamento, 'CTPS', minutos=0)
        media = criar_tarefa(remanejamento, ' ctps', 'rh', minutos=5)
        nova = criar_tarefa(remanejamento, 'Ctps', minutos=10)

        resultado = deduplicar(remanejamento.pk)

        assert resultado.processados == 1
        assert resultado.canceladas == 2
        assert _status(antiga, media, nova) == ['PENDENTE', 'CANCELADO', 'CANCELADO']
        for cancelada in (media, nova):
            observacao = cancelada.observacoes.get()
            assert 'deduplicação automática' in observacao.texto
            assert 'chave=RH|CTPS' in observacao.texto
            historico = HistoricoRemanejamento.objects.de_tarefa(cancelada).get()
            assert historico.tipo_acao == HistoricoRemanejamento.ATUALIZACAO_STATUS
            assert historico.entidade == 'TAREFA'
            assert historico.valor_anterior == 'PENDENTE'
            assert historico.valor_novo == 'CANCELADO'
            assert 'RH|CTPS' in historico.descricao_acao
            evento = TarefaStatusEvento.objects.linha_do_tempo(cancelada).get()
            assert evento.status_novo == 'CANCELADO'
            assert evento.data_evento == historico.data_acao

    def test_empate_resolvido_pelo_id(self, remanejamento, criar_tarefa):
        primeira = criar_tarefa(remanejamento, 'ASO', 'MEDICINA', minutos=1)
        segunda = criar_tarefa(remanejamento, 'ASO', 'MEDICINA', minutos=1)

        deduplicar(remanejamento.pk)

        assert _status(primeira, segunda) == ['PENDENTE', 'CANCELADO']

    def test_tarefas_terminais_nao_mudam(self, remanejamento, criar_tarefa):
        concluida = criar_tarefa(remanejamento, 'CTPS', minutos=0, status=TarefaRemanejamento.CONCLUIDO)
        pendente = criar_tarefa(remanejamento, 'CTPS', minutos=5)

        resultado = deduplicar(remanejamento.pk)

        assert resultado.canceladas == 0
        assert _status(concluida, pendente) == ['CONCLUIDO', 'PENDENTE']

    def test_treinamento_agrupa_pelo_id(self, remanejamento, safety101, criar_tarefa):
        a = criar_tarefa(remanejamento, 'Safety 101', 'TREINAMENTO', minutos=0, treinamento=safety101)
        b = criar_tarefa(remanejamento, 'Segurança básica', 'TREINAMENTO', minutos=3, treinamento=safety101)

        deduplicar(remanejamento.pk)

        assert _status(a, b) == ['PENDENTE', 'CANCELADO']

    def test_recalcula_status(self, remanejamento, criar_tarefa):
        RemanejamentoFuncionario.objects.filter(pk=remanejamento.pk).update(
            status_tarefas=RemanejamentoFuncionario.SUBMETER_RASCUNHO
        )
        criar_tarefa(remanejamento, 'CTPS', minutos=0)
        criar_tarefa(remanejamento, 'CTPS', minutos=1)

        deduplicar(remanejamento.pk)

        remanejamento.refresh_from_db()
        assert remanejamento.status_tarefas == RemanejamentoFuncionario.ATENDER_TAREFAS

    def test_fechado(self, remanejamento, criar_tarefa):
        criar_tarefa(remanejamento, 'CTPS', minutos=0)
        dup = criar_tarefa(remanejamento, 'CTPS', minutos=1)
        RemanejamentoFuncionario.objects.filter(pk=remanejamento.pk).update(status_prestserv='VALIDADO')

        with pytest.raises(RemanejamentoFechado):
            deduplicar(remanejamento.pk)
        assert _status(dup) == ['PENDENTE']


class TestDeduplicarTodos:
    def test_varre_somente_abertos(self, remanejamento, solicitacao, criar_tarefa):
        fechado = RemanejamentoFuncionario.objects.create(
            solicitacao=solicitacao,
            funcionario=Funcionario.objects.create(matricula='888', nome='Ana Reis'),
            status_tarefas=RemanejamentoFuncionario.ATENDER_TAREFAS,
            status_prestserv='EM VALIDAÇÃO',
        )
        for minutos in range(3):
            criar_tarefa(remanejamento, 'CTPS', minutos=minutos)
            criar_tarefa(fechado, 'CTPS', minutos=minutos)

        resultado = deduplicar('all')

        assert resultado.processados == 1
        assert resultado.canceladas == 2
        assert resultado.nao_resolvidos == 0
        assert fechado.tarefas.filter(status='PENDENTE').count() == 3

    def test_invariante_apos_varredura(self, remanejamento, solicitacao, criar_tarefa):
        outros = [
            RemanejamentoFuncionario.objects.create(
                solicitacao=solicitacao,
                funcionario=Funcionario.objects.create(matricula=f'9{i}', nome=f'Pessoa {i}'),
                status_tarefas=RemanejamentoFuncionario.ATENDER_TAREFAS,
            )
            for i in range(3)
        ]
        for rem in [remanejamento] + outros:
            criar_tarefa(rem, 'CTPS', minutos=0)
            criar_tarefa(rem, 'ctps', minutos=1)
            criar_tarefa(rem, 'ASO', 'MEDICINA', minutos=2)

        resultado = deduplicar('all')
        segundo = deduplicar('all')

        assert resultado.processados == 4
        assert resultado.canceladas == 4
        assert segundo.canceladas == 0
        for rem in [remanejamento] + outros:
            assert rem.tarefas.filter(status='PENDENTE').count() == 2
