"""Testes dos jobs de backfill (idempotência, dry-run e heurísticas)."""

from datetime import timedelta

import pytest
from django.utils import timezone

from remanejamentos.backfill import JOBS, conta_padrao, executar_backfill
from remanejamentos.backfill.equipes import EquipesTarefasBackfill
from remanejamentos.backfill.eventos import extrair_nome_tarefa
from remanejamentos.exceptions import BackfillDesconhecido
from remanejamentos.models import (
    Funcionario,
    HistoricoRemanejamento,
    TarefaRemanejamento,
    TarefaStatusEvento,
    Usuario,
)
from remanejamentos.services import cancelar_tarefa, concluir_tarefa

pytestmark = pytest.mark.django_db


def _historico(remanejamento, descricao, tarefa=None, **extra):
    dados = {
        'tipo_acao': HistoricoRemanejamento.ATUALIZACAO_STATUS,
        'entidade': 'TAREFA',
        'campo_alterado': 'status',
        'descricao_acao': descricao,
        'remanejamento': remanejamento,
        'tarefa': tarefa,
    }
    dados.update(extra)
    return HistoricoRemanejamento.objects.create(**dados)


class TestRegistro:
    def test_jobs_registrados(self):
        assert set(JOBS) == {
            'eventos_status', 'reprovacoes', 'equipes_tarefas',
            'equipes_historico', 'usuarios_historico', 'deduplicacao',
        }

    def test_job_desconhecido(self, db):
        with pytest.raises(BackfillDesconhecido):
            executar_backfill('inexistente')

    def test_conta_padrao_pela_matricula(self, admin):
        assert conta_padrao() == admin
        assert conta_padrao('NAO-EXISTE') is None


class TestExtrairNome:
    @pytest.mark.parametrize('descricao,esperado', [
        ('Status da tarefa "ASO admissional" alterado para REPROVADO', 'ASO admissional'),
        ("Tarefa 'Enviar CTPS' reprovada", 'Enviar CTPS'),
        ('Status da tarefa Integração (NR-35) alterado para REPROVADO', 'Integração (NR-35)'),
        ('Tarefa reprovada pelo setor', None),
    ])
    def test_padroes(self, descricao, esperado):
        assert extrair_nome_tarefa(descricao) == esperado


class TestEventosStatus:
    def test_tarefa_sem_historico_recebe_status_atual(self, remanejamento, criar_tarefa):
        tarefa = criar_tarefa(remanejamento, 'CTPS')

        resumo = executar_backfill('eventos_status', usuario_padrao=None)

        assert resumo.criados == 1
        evento = TarefaStatusEvento.objects.linha_do_tempo(tarefa).get()
        assert evento.status_anterior is None
        assert evento.status_novo == 'PENDENTE'
        assert evento.data_evento == tarefa.criado_em

    def test_replay_do_historico(self, remanejamento, criar_tarefa):
        tarefa = criar_tarefa(remanejamento, 'CTPS')
        inicio = timezone.now() - timedelta(hours=3)
        _historico(remanejamento, 'Status alterado', tarefa, valor_anterior='PENDENTE',
                   valor_novo='CONCLUIDO', data_acao=inicio)

        resumo = executar_backfill('eventos_status')

        assert resumo.criados == 1
        evento = TarefaStatusEvento.objects.linha_do_tempo(tarefa).get()
        assert (evento.status_anterior, evento.status_novo) == ('PENDENTE', 'CONCLUIDO')
        assert evento.data_evento == inicio

    def test_idempotente_e_respeita_eventos_ao_vivo(self, remanejamento, criar_tarefa):
        concluida = criar_tarefa(remanejamento, 'CTPS')
        concluir_tarefa(concluida.pk)
        for i in range(3):
            criar_tarefa(remanejamento, f'Tarefa {i}', minutos=i)

        primeiro = executar_backfill('eventos_status')
        segundo = executar_backfill('eventos_status')

        assert primeiro.processados == 4
        assert primeiro.criados == 3
        assert primeiro.ignorados == 1
        assert segundo.criados == 0
        assert TarefaStatusEvento.objects.filter(tarefa=concluida).count() == 1

    def test_dry_run_nao_grava(self, remanejamento, criar_tarefa):
        criar_tarefa(remanejamento, 'CTPS')

        resumo = executar_backfill('eventos_status', dry_run=True)

        assert resumo.dry_run is True
        assert resumo.criados == 1
        assert not TarefaStatusEvento.objects.exists()

    def test_limite(self, remanejamento, criar_tarefa):
        for i in range(5):
            criar_tarefa(remanejamento, f'Tarefa {i}', minutos=i)

        resumo = executar_backfill('eventos_status', limit=3)

        assert resumo.processados == 3
        assert TarefaStatusEvento.objects.count() == 3


class TestReprovacoes:
    @pytest.fixture
    def tarefas(self, remanejamento, criar_tarefa):
        return {
            'RH': criar_tarefa(remanejamento, 'Enviar CTPS', 'RH'),
            'MEDICINA': criar_tarefa(remanejamento, 'ASO admissional', 'MEDICINA', descricao='Exame clínico'),
        }

    def test_resolve_pelo_nome_e_repara_vinculo(self, remanejamento, tarefas, admin):
        historico = _historico(
            remanejamento, 'Status da tarefa "aso admissional" alterado para REPROVADO',
            valor_anterior='PENDENTE', valor_novo='REPROVADO',
        )

        primeiro = executar_backfill('reprovacoes')
        segundo = executar_backfill('reprovacoes')

        assert (primeiro.criados, primeiro.atualizados) == (1, 1)
        assert (segundo.criados, segundo.atualizados, segundo.ignorados) == (0, 0, 1)
        historico.refresh_from_db()
        assert historico.tarefa == tarefas['MEDICINA']
        evento = TarefaStatusEvento.objects.get()
        assert evento.tarefa == tarefas['MEDICINA']
        assert evento.status_novo == 'REPROVADO'
        assert evento.data_evento == historico.data_acao
        assert evento.usuario == admin

    def test_resolve_pela_descricao_da_tarefa(self, remanejamento, tarefas):
        _historico(remanejamento, 'Tarefa "Exame clínico" alterada', valor_novo='REJEITADO')

        resumo = executar_backfill('reprovacoes')

        assert resumo.criados == 1
        assert TarefaStatusEvento.objects.get().tarefa == tarefas['MEDICINA']

    def test_palpite_de_setor(self, remanejamento, tarefas):
        _historico(remanejamento, 'Tarefa reprovada pelo setor de medicina', valor_novo='INVALIDADO')

        resumo = executar_backfill('reprovacoes')

        assert resumo.criados == 1
        assert TarefaStatusEvento.objects.get().tarefa == tarefas['MEDICINA']

    def test_sem_correspondencia_e_ignorado(self, remanejamento, tarefas):
        _historico(remanejamento, 'Reprovado', valor_novo='REPROVADO')

        resumo = executar_backfill('reprovacoes')

        assert (resumo.processados, resumo.ignorados, resumo.criados) == (1, 1, 0)

    def test_aprovacao_vira_conclusao(self, remanejamento, tarefas):
        _historico(remanejamento, 'Status da tarefa "Enviar CTPS" alterado para APROVADO', valor_novo='APROVADO')

        executar_backfill('reprovacoes')

        assert TarefaStatusEvento.objects.get().status_novo == 'CONCLUIDO'

    def test_cancelamento_nao_vira_decisao(self, remanejamento, criar_tarefa):
        tarefa = criar_tarefa(remanejamento, 'Verificar validade do ASO', 'MEDICINA')
        cancelar_tarefa(tarefa.pk, 'Exame dispensado')

        resumo = executar_backfill('reprovacoes')

        assert (resumo.processados, resumo.ignorados, resumo.criados) == (1, 1, 0)
        eventos = TarefaStatusEvento.objects.linha_do_tempo(tarefa).values_list('status_novo', flat=True)
        assert list(eventos) == [TarefaRemanejamento.CANCELADO]

    def test_sem_valor_novo_usa_descricao(self, remanejamento, tarefas):
        _historico(remanejamento, 'Tarefa "Enviar CTPS" reprovada pelo RH')

        executar_backfill('reprovacoes')

        evento = TarefaStatusEvento.objects.get()
        assert evento.tarefa == tarefas['RH']
        assert evento.status_novo == 'REPROVADO'

    def test_aso_de_integracao_e_medicina(self, remanejamento, criar_tarefa):
        medicina = criar_tarefa(remanejamento, 'Exame admissional', 'MEDICINA')
        criar_tarefa(remanejamento, 'Integração NR-35', 'TREINAMENTO')
        _historico(remanejamento, 'Status da tarefa "ASO de integração" alterado para REPROVADO',
                   valor_novo='REPROVADO')

        executar_backfill('reprovacoes')

        assert TarefaStatusEvento.objects.get().tarefa == medicina

    def test_dry_run(self, remanejamento, tarefas):
        historico = _historico(remanejamento, 'Status da tarefa "Enviar CTPS" alterado para REPROVADO',
                               valor_novo='REPROVADO')

        resumo = executar_backfill('reprovacoes', dry_run=True)

        assert (resumo.criados, resumo.atualizados) == (1, 1)
        historico.refresh_from_db()
        assert historico.tarefa is None
        assert not TarefaStatusEvento.objects.exists()


class TestEquipes:
    def test_tarefas(self, remanejamento, criar_tarefa, equipes, safety101):
        treinamento = criar_tarefa(remanejamento, 'Curso', 'OUTROS', treinamento=safety101)
        medicina = criar_tarefa(remanejamento, 'Exame periódico', 'Medicina')
        sem_setor = criar_tarefa(remanejamento, 'Entrega de crachá', 'PORTARIA')

        primeiro = executar_backfill('equipes_tarefas')
        segundo = executar_backfill('equipes_tarefas')

        assert (primeiro.atualizados, primeiro.ignorados) == (2, 1)
        assert (segundo.processados, segundo.atualizados) == (1, 0)
        for tarefa in (treinamento, medicina, sem_setor):
            tarefa.refresh_from_db()
        assert treinamento.equipe == equipes['TREINAMENTO']
        assert medicina.equipe == equipes['MEDICINA']
        assert sem_setor.equipe is None

    def test_historico(self, remanejamento, criar_tarefa, equipes):
        tarefa = criar_tarefa(remanejamento, 'CTPS', 'RH')
        com_tarefa = _historico(remanejamento, 'Status alterado', tarefa)
        sem_tarefa = _historico(remanejamento, 'Integração de segurança agendada')

        resumo = executar_backfill('equipes_historico')

        assert resumo.atualizados == 2
        com_tarefa.refresh_from_db()
        sem_tarefa.refresh_from_db()
        assert com_tarefa.equipe == equipes['RH']
        assert sem_tarefa.equipe == equipes['TREINAMENTO']

    def test_erro_em_um_registro_nao_interrompe_o_job(self, remanejamento, criar_tarefa, equipes,
                                                      monkeypatch, caplog):
        quebrada = criar_tarefa(remanejamento, 'CTPS', 'RH')
        boa = criar_tarefa(remanejamento, 'Exame periódico', 'MEDICINA', minutos=1)
        original = EquipesTarefasBackfill.setor

        def setor(job, tarefa):
            if tarefa.pk == quebrada.pk:
                raise RuntimeError('registro corrompido')
            return original(job, tarefa)

        monkeypatch.setattr(EquipesTarefasBackfill, 'setor', setor)

        resumo = executar_backfill('equipes_tarefas')

        assert (resumo.processados, resumo.atualizados, resumo.erros) == (2, 1, 1)
        assert f'erro ao processar registro {quebrada.pk}' in caplog.text
        quebrada.refresh_from_db()
        boa.refresh_from_db()
        assert quebrada.equipe is None
        assert boa.equipe == equipes['MEDICINA']



class TestUsuarios:
    def test_matricula_no_texto_e_conta_padrao(self, remanejamento, admin):
        joao = Usuario.objects.create_user(
            matricula='joao', funcionario=Funcionario.objects.create(matricula='55501', nome='João Alves')
        )
        pela_matricula = _historico(remanejamento, 'Tarefa concluída', usuario_responsavel='João Alves (55501)')
        sistema = _historico(None, 'Status recalculado', usuario_responsavel='Sistema')

        primeiro = executar_backfill('usuarios_historico')
        segundo = executar_backfill('usuarios_historico')

        assert primeiro.atualizados == 2
        assert segundo.processados == 0
        pela_matricula.refresh_from_db()
        sistema.refresh_from_db()
        assert pela_matricula.usuario == joao
        assert sistema.usuario == admin

    def test_nome_do_funcionario(self, remanejamento, admin):
        paula = Usuario.objects.create_user(
            matricula='paula', funcionario=Funcionario.objects.create(matricula='55502', nome='Paula Dias')
        )
        historico = _historico(remanejamento, 'Observação', usuario_responsavel='paula dias')

        executar_backfill('usuarios_historico')

        historico.refresh_from_db()
        assert historico.usuario == paula

    def test_ultimo_responsavel_do_remanejamento(self, remanejamento, equipes, admin):
        paula = Usuario.objects.create_user(matricula='paula', equipe=equipes['RH'])
        _historico(remanejamento, 'Tarefa criada', usuario=paula)
        anonimo = _historico(remanejamento, 'Status recalculado', entidade='STATUS_TAREFAS')

        resumo = executar_backfill('usuarios_historico')

        assert resumo.atualizados == 1
        anonimo.refresh_from_db()
        assert anonimo.usuario == paula
        assert anonimo.equipe == equipes['RH']

    def test_sem_conta_padrao(self, remanejamento):
        _historico(remanejamento, 'Status recalculado')

        resumo = executar_backfill('usuarios_historico')

        assert (resumo.processados, resumo.ignorados) == (1, 1)


class TestDeduplicacaoGlobal:
    def test_idempotente(self, remanejamento, criar_tarefa):
        for minutos in range(3):
            criar_tarefa(remanejamento, 'CTPS', minutos=minutos)

        simulado = executar_backfill('deduplicacao', dry_run=True)
        primeiro = executar_backfill('deduplicacao')
        segundo = executar_backfill('deduplicacao')

        assert simulado.atualizados == 2
        assert primeiro.atualizados == 2
        assert segundo.atualizados == 0
        assert remanejamento.tarefas.filter(status=TarefaRemanejamento.PENDENTE).count() == 1
