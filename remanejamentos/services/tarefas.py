"""
============================================================
✍️ Operações manuais em tarefas
============================================================
"""

import logging
from datetime import timedelta

from django.db import transaction
from django.utils import timezone

from remanejamentos.conf import get_config
from remanejamentos.exceptions import RemanejamentoFechado, TransicaoInvalida
from remanejamentos.models import (
    HistoricoRemanejamento,
    ObservacaoTarefa,
    RemanejamentoFuncionario,
    TarefaRemanejamento,
)

from . import auditoria
from .classificador import LocalizadorEquipe
from .normalizacao import chave_tarefa, chave_tipo, mapear_prioridade, normalizar
from .status import recalcular_status

logger = logging.getLogger(__name__)


def criar_tarefa_manual(remanejamento_id, tipo, responsavel, descricao='', prioridade=None,
                        data_limite=None, usuario=None):
    """
    Cria uma tarefa avulsa e recalcula o status do remanejamento.

    Se já houver tarefa pendente com a mesma chave, ela é retornada
    em vez de criar uma duplicata.
    """
    with transaction.atomic():
        remanejamento = RemanejamentoFuncionario.objects.select_for_update().get(pk=remanejamento_id)
        if not remanejamento.aberto_para_tarefas:
            raise RemanejamentoFechado(remanejamento)

        chave = chave_tipo(responsavel, tipo)
        for existente in remanejamento.tarefas.filter(status=TarefaRemanejamento.PENDENTE):
            if chave_tarefa(existente) == chave:
                logger.info('Tarefa pendente %s já cobre a chave %s', existente.pk, chave)
                return existente

        if data_limite is None:
            data_limite = timezone.now() + timedelta(hours=get_config()['PRAZO_TAREFA_HORAS'])
        setor = normalizar(responsavel)
        agora = timezone.now()
        tarefa = TarefaRemanejamento.objects.create(
            remanejamento=remanejamento,
            tipo=tipo,
            descricao=descricao,
            responsavel=setor,
            prioridade=mapear_prioridade(prioridade or remanejamento.solicitacao.prioridade),
            data_limite=data_limite,
            equipe_id=LocalizadorEquipe().equipe_por_setor(setor),
            criado_em=agora,
        )
        auditoria.registrar(
            HistoricoRemanejamento.CRIACAO,
            'TAREFA',
            f'Tarefa "{tipo}" criada manualmente para o setor {setor}',
            remanejamento=remanejamento,
            tarefa=tarefa,
            usuario=usuario,
            data_acao=agora,
        )
        auditoria.registrar_evento_status(tarefa, None, tarefa.status, usuario=usuario,
                                          observacoes='Criação manual', data_evento=agora)
        recalcular_status(remanejamento, usuario)
    return tarefa


def _mudar_status(tarefa_id, novo_status, usuario=None, observacao=None):
    remanejamento_id = TarefaRemanejamento.objects.values_list('remanejamento_id', flat=True).get(pk=tarefa_id)
    with transaction.atomic():
        # Ordem de travamento: remanejamento, depois tarefa
        remanejamento = RemanejamentoFuncionario.objects.select_for_update().get(pk=remanejamento_id)
        tarefa = TarefaRemanejamento.objects.select_for_update().get(pk=tarefa_id)
        if tarefa.terminal:
            raise TransicaoInvalida(f'Tarefa {tarefa.pk} já está {tarefa.status}')

        agora = timezone.now()
        anterior = tarefa.status
        tarefa.status = novo_status
        campos = ['status', 'atualizado_em']
        if novo_status == TarefaRemanejamento.CONCLUIDO:
            tarefa.data_conclusao = agora
            campos.append('data_conclusao')
        tarefa.save(update_fields=campos)

        if observacao:
            nome, _, _ = auditoria.ator(usuario)
            ObservacaoTarefa.objects.create(tarefa=tarefa, texto=observacao, criado_por=nome)

        auditoria.registrar(
            HistoricoRemanejamento.ATUALIZACAO_STATUS,
            'TAREFA',
            f'Status da tarefa "{tarefa.tipo}" alterado para {novo_status}',
            tarefa=tarefa,
            campo='status',
            valor_anterior=anterior,
            valor_novo=novo_status,
            usuario=usuario,
            data_acao=agora,
        )
        auditoria.registrar_evento_status(tarefa, anterior, novo_status, usuario=usuario,
                                          observacoes=observacao or '', data_evento=agora)
        recalcular_status(remanejamento, usuario)
    return tarefa


def concluir_tarefa(tarefa_id, usuario=None, observacao=None):
    """PENDENTE → CONCLUIDO."""
    return _mudar_status(tarefa_id, TarefaRemanejamento.CONCLUIDO, usuario, observacao)


def cancelar_tarefa(tarefa_id, motivo, usuario=None):
    """PENDENTE → CANCELADO (cancelamento manual, motivo obrigatório)."""
    if not (motivo or '').strip():
        raise ValueError('Informe o motivo do cancelamento')
    return _mudar_status(tarefa_id, TarefaRemanejamento.CANCELADO, usuario, motivo)


def adicionar_observacao(tarefa_id, texto, usuario=None):
    texto = (texto or '').strip()
    if not texto:
        raise ValueError('Observação vazia')

    tarefa = TarefaRemanejamento.objects.get(pk=tarefa_id)
    nome, _, _ = auditoria.ator(usuario)
    observacao = ObservacaoTarefa.objects.create(tarefa=tarefa, texto=texto, criado_por=nome)
    auditoria.registrar(
        HistoricoRemanejamento.CRIACAO,
        'OBSERVACAO',
        f'Observação adicionada à tarefa "{tarefa.tipo}"',
        tarefa=tarefa,
        entidade_id=observacao.pk,
        valor_novo=texto,
        usuario=usuario,
    )
    return observacao
