"""
============================================================
📊 Agregação do status das tarefas do remanejamento
============================================================
"""

import logging

from django.db import transaction

from remanejamentos.models import HistoricoRemanejamento, RemanejamentoFuncionario, TarefaRemanejamento

from . import auditoria

logger = logging.getLogger(__name__)


def calcular_status(remanejamento):
    """Status esperado a partir das tarefas pendentes."""
    pendentes = remanejamento.tarefas.filter(status=TarefaRemanejamento.PENDENTE).exists()
    if pendentes:
        return RemanejamentoFuncionario.ATENDER_TAREFAS
    return RemanejamentoFuncionario.SUBMETER_RASCUNHO


def recalcular_status(remanejamento, usuario=None):
    """
    Recalcula ``status_tarefas`` de um remanejamento.

    Aceita a instância ou o id. Remanejamentos aguardando aprovação não
    mudam; sem mudança não há gravação nem histórico.

    Returns:
        O status_tarefas resultante
    """
    with transaction.atomic():
        if not isinstance(remanejamento, RemanejamentoFuncionario):
            remanejamento = RemanejamentoFuncionario.objects.select_for_update().get(pk=remanejamento)

        atual = remanejamento.status_tarefas
        if atual not in RemanejamentoFuncionario.STATUS_TAREFAS_ABERTOS:
            logger.debug('Remanejamento %s em %s: status não recalculado', remanejamento.pk, atual)
            return atual

        novo = calcular_status(remanejamento)
        if novo == atual:
            return atual

        remanejamento.status_tarefas = novo
        remanejamento.save(update_fields=['status_tarefas', 'atualizado_em'])

    logger.info('Remanejamento %s: status_tarefas %s → %s', remanejamento.pk, atual, novo)
    auditoria.registrar(
        HistoricoRemanejamento.ATUALIZACAO_STATUS,
        'STATUS_TAREFAS',
        f'Status geral das tarefas atualizado para: {novo}',
        remanejamento=remanejamento,
        campo='status_tarefas',
        valor_anterior=atual,
        valor_novo=novo,
        usuario=usuario,
    )
    return novo
