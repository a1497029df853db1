"""
============================================================
🧹 Deduplicação de tarefas
============================================================
Mantém no máximo uma tarefa ativa por chave em cada remanejamento:
a mais antiga (criado_em, desempate pelo id) permanece, as demais
são canceladas.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass

from django.db import transaction
from django.utils import timezone

from remanejamentos.exceptions import RemanejamentoFechado
from remanejamentos.models import (
    HistoricoRemanejamento,
    ObservacaoTarefa,
    RemanejamentoFuncionario,
    TarefaRemanejamento,
)

from . import auditoria
from .normalizacao import chave_tarefa
from .status import recalcular_status

logger = logging.getLogger(__name__)

TODOS = 'all'


@dataclass
class ResultadoDeduplicacao:
    processados: int = 0
    canceladas: int = 0
    nao_resolvidos: int = 0


class Deduplicador:

    def __init__(self, usuario=None):
        self.usuario = usuario

    def agrupar(self, tarefas):
        grupos = OrderedDict()
        for tarefa in tarefas:
            grupos.setdefault(chave_tarefa(tarefa), []).append(tarefa)
        return grupos

    def selecionar_cancelamentos(self, tarefas):
        """Lista de (tarefa, chave) que devem ser canceladas."""
        cancelar = []
        for chave, grupo in self.agrupar(tarefas).items():
            ativas = sorted(
                (t for t in grupo if t.status == TarefaRemanejamento.PENDENTE),
                key=lambda t: (t.criado_em, t.pk),
            )
            if len(ativas) < 2:
                continue
            if ativas[0].criado_em == ativas[1].criado_em:
                logger.debug('Empate em %s (chave %s): mantida a tarefa de menor id %s',
                             ativas[0].remanejamento_id, chave, ativas[0].pk)
            cancelar.extend((tarefa, chave) for tarefa in ativas[1:])
        return cancelar

    def deduplicar_remanejamento(self, remanejamento):
        """
        Cancela duplicatas de um remanejamento já bloqueado e recalcula o status.

        Deve ser chamado dentro de transaction.atomic().

        Returns:
            Quantidade de tarefas canceladas
        """
        cancelar = self.selecionar_cancelamentos(list(remanejamento.tarefas.all()))
        for tarefa, chave in cancelar:
            self._cancelar(remanejamento, tarefa, chave)
        recalcular_status(remanejamento, self.usuario)
        if cancelar:
            logger.info('Remanejamento %s: %d tarefa(s) duplicada(s) cancelada(s)', remanejamento.pk, len(cancelar))
        return len(cancelar)

    def _cancelar(self, remanejamento, tarefa, chave):
        agora = timezone.now()
        anterior = tarefa.status
        tarefa.status = TarefaRemanejamento.CANCELADO
        tarefa.save(update_fields=['status', 'atualizado_em'])

        nome, _, _ = auditoria.ator(self.usuario)
        ObservacaoTarefa.objects.create(
            tarefa=tarefa,
            texto=f'Cancelada por deduplicação automática, chave={chave}',
            criado_por=nome,
        )
        auditoria.registrar(
            HistoricoRemanejamento.ATUALIZACAO_STATUS,
            'TAREFA',
            f'Tarefa "{tarefa.tipo}" cancelada por deduplicação (mantida 1 tarefa por chave: {chave})',
            remanejamento=remanejamento,
            tarefa=tarefa,
            campo='status',
            valor_anterior=anterior,
            valor_novo=TarefaRemanejamento.CANCELADO,
            usuario=self.usuario,
            data_acao=agora,
        )
        auditoria.registrar_evento_status(
            tarefa, anterior, TarefaRemanejamento.CANCELADO,
            usuario=self.usuario,
            observacoes='Deduplicação automática',
            data_evento=agora,
        )


def deduplicar_um(remanejamento_id, usuario=None, deduplicador=None):
    """Deduplica um remanejamento em transação própria."""
    deduplicador = deduplicador or Deduplicador(usuario)
    with transaction.atomic():
        remanejamento = RemanejamentoFuncionario.objects.select_for_update().get(pk=remanejamento_id)
        if not remanejamento.aberto_para_tarefas:
            raise RemanejamentoFechado(remanejamento)
        return deduplicador.deduplicar_remanejamento(remanejamento)


def deduplicar(alvo, usuario=None, batch_size=None):
    """
    Deduplica um remanejamento (id) ou todos os abertos (``'all'``).

    Returns:
        ResultadoDeduplicacao com processados/canceladas/nao_resolvidos
    """
    if alvo == TODOS:
        from remanejamentos.backfill.deduplicacao import DeduplicacaoBackfill

        resumo = DeduplicacaoBackfill(batch_size=batch_size, usuario=usuario).executar()
        return ResultadoDeduplicacao(
            processados=resumo.processados,
            canceladas=resumo.atualizados,
            nao_resolvidos=resumo.erros,
        )

    canceladas = deduplicar_um(alvo, usuario)
    return ResultadoDeduplicacao(processados=1, canceladas=canceladas)
