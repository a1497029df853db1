"""
============================================================
🧹 Backfill - Deduplicação global
============================================================
"""

from remanejamentos.models import RemanejamentoFuncionario
from remanejamentos.services.deduplicacao import Deduplicador

from .base import BackfillJob


class DeduplicacaoBackfill(BackfillJob):
    """Aplica a deduplicação em todos os remanejamentos abertos (atualizados = canceladas)."""

    nome = 'deduplicacao'
    descricao = 'Cancela tarefas duplicadas em todos os remanejamentos abertos'

    def preparar(self):
        self.deduplicador = Deduplicador(self.usuario)

    def queryset(self):
        return RemanejamentoFuncionario.objects.abertos()

    def processar(self, remanejamento, resumo):
        remanejamento = RemanejamentoFuncionario.objects.select_for_update().get(pk=remanejamento.pk)
        if not remanejamento.aberto_para_tarefas:
            resumo.ignorados += 1
            return
        if self.dry_run:
            canceladas = len(self.deduplicador.selecionar_cancelamentos(list(remanejamento.tarefas.all())))
        else:
            canceladas = self.deduplicador.deduplicar_remanejamento(remanejamento)
        resumo.atualizados += canceladas
