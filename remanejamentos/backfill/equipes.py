"""
============================================================
👥 Backfill - Equipe responsável
============================================================
Tarefas e históricos sem equipe recebem a equipe do setor inferido:
treinamento vinculado, tarefa padrão vinculada ou, por último,
palavras-chave do setor/tipo/descrição.
"""

from remanejamentos.exceptions import BackfillMatchNotFound
from remanejamentos.models import SETOR_TREINAMENTO, HistoricoRemanejamento, TarefaRemanejamento
from remanejamentos.services.classificador import ClassificadorPalavrasChave, LocalizadorEquipe

from .base import BackfillJob


def setor_da_tarefa(tarefa, classificador):
    if tarefa.treinamento_id:
        return SETOR_TREINAMENTO
    if tarefa.tarefa_padrao_id:
        return tarefa.tarefa_padrao.setor
    return classificador.classificar(tarefa.responsavel, tarefa.tipo, tarefa.descricao)


class _EquipeBackfill(BackfillJob):

    def preparar(self):
        self.classificador = ClassificadorPalavrasChave.de_setores()
        self.localizador = LocalizadorEquipe()

    def setor(self, registro):
        raise NotImplementedError

    def processar(self, registro, resumo):
        setor = self.setor(registro)
        equipe_id = self.localizador.equipe_por_setor(setor) if setor else None
        if equipe_id is None:
            raise BackfillMatchNotFound(f'sem equipe para o registro {registro.pk} (setor={setor})')

        resumo.atualizados += 1
        if not self.dry_run:
            registro.equipe_id = equipe_id
            registro.save(update_fields=['equipe'])


class EquipesTarefasBackfill(_EquipeBackfill):
    nome = 'equipes_tarefas'
    descricao = 'Preenche a equipe das tarefas sem equipe'

    def queryset(self):
        return TarefaRemanejamento.objects.filter(equipe__isnull=True).select_related('tarefa_padrao')

    def setor(self, tarefa):
        return setor_da_tarefa(tarefa, self.classificador)


class EquipesHistoricoBackfill(_EquipeBackfill):
    nome = 'equipes_historico'
    descricao = 'Preenche a equipe dos registros de histórico sem equipe'

    def queryset(self):
        return HistoricoRemanejamento.objects.filter(equipe__isnull=True).select_related(
            'tarefa', 'tarefa__tarefa_padrao'
        )

    def setor(self, historico):
        if historico.tarefa_id:
            setor = setor_da_tarefa(historico.tarefa, self.classificador)
            if setor:
                return setor
        return self.classificador.classificar(historico.descricao_acao)
