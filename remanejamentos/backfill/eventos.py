"""
============================================================
⏱️ Backfill - Eventos de status das tarefas
============================================================
eventos_status: reconstrói a linha do tempo de cada tarefa a partir do
histórico de alterações de status.

reprovacoes: decisões (reprovação/aprovação) registradas no histórico
viram eventos de status, resolvendo a tarefa por referência direta,
nome citado na descrição ou palpite de setor.
"""

import logging
import re
from functools import reduce
from operator import or_

from django.db.models import Q

from remanejamentos.exceptions import BackfillMatchNotFound
from remanejamentos.models import HistoricoRemanejamento, TarefaRemanejamento, TarefaStatusEvento
from remanejamentos.services.classificador import ClassificadorPalavrasChave
from remanejamentos.services.normalizacao import contem_normalizado, normalizar, normalizar_instante

from .base import BackfillJob

logger = logging.getLogger(__name__)

PADROES_NOME_TAREFA = (
    re.compile(r'tarefa\s+"([^"]+)"', re.IGNORECASE),
    re.compile(r"tarefa\s+'([^']+)'", re.IGNORECASE),
    re.compile(r'tarefa\s+(.*?)\s+alterad[oa]', re.IGNORECASE),
)

_DELIMITADORES = re.compile(r'[()\[\]{}"\']')


def extrair_nome_tarefa(descricao):
    """Nome da tarefa citado em uma descrição de histórico, se houver."""
    for padrao in PADROES_NOME_TAREFA:
        encontrado = padrao.search(descricao or '')
        if encontrado and encontrado.group(1).strip():
            return encontrado.group(1).strip()
    return None


class EventosStatusBackfill(BackfillJob):
    nome = 'eventos_status'
    descricao = 'Gera eventos de status a partir do histórico (ou o status atual)'

    def queryset(self):
        return TarefaRemanejamento.objects.all()

    def processar(self, tarefa, resumo):
        existentes = {
            (normalizar(e.status_novo), normalizar_instante(e.data_evento))
            for e in tarefa.eventos_status.all()
        }
        historicos = list(
            HistoricoRemanejamento.objects.de_tarefa(tarefa).alteracoes_status().order_by('data_acao', 'id')
        )

        if not historicos:
            data_evento = tarefa.data_conclusao or tarefa.criado_em
            self._criar(tarefa, None, tarefa.status, data_evento, None, existentes, resumo,
                        'Backfill: status atual da tarefa')
            return

        for historico in historicos:
            status_novo = historico.valor_novo or tarefa.status
            data_evento = historico.data_acao or tarefa.data_conclusao or tarefa.criado_em
            self._criar(tarefa, historico.valor_anterior, status_novo, data_evento, historico,
                        existentes, resumo, 'Backfill: evento reconstruído do histórico')

    def _criar(self, tarefa, anterior, novo, data_evento, historico, existentes, resumo, observacoes):
        chave = (normalizar(novo), normalizar_instante(data_evento))
        if chave in existentes:
            resumo.ignorados += 1
            return
        existentes.add(chave)
        resumo.criados += 1
        if self.dry_run:
            return
        TarefaStatusEvento.objects.create(
            tarefa=tarefa,
            remanejamento_id=tarefa.remanejamento_id,
            status_anterior=anterior,
            status_novo=novo,
            observacoes=observacoes,
            data_evento=data_evento,
            usuario=historico.usuario if historico else None,
            equipe_id=(historico.equipe_id if historico else None) or tarefa.equipe_id,
        )


class ReprovacoesBackfill(BackfillJob):
    nome = 'reprovacoes'
    descricao = 'Gera eventos de reprovação/aprovação a partir do histórico'

    def preparar(self):
        self.decisoes = ClassificadorPalavrasChave.de_decisoes()
        self.setores = ClassificadorPalavrasChave.de_setores()

    def queryset(self):
        palavras = self.decisoes.palavras
        filtro = reduce(or_, (Q(valor_novo__icontains=p) | Q(descricao_acao__icontains=p) for p in palavras))
        return HistoricoRemanejamento.objects.filter(
            entidade__iexact='TAREFA',
            campo_alterado__iexact='status',
        ).filter(filtro)

    def processar(self, historico, resumo):
        decisao = self.decisao(historico)
        if decisao is None:
            raise BackfillMatchNotFound(f'histórico {historico.pk} sem decisão reconhecível')

        tarefa = self.resolver_tarefa(historico)

        if historico.tarefa_id is None:
            resumo.atualizados += 1
            if not self.dry_run:
                historico.tarefa = tarefa
                historico.save(update_fields=['tarefa'])

        instante = normalizar_instante(historico.data_acao)
        for evento in tarefa.eventos_status.all():
            if (normalizar_instante(evento.data_evento) == instante
                    and self.decisoes.classificar(evento.status_novo) == decisao):
                resumo.ignorados += 1
                return

        resumo.criados += 1
        if self.dry_run:
            return
        TarefaStatusEvento.objects.create(
            tarefa=tarefa,
            remanejamento_id=tarefa.remanejamento_id,
            status_anterior=historico.valor_anterior,
            status_novo=decisao,
            observacoes='Backfill: decisão registrada no histórico',
            data_evento=historico.data_acao,
            usuario=historico.usuario or self.usuario_padrao,
            equipe_id=historico.equipe_id or tarefa.equipe_id,
        )

    def decisao(self, historico):
        """
        Decisão registrada no histórico.

        Com ``valor_novo`` preenchido só ele é classificado: um status
        comum (ex.: CANCELADO) não vira decisão por causa do nome da
        tarefa citado na descrição.
        """
        if normalizar(historico.valor_novo):
            return self.decisoes.classificar_texto(historico.valor_novo)
        return self.decisoes.classificar_texto(historico.descricao_acao)

    def resolver_tarefa(self, historico):
        """
        Tarefa do histórico: referência direta, depois nome citado na
        descrição (tipo, depois descrição da tarefa), depois setor.

        Raises:
            BackfillMatchNotFound
        """
        if historico.tarefa_id:
            return historico.tarefa
        if not historico.remanejamento_id:
            raise BackfillMatchNotFound(f'histórico {historico.pk} sem remanejamento')

        candidatas = list(
            TarefaRemanejamento.objects.filter(remanejamento_id=historico.remanejamento_id)
            .order_by('responsavel', 'descricao', 'id')
        )
        if not candidatas:
            raise BackfillMatchNotFound(f'remanejamento {historico.remanejamento_id} sem tarefas')

        nome = extrair_nome_tarefa(historico.descricao_acao)
        if nome:
            limpo = _DELIMITADORES.sub(' ', nome).strip()
            for fragmento in (nome, limpo):
                for campo in ('tipo', 'descricao'):
                    for tarefa in candidatas:
                        if contem_normalizado(getattr(tarefa, campo), fragmento):
                            return tarefa

        setor = self.setores.classificar(nome, historico.descricao_acao)
        if setor:
            for tarefa in candidatas:
                if normalizar(tarefa.responsavel) == setor:
                    return tarefa

        raise BackfillMatchNotFound(f'nenhuma tarefa corresponde ao histórico {historico.pk}')
