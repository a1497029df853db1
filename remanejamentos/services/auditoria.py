"""
============================================================
🧾 Registro de auditoria
============================================================
Gravações em savepoint próprio; falhas são logadas e descartadas,
nunca interrompem a operação principal.
"""

import logging

from django.db import transaction
from django.utils import timezone

from remanejamentos.conf import usuario_sistema
from remanejamentos.models import HistoricoRemanejamento, TarefaStatusEvento, Usuario

logger = logging.getLogger(__name__)


def ator(usuario):
    """(nome, conta, equipe_id) do responsável; aceita Usuario, nome ou None."""
    if isinstance(usuario, Usuario):
        return usuario.nome, usuario, usuario.equipe_id
    if usuario:
        return str(usuario), None, None
    return usuario_sistema(), None, None


def registrar(tipo_acao, entidade, descricao, *, solicitacao=None, remanejamento=None, tarefa=None,
              entidade_id=None, campo=None, valor_anterior=None, valor_novo=None, usuario=None,
              observacoes=None, equipe_id=None, data_acao=None):
    """
    Anexa um registro ao histórico.

    Returns:
        O HistoricoRemanejamento criado, ou None se a gravação falhar
    """
    try:
        nome, conta, equipe_usuario = ator(usuario)
        if tarefa is not None and remanejamento is None:
            remanejamento = tarefa.remanejamento
        if remanejamento is not None and solicitacao is None:
            solicitacao_id = remanejamento.solicitacao_id
        else:
            solicitacao_id = solicitacao.pk if solicitacao is not None else None
        if entidade_id is None:
            alvo = tarefa or remanejamento or solicitacao
            entidade_id = alvo.pk if alvo is not None else ''
        if equipe_id is None and tarefa is not None:
            equipe_id = tarefa.equipe_id
        with transaction.atomic():
            return HistoricoRemanejamento.objects.create(
                tipo_acao=tipo_acao,
                entidade=entidade,
                entidade_id=str(entidade_id),
                campo_alterado=campo or '',
                valor_anterior=valor_anterior,
                valor_novo=valor_novo,
                descricao_acao=descricao,
                usuario_responsavel=nome,
                usuario=conta,
                equipe_id=equipe_id or equipe_usuario,
                solicitacao_id=solicitacao_id,
                remanejamento=remanejamento,
                tarefa=tarefa,
                observacoes=observacoes,
                data_acao=data_acao or timezone.now(),
            )
    except Exception:
        logger.exception('Falha ao registrar histórico (%s %s): %s', tipo_acao, entidade, descricao)
        return None


def registrar_evento_status(tarefa, status_anterior, status_novo, usuario=None, observacoes='', data_evento=None):
    """Grava o instantâneo de uma transição de status; mesma política de falha do histórico."""
    try:
        _, conta, equipe_usuario = ator(usuario)
        dados = {
            'tarefa': tarefa,
            'remanejamento_id': tarefa.remanejamento_id,
            'status_anterior': status_anterior,
            'status_novo': status_novo,
            'observacoes': observacoes or '',
            'usuario': conta,
            'equipe_id': tarefa.equipe_id or equipe_usuario,
        }
        if data_evento is not None:
            dados['data_evento'] = data_evento
        with transaction.atomic():
            return TarefaStatusEvento.objects.create(**dados)
    except Exception:
        logger.exception('Falha ao registrar evento de status da tarefa %s', tarefa.pk)
        return None
