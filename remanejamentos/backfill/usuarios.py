"""
============================================================
👤 Backfill - Usuário responsável pelo histórico
============================================================
"""

import re

from remanejamentos.conf import get_config, usuario_sistema
from remanejamentos.exceptions import BackfillMatchNotFound
from remanejamentos.models import Funcionario, HistoricoRemanejamento, Usuario
from remanejamentos.services.normalizacao import normalizar

from .base import BackfillJob


class UsuariosHistoricoBackfill(BackfillJob):
    """
    Vincula a conta do responsável a históricos sem usuário.

    Ordem: matrícula citada no texto, nome do funcionário igual ao
    responsável registrado, último responsável conhecido do mesmo
    remanejamento (ou da mesma solicitação) e, por fim, a conta
    administrativa padrão. A equipe vazia é preenchida com a do ator.
    """

    nome = 'usuarios_historico'
    descricao = 'Vincula o usuário responsável aos registros de histórico'

    def preparar(self):
        self.padrao_matricula = re.compile(get_config()['PADRAO_MATRICULA'])
        self.sistema = normalizar(usuario_sistema())

    def queryset(self):
        return HistoricoRemanejamento.objects.filter(usuario__isnull=True)

    def processar(self, historico, resumo):
        conta = self.por_matricula(historico) or self.por_nome(historico)
        equipe_id = conta.equipe_id if conta else None
        if conta is None:
            conta, equipe_id = self.por_cadeia(historico)
        if conta is None and self.usuario_padrao is not None:
            conta, equipe_id = self.usuario_padrao, self.usuario_padrao.equipe_id
        if conta is None:
            raise BackfillMatchNotFound(f'sem usuário para o histórico {historico.pk}')

        resumo.atualizados += 1
        if self.dry_run:
            return
        historico.usuario = conta
        campos = ['usuario']
        if historico.equipe_id is None and equipe_id:
            historico.equipe_id = equipe_id
            campos.append('equipe')
        historico.save(update_fields=campos)

    def extrair_matricula(self, *textos):
        for texto in textos:
            encontrado = self.padrao_matricula.search((texto or '').strip())
            if encontrado:
                return encontrado.group(1).strip()
        return None

    def por_matricula(self, historico):
        matricula = self.extrair_matricula(
            historico.usuario_responsavel, historico.descricao_acao, historico.observacoes
        )
        if not matricula:
            return None
        return Usuario.objects.filter(funcionario__matricula=matricula).order_by('id').first()

    def por_nome(self, historico):
        nome = (historico.usuario_responsavel or '').strip()
        if not nome or normalizar(nome) == self.sistema:
            return None
        funcionarios = list(Funcionario.objects.filter(nome__iexact=nome).values_list('pk', flat=True)[:2])
        if len(funcionarios) != 1:
            return None
        return Usuario.objects.filter(funcionario_id=funcionarios[0]).first()

    def por_cadeia(self, historico):
        """(usuario, equipe_id) do último histórico com ator do mesmo remanejamento/solicitação."""
        com_ator = HistoricoRemanejamento.objects.filter(usuario__isnull=False).exclude(pk=historico.pk)
        filtros = []
        if historico.remanejamento_id:
            filtros.append({'remanejamento_id': historico.remanejamento_id})
        if historico.solicitacao_id:
            filtros.append({'solicitacao_id': historico.solicitacao_id})
        for filtro in filtros:
            ultimo = (
                com_ator.filter(**filtro)
                .select_related('usuario')
                .order_by('-data_acao', '-id')
                .first()
            )
            if ultimo:
                return ultimo.usuario, ultimo.equipe_id or ultimo.usuario.equipe_id
        return None, None
