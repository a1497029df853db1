"""
============================================================
📚 Consulta de políticas (somente leitura)
============================================================
Tarefas padrão por setor e matriz de treinamento por contrato × função.
"""

import logging
from typing import List

from django.db import DatabaseError, transaction

from remanejamentos.exceptions import PolicyLookupFailure
from remanejamentos.models import Funcao, MatrizTreinamento, TarefaPadrao

from .normalizacao import normalizar

logger = logging.getLogger(__name__)


class ConsultaPoliticas:

    def buscar_funcao(self, nome_funcao):
        """Função pelo nome, ignorando caixa e acentos."""
        nome = (nome_funcao or '').strip()
        if not nome:
            return None
        funcao = Funcao.objects.filter(funcao__iexact=nome).first()
        if funcao:
            return funcao
        alvo = normalizar(nome)
        for candidata in Funcao.objects.order_by('id'):
            if normalizar(candidata.funcao) == alvo:
                return candidata
        return None

    def treinamentos_obrigatorios(self, contrato_id, nome_funcao) -> List[MatrizTreinamento]:
        """
        Linhas ativas e obrigatórias (AP) da matriz para contrato × função.

        Raises:
            PolicyLookupFailure: erro de banco na consulta
        """
        try:
            with transaction.atomic():
                funcao = self.buscar_funcao(nome_funcao)
                if funcao is None:
                    logger.info('Função "%s" sem matriz de treinamento', nome_funcao)
                    return []
                return list(
                    MatrizTreinamento.objects.filter(
                        contrato_id=contrato_id,
                        funcao=funcao,
                        tipo_obrigatoriedade=MatrizTreinamento.OBRIGATORIO,
                        ativo=True,
                    ).select_related('treinamento').order_by('treinamento__treinamento', 'id')
                )
        except DatabaseError as e:
            raise PolicyLookupFailure(
                f'Erro ao consultar matriz (contrato={contrato_id}, função={nome_funcao}): {e}'
            ) from e

    def tarefas_padrao(self, setor) -> List[TarefaPadrao]:
        """
        Tarefas padrão ativas do setor.

        Raises:
            PolicyLookupFailure: erro de banco na consulta
        """
        try:
            with transaction.atomic():
                return list(TarefaPadrao.objects.filter(setor=setor, ativo=True).order_by('tipo', 'id'))
        except DatabaseError as e:
            raise PolicyLookupFailure(f'Erro ao consultar tarefas padrão do setor {setor}: {e}') from e
