"""
============================================================
🧰 Backfill - Estrutura comum dos jobs
============================================================
Paginação por chave primária (lotes limitados, uma transação por lote,
savepoint por registro). Um job interrompido pode ser reexecutado: os
registros já corrigidos deixam de casar com o queryset ou são ignorados.
"""

import logging
from dataclasses import asdict, dataclass

from django.db import transaction
from django.db.models import Q

from remanejamentos.conf import get_config
from remanejamentos.exceptions import BackfillMatchNotFound
from remanejamentos.models import Usuario

logger = logging.getLogger(__name__)


@dataclass
class ResumoBackfill:
    job: str
    dry_run: bool = False
    processados: int = 0
    criados: int = 0
    atualizados: int = 0
    ignorados: int = 0
    erros: int = 0

    def as_dict(self):
        return asdict(self)


def conta_padrao(matricula=None):
    """Conta administrativa usada quando não há responsável identificável."""
    matricula = matricula or get_config()['ADMIN_MATRICULA']
    if not matricula:
        return None
    return (
        Usuario.objects.filter(Q(funcionario__matricula=matricula) | Q(matricula=matricula))
        .order_by('id')
        .first()
    )


class BackfillJob:
    """
    Job idempotente de reconstrução de dados.

    Subclasses definem ``nome``, ``queryset()`` e ``processar()``; este
    último atualiza os contadores do resumo e levanta
    BackfillMatchNotFound quando o registro não tem correspondência.
    """

    nome = ''
    descricao = ''

    def __init__(self, dry_run=False, batch_size=None, limit=None, usuario_padrao=None, usuario=None):
        self.dry_run = dry_run
        self.batch_size = batch_size or get_config()['BACKFILL_BATCH_SIZE']
        self.limit = limit
        self.usuario_padrao = usuario_padrao
        self.usuario = usuario

    def queryset(self):
        raise NotImplementedError

    def preparar(self):
        """Carrega caches antes do primeiro lote."""

    def processar(self, registro, resumo):
        raise NotImplementedError

    def executar(self) -> ResumoBackfill:
        resumo = ResumoBackfill(job=self.nome, dry_run=self.dry_run)
        self.preparar()
        ultimo_pk = None
        restante = self.limit

        while restante is None or restante > 0:
            tamanho = self.batch_size if restante is None else min(self.batch_size, restante)
            with transaction.atomic():
                consulta = self.queryset().order_by('pk')
                if ultimo_pk is not None:
                    consulta = consulta.filter(pk__gt=ultimo_pk)
                lote = list(consulta[:tamanho])
                for registro in lote:
                    self._processar_registro(registro, resumo)

            if not lote:
                break
            ultimo_pk = lote[-1].pk
            if restante is not None:
                restante -= len(lote)
            logger.info('[%s] lote até pk=%s: %s', self.nome, ultimo_pk, resumo)
            if len(lote) < tamanho:
                break

        logger.info('[%s] concluído%s: %s', self.nome, ' (dry-run)' if self.dry_run else '', resumo)
        return resumo

    def _processar_registro(self, registro, resumo):
        resumo.processados += 1
        try:
            with transaction.atomic():
                self.processar(registro, resumo)
        except BackfillMatchNotFound as e:
            resumo.ignorados += 1
            logger.debug('[%s] registro %s ignorado: %s', self.nome, registro.pk, e)
        except Exception:
            resumo.erros += 1
            logger.exception('[%s] erro ao processar registro %s', self.nome, registro.pk)
