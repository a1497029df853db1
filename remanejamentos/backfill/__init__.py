"""
============================================================
🧰 Remanejamentos - Jobs de Backfill
============================================================
"""

from remanejamentos.exceptions import BackfillDesconhecido

from .base import BackfillJob, ResumoBackfill, conta_padrao
from .deduplicacao import DeduplicacaoBackfill
from .equipes import EquipesHistoricoBackfill, EquipesTarefasBackfill
from .eventos import EventosStatusBackfill, ReprovacoesBackfill
from .usuarios import UsuariosHistoricoBackfill

JOBS = {
    job.nome: job
    for job in (
        EventosStatusBackfill,
        ReprovacoesBackfill,
        EquipesTarefasBackfill,
        EquipesHistoricoBackfill,
        UsuariosHistoricoBackfill,
        DeduplicacaoBackfill,
    )
}


def executar_backfill(nome, dry_run=False, batch_size=None, limit=None, usuario_padrao=None):
    """
    Executa um job de backfill pelo nome.

    Args:
        nome: chave de JOBS
        dry_run: apenas contabiliza, sem gravar
        batch_size: registros por lote/transação
        limit: máximo de registros processados
        usuario_padrao: conta usada quando não há responsável; padrão
            é a conta de ADMIN_MATRICULA

    Returns:
        ResumoBackfill
    """
    try:
        job_cls = JOBS[nome]
    except KeyError:
        raise BackfillDesconhecido(nome, JOBS) from None

    if usuario_padrao is None:
        usuario_padrao = conta_padrao()
    job = job_cls(dry_run=dry_run, batch_size=batch_size, limit=limit, usuario_padrao=usuario_padrao)
    return job.executar()


__all__ = ['JOBS', 'BackfillJob', 'ResumoBackfill', 'conta_padrao', 'executar_backfill']
