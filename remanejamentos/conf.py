"""
Configurações da orquestração de tarefas.

Valores padrão sobrescritos pelo dict ``REMANEJAMENTOS`` do settings.
"""

from django.conf import settings

PADROES = {
    'ADMIN_MATRICULA': 'ADMIN001',
    'USUARIO_SISTEMA': 'Sistema',
    'PRAZO_TAREFA_HORAS': 48,
    'BACKFILL_BATCH_SIZE': 500,
    # Regras ordenadas: a primeira que casar define o setor ("ASO de integração" é MEDICINA)
    'REGRAS_SETOR': (
        (('MEDIC', 'SAUDE', 'ASO', 'EXAME'), 'MEDICINA'),
        (('TREIN', 'REGRAS', 'INTEGRACAO'), 'TREINAMENTO'),
        (('RECURSOS HUMANOS', 'CTPS', 'ADMISS', 'RH'), 'RH'),
    ),
    # Decisão registrada no histórico; reprovação antes de aprovação
    # porque INVALIDADO contém VALIDADO e REPROVADO contém APROVADO
    'REGRAS_DECISAO': (
        (('REPROV', 'REJEIT', 'INVALID'), 'REPROVADO'),
        (('APROV', 'VALIDAD', 'CONCLU'), 'CONCLUIDO'),
    ),
    # Setor -> palavras buscadas no nome da equipe
    'REGRAS_EQUIPE': {
        'RH': ('RH', 'RECURSOS', 'HUMANOS'),
        'MEDICINA': ('MEDIC',),
        'TREINAMENTO': ('TREIN',),
    },
    'PADRAO_MATRICULA': r'\(([^)]+)\)\s*$',
}


def get_config():
    config = dict(PADROES)
    config.update(getattr(settings, 'REMANEJAMENTOS', None) or {})
    return config


def usuario_sistema():
    return get_config()['USUARIO_SISTEMA']
