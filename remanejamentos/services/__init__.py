"""
============================================================
🔄 Remanejamentos - Serviços
============================================================
"""

# Derivação
from .derivacao import derivar_e_criar_tarefas, derivar_remanejamento, DerivadorTarefas

# Deduplicação
from .deduplicacao import deduplicar, Deduplicador

# Status
from .status import recalcular_status

# Tarefas manuais
from .tarefas import criar_tarefa_manual, concluir_tarefa, cancelar_tarefa, adicionar_observacao

# Chave de deduplicação
from .normalizacao import chave_tarefa, normalizar

__all__ = [
    'derivar_e_criar_tarefas', 'derivar_remanejamento', 'DerivadorTarefas',
    'deduplicar', 'Deduplicador',
    'recalcular_status',
    'criar_tarefa_manual', 'concluir_tarefa', 'cancelar_tarefa', 'adicionar_observacao',
    'chave_tarefa', 'normalizar',
]
