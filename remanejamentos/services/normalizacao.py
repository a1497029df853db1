"""
============================================================
🔤 Normalização de textos e chave de deduplicação
============================================================
"""

import re
import unicodedata
from datetime import timezone as dt_timezone
from typing import NamedTuple, Optional

from django.utils import timezone

from remanejamentos.models import SETOR_TREINAMENTO

_ESPACOS = re.compile(r'\s+')

PRIORIDADES = {
    'baixa': 'BAIXA',
    'low': 'BAIXA',
    'media': 'MEDIA',
    'normal': 'MEDIA',
    'alta': 'ALTA',
    'high': 'ALTA',
    'urgente': 'URGENTE',
    'urgent': 'URGENTE',
}


def normalizar(valor) -> str:
    """Remove acentos, colapsa espaços e converte para maiúsculas."""
    if valor is None:
        return ''
    texto = unicodedata.normalize('NFD', str(valor))
    texto = ''.join(c for c in texto if unicodedata.category(c) != 'Mn')
    return _ESPACOS.sub(' ', texto).strip().upper()


def contem_normalizado(a, b) -> bool:
    """Um texto contém o outro (em qualquer direção), após normalizar."""
    na, nb = normalizar(a), normalizar(b)
    if not na or not nb:
        return False
    return na in nb or nb in na


class ChaveTarefa(NamedTuple):
    setor: str
    identificador: str

    def __str__(self):
        return f'{self.setor}|{self.identificador}'


def chave_treinamento(treinamento_id) -> ChaveTarefa:
    return ChaveTarefa(SETOR_TREINAMENTO, f'#{treinamento_id}')


def chave_tipo(setor, tipo) -> ChaveTarefa:
    return ChaveTarefa(normalizar(setor), normalizar(tipo))


def chave_tarefa(tarefa) -> ChaveTarefa:
    """
    Chave de deduplicação de uma tarefa.

    Tarefas de TREINAMENTO vinculadas a um treinamento usam o id do
    treinamento; as demais usam (setor, tipo) normalizados.
    """
    setor = normalizar(tarefa.responsavel)
    if setor == SETOR_TREINAMENTO and tarefa.treinamento_id:
        return chave_treinamento(tarefa.treinamento_id)
    return chave_tipo(setor, tarefa.tipo)


def mapear_prioridade(valor: Optional[str]) -> str:
    """Prioridade da solicitação -> prioridade da tarefa (padrão MEDIA)."""
    return PRIORIDADES.get((valor or '').strip().lower(), 'MEDIA')


def normalizar_instante(valor):
    """Instante em UTC, para comparar eventos gravados em fusos diferentes."""
    if valor is None:
        return None
    if timezone.is_naive(valor):
        valor = timezone.make_aware(valor, dt_timezone.utc)
    return valor.astimezone(dt_timezone.utc)
