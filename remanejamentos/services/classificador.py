"""
============================================================
🗂️ Classificação por palavras-chave
============================================================
Regras ordenadas (palavras -> categoria) usadas para adivinhar o setor
de uma tarefa, a decisão registrada em um histórico e a equipe de um setor.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from remanejamentos.conf import get_config
from remanejamentos.models import Equipe

from .normalizacao import normalizar

logger = logging.getLogger(__name__)


class ClassificadorPalavrasChave:
    """
    Classificador de textos por regras ordenadas.

    Args:
        regras: sequência de (palavras, categoria); a primeira regra com
            alguma palavra contida no texto define a categoria.
    """

    def __init__(self, regras: Sequence[Tuple[Iterable[str], str]]):
        self.regras: List[Tuple[Tuple[str, ...], str]] = [
            (tuple(normalizar(p) for p in palavras), categoria)
            for palavras, categoria in regras
        ]

    @classmethod
    def de_setores(cls):
        return cls(get_config()['REGRAS_SETOR'])

    @classmethod
    def de_decisoes(cls):
        return cls(get_config()['REGRAS_DECISAO'])

    @property
    def palavras(self) -> List[str]:
        return [p for palavras, _ in self.regras for p in palavras]

    def classificar_texto(self, texto) -> Optional[str]:
        normalizado = normalizar(texto)
        if not normalizado:
            return None
        for palavras, categoria in self.regras:
            if any(p in normalizado for p in palavras):
                return categoria
        return None

    def classificar(self, *textos) -> Optional[str]:
        """Categoria do primeiro texto que casar com alguma regra."""
        for texto in textos:
            categoria = self.classificar_texto(texto)
            if categoria:
                return categoria
        return None


class LocalizadorEquipe:
    """Resolve a equipe responsável por um setor pelo nome da equipe."""

    def __init__(self, equipes=None, regras: Optional[Dict[str, Iterable[str]]] = None):
        if equipes is None:
            equipes = Equipe.objects.filter(ativo=True).order_by('nome', 'id')
        if regras is None:
            regras = get_config()['REGRAS_EQUIPE']
        self.equipes = [(equipe.pk, normalizar(equipe.nome)) for equipe in equipes]
        self.regras = {
            normalizar(setor): tuple(normalizar(p) for p in palavras)
            for setor, palavras in regras.items()
        }
        self._cache: Dict[str, Optional[int]] = {}

    def equipe_por_setor(self, setor) -> Optional[int]:
        """Retorna o id da equipe do setor, ou None."""
        chave = normalizar(setor)
        if not chave:
            return None
        if chave not in self._cache:
            self._cache[chave] = self._buscar(chave)
        return self._cache[chave]

    def _buscar(self, setor: str) -> Optional[int]:
        palavras = self.regras.get(setor)
        for equipe_id, nome in self.equipes:
            if palavras:
                if any(p in nome for p in palavras):
                    return equipe_id
            elif nome == setor:
                return equipe_id
        logger.debug('Nenhuma equipe encontrada para o setor %s', setor)
        return None
