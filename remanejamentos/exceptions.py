"""
============================================================
⚠️ Remanejamentos - Exceções
============================================================
"""


class RemanejamentoError(Exception):
    """Erro base da orquestração de tarefas."""


class PolicyLookupFailure(RemanejamentoError):
    """Falha ao consultar tarefas padrão ou matriz de treinamento."""


class BackfillMatchNotFound(RemanejamentoError):
    """Registro do backfill sem correspondência; contado como ignorado."""


class RemanejamentoFechado(RemanejamentoError):
    """Mutação solicitada em remanejamento que não aceita mais tarefas."""

    def __init__(self, remanejamento):
        self.remanejamento = remanejamento
        super().__init__(
            f'Remanejamento {remanejamento.pk} fechado '
            f'(tarefas: {remanejamento.status_tarefas}, prestserv: {remanejamento.status_prestserv})'
        )


class TransicaoInvalida(RemanejamentoError):
    """Tarefa em status terminal não pode mudar de status."""


class BackfillDesconhecido(RemanejamentoError):
    """Nome de job de backfill não registrado."""

    def __init__(self, nome, disponiveis=()):
        self.nome = nome
        super().__init__(
            f'Backfill desconhecido: {nome}. Disponíveis: {", ".join(sorted(disponiveis))}'
        )
