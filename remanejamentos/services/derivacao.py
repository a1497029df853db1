"""
============================================================
🧩 Derivação de tarefas do remanejamento
============================================================
Calcula as tarefas exigidas (matriz de treinamento + tarefas padrão),
cria as que faltam e, na mesma transação, deduplica e recalcula o status.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Dict, List, Optional

from django.db import IntegrityError, transaction
from django.utils import timezone

from remanejamentos.conf import get_config
from remanejamentos.exceptions import PolicyLookupFailure, RemanejamentoFechado
from remanejamentos.models import (
    SETOR_TREINAMENTO,
    SETORES_VALIDOS,
    HistoricoRemanejamento,
    RemanejamentoFuncionario,
    TarefaRemanejamento,
)

from . import auditoria
from .classificador import LocalizadorEquipe
from .deduplicacao import Deduplicador
from .normalizacao import chave_tarefa, chave_tipo, chave_treinamento, mapear_prioridade, normalizar
from .politicas import ConsultaPoliticas

logger = logging.getLogger(__name__)


@dataclass
class ResultadoRemanejamento:
    remanejamento_id: int
    criadas: int = 0
    vinculadas: int = 0
    canceladas: int = 0
    setores: List[str] = field(default_factory=list)
    status_tarefas: str = ''


@dataclass
class ResultadoDerivacao:
    criadas: int = 0
    setores_tocados: List[str] = field(default_factory=list)
    detalhes: List[ResultadoRemanejamento] = field(default_factory=list)
    falhas: Dict[int, str] = field(default_factory=dict)

    def adicionar(self, resultado: ResultadoRemanejamento):
        self.detalhes.append(resultado)
        self.criadas += resultado.criadas
        for setor in resultado.setores:
            if setor not in self.setores_tocados:
                self.setores_tocados.append(setor)


def normalizar_setores(setores=None) -> List[str]:
    """Filtra setores válidos, preservando a ordem; vazio = todos."""
    if not setores:
        return list(SETORES_VALIDOS)
    if isinstance(setores, str):
        setores = setores.split(',')
    resultado = []
    for setor in setores:
        setor = normalizar(setor)
        if setor in SETORES_VALIDOS and setor not in resultado:
            resultado.append(setor)
    return resultado


class DerivadorTarefas:
    """Planeja e cria as tarefas faltantes de um remanejamento."""

    def __init__(self, politicas=None, localizador=None, usuario=None):
        self.politicas = politicas or ConsultaPoliticas()
        self.localizador = localizador or LocalizadorEquipe()
        self.usuario = usuario
        self.prazo = timedelta(hours=get_config()['PRAZO_TAREFA_HORAS'])

    def planejar(self, remanejamento, setores):
        """
        Tarefas a criar e tarefas legadas de treinamento a vincular.

        Returns:
            (novas, vinculos): lista de TarefaRemanejamento não salvas e
            lista de (tarefa existente, treinamento)
        """
        existentes = list(remanejamento.tarefas.all())
        chaves = {chave_tarefa(t) for t in existentes}
        novas, vinculos = [], []
        base = {
            'remanejamento': remanejamento,
            'prioridade': mapear_prioridade(remanejamento.solicitacao.prioridade),
            'data_limite': timezone.now() + self.prazo,
            'status': TarefaRemanejamento.PENDENTE,
        }

        for setor in setores:
            if setor == SETOR_TREINAMENTO:
                self._planejar_treinamentos(remanejamento, existentes, chaves, base, novas, vinculos)
            else:
                self._planejar_padrao(setor, chaves, base, novas)
        return novas, vinculos

    def _planejar_treinamentos(self, remanejamento, existentes, chaves, base, novas, vinculos):
        contrato_id = remanejamento.solicitacao.contrato_destino_id
        funcao = remanejamento.funcionario.funcao
        if not contrato_id or not funcao:
            logger.info('Remanejamento %s sem contrato de destino ou função: treinamentos ignorados',
                        remanejamento.pk)
            return
        try:
            matriz = self.politicas.treinamentos_obrigatorios(contrato_id, funcao)
        except PolicyLookupFailure:
            logger.warning('Matriz indisponível para o remanejamento %s', remanejamento.pk, exc_info=True)
            return

        legadas = {}
        for tarefa in existentes:
            if normalizar(tarefa.responsavel) == SETOR_TREINAMENTO and not tarefa.treinamento_id:
                legadas.setdefault(normalizar(tarefa.tipo), []).append(tarefa)

        equipe_id = self.localizador.equipe_por_setor(SETOR_TREINAMENTO)
        for item in matriz:
            treinamento = item.treinamento
            chave = chave_treinamento(treinamento.pk)
            if chave in chaves:
                continue
            chaves.add(chave)

            mesmo_nome = legadas.pop(normalizar(treinamento.treinamento), [])
            if mesmo_nome:
                vinculos.extend((tarefa, treinamento) for tarefa in mesmo_nome)
                continue

            novas.append(TarefaRemanejamento(
                tipo=treinamento.treinamento,
                descricao=self._descricao_treinamento(treinamento, item.tipo_obrigatoriedade),
                responsavel=SETOR_TREINAMENTO,
                treinamento=treinamento,
                equipe_id=equipe_id,
                **base,
            ))

    def _planejar_padrao(self, setor, chaves, base, novas):
        try:
            modelos = self.politicas.tarefas_padrao(setor)
        except PolicyLookupFailure:
            logger.warning('Tarefas padrão indisponíveis para o setor %s', setor, exc_info=True)
            return

        equipe_id = self.localizador.equipe_por_setor(setor)
        for modelo in modelos:
            chave = chave_tipo(setor, modelo.tipo)
            if chave in chaves:
                continue
            chaves.add(chave)
            novas.append(TarefaRemanejamento(
                tipo=modelo.tipo,
                descricao=modelo.descricao,
                responsavel=setor,
                tarefa_padrao=modelo,
                equipe_id=equipe_id,
                **base,
            ))

    @staticmethod
    def _descricao_treinamento(treinamento, obrigatoriedade):
        partes = [f'Treinamento {obrigatoriedade}: {treinamento.treinamento}']
        if treinamento.carga_horaria:
            partes.append(f'Carga horária: {treinamento.carga_horaria}h')
        if treinamento.validade_valor and treinamento.validade_unidade:
            partes.append(f'Validade: {treinamento.validade_valor} {treinamento.validade_unidade}')
        return ' - '.join(partes)

    def aplicar(self, remanejamento, setores) -> ResultadoRemanejamento:
        """Cria as tarefas planejadas. Deve rodar dentro de transaction.atomic()."""
        resultado = ResultadoRemanejamento(remanejamento_id=remanejamento.pk)
        novas, vinculos = self.planejar(remanejamento, setores)

        for tarefa, treinamento in vinculos:
            tarefa.treinamento = treinamento
            tarefa.save(update_fields=['treinamento', 'atualizado_em'])
            resultado.vinculadas += 1
            auditoria.registrar(
                HistoricoRemanejamento.ATUALIZACAO_CAMPO,
                'TAREFA',
                f'Tarefa "{tarefa.tipo}" vinculada ao treinamento {treinamento.pk}',
                remanejamento=remanejamento,
                tarefa=tarefa,
                campo='treinamento',
                valor_novo=str(treinamento.pk),
                usuario=self.usuario,
            )

        if not novas:
            return resultado

        try:
            with transaction.atomic():
                TarefaRemanejamento.objects.bulk_create(novas)
        except IntegrityError:
            # Duplicatas são evitadas pelo select_for_update do remanejamento; aqui
            # chegam apenas violações de integridade (ex.: treinamento ou tarefa
            # padrão removidos após o planejamento). Lote descartado como já existente
            logger.warning('Conflito ao criar tarefas do remanejamento %s; ignoradas', remanejamento.pk)
            return resultado

        resultado.criadas = len(novas)
        resultado.setores = sorted({t.responsavel for t in novas})
        funcionario = remanejamento.funcionario
        auditoria.registrar(
            HistoricoRemanejamento.CRIACAO,
            'TAREFA',
            f'{len(novas)} tarefa(s) criada(s) para {funcionario.nome} ({funcionario.matricula}) '
            f'- Setores: {", ".join(resultado.setores)}',
            remanejamento=remanejamento,
            entidade_id=remanejamento.pk,
            usuario=self.usuario,
        )
        return resultado


def derivar_remanejamento(remanejamento_id, setores=None, usuario=None, derivador=None) -> ResultadoRemanejamento:
    """
    Deriva, deduplica e recalcula o status de um remanejamento em uma transação.

    Raises:
        RemanejamentoFechado: remanejamento não aceita novas tarefas
        RemanejamentoFuncionario.DoesNotExist: id inexistente
    """
    setores = normalizar_setores(setores)
    derivador = derivador or DerivadorTarefas(usuario=usuario)
    with transaction.atomic():
        remanejamento = RemanejamentoFuncionario.objects.select_for_update().get(pk=remanejamento_id)
        if not remanejamento.aberto_para_tarefas:
            raise RemanejamentoFechado(remanejamento)

        resultado = derivador.aplicar(remanejamento, setores)
        resultado.canceladas = Deduplicador(usuario).deduplicar_remanejamento(remanejamento)
        resultado.status_tarefas = remanejamento.status_tarefas
    return resultado


def derivar_e_criar_tarefas(remanejamento_id: Optional[int] = None, setores=None, usuario=None) -> ResultadoDerivacao:
    """
    Cria as tarefas faltantes de um remanejamento ou de todos os abertos.

    Com ``remanejamento_id`` os erros são propagados; no modo em lote cada
    remanejamento roda na própria transação e as falhas ficam em ``falhas``.
    """
    setores = normalizar_setores(setores)
    resultado = ResultadoDerivacao()
    if not setores:
        logger.warning('Nenhum setor válido informado; nada a derivar')
        return resultado

    derivador = DerivadorTarefas(usuario=usuario)
    if remanejamento_id is not None:
        resultado.adicionar(derivar_remanejamento(remanejamento_id, setores, usuario, derivador))
        return resultado

    ids = list(RemanejamentoFuncionario.objects.abertos().order_by('pk').values_list('pk', flat=True))
    for pk in ids:
        try:
            resultado.adicionar(derivar_remanejamento(pk, setores, usuario, derivador))
        except RemanejamentoFechado as e:
            logger.info('%s; ignorado', e)
        except Exception as e:
            logger.exception('Erro ao derivar tarefas do remanejamento %s', pk)
            resultado.falhas[pk] = str(e)

    logger.info('Derivação concluída: %d tarefa(s) criada(s) em %d remanejamento(s)',
                resultado.criadas, len(resultado.detalhes))
    return resultado
