"""Fixtures compartilhadas: contrato, função, funcionário e remanejamento aberto."""

from datetime import timedelta

import pytest
from django.utils import timezone

from remanejamentos.models import (
    Contrato,
    Equipe,
    Funcao,
    Funcionario,
    MatrizTreinamento,
    RemanejamentoFuncionario,
    SolicitacaoRemanejamento,
    TarefaPadrao,
    TarefaRemanejamento,
    Treinamento,
    Usuario,
)


@pytest.fixture
def equipes(db):
    return {
        'RH': Equipe.objects.create(nome='Recursos Humanos'),
        'MEDICINA': Equipe.objects.create(nome='Medicina do Trabalho'),
        'TREINAMENTO': Equipe.objects.create(nome='Treinamento'),
    }


@pytest.fixture
def contrato(db):
    return Contrato.objects.create(numero='C-100', nome='Plataforma P-70')


@pytest.fixture
def funcao(db):
    return Funcao.objects.create(funcao='Operador')


@pytest.fixture
def funcionario(db):
    return Funcionario.objects.create(matricula='12345', nome='Maria Souza', funcao='Operador')


@pytest.fixture
def admin(db):
    return Usuario.objects.create_superuser(matricula='ADMIN001', password='x')


@pytest.fixture
def solicitacao(db, contrato):
    return SolicitacaoRemanejamento.objects.create(
        contrato_destino=contrato, prioridade='alta', status='APROVADO'
    )


@pytest.fixture
def remanejamento(db, solicitacao, funcionario):
    return RemanejamentoFuncionario.objects.create(
        solicitacao=solicitacao,
        funcionario=funcionario,
        status_tarefas=RemanejamentoFuncionario.ATENDER_TAREFAS,
        status_prestserv='CRIADO',
    )


@pytest.fixture
def safety101(db, contrato, funcao):
    treinamento = Treinamento.objects.create(treinamento='Safety101', carga_horaria=8)
    MatrizTreinamento.objects.create(
        contrato=contrato, funcao=funcao, treinamento=treinamento,
        tipo_obrigatoriedade=MatrizTreinamento.OBRIGATORIO,
    )
    return treinamento


@pytest.fixture
def tarefas_padrao(db):
    return [
        TarefaPadrao.objects.create(setor='RH', tipo='Enviar CTPS'),
        TarefaPadrao.objects.create(setor='MEDICINA', tipo='ASO admissional'),
    ]


@pytest.fixture
def criar_tarefa(db):
    """Cria tarefas com criado_em controlado (base + minutos)."""
    base = timezone.now() - timedelta(days=1)

    def _criar(remanejamento, tipo, responsavel='RH', minutos=0, **extra):
        extra.setdefault('criado_em', base + timedelta(minutes=minutos))
        return TarefaRemanejamento.objects.create(
            remanejamento=remanejamento, tipo=tipo, responsavel=responsavel, **extra
        )

    return _criar
