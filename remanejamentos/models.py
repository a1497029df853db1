"""
============================================================
📋 Remanejamentos - Modelos do Banco de Dados
Orquestração de tarefas de remanejamento de funcionários
============================================================
"""

from django.db import models
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.utils import timezone


# ============================================================
# 🏷️ SETORES RESPONSÁVEIS
# ============================================================
SETOR_RH = 'RH'
SETOR_MEDICINA = 'MEDICINA'
SETOR_TREINAMENTO = 'TREINAMENTO'

SETORES_VALIDOS = (SETOR_RH, SETOR_MEDICINA, SETOR_TREINAMENTO)

SETOR_CHOICES = [
    (SETOR_RH, 'Recursos Humanos'),
    (SETOR_MEDICINA, 'Medicina'),
    (SETOR_TREINAMENTO, 'Treinamento'),
]


# ============================================================
# 👤 GERENCIADOR DE USUÁRIO CUSTOMIZADO
# ============================================================
class UsuarioManager(BaseUserManager):
    """Gerenciador customizado para o modelo Usuario."""

    use_in_migrations = True

    def create_user(self, matricula, password=None, **extra_fields):
        """Cria e salva um usuário comum."""
        if not matricula:
            raise ValueError('A matrícula é obrigatória')

        user = self.model(matricula=matricula, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, matricula, password=None, **extra_fields):
        """Cria e salva um superusuário."""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', 'admin')

        return self.create_user(matricula, password, **extra_fields)


# ============================================================
# 👥 MODELO: EQUIPE
# ============================================================
class Equipe(models.Model):
    """Equipe/setor que atende tarefas (ex.: RH, Medicina, Treinamento)."""

    nome = models.CharField('Nome', max_length=100, unique=True)
    ativo = models.BooleanField('Ativo', default=True)
    criado_em = models.DateTimeField('Criado em', auto_now_add=True)

    class Meta:
        verbose_name = 'Equipe'
        verbose_name_plural = 'Equipes'
        ordering = ['nome']

    def __str__(self):
        return self.nome


# ============================================================
# 🧑‍🔧 MODELO: FUNCIONÁRIO
# ============================================================
class Funcionario(models.Model):
    """Funcionário sincronizado do cadastro de RH."""

    matricula = models.CharField('Matrícula', max_length=20, unique=True)
    nome = models.CharField('Nome Completo', max_length=150)
    funcao = models.CharField('Função', max_length=100, blank=True)
    ativo = models.BooleanField('Ativo', default=True)
    criado_em = models.DateTimeField('Criado em', auto_now_add=True)
    atualizado_em = models.DateTimeField('Atualizado em', auto_now=True)

    class Meta:
        verbose_name = 'Funcionário'
        verbose_name_plural = 'Funcionários'
        ordering = ['nome']

    def __str__(self):
        return f"{self.nome} ({self.matricula})"


# ============================================================
# 👤 MODELO: USUÁRIO CUSTOMIZADO
# ============================================================
class Usuario(AbstractBaseUser, PermissionsMixin):
    """Usuário do sistema; login pela matrícula."""

    ROLE_CHOICES = [
        ('admin', 'Administrador'),
        ('planejamento', 'Planejamento'),
        ('logistica', 'Logística'),
        ('rh', 'RH'),
        ('medicina', 'Medicina'),
        ('treinamento', 'Treinamento'),
    ]

    matricula = models.CharField('Matrícula', max_length=20, unique=True)
    role = models.CharField('Perfil', max_length=20, choices=ROLE_CHOICES, default='planejamento')
    funcionario = models.OneToOneField(
        Funcionario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='usuario',
        verbose_name='Funcionário Vinculado'
    )
    equipe = models.ForeignKey(
        Equipe,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='usuarios',
        verbose_name='Equipe'
    )
    is_active = models.BooleanField('Ativo', default=True)
    is_staff = models.BooleanField('Acesso ao Admin', default=False)
    criado_em = models.DateTimeField('Criado em', auto_now_add=True)

    objects = UsuarioManager()

    USERNAME_FIELD = 'matricula'
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'

    def __str__(self):
        return self.nome

    @property
    def nome(self):
        """Nome exibido no histórico: nome do funcionário ou a matrícula."""
        if self.funcionario:
            return self.funcionario.nome
        return self.matricula

    @property
    def is_admin(self):
        """Administrador - acesso total"""
        return self.role == 'admin'


# ============================================================
# 📑 MODELO: CONTRATO
# ============================================================
class Contrato(models.Model):
    """Contrato de destino/origem de um remanejamento."""

    numero = models.CharField('Número', max_length=50, unique=True)
    nome = models.CharField('Nome', max_length=150)
    cliente = models.CharField('Cliente', max_length=150, blank=True)
    ativo = models.BooleanField('Ativo', default=True)
    criado_em = models.DateTimeField('Criado em', auto_now_add=True)

    class Meta:
        verbose_name = 'Contrato'
        verbose_name_plural = 'Contratos'
        ordering = ['numero']

    def __str__(self):
        return f"{self.numero} - {self.nome}"


# ============================================================
# 🎯 MODELO: FUNÇÃO
# ============================================================
class Funcao(models.Model):
    """Função (cargo) usada na matriz de treinamento."""

    funcao = models.CharField('Função', max_length=100, unique=True)
    ativo = models.BooleanField('Ativo', default=True)

    class Meta:
        verbose_name = 'Função'
        verbose_name_plural = 'Funções'
        ordering = ['funcao']

    def __str__(self):
        return self.funcao


# ============================================================
# 🎓 MODELO: TREINAMENTO
# ============================================================
class Treinamento(models.Model):
    """Treinamento exigido pela matriz."""

    VALIDADE_UNIDADE_CHOICES = [
        ('dias', 'Dias'),
        ('meses', 'Meses'),
        ('anos', 'Anos'),
    ]

    treinamento = models.CharField('Treinamento', max_length=200, unique=True)
    carga_horaria = models.IntegerField('Carga Horária', null=True, blank=True)
    validade_valor = models.IntegerField('Validade', null=True, blank=True)
    validade_unidade = models.CharField(
        'Unidade da Validade',
        max_length=10,
        choices=VALIDADE_UNIDADE_CHOICES,
        blank=True
    )
    ativo = models.BooleanField('Ativo', default=True)

    class Meta:
        verbose_name = 'Treinamento'
        verbose_name_plural = 'Treinamentos'
        ordering = ['treinamento']

    def __str__(self):
        return self.treinamento


# ============================================================
# 🧮 MODELO: MATRIZ DE TREINAMENTO
# ============================================================
class MatrizTreinamento(models.Model):
    """Exigência de treinamento por contrato × função."""

    OBRIGATORIO = 'AP'

    OBRIGATORIEDADE_CHOICES = [
        (OBRIGATORIO, 'Obrigatório'),
        ('C', 'Complementar'),
        ('SD', 'Sob demanda'),
        ('N/A', 'Não aplicável'),
    ]

    contrato = models.ForeignKey(
        Contrato,
        on_delete=models.CASCADE,
        related_name='matriz_treinamento',
        verbose_name='Contrato'
    )
    funcao = models.ForeignKey(
        Funcao,
        on_delete=models.CASCADE,
        related_name='matriz_treinamento',
        verbose_name='Função'
    )
    treinamento = models.ForeignKey(
        Treinamento,
        on_delete=models.CASCADE,
        related_name='matriz',
        verbose_name='Treinamento'
    )
    tipo_obrigatoriedade = models.CharField(
        'Tipo de Obrigatoriedade',
        max_length=3,
        choices=OBRIGATORIEDADE_CHOICES,
        default=OBRIGATORIO
    )
    ativo = models.BooleanField('Ativo', default=True)

    class Meta:
        verbose_name = 'Matriz de Treinamento'
        verbose_name_plural = 'Matriz de Treinamento'
        unique_together = ['contrato', 'funcao', 'treinamento']

    def __str__(self):
        return f"{self.contrato.numero} / {self.funcao} / {self.treinamento} ({self.tipo_obrigatoriedade})"


# ============================================================
# 📌 MODELO: TAREFA PADRÃO
# ============================================================
class TarefaPadrao(models.Model):
    """Tarefa exigida de todo remanejamento para um setor."""

    setor = models.CharField('Setor', max_length=20, choices=SETOR_CHOICES)
    tipo = models.CharField('Tipo', max_length=200)
    descricao = models.TextField('Descrição', blank=True)
    ativo = models.BooleanField('Ativo', default=True)
    criado_em = models.DateTimeField('Criado em', auto_now_add=True)

    class Meta:
        verbose_name = 'Tarefa Padrão'
        verbose_name_plural = 'Tarefas Padrão'
        ordering = ['setor', 'tipo']
        unique_together = ['setor', 'tipo']

    def __str__(self):
        return f"{self.setor} - {self.tipo}"


# ============================================================
# 📝 MODELO: SOLICITAÇÃO DE REMANEJAMENTO
# ============================================================
class SolicitacaoRemanejamento(models.Model):
    """Pedido de remanejamento de um ou mais funcionários."""

    PRIORIDADE_CHOICES = [
        ('baixa', 'Baixa'),
        ('media', 'Normal'),
        ('alta', 'Alta'),
        ('urgente', 'Urgente'),
    ]

    STATUS_CHOICES = [
        ('PENDENTE', 'Pendente'),
        ('APROVADO', 'Aprovado'),
        ('REJEITADO', 'Rejeitado'),
        ('CONCLUIDO', 'Concluído'),
    ]

    contrato_origem = models.ForeignKey(
        Contrato,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='remanejamentos_origem',
        verbose_name='Contrato de Origem'
    )
    contrato_destino = models.ForeignKey(
        Contrato,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='remanejamentos_destino',
        verbose_name='Contrato de Destino'
    )
    justificativa = models.TextField('Justificativa', blank=True)
    prioridade = models.CharField('Prioridade', max_length=10, choices=PRIORIDADE_CHOICES, default='media')
    status = models.CharField('Status', max_length=20, choices=STATUS_CHOICES, default='PENDENTE')
    solicitado_por = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='solicitacoes',
        verbose_name='Solicitado por'
    )
    criado_em = models.DateTimeField('Criado em', auto_now_add=True)
    atualizado_em = models.DateTimeField('Atualizado em', auto_now=True)

    class Meta:
        verbose_name = 'Solicitação de Remanejamento'
        verbose_name_plural = 'Solicitações de Remanejamento'
        ordering = ['-criado_em']

    def __str__(self):
        return f"Solicitação #{self.pk} ({self.get_status_display()})"


# ============================================================
# 🔁 MODELO: REMANEJAMENTO DO FUNCIONÁRIO
# ============================================================
class RemanejamentoQuerySet(models.QuerySet):

    def abertos(self):
        """Remanejamentos que ainda aceitam mudanças nas tarefas."""
        return self.filter(
            status_tarefas__in=RemanejamentoFuncionario.STATUS_TAREFAS_ABERTOS
        ).exclude(
            status_prestserv__in=RemanejamentoFuncionario.STATUS_PRESTSERV_FECHADOS
        )


class RemanejamentoFuncionario(models.Model):
    """Participação de um funcionário em uma solicitação de remanejamento."""

    AGUARDANDO_APROVACAO = 'APROVAR SOLICITAÇÃO'
    ATENDER_TAREFAS = 'ATENDER TAREFAS'
    SUBMETER_RASCUNHO = 'SUBMETER RASCUNHO'

    STATUS_TAREFAS_CHOICES = [
        (AGUARDANDO_APROVACAO, 'Aguardando aprovação'),
        (ATENDER_TAREFAS, 'Atender tarefas'),
        (SUBMETER_RASCUNHO, 'Submeter rascunho'),
    ]

    STATUS_TAREFAS_ABERTOS = (ATENDER_TAREFAS, SUBMETER_RASCUNHO)

    STATUS_PRESTSERV_CHOICES = [
        ('PENDENTE', 'Pendente'),
        ('CRIADO', 'Criado'),
        ('EM VALIDAÇÃO', 'Em validação'),
        ('VALIDADO', 'Validado'),
        ('INVALIDADO', 'Invalidado'),
        ('CANCELADO', 'Cancelado'),
    ]

    STATUS_PRESTSERV_FECHADOS = ('EM VALIDAÇÃO', 'VALIDADO', 'CANCELADO')

    solicitacao = models.ForeignKey(
        SolicitacaoRemanejamento,
        on_delete=models.CASCADE,
        related_name='funcionarios',
        verbose_name='Solicitação'
    )
    funcionario = models.ForeignKey(
        Funcionario,
        on_delete=models.PROTECT,
        related_name='remanejamentos',
        verbose_name='Funcionário'
    )
    equipe = models.ForeignKey(
        Equipe,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='remanejamentos',
        verbose_name='Equipe'
    )
    status_tarefas = models.CharField(
        'Status das Tarefas',
        max_length=30,
        choices=STATUS_TAREFAS_CHOICES,
        default=AGUARDANDO_APROVACAO
    )
    status_prestserv = models.CharField(
        'Status Prestserv',
        max_length=20,
        choices=STATUS_PRESTSERV_CHOICES,
        default='PENDENTE'
    )
    criado_em = models.DateTimeField('Criado em', auto_now_add=True)
    atualizado_em = models.DateTimeField('Atualizado em', auto_now=True)

    objects = RemanejamentoQuerySet.as_manager()

    class Meta:
        verbose_name = 'Remanejamento de Funcionário'
        verbose_name_plural = 'Remanejamentos de Funcionários'
        ordering = ['-criado_em']
        unique_together = ['solicitacao', 'funcionario']  # Um funcionário por solicitação

    def __str__(self):
        return f"{self.funcionario} → solicitação #{self.solicitacao_id}"

    @property
    def aberto_para_tarefas(self):
        """Verifica se tarefas ainda podem ser criadas/canceladas."""
        return (
            self.status_tarefas in self.STATUS_TAREFAS_ABERTOS
            and self.status_prestserv not in self.STATUS_PRESTSERV_FECHADOS
        )


# ============================================================
# ✅ MODELO: TAREFA DO REMANEJAMENTO
# ============================================================
class TarefaRemanejamento(models.Model):
    """Unidade de trabalho exigida de um setor para um remanejamento."""

    PENDENTE = 'PENDENTE'
    CONCLUIDO = 'CONCLUIDO'
    CANCELADO = 'CANCELADO'

    STATUS_CHOICES = [
        (PENDENTE, 'Pendente'),
        (CONCLUIDO, 'Concluído'),
        (CANCELADO, 'Cancelado'),
    ]

    STATUS_TERMINAIS = (CONCLUIDO, CANCELADO)

    PRIORIDADE_CHOICES = [
        ('BAIXA', 'Baixa'),
        ('MEDIA', 'Média'),
        ('ALTA', 'Alta'),
        ('URGENTE', 'Urgente'),
    ]

    remanejamento = models.ForeignKey(
        RemanejamentoFuncionario,
        on_delete=models.CASCADE,
        related_name='tarefas',
        verbose_name='Remanejamento'
    )
    tipo = models.CharField('Tipo', max_length=200)
    descricao = models.TextField('Descrição', blank=True)
    responsavel = models.CharField('Setor Responsável', max_length=50)
    status = models.CharField('Status', max_length=20, choices=STATUS_CHOICES, default=PENDENTE)
    prioridade = models.CharField('Prioridade', max_length=10, choices=PRIORIDADE_CHOICES, default='MEDIA')
    data_limite = models.DateTimeField('Data Limite', null=True, blank=True)
    data_conclusao = models.DateTimeField('Data de Conclusão', null=True, blank=True)
    treinamento = models.ForeignKey(
        Treinamento,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tarefas',
        verbose_name='Treinamento'
    )
    tarefa_padrao = models.ForeignKey(
        TarefaPadrao,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tarefas',
        verbose_name='Tarefa Padrão'
    )
    equipe = models.ForeignKey(
        Equipe,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tarefas',
        verbose_name='Equipe'
    )
    criado_em = models.DateTimeField('Criado em', default=timezone.now, db_index=True)
    atualizado_em = models.DateTimeField('Atualizado em', auto_now=True)

    class Meta:
        verbose_name = 'Tarefa do Remanejamento'
        verbose_name_plural = 'Tarefas do Remanejamento'
        ordering = ['criado_em', 'id']

    def __str__(self):
        return f"{self.responsavel} - {self.tipo} ({self.status})"

    @property
    def ativa(self):
        return self.status == self.PENDENTE

    @property
    def terminal(self):
        return self.status in self.STATUS_TERMINAIS


class ObservacaoTarefa(models.Model):
    """Observação em texto livre registrada em uma tarefa."""

    tarefa = models.ForeignKey(
        TarefaRemanejamento,
        on_delete=models.CASCADE,
        related_name='observacoes',
        verbose_name='Tarefa'
    )
    texto = models.TextField('Texto')
    criado_por = models.CharField('Criado por', max_length=150)
    criado_em = models.DateTimeField('Criado em', default=timezone.now)

    class Meta:
        verbose_name = 'Observação da Tarefa'
        verbose_name_plural = 'Observações das Tarefas'
        ordering = ['criado_em', 'id']

    def __str__(self):
        return self.texto[:60]


# ============================================================
# 🧾 MODELO: HISTÓRICO (TRILHA DE AUDITORIA)
# ============================================================
class HistoricoQuerySet(models.QuerySet):

    def de_tarefa(self, tarefa):
        return self.filter(tarefa=tarefa)

    def de_remanejamento(self, remanejamento):
        return self.filter(remanejamento=remanejamento)

    def alteracoes_status(self):
        """Registros de mudança de status de tarefa."""
        return self.filter(entidade='TAREFA', campo_alterado='status')


class HistoricoRemanejamento(models.Model):
    """
    Registro imutável de uma mutação (trilha de auditoria).

    Somente os vínculos (tarefa, usuário, equipe) podem ser completados
    depois da criação, pelos jobs de backfill. Exclusão não é permitida.
    """

    CRIACAO = 'CRIACAO'
    ATUALIZACAO_STATUS = 'ATUALIZACAO_STATUS'
    ATUALIZACAO_CAMPO = 'ATUALIZACAO_CAMPO'
    EXCLUSAO = 'EXCLUSAO'

    TIPO_ACAO_CHOICES = [
        (CRIACAO, 'Criação'),
        (ATUALIZACAO_STATUS, 'Atualização de status'),
        (ATUALIZACAO_CAMPO, 'Atualização de campo'),
        (EXCLUSAO, 'Exclusão'),
    ]

    CAMPOS_VINCULO = frozenset({'tarefa', 'usuario', 'equipe'})

    solicitacao = models.ForeignKey(
        SolicitacaoRemanejamento,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='historico',
        verbose_name='Solicitação'
    )
    remanejamento = models.ForeignKey(
        RemanejamentoFuncionario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='historico',
        verbose_name='Remanejamento'
    )
    tarefa = models.ForeignKey(
        TarefaRemanejamento,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='historico',
        verbose_name='Tarefa'
    )
    tipo_acao = models.CharField('Tipo de Ação', max_length=30, choices=TIPO_ACAO_CHOICES)
    entidade = models.CharField('Entidade', max_length=30)
    entidade_id = models.CharField('ID da Entidade', max_length=50, blank=True)
    campo_alterado = models.CharField('Campo Alterado', max_length=50, blank=True)
    valor_anterior = models.TextField('Valor Anterior', null=True, blank=True)
    valor_novo = models.TextField('Valor Novo', null=True, blank=True)
    descricao_acao = models.TextField('Descrição da Ação')
    usuario_responsavel = models.CharField('Responsável', max_length=150, default='Sistema')
    usuario = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='historicos',
        verbose_name='Usuário Responsável'
    )
    equipe = models.ForeignKey(
        Equipe,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='historicos',
        verbose_name='Equipe'
    )
    observacoes = models.TextField('Observações', null=True, blank=True)
    data_acao = models.DateTimeField('Data da Ação', default=timezone.now, db_index=True)

    objects = HistoricoQuerySet.as_manager()

    class Meta:
        verbose_name = 'Histórico de Remanejamento'
        verbose_name_plural = 'Histórico de Remanejamentos'
        ordering = ['data_acao', 'id']

    def __str__(self):
        return f"[{self.data_acao:%d/%m/%Y %H:%M}] {self.tipo_acao} {self.entidade}: {self.descricao_acao[:60]}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            update_fields = kwargs.get('update_fields')
            if not update_fields or not set(update_fields) <= self.CAMPOS_VINCULO:
                raise ValueError('Histórico é imutável: apenas vínculos (tarefa, usuário, equipe) podem ser completados.')
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError('Histórico é imutável e não pode ser excluído.')


# ============================================================
# ⏱️ MODELO: EVENTO DE STATUS DA TAREFA
# ============================================================
class TarefaStatusEventoQuerySet(models.QuerySet):

    def linha_do_tempo(self, tarefa):
        """Transições da tarefa em ordem cronológica."""
        return self.filter(tarefa=tarefa).order_by('data_evento', 'id')


class TarefaStatusEvento(models.Model):
    """Instantâneo imutável de uma transição de status de tarefa."""

    tarefa = models.ForeignKey(
        TarefaRemanejamento,
        on_delete=models.CASCADE,
        related_name='eventos_status',
        verbose_name='Tarefa'
    )
    remanejamento = models.ForeignKey(
        RemanejamentoFuncionario,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='eventos_status',
        verbose_name='Remanejamento'
    )
    status_anterior = models.CharField('Status Anterior', max_length=30, null=True, blank=True)
    status_novo = models.CharField('Status Novo', max_length=30)
    observacoes = models.TextField('Observações', blank=True)
    data_evento = models.DateTimeField('Data do Evento', default=timezone.now, db_index=True)
    usuario = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='eventos_status',
        verbose_name='Usuário Responsável'
    )
    equipe = models.ForeignKey(
        Equipe,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='eventos_status',
        verbose_name='Equipe'
    )
    criado_em = models.DateTimeField('Criado em', auto_now_add=True)

    objects = TarefaStatusEventoQuerySet.as_manager()

    class Meta:
        verbose_name = 'Evento de Status da Tarefa'
        verbose_name_plural = 'Eventos de Status das Tarefas'
        ordering = ['data_evento', 'id']

    def __str__(self):
        return f"Tarefa {self.tarefa_id}: {self.status_anterior or '-'} → {self.status_novo}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError('Eventos de status são imutáveis.')
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError('Eventos de status são imutáveis e não podem ser excluídos.')
