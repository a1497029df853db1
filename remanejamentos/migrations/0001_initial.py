# Generated manually on 2026-10-19

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import remanejamentos.models


SETOR_CHOICES = [('RH', 'Recursos Humanos'), ('MEDICINA', 'Medicina'), ('TREINAMENTO', 'Treinamento')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='Equipe',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome', models.CharField(max_length=100, unique=True, verbose_name='Nome')),
                ('ativo', models.BooleanField(default=True, verbose_name='Ativo')),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
            ],
            options={
                'verbose_name': 'Equipe',
                'verbose_name_plural': 'Equipes',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='Funcionario',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('matricula', models.CharField(max_length=20, unique=True, verbose_name='Matrícula')),
                ('nome', models.CharField(max_length=150, verbose_name='Nome Completo')),
                ('funcao', models.CharField(blank=True, max_length=100, verbose_name='Função')),
                ('ativo', models.BooleanField(default=True, verbose_name='Ativo')),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('atualizado_em', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
            ],
            options={
                'verbose_name': 'Funcionário',
                'verbose_name_plural': 'Funcionários',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='Contrato',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('numero', models.CharField(max_length=50, unique=True, verbose_name='Número')),
                ('nome', models.CharField(max_length=150, verbose_name='Nome')),
                ('cliente', models.CharField(blank=True, max_length=150, verbose_name='Cliente')),
                ('ativo', models.BooleanField(default=True, verbose_name='Ativo')),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
            ],
            options={
                'verbose_name': 'Contrato',
                'verbose_name_plural': 'Contratos',
                'ordering': ['numero'],
            },
        ),
        migrations.CreateModel(
            name='Funcao',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('funcao', models.CharField(max_length=100, unique=True, verbose_name='Função')),
                ('ativo', models.BooleanField(default=True, verbose_name='Ativo')),
            ],
            options={
                'verbose_name': 'Função',
                'verbose_name_plural': 'Funções',
                'ordering': ['funcao'],
            },
        ),
        migrations.CreateModel(
            name='Treinamento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('treinamento', models.CharField(max_length=200, unique=True, verbose_name='Treinamento')),
                ('carga_horaria', models.IntegerField(blank=True, null=True, verbose_name='Carga Horária')),
                ('validade_valor', models.IntegerField(blank=True, null=True, verbose_name='Validade')),
                ('validade_unidade', models.CharField(
                    blank=True,
                    choices=[('dias', 'Dias'), ('meses', 'Meses'), ('anos', 'Anos')],
                    max_length=10,
                    verbose_name='Unidade da Validade'
                )),
                ('ativo', models.BooleanField(default=True, verbose_name='Ativo')),
            ],
            options={
                'verbose_name': 'Treinamento',
                'verbose_name_plural': 'Treinamentos',
                'ordering': ['treinamento'],
            },
        ),
        migrations.CreateModel(
            name='Usuario',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(
                    default=False,
                    help_text='Designates that this user has all permissions without explicitly assigning them.',
                    verbose_name='superuser status'
                )),
                ('matricula', models.CharField(max_length=20, unique=True, verbose_name='Matrícula')),
                ('role', models.CharField(
                    choices=[
                        ('admin', 'Administrador'),
                        ('planejamento', 'Planejamento'),
                        ('logistica', 'Logística'),
                        ('rh', 'RH'),
                        ('medicina', 'Medicina'),
                        ('treinamento', 'Treinamento'),
                    ],
                    default='planejamento',
                    max_length=20,
                    verbose_name='Perfil'
                )),
                ('is_active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('is_staff', models.BooleanField(default=False, verbose_name='Acesso ao Admin')),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('funcionario', models.OneToOneField(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='usuario',
                    to='remanejamentos.funcionario',
                    verbose_name='Funcionário Vinculado'
                )),
                ('equipe', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='usuarios',
                    to='remanejamentos.equipe',
                    verbose_name='Equipe'
                )),
                ('groups', models.ManyToManyField(
                    blank=True,
                    help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.',
                    related_name='user_set',
                    related_query_name='user',
                    to='auth.group',
                    verbose_name='groups'
                )),
                ('user_permissions', models.ManyToManyField(
                    blank=True,
                    help_text='Specific permissions for this user.',
                    related_name='user_set',
                    related_query_name='user',
                    to='auth.permission',
                    verbose_name='user permissions'
                )),
            ],
            options={
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
            },
            managers=[
                ('objects', remanejamentos.models.UsuarioManager()),
            ],
        ),
        migrations.CreateModel(
            name='MatrizTreinamento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tipo_obrigatoriedade', models.CharField(
                    choices=[('AP', 'Obrigatório'), ('C', 'Complementar'), ('SD', 'Sob demanda'), ('N/A', 'Não aplicável')],
                    default='AP',
                    max_length=3,
                    verbose_name='Tipo de Obrigatoriedade'
                )),
                ('ativo', models.BooleanField(default=True, verbose_name='Ativo')),
                ('contrato', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='matriz_treinamento',
                    to='remanejamentos.contrato',
                    verbose_name='Contrato'
                )),
                ('funcao', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='matriz_treinamento',
                    to='remanejamentos.funcao',
                    verbose_name='Função'
                )),
                ('treinamento', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='matriz',
                    to='remanejamentos.treinamento',
                    verbose_name='Treinamento'
                )),
            ],
            options={
                'verbose_name': 'Matriz de Treinamento',
                'verbose_name_plural': 'Matriz de Treinamento',
                'unique_together': {('contrato', 'funcao', 'treinamento')},
            },
        ),
        migrations.CreateModel(
            name='TarefaPadrao',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('setor', models.CharField(choices=SETOR_CHOICES, max_length=20, verbose_name='Setor')),
                ('tipo', models.CharField(max_length=200, verbose_name='Tipo')),
                ('descricao', models.TextField(blank=True, verbose_name='Descrição')),
                ('ativo', models.BooleanField(default=True, verbose_name='Ativo')),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
            ],
            options={
                'verbose_name': 'Tarefa Padrão',
                'verbose_name_plural': 'Tarefas Padrão',
                'ordering': ['setor', 'tipo'],
                'unique_together': {('setor', 'tipo')},
            },
        ),
        migrations.CreateModel(
            name='SolicitacaoRemanejamento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('justificativa', models.TextField(blank=True, verbose_name='Justificativa')),
                ('prioridade', models.CharField(
                    choices=[('baixa', 'Baixa'), ('media', 'Normal'), ('alta', 'Alta'), ('urgente', 'Urgente')],
                    default='media',
                    max_length=10,
                    verbose_name='Prioridade'
                )),
                ('status', models.CharField(
                    choices=[
                        ('PENDENTE', 'Pendente'),
                        ('APROVADO', 'Aprovado'),
                        ('REJEITADO', 'Rejeitado'),
                        ('CONCLUIDO', 'Concluído'),
                    ],
                    default='PENDENTE',
                    max_length=20,
                    verbose_name='Status'
                )),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('atualizado_em', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('contrato_origem', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='remanejamentos_origem',
                    to='remanejamentos.contrato',
                    verbose_name='Contrato de Origem'
                )),
                ('contrato_destino', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='remanejamentos_destino',
                    to='remanejamentos.contrato',
                    verbose_name='Contrato de Destino'
                )),
                ('solicitado_por', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='solicitacoes',
                    to=settings.AUTH_USER_MODEL,
                    verbose_name='Solicitado por'
                )),
            ],
            options={
                'verbose_name': 'Solicitação de Remanejamento',
                'verbose_name_plural': 'Solicitações de Remanejamento',
                'ordering': ['-criado_em'],
            },
        ),
        migrations.CreateModel(
            name='RemanejamentoFuncionario',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status_tarefas', models.CharField(
                    choices=[
                        ('APROVAR SOLICITAÇÃO', 'Aguardando aprovação'),
                        ('ATENDER TAREFAS', 'Atender tarefas'),
                        ('SUBMETER RASCUNHO', 'Submeter rascunho'),
                    ],
                    default='APROVAR SOLICITAÇÃO',
                    max_length=30,
                    verbose_name='Status das Tarefas'
                )),
                ('status_prestserv', models.CharField(
                    choices=[
                        ('PENDENTE', 'Pendente'),
                        ('CRIADO', 'Criado'),
                        ('EM VALIDAÇÃO', 'Em validação'),
                        ('VALIDADO', 'Validado'),
                        ('INVALIDADO', 'Invalidado'),
                        ('CANCELADO', 'Cancelado'),
                    ],
                    default='PENDENTE',
                    max_length=20,
                    verbose_name='Status Prestserv'
                )),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('atualizado_em', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('solicitacao', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='funcionarios',
                    to='remanejamentos.solicitacaoremanejamento',
                    verbose_name='Solicitação'
                )),
                ('funcionario', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='remanejamentos',
                    to='remanejamentos.funcionario',
                    verbose_name='Funcionário'
                )),
                ('equipe', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='remanejamentos',
                    to='remanejamentos.equipe',
                    verbose_name='Equipe'
                )),
            ],
            options={
                'verbose_name': 'Remanejamento de Funcionário',
                'verbose_name_plural': 'Remanejamentos de Funcionários',
                'ordering': ['-criado_em'],
                'unique_together': {('solicitacao', 'funcionario')},
            },
        ),
        migrations.CreateModel(
            name='TarefaRemanejamento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tipo', models.CharField(max_length=200, verbose_name='Tipo')),
                ('descricao', models.TextField(blank=True, verbose_name='Descrição')),
                ('responsavel', models.CharField(max_length=50, verbose_name='Setor Responsável')),
                ('status', models.CharField(
                    choices=[('PENDENTE', 'Pendente'), ('CONCLUIDO', 'Concluído'), ('CANCELADO', 'Cancelado')],
                    default='PENDENTE',
                    max_length=20,
                    verbose_name='Status'
                )),
                ('prioridade', models.CharField(
                    choices=[('BAIXA', 'Baixa'), ('MEDIA', 'Média'), ('ALTA', 'Alta'), ('URGENTE', 'Urgente')],
                    default='MEDIA',
                    max_length=10,
                    verbose_name='Prioridade'
                )),
                ('data_limite', models.DateTimeField(blank=True, null=True, verbose_name='Data Limite')),
                ('data_conclusao', models.DateTimeField(blank=True, null=True, verbose_name='Data de Conclusão')),
                ('criado_em', models.DateTimeField(
                    db_index=True, default=django.utils.timezone.now, verbose_name='Criado em'
                )),
                ('atualizado_em', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('remanejamento', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='tarefas',
                    to='remanejamentos.remanejamentofuncionario',
                    verbose_name='Remanejamento'
                )),
                ('treinamento', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='tarefas',
                    to='remanejamentos.treinamento',
                    verbose_name='Treinamento'
                )),
                ('tarefa_padrao', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='tarefas',
                    to='remanejamentos.tarefapadrao',
                    verbose_name='Tarefa Padrão'
                )),
                ('equipe', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='tarefas',
                    to='remanejamentos.equipe',
                    verbose_name='Equipe'
                )),
            ],
            options={
                'verbose_name': 'Tarefa do Remanejamento',
                'verbose_name_plural': 'Tarefas do Remanejamento',
                'ordering': ['criado_em', 'id'],
            },
        ),
        migrations.CreateModel(
            name='ObservacaoTarefa',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('texto', models.TextField(verbose_name='Texto')),
                ('criado_por', models.CharField(max_length=150, verbose_name='Criado por')),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Criado em')),
                ('tarefa', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='observacoes',
                    to='remanejamentos.tarefaremanejamento',
                    verbose_name='Tarefa'
                )),
            ],
            options={
                'verbose_name': 'Observação da Tarefa',
                'verbose_name_plural': 'Observações das Tarefas',
                'ordering': ['criado_em', 'id'],
            },
        ),
        migrations.CreateModel(
            name='HistoricoRemanejamento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tipo_acao', models.CharField(
                    choices=[
                        ('CRIACAO', 'Criação'),
                        ('ATUALIZACAO_STATUS', 'Atualização de status'),
                        ('ATUALIZACAO_CAMPO', 'Atualização de campo'),
                        ('EXCLUSAO', 'Exclusão'),
                    ],
                    max_length=30,
                    verbose_name='Tipo de Ação'
                )),
                ('entidade', models.CharField(max_length=30, verbose_name='Entidade')),
                ('entidade_id', models.CharField(blank=True, max_length=50, verbose_name='ID da Entidade')),
                ('campo_alterado', models.CharField(blank=True, max_length=50, verbose_name='Campo Alterado')),
                ('valor_anterior', models.TextField(blank=True, null=True, verbose_name='Valor Anterior')),
                ('valor_novo', models.TextField(blank=True, null=True, verbose_name='Valor Novo')),
                ('descricao_acao', models.TextField(verbose_name='Descrição da Ação')),
                ('usuario_responsavel', models.CharField(default='Sistema', max_length=150, verbose_name='Responsável')),
                ('observacoes', models.TextField(blank=True, null=True, verbose_name='Observações')),
                ('data_acao', models.DateTimeField(
                    db_index=True, default=django.utils.timezone.now, verbose_name='Data da Ação'
                )),
                ('solicitacao', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='historico',
                    to='remanejamentos.solicitacaoremanejamento',
                    verbose_name='Solicitação'
                )),
                ('remanejamento', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='historico',
                    to='remanejamentos.remanejamentofuncionario',
                    verbose_name='Remanejamento'
                )),
                ('tarefa', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='historico',
                    to='remanejamentos.tarefaremanejamento',
                    verbose_name='Tarefa'
                )),
                ('usuario', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='historicos',
                    to=settings.AUTH_USER_MODEL,
                    verbose_name='Usuário Responsável'
                )),
                ('equipe', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='historicos',
                    to='remanejamentos.equipe',
                    verbose_name='Equipe'
                )),
            ],
            options={
                'verbose_name': 'Histórico de Remanejamento',
                'verbose_name_plural': 'Histórico de Remanejamentos',
                'ordering': ['data_acao', 'id'],
            },
        ),
        migrations.CreateModel(
            name='TarefaStatusEvento',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status_anterior', models.CharField(blank=True, max_length=30, null=True, verbose_name='Status Anterior')),
                ('status_novo', models.CharField(max_length=30, verbose_name='Status Novo')),
                ('observacoes', models.TextField(blank=True, verbose_name='Observações')),
                ('data_evento', models.DateTimeField(
                    db_index=True, default=django.utils.timezone.now, verbose_name='Data do Evento'
                )),
                ('criado_em', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('tarefa', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='eventos_status',
                    to='remanejamentos.tarefaremanejamento',
                    verbose_name='Tarefa'
                )),
                ('remanejamento', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='eventos_status',
                    to='remanejamentos.remanejamentofuncionario',
                    verbose_name='Remanejamento'
                )),
                ('usuario', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='eventos_status',
                    to=settings.AUTH_USER_MODEL,
                    verbose_name='Usuário Responsável'
                )),
                ('equipe', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='eventos_status',
                    to='remanejamentos.equipe',
                    verbose_name='Equipe'
                )),
            ],
            options={
                'verbose_name': 'Evento de Status da Tarefa',
                'verbose_name_plural': 'Eventos de Status das Tarefas',
                'ordering': ['data_evento', 'id'],
            },
        ),
    ]
