"""
============================================================
🔧 Remanejamentos - Configuração do Django Admin
============================================================
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import (
    Equipe, Funcionario, Usuario, Contrato, Funcao, Treinamento, MatrizTreinamento, TarefaPadrao,
    SolicitacaoRemanejamento, RemanejamentoFuncionario, TarefaRemanejamento, ObservacaoTarefa,
    HistoricoRemanejamento, TarefaStatusEvento,
)


@admin.register(Equipe)
class EquipeAdmin(admin.ModelAdmin):
    list_display = ['nome', 'ativo']
    list_filter = ['ativo']
    search_fields = ['nome']


@admin.register(Funcionario)
class FuncionarioAdmin(admin.ModelAdmin):
    list_display = ['matricula', 'nome', 'funcao', 'ativo']
    list_filter = ['ativo']
    search_fields = ['matricula', 'nome', 'funcao']
    ordering = ['nome']


@admin.register(Usuario)
class UsuarioAdmin(UserAdmin):
    list_display = ['matricula', 'funcionario', 'equipe', 'role', 'is_active', 'is_staff']
    list_filter = ['role', 'equipe', 'is_active', 'is_staff']
    search_fields = ['matricula', 'funcionario__nome']
    ordering = ['matricula']

    fieldsets = (
        (None, {'fields': ('matricula', 'password')}),
        ('Informações', {'fields': ('funcionario', 'equipe', 'role')}),
        ('Permissões', {'fields': ('is_active', 'is_staff', 'is_superuser')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('matricula', 'password1', 'password2', 'role'),
        }),
    )


@admin.register(Contrato)
class ContratoAdmin(admin.ModelAdmin):
    list_display = ['numero', 'nome', 'cliente', 'ativo']
    list_filter = ['ativo']
    search_fields = ['numero', 'nome', 'cliente']


@admin.register(Funcao)
class FuncaoAdmin(admin.ModelAdmin):
    list_display = ['funcao', 'ativo']
    search_fields = ['funcao']


@admin.register(Treinamento)
class TreinamentoAdmin(admin.ModelAdmin):
    list_display = ['treinamento', 'carga_horaria', 'validade_valor', 'validade_unidade', 'ativo']
    list_filter = ['ativo']
    search_fields = ['treinamento']


@admin.register(MatrizTreinamento)
class MatrizTreinamentoAdmin(admin.ModelAdmin):
    list_display = ['contrato', 'funcao', 'treinamento', 'tipo_obrigatoriedade', 'ativo']
    list_filter = ['tipo_obrigatoriedade', 'ativo', 'contrato']
    search_fields = ['funcao__funcao', 'treinamento__treinamento', 'contrato__numero']


@admin.register(TarefaPadrao)
class TarefaPadraoAdmin(admin.ModelAdmin):
    list_display = ['setor', 'tipo', 'ativo']
    list_filter = ['setor', 'ativo']
    search_fields = ['tipo', 'descricao']


@admin.register(SolicitacaoRemanejamento)
class SolicitacaoRemanejamentoAdmin(admin.ModelAdmin):
    list_display = ['id', 'contrato_origem', 'contrato_destino', 'prioridade', 'status', 'criado_em']
    list_filter = ['status', 'prioridade']
    search_fields = ['justificativa']
    readonly_fields = ['criado_em', 'atualizado_em']


class TarefaInline(admin.TabularInline):
    model = TarefaRemanejamento
    extra = 0
    fields = ['tipo', 'responsavel', 'status', 'prioridade', 'data_limite', 'equipe']
    readonly_fields = fields
    can_delete = False


@admin.register(RemanejamentoFuncionario)
class RemanejamentoFuncionarioAdmin(admin.ModelAdmin):
    list_display = ['funcionario', 'solicitacao', 'status_tarefas', 'status_prestserv', 'atualizado_em']
    list_filter = ['status_tarefas', 'status_prestserv']
    search_fields = ['funcionario__nome', 'funcionario__matricula']
    readonly_fields = ['criado_em', 'atualizado_em']
    inlines = [TarefaInline]


@admin.register(TarefaRemanejamento)
class TarefaRemanejamentoAdmin(admin.ModelAdmin):
    list_display = ['tipo', 'responsavel', 'remanejamento', 'status', 'prioridade', 'data_limite', 'equipe']
    list_filter = ['status', 'responsavel', 'prioridade']
    search_fields = ['tipo', 'descricao', 'remanejamento__funcionario__nome']
    readonly_fields = ['criado_em', 'atualizado_em']


@admin.register(ObservacaoTarefa)
class ObservacaoTarefaAdmin(admin.ModelAdmin):
    list_display = ['tarefa', 'criado_por', 'criado_em']
    search_fields = ['texto', 'criado_por']


class SomenteLeituraAdmin(admin.ModelAdmin):
    """Trilha de auditoria: consulta apenas."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(HistoricoRemanejamento)
class HistoricoRemanejamentoAdmin(SomenteLeituraAdmin):
    list_display = ['data_acao', 'tipo_acao', 'entidade', 'campo_alterado', 'valor_novo', 'usuario_responsavel']
    list_filter = ['tipo_acao', 'entidade']
    search_fields = ['descricao_acao', 'usuario_responsavel']
    date_hierarchy = 'data_acao'


@admin.register(TarefaStatusEvento)
class TarefaStatusEventoAdmin(SomenteLeituraAdmin):
    list_display = ['data_evento', 'tarefa', 'status_anterior', 'status_novo', 'usuario']
    list_filter = ['status_novo']
    search_fields = ['tarefa__tipo', 'observacoes']


# Customização do Admin
admin.site.site_header = 'Remanejamentos - Administração'
admin.site.site_title = 'Remanejamentos Admin'
