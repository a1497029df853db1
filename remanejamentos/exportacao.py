"""
============================================================
📤 Exportação da trilha de auditoria para Excel
============================================================
"""

import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter
from django.utils import timezone

from .models import HistoricoRemanejamento, TarefaStatusEvento

# Estilos
header_font = Font(bold=True, color='FFFFFF', size=11)
header_fill = PatternFill('solid', fgColor='8B0000')
header_alignment = Alignment(horizontal='center', vertical='center')
thin_border = Border(
    left=Side(style='thin'),
    right=Side(style='thin'),
    top=Side(style='thin'),
    bottom=Side(style='thin')
)

COLUNAS_HISTORICO = [
    'ID', 'Data', 'Tipo de Ação', 'Entidade', 'ID Entidade', 'Campo', 'Valor Anterior', 'Valor Novo',
    'Descrição', 'Responsável', 'Matrícula', 'Equipe', 'Solicitação', 'Remanejamento', 'Tarefa',
]

COLUNAS_EVENTOS = [
    'ID', 'Data', 'Tarefa', 'Tipo da Tarefa', 'Remanejamento', 'Status Anterior', 'Status Novo',
    'Usuário', 'Equipe', 'Observações',
]


def _data(valor):
    if not valor:
        return ''
    return timezone.localtime(valor).strftime('%Y-%m-%d %H:%M:%S')


def style_header(sheet, num_cols):
    for col in range(1, num_cols + 1):
        cell = sheet.cell(row=1, column=col)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = header_alignment
        cell.border = thin_border


def ajustar_colunas(sheet):
    for column_cells in sheet.columns:
        length = max(len(str(cell.value or '')) for cell in column_cells)
        sheet.column_dimensions[get_column_letter(column_cells[0].column)].width = min(length + 2, 50)


def montar_planilha(historicos=None, eventos=None):
    """
    Workbook com as abas Histórico e Eventos de Status.

    Args:
        historicos: queryset de HistoricoRemanejamento (padrão: todos)
        eventos: queryset de TarefaStatusEvento (padrão: todos)
    """
    if historicos is None:
        historicos = HistoricoRemanejamento.objects.all()
    if eventos is None:
        eventos = TarefaStatusEvento.objects.all()

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = 'Histórico'
    ws.append(COLUNAS_HISTORICO)
    style_header(ws, len(COLUNAS_HISTORICO))
    for h in historicos.select_related('usuario', 'equipe').order_by('data_acao', 'id'):
        ws.append([
            h.id, _data(h.data_acao), h.tipo_acao, h.entidade, h.entidade_id, h.campo_alterado,
            h.valor_anterior or '', h.valor_novo or '', h.descricao_acao, h.usuario_responsavel,
            h.usuario.matricula if h.usuario else '',
            h.equipe.nome if h.equipe else '',
            h.solicitacao_id or '', h.remanejamento_id or '', h.tarefa_id or '',
        ])
    ajustar_colunas(ws)

    ws_eventos = wb.create_sheet('Eventos de Status')
    ws_eventos.append(COLUNAS_EVENTOS)
    style_header(ws_eventos, len(COLUNAS_EVENTOS))
    for e in eventos.select_related('tarefa', 'usuario', 'equipe').order_by('data_evento', 'id'):
        ws_eventos.append([
            e.id, _data(e.data_evento), e.tarefa_id, e.tarefa.tipo, e.remanejamento_id or '',
            e.status_anterior or '', e.status_novo,
            e.usuario.matricula if e.usuario else '',
            e.equipe.nome if e.equipe else '',
            e.observacoes,
        ])
    ajustar_colunas(ws_eventos)

    return wb
