"""
Exporta a trilha de auditoria (histórico + eventos de status) para .xlsx.

Uso:
    python manage.py exportar_historico --saida historico.xlsx
    python manage.py exportar_historico --remanejamento 42
"""

from django.core.management.base import BaseCommand, CommandError
from remanejamentos.exportacao import montar_planilha
from remanejamentos.models import HistoricoRemanejamento, RemanejamentoFuncionario, TarefaStatusEvento


class Command(BaseCommand):
    help = 'Exporta o histórico de remanejamentos para Excel'

    def add_arguments(self, parser):
        parser.add_argument('--saida', type=str, default='historico_remanejamentos.xlsx',
                            help='Arquivo de saída')
        parser.add_argument('--remanejamento', type=int, help='Somente um remanejamento')

    def handle(self, *args, **options):
        historicos = HistoricoRemanejamento.objects.all()
        eventos = TarefaStatusEvento.objects.all()

        if options['remanejamento']:
            try:
                remanejamento = RemanejamentoFuncionario.objects.get(pk=options['remanejamento'])
            except RemanejamentoFuncionario.DoesNotExist:
                raise CommandError(f'Remanejamento {options["remanejamento"]} não encontrado')
            historicos = historicos.de_remanejamento(remanejamento)
            eventos = eventos.filter(remanejamento=remanejamento)

        wb = montar_planilha(historicos, eventos)
        try:
            wb.save(options['saida'])
        except OSError as e:
            raise CommandError(f'❌ Erro ao salvar {options["saida"]}: {e}')

        self.stdout.write(
            self.style.SUCCESS(f'✅ {historicos.count()} registro(s) exportado(s) para {options["saida"]}')
        )
