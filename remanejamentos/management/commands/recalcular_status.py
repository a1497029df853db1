"""
Recalcula o status das tarefas (ATENDER TAREFAS / SUBMETER RASCUNHO).

Uso:
    python manage.py recalcular_status --all
    python manage.py recalcular_status --remanejamento 42
"""

from django.core.management.base import BaseCommand, CommandError
from remanejamentos.models import RemanejamentoFuncionario
from remanejamentos.services import recalcular_status
import logging

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Recalcula o status_tarefas dos remanejamentos'

    def add_arguments(self, parser):
        parser.add_argument('--remanejamento', type=int, help='ID do remanejamento de funcionário')
        parser.add_argument('--all', action='store_true', help='Todos os remanejamentos abertos')

    def handle(self, *args, **options):
        if options['remanejamento']:
            ids = [options['remanejamento']]
        elif options['all']:
            ids = list(RemanejamentoFuncionario.objects.abertos().order_by('pk').values_list('pk', flat=True))
        else:
            raise CommandError('Especifique --remanejamento ou --all')

        alterados = 0
        erros = 0
        for pk in ids:
            try:
                anterior = RemanejamentoFuncionario.objects.values_list('status_tarefas', flat=True).get(pk=pk)
                novo = recalcular_status(pk)
            except RemanejamentoFuncionario.DoesNotExist:
                raise CommandError(f'Remanejamento {pk} não encontrado')
            except Exception as e:
                erros += 1
                logger.error(f'Erro ao recalcular status do remanejamento {pk}: {str(e)}')
                continue

            if novo != anterior:
                alterados += 1
                self.stdout.write(f'  [{pk}] {anterior} → {novo}')

        self.stdout.write(f'  🔄 Alterados: {alterados} de {len(ids)}')
        if erros > 0:
            self.stdout.write(self.style.ERROR(f'  ❌ Erros: {erros}'))
        self.stdout.write(self.style.SUCCESS('✅ Status recalculado!'))
