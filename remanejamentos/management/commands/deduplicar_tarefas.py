"""
Cancela tarefas duplicadas (mantém a mais antiga por chave).

Uso:
    python manage.py deduplicar_tarefas --all
    python manage.py deduplicar_tarefas --remanejamento 42
"""

from django.core.management.base import BaseCommand, CommandError
from remanejamentos.exceptions import RemanejamentoFechado
from remanejamentos.models import RemanejamentoFuncionario
from remanejamentos.services import deduplicar
import logging

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Cancela tarefas duplicadas dos remanejamentos abertos'

    def add_arguments(self, parser):
        parser.add_argument('--remanejamento', type=int, help='ID do remanejamento de funcionário')
        parser.add_argument('--all', action='store_true', help='Todos os remanejamentos abertos')
        parser.add_argument('--batch', type=int, default=None, help='Remanejamentos por lote')

    def handle(self, *args, **options):
        if options['remanejamento']:
            alvo = options['remanejamento']
        elif options['all']:
            alvo = 'all'
        else:
            raise CommandError('Especifique --remanejamento ou --all')

        try:
            resultado = deduplicar(alvo, batch_size=options['batch'])
        except RemanejamentoFuncionario.DoesNotExist:
            raise CommandError(f'Remanejamento {alvo} não encontrado')
        except RemanejamentoFechado as e:
            raise CommandError(f'❌ {e}')

        self.stdout.write(f'  🔁 Processados: {resultado.processados}')
        self.stdout.write(f'  🧹 Canceladas: {resultado.canceladas}')
        if resultado.nao_resolvidos:
            self.stdout.write(self.style.ERROR(f'  ❌ Não resolvidos: {resultado.nao_resolvidos}'))
        self.stdout.write(self.style.SUCCESS('✅ Deduplicação concluída!'))
