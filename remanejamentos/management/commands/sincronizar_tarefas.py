"""
============================================================
🧩 Remanejamentos - Sincronização de Tarefas
============================================================
Cria as tarefas faltantes (matriz de treinamento + tarefas padrão),
deduplica e recalcula o status.

Uso:
    python manage.py sincronizar_tarefas --all
    python manage.py sincronizar_tarefas --remanejamento 42
    python manage.py sincronizar_tarefas --all --setores RH,MEDICINA
"""

from django.core.management.base import BaseCommand, CommandError
from remanejamentos.exceptions import RemanejamentoFechado
from remanejamentos.models import RemanejamentoFuncionario
from remanejamentos.services import derivar_e_criar_tarefas
import logging

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Cria as tarefas exigidas dos remanejamentos abertos'

    def add_arguments(self, parser):
        parser.add_argument(
            '--remanejamento',
            type=int,
            help='ID do remanejamento de funcionário',
        )
        parser.add_argument(
            '--all',
            action='store_true',
            help='Processar todos os remanejamentos abertos',
        )
        parser.add_argument(
            '--setores',
            type=str,
            default='',
            help='Setores separados por vírgula (RH, MEDICINA, TREINAMENTO); padrão: todos',
        )
        parser.add_argument(
            '--verbose',
            action='store_true',
            help='Modo verboso com detalhes',
        )

    def handle(self, *args, **options):
        if not options['remanejamento'] and not options['all']:
            raise CommandError('Especifique --remanejamento ou --all')

        try:
            resultado = derivar_e_criar_tarefas(
                remanejamento_id=options['remanejamento'],
                setores=options['setores'] or None,
            )
        except RemanejamentoFuncionario.DoesNotExist:
            raise CommandError(f'Remanejamento {options["remanejamento"]} não encontrado')
        except RemanejamentoFechado as e:
            raise CommandError(f'❌ {e}')
        except Exception as e:
            logger.exception('Erro na sincronização de tarefas')
            raise CommandError(f'❌ Erro: {str(e)}')

        if options['verbose']:
            for detalhe in resultado.detalhes:
                self.stdout.write(
                    f'  [{detalhe.remanejamento_id}] criadas={detalhe.criadas} '
                    f'vinculadas={detalhe.vinculadas} canceladas={detalhe.canceladas} → {detalhe.status_tarefas}'
                )

        # Resumo
        self.stdout.write('\n' + '=' * 50)
        self.stdout.write('📊 Resumo da Sincronização:')
        self.stdout.write(f'  🔁 Remanejamentos: {len(resultado.detalhes)}')
        self.stdout.write(f'  ✅ Tarefas criadas: {resultado.criadas}')
        self.stdout.write(f'  🏷️  Setores: {", ".join(resultado.setores_tocados) or "-"}')
        if resultado.falhas:
            self.stdout.write(self.style.ERROR(f'  ❌ Erros: {len(resultado.falhas)}'))
            for pk, erro in resultado.falhas.items():
                self.stdout.write(self.style.ERROR(f'    [{pk}] {erro}'))

        self.stdout.write(self.style.SUCCESS('✅ Sincronização concluída!'))
