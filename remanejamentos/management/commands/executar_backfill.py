"""
============================================================
🧰 Remanejamentos - Jobs de Backfill
============================================================
Reconstrói vínculos e eventos ausentes. Reexecutável: registros já
corrigidos são ignorados.

Uso:
    python manage.py executar_backfill reprovacoes --dry-run
    python manage.py executar_backfill equipes_tarefas --apply --batch 200
    python manage.py executar_backfill --list
"""

from django.core.management.base import BaseCommand, CommandError
from remanejamentos.backfill import JOBS, conta_padrao, executar_backfill
from remanejamentos.models import Usuario
import logging

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Executa um job de backfill (padrão: dry-run)'

    def add_arguments(self, parser):
        parser.add_argument('job', nargs='?', help=f'Job: {", ".join(sorted(JOBS))}')
        parser.add_argument('--apply', action='store_true', help='Gravar as alterações')
        parser.add_argument('--dry-run', action='store_true', help='Apenas contabilizar (padrão)')
        parser.add_argument('--batch', type=int, default=None, help='Registros por lote')
        parser.add_argument('--limit', type=int, default=None, help='Máximo de registros')
        parser.add_argument('--admin', type=str, default=None,
                            help='Matrícula da conta padrão (padrão: ADMIN_MATRICULA)')
        parser.add_argument('--list', action='store_true', help='Listar jobs disponíveis')

    def handle(self, *args, **options):
        if options['list']:
            for nome, job in sorted(JOBS.items()):
                self.stdout.write(f'  {nome}: {job.descricao}')
            return

        nome = options['job']
        if not nome:
            raise CommandError('Informe o job (use --list para ver os disponíveis)')
        if nome not in JOBS:
            raise CommandError(f'Job desconhecido: {nome}. Disponíveis: {", ".join(sorted(JOBS))}')
        if options['apply'] and options['dry_run']:
            raise CommandError('Use --apply ou --dry-run, não ambos')

        dry_run = not options['apply']
        if dry_run:
            self.stdout.write(self.style.WARNING('🔍 Modo DRY-RUN: Nenhuma alteração será salva'))

        usuario_padrao = conta_padrao(options['admin'])
        if usuario_padrao is None:
            self.stdout.write(self.style.WARNING('⚠️  Conta administrativa padrão não encontrada'))

        self.stdout.write(f'🔄 Executando {nome}...')
        try:
            resumo = executar_backfill(
                nome,
                dry_run=dry_run,
                batch_size=options['batch'],
                limit=options['limit'],
                usuario_padrao=usuario_padrao,
            )
        except Exception as e:
            logger.exception(f'Erro no backfill {nome}')
            raise CommandError(f'❌ Erro: {str(e)}')

        # Resumo
        self.stdout.write('\n' + '=' * 50)
        self.stdout.write(f'📊 Resumo do backfill {nome}:')
        self.stdout.write(f'  🔁 Processados: {resumo.processados}')
        self.stdout.write(f'  ✅ Criados: {resumo.criados}')
        self.stdout.write(f'  🔄 Atualizados: {resumo.atualizados}')
        self.stdout.write(f'  ⏭️  Ignorados: {resumo.ignorados}')
        if resumo.erros > 0:
            self.stdout.write(self.style.ERROR(f'  ❌ Erros: {resumo.erros}'))
        self.stdout.write(self.style.SUCCESS('✅ Backfill concluído!'))
