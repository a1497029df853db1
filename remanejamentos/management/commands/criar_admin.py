"""
Comando para criar o superusuário automaticamente no deploy.
Usa variáveis de ambiente para definir as credenciais; a mesma matrícula
é a conta padrão dos backfills (ADMIN_MATRICULA).
"""

import os
from django.core.management.base import BaseCommand
from remanejamentos.conf import get_config
from remanejamentos.models import Usuario


class Command(BaseCommand):
    help = 'Cria um superusuário automaticamente se não existir'

    def handle(self, *args, **options):
        # Pegar credenciais das variáveis de ambiente ou usar padrão
        matricula = get_config()['ADMIN_MATRICULA']
        password = os.environ.get('ADMIN_PASSWORD', 'admin123')

        # Verificar se já existe
        if Usuario.objects.filter(matricula=matricula).exists():
            self.stdout.write(
                self.style.WARNING(f'Usuário admin com matrícula {matricula} já existe.')
            )
            return

        Usuario.objects.create_superuser(matricula=matricula, password=password)

        self.stdout.write(self.style.SUCCESS('Superusuário criado com sucesso!'))
        self.stdout.write(f'  Matrícula: {matricula}')
        self.stdout.write(
            self.style.WARNING('⚠️  IMPORTANTE: Troque a senha após o primeiro login!')
        )
