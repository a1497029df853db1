"""
============================================================
⚙️ Remanejamentos - Configurações do Django
Orquestração de tarefas de remanejamento
============================================================
"""

import os
from pathlib import Path

import dj_database_url

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# ============================================================
# 🔐 SEGURANÇA
# ============================================================
SECRET_KEY = os.environ.get('SECRET_KEY', 'django-insecure-dev-key-mude-em-producao')
DEBUG = os.environ.get('DEBUG', 'True').lower() in ('true', '1', 'yes')

# Hosts permitidos
ALLOWED_HOSTS = ['localhost', '127.0.0.1']

# Adicionar hosts extras se configurados
EXTRA_HOSTS = os.environ.get('ALLOWED_HOSTS', '')
if EXTRA_HOSTS:
    ALLOWED_HOSTS.extend(EXTRA_HOSTS.split(','))

# ============================================================
# 📦 APLICAÇÕES INSTALADAS
# ============================================================
INSTALLED_APPS = [
    # Django padrão
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Apps do projeto
    'remanejamentos',
]

# ============================================================
# 🔧 MIDDLEWARE
# ============================================================
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',  # WhiteNoise para arquivos estáticos do admin
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'core.urls'

# ============================================================
# 📄 TEMPLATES (apenas o Django admin)
# ============================================================
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'core.wsgi.application'

# ============================================================
# 🗄️ BANCO DE DADOS
# ============================================================
# Verificar se existe DATABASE_URL (produção)
DATABASE_URL = os.environ.get('DATABASE_URL')

if DATABASE_URL:
    DATABASES = {
        'default': dj_database_url.config(
            default=DATABASE_URL,
            conn_max_age=600,
            conn_health_checks=True,
            ssl_require=True,
        )
    }
else:
    # Local: usar configurações do .env ou padrão
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DB_NAME', 'remanejamentos'),
            'USER': os.environ.get('DB_USER', 'remanejamentos_user'),
            'PASSWORD': os.environ.get('DB_PASSWORD', 'remanejamentos123'),
            'HOST': os.environ.get('DB_HOST', 'localhost'),
            'PORT': os.environ.get('DB_PORT', '5432'),
        }
    }

# ============================================================
# 🔑 VALIDAÇÃO DE SENHA
# ============================================================
AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]

# ============================================================
# 👤 MODELO DE USUÁRIO CUSTOMIZADO
# ============================================================
AUTH_USER_MODEL = 'remanejamentos.Usuario'

# ============================================================
# 🌍 INTERNACIONALIZAÇÃO
# ============================================================
LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'America/Sao_Paulo'
USE_I18N = True
USE_TZ = True

# ============================================================
# 📁 ARQUIVOS ESTÁTICOS
# ============================================================
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# WhiteNoise para servir arquivos estáticos em produção
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# ============================================================
# 🆔 TIPO DE CAMPO PRIMÁRIO PADRÃO
# ============================================================
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ============================================================
# 📝 LOGGING
# ============================================================
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simples': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simples',
        },
    },
    'loggers': {
        'remanejamentos': {
            'handlers': ['console'],
            'level': os.environ.get('REMANEJAMENTOS_LOG_LEVEL', 'INFO'),
        },
    },
}

# ============================================================
# 🔒 SEGURANÇA EM PRODUÇÃO
# ============================================================
if not DEBUG:
    SECURE_SSL_REDIRECT = True
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True
    SECURE_CONTENT_TYPE_NOSNIFF = True

# ============================================================
# 🔄 ORQUESTRAÇÃO DE TAREFAS
# ============================================================
# Conta administrativa usada quando um histórico não tem responsável.
# Demais chaves (regras de setor/equipe, prazos) têm padrão em remanejamentos/conf.py
REMANEJAMENTOS = {
    'ADMIN_MATRICULA': os.environ.get('ADMIN_MATRICULA', 'ADMIN001'),
    'USUARIO_SISTEMA': 'Sistema',
    'PRAZO_TAREFA_HORAS': int(os.environ.get('PRAZO_TAREFA_HORAS', '48')),
    'BACKFILL_BATCH_SIZE': int(os.environ.get('BACKFILL_BATCH_SIZE', '500')),
}
