"""
============================================================
🔗 Remanejamentos - URLs Principais
============================================================
A orquestração de tarefas não expõe endpoints próprios; apenas o
Django admin fica disponível para inspeção operacional.
"""

from django.contrib import admin
from django.urls import path

urlpatterns = [
    # Admin do Django
    path('admin/', admin.site.urls),
]
