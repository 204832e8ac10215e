"""
URL configuration for lookup_project project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.urls import path, include

urlpatterns = [
    # Lookup table rows: list, detail by key, resolve-or-create
    path('lookups/', include('lookup_tables.lookups.urls')),
]
