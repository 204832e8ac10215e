from django.urls import path
from . import views

urlpatterns = [
    path('<str:app_label>/<str:model_name>/', views.lookup_row_list, name='lookup-row-list'),
    path('<str:app_label>/<str:model_name>/resolve/', views.lookup_row_resolve, name='lookup-row-resolve'),
    path('<str:app_label>/<str:model_name>/<str:key>/', views.lookup_row_detail, name='lookup-row-detail'),
]
