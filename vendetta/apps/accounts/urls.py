from django.urls import path
from .views import search_account

urlpatterns = [
    path("search", search_account, name="accounts-search"),
]
