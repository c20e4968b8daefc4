from django.urls import include, path

urlpatterns = [
    path("api/expressions/", include("expressions.urls")),
]
