from django.urls import path
from .views import ExpressionEvaluateAPIView


urlpatterns = [
    path("evaluate/", ExpressionEvaluateAPIView.as_view(), name="expression-evaluate"),
]
