import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .conf import get_setting
from .serializers import ExpressionEvaluateSerializer, ExpressionResultSerializer
from .tree import ExpressionError, ExpressionTree

logger = logging.getLogger(__name__)


def error_response(exc: ExpressionError) -> Response:
    return Response(
        {"status": 400, "message": str(exc), "error": type(exc).__name__},
        status=status.HTTP_400_BAD_REQUEST
    )


class ExpressionEvaluateAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = ExpressionEvaluateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        expression = data["expression"]
        strict = data.get("strict", get_setting("STRICT"))
        strict_division = data.get("strict_division", get_setting("STRICT_DIVISION"))

        try:
            tree = ExpressionTree.from_string(
                expression,
                variables=data.get("variables"),
                strict=strict,
                strict_division=strict_division,
            )
            result = ExpressionResultSerializer(tree, context={"expression": expression}).data
        except ExpressionError as e:
            logger.warning(f"Rejected expression '{expression}': {e}")
            return error_response(e)

        return Response({"status": 200, "data": result}, status=status.HTTP_200_OK)
