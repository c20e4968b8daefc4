import math

from rest_framework import serializers

from .conf import get_setting
from .tree import join_tokens
from .tree.nodes import is_variable


class ExpressionEvaluateSerializer(serializers.Serializer):
    """Serializer for an expression evaluation request."""
    expression = serializers.CharField(allow_blank=True, trim_whitespace=False)
    variables = serializers.DictField(child=serializers.FloatField(), required=False, default=dict)
    strict = serializers.BooleanField(required=False)
    strict_division = serializers.BooleanField(required=False)

    def validate_expression(self, value):
        max_length = get_setting("MAX_LENGTH")
        if len(value) > max_length:
            raise serializers.ValidationError(f"expression must be at most {max_length} characters")
        return value

    def validate_variables(self, value):
        """Variable names follow the same rule as in expressions."""
        bad = sorted(name for name in value if not is_variable(name))
        if bad:
            raise serializers.ValidationError(
                f"Invalid variable names: {', '.join(bad)}. Use letters optionally followed by digits"
            )
        return value


class ExpressionResultSerializer(serializers.Serializer):
    """Serializer for a built ExpressionTree; the source text comes from context."""
    expression = serializers.SerializerMethodField()
    infix = serializers.SerializerMethodField()
    prefix = serializers.SerializerMethodField()
    postfix = serializers.SerializerMethodField()
    value = serializers.SerializerMethodField()

    def get_expression(self, obj):
        return self.context.get("expression", "")

    def get_infix(self, obj):
        return join_tokens(obj.infix())

    def get_prefix(self, obj):
        return join_tokens(obj.prefix())

    def get_postfix(self, obj):
        return join_tokens(obj.postfix())

    def get_value(self, obj):
        """Return the value; inf and nan are sent as strings since JSON has no literal for them."""
        value = obj.evaluate()
        if math.isfinite(value):
            return value
        return str(value)
