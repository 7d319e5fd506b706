from rest_framework import serializers

from apps.documents.models import Document


class DocumentSearchResultSerializer(serializers.ModelSerializer):
    course_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = Document
        fields = [
            'id', 'title', 'description', 'category', 'tags',
            'file_type', 'file_size', 'is_verified', 'course_id', 'created_at',
        ]


class RpcParamsSerializer(serializers.Serializer):
    """Optional arguments accepted by the ``/api/rpc/<name>/`` functions."""
    months = serializers.IntegerField(required=False, min_value=1, max_value=36)
    course_id = serializers.UUIDField(required=False)
    query = serializers.CharField(required=False, allow_blank=True, max_length=200)


class ExportParamsSerializer(serializers.Serializer):
    format = serializers.CharField(required=False, default='json')
