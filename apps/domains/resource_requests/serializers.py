from rest_framework import serializers


class ResourceRequestCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    subject = serializers.CharField(max_length=255)
    semester = serializers.CharField(max_length=20)
    description = serializers.CharField(required=False, allow_blank=True, default="")


class FulfillSerializer(serializers.Serializer):
    resource_id = serializers.IntegerField(min_value=1)


class ResourceRequestSerializer(serializers.Serializer):
    """출력: acadex ResourceRequest 엔티티."""
    id = serializers.IntegerField()
    title = serializers.CharField()
    subject = serializers.CharField()
    semester = serializers.CharField()
    description = serializers.CharField()
    requester_id = serializers.IntegerField()
    requester_name = serializers.CharField()
    status = serializers.CharField(source="status.value")
    fulfilled_resource_id = serializers.IntegerField(allow_null=True)
    created_at = serializers.DateTimeField()
