from rest_framework import serializers

from .models import Resource


class ResourceInputSerializer(serializers.Serializer):
    """
    생성/수정 입력. 수정은 partial=True.
    평점 필드(average_rating / total_ratings)와 college 는 입력 대상이 아니다.
    """
    title = serializers.CharField(max_length=255)
    subject = serializers.CharField(max_length=255)
    semester = serializers.CharField(max_length=20)
    course = serializers.CharField(max_length=100)
    branch = serializers.CharField(max_length=100, required=False, default="General")
    type = serializers.CharField(source="resource_type", max_length=50)
    year = serializers.CharField(max_length=10)
    tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False, default=list)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    privacy = serializers.ChoiceField(source="visibility", choices=Resource.Privacy.choices)
    file_url = serializers.CharField(max_length=500, required=False, allow_null=True)
    drive_link = serializers.URLField(max_length=500, required=False, allow_null=True)
    is_exam_important = serializers.BooleanField(required=False, default=False)


class ResourceSerializer(serializers.Serializer):
    """출력: acadex Resource 엔티티."""
    id = serializers.IntegerField()
    title = serializers.CharField()
    subject = serializers.CharField()
    semester = serializers.CharField()
    course = serializers.CharField()
    branch = serializers.CharField()
    type = serializers.CharField(source="resource_type")
    year = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())
    description = serializers.CharField()
    privacy = serializers.CharField(source="visibility.value")
    file_url = serializers.CharField(allow_null=True)
    drive_link = serializers.CharField(allow_null=True)
    contributor_id = serializers.IntegerField(source="owner_id")
    contributor_name = serializers.CharField(source="owner_name")
    contributor_college = serializers.CharField(source="affiliation")
    average_rating = serializers.DecimalField(
        source="rating_average", max_digits=3, decimal_places=1, coerce_to_string=False
    )
    total_ratings = serializers.IntegerField(source="rating_count")
    is_exam_important = serializers.BooleanField()
    created_at = serializers.DateTimeField()
