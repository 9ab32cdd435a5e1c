from rest_framework import serializers


class ReviewCreateSerializer(serializers.Serializer):
    resource_id = serializers.IntegerField(min_value=1)
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(max_length=1000, required=False, allow_blank=True, default="")


class ReviewUpdateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)
    comment = serializers.CharField(max_length=1000, required=False, allow_blank=True)


class ReviewSerializer(serializers.Serializer):
    """출력: acadex Review 엔티티."""
    id = serializers.IntegerField()
    resource_id = serializers.IntegerField()
    user_id = serializers.IntegerField(source="reviewer_id")
    user_name = serializers.CharField(source="reviewer_name")
    rating = serializers.IntegerField()
    comment = serializers.CharField()
    created_at = serializers.DateTimeField()


class RatingAggregateSerializer(serializers.Serializer):
    resource_id = serializers.IntegerField()
    average_rating = serializers.DecimalField(
        source="average", max_digits=3, decimal_places=1, coerce_to_string=False
    )
    total_ratings = serializers.IntegerField(source="count")
