from rest_framework import serializers


class LeaderboardEntrySerializer(serializers.Serializer):
    rank = serializers.IntegerField()
    id = serializers.IntegerField(source="entry.profile_id")
    name = serializers.CharField(source="entry.name")
    college = serializers.CharField(source="entry.college")
    branch = serializers.CharField(source="entry.branch")
    points = serializers.IntegerField(source="entry.points")
