# apps/core/serializers.py

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

User = get_user_model()


# ------------------------------------
# Profile (출력: acadex Profile 엔티티)
# ------------------------------------

class ProfileSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    college = serializers.CharField(read_only=True)
    course = serializers.CharField(read_only=True)
    branch = serializers.CharField(read_only=True)
    semester = serializers.CharField(read_only=True)
    profile_image_url = serializers.CharField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=100, required=False)
    college = serializers.CharField(min_length=2, max_length=200, required=False)
    course = serializers.CharField(min_length=1, max_length=100, required=False)
    branch = serializers.CharField(min_length=1, max_length=100, required=False)
    semester = serializers.CharField(min_length=1, max_length=20, required=False)
    profile_image_url = serializers.URLField(max_length=500, required=False, allow_null=True)


# ------------------------------------
# Register
# ------------------------------------

class RegisterSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=6)
    name = serializers.CharField(min_length=2, max_length=100)
    college = serializers.CharField(min_length=2, max_length=200)
    course = serializers.CharField(min_length=1, max_length=100)
    branch = serializers.CharField(min_length=1, max_length=100)
    semester = serializers.CharField(min_length=1, max_length=20)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "password",
            "name",
            "college",
            "course",
            "branch",
            "semester",
            "profile_image_url",
        ]
        read_only_fields = ["id"]

    def validate_password(self, value):
        validate_password(value)
        return value

    def create(self, validated_data):
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)
