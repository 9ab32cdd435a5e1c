# apps/core/views.py

import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from acadex.adapters.db.django.uow import DjangoUnitOfWork
from acadex.application.use_cases.sharing.profiles import get_profile, update_profile
from apps.core.identity import viewer_from_request, viewer_from_user
from apps.core.serializers import (
    ProfileSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
)

logger = logging.getLogger(__name__)


# --------------------------------------------------
# Auth: /core/register/
# --------------------------------------------------

class RegisterView(APIView):
    """회원가입 = User + 프로필 생성. 토큰 발급은 /token/ 에서."""
    permission_classes = [AllowAny]
    authentication_classes = []

    @swagger_auto_schema(request_body=RegisterSerializer, responses={201: ProfileSerializer})
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Profile registered | user_id=%s college=%s", user.pk, user.college)
        profile = get_profile(DjangoUnitOfWork(), viewer_from_user(user))
        return Response(ProfileSerializer(profile).data, status=status.HTTP_201_CREATED)


# --------------------------------------------------
# Profile
# --------------------------------------------------

class ProfileViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(responses={200: ProfileSerializer})
    @action(detail=False, methods=["get"])
    def me(self, request):
        profile = get_profile(DjangoUnitOfWork(), viewer_from_request(request))
        return Response(ProfileSerializer(profile).data)

    @swagger_auto_schema(request_body=ProfileUpdateSerializer, responses={200: ProfileSerializer})
    @action(detail=False, methods=["patch"])
    def update_me(self, request):
        serializer = ProfileUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        profile = update_profile(
            DjangoUnitOfWork(),
            viewer_from_request(request),
            dict(serializer.validated_data),
        )
        return Response(ProfileSerializer(profile).data)
