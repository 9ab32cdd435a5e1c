# PATH: apps/domains/resource_requests/views.py

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from acadex.adapters.db.django.uow import DjangoUnitOfWork
from acadex.application.use_cases.sharing.requests import (
    create_request,
    fulfill_request,
    list_requests,
)
from apps.core.identity import viewer_from_request

from .serializers import (
    FulfillSerializer,
    ResourceRequestCreateSerializer,
    ResourceRequestSerializer,
)


class ResourceRequestViewSet(viewsets.GenericViewSet):
    """자료 요청 게시판. open / fulfilled 모두 최신순으로 반환."""
    serializer_class = ResourceRequestSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = r"[0-9]+"

    def list(self, request):
        requests = list_requests(DjangoUnitOfWork())
        return Response({"requests": ResourceRequestSerializer(requests, many=True).data})

    @swagger_auto_schema(request_body=ResourceRequestCreateSerializer)
    def create(self, request):
        serializer = ResourceRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        created = create_request(DjangoUnitOfWork(), viewer_from_request(request), dict(serializer.validated_data))
        return Response({"request": ResourceRequestSerializer(created).data}, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(request_body=FulfillSerializer)
    @action(detail=True, methods=["patch"], url_path="fulfill")
    def fulfill(self, request, pk=None):
        """PATCH /requests/:id/fulfill/ body: { resource_id: 1 }"""
        serializer = FulfillSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        fulfilled = fulfill_request(
            DjangoUnitOfWork(),
            viewer_from_request(request),
            int(pk),
            serializer.validated_data["resource_id"],
        )
        return Response({"request": ResourceRequestSerializer(fulfilled).data})
