# PATH: apps/domains/resources/views.py

from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema

from acadex.adapters.db.django.uow import DjangoUnitOfWork
from acadex.application.use_cases.sharing.resources import (
    create_resource,
    delete_resource,
    get_resource,
    list_resources,
    update_resource,
)
from acadex.domain.sharing.entities import ResourceQuery
from apps.core.identity import viewer_from_request

from .serializers import ResourceInputSerializer, ResourceSerializer

_LIST_PARAMS = [
    openapi.Parameter(name, openapi.IN_QUERY, type=openapi.TYPE_STRING)
    for name in ("course", "branch", "semester", "type", "year", "privacy", "search")
]


class ResourceViewSet(viewsets.GenericViewSet):
    """
    자료 CRUD.
    list/retrieve: 익명 허용, private 은 가시성 정책 통과분만.
    update/destroy: 업로더 본인 + 생성 후 24시간 이내.
    """
    serializer_class = ResourceSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = r"[0-9]+"

    def _query_from_params(self) -> ResourceQuery:
        p = self.request.query_params
        return ResourceQuery(
            course=p.get("course") or None,
            branch=p.get("branch") or None,
            semester=p.get("semester") or None,
            resource_type=p.get("type") or None,
            year=p.get("year") or None,
            privacy=p.get("privacy") or None,
            search=p.get("search") or None,
        )

    @swagger_auto_schema(manual_parameters=_LIST_PARAMS)
    def list(self, request):
        resources = list_resources(DjangoUnitOfWork(), viewer_from_request(request), self._query_from_params())
        # 가시성 필터 후 페이지네이션 (정렬: created_at 내림차순 고정)
        page = self.paginate_queryset(resources)
        if page is not None:
            return self.get_paginated_response(ResourceSerializer(page, many=True).data)
        return Response(ResourceSerializer(resources, many=True).data)

    def retrieve(self, request, pk=None):
        resource = get_resource(DjangoUnitOfWork(), viewer_from_request(request), int(pk))
        return Response(ResourceSerializer(resource).data)

    @swagger_auto_schema(request_body=ResourceInputSerializer)
    def create(self, request):
        serializer = ResourceInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        created = create_resource(DjangoUnitOfWork(), viewer_from_request(request), dict(serializer.validated_data))
        return Response(
            {
                "resource": ResourceSerializer(created.resource).data,
                "points_awarded": created.points_awarded,
            },
            status=status.HTTP_201_CREATED,
        )

    @swagger_auto_schema(request_body=ResourceInputSerializer)
    def partial_update(self, request, pk=None):
        return self._update(request, pk)

    @swagger_auto_schema(request_body=ResourceInputSerializer)
    def update(self, request, pk=None):
        # PUT 도 부분 수정으로 처리 (원래 API 계약)
        return self._update(request, pk)

    def _update(self, request, pk):
        serializer = ResourceInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        resource = update_resource(
            DjangoUnitOfWork(),
            viewer_from_request(request),
            int(pk),
            dict(serializer.validated_data),
        )
        return Response(ResourceSerializer(resource).data)

    def destroy(self, request, pk=None):
        delete_resource(DjangoUnitOfWork(), viewer_from_request(request), int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
