# PATH: apps/domains/reviews/views.py

from rest_framework import status, viewsets
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema

from acadex.adapters.db.django.uow import DjangoUnitOfWork
from acadex.application.use_cases.sharing.reviews import (
    delete_review,
    list_reviews,
    submit_review,
    update_review,
)
from apps.core.identity import viewer_from_request

from .serializers import (
    RatingAggregateSerializer,
    ReviewCreateSerializer,
    ReviewSerializer,
    ReviewUpdateSerializer,
)


def _write_response(result, status_code=status.HTTP_200_OK):
    return Response(
        {
            "review": ReviewSerializer(result.review).data,
            "resource_rating": RatingAggregateSerializer(result.aggregate).data,
        },
        status=status_code,
    )


class ReviewViewSet(viewsets.GenericViewSet):
    """
    리뷰 CRUD. 1인 1자료 1리뷰.
    GET ?resource_id= 목록 / POST 작성 / PATCH·PUT 수정 / DELETE 삭제 (작성자 + 24시간)
    """
    serializer_class = ReviewSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = r"[0-9]+"

    @swagger_auto_schema(
        manual_parameters=[
            openapi.Parameter("resource_id", openapi.IN_QUERY, type=openapi.TYPE_INTEGER, required=True),
        ]
    )
    def list(self, request):
        raw = request.query_params.get("resource_id")
        try:
            resource_id = int(raw)
        except (TypeError, ValueError):
            raise ValidationError({"resource_id": "resource_id query parameter is required."})
        reviews = list_reviews(DjangoUnitOfWork(), viewer_from_request(request), resource_id)
        return Response({"reviews": ReviewSerializer(reviews, many=True).data})

    @swagger_auto_schema(request_body=ReviewCreateSerializer)
    def create(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = submit_review(
            DjangoUnitOfWork(),
            viewer_from_request(request),
            data["resource_id"],
            data["rating"],
            data.get("comment", ""),
        )
        return _write_response(result, status.HTTP_201_CREATED)

    @swagger_auto_schema(request_body=ReviewUpdateSerializer)
    def partial_update(self, request, pk=None):
        return self._update(request, pk)

    @swagger_auto_schema(request_body=ReviewUpdateSerializer)
    def update(self, request, pk=None):
        return self._update(request, pk)

    def _update(self, request, pk):
        serializer = ReviewUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        result = update_review(
            DjangoUnitOfWork(),
            viewer_from_request(request),
            int(pk),
            dict(serializer.validated_data),
        )
        return _write_response(result)

    def destroy(self, request, pk=None):
        aggregate = delete_review(DjangoUnitOfWork(), viewer_from_request(request), int(pk))
        return Response({"resource_rating": RatingAggregateSerializer(aggregate).data})
