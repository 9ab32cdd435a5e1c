# PATH: apps/domains/leaderboard/views.py

from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from acadex.adapters.db.django.uow import DjangoUnitOfWork
from acadex.application.use_cases.sharing.leaderboard import get_leaderboard

from .serializers import LeaderboardEntrySerializer


class LeaderboardView(APIView):
    """
    기여 점수 순위. 저장값 없이 조회 시점 계산.
    public 자료 10점, private 자료 5점. 동점은 id 오름차순.
    """
    permission_classes = [AllowAny]

    @swagger_auto_schema(responses={200: LeaderboardEntrySerializer(many=True)})
    def get(self, request):
        entries = get_leaderboard(DjangoUnitOfWork())
        rows = [{"rank": i, "entry": e} for i, e in enumerate(entries, start=1)]
        return Response({"leaderboard": LeaderboardEntrySerializer(rows, many=True).data})
