"""자료 요청 상태 머신 / 프로필 / 리더보드 Use Case 테스트."""

import pytest

from acadex.application.use_cases.sharing.leaderboard import get_leaderboard
from acadex.application.use_cases.sharing.profiles import get_profile, update_profile
from acadex.application.use_cases.sharing.requests import create_request, fulfill_request, list_requests
from acadex.application.use_cases.sharing.resources import create_resource
from acadex.domain.sharing.entities import RequestStatus
from acadex.domain.sharing.errors import AccessDeniedError, NotFoundError, ValidationFailedError


@pytest.fixture
def open_request(uow, bob):
    return create_request(uow, bob, {"title": "CN PYQs", "subject": "Networks", "semester": "5"})


class TestResourceRequests:

    def test_created_open(self, open_request):
        assert open_request.status == RequestStatus.OPEN
        assert open_request.fulfilled_resource_id is None
        assert open_request.requester_name == "Bob"

    def test_missing_fields(self, uow, bob):
        with pytest.raises(ValidationFailedError):
            create_request(uow, bob, {"title": "x", "subject": ""})

    def test_any_viewer_fulfills_without_resource_check(self, uow, open_request, carol):
        fulfilled = fulfill_request(uow, carol, open_request.id, 12345)
        assert fulfilled.status == RequestStatus.FULFILLED
        assert fulfilled.fulfilled_resource_id == 12345

    def test_refulfill_overwrites_link(self, uow, open_request, alice):
        fulfill_request(uow, alice, open_request.id, 1)
        again = fulfill_request(uow, alice, open_request.id, "2")
        assert again.status == RequestStatus.FULFILLED
        assert again.fulfilled_resource_id == 2

    def test_missing_request(self, uow, alice):
        with pytest.raises(NotFoundError):
            fulfill_request(uow, alice, 99, 1)

    @pytest.mark.parametrize("resource_id", [None, "", "abc"])
    def test_bad_resource_id(self, uow, open_request, alice, resource_id):
        with pytest.raises(ValidationFailedError):
            fulfill_request(uow, alice, open_request.id, resource_id)

    def test_anonymous_cannot_fulfill(self, uow, open_request):
        with pytest.raises(AccessDeniedError):
            fulfill_request(uow, None, open_request.id, 1)

    def test_list_includes_fulfilled(self, uow, open_request, alice):
        fulfill_request(uow, alice, open_request.id, 1)
        assert [r.status for r in list_requests(uow)] == [RequestStatus.FULFILLED]


class TestProfiles:

    def test_get_own(self, uow, alice):
        assert get_profile(uow, alice).name == "Alice"

    def test_anonymous(self, uow):
        with pytest.raises(AccessDeniedError):
            get_profile(uow, None)

    def test_update_ignores_unknown_fields(self, uow, alice):
        profile = update_profile(uow, alice, {"branch": "ECE", "id": 77})
        assert profile.branch == "ECE"
        assert profile.id == alice.id

    def test_blank_college_rejected(self, uow, alice):
        with pytest.raises(ValidationFailedError):
            update_profile(uow, alice, {"college": "  "})


class TestLeaderboard:

    def test_points_and_zero_profiles(self, uow, alice, bob, carol):
        create_resource(uow, alice, {"title": "a", "visibility": "public"})
        create_resource(uow, alice, {"title": "b", "visibility": "private"})
        create_resource(uow, carol, {"title": "c", "visibility": "private"})

        entries = get_leaderboard(uow)
        assert [(e.name, e.points) for e in entries] == [("Alice", 15), ("Carol", 5), ("Bob", 0)]
