"""자료 Use Case 테스트 (인메모리 UoW)."""

from datetime import timedelta
from decimal import Decimal

import pytest

from acadex.application.use_cases.sharing.profiles import update_profile
from acadex.application.use_cases.sharing.resources import (
    create_resource,
    delete_resource,
    get_resource,
    list_resources,
    update_resource,
)
from acadex.application.use_cases.sharing.requests import create_request, fulfill_request
from acadex.application.use_cases.sharing.reviews import submit_review
from acadex.domain.sharing.entities import ResourceQuery, Visibility
from acadex.domain.sharing.errors import (
    AccessDeniedError,
    LockExpiredError,
    NotFoundError,
    NotOwnerError,
    ValidationFailedError,
)


class TestCreateResource:

    def test_snapshots_college_and_awards_points(self, uow, alice):
        created = create_resource(
            uow, alice, {"title": "  DBMS notes ", "visibility": "private", "subject": "DBMS", "tags": ["sql"]}
        )
        resource = created.resource
        assert created.points_awarded == 5
        assert resource.title == "DBMS notes"
        assert resource.affiliation == "IIT Delhi"
        assert resource.owner_name == "Alice"
        assert (resource.rating_average, resource.rating_count) == (Decimal("0"), 0)
        assert resource.branch == "General"

    def test_public_awards_ten(self, uow, alice):
        assert create_resource(uow, alice, {"title": "t", "visibility": "public"}).points_awarded == 10

    def test_affiliation_is_snapshot(self, uow, alice, carol):
        resource = create_resource(uow, alice, {"title": "t", "visibility": "private"}).resource
        update_profile(uow, alice, {"college": "NIT Trichy"})

        assert get_resource(uow, alice, resource.id).affiliation == "IIT Delhi"
        # carol 과 같은 college 가 됐지만 자료 affiliation 은 그대로
        with pytest.raises(AccessDeniedError):
            get_resource(uow, carol, resource.id)

    @pytest.mark.parametrize("data", [{"visibility": "public"}, {"title": " ", "visibility": "public"}])
    def test_title_required(self, uow, alice, data):
        with pytest.raises(ValidationFailedError):
            create_resource(uow, alice, data)

    def test_bad_visibility(self, uow, alice):
        with pytest.raises(ValidationFailedError):
            create_resource(uow, alice, {"title": "t", "visibility": "friends"})

    def test_anonymous(self, uow):
        with pytest.raises(AccessDeniedError):
            create_resource(uow, None, {"title": "t", "visibility": "public"})


class TestGetAndListResources:

    def test_private_same_college_visible_other_denied(self, uow, alice, bob, carol):
        resource = create_resource(uow, alice, {"title": "t", "visibility": "private"}).resource
        assert get_resource(uow, bob, resource.id).id == resource.id
        with pytest.raises(AccessDeniedError):
            get_resource(uow, carol, resource.id)
        with pytest.raises(AccessDeniedError):
            get_resource(uow, None, resource.id)

    def test_missing_is_not_found(self, uow, bob):
        with pytest.raises(NotFoundError):
            get_resource(uow, bob, 404)

    def test_list_newest_first_then_visibility(self, uow, clock, alice, carol):
        first = create_resource(uow, alice, {"title": "first", "visibility": "public"}).resource
        clock.advance(timedelta(minutes=1))
        hidden = create_resource(uow, alice, {"title": "hidden", "visibility": "private"}).resource
        clock.advance(timedelta(minutes=1))
        third = create_resource(uow, carol, {"title": "third", "visibility": "private"}).resource

        assert [r.id for r in list_resources(uow, carol)] == [third.id, first.id]
        assert [r.id for r in list_resources(uow, alice)] == [hidden.id, first.id]
        assert [r.id for r in list_resources(uow, None)] == [first.id]

    def test_list_filters(self, uow, alice):
        create_resource(uow, alice, {"title": "Graphs", "visibility": "public", "course": "BTech", "semester": "4"})
        create_resource(uow, alice, {"title": "Trees", "visibility": "public", "course": "MCA", "semester": "4"})

        rows = list_resources(uow, None, ResourceQuery(course="BTech"))
        assert [r.title for r in rows] == ["Graphs"]
        rows = list_resources(uow, None, ResourceQuery(search="tree"))
        assert [r.title for r in rows] == ["Trees"]


class TestUpdateAndDeleteResource:

    def test_owner_updates_within_window(self, uow, clock, alice):
        resource = create_resource(uow, alice, {"title": "t", "visibility": "public"}).resource
        clock.advance(timedelta(hours=23, minutes=59, seconds=59))
        updated = update_resource(uow, alice, resource.id, {"visibility": "private", "title": "t2"}, clock=clock)
        assert updated.visibility == Visibility.PRIVATE
        assert updated.title == "t2"

    def test_update_strips_title(self, uow, clock, alice):
        resource = create_resource(uow, alice, {"title": "t", "visibility": "public"}).resource
        updated = update_resource(uow, alice, resource.id, {"title": "  Compiler notes  "}, clock=clock)
        assert updated.title == "Compiler notes"

    def test_update_blank_title_rejected(self, uow, clock, alice):
        resource = create_resource(uow, alice, {"title": "t", "visibility": "public"}).resource
        with pytest.raises(ValidationFailedError):
            update_resource(uow, alice, resource.id, {"title": "   "}, clock=clock)

    def test_rating_fields_not_editable(self, uow, clock, alice):
        resource = create_resource(uow, alice, {"title": "t", "visibility": "public"}).resource
        updated = update_resource(
            uow, alice, resource.id, {"rating_average": Decimal("5"), "rating_count": 9}, clock=clock
        )
        assert (updated.rating_average, updated.rating_count) == (Decimal("0"), 0)

    def test_edit_does_not_renew_window(self, uow, clock, alice):
        resource = create_resource(uow, alice, {"title": "t", "visibility": "public"}).resource
        clock.advance(timedelta(hours=20))
        update_resource(uow, alice, resource.id, {"title": "t2"}, clock=clock)
        clock.advance(timedelta(hours=4, seconds=1))
        with pytest.raises(LockExpiredError):
            update_resource(uow, alice, resource.id, {"title": "t3"}, clock=clock)

    def test_non_owner(self, uow, clock, alice, bob):
        resource = create_resource(uow, alice, {"title": "t", "visibility": "public"}).resource
        with pytest.raises(NotOwnerError):
            delete_resource(uow, bob, resource.id, clock=clock)

    def test_delete_cascades_reviews_and_unlinks_requests(self, uow, state, clock, alice, bob):
        resource = create_resource(uow, alice, {"title": "t", "visibility": "public"}).resource
        submit_review(uow, bob, resource.id, 4)
        request = create_request(uow, bob, {"title": "t", "subject": "s", "semester": "3"})
        fulfill_request(uow, alice, request.id, resource.id)

        delete_resource(uow, alice, resource.id, clock=clock)

        assert state.resources == {}
        assert state.reviews == {}
        assert state.requests[request.id].fulfilled_resource_id is None

    def test_delete_after_window(self, uow, clock, alice):
        resource = create_resource(uow, alice, {"title": "t", "visibility": "public"}).resource
        clock.advance(timedelta(hours=24, seconds=1))
        with pytest.raises(LockExpiredError):
            delete_resource(uow, alice, resource.id, clock=clock)
