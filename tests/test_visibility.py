"""가시성 정책 단위 테스트."""

import pytest

from acadex.domain.sharing.entities import Resource, Viewer, Visibility
from acadex.domain.sharing.visibility import can_view, filter_visible


def _resource(resource_id=1, owner_id=1, affiliation="X", visibility=Visibility.PRIVATE):
    return Resource(
        id=resource_id,
        owner_id=owner_id,
        affiliation=affiliation,
        visibility=visibility,
        title=f"Notes {resource_id}",
    )


class TestCanView:

    @pytest.mark.parametrize("viewer", [None, Viewer(id=2, affiliation="Y"), Viewer(id=3)])
    def test_public_visible_to_everyone(self, viewer):
        assert can_view(viewer, _resource(visibility=Visibility.PUBLIC)) is True

    def test_private_hidden_from_anonymous(self):
        assert can_view(None, _resource()) is False

    def test_private_visible_to_owner_even_after_college_change(self):
        owner = Viewer(id=1, affiliation="Z")
        assert can_view(owner, _resource(owner_id=1, affiliation="X")) is True

    def test_private_same_college(self):
        """A(X) 소유 private: B(X) 는 보임, C(Y) 는 안 보임."""
        resource = _resource(owner_id=1, affiliation="X")
        assert can_view(Viewer(id=2, affiliation="X"), resource) is True
        assert can_view(Viewer(id=3, affiliation="Y"), resource) is False

    def test_viewer_without_affiliation_sees_only_own_private(self):
        resource = _resource(owner_id=1, affiliation="X")
        assert can_view(Viewer(id=2, affiliation=None), resource) is False
        assert can_view(Viewer(id=1, affiliation=None), resource) is True


class TestFilterVisible:

    def test_keeps_order_and_drops_hidden(self):
        resources = [
            _resource(3, owner_id=9, affiliation="Y"),
            _resource(2, visibility=Visibility.PUBLIC),
            _resource(1, owner_id=9, affiliation="X"),
        ]
        visible = filter_visible(Viewer(id=5, affiliation="X"), resources)
        assert [r.id for r in visible] == [2, 1]

    def test_anonymous_gets_public_only(self):
        resources = [_resource(1), _resource(2, visibility=Visibility.PUBLIC)]
        assert [r.id for r in filter_visible(None, resources)] == [2]
