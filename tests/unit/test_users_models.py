"""Tests for user resource models."""
import pytest

from reqrespy.core.exceptions import ReqresDecodeError
from reqrespy.core.users import UserRecord, UserPage, UserUpdate, decode_single


class TestUserRecord:
    """Test suite for UserRecord."""

    def test_from_dict(self, janet):
        user = UserRecord.from_dict(janet)

        assert user.id == 2
        assert user.first_name == 'Janet'
        assert user.last_name == 'Weaver'
        assert user.email == 'janet.weaver@reqres.in'
        assert user.avatar is None
        assert user.full_name == 'Janet Weaver'

    def test_keeps_avatar(self, janet):
        user = UserRecord.from_dict({**janet, 'avatar': 'https://reqres.in/img/faces/2-image.jpg'})

        assert user.avatar == 'https://reqres.in/img/faces/2-image.jpg'
        assert user.to_dict()['avatar'] == 'https://reqres.in/img/faces/2-image.jpg'

    @pytest.mark.parametrize('key', ['id', 'first_name', 'last_name', 'email'])
    def test_missing_field(self, janet, key):
        data = dict(janet)
        del data[key]

        with pytest.raises(ReqresDecodeError, match=key):
            UserRecord.from_dict(data)

    def test_rejects_bool_id(self, janet):
        with pytest.raises(ReqresDecodeError):
            UserRecord.from_dict({**janet, 'id': True})

    def test_rejects_non_object(self):
        with pytest.raises(ReqresDecodeError):
            UserRecord.from_dict(['id', 2])

    def test_str(self, janet):
        assert str(UserRecord.from_dict(janet)) == '#2 Janet Weaver <janet.weaver@reqres.in>'


class TestUserPage:
    """Test suite for UserPage."""

    def test_from_payload(self, users_page_payload):
        page = UserPage.from_payload(users_page_payload, 1)

        assert page.page == 1
        assert page.per_page == 6
        assert page.total == 12
        assert page.total_pages == 2
        assert len(page) == 2
        assert page.has_next is True

    def test_defaults_without_envelope(self, janet):
        page = UserPage.from_payload({'data': [janet]}, 3)

        assert page.page == 3
        assert page.per_page == 1
        assert page.total == 1
        assert page.total_pages == 1
        assert page.has_next is False

    def test_data_must_be_list(self):
        with pytest.raises(ReqresDecodeError):
            UserPage.from_payload({'data': {'id': 1}}, 1)

    def test_missing_data(self):
        with pytest.raises(ReqresDecodeError):
            UserPage.from_payload({'page': 1}, 1)


class TestUserUpdate:
    """Test suite for UserUpdate."""

    def test_key_order(self):
        update = UserUpdate.from_fields({'last_name': 'X', 'first_name': 'Bob'})

        assert list(update.to_dict()) == ['first_name', 'last_name']

    def test_passthrough(self):
        update = UserUpdate('Bob', 'X')

        assert UserUpdate.from_fields(update) is update

    def test_missing_key(self):
        with pytest.raises(ValueError, match='last_name'):
            UserUpdate.from_fields({'first_name': 'Bob'})

    def test_non_string(self):
        with pytest.raises(ValueError):
            UserUpdate.from_fields({'first_name': 'Bob', 'last_name': 7})


def test_decode_single(janet):
    assert decode_single({'data': janet}) == UserRecord.from_dict(janet)


def test_decode_single_without_data():
    with pytest.raises(ReqresDecodeError):
        decode_single({})
