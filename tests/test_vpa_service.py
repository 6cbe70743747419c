"""
Tests for the VPA registry: creation, uniqueness, listing, validation and
acting-address selection.
"""

import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest

from core.constants import BANK_SUFFIX, VERIFIED_DISPLAY_NAME
from core.models.entities import VPA
from utils.exceptions import (
    UnauthorizedException, VPAAlreadyExistsException, NoVPAException,
    DatabaseException, ValidationException, VPANotFoundException
)


class TestCreateVPA:

    def test_prefix_is_lowercased_and_suffixed(self, vpa_service, user_id):
        vpa = vpa_service.create_vpa(user_id, "John.Doe", "ACC1")

        assert vpa.address == f"john.doe{BANK_SUFFIX}"
        assert vpa.linked_account_ref == "ACC1"
        assert vpa.account_key == user_id
        assert vpa.is_default is True
        assert vpa.is_active is True
        assert vpa.vpa_id is not None
        assert vpa.created_at is not None

    def test_same_prefix_twice_already_exists(self, vpa_service, user_id):
        vpa_service.create_vpa(user_id, "alice", "ACC1")

        with pytest.raises(VPAAlreadyExistsException):
            vpa_service.create_vpa(user_id, "alice", "ACC2")

    def test_prefix_collision_is_case_insensitive_across_accounts(self, vpa_service):
        vpa_service.create_vpa(uuid.uuid4().hex, "Bob", "ACC1")

        with pytest.raises(VPAAlreadyExistsException):
            vpa_service.create_vpa(uuid.uuid4().hex, "bob", "ACC9")

    def test_inactive_address_can_be_reused(self, vpa_service, vpa_repo, user_id):
        vpa_repo.rows.append(VPA(vpa_id=99, account_key=user_id, address=f"carol{BANK_SUFFIX}", is_active=False))

        vpa = vpa_service.create_vpa(user_id, "carol", "ACC1")
        assert vpa.is_active

    def test_every_new_vpa_is_flagged_default(self, vpa_service, user_id):
        vpa_service.create_vpa(user_id, "first", "ACC1")
        vpa_service.create_vpa(user_id, "second", "ACC1")

        assert [v.is_default for v in vpa_service.get_vpas(user_id)] == [True, True]

    def test_malformed_user_is_unauthorized(self, vpa_service, vpa_repo):
        with pytest.raises(UnauthorizedException):
            vpa_service.create_vpa("bad-id", "dave", "ACC1")
        assert vpa_repo.rows == []

    def test_blank_prefix_rejected(self, vpa_service, user_id):
        with pytest.raises(ValidationException):
            vpa_service.create_vpa(user_id, "   ", "ACC1")

    def test_concurrent_creates_yield_exactly_one_winner(self, vpa_service):
        accounts = [uuid.uuid4().hex for _ in range(16)]

        def attempt(account):
            try:
                vpa_service.create_vpa(account, "shared", "ACC")
                return "ok"
            except VPAAlreadyExistsException:
                return "exists"

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(attempt, accounts))

        assert outcomes.count("ok") == 1
        assert outcomes.count("exists") == len(accounts) - 1


class TestListAndValidate:

    def test_lists_only_callers_vpas(self, vpa_service, user_id):
        other = uuid.uuid4().hex
        vpa_service.create_vpa(user_id, "mine", "ACC1")
        vpa_service.create_vpa(other, "theirs", "ACC2")

        assert [v.address for v in vpa_service.get_vpas(user_id)] == [f"mine{BANK_SUFFIX}"]

    def test_list_unauthorized(self, vpa_service):
        with pytest.raises(UnauthorizedException):
            vpa_service.get_vpas("0" * 31)

    def test_validate_known_address(self, vpa_service, user_id):
        vpa_service.create_vpa(user_id, "erin", "ACC1")

        result = vpa_service.validate_vpa(f"Erin{BANK_SUFFIX}")
        assert result.is_valid is True
        assert result.address == f"erin{BANK_SUFFIX}"
        assert result.display_name == VERIFIED_DISPLAY_NAME

    def test_validate_unknown_address_is_not_an_error(self, vpa_service):
        result = vpa_service.validate_vpa("nobody@bank")
        assert result.is_valid is False
        assert result.address == "nobody@bank"
        assert result.display_name == ""

    def test_get_active_vpa_miss_raises(self, vpa_service):
        with pytest.raises(VPANotFoundException):
            vpa_service.get_active_vpa("nobody@bank")

    def test_validate_inactive_address_is_invalid(self, vpa_service, vpa_repo, user_id):
        vpa_repo.rows.append(VPA(vpa_id=1, account_key=user_id, address="gone@bank", is_active=False))
        assert vpa_service.validate_vpa("gone@bank").is_valid is False


class TestActingAddress:

    def test_first_flagged_default_wins(self, vpa_service, vpa_repo, user_id):
        vpa_repo.rows.extend([
            VPA(vpa_id=1, account_key=user_id, address="a@bank", is_default=False),
            VPA(vpa_id=2, account_key=user_id, address="b@bank", is_default=True),
            VPA(vpa_id=3, account_key=user_id, address="c@bank", is_default=True),
        ])
        assert vpa_service.resolve_acting_address(user_id) == "b@bank"

    def test_falls_back_to_first_when_none_flagged(self, vpa_service, vpa_repo, user_id):
        vpa_repo.rows.extend([
            VPA(vpa_id=1, account_key=user_id, address="a@bank", is_default=False),
            VPA(vpa_id=2, account_key=user_id, address="b@bank", is_default=False),
        ])
        assert vpa_service.resolve_acting_address(user_id) == "a@bank"

    def test_no_vpa(self, vpa_service, user_id):
        with pytest.raises(NoVPAException):
            vpa_service.resolve_acting_address(user_id)

    def test_storage_failure_is_not_reported_as_no_vpa(self, vpa_service, vpa_repo, user_id, monkeypatch):
        def broken(account_key):
            raise DatabaseException("connection lost")

        monkeypatch.setattr(vpa_repo, "find_by_account", broken)
        with pytest.raises(DatabaseException):
            vpa_service.resolve_acting_address(user_id)
