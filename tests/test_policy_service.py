import pytest

from app.core.policy_model import Policy
from app.core.result import ErrorKind
from conftest import ALICE, BOB


def _create(policies, caller=ALICE, **overrides):
    args = {
        "coverage_amount": 1000,
        "premium": 50,
        "duration": 30,
        "trigger_condition": "temperature",
        "trigger_value": 35,
    }
    args.update(overrides)
    return policies.create_policy(caller, **args)


def test_create_policy_stores_record(policies):
    result = _create(policies)
    assert result.is_ok
    assert result.value == 1

    policy = policies.get_policy(1).value
    assert isinstance(policy, Policy)
    assert policy.policyholder == ALICE
    assert policy.coverage_amount == 1000
    assert policy.premium == 50
    assert policy.start_time == 100
    assert policy.end_time == 130
    assert policy.trigger_condition == "temperature"
    assert policy.trigger_value == 35
    assert policy.is_active is True


def test_policy_ids_increase_from_one(policies):
    ids = [_create(policies, caller=c).value for c in (ALICE, BOB, ALICE, BOB)]
    assert ids == [1, 2, 3, 4]
    assert policies.last_policy_id == 4
    assert policies.get_policy(2).value.policyholder == BOB


def test_negative_trigger_value_is_allowed(policies):
    policy_id = _create(policies, trigger_value=-15).value
    assert policies.get_policy(policy_id).value.trigger_value == -15


def test_cancel_policy_by_holder(policies):
    _create(policies)
    result = policies.cancel_policy(ALICE, 1)
    assert result.is_ok
    assert result.value is True
    assert policies.get_policy(1).value.is_active is False


def test_cancel_policy_twice_is_unauthorized(policies):
    _create(policies)
    policies.cancel_policy(ALICE, 1)
    result = policies.cancel_policy(ALICE, 1)
    assert not result.is_ok
    assert result.error == "unauthorized"
    assert policies.get_policy(1).value.is_active is False


def test_cancel_foreign_policy_is_unauthorized(policies):
    _create(policies)
    result = policies.cancel_policy(BOB, 1)
    assert result.kind is ErrorKind.UNAUTHORIZED
    assert policies.get_policy(1).value.is_active is True


def test_cancel_unknown_policy_is_unauthorized(policies):
    assert policies.cancel_policy(ALICE, 999).kind is ErrorKind.UNAUTHORIZED


def test_get_unknown_policy_is_not_found(policies):
    result = policies.get_policy(999)
    assert not result.is_ok
    assert result.error == "not-found"


def test_policy_snapshot_is_immutable(policies):
    _create(policies)
    policy = policies.get_policy(1).value
    with pytest.raises(AttributeError):
        policy.is_active = False  # type: ignore[misc]
    assert policies.get_policy(1).value.is_active is True


@pytest.mark.parametrize(
    "overrides",
    [
        {"coverage_amount": -1},
        {"premium": 1.5},
        {"duration": True},
        {"trigger_condition": "   "},
        {"trigger_value": 2**127},
    ],
)
def test_invalid_arguments_raise_without_side_effects(policies, overrides):
    with pytest.raises(ValueError):
        _create(policies, **overrides)
    assert policies.last_policy_id == 0
    assert len(policies) == 0
