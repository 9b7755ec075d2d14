"""
Test configuration for the parametric insurance project.

Ensures the project root is on sys.path so tests can import `app.*` modules,
and provides fresh protocol components for every test.
"""
import os
import sys

import pytest


PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


from app.core.clock import FixedClock  # noqa: E402
from app.services.protocol import build_protocol  # noqa: E402


OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
ALICE = "ST2PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
BOB = "ST3PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"


@pytest.fixture
def clock():
    return FixedClock(100)


@pytest.fixture
def protocol(clock):
    return build_protocol(clock=clock, owner=OWNER, payout_amount=1000)


@pytest.fixture
def policies(protocol):
    return protocol.policies


@pytest.fixture
def oracle(protocol):
    return protocol.oracle


@pytest.fixture
def claims(protocol):
    return protocol.claims
