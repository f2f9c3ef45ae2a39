"""
# Provide &sysroute.harness.Test instances to the test subjects collected by pytest.
"""
import pytest

from sysroute import harness

@pytest.fixture
def test(request):
	t = harness.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
