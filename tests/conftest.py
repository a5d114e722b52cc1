import pytest

from dummy_test_definitions import Identity, ObjectiveIsOutput, Polynomial


@pytest.fixture()
def polynomial() -> Polynomial:
    return Polynomial()


@pytest.fixture()
def identity() -> Identity:
    return Identity()


@pytest.fixture()
def problem() -> ObjectiveIsOutput:
    return ObjectiveIsOutput()
