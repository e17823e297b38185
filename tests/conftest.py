import pytest

from ped_commitment import setup


@pytest.fixture(scope="session")
def params():
    """Initialize the commitment group (BN254 for speed)."""
    return setup('BN254')


@pytest.fixture(scope="session")
def group(params):
    return params['group']
