import pytest

from notes.tables import LookupTables


@pytest.fixture
def tables():
    return LookupTables()
