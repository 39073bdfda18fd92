import pytest

import hijrical
from hijrical.reference.ummalqura import index_from_month_starts


@pytest.fixture
def ramadan_1445():
    """
    Three Umm al-Qura months around Ramadan 1445:
    Chaabane from 2024-02-11 (29 days), Ramadan from 2024-03-11 (30 days),
    Chawwal from 2024-04-10 (29 days).
    """
    return index_from_month_starts(1445, 8, [2460352, 2460381, 2460411], end_jdn=2460440)


@pytest.fixture
def active_index(ramadan_1445):
    hijrical.set_index(ramadan_1445)
    yield ramadan_1445
    hijrical.set_index(None)
