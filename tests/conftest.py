import pytest

from idscan.core.settings import get_settings

# Minimal header + five elements.
BASIC_PAYLOAD = (
    "@\n"
    "ANSI 636000090002DL00410288ZF03230090ZZ\n"
    "DCSDOE\n"
    "DACJOHN\n"
    "DAQ12345678\n"
    "DBB01012000\n"
    "DAJCA\n"
)

# Every mapped element, CRLF line endings, record-separator control chars
# and a space-padded postal code, as scanners hand them over.
FULL_PAYLOAD = (
    "@\r\n"
    "\x1e\r"
    "ANSI 636014040002DL00410278ZC03190008\r\n"
    "DAQD1234562\r\n"
    "DCSSAMPLE\r\n"
    "DACJOHN\r\n"
    "DADQUINCY\r\n"
    "DCUJR\r\n"
    "DBD08312019\r\n"
    "DBB01151990\r\n"
    "DBA01152027\r\n"
    "DBC1\r\n"
    "DAYBRO\r\n"
    "DAU070 IN\r\n"
    "DAG123 MAIN STREET\r\n"
    "DAHAPT 4\r\n"
    "DAISACRAMENTO\r\n"
    "DAJCA\r\n"
    "DAK958230000  \r\n"
    "DCAC\r\n"
    "DCBNONE\r\n"
    "DCDNONE\r\n"
    "\r"
)


@pytest.fixture
def basic_payload() -> str:
    return BASIC_PAYLOAD


@pytest.fixture
def full_payload() -> str:
    return FULL_PAYLOAD


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
