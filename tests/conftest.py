#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from byteunit.quantity import Bit, Bit128, Byte, Byte128

SAMPLE_VALUES = [0, 1, 7, 999, 1000, 1023, 1024, 1500, 15000, 1500000, 50840000, 3 * 1024 ** 3, 123456789]


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(params=[Byte, Bit, Byte128, Bit128], ids=["Byte", "Bit", "Byte128", "Bit128"])
def quantity_cls(request):
    """Each concrete quantity class."""
    return request.param


@pytest.fixture(params=SAMPLE_VALUES, ids=[f"v{v}" for v in SAMPLE_VALUES])
def sample_value(request) -> int:
    """Base-unit counts covering zero, unit thresholds and uneven values."""
    return request.param


@pytest.fixture
def parse_any():
    """Parse text with the class-appropriate parse signature."""

    def _parse(cls, text: str, case_sensitive: bool = True):
        if cls.category == "bit":
            return cls.parse(text)
        return cls.parse(text, case_sensitive=case_sensitive)

    return _parse
