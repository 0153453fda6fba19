import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import legal_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from legal_toolkit.builder.layout import LayoutConfig


SAMPLE_CONTRACT = """DISCLAIMER: This template must be reviewed by a qualified lawyer in Pakistan before use.

RENT AGREEMENT

This Rent Agreement is made between Ali Khan (Landlord) and Sara Ahmed (Tenant).

1. DEFINITIONS
"Premises" means House 12, Street 4, Lahore.

2. RENT
The monthly rent shall be fifty thousand rupees, payable on the 1st of each month.

3. GOVERNING LAW
This Agreement shall be governed by the laws of Pakistan.
"""


# Common test fixtures
@pytest.fixture
def sample_contract() -> str:
    """Return a short generated rent agreement (6 clauses)."""
    return SAMPLE_CONTRACT


@pytest.fixture
def key_terms() -> str:
    return "rent 50000 monthly"


@pytest.fixture
def extra_notes() -> str:
    return "House 12 Street 4 Lahore"


@pytest.fixture
def stub_measure():
    """Deterministic width function: every character is half the font size wide."""
    def _measure(text: str, font_size: float, font_name: str) -> float:
        return len(text) * font_size * 0.5
    return _measure


@pytest.fixture
def small_config() -> LayoutConfig:
    """
    200x200 page, 20pt margins, so with stub_measure:
    - usable width 160 -> 32 body characters at size 10
    - first baseline 180, title block drops the cursor to 150
    - body runs advance 14, headings advance 18
    """
    return LayoutConfig(
        page_width=200,
        page_height=200,
        margin_top=20,
        margin_bottom=20,
        margin_left=20,
        margin_right=20,
        title_size=20,
        title_block_height=30,
        heading_size=14,
        heading_gap=4,
        heading_spacing=10,
        body_size=10,
        line_gap=4,
    )
