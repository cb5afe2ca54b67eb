"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pandas as pd
import pytest


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def duplicate_headers() -> list[str]:
    """Header row with two duplicated names."""
    return ["Name", "Age", "Name", "City", "Age"]


@pytest.fixture
def sample_frame() -> pd.DataFrame:
    """Table with a duplicate header, a spaced header and date cells."""
    return pd.DataFrame(
        [
            ["Alice", "30", "Ally", "12-25-20"],
            ["Bob", "41", "Robert", "1/02/06 9:30"],
            ["Carol", "27", "Caz", "unknown"],
        ],
        columns=["Name", "Age", "Name", "Created At"],
    )


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """Write a CSV file with duplicate headers and date values."""
    path = tmp_path / "people.csv"
    path.write_text(
        "Name,Age,Name,Created At\n"
        "Alice,30,Ally,12-25-20\n"
        "Bob,41,Robert,1/02/06 9:30\n"
        "Carol,27,Caz,unknown\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def colliding_csv(tmp_path: Path) -> Path:
    """CSV whose renamed header collides with a literal one."""
    path = tmp_path / "colliding.csv"
    path.write_text("Name,Name,Name_2\na,b,c\n", encoding="utf-8")
    return path
