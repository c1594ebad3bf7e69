from pathlib import Path

import pytest

from fmixml import parse_model_description

files_directory = Path(__file__).parent / 'files'
xml_directory = files_directory / 'XML'

@pytest.fixture(scope="session")
def xml_dir():
    """Directory holding the modelDescription.xml test files."""
    return xml_directory

@pytest.fixture(scope="session")
def bouncing_ball():
    """The parsed BouncingBall test file, loaded once per session."""
    return parse_model_description(xml_directory / 'BouncingBall.xml')
