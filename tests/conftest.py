import pytest

from shared.logger import TeaLogger
from teacodec.core.engine import TeaCodec


@pytest.fixture
def quiet_logger():
    return TeaLogger("tests", log_level="DEBUG", console_output=False)


@pytest.fixture
def codec(quiet_logger):
    return TeaCodec(logger=quiet_logger)
