import io

import pytest
from rich.console import Console

from helpers import FakeRunner
from kp.config import KpConfig
from kp.utils.terminal import HighlightMode
from kp.workflow import Workflow


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def out():
    return Console(file=io.StringIO(), soft_wrap=True)


@pytest.fixture
def workflow(tmp_path, runner, out):
    return Workflow(
        KpConfig(),
        tmp_path,
        HighlightMode.NONE,
        runner=runner,
        out=out,
        windows=False,
    )
