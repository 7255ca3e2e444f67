import io

import pytest
from rich.console import Console

from create_discord_bot.config import load_tool_config
from create_discord_bot.steps.executor import StepExecutor
from helpers import FakeProber, FakeRunner


@pytest.fixture
def tool_config():
    return load_tool_config()


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def prober():
    return FakeProber()


@pytest.fixture
def executor(tool_config, console, runner, prober):
    return StepExecutor(config=tool_config, console=console, runner=runner, prober=prober)
