"""
Shared fixtures: a session wired to in-memory input and output.
"""

import io

import pytest

from shared.config import ForgeConfig
from shared.console import ForgeConsole
from shared.logger import ForgeLogger
from cipherforge.core.session import Session
from cipherforge.output.console import ForgeConsoleOutput
from cipherforge.parsers.line_source import LineSource


@pytest.fixture
def make_session():
    """Build ``(session, output)`` from scripted answers.

    ``answers`` is the full stdin transcript; other keyword arguments
    override ``[session]`` config values.
    """

    def factory(answers, registry=None, logger=None, **policy):
        out = io.StringIO()
        display = ForgeConsoleOutput(ForgeConsole(file=out, width=120))
        config = ForgeConfig()
        for name, value in policy.items():
            setattr(config.session, name, value)
        session = Session(
            source=LineSource(io.StringIO(answers)),
            display=display,
            registry=registry,
            config=config,
            logger=logger or ForgeLogger("test-session", console_output=False),
        )
        return session, out

    return factory
