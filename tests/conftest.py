"""
Shared fixtures for the HexPy test suite.
"""

from typing import Callable, Iterable, List, Optional

import pytest

from hexpy.core.buffer import ByteBuffer
from hexpy.core.session import EditorSession


class ScriptedTokens:
    """Token provider replaying a fixed list of tokens, then None."""

    def __init__(self, tokens: Iterable[Optional[str]] = ()) -> None:
        self.tokens: List[Optional[str]] = list(tokens)
        self.reads = 0

    def push(self, *tokens: Optional[str]) -> None:
        self.tokens.extend(tokens)

    def next_token(self) -> Optional[str]:
        self.reads += 1
        if not self.tokens:
            return None
        return self.tokens.pop(0)


@pytest.fixture
def tokens() -> ScriptedTokens:
    return ScriptedTokens()


@pytest.fixture
def make_session() -> Callable[[bytes], EditorSession]:
    def _make(data: bytes = b'', filename: Optional[str] = None) -> EditorSession:
        return EditorSession(ByteBuffer(data, filename=filename))
    return _make
