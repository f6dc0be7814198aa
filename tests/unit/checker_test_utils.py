"""Helpers for mocking module nodes and verifying messages."""

import io
from unittest.mock import MagicMock


def create_mock_module(path: str, content: bytes) -> MagicMock:
    """A module node whose stream() yields content, as astroid's does."""
    node = MagicMock()
    node.file = path
    node.name = path.rsplit("/", 1)[-1].removesuffix(".py")
    node.stream.side_effect = lambda: io.BytesIO(content)
    return node


def _arg(c_args: tuple, c_kwargs: dict, pos: int, name: str) -> object:
    if len(c_args) > pos:
        return c_args[pos]
    return c_kwargs.get(name)


class CheckerTestCase:
    """Mixin for Checker tests. Assertions run on the linter mock."""

    def messages(self, checker) -> list[tuple[object, object, object, object]]:
        """(msg_id, line, col_offset, args) of every add_message call."""
        out = []
        for c_args, c_kwargs in checker.linter.add_message.call_args_list:
            out.append((
                _arg(c_args, c_kwargs, 0, "msgid"),
                _arg(c_args, c_kwargs, 1, "line"),
                _arg(c_args, c_kwargs, 5, "col_offset"),
                _arg(c_args, c_kwargs, 3, "args"),
            ))
        return out

    def assertAddsMessage(self, checker, msg_id, line=None, col_offset=None, args=None):
        """Verify that checker.add_message was called with these values."""
        for actual_id, actual_line, actual_col, actual_args in self.messages(checker):
            if actual_id != msg_id:
                continue
            if line is not None and actual_line != line:
                continue
            if col_offset is not None and actual_col != col_offset:
                continue
            if args is not None and actual_args != args:
                continue
            return
        raise AssertionError(f"Message {msg_id} not found in calls: {self.messages(checker)}")

    def assertNoMessages(self, checker):
        calls = checker.linter.add_message.call_args_list
        if calls:
            raise AssertionError(f"Expected no messages, got: {calls}")
