from formatters.base import BaseFormatter, FormatterFactory
from bytediff.utils import OpType


class PackedFormatter(BaseFormatter):
    """One line per run: ``-start,len`` for deletes, ``+start 'chars'`` for inserts."""

    def _format_impl(self, operations: list, file1: str, file2: str):
        if not operations:
            return
        self._writeln(f"{self.colors.bold}--- {file1}{self.colors.reset}")
        self._writeln(f"{self.colors.bold}+++ {file2}{self.colors.reset}")
        for action in operations:
            if action.op == OpType.DELETE:
                self._writeln(f"{self.colors.red}-{action.start_pos},{action.length}{self.colors.reset}")
            elif action.op == OpType.INSERT:
                line = f"+{action.start_pos},{action.length}"
                if self.config.show_chars:
                    line += f" {self.render_bytes(action.chars)}"
                self._writeln(f"{self.colors.green}{line}{self.colors.reset}")


FormatterFactory.register("packed", PackedFormatter)
