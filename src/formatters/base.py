from abc import ABC, abstractmethod
from typing import List, TextIO, Optional, Dict
from enum import Enum

from bytediff.utils import OpType, PackedDiff, PackedOperation, operations_of


class OutputTarget(Enum):
    FILE = "file"
    STRING = "string"


class FormatterConfig:
    def __init__(
        self,
        use_color: bool = True,
        show_chars: bool = True,
        encoding: str = "latin-1"
    ):
        self.use_color = use_color
        self.show_chars = show_chars
        self.encoding = encoding

    def copy(self) -> 'FormatterConfig':
        return FormatterConfig(
            use_color=self.use_color,
            show_chars=self.show_chars,
            encoding=self.encoding
        )

    def with_color(self, use_color: bool) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.use_color = use_color
        return cfg

    def with_chars(self, show_chars: bool) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.show_chars = show_chars
        return cfg


class ColorScheme:
    def __init__(self):
        self.reset = '\033[0m'
        self.bold = '\033[1m'
        self.red = '\033[31m'
        self.green = '\033[32m'

    def disable_colors(self):
        self.reset = ''
        self.bold = ''
        self.red = ''
        self.green = ''

    @classmethod
    def no_color(cls) -> 'ColorScheme':
        scheme = cls()
        scheme.disable_colors()
        return scheme


class OutputWriter:
    def __init__(self, target: OutputTarget = OutputTarget.STRING, output: Optional[TextIO] = None):
        self.target = target
        self._output = output
        self._buffer: List[str] = []

    def write(self, text: str):
        if self.target == OutputTarget.STRING:
            self._buffer.append(text)
        else:
            self._output.write(text)

    def writeln(self, text: str = ""):
        self.write(text + "\n")

    def get_output(self) -> str:
        return "".join(self._buffer)

    def flush(self):
        if self.target != OutputTarget.STRING:
            self._output.flush()


class BaseFormatter(ABC):
    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()
        self.colors = ColorScheme() if self.config.use_color else ColorScheme.no_color()
        self.writer: Optional[OutputWriter] = None
        self.packed = False

    def format(self, script, file1: str, file2: str, output: Optional[TextIO] = None) -> str:
        if output is None:
            self.writer = OutputWriter(OutputTarget.STRING)
        else:
            self.writer = OutputWriter(OutputTarget.FILE, output)
        operations = operations_of(script)
        # an empty PackedDiff is still packed
        self.packed = isinstance(script, PackedDiff) or any(
            isinstance(a, PackedOperation) for a in operations)
        self._format_impl(operations, file1, file2)
        if output is None:
            return self.writer.get_output()
        self.writer.flush()
        return ""

    @abstractmethod
    def _format_impl(self, operations: list, file1: str, file2: str):
        pass

    def render_bytes(self, data: bytes) -> str:
        return repr(data.decode(self.config.encoding, errors="replace"))

    def _write(self, text: str):
        if self.writer:
            self.writer.write(text)

    def _writeln(self, text: str = ""):
        if self.writer:
            self.writer.writeln(text)


class SimpleFormatter(BaseFormatter):
    """One line per single-byte operation: ``-pos`` or ``+pos 'c'``."""

    def _format_impl(self, operations: list, file1: str, file2: str):
        for action in operations:
            if action.op == OpType.DELETE:
                self._writeln(f"{self.colors.red}-{action.pos}{self.colors.reset}")
            elif action.op == OpType.INSERT:
                line = f"+{action.pos}"
                if self.config.show_chars:
                    line += f" {self.render_bytes(bytes([action.char]))}"
                self._writeln(f"{self.colors.green}{line}{self.colors.reset}")


class FormatterFactory:
    _formatters: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str, formatter_class: type):
        cls._formatters[name] = formatter_class

    @classmethod
    def create(cls, name: str, config: Optional[FormatterConfig] = None) -> BaseFormatter:
        if name not in cls._formatters:
            raise ValueError(f"Unknown formatter: {name}")
        return cls._formatters[name](config)

    @classmethod
    def available(cls) -> List[str]:
        return list(cls._formatters.keys())


FormatterFactory.register("simple", SimpleFormatter)
