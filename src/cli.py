#!/usr/bin/env python3
import argparse
import sys
import os
from typing import Optional, List, TextIO

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


class ANSIColors:
    RESET = '\033[0m'
    RED = '\033[31m'

    @classmethod
    def disable(cls):
        cls.RESET = ''
        cls.RED = ''


class ColorPrinter:
    def __init__(self, use_color: bool = True, output: TextIO = sys.stdout):
        self.use_color = use_color
        self.output = output
        if not use_color:
            ANSIColors.disable()

    def print(self, text: str, end: str = '\n'):
        self.output.write(text + end)

    def print_error(self, text: str):
        sys.stderr.write(f"{ANSIColors.RED}Error: {text}{ANSIColors.RESET}\n")


class CLIApplication:
    def __init__(self):
        self.parser = self._create_parser()
        self.printer: Optional[ColorPrinter] = None

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='bytediff',
            description='Compute the shortest byte-level edit script between two files',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog='''
Examples:
  %(prog)s old.bin new.bin
  %(prog)s -p old.bin new.bin
  %(prog)s -f json --verify old.bin new.bin
  %(prog)s -q old.bin new.bin
            '''
        )
        parser.add_argument('file1', help='Source file')
        parser.add_argument('file2', help='Target file')
        parser.add_argument(
            '-p', '--packed',
            action='store_true',
            help='Print run-length packed operations'
        )
        parser.add_argument(
            '-f', '--format',
            choices=['text', 'json'],
            default='text',
            help='Output format (default: text)'
        )
        parser.add_argument(
            '-q', '--quiet',
            action='store_true',
            help='Report only whether files differ'
        )
        parser.add_argument(
            '--verify',
            action='store_true',
            help='Apply the script to FILE1 and check it reproduces FILE2'
        )
        parser.add_argument(
            '--no-chars',
            action='store_true',
            help='Omit inserted bytes from text output'
        )
        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored output'
        )
        parser.add_argument(
            '-o', '--output',
            type=str,
            metavar='FILE',
            help='Write output to file'
        )
        parser.add_argument(
            '-v', '--version',
            action='version',
            version='%(prog)s 1.0.0'
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        args = self.parser.parse_args(argv)
        use_color = not args.no_color and sys.stdout.isatty()
        output_file = None
        if args.output:
            try:
                output_file = open(args.output, 'w', encoding='utf-8')
            except OSError as e:
                ColorPrinter(use_color=False).print_error(f"Cannot open output file: {e}")
                return 2
            self.printer = ColorPrinter(use_color=False, output=output_file)
        else:
            self.printer = ColorPrinter(use_color=use_color)
        try:
            result = self._execute(args)
        except KeyboardInterrupt:
            self.printer.print_error("Interrupted")
            result = 130
        except Exception as e:
            self.printer.print_error(str(e))
            result = 2
        finally:
            if output_file is not None:
                output_file.close()
        return result

    def _execute(self, args) -> int:
        file1 = args.file1
        file2 = args.file2
        for path in (file1, file2):
            if not os.path.exists(path):
                self.printer.print_error(f"File not found: {path}")
                return 2
            if os.path.isdir(path):
                self.printer.print_error(f"Is a directory: {path}")
                return 2
        return self._compare_files(args, file1, file2)

    def _compare_files(self, args, file1: str, file2: str) -> int:
        from bytediff.myers import diff, apply
        from bytediff.packing import pack, packed_apply
        from formatters import FormatterConfig, create_formatter
        try:
            with open(file1, 'rb') as f:
                data1 = f.read()
            with open(file2, 'rb') as f:
                data2 = f.read()
        except OSError as e:
            self.printer.print_error(f"Error reading files: {e}")
            return 2
        with diff(data1, data2) as script:
            has_changes = len(script) > 0
            if args.quiet:
                if has_changes:
                    self.printer.print(f"Files {file1} and {file2} differ")
                return 1 if has_changes else 0
            with pack(script) as packed:
                if args.verify:
                    rebuilt = packed_apply(data1, packed) if args.packed else apply(data1, script)
                    if rebuilt != data2:
                        self.printer.print_error(f"Script does not reproduce {file2}")
                        return 2
                if not has_changes and args.format == 'text':
                    return 0
                config = FormatterConfig(use_color=self.printer.use_color, show_chars=not args.no_chars)
                if args.format == 'json':
                    formatter = create_formatter('json', config)
                elif args.packed:
                    formatter = create_formatter('packed', config)
                else:
                    formatter = create_formatter('simple', config)
                output = formatter.format(packed if args.packed else script, file1, file2)
                self.printer.print(output, end='' if output.endswith('\n') else '\n')
        return 1 if has_changes else 0


def main(argv: Optional[List[str]] = None) -> int:
    app = CLIApplication()
    return app.run(argv)


if __name__ == '__main__':
    sys.exit(main())
