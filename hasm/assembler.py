"""
Main Hack assembler.

Coordinates the first pass (labels), the second pass (encoding) and file I/O.
"""

import sys
from typing import Iterable, List, Optional

from .lexer import Preprocessor
from .hack import SymbolTable, Encoder


class HackAssembler:
    """Main assembler class. One instance may run many assemblies."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.warnings: List[str] = []
        self.symbols: Optional[SymbolTable] = None  # table of the last run

    def log(self, message: str):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            print(f"[hasm] {message}", file=sys.stderr)

    def warn(self, message: str):
        """Record an assembly warning."""
        self.warnings.append(message)
        if self.verbose:
            print(f"[hasm] Warning: {message}", file=sys.stderr)

    def get_warnings(self) -> List[str]:
        """Get all warnings generated during the last assembly."""
        return self.warnings.copy()

    def assemble_lines(self, lines: Iterable[str], filename: str = "<input>") -> List[str]:
        """
        Assemble source lines into binary words.

        Args:
            lines: Raw source lines
            filename: Name used in diagnostics

        Returns:
            One 16-character '0'/'1' string per instruction
        """
        self.warnings = []
        symbols = SymbolTable()
        self.symbols = symbols

        # Pass 1: labels must all be bound before any instruction is encoded
        instructions = Preprocessor(filename).process(lines, symbols)
        self.log(f"Pass 1: {len(instructions)} instructions, {len(symbols.labels)} labels")

        # Pass 2
        words = Encoder(symbols, filename).encode_all(instructions)
        self.log(f"Pass 2: {len(words)} words, {len(symbols.variables)} variables")

        self.check_labels(symbols, len(instructions))
        return words

    def assemble_string(self, source: str, filename: str = "<input>") -> str:
        """Assemble source text into newline-terminated output text."""
        words = self.assemble_lines(source.splitlines(), filename)
        return "".join(f"{word}\n" for word in words)

    def check_labels(self, symbols: SymbolTable, program_length: int):
        for name in symbols.unreferenced_labels():
            self.warn(f"Label '{name}' is never referenced")
        for name, address in symbols.labels.items():
            if address >= program_length:
                self.warn(f"Label '{name}' is past the end of the program (address {address})")

    def assemble_file(self, input_path: str, output_path: str) -> bool:
        """
        Assemble a source file into a .hack file.

        Nothing is written unless the whole program assembles.

        Args:
            input_path: Path to .asm source file
            output_path: Path to output file

        Returns:
            True if assembly succeeded, False otherwise
        """
        try:
            self.log(f"Reading {input_path}...")
            with open(input_path, 'r', encoding='utf-8-sig') as f:
                lines = f.read().splitlines()

            words = self.assemble_lines(lines, str(input_path))

            self.log(f"Writing {output_path}...")
            with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
                for word in words:
                    f.write(f"{word}\n")

            self.log(f"Assembly successful: {len(words)} words")
            return True

        except FileNotFoundError as e:
            print(f"Error: File not found: {e.filename}", file=sys.stderr)
            return False
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return False
        except SyntaxError as e:
            print(f"Syntax error: {e}", file=sys.stderr)
            return False
        except ValueError as e:
            print(f"Assembly error: {e}", file=sys.stderr)
            if self.verbose:
                import traceback
                traceback.print_exc()
            return False


def main(argv: Optional[List[str]] = None):
    """Command-line interface for the assembler."""
    import argparse

    parser = argparse.ArgumentParser(
        description='Hack Assembler - Translate Hack assembly into binary machine code'
    )
    parser.add_argument('input', help='Input .asm source file')
    parser.add_argument('output', help='Output .hack file')
    parser.add_argument('-s', '--symbols', action='store_true',
                       help='Print labels and variables after assembly')
    parser.add_argument('--verbose', action='store_true',
                       help='Verbose output')

    args = parser.parse_args(argv)

    assembler = HackAssembler(verbose=args.verbose)
    success = assembler.assemble_file(args.input, args.output)

    if success and args.symbols:
        print(assembler.symbols.dump(), file=sys.stderr)

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
