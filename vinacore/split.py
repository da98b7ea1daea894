"""Split a multi-model PDBQT file into one file per model and part."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from vinacore.common import InternalError, starts_with
from vinacore.fileio import FileError, ParseError, PathLike, open_input, open_output

VERSION_STRING = "PDBQT Split 1.1.2 (May 11, 2011)"

_PDBQT_SUFFIX = ".pdbqt"

_DESCRIPTION = """\
Input:
  --input arg           input to split (PDBQT)

Output (optional) - defaults are chosen based on the input file name:
  --ligand arg          prefix for ligands
  --flex arg            prefix for side chains

Information (optional):
  --help                print this message
  --version             print program version
"""


class UsageError(RuntimeError):
    """The program was invoked incorrectly."""


@dataclass
class Model:
    """Lines of one model: the ligand part and the flexible residues."""

    ligand: list[str] = field(default_factory=list)
    flex: list[str] = field(default_factory=list)


def default_prefix(input_name: str, add: str) -> str:
    """Input name without a trailing '.pdbqt', followed by add."""
    if input_name.endswith(_PDBQT_SUFFIX):
        input_name = input_name[: -len(_PDBQT_SUFFIX)]
    return input_name + add


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_multimodel_pdbqt(path: PathLike) -> list[Model]:
    """Read MODEL/ENDMDL blocks, separating BEGIN_RES/END_RES sections as flex."""
    p = Path(path)
    with open_input(p) as source:
        lines = _split_lines(source.read())

    models: list[Model] = []
    parsing_model = False
    parsing_ligand = True
    for count, line in enumerate(lines, start=1):
        if starts_with(line, "MODEL"):
            if parsing_model or not parsing_ligand:
                raise ParseError(p, count, "Misplaced MODEL tag")
            models.append(Model())
            parsing_model = True
        elif starts_with(line, "ENDMDL"):
            if not parsing_model or not parsing_ligand:
                raise ParseError(p, count, "Misplaced ENDMDL tag")
            parsing_model = False
        elif starts_with(line, "BEGIN_RES"):
            if not parsing_model or not parsing_ligand:
                raise ParseError(p, count, "Misplaced BEGIN_RES tag")
            parsing_ligand = False
            models[-1].flex.append(line)
        elif starts_with(line, "END_RES"):
            if not parsing_model or parsing_ligand:
                raise ParseError(p, count, "Misplaced END_RES tag")
            parsing_ligand = True
            models[-1].flex.append(line)
        else:
            if not parsing_model:
                raise ParseError(p, count, "Input occurs outside MODEL")
            if parsing_ligand:
                models[-1].ligand.append(line)
            else:
                models[-1].flex.append(line)
    if parsing_model:
        raise ParseError(p, len(lines) + 1, "Missing ENDMDL tag")
    return models


def write_pdbqt(lines: Sequence[str], name: PathLike) -> None:
    """Write lines to name, one per line; nothing is created for no lines."""
    if not lines:
        return
    with open_output(name) as out:
        out.writelines(f"{line}\n" for line in lines)


def write_multimodel_pdbqt(models: Iterable[Model], ligand_prefix: str, flex_prefix: str) -> None:
    """Write each model to prefix + zero-padded model number + '.pdbqt'."""
    models = list(models)
    width = len(str(len(models)))
    for counter, model in enumerate(models, start=1):
        add = f"{counter:0{width}d}{_PDBQT_SUFFIX}"
        write_pdbqt(model.ligand, ligand_prefix + add)
        write_pdbqt(model.flex, flex_prefix + add)


class _CommandLineError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise _CommandLineError(message)


def _build_parser() -> _Parser:
    parser = _Parser(prog="split", add_help=False, allow_abbrev=False)
    parser.add_argument("--input", default=None)
    parser.add_argument("--ligand", default=None)
    parser.add_argument("--flex", default=None)
    parser.add_argument("--help", action="store_true")
    parser.add_argument("--version", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        try:
            args = _build_parser().parse_args(list(argv))
        except _CommandLineError as error:
            print(
                f"Command line parse error: {error}\n\nCorrect usage:\n{_DESCRIPTION}",
                file=sys.stderr,
            )
            return 1
        if args.help:
            print(_DESCRIPTION)
            return 0
        if args.version:
            print(VERSION_STRING)
            return 0
        if args.input is None:
            print(f"Missing input.\n\nCorrect usage:\n{_DESCRIPTION}", file=sys.stderr)
            return 1
        ligand_prefix = args.ligand
        if ligand_prefix is None:
            ligand_prefix = default_prefix(args.input, "_ligand_")
            print(f"Prefix for ligands will be {ligand_prefix}")
        flex_prefix = args.flex
        if flex_prefix is None:
            flex_prefix = default_prefix(args.input, "_flex_")
            print(f"Prefix for flexible side chains will be {flex_prefix}")
        models = parse_multimodel_pdbqt(args.input)
        write_multimodel_pdbqt(models, ligand_prefix, flex_prefix)
    except FileError as error:
        direction = "reading" if error.is_input else "writing"
        print(f'\n\nError: could not open "{error.name}" for {direction}.', file=sys.stderr)
        return 1
    except UsageError as error:
        print(f"\n\nUsage error: {error}.", file=sys.stderr)
        return 1
    except ParseError as error:
        print(
            f'\n\nParse error on line {error.line} in file "{error.file}" : {error.reason}',
            file=sys.stderr,
        )
        return 1
    except MemoryError:
        print("\n\nError: insufficient memory!", file=sys.stderr)
        return 1
    except OSError as error:
        print(f"\n\nFile system error: {error}", file=sys.stderr)
        return 1
    except InternalError as error:
        print(f"\n\nAn internal error occurred: {error}.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())