#!/usr/bin/env python3
"""
Name: wordwrap
Description: wrap text so that no line exceeds a given width
License: perl
"""

import sys
import os
import argparse
import re
import fileinput

__all__ = [
    'InvalidArgument', 'split_words', 'wrap', 'wrap_lf',
    'wrap_unformatted', 'wrap_formatted', 'main',
]

# Only these four characters separate words; anything else is part of a word.
WHITESPACE = re.compile(r'[ \t\n\r]+')


class InvalidArgument(ValueError):
    """Raised when a wrapping function is called with a bad argument."""

    def __init__(self, argument: str, message: str):
        super().__init__(message)
        self.argument = argument


def validate(text: str, width: int):
    if text is None:
        raise InvalidArgument('text', "text must not be None")
    if width <= 0:
        raise InvalidArgument('width', f"width must be a positive integer, got {width}")


def split_words(text: str) -> list:
    """Splits text on runs of whitespace, dropping the empty fragments."""
    return [word for word in WHITESPACE.split(text) if word]


def chunks(text: str, width: int) -> list:
    return [text[i:i + width] for i in range(0, len(text), width)]


def fill(text: str, width: int, terminator: str) -> str:
    """
    Greedy line filling shared by wrap() and wrap_lf().

    Words are packed onto a line, one space apart, for as long as the line
    stays within width. A word longer than width is cut into width-sized
    pieces; every piece but the last becomes a line of its own, and the last
    starts the next line so that following words may still join it.
    The final line is not followed by a terminator.
    """
    validate(text, width)

    words = split_words(text)
    if not words:
        return ""

    output = []
    line = ""
    for word in words:
        if len(word) > width:
            if line:
                output.append(line + terminator)
            pieces = chunks(word, width)
            output.extend(piece + terminator for piece in pieces[:-1])
            line = pieces[-1]
        elif not line:
            line = word
        elif len(line) + 1 + len(word) <= width:
            line += " " + word
        else:
            output.append(line + terminator)
            line = word

    output.append(line)
    return "".join(output)


def cut(text: str, width: int, terminator: str) -> str:
    """
    Slices the whole text into width-sized pieces, whitespace included,
    and ends every piece (the last one too) with the terminator.
    """
    validate(text, width)
    return "".join(piece + terminator for piece in chunks(text, width))


def wrap(text: str, width: int) -> str:
    """Word-wraps text to width, ending lines with the platform terminator."""
    return fill(text, width, os.linesep)


def wrap_lf(text: str, width: int) -> str:
    """Word-wraps text to width, ending lines with a single line feed."""
    return fill(text, width, "\n")


def wrap_unformatted(text: str, width: int) -> str:
    return cut(text, width, os.linesep)


def wrap_formatted(text: str, width: int) -> str:
    return cut(text, width, "\n")


def preprocess_argv(args_list: list) -> list:
    """
    Translates the historical '-WIDTH' syntax to the standard '-w WIDTH'.
    For example, '-72' becomes ['-w', '72'].
    """
    processed_args = []
    for arg in args_list:
        match = re.match(r'^-(\d+)$', arg)
        if match:
            processed_args.extend(['-w', match.group(1)])
        else:
            processed_args.append(arg)
    return processed_args


def main():
    """Parses arguments, reads the input and prints it wrapped."""
    args_to_parse = preprocess_argv(sys.argv[1:])

    parser = argparse.ArgumentParser(
        description="Wrap text so that no line is longer than a given width.",
        usage="%(prog)s [-c] [-w width] [file ...]"
    )
    parser.add_argument(
        '-c', '--chars',
        action='store_true',
        help='Cut the input every WIDTH characters, ignoring whitespace.'
    )
    parser.add_argument(
        '-w', '--width',
        type=int,
        default=80,
        help='Use a maximum line width of WIDTH (default: 80).'
    )
    parser.add_argument(
        'files',
        nargs='*',
        help='Files to process. Reads from stdin if none are given.'
    )

    args = parser.parse_args(args_to_parse)
    program_name = os.path.basename(sys.argv[0])

    exit_status = 0
    try:
        # All inputs are wrapped as one text, so a paragraph may span files.
        with fileinput.input(files=args.files or ('-',)) as f:
            text = "".join(f)

        # stdout translates "\n" itself, so only the line feed variants are used here.
        if args.chars:
            sys.stdout.write(wrap_formatted(text, args.width))
        else:
            wrapped = wrap_lf(text, args.width)
            if wrapped:
                print(wrapped)

    except InvalidArgument as e:
        print(f"{program_name}: {e}", file=sys.stderr)
        exit_status = 1
    except FileNotFoundError as e:
        print(f"{program_name}: failed to open '{e.filename}': {e.strerror}", file=sys.stderr)
        exit_status = 1
    except IsADirectoryError as e:
        print(f"{program_name}: '{e.filename}': is a directory", file=sys.stderr)
        exit_status = 1

    sys.exit(exit_status)

if __name__ == "__main__":
    main()
