from typing import Iterator, Tuple
import json


def is_json(file_path: str) -> bool:
    try:
        with open(file_path, 'r', encoding='utf-8') as data_file:
            json.load(data_file)
            return True
    except (json.JSONDecodeError, UnicodeDecodeError):
        return False


def remove_comment(line: str) -> str:
    comment = line.find('#')
    if comment != -1:
        line = line[:comment]
    return line.strip()


def read_lines(file_path: str) -> Iterator[Tuple[int, str]]:
    """non-empty lines of a file with comments removed, with 1-based line numbers."""
    with open(file_path, encoding='utf-8') as f:
        for line_number, line in enumerate(f, 1):
            line = remove_comment(line)
            if len(line) > 0:
                yield line_number, line

