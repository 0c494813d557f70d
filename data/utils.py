import json
from pathlib import Path
from typing import Any, Dict


def read_file_to_bytes(filepath: Path) -> bytes:
    with open(filepath, "rb") as f:
        return f.read()


def write_bytes_to_file(filepath: Path, data: bytes) -> None:
    with open(filepath, "wb") as f:
        f.write(data)


def write_json_file(filepath: Path, data: Dict[str, Any], indent: int = 4) -> None:
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)


def is_positive_int(value: Any) -> bool:
    # bool is an int subclass but never a valid setting
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def normalize_string(display_name: str) -> str:
    return display_name.lower().replace(" ", "_")
