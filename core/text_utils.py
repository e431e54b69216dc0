import re
import unicodedata


def _fold(s: str) -> str:
    s = ''.join(c for c in unicodedata.normalize('NFD', s) if unicodedata.category(c) != 'Mn')
    return s.lower().strip()


def _safe_name(s: str) -> str:
    s = re.sub(r"[^\w\- ]+", "", s, flags=re.U)
    return s.strip().replace(" ", "_")[:60]


def append_completion(current: str, completion: str) -> str:
    """Character completion is appended, never substituted: one space between the two."""
    return f"{current} {completion}"


def prompt_filename(project_name: str, scene_number: int) -> str:
    """File name for the generated prompt download, e.g. 'my_project_scene_02.txt'."""
    base = _safe_name(_fold(project_name)) or "prompt"
    return f"{base}_scene_{scene_number:02d}.txt"
