"""Plain-text documentation of the variables a dataclass reads."""

from typing import List, Sequence

from .core.models import FieldInfo

HEADER = ("KEY", "TYPE", "DEFAULT", "REQUIRED", "DESCRIPTION")


def usage_rows(infos: Sequence[FieldInfo]) -> List[tuple]:
    return [
        (
            info.key,
            info.type_name,
            info.default or "",
            "true" if info.required else "",
            info.desc or "",
        )
        for info in infos
    ]


def render_usage(infos: Sequence[FieldInfo]) -> str:
    """Render one aligned line per field under a header line."""
    rows = [HEADER, *usage_rows(infos)]
    widths = [max(len(row[col]) for row in rows) for col in range(len(HEADER))]
    lines = [
        "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()
        for row in rows
    ]
    return "\n".join(lines) + "\n"
