# deepcompare/report/formatter.py
# Version: 1.0.0
# Text rendering of discrepancy lists.
#
# Pure function of its inputs. No I/O. No logging.
#
# Standard import pattern:
#   from deepcompare.report.formatter import format_discrepancies

from __future__ import annotations

from typing import Iterable, List, Optional

from deepcompare.data_models.config import ComparisonConfig
from deepcompare.data_models.discrepancy import Discrepancy


_EMPTY_REPORT: str = "No discrepancies."
_INDENT:       str = "  "


def format_discrepancies(
    discrepancies: Iterable[Discrepancy],
    config: Optional[ComparisonConfig] = None,
) -> str:
    """
    Render one line per discrepancy:

        <path>: <kind> -- <message> (<label_a>=<repr>, <label_b>=<repr>)

    Labels come from each record unless config is given, in which case its
    names override the recorded ones. Returns "No discrepancies." for an
    empty input.
    """
    lines: List[str] = []
    for d in discrepancies:
        label_a = config.name_a if config is not None else d.label_a
        label_b = config.name_b if config is not None else d.label_b
        head = f"{d.path}: {d.kind.value}"
        if d.message:
            head += f" -- {d.message}"
        lines.append(f"{_INDENT}{head} ({label_a}={d.value_a!r}, {label_b}={d.value_b!r})")

    if not lines:
        return _EMPTY_REPORT
    return "\n".join(lines)
