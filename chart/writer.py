# chart/writer.py
import json
import sys
from typing import Iterable, List, Optional

from chart.commands import ChartCommand
from config import OutputConfig
from notes.diagnostics import Diagnostic

def chart_to_json(commands: Iterable[ChartCommand], cfg: Optional[OutputConfig] = None) -> str:
    cfg = cfg or OutputConfig()
    return json.dumps([c.to_dict() for c in commands], ensure_ascii=cfg.ensure_ascii, indent=cfg.indent)

def write_chart(commands: List[ChartCommand], path: Optional[str], cfg: Optional[OutputConfig] = None):
    """Write the chart to `path`, or stdout when path is None or '-'."""
    text = chart_to_json(commands, cfg)
    if path is None or path == "-":
        sys.stdout.write(text + "\n")
        return
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)

def write_diagnostics(diagnostics: List[Diagnostic], path: str):
    with open(path, "w", encoding="utf-8") as f:
        json.dump([d.to_dict() for d in diagnostics], f, ensure_ascii=False, indent=2)
