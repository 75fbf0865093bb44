# main.py
import argparse
import logging
import os
import sys
from typing import List, Optional

from utils.crashlog import set_log_dir, setup_crashlog, log_exception, log_dir
from config import AppConfig, ChartConfig
from chart.writer import write_chart, write_diagnostics
from midi.parser import ConversionError
from pipeline import convert_file

log = logging.getLogger("midi2chart")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def _init_logging(level: str = "INFO"):
    if logging.getLogger().handlers:
        return

    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    try:
        from logging.handlers import RotatingFileHandler
        fh = RotatingFileHandler(os.path.join(log_dir(), "midi2chart.log"),
                                 maxBytes=2*1024*1024, backupCount=3, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(fh)
    except OSError as e:
        # 只剩 console 也能繼續
        logging.getLogger().warning("file logging disabled: %s", e)

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="midi2chart", description="Convert a charting MIDI file to a bestdori chart.")
    ap.add_argument('input', help="MIDI file")
    ap.add_argument('-o', '--output', default='output.json', help="chart JSON path, '-' for stdout")
    ap.add_argument('--bpm', type=float, default=ChartConfig.bpm)
    ap.add_argument('--offset-steps', type=int, default=ChartConfig.offset_steps)
    ap.add_argument('--steps-per-beat', type=int, default=ChartConfig.steps_per_beat)
    ap.add_argument('--diagnostics', metavar='PATH', help="also write diagnostics as JSON")
    ap.add_argument('--strict', action='store_true', help="exit with status 2 if anything was reported")
    ap.add_argument('--log-level', default='INFO', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    ap.add_argument('--log-dir', default=None)
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.bpm <= 0:
        ap.error("--bpm must be positive")
    if args.steps_per_beat <= 0:
        ap.error("--steps-per-beat must be positive")

    set_log_dir(args.log_dir)
    _init_logging(args.log_level)
    log.info("converting %s", args.input)

    cfg = AppConfig(
        chart=ChartConfig(bpm=args.bpm, offset_steps=args.offset_steps, steps_per_beat=args.steps_per_beat),
    )
    try:
        result = convert_file(args.input, cfg)
        write_chart(result.commands, args.output, cfg.output)
        if args.diagnostics:
            write_diagnostics(result.diagnostics, args.diagnostics)
    except (ConversionError, OSError) as e:
        report = None
        try:
            report = log_exception("convert", e)
        except Exception as report_err:
            log.warning("could not write error report: %s", report_err)
        if report:
            log.error("conversion failed: %s (details in %s)", e, report, exc_info=True)
        else:
            log.error("conversion failed: %s", e, exc_info=True)
        return 1

    log.info("wrote %d commands to %s (%d diagnostics, %d skipped events)",
             len(result.commands), args.output, len(result.diagnostics), result.skipped)
    if args.strict and result.diagnostics:
        return 2
    return 0

def run():
    setup_crashlog()
    sys.exit(main())

if __name__ == '__main__':
    run()
