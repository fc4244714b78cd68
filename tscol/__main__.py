"""CLI entry point: python -m tscol <command>"""

import argparse

from .config import DEFAULT_CHECKPOINT_INTERVAL

# columns: id, value, ts. The ts column is sorted.
RLE_SAMPLE = [
    (1, 100, "10:00:00"),
    (2, 200, "10:00:00"),
    (3, 300, "10:00:02"),
    (4, 400, "10:00:02"),
    (5, 500, "10:00:02"),
    (6, 600, "10:00:03"),
]

# Memory usage in bytes sampled every 2 seconds, starting around 10 GiB
DELTA_SAMPLE = [
    (1, 10737418240, 1000),
    (2, 10747914240, 1002),   # +10 MB
    (3, 10758390272, 1004),   # +10 MB
    (4, 10758390272, 1006),   # plateau
    (5, 10727939072, 1008),   # -29 MB
    (6, 10821304320, 1010),   # +88 MB spike
    (7, 10569646080, 1012),   # -252 MB drop
    (8, 10580344320, 1014),   # +10 MB
    (9, 10569646080, 1016),   # -10 MB
    (10, 10569646080, 1018),  # plateau
]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="tscol",
        description="Columnar time-series encoder demos",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- rle ---
    subparsers.add_parser("rle", help="Run-length encode a sorted timestamp column")

    # --- delta ---
    delta_parser = subparsers.add_parser(
        "delta", help="Delta encode a metric column with checkpoints",
    )
    delta_parser.add_argument("--checkpoint-interval", type=int,
                              default=DEFAULT_CHECKPOINT_INTERVAL,
                              help="Rows per checkpoint (default: 4)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "rle":
        _cmd_rle(args)
    elif args.command == "delta":
        if args.checkpoint_interval < 1:
            parser.error("--checkpoint-interval must be positive")
        _cmd_delta(args)
    return 0


def _cmd_rle(args):
    from .codec import RLEColumnEncoder, Row
    from .cli_formatting import (
        print_header, print_row_results, print_runs, print_ts_counts, print_ts_lookups,
    )

    encoder = RLEColumnEncoder()
    encoder.append_rows(Row(*fields) for fields in RLE_SAMPLE)

    print_header(f"RLE: {len(encoder)} rows in {len(encoder.runs)} runs")
    print_runs(encoder.runs)
    print_row_results({i: encoder.reconstruct_row(i) for i in (1, 7)})
    print_ts_lookups({
        i: (encoder.get_ts_from_row_id(i), encoder.get_ts_from_row_id_fast(i))
        for i in (1, 5, 6)
    })
    print_ts_counts({
        ts: (encoder.count_of_ts(ts), encoder.count_of_ts_fast(ts))
        for ts in ("10:00:00", "10:00:01")
    })


def _cmd_delta(args):
    from .codec import DeltaColumnEncoder, Row
    from .cli_formatting import print_compression_stats, print_header, print_row_results

    encoder = DeltaColumnEncoder(checkpoint_interval=args.checkpoint_interval)
    encoder.append_rows(Row(*fields) for fields in DELTA_SAMPLE)

    print_header(f"Delta: {len(encoder)} rows, "
                 f"{len(encoder.checkpoint_values)} checkpoints "
                 f"(every {encoder.checkpoint_interval} rows)")
    print_row_results({i: encoder.reconstruct_row(i) for i in (1, 3, 5, 10)})
    print_compression_stats(encoder.estimate_compression_stats(),
                            verified=encoder.verify_correctness())


if __name__ == "__main__":
    raise SystemExit(main())
