# play.py

import argparse
from cardline import DisplayConfig, Interface


def main():
    parser = argparse.ArgumentParser(description="cardline table")
    parser.add_argument(
        "--tick", type=float, default=0.1, help="Seconds between ticks (default: 0.1)"
    )
    parser.add_argument(
        "--deal", type=int, default=12, help="Cards dealt per deal (default: 12)"
    )
    parser.add_argument(
        "--no-legend", action="store_true", help="Skip the key legend panel"
    )
    parser.add_argument(
        "--enable-logging", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--log-file", help='Log file path (use "-" for stderr)')

    args = parser.parse_args()

    config = DisplayConfig(
        tick_interval=args.tick,
        deal_count=args.deal,
        show_legend=not args.no_legend,
    )
    table = Interface(
        config=config,
        logging_enabled=args.enable_logging,
        log_file=args.log_file,
    )
    table.start()


if __name__ == "__main__":
    main()
