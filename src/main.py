import sys

from config import configure_logging, load_config
from payments_engine import PaymentsEngine
from report import summarize, write_report


def main():
    config = load_config()
    configure_logging(config)

    if len(sys.argv) != 2:
        print("Usage: python main.py <input.csv>", file=sys.stderr)
        sys.exit(1)

    filepath = sys.argv[1]
    engine = PaymentsEngine()
    try:
        accounts = engine.process_file(filepath)
    except OSError as e:
        print(f"Error: could not open '{filepath}' ({e})", file=sys.stderr)
        sys.exit(1)

    write_report(summarize(accounts), sys.stdout)

    if config.report_stats:
        print(engine.stats, file=sys.stderr)


if __name__ == "__main__":
    main()
