"""Main entry point for running the receipt processor from a checkout"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from receipt_processor.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
