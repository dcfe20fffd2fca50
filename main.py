"""
F&O trade net-profit calculator - command-line entry point

Example:
    python main.py --instrument options --trade-type long \
        --entry 150 --exit 160 --quantity 1 --lot-size 50

Charge rates can be overridden through environment variables or a .env
file (see fno_calc.config.settings).
"""
import sys

from fno_calc.presentation.cli.calculator_runner import main


if __name__ == "__main__":
    sys.exit(main())
