"""TsengCoin desktop shell — Entry Point"""

import sys
import os
sys.path.insert(0, os.path.dirname(__file__))

from ui.app_runtime import run_gui_app


def main():
    return run_gui_app()


if __name__ == "__main__":
    sys.exit(main())
