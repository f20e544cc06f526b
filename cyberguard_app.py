import logging

import config
from dashboard.ui import run_dashboard

logging.basicConfig(level=config.LOG_LEVEL, format='%(levelname)s: %(message)s')


if __name__ == "__main__":
    run_dashboard()
