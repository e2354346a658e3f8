"""config_loading.py"""
import sys

from cmdmap.config import loader
from cmdmap.utils import setup_logging

if __name__ == "__main__":
    setup_logging()
    env = loader("cmdmap.yaml")
    sys.exit(env.forward_matched_command())
