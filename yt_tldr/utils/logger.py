import os
import sys
import logging

from yt_tldr.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "logs")
loging_path = os.path.join(logging_dir, "yt_tldr.log")
if not os.path.exists(logging_dir):
    os.makedirs(logging_dir)

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=logging_str,
    handlers=[
        logging.FileHandler(loging_path),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('yt_tldr')
