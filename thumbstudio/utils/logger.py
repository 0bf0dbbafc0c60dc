import os
import sys
import logging

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), os.pardir, "logs")
logging_dir = os.path.normpath(logging_dir)
logging_path = os.path.join(logging_dir, "thumbstudio.log")
if not os.path.exists(logging_dir):
    os.makedirs(logging_dir)
logging.basicConfig(
    level=logging.INFO,
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('thumbstudio')
