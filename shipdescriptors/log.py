import logging
import os

ll = os.environ.get('SHIP_LOG_LEVEL', default='INFO').upper()

logging.basicConfig(
    level=getattr(logging, ll),
    format='%(asctime)s %(name)-15s: %(levelname)-8s %(message)s',
    datefmt='%H:%M:%S',
)
logger = logging.getLogger('shipdescriptors')

# Try and use colourful logs
try:
    import coloredlogs

    coloredlogs.install(level=getattr(logging, ll), logger=logger)
except ImportError:
    pass
